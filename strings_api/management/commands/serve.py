from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    help = "Starts the API on 0.0.0.0 and the port given by the PORT setting."

    default_addr = '0.0.0.0'

    @property
    def default_port(self):
        return str(settings.PORT)
