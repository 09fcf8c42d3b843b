"""
WSGI config for string_analyzer_service.

The string store lives in process memory, so run a single worker process
(threads are fine) to keep every request looking at the same store.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'string_analyzer_service.settings')

application = get_wsgi_application()
