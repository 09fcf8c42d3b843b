from rest_framework import status


class StringAnalyzerError(Exception):
    """Base class for errors raised by the string store and filters."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class StringAlreadyExists(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "String already exists."


class StringNotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "String not found."


class InvalidFilterError(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid filter."
