from fastapi import status


class StringAnalyzerError(Exception):
    """Base class for client errors raised while handling a request."""
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class MissingField(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid request body or missing '{field}' field")


class InvalidType(StringAnalyzerError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Invalid '{field}': {reason}")


class DuplicateValue(StringAnalyzerError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, value: str):
        self.value = value
        super().__init__("String already exists in the system")


class InvalidFilter(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, field: str, reason: str):
        self.field = field
        super().__init__(f"Invalid value for query parameter '{field}': {reason}")


class MissingQuery(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing 'query' parameter"


class Unparsable(StringAnalyzerError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, query: str):
        self.query = query
        super().__init__("Unable to parse natural language query")


class NotFound(StringAnalyzerError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, value: str):
        self.value = value
        super().__init__("String does not exist in the system")
