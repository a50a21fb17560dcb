"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class ServerConfig:
    """Server defaults, overridable through SERVER_HOST / SERVER_PORT"""

    HOST = "0.0.0.0"
    PORT = 8080
    API_PREFIX = "/api"
    SERVICE_NAME = "Delivery API"
    VERSION = "1.0.0"


class EntityNames:
    """Entity tags used in alert headers and error bodies"""

    DELIVERY = "delivery"


class ErrorKeys:
    """Error keys carried by bad-request alerts"""

    ID_EXISTS = "idexists"
    ID_NULL = "idnull"


class HeaderNames:
    """Response header names"""

    TOTAL_COUNT = "X-Total-Count"
    LINK = "Link"
    LOCATION = "Location"
    REQUEST_ID = "X-Request-ID"

    @staticmethod
    def alert(application_name: str) -> str:
        return f"X-{application_name}-alert"

    @staticmethod
    def error(application_name: str) -> str:
        return f"X-{application_name}-error"

    @staticmethod
    def params(application_name: str) -> str:
        return f"X-{application_name}-params"


class PaginationDefaults:
    """Paging limits for list endpoints"""

    PAGE = 0
    SIZE = 20
    MAX_SIZE = 2000
    DEFAULT_SORT_PROPERTY = "id"


# Problem type for bad-request alert bodies
PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
PROBLEM_TYPE_BAD_REQUEST = f"{PROBLEM_BASE_URL}/problem-with-message"
