from enum import Enum


class RequestLogLevel(str, Enum):
    """Parts of an outgoing request written to the ``restassured`` logger."""

    NONE = "none"
    HEADERS = "headers"
    BODY = "body"
    ALL = "all"


class ResponseLogLevel(str, Enum):
    """Parts of a received response written to the ``restassured`` logger."""

    NONE = "none"
    HEADERS = "headers"
    BODY = "body"
    ALL = "all"
