from .errors import (
    DeserializationError,
    ExtractionError,
    RequestCreationError,
    RequestSendError,
    ResponseVerificationError,
    RestAssuredError,
)
from .log_levels import RequestLogLevel, ResponseLogLevel
from .settings import JsonSerializerSettings, XmlSerializerSettings

__all__ = [
    "RestAssuredError",
    "RequestCreationError",
    "RequestSendError",
    "DeserializationError",
    "ExtractionError",
    "ResponseVerificationError",
    "RequestLogLevel",
    "ResponseLogLevel",
    "JsonSerializerSettings",
    "XmlSerializerSettings",
]
