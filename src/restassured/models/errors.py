from typing import Any, Optional


class RestAssuredError(Exception):
    """Base class for every error raised by restassured."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RequestCreationError(RestAssuredError):
    """Raised while assembling a request, before any network I/O happens.

    Typical causes are a multipart file that does not exist, an object body
    that cannot be serialized for the effective content type, or conflicting
    body sources on the same request specification.
    """


class RequestSendError(RestAssuredError):
    """Raised when the transport fails to deliver the request.

    The original httpx exception is available as ``__cause__``.
    """

    @staticmethod
    def create(method: str, url: str, error: Exception) -> "RequestSendError":
        return RequestSendError(
            f"Unable to send {method} request to '{url}': "
            f"{type(error).__name__}: {error}"
        )


class DeserializationError(RestAssuredError):
    """Raised when a response body cannot be decoded into the requested type."""


class ExtractionError(RestAssuredError):
    """Raised when a value requested from a response is not present."""


class ResponseVerificationError(RestAssuredError, AssertionError):
    """Raised when an expectation about a response does not hold."""

    def __init__(
        self,
        subject: str,
        expected: Any,
        actual: Any,
        message: Optional[str] = None,
    ):
        self.subject = subject
        self.expected = expected
        self.actual = actual
        super().__init__(
            message or f"Expected {subject} to be {expected!r}, but was {actual!r}"
        )
