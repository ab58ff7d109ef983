import json
from datetime import timedelta
from logging import getLogger
from typing import Any, Callable, Optional, Union

import jsonschema
from httpx import Headers, Response

from .._utils.constants import HEADER_CONTENT_TYPE
from ..models.errors import DeserializationError, ResponseVerificationError
from ..models.log_levels import ResponseLogLevel
from ..models.settings import JsonSerializerSettings, XmlSerializerSettings
from ._body_path import select_json_path, select_xml_path
from ._deserializer import deserialize_content, media_type_of
from ._extractable_response import ExtractableResponse

logger = getLogger(__name__)

Expectation = Union[Any, Callable[[Any], bool]]


class VerifiableResponse:
    """A received HTTP response with assertion and extraction operations.

    The body is buffered when the response is created and never consumed, so
    every assertion, extraction and deserialization reads the same bytes.
    Assertion methods return the response itself to allow chaining:

    ```python
    given().get("https://api.example.com/posts/1").then().status_code(200).and_().body_path("$.id", 1)
    ```
    """

    def __init__(
        self,
        status_code: int,
        headers: Optional[Headers] = None,
        content: bytes = b"",
        *,
        elapsed: timedelta = timedelta(0),
        request_method: str = "",
        request_url: str = "",
        encoding: Optional[str] = None,
        json_settings: Optional[JsonSerializerSettings] = None,
        xml_settings: Optional[XmlSerializerSettings] = None,
    ) -> None:
        self._status_code = status_code
        self._headers = Headers(headers)
        self._content = bytes(content)
        self._elapsed = elapsed
        self._request_method = request_method
        self._request_url = request_url
        self._encoding = encoding
        self._json_settings = json_settings
        self._xml_settings = xml_settings

    @classmethod
    def from_httpx(
        cls,
        response: Response,
        *,
        json_settings: Optional[JsonSerializerSettings] = None,
        xml_settings: Optional[XmlSerializerSettings] = None,
    ) -> "VerifiableResponse":
        """Wrap an httpx response whose body has already been read."""
        return cls(
            response.status_code,
            response.headers,
            response.content,
            elapsed=response.elapsed,
            request_method=response.request.method,
            request_url=str(response.request.url),
            encoding=response.charset_encoding,
            json_settings=json_settings,
            xml_settings=xml_settings,
        )

    @property
    def status(self) -> int:
        return self._status_code

    @property
    def headers(self) -> Headers:
        return Headers(self._headers)

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def text(self) -> str:
        return self._content.decode(self._encoding or "utf-8", errors="replace")

    @property
    def content_type_header(self) -> Optional[str]:
        return self._headers.get(HEADER_CONTENT_TYPE)

    @property
    def media_type(self) -> Optional[str]:
        return media_type_of(self.content_type_header)

    @property
    def elapsed(self) -> timedelta:
        return self._elapsed

    def then(self) -> "VerifiableResponse":
        """Syntactic sugar marking the start of the assertions."""
        return self

    def and_(self) -> "VerifiableResponse":
        """Syntactic sugar that makes a chain of assertions read like a sentence."""
        return self

    def status_code(self, expected: Expectation) -> "VerifiableResponse":
        """Verify the status code equals ``expected`` or satisfies a predicate."""
        _verify("response status code", expected, self._status_code)
        return self

    def header(self, name: str, expected: Expectation) -> "VerifiableResponse":
        """Verify the value of a response header.

        Repeated headers are compared as their comma separated combination.
        """
        actual = self._headers.get(name)
        if actual is None:
            raise ResponseVerificationError(
                f"response header '{name}'",
                expected,
                None,
                message=f"Expected response header '{name}' to be present, but it was not found",
            )
        _verify(f"response header '{name}'", expected, actual)
        return self

    def content_type(self, expected: Expectation) -> "VerifiableResponse":
        """Verify the response Content-Type.

        A string matches either the full header value or its media type, so
        ``"application/json"`` accepts ``application/json; charset=utf-8``.
        """
        if isinstance(expected, str) and ";" not in expected:
            _verify("response media type", media_type_of(expected), self.media_type)
        else:
            _verify("response Content-Type", expected, self.content_type_header)
        return self

    def body(self, expected: Expectation) -> "VerifiableResponse":
        """Verify the whole response body, decoded as text."""
        _verify("response body", expected, self.text)
        return self

    def body_path(self, path: str, expected: Expectation) -> "VerifiableResponse":
        """Verify the value found at ``path`` in the response body.

        JSON bodies (and bodies without a Content-Type) are queried with a
        JSONPath expression, XML bodies with an ElementTree path relative to
        the document element. XML values are compared as text. When the path
        matches several values they are compared as a list. A callable
        ``expected`` other than a class is used as a predicate.
        """
        matches = self.select_path(path)
        if not matches:
            raise ResponseVerificationError(
                f"value at path '{path}'",
                expected,
                None,
                message=f"Expected path '{path}' to match the response body, but nothing was found",
            )
        actual = matches[0] if len(matches) == 1 else matches
        _verify(f"value at path '{path}'", expected, actual)
        return self

    def response_time(self, predicate: Callable[[timedelta], bool]) -> "VerifiableResponse":
        """Verify the time between sending the request and receiving the response."""
        _verify("response time", predicate, self._elapsed)
        return self

    def matches_json_schema(self, schema: Union[dict[str, Any], str]) -> "VerifiableResponse":
        """Verify the response body against a JSON schema.

        Raises:
            jsonschema.SchemaError: The schema itself is invalid.
        """
        if isinstance(schema, str):
            schema = json.loads(schema)
        instance = self.deserialize_to(None)
        try:
            jsonschema.validate(instance=instance, schema=schema)
        except jsonschema.ValidationError as e:
            raise ResponseVerificationError(
                "response body",
                schema,
                instance,
                message=f"Response body does not match JSON schema: {e.message}",
            ) from e
        return self

    def deserialize_to(
        self,
        target_type: Any,
        settings: Union[JsonSerializerSettings, XmlSerializerSettings, None] = None,
    ) -> Any:
        """Deserialize the response body into ``target_type``.

        Args:
            target_type: A pydantic model, dataclass, builtin type or any type
                pydantic can validate. ``None`` returns plain python values.
            settings: Overrides the serializer settings the request was sent
                with for the matching format.

        Raises:
            DeserializationError: The body is empty, its Content-Type cannot be
                decoded, or it does not match ``target_type``.
        """
        json_settings = self._json_settings
        xml_settings = self._xml_settings
        if isinstance(settings, JsonSerializerSettings):
            json_settings = settings
        elif isinstance(settings, XmlSerializerSettings):
            xml_settings = settings

        return deserialize_content(
            self._content,
            self.content_type_header,
            target_type,
            json_settings=json_settings,
            xml_settings=xml_settings,
        )

    as_ = deserialize_to

    def extract(self) -> ExtractableResponse:
        """Switch from verifying the response to pulling values out of it."""
        return ExtractableResponse(self)

    def log(self, level: ResponseLogLevel = ResponseLogLevel.ALL) -> "VerifiableResponse":
        """Write the response to the ``restassured`` logger at INFO level."""
        level = ResponseLogLevel(level)
        if level == ResponseLogLevel.NONE:
            return self

        logger.info(
            f"Response: {self._status_code} {self._request_method} {self._request_url} "
            f"({self._elapsed.total_seconds() * 1000:.0f} ms)"
        )
        if level in (ResponseLogLevel.HEADERS, ResponseLogLevel.ALL):
            for name, value in self._headers.multi_items():
                logger.info(f"{name}: {value}")
        if level in (ResponseLogLevel.BODY, ResponseLogLevel.ALL) and self._content:
            logger.info(self.text)
        return self

    def select_path(self, path: str) -> list[Any]:
        media_type = self.media_type
        if media_type is not None and "xml" in media_type:
            return select_xml_path(self._content, path)
        if media_type is not None and "json" not in media_type:
            raise DeserializationError(
                f"Unable to query response with Content-Type '{media_type}'"
            )
        return select_json_path(self.deserialize_to(None), path)

    def __repr__(self) -> str:
        return (
            f"VerifiableResponse(status_code={self._status_code!r}, "
            f"request={self._request_method} {self._request_url})"
        )


def _verify(subject: str, expected: Expectation, actual: Any) -> None:
    # classes are compared like any other value, not called
    if callable(expected) and not isinstance(expected, type):
        if not expected(actual):
            name = getattr(expected, "__name__", repr(expected))
            raise ResponseVerificationError(
                subject,
                expected,
                actual,
                message=f"Expected {subject} to satisfy {name}, but was {actual!r}",
            )
    elif actual != expected:
        raise ResponseVerificationError(subject, expected, actual)
