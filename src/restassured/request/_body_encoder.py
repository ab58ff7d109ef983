import codecs
from dataclasses import dataclass
from typing import Any, Optional

from .._utils.constants import DEFAULT_CONTENT_TYPE, DEFAULT_ENCODING
from ..models.errors import RequestCreationError
from ..models.settings import JsonSerializerSettings, XmlSerializerSettings
from ..serialization import serialize_json, serialize_xml


@dataclass(frozen=True)
class EncodedBody:
    """Wire payload of a request together with its Content-Type header value."""

    content: bytes
    content_type: str


def encode_body(
    value: Any,
    content_type: str = DEFAULT_CONTENT_TYPE,
    encoding: str = DEFAULT_ENCODING,
    json_settings: Optional[JsonSerializerSettings] = None,
    xml_settings: Optional[XmlSerializerSettings] = None,
) -> EncodedBody:
    """Turn a request body into bytes according to the effective content type.

    Strings and bytes are sent verbatim. Any other value is serialized as JSON
    when the content type mentions ``json`` and as XML when it mentions
    ``xml``; the match is a case-insensitive substring test so vendor types
    such as ``application/vnd.api+json`` are accepted.

    Args:
        value: The body set on the request specification.
        content_type: The effective content type.
        encoding: Character encoding used for text payloads.
        json_settings: Settings used when the value is rendered as JSON.
        xml_settings: Settings used when the value is rendered as XML.

    Returns:
        EncodedBody: The payload and the Content-Type header value to send.

    Raises:
        RequestCreationError: The encoding is unknown, the content type has no
            object serialization, or the value cannot be serialized.
    """
    if isinstance(value, bytes):
        return EncodedBody(content=value, content_type=content_type)

    try:
        charset = codecs.lookup(encoding).name
    except LookupError as e:
        raise RequestCreationError(f"Unknown content encoding '{encoding}'") from e

    header_value = _with_charset(content_type, charset)

    if isinstance(value, str):
        return EncodedBody(content=_encode_text(value, charset), content_type=header_value)

    media_type = content_type.lower()
    if "json" in media_type:
        try:
            text = serialize_json(value, json_settings)
        except (TypeError, ValueError) as e:
            raise _serialization_error(value, "JSON", e) from e
        return EncodedBody(content=_encode_text(text, charset), content_type=header_value)

    if "xml" in media_type:
        try:
            content = serialize_xml(value, xml_settings, encoding=charset)
        except (TypeError, ValueError) as e:
            raise _serialization_error(value, "XML", e) from e
        return EncodedBody(content=content, content_type=header_value)

    raise RequestCreationError(
        f"Unable to serialize object of type '{type(value).__name__}' "
        f"to Content-Type '{content_type}'"
    )


def _with_charset(content_type: str, charset: str) -> str:
    if "charset=" in content_type.lower():
        return content_type
    return f"{content_type}; charset={charset}"


def _encode_text(text: str, charset: str) -> bytes:
    try:
        return text.encode(charset)
    except UnicodeEncodeError as e:
        raise RequestCreationError(
            f"Request body cannot be encoded as '{charset}': {e}"
        ) from e


def _serialization_error(value: Any, target: str, error: Exception) -> RequestCreationError:
    return RequestCreationError(
        f"Unable to serialize object of type '{type(value).__name__}' to {target}: {error}"
    )
