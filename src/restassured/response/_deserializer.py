from typing import Any, Optional

from pydantic import ValidationError

from ..models.errors import DeserializationError
from ..models.settings import JsonSerializerSettings, XmlSerializerSettings
from ..serialization import deserialize_json, deserialize_xml


def media_type_of(content_type: Optional[str]) -> Optional[str]:
    """Return the lower-cased media type of a Content-Type value, without parameters."""
    if not content_type:
        return None
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type or None


def deserialize_content(
    content: bytes,
    content_type: Optional[str],
    target_type: Any = None,
    json_settings: Optional[JsonSerializerSettings] = None,
    xml_settings: Optional[XmlSerializerSettings] = None,
) -> Any:
    """Deserialize a response body into ``target_type``.

    The format follows the response Content-Type: JSON when it mentions
    ``json`` or when there is no Content-Type at all, XML when it mentions
    ``xml``.

    Args:
        content: The buffered response body.
        content_type: The Content-Type header of the response, if any.
        target_type: Type to validate the body into. ``None`` returns plain
            python values.
        json_settings: Settings used for JSON bodies.
        xml_settings: Settings used for XML bodies.

    Returns:
        Any: The deserialized body.

    Raises:
        DeserializationError: The body is empty, the Content-Type has no
            decoder, or the body does not match ``target_type``.
    """
    if not content:
        raise DeserializationError("Response content is null or empty.")

    media_type = media_type_of(content_type)

    try:
        if media_type is None or "json" in media_type:
            return deserialize_json(content, target_type, json_settings)
        if "xml" in media_type:
            return deserialize_xml(content, target_type, xml_settings)
    except (ValidationError, ValueError) as e:
        raise DeserializationError(
            f"Unable to deserialize response body into '{_type_name(target_type)}': {e}"
        ) from e

    raise DeserializationError(
        f"Unable to deserialize response with Content-Type '{media_type}'"
    )


def _type_name(target_type: Any) -> str:
    if target_type is None:
        return "object"
    return getattr(target_type, "__name__", None) or str(target_type)
