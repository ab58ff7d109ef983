import json
from typing import Any, Optional, Union

from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..models.settings import JsonSerializerSettings
from ._common import to_builtins, type_adapter


def serialize_json(value: Any, settings: Optional[JsonSerializerSettings] = None) -> str:
    """Render ``value`` as a JSON document.

    Args:
        value: A pydantic model, dataclass, mapping, sequence or any value
            pydantic knows how to make JSON compatible.
        settings: Rendering options. Format defaults apply when omitted.

    Returns:
        str: The JSON text. Compact unless ``settings.indent`` is set.

    Raises:
        TypeError: The value (or a nested value) has no JSON representation.
        ValueError: The value contains a circular reference.
    """
    settings = settings or JsonSerializerSettings()
    data = to_builtins(
        value,
        date_format=settings.date_format,
        by_alias=settings.by_alias,
        exclude_none=settings.exclude_none,
    )

    try:
        return json.dumps(
            data,
            default=to_jsonable_python,
            indent=settings.indent,
            separators=(",", ":") if settings.indent is None else None,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
        )
    except PydanticSerializationError as e:
        raise TypeError(str(e)) from e


def deserialize_json(
    content: Union[str, bytes],
    target_type: Any = None,
    settings: Optional[JsonSerializerSettings] = None,
) -> Any:
    """Parse a JSON document into ``target_type``.

    ``target_type`` is anything pydantic's ``TypeAdapter`` accepts; ``None``
    returns plain python values.

    Raises:
        ValueError: The content is not valid JSON or does not match the type.
    """
    settings = settings or JsonSerializerSettings()
    return type_adapter(target_type).validate_json(
        content, strict=settings.strict or None
    )
