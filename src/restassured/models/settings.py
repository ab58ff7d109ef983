from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class JsonSerializerSettings(BaseModel):
    """Settings used to render request bodies as JSON and to read JSON responses.

    Attributes:
        date_format: ``strftime`` pattern applied to ``date`` and ``datetime``
            values. ISO 8601 is used when omitted.
        indent: Indentation for pretty printed output. Output is compact
            (no whitespace between tokens) when omitted.
        by_alias: Use field aliases of pydantic models and dataclasses.
        exclude_none: Drop keys whose value is ``None``.
        sort_keys: Emit object keys in sorted order.
        ensure_ascii: Escape non ASCII characters.
        strict: Validate responses in pydantic strict mode.
    """

    model_config = ConfigDict(frozen=True)

    date_format: Optional[str] = None
    indent: Optional[int] = None
    by_alias: bool = True
    exclude_none: bool = False
    sort_keys: bool = False
    ensure_ascii: bool = False
    strict: bool = False


class XmlSerializerSettings(BaseModel):
    """Settings used to render request bodies as XML and to read XML responses.

    Attributes:
        root_tag: Tag of the document element. Defaults to the class name of
            the serialized value, or ``root`` for plain mappings and sequences.
        item_tag: Tag used for the members of a sequence.
        date_format: ``strftime`` pattern applied to ``date`` and ``datetime``
            values. ISO 8601 is used when omitted.
        xml_declaration: Prefix the document with an XML declaration.
        by_alias: Use field aliases of pydantic models and dataclasses.
        exclude_none: Drop fields whose value is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    root_tag: Optional[str] = None
    item_tag: str = Field(default="item", min_length=1)
    date_format: Optional[str] = None
    xml_declaration: bool = True
    by_alias: bool = True
    exclude_none: bool = False
