"""XML rendering and parsing of python values.

Documents follow a small convention so that values survive a round trip:
mapping keys become child elements, sequence members become ``item_tag``
children of an element marked ``list="true"``, an empty mapping becomes an
empty element marked ``object="true"`` and ``None`` becomes an empty element
marked ``nil="true"``. Everything else is rendered as element text and
converted back by pydantic when the document is validated into a type.
"""

import dataclasses
import re
import xml.etree.ElementTree as ET
from typing import Any, Optional, Union

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..models.settings import XmlSerializerSettings
from ._common import to_builtins, type_adapter

NIL_ATTRIBUTE = "nil"
LIST_ATTRIBUTE = "list"
OBJECT_ATTRIBUTE = "object"
MARKER_ATTRIBUTES = (NIL_ATTRIBUTE, LIST_ATTRIBUTE, OBJECT_ATTRIBUTE)
DEFAULT_ROOT_TAG = "root"

# XML 1.0 Name production without the namespace colon
_NAME_START = (
    "A-Z_a-z\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u02ff\u0370-\u037d\u037f-\u1fff"
    "\u200c-\u200d\u2070-\u218f\u2c00-\u2fef\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd"
    "\U00010000-\U000effff"
)
_NAME_CHAR = _NAME_START + "\\-.0-9\u00b7\u0300-\u036f\u203f-\u2040"
_ELEMENT_NAME = re.compile(f"[{_NAME_START}][{_NAME_CHAR}]*")


def serialize_xml(
    value: Any,
    settings: Optional[XmlSerializerSettings] = None,
    encoding: str = "utf-8",
) -> bytes:
    """Render ``value`` as an XML document encoded with ``encoding``.

    Raises:
        TypeError: The value (or a nested value) has no text representation.
        ValueError: A mapping key, the root tag or the item tag is not a
            valid XML element name.
    """
    settings = settings or XmlSerializerSettings()
    root = ET.Element(_element_name(settings.root_tag or _default_root_tag(value)))
    data = to_builtins(
        value,
        date_format=settings.date_format,
        by_alias=settings.by_alias,
        exclude_none=settings.exclude_none,
    )
    _fill(root, data, _element_name(settings.item_tag))
    return ET.tostring(
        root, encoding=encoding, xml_declaration=settings.xml_declaration
    )


def deserialize_xml(
    content: Union[str, bytes],
    target_type: Any = None,
    settings: Optional[XmlSerializerSettings] = None,
) -> Any:
    """Parse an XML document into ``target_type``.

    The document element itself is not part of the value: its children are
    validated against ``target_type``. ``None`` returns plain python values.

    Raises:
        ValueError: The content is not well-formed XML or does not match the type.
    """
    settings = settings or XmlSerializerSettings()
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ValueError(f"Invalid XML document: {e}") from e

    data = element_to_builtins(root, settings.item_tag)
    return type_adapter(target_type).validate_python(data)


def element_to_builtins(element: ET.Element, item_tag: str = "item") -> Any:
    """Convert an element into plain python values.

    Elements marked ``list="true"`` become lists. Unmarked elements with at
    least two children, all named ``item_tag``, are read as lists too; a
    single unmarked ``item_tag`` child is read as a mapping key.
    """
    if element.get(NIL_ATTRIBUTE) == "true":
        return None

    children = list(element)
    if element.get(LIST_ATTRIBUTE) == "true" or (
        len(children) > 1
        and all(_local_name(child.tag) == item_tag for child in children)
    ):
        return [element_to_builtins(child, item_tag) for child in children]

    if not children:
        if element.get(OBJECT_ATTRIBUTE) == "true":
            return {}
        return element.text or ""

    result: dict[str, Any] = {
        _local_name(key): attribute
        for key, attribute in element.attrib.items()
        if key not in MARKER_ATTRIBUTES
    }
    repeated: set[str] = set()
    for child in children:
        tag = _local_name(child.tag)
        value = element_to_builtins(child, item_tag)
        if tag in repeated:
            result[tag].append(value)
        elif tag in result:
            result[tag] = [result[tag], value]
            repeated.add(tag)
        else:
            result[tag] = value
    return result


def _fill(element: ET.Element, data: Any, item_tag: str) -> None:
    if data is None:
        element.set(NIL_ATTRIBUTE, "true")
    elif isinstance(data, dict):
        if not data:
            element.set(OBJECT_ATTRIBUTE, "true")
        for key, value in data.items():
            _fill(ET.SubElement(element, _element_name(key)), value, item_tag)
    elif isinstance(data, list):
        element.set(LIST_ATTRIBUTE, "true")
        for value in data:
            _fill(ET.SubElement(element, item_tag), value, item_tag)
    elif isinstance(data, bool):
        element.text = "true" if data else "false"
    elif isinstance(data, str):
        element.text = data
    else:
        try:
            jsonable = to_jsonable_python(data)
        except PydanticSerializationError as e:
            raise TypeError(str(e)) from e
        if isinstance(jsonable, (dict, list)):
            _fill(element, jsonable, item_tag)
        else:
            element.text = str(jsonable)


def _default_root_tag(value: Any) -> str:
    if isinstance(value, BaseModel) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        return type(value).__name__
    return DEFAULT_ROOT_TAG


def _element_name(name: str) -> str:
    if not _ELEMENT_NAME.fullmatch(name):
        raise ValueError(f"'{name}' is not a valid XML element name")
    return name


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
