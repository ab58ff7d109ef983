from ._json import deserialize_json, serialize_json
from ._xml import deserialize_xml, element_to_builtins, serialize_xml

__all__ = [
    "serialize_json",
    "deserialize_json",
    "serialize_xml",
    "deserialize_xml",
    "element_to_builtins",
]
