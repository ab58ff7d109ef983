import xml.etree.ElementTree as ET
from typing import Any

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..models.errors import ExtractionError
from ..serialization import element_to_builtins


def select_json_path(data: Any, path: str) -> list[Any]:
    """Return every value matching a JSONPath expression such as ``$.items[0].id``."""
    try:
        expression = jsonpath_parse(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise ExtractionError(f"Invalid JSON path '{path}': {e}") from e
    return [match.value for match in expression.find(data)]


def select_xml_path(content: bytes, path: str) -> list[Any]:
    """Return every value matching an ElementTree path such as ``./items/item``.

    The path is evaluated relative to the document element. Leaf elements
    yield their text; other elements yield plain python values.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ExtractionError(f"Response body is not well-formed XML: {e}") from e

    try:
        elements = root.findall(path)
    except SyntaxError as e:
        raise ExtractionError(f"Invalid XML path '{path}': {e}") from e
    return [element_to_builtins(element) for element in elements]
