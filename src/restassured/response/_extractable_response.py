from typing import TYPE_CHECKING, Any, Optional

from ..models.errors import ExtractionError

if TYPE_CHECKING:
    from ._verifiable_response import VerifiableResponse


class ExtractableResponse:
    """Pulls values out of a response for use later in a test."""

    def __init__(self, response: "VerifiableResponse") -> None:
        self._response = response

    def body(self, path: Optional[str] = None) -> Any:
        """Return the body text, or the value found at ``path``.

        ``path`` is a JSONPath expression for JSON bodies and an ElementTree
        path for XML bodies. A path matching several values returns a list.

        Raises:
            ExtractionError: Nothing in the body matches ``path``.
        """
        if path is None:
            return self._response.text

        matches = self._response.select_path(path)
        if not matches:
            raise ExtractionError(f"Path '{path}' did not match anything in the response body")
        return matches[0] if len(matches) == 1 else matches

    def header(self, name: str) -> str:
        """Return the value of a response header.

        Raises:
            ExtractionError: The response has no such header.
        """
        value = self._response.headers.get(name)
        if value is None:
            raise ExtractionError(f"Header with name '{name}' could not be found in the response")
        return value

    def status_code(self) -> int:
        return self._response.status

    def response(self) -> "VerifiableResponse":
        return self._response
