from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class PreparedRequest:
    """Everything needed to put one request on the wire.

    Produced when a request specification is finalized. At most one of
    ``content``, ``data`` and ``files`` is set.
    """

    method: str
    url: str
    params: dict[str, str] = field(default_factory=dict)
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: Optional[bytes] = None
    data: Optional[dict[str, Any]] = None
    files: Optional[list[Any]] = None
    cookies: dict[str, str] = field(default_factory=dict)
    timeout: Union[int, float, None] = None
    verify_ssl: bool = True
    follow_redirects: bool = True
    ca_bundle: Optional[str] = None
