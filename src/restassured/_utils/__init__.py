from ._logs import setup_logging
from ._prepared_request import PreparedRequest
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "setup_logging",
    "PreparedRequest",
    "get_httpx_client_kwargs",
]
