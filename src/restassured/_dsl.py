from logging import getLogger
from typing import Optional

from ._config import Config
from ._utils import setup_logging
from .request import RequestSpecification


def given(config: Optional[Config] = None) -> RequestSpecification:
    """Start a new request specification.

    Args:
        config: Package defaults. Read from ``RESTASSURED_*`` environment
            variables (and a ``.env`` file) when omitted.

    Returns:
        RequestSpecification: A fresh specification for exactly one request.

    Examples:
        ```python
        from restassured import given

        given().get("http://localhost:9876/posts/1").then().status_code(200)
        ```
    """
    config = config or Config.from_env()
    if config.debug:
        setup_logging(config.debug)
        getLogger("restassured").debug(f"CONFIG: {config.model_dump()}")
    return RequestSpecification(config)
