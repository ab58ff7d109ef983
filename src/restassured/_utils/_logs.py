import logging
import sys
from typing import Optional

logger: logging.Logger = logging.getLogger("restassured")


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Attach a stderr handler to the ``restassured`` logger.

    Calling it again only updates the level.
    """
    if not any(getattr(h, "_restassured", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s")
        )
        handler._restassured = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if should_debug else logging.INFO)
