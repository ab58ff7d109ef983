import os
from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    DOTENV_FILE,
    ENV_BASE_URI,
    ENV_CA_BUNDLE,
    ENV_DEBUG,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
)


class Config(BaseModel):
    """Process wide defaults for requests sent by restassured.

    Attributes:
        base_uri: Prefix for relative endpoints, unless a reusable request
            specification supplies its own.
        timeout: Seconds before the transport gives up on a request.
        verify_ssl: Verify server certificates.
        follow_redirects: Follow 3xx responses.
        ca_bundle: PEM bundle used to verify server certificates instead of
            the operating system trust store.
        debug: Log every request and response at debug level.
    """

    base_uri: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    verify_ssl: bool = True
    follow_redirects: bool = True
    ca_bundle: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Build a config from ``RESTASSURED_*`` variables, reading ``.env`` first."""
        load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE))

        values = {
            "base_uri": env.get(ENV_BASE_URI),
            "timeout": env.get(ENV_TIMEOUT),
            "verify_ssl": env.get(ENV_VERIFY_SSL),
            "debug": env.get(ENV_DEBUG),
            "ca_bundle": env.get(ENV_CA_BUNDLE),
        }
        return cls.model_validate(
            {key: value for key, value in values.items() if value is not None}
        )
