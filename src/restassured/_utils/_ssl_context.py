import os
import ssl
from typing import Any, Optional, Union

import truststore

from .constants import ENV_REQUESTS_CA_BUNDLE, ENV_SSL_CERT_DIR, ENV_SSL_CERT_FILE


def get_httpx_client_kwargs(
    verify_ssl: bool = True,
    follow_redirects: bool = True,
    ca_bundle: Optional[str] = None,
) -> dict[str, Any]:
    """Keyword arguments for the httpx client that sends one request.

    Server certificates are checked against, in order: ``ca_bundle``, the
    ``SSL_CERT_FILE`` / ``REQUESTS_CA_BUNDLE`` / ``SSL_CERT_DIR`` environment
    variables, and finally the operating system trust store.

    Args:
        verify_ssl: ``False`` turns certificate verification off entirely.
        follow_redirects: Follow 3xx responses.
        ca_bundle: Path of a PEM bundle; ``~`` and ``$VARS`` are expanded.
    """
    verify: Union[ssl.SSLContext, bool] = False
    if verify_ssl:
        cafile = _expand(ca_bundle) or _expand(
            os.environ.get(ENV_SSL_CERT_FILE) or os.environ.get(ENV_REQUESTS_CA_BUNDLE)
        )
        capath = _expand(os.environ.get(ENV_SSL_CERT_DIR))
        if cafile or capath:
            verify = ssl.create_default_context(cafile=cafile, capath=capath)
        else:
            verify = truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    return {
        "verify": verify,
        "follow_redirects": follow_redirects,
    }


def _expand(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    return os.path.expanduser(os.path.expandvars(path))
