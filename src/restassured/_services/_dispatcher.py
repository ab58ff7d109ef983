import asyncio
import threading
from logging import getLogger
from typing import Any, Coroutine, Optional, TypeVar

from httpx import AsyncClient, Request, RequestError

from ..models.errors import RequestSendError
from ..models.settings import JsonSerializerSettings, XmlSerializerSettings
from ..response import VerifiableResponse

T = TypeVar("T")

_event_loop: Optional[asyncio.AbstractEventLoop] = None
_event_loop_lock = threading.Lock()


def run_coroutine(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine synchronously.

    The coroutine runs on a background event loop owned by this module, so
    the call also works from a thread that already runs an event loop.
    """
    global _event_loop
    with _event_loop_lock:
        if not _event_loop or not _event_loop.is_running():
            _event_loop = asyncio.new_event_loop()
            threading.Thread(
                target=_event_loop.run_forever,
                name="restassured-event-loop",
                daemon=True,
            ).start()
        loop = _event_loop
    future = asyncio.run_coroutine_threadsafe(coro, loop)
    return future.result()


class HttpRequestProcessor:
    """Sends a built request exactly once and buffers the response.

    There is no retry: a transport failure is reported to the caller as a
    ``RequestSendError`` right away.
    """

    def __init__(
        self,
        client: AsyncClient,
        *,
        json_settings: Optional[JsonSerializerSettings] = None,
        xml_settings: Optional[XmlSerializerSettings] = None,
    ) -> None:
        self._logger = getLogger("restassured")
        self._client = client
        self._json_settings = json_settings
        self._xml_settings = xml_settings

    def send(self, request: Request) -> VerifiableResponse:
        """Send ``request`` and block until the response body has been read."""
        return run_coroutine(self.send_async(request))

    async def send_async(self, request: Request) -> VerifiableResponse:
        """Send ``request`` and read the full response body.

        Raises:
            RequestSendError: The request failed before a response was read
                (connection refused, DNS, TLS, timeout, too many redirects or
                a body that cannot be decoded).
        """
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {dict(request.headers)}")

        try:
            response = await self._client.send(request)
        except RequestError as e:
            self._logger.debug(f"Request failed: {type(e).__name__}: {e}")
            raise RequestSendError.create(request.method, str(request.url), e) from e

        self._logger.debug(f"Response: {response.status_code} {request.method} {request.url}")

        return VerifiableResponse.from_httpx(
            response,
            json_settings=self._json_settings,
            xml_settings=self._xml_settings,
        )
