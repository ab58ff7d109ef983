import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest
from pytest_httpx import HTTPXMock

from restassured import Config
from restassured._services import HttpRequestProcessor, run_coroutine
from restassured.models.errors import RequestSendError
from restassured.models.settings import JsonSerializerSettings
from restassured.request import RequestSpecification


class TestRunCoroutine:
    def test_returns_the_coroutine_result(self):
        async def answer() -> int:
            await asyncio.sleep(0)
            return 42

        assert run_coroutine(answer()) == 42

    def test_propagates_exceptions(self):
        async def fail() -> None:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            run_coroutine(fail())

    @pytest.mark.anyio
    async def test_works_inside_a_running_event_loop(self):
        async def answer() -> str:
            return "ok"

        assert run_coroutine(answer()) == "ok"


class TestHttpRequestProcessor:
    @pytest.mark.anyio
    async def test_send_async_buffers_the_response(self, httpx_mock: HTTPXMock, base_url: str):
        httpx_mock.add_response(
            url=f"{base_url}/posts/1",
            status_code=200,
            json={"id": 1},
        )

        async with httpx.AsyncClient() as client:
            processor = HttpRequestProcessor(
                client, json_settings=JsonSerializerSettings(strict=True)
            )
            response = await processor.send_async(client.build_request("GET", f"{base_url}/posts/1"))

        assert response.status == 200
        assert response.deserialize_to(dict) == {"id": 1}

    def test_error_status_is_not_a_send_error(self, httpx_mock: HTTPXMock, base_url: str):
        httpx_mock.add_response(url=f"{base_url}/missing", status_code=404)

        client = httpx.AsyncClient()
        try:
            response = HttpRequestProcessor(client).send(
                client.build_request("GET", f"{base_url}/missing")
            )
        finally:
            run_coroutine(client.aclose())

        response.status_code(404)

    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("Connection refused"),
            httpx.ReadTimeout("Timed out"),
            httpx.RemoteProtocolError("Server disconnected"),
            httpx.TooManyRedirects("Exceeded maximum allowed redirects"),
            httpx.DecodingError("Error -3 while decompressing data"),
        ],
    )
    def test_request_failures_raise_request_send_error(
        self, httpx_mock: HTTPXMock, config: Config, base_url: str, error: Exception
    ):
        httpx_mock.add_exception(error)
        spec = RequestSpecification(config)

        with pytest.raises(RequestSendError) as exc_info:
            spec.get(f"{base_url}/posts")

        assert exc_info.value.__cause__ is error
        assert f"Unable to send GET request to '{base_url}/posts'" in exc_info.value.message
        assert type(error).__name__ in exc_info.value.message
        assert spec._closed
        assert spec._client is None

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "error",
        [
            httpx.TooManyRedirects("Exceeded maximum allowed redirects"),
            httpx.DecodingError("Error -3 while decompressing data"),
        ],
    )
    async def test_request_failures_raise_request_send_error_async(
        self, httpx_mock: HTTPXMock, config: Config, base_url: str, error: Exception
    ):
        httpx_mock.add_exception(error)
        spec = RequestSpecification(config)

        with pytest.raises(RequestSendError) as exc_info:
            await spec.get_async(f"{base_url}/posts")

        assert exc_info.value.__cause__ is error
        assert spec._closed
        assert spec._client is None

    def test_concurrent_sends_from_several_threads(
        self, httpx_mock: HTTPXMock, config: Config, base_url: str
    ):
        for index in range(8):
            httpx_mock.add_response(url=f"{base_url}/posts/{index}", json={"id": index})

        def fetch(index: int) -> int:
            response = RequestSpecification(config).get(f"{base_url}/posts/{index}")
            return response.extract().body("$.id")

        with ThreadPoolExecutor(max_workers=4) as executor:
            ids = list(executor.map(fetch, range(8)))

        assert ids == list(range(8))
