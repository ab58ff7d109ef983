from datetime import datetime

import pytest
from pytest_httpx import HTTPXMock

from restassured import Config, JsonSerializerSettings, RequestSpecBuilder, given

EXPECTED_PAYLOAD = b'{"Id":1,"Title":"My post title","Date":"1999-12-31"}'


@pytest.fixture
def post() -> dict:
    return {
        "Id": 1,
        "Title": "My post title",
        "Date": datetime(1999, 12, 31, 23, 59, 59),
    }


@pytest.fixture
def stub(httpx_mock: HTTPXMock, base_url: str) -> None:
    httpx_mock.add_response(
        url=f"{base_url}/object-serialization-custom-settings",
        method="POST",
        match_content=EXPECTED_PAYLOAD,
        status_code=201,
    )


@pytest.mark.usefixtures("stub")
class TestCustomJsonSerializerSettings:
    def test_settings_supplied_in_test_body(self, config: Config, base_url: str, post: dict):
        (
            given(config)
            .json_serializer_settings(JsonSerializerSettings(date_format="%Y-%m-%d"))
            .body(post)
            .when()
            .post(f"{base_url}/object-serialization-custom-settings")
            .then()
            .status_code(201)
        )

    def test_settings_supplied_in_request_specification(
        self, config: Config, base_url: str, post: dict
    ):
        request_specification = (
            RequestSpecBuilder()
            .with_json_serializer_settings(JsonSerializerSettings(date_format="%Y-%m-%d"))
            .build()
        )

        (
            given(config)
            .spec(request_specification)
            .body(post)
            .when()
            .post(f"{base_url}/object-serialization-custom-settings")
            .then()
            .status_code(201)
        )

    @pytest.mark.anyio
    async def test_settings_supplied_to_an_async_request(
        self, config: Config, base_url: str, post: dict
    ):
        response = await (
            given(config)
            .json_serializer_settings(JsonSerializerSettings(date_format="%Y-%m-%d"))
            .body(post)
            .when()
            .post_async(f"{base_url}/object-serialization-custom-settings")
        )

        response.then().status_code(201)
