import json
from datetime import datetime

import pytest
from pydantic import ValidationError
from pytest_httpx import HTTPXMock

from restassured import Config, JsonSerializerSettings
from restassured.models.errors import DeserializationError
from restassured.request import RequestSpecBuilder, RequestSpecification, ReusableRequestSpec


@pytest.fixture
def reusable_spec() -> ReusableRequestSpec:
    return (
        RequestSpecBuilder()
        .with_base_uri("http://localhost:9876")
        .with_base_path("/api")
        .with_header("X-Shared", "shared")
        .with_query_param("lang", "en")
        .with_content_type("text/plain")
        .with_accept("application/xml")
        .with_timeout(30)
        .with_user_agent("shared-agent")
        .with_json_serializer_settings(JsonSerializerSettings(date_format="%Y-%m-%d"))
        .build()
    )


class TestRequestSpecBuilder:
    def test_build_collects_values(self, reusable_spec: ReusableRequestSpec):
        assert reusable_spec.base_uri == "http://localhost:9876"
        assert reusable_spec.headers == (("X-Shared", "shared"),)
        assert reusable_spec.query_params == {"lang": "en"}
        assert reusable_spec.timeout == 30
        assert reusable_spec.verify_ssl is True

    def test_built_spec_is_frozen(self, reusable_spec: ReusableRequestSpec):
        with pytest.raises(ValidationError):
            reusable_spec.timeout = 1  # type: ignore[misc]

    def test_invalid_port_is_rejected(self):
        with pytest.raises(ValidationError):
            RequestSpecBuilder().with_port(70000).build()

    def test_disabled_ssl_certificate_validation(self):
        spec = RequestSpecBuilder().with_disabled_ssl_certificate_validation().build()

        assert spec.verify_ssl is False


class TestReusableSpecPrecedence:
    def test_reusable_values_apply_when_nothing_overrides_them(
        self, config: Config, reusable_spec: ReusableRequestSpec
    ):
        prepared = RequestSpecification(config).spec(reusable_spec).body("hi").prepare(
            "POST", "/posts"
        )

        assert prepared.url == "http://localhost:9876/api/posts"
        assert prepared.params == {"lang": "en"}
        assert prepared.timeout == 30
        assert ("Accept", "application/xml") in prepared.headers
        assert ("User-Agent", "shared-agent") in prepared.headers
        assert ("Content-Type", "text/plain; charset=utf-8") in prepared.headers

    def test_direct_values_override_reusable_values(
        self, config: Config, reusable_spec: ReusableRequestSpec
    ):
        prepared = (
            RequestSpecification(config)
            .spec(reusable_spec)
            .content_type("application/json")
            .accept("application/json")
            .timeout(3)
            .query_param("lang", "nl")
            .body({"a": 1})
            .prepare("POST", "/posts")
        )

        assert prepared.params == {"lang": "nl"}
        assert prepared.timeout == 3
        assert ("Accept", "application/json") in prepared.headers
        assert ("Accept", "application/xml") not in prepared.headers
        assert ("Content-Type", "application/json; charset=utf-8") in prepared.headers

    def test_headers_accumulate_shared_first(
        self, config: Config, reusable_spec: ReusableRequestSpec
    ):
        prepared = (
            RequestSpecification(config)
            .spec(reusable_spec)
            .header("X-Shared", "direct")
            .prepare("GET", "/posts")
        )

        values = [value for name, value in prepared.headers if name == "X-Shared"]
        assert values == ["shared", "direct"]

    def test_reusable_json_settings_are_used(
        self, config: Config, reusable_spec: ReusableRequestSpec
    ):
        prepared = (
            RequestSpecification(config)
            .spec(reusable_spec)
            .content_type("application/json")
            .body({"Date": datetime(1999, 12, 31, 23, 59, 59)})
            .prepare("POST", "/posts")
        )

        assert prepared.content == b'{"Date":"1999-12-31"}'

    def test_direct_json_settings_override_reusable_settings(
        self, config: Config, reusable_spec: ReusableRequestSpec
    ):
        prepared = (
            RequestSpecification(config)
            .spec(reusable_spec)
            .content_type("application/json")
            .json_serializer_settings(JsonSerializerSettings(date_format="%d/%m/%Y"))
            .body({"Date": datetime(1999, 12, 31, 23, 59, 59)})
            .prepare("POST", "/posts")
        )

        assert prepared.content == b'{"Date":"31/12/1999"}'

    def test_reusable_json_settings_are_used_for_responses(
        self, httpx_mock: HTTPXMock, config: Config
    ):
        reusable = (
            RequestSpecBuilder()
            .with_base_uri("http://localhost:9876")
            .with_json_serializer_settings(JsonSerializerSettings(strict=True))
            .build()
        )
        httpx_mock.add_response(
            url="http://localhost:9876/posts/1",
            content=json.dumps({"id": "1"}).encode(),
            headers={"Content-Type": "application/json"},
        )

        response = RequestSpecification(config).spec(reusable).get("/posts/1")

        assert response.deserialize_to(dict[str, str]) == {"id": "1"}
        with pytest.raises(DeserializationError):
            response.deserialize_to(dict[str, int])
