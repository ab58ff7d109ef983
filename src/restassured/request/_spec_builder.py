from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.settings import JsonSerializerSettings, XmlSerializerSettings


class ReusableRequestSpec(BaseModel):
    """Defaults shared by many requests, applied with ``RequestSpecification.spec``.

    Values set directly on a request specification take precedence over the
    values held here. Headers are the exception: they accumulate, the shared
    ones first.
    """

    model_config = ConfigDict(frozen=True)

    base_uri: Optional[str] = None
    base_path: Optional[str] = None
    port: Optional[int] = Field(default=None, gt=0, lt=65536)
    headers: tuple[tuple[str, str], ...] = ()
    query_params: dict[str, str] = Field(default_factory=dict)
    content_type: Optional[str] = None
    content_encoding: Optional[str] = None
    accept: Optional[str] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    user_agent: Optional[str] = None
    verify_ssl: bool = True
    json_serializer_settings: Optional[JsonSerializerSettings] = None
    xml_serializer_settings: Optional[XmlSerializerSettings] = None


class RequestSpecBuilder:
    """Builds a ``ReusableRequestSpec``.

    Examples:
        ```python
        spec = (
            RequestSpecBuilder()
            .with_base_uri("http://localhost")
            .with_port(9876)
            .with_json_serializer_settings(JsonSerializerSettings(date_format="%Y-%m-%d"))
            .build()
        )

        given().spec(spec).body(post).post("/posts").then().status_code(201)
        ```
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._headers: list[tuple[str, str]] = []
        self._query_params: dict[str, str] = {}

    def with_base_uri(self, base_uri: str) -> "RequestSpecBuilder":
        self._values["base_uri"] = base_uri
        return self

    def with_base_path(self, base_path: str) -> "RequestSpecBuilder":
        self._values["base_path"] = base_path
        return self

    def with_port(self, port: int) -> "RequestSpecBuilder":
        self._values["port"] = port
        return self

    def with_header(self, name: str, value: Any) -> "RequestSpecBuilder":
        self._headers.append((name, str(value)))
        return self

    def with_query_param(self, name: str, value: Any) -> "RequestSpecBuilder":
        self._query_params[name] = str(value)
        return self

    def with_content_type(self, content_type: str) -> "RequestSpecBuilder":
        self._values["content_type"] = content_type
        return self

    def with_content_encoding(self, encoding: str) -> "RequestSpecBuilder":
        self._values["content_encoding"] = encoding
        return self

    def with_accept(self, accept: str) -> "RequestSpecBuilder":
        self._values["accept"] = accept
        return self

    def with_timeout(self, seconds: float) -> "RequestSpecBuilder":
        self._values["timeout"] = seconds
        return self

    def with_user_agent(self, user_agent: str) -> "RequestSpecBuilder":
        self._values["user_agent"] = user_agent
        return self

    def with_disabled_ssl_certificate_validation(self) -> "RequestSpecBuilder":
        self._values["verify_ssl"] = False
        return self

    def with_json_serializer_settings(
        self, settings: JsonSerializerSettings
    ) -> "RequestSpecBuilder":
        self._values["json_serializer_settings"] = settings
        return self

    def with_xml_serializer_settings(
        self, settings: XmlSerializerSettings
    ) -> "RequestSpecBuilder":
        self._values["xml_serializer_settings"] = settings
        return self

    def build(self) -> ReusableRequestSpec:
        """Freeze the collected values.

        Raises:
            pydantic.ValidationError: A value is out of range, e.g. a port above 65535.
        """
        return ReusableRequestSpec(
            **self._values,
            headers=tuple(self._headers),
            query_params=dict(self._query_params),
        )
