from logging import getLogger
from typing import Any, Iterable, Mapping, Optional, Union

from httpx import URL, AsyncClient, InvalidURL, Request

from .._config import Config
from .._services._dispatcher import HttpRequestProcessor, run_coroutine
from .._utils import PreparedRequest, get_httpx_client_kwargs
from .._utils.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_CONTROL_NAME,
    DEFAULT_ENCODING,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
)
from ..models.errors import RequestCreationError
from ..models.log_levels import RequestLogLevel
from ..models.settings import JsonSerializerSettings, XmlSerializerSettings
from ..response import VerifiableResponse
from ._body_encoder import encode_body
from ._multipart import FilePath, MultipartPart, assemble_multipart
from ._spec_builder import ReusableRequestSpec

logger = getLogger(__name__)

_NO_BODY = object()


class RequestSpecification:
    """Fluent builder for a single HTTP request.

    Every configuration method returns the same instance so calls can be
    chained. Nothing is validated or sent until one of the HTTP method calls
    (``get``, ``post``, ``put``, ``patch``, ``delete`` or their ``_async``
    variants) finalizes the request.

    The specification owns the httpx client used for its request. The client
    is created when the request is sent and released right after, on every
    exit path. ``close()`` may be called any number of times, and the
    specification can be used as a (sync or async) context manager.

    Examples:
        ```python
        from restassured import given

        (
            given()
            .header("X-Correlation-Id", "42")
            .query_param("page", 2)
            .body({"title": "My post title"})
            .when()
            .post("https://api.example.com/posts")
            .then()
            .status_code(201)
        )
        ```
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self._config = config or Config.from_env()
        self._headers: list[tuple[str, str]] = []
        self._query_params: dict[str, str] = {}
        self._cookies: dict[str, str] = {}
        self._content_type: Optional[str] = None
        self._content_encoding: Optional[str] = None
        self._accept: Optional[str] = None
        self._user_agent: Optional[str] = None
        self._timeout: Optional[float] = None
        self._verify_ssl: bool = True
        self._json_settings: Optional[JsonSerializerSettings] = None
        self._xml_settings: Optional[XmlSerializerSettings] = None
        self._body: Any = _NO_BODY
        self._multipart_parts: list[MultipartPart] = []
        self._form_data: dict[str, Any] = {}
        self._reusable_spec = ReusableRequestSpec()
        self._log_level = RequestLogLevel.NONE

        self._client: Optional[AsyncClient] = None
        self._sent = False
        self._closed = False

    # Syntactic sugar

    def given(self) -> "RequestSpecification":
        return self

    def when(self) -> "RequestSpecification":
        """Syntactic sugar marking the start of the 'act' part of a test."""
        return self

    def and_(self) -> "RequestSpecification":
        return self

    # Configuration

    def spec(self, reusable_spec: ReusableRequestSpec) -> "RequestSpecification":
        """Apply shared defaults from a ``ReusableRequestSpec``."""
        self._reusable_spec = reusable_spec
        return self

    def header(
        self, name: str, value: Union[Any, Iterable[Any]]
    ) -> "RequestSpecification":
        """Add a request header.

        Adding the same header twice keeps both values. A list or tuple adds
        one value per item. ``Content-Type`` is treated as a call to
        ``content_type``.
        """
        if name.lower() == HEADER_CONTENT_TYPE.lower():
            return self.content_type(str(value))

        values = value if isinstance(value, (list, tuple)) else [value]
        self._headers.extend((name, str(item)) for item in values)
        return self

    def headers(self, headers: Mapping[str, Any]) -> "RequestSpecification":
        for name, value in headers.items():
            self.header(name, value)
        return self

    def content_type(self, content_type: str) -> "RequestSpecification":
        """Set the Content-Type of the request body; ``application/json`` by default.

        The content type also selects how an object body is serialized: JSON
        when it contains ``json``, XML when it contains ``xml``.
        """
        self._content_type = content_type
        return self

    def content_encoding(self, encoding: str) -> "RequestSpecification":
        """Set the character encoding of text bodies; ``utf-8`` by default."""
        self._content_encoding = encoding
        return self

    def accept(self, accept: str) -> "RequestSpecification":
        self._accept = accept
        return self

    def query_param(self, name: str, value: Any) -> "RequestSpecification":
        """Add a query parameter. A later value for the same name replaces the earlier one."""
        self._query_params[name] = str(value)
        return self

    def query_params(self, params: Mapping[str, Any]) -> "RequestSpecification":
        for name, value in params.items():
            self.query_param(name, value)
        return self

    def cookie(self, name: str, value: Any) -> "RequestSpecification":
        self._cookies[name] = str(value)
        return self

    def user_agent(self, user_agent: str) -> "RequestSpecification":
        self._user_agent = user_agent
        return self

    def timeout(self, seconds: float) -> "RequestSpecification":
        self._timeout = seconds
        return self

    def disable_ssl_certificate_validation(self) -> "RequestSpecification":
        self._verify_ssl = False
        return self

    def body(self, body: Any) -> "RequestSpecification":
        """Set the request body.

        Strings and bytes are sent as they are. Any other value is serialized
        according to the effective content type when the request is sent.
        Calling ``body`` again replaces the previous body.
        """
        self._body = body
        return self

    def multi_part(
        self,
        control_name_or_path: Union[str, FilePath],
        file_path: Optional[FilePath] = None,
        content_type: Optional[str] = None,
    ) -> "RequestSpecification":
        """Attach a file as multipart/form-data.

        ``multi_part(path)`` uses the control name ``file``;
        ``multi_part(control_name, path)`` sets it explicitly. The file is
        looked up when the request is sent, before anything goes on the wire.
        """
        if file_path is None:
            part = MultipartPart(
                file_path=control_name_or_path,
                control_name=DEFAULT_CONTROL_NAME,
                content_type=content_type,
            )
        else:
            part = MultipartPart(
                file_path=file_path,
                control_name=str(control_name_or_path),
                content_type=content_type,
            )
        self._multipart_parts.append(part)
        return self

    def form_data(self, fields: Mapping[str, Any]) -> "RequestSpecification":
        """Add form fields, sent url-encoded or alongside multipart files."""
        self._form_data.update(fields)
        return self

    def json_serializer_settings(
        self, settings: JsonSerializerSettings
    ) -> "RequestSpecification":
        """Settings for JSON bodies; they override those of a reusable spec."""
        self._json_settings = settings
        return self

    def xml_serializer_settings(
        self, settings: XmlSerializerSettings
    ) -> "RequestSpecification":
        """Settings for XML bodies; they override those of a reusable spec."""
        self._xml_settings = settings
        return self

    def log(self, level: RequestLogLevel = RequestLogLevel.ALL) -> "RequestSpecification":
        """Write the request to the ``restassured`` logger when it is sent."""
        self._log_level = RequestLogLevel(level)
        return self

    # HTTP methods

    def get(self, endpoint: str) -> VerifiableResponse:
        return self._send("GET", endpoint)

    def post(self, endpoint: str) -> VerifiableResponse:
        return self._send("POST", endpoint)

    def put(self, endpoint: str) -> VerifiableResponse:
        return self._send("PUT", endpoint)

    def patch(self, endpoint: str) -> VerifiableResponse:
        return self._send("PATCH", endpoint)

    def delete(self, endpoint: str) -> VerifiableResponse:
        return self._send("DELETE", endpoint)

    async def get_async(self, endpoint: str) -> VerifiableResponse:
        return await self._send_async("GET", endpoint)

    async def post_async(self, endpoint: str) -> VerifiableResponse:
        return await self._send_async("POST", endpoint)

    async def put_async(self, endpoint: str) -> VerifiableResponse:
        return await self._send_async("PUT", endpoint)

    async def patch_async(self, endpoint: str) -> VerifiableResponse:
        return await self._send_async("PATCH", endpoint)

    async def delete_async(self, endpoint: str) -> VerifiableResponse:
        return await self._send_async("DELETE", endpoint)

    # Resource handling

    def close(self) -> None:
        """Release the httpx client, if one was created. Idempotent."""
        if self._closed:
            return
        self._closed = True
        client, self._client = self._client, None
        if client is not None and not client.is_closed:
            run_coroutine(client.aclose())

    async def aclose(self) -> None:
        """Release the httpx client, if one was created. Idempotent."""
        if self._closed:
            return
        self._closed = True
        client, self._client = self._client, None
        if client is not None and not client.is_closed:
            await client.aclose()

    def __enter__(self) -> "RequestSpecification":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "RequestSpecification":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    # Finalization

    def prepare(self, method: str, endpoint: str) -> PreparedRequest:
        """Validate the collected configuration and build the wire request.

        This is where defaults and reusable-spec values are resolved, the
        body is serialized and multipart files are read. No network I/O
        happens here.

        Raises:
            RequestCreationError: The request cannot be built.
        """
        if self._closed:
            raise RequestCreationError("This request specification has been closed")
        if self._sent:
            raise RequestCreationError("This request specification has already been sent")

        reusable = self._reusable_spec
        has_body = self._body is not _NO_BODY
        if has_body and (self._multipart_parts or self._form_data):
            raise RequestCreationError(
                "A request body cannot be combined with multipart or form data; "
                "use either body() or multi_part()/form_data()"
            )

        headers = list(reusable.headers) + self._headers
        accept = self._accept or reusable.accept
        if accept:
            headers.append((HEADER_ACCEPT, accept))
        user_agent = self._user_agent or reusable.user_agent
        if user_agent:
            headers.append((HEADER_USER_AGENT, user_agent))

        content: Optional[bytes] = None
        data: Optional[dict[str, Any]] = None
        files: Optional[list[Any]] = None

        if self._multipart_parts:
            payload = assemble_multipart(self._multipart_parts)
            files = payload.files
            data = dict(self._form_data) or None
            headers.append((HEADER_CONTENT_TYPE, payload.content_type))
        elif self._form_data:
            data = dict(self._form_data)
        elif has_body:
            encoded = encode_body(
                self._body,
                content_type=self._content_type
                or reusable.content_type
                or DEFAULT_CONTENT_TYPE,
                encoding=self._content_encoding
                or reusable.content_encoding
                or DEFAULT_ENCODING,
                json_settings=self._json_settings or reusable.json_serializer_settings,
                xml_settings=self._xml_settings or reusable.xml_serializer_settings,
            )
            content = encoded.content
            headers.append((HEADER_CONTENT_TYPE, encoded.content_type))

        timeout = self._timeout
        if timeout is None:
            timeout = reusable.timeout if reusable.timeout is not None else self._config.timeout

        return PreparedRequest(
            method=method,
            url=self._resolve_url(endpoint),
            params={**reusable.query_params, **self._query_params},
            headers=headers,
            content=content,
            data=data,
            files=files,
            cookies=dict(self._cookies),
            timeout=timeout,
            verify_ssl=self._verify_ssl and reusable.verify_ssl and self._config.verify_ssl,
            follow_redirects=self._config.follow_redirects,
            ca_bundle=self._config.ca_bundle,
        )

    def _resolve_url(self, endpoint: str) -> str:
        try:
            url = URL(endpoint)
            if url.is_absolute_url:
                return str(url)

            reusable = self._reusable_spec
            base_uri = reusable.base_uri or self._config.base_uri
            if not base_uri:
                raise RequestCreationError(
                    f"Endpoint '{endpoint}' is not an absolute URL and no base URI is configured"
                )

            base = URL(base_uri)
            if reusable.port is not None:
                base = base.copy_with(port=reusable.port)
            segments = [
                segment.strip("/")
                for segment in (base.path, reusable.base_path or "", url.path)
                if segment.strip("/")
            ]
            resolved = base.copy_with(path="/" + "/".join(segments))
            if url.query:
                resolved = resolved.copy_with(query=url.query)
            return str(resolved)
        except InvalidURL as e:
            raise RequestCreationError(f"Invalid endpoint '{endpoint}': {e}") from e

    def _open(self, prepared: PreparedRequest) -> tuple[AsyncClient, Request]:
        self._sent = True
        client = self._client = AsyncClient(
            **get_httpx_client_kwargs(
                verify_ssl=prepared.verify_ssl,
                follow_redirects=prepared.follow_redirects,
                ca_bundle=prepared.ca_bundle,
            ),
            cookies=prepared.cookies,
        )
        try:
            request = client.build_request(
                prepared.method,
                prepared.url,
                params=prepared.params or None,
                headers=prepared.headers,
                content=prepared.content,
                data=prepared.data,
                files=prepared.files,
                timeout=prepared.timeout,
            )
        except (InvalidURL, ValueError) as e:
            raise RequestCreationError(f"Unable to build request: {e}") from e

        self._log_request(request)
        return client, request

    def _processor(self, client: AsyncClient) -> HttpRequestProcessor:
        return HttpRequestProcessor(
            client,
            json_settings=self._json_settings or self._reusable_spec.json_serializer_settings,
            xml_settings=self._xml_settings or self._reusable_spec.xml_serializer_settings,
        )

    def _send(self, method: str, endpoint: str) -> VerifiableResponse:
        prepared = self.prepare(method, endpoint)
        try:
            client, request = self._open(prepared)
            return self._processor(client).send(request)
        finally:
            self.close()

    async def _send_async(self, method: str, endpoint: str) -> VerifiableResponse:
        prepared = self.prepare(method, endpoint)
        try:
            client, request = self._open(prepared)
            return await self._processor(client).send_async(request)
        finally:
            await self.aclose()

    def _log_request(self, request: Request) -> None:
        if self._log_level == RequestLogLevel.NONE:
            return

        logger.info(f"Request: {request.method} {request.url}")
        if self._log_level in (RequestLogLevel.HEADERS, RequestLogLevel.ALL):
            for name, value in request.headers.multi_items():
                logger.info(f"{name}: {value}")
        if self._log_level in (RequestLogLevel.BODY, RequestLogLevel.ALL):
            body = request.read()
            if body:
                logger.info(body.decode(self._content_encoding or DEFAULT_ENCODING, errors="replace"))
