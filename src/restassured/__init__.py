"""Fluent testing of HTTP APIs.

Build a request with ``given()``, send it with one of the HTTP method calls
and verify the response:

```python
from restassured import given

given().query_param("id", 1).get("http://localhost:9876/posts").then().status_code(200)
```
"""

from ._config import Config
from ._dsl import given
from ._utils import setup_logging
from .models import (
    DeserializationError,
    ExtractionError,
    JsonSerializerSettings,
    RequestCreationError,
    RequestLogLevel,
    RequestSendError,
    ResponseLogLevel,
    ResponseVerificationError,
    RestAssuredError,
    XmlSerializerSettings,
)
from .request import RequestSpecBuilder, RequestSpecification, ReusableRequestSpec
from .response import ExtractableResponse, VerifiableResponse

__all__ = [
    "given",
    "Config",
    "setup_logging",
    "RequestSpecification",
    "RequestSpecBuilder",
    "ReusableRequestSpec",
    "VerifiableResponse",
    "ExtractableResponse",
    "JsonSerializerSettings",
    "XmlSerializerSettings",
    "RequestLogLevel",
    "ResponseLogLevel",
    "RestAssuredError",
    "RequestCreationError",
    "RequestSendError",
    "DeserializationError",
    "ExtractionError",
    "ResponseVerificationError",
]
