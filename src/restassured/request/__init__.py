from ._body_encoder import EncodedBody, encode_body
from ._multipart import MultipartPart, MultipartPayload, assemble_multipart
from ._request_specification import RequestSpecification
from ._spec_builder import RequestSpecBuilder, ReusableRequestSpec

__all__ = [
    "RequestSpecification",
    "RequestSpecBuilder",
    "ReusableRequestSpec",
    "EncodedBody",
    "encode_body",
    "MultipartPart",
    "MultipartPayload",
    "assemble_multipart",
]
