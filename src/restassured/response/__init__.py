from ._deserializer import deserialize_content, media_type_of
from ._extractable_response import ExtractableResponse
from ._verifiable_response import VerifiableResponse

__all__ = [
    "VerifiableResponse",
    "ExtractableResponse",
    "deserialize_content",
    "media_type_of",
]
