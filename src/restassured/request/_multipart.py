import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .._utils.constants import DEFAULT_CONTROL_NAME
from ..models.errors import RequestCreationError

FilePath = Union[str, os.PathLike]
FileField = tuple[str, tuple[str, bytes, str]]


@dataclass(frozen=True)
class MultipartPart:
    """One file attachment of a multipart/form-data request."""

    file_path: FilePath
    control_name: str = DEFAULT_CONTROL_NAME
    content_type: Optional[str] = None


@dataclass(frozen=True)
class MultipartPayload:
    """Files of a multipart request and the boundary shared by all sections."""

    files: list[FileField]
    boundary: str

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


def assemble_multipart(parts: Sequence[MultipartPart]) -> MultipartPayload:
    """Read every attachment and pair it with a freshly generated boundary.

    All paths are checked before any file is read, so a single missing file
    fails the whole request.

    Raises:
        RequestCreationError: A path does not point at an existing file, or
            the file cannot be read.
    """
    for part in parts:
        if not Path(part.file_path).is_file():
            raise RequestCreationError(
                f"Could not find file '{Path(part.file_path).resolve()}'."
            )

    files: list[FileField] = []
    for part in parts:
        path = Path(part.file_path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise RequestCreationError(f"Could not read file '{path.resolve()}': {e}") from e
        media_type = (
            part.content_type
            or mimetypes.guess_type(path.name)[0]
            or "application/octet-stream"
        )
        files.append((part.control_name, (path.name, content, media_type)))

    return MultipartPayload(files=files, boundary=os.urandom(16).hex())
