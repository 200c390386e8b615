"""Upload handling: turn uploaded resume files into plain-text resumes.

No document format is parsed here. Every accepted file is decoded as text,
with undecodable bytes replaced, so PDF and DOCX uploads arrive as a lossy
text surrogate.
"""

import uuid
from pathlib import PurePath

from models.requests import ResumeInput

ACCEPTED_EXTENSIONS = frozenset({".pdf", ".txt", ".docx"})


class UnsupportedFileError(ValueError):
    """Raised for uploads whose extension is not accepted."""


def is_accepted(file_name: str) -> bool:
    return PurePath(file_name).suffix.lower() in ACCEPTED_EXTENSIONS


def decode_text(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences. Strips NUL bytes."""
    return data.decode("utf-8", errors="replace").replace("\x00", "").strip()


def new_resume_id() -> str:
    """Short random identifier for an uploaded resume."""
    return uuid.uuid4().hex[:9]


def to_resume(file_name: str, data: bytes) -> ResumeInput:
    """Build a ResumeInput from an uploaded file."""
    if not is_accepted(file_name):
        raise UnsupportedFileError(
            f"Unsupported file type: {file_name!r} "
            f"(accepted: {', '.join(sorted(ACCEPTED_EXTENSIONS))})"
        )
    return ResumeInput(id=new_resume_id(), file_name=file_name, content=decode_text(data))
