# Coarse media categories used by the presentation layer to pick an
# inline viewer or a plain download.

import mimetypes
from enum import Enum

DEFAULT_MIME_TYPE = "application/octet-stream"


class MediaCategory(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    OTHER = "other"


_MAJOR_TYPES = {
    "text": MediaCategory.TEXT,
    "image": MediaCategory.IMAGE,
    "audio": MediaCategory.AUDIO,
    "video": MediaCategory.VIDEO,
}


def guess_mime_type(name: str) -> str:
    """Guess a MIME type from the file extension, falling back to a byte stream."""
    mime_type, _ = mimetypes.guess_type(name, strict=False)
    return mime_type or DEFAULT_MIME_TYPE


def classify(name: str) -> MediaCategory:
    major = guess_mime_type(name).split("/", 1)[0]
    return _MAJOR_TYPES.get(major, MediaCategory.OTHER)
