# Chunked file delivery.
#
# A StreamCursor wraps one open file and hands it out CHUNK_SIZE bytes at a
# time, only when the consumer asks for the next chunk. Under WSGI the
# server pulls a chunk, writes it to the socket, then pulls the next one,
# so memory stays bounded no matter how large the file is.
#
# The cursor owns the file handle. It is closed when the file is
# exhausted, when a read fails, or when the consumer calls close()
# (Werkzeug does this when the client goes away).

import codecs
import logging
import os

from filetree.errors import FileOpenFailure, StreamReadFailure

logger = logging.getLogger(__name__)

CHUNK_SIZE = 256 * 1024

# Only markup delimiters; quotes pass through untouched.
_TEXT_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;"})


def escape_text(text: str) -> str:
    return text.translate(_TEXT_ESCAPES)


class StreamCursor:
    def __init__(self, fileobj, chunk_size: int = CHUNK_SIZE, path: str | None = None):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")

        self._file = fileobj
        self.chunk_size = chunk_size
        self.path = path if path is not None else getattr(fileobj, "name", None)
        self.total_length = os.fstat(fileobj.fileno()).st_size
        self.bytes_emitted = 0
        self._done = False

    def __iter__(self):
        return self

    def __next__(self) -> bytes:
        if self._done:
            raise StopIteration

        try:
            chunk = self._file.read(self.chunk_size)
        except OSError as exc:
            self.close()
            logger.warning(
                "Read failed for %s after %d bytes: %s", self.path, self.bytes_emitted, exc
            )
            raise StreamReadFailure(
                f"Failed to read {self.path}", self.path, self.bytes_emitted
            ) from exc

        if not chunk:
            self.close()
            raise StopIteration

        self.bytes_emitted += len(chunk)
        return chunk

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    @property
    def closed(self) -> bool:
        return self._done

    @property
    def remaining(self) -> int:
        # The file may change underneath us; never report a negative size.
        return max(self.total_length - self.bytes_emitted, 0)

    def size_hint(self) -> tuple[int, int]:
        """Lower and upper bound on the bytes still to come."""
        return 0, self.remaining

    def close(self) -> None:
        if self._done:
            return
        self._done = True
        self._file.close()


def open_file_stream(path: str, chunk_size: int = CHUNK_SIZE) -> StreamCursor:
    try:
        fileobj = open(path, "rb")
    except OSError as exc:
        raise FileOpenFailure(f"Failed to open {path}: {exc.strerror or exc}", path) from exc

    try:
        return StreamCursor(fileobj, chunk_size, path)
    except Exception:
        fileobj.close()
        raise


def escaped_text_chunks(cursor: StreamCursor):
    """
    Yield the cursor's content as text with &, < and > escaped, chunk by chunk.

    Bytes are decoded incrementally as UTF-8 so a character split across
    two chunks is not mangled; invalid sequences become U+FFFD.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    try:
        for chunk in cursor:
            text = decoder.decode(chunk)
            if text:
                yield escape_text(text).encode("utf-8")
        tail = decoder.decode(b"", final=True)
        if tail:
            yield escape_text(tail).encode("utf-8")
    finally:
        cursor.close()
