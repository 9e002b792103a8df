# Failures raised by the snapshot and streaming core.
# Every error keeps the offending path so the HTTP layer can decide
# what (if anything) to show the client.


class FileTreeError(Exception):
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class TargetNotFound(FileTreeError):
    """The initial metadata lookup failed."""


class NotADirectory(FileTreeError):
    """The target exists but a directory was required."""


class PermissionOrReadFailure(FileTreeError):
    """The top-level directory could not be read."""


class FileOpenFailure(FileTreeError):
    """The file could not be opened for streaming."""


class StreamReadFailure(FileTreeError):
    def __init__(self, message: str, path: str | None = None, bytes_emitted: int = 0):
        super().__init__(message, path)
        self.bytes_emitted = bytes_emitted
