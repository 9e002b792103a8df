from dataclasses import dataclass
from pathlib import Path
import logging
import os

# Defaults; every one of these can be overridden on the command line.
ROOT_DIR = os.environ.get("FILE_SERVER_ROOT", os.getcwd())
HOST = os.environ.get("FILE_SERVER_HOST", "127.0.0.1")
PORT = int(os.environ.get("FILE_SERVER_PORT", "8080"))
LOG_LEVEL = os.environ.get("FILE_SERVER_LOG_LEVEL", "info")
WORKERS = int(os.environ.get("FILE_SERVER_WORKERS", "2"))

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class ServerConfig:
    base_dir: str
    host: str = HOST
    port: int = PORT
    log_level: int = logging.INFO
    workers: int = WORKERS


def parse_log_level(name: str | None) -> int:
    """Map a level name to a logging level; anything unknown means INFO."""
    return LOG_LEVELS.get((name or "").strip().lower(), logging.INFO)


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def resolve_root(path_str) -> str:
    """Canonical absolute form of the served directory."""
    return os.path.realpath(os.path.abspath(os.path.expanduser(str(path_str))))


def safe_path(root: str, path_str: str) -> str:
    """
    Resolve a client-supplied relative path safely within ``root`` to
    prevent directory traversal.
    """
    requested = Path(path_str or "")
    if requested.is_absolute():
        raise ValueError("Invalid path: absolute paths are not allowed")

    resolved = os.path.realpath(os.path.join(root, requested))

    # Ensure the resolved path is within root
    if os.path.commonpath([root, resolved]) != root:
        raise ValueError("Invalid path: directory traversal attempt")

    return resolved
