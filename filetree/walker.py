# Reads a directory (one level, or the whole subtree) into a DirectoryNode.
#
# Traversal is best effort:
#   - a child whose metadata can't be read is reported as a file
#   - an unreadable nested directory becomes an empty node
#   - only failing to read the starting directory raises
#
# Recursive walks follow symlinks, so the canonical paths of the current
# ancestor chain are tracked and a directory that loops back onto one of
# them is emitted without children.

import logging
import os

from filetree.classify import classify
from filetree.errors import NotADirectory, PermissionOrReadFailure, TargetNotFound
from filetree.models import DirectoryEntry, DirectoryNode, FileEntry

logger = logging.getLogger(__name__)


def node_name(path: str) -> str:
    return os.path.basename(path.rstrip(os.sep)) or path


def walk_directory(path: str, recursive: bool = False) -> DirectoryNode:
    """
    Snapshot the directory at ``path`` (absolute).

    Raises TargetNotFound, NotADirectory or PermissionOrReadFailure when
    ``path`` itself can't be listed.
    """
    root = DirectoryNode(name=node_name(path), path=path)
    ancestors = frozenset([os.path.realpath(path)])

    try:
        root.children = _read_children(path, recursive, ancestors)
    except FileNotFoundError as exc:
        raise TargetNotFound(f"{path} does not exist", path) from exc
    except NotADirectoryError as exc:
        raise NotADirectory(f"{path} is not a directory", path) from exc
    except OSError as exc:
        raise PermissionOrReadFailure(f"Failed to read {path}: {exc.strerror or exc}", path) from exc

    return root


def _read_children(directory: str, recursive: bool, ancestors: frozenset) -> list:
    children = []

    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False

            if not is_dir:
                children.append(FileEntry(entry.name, entry.path, classify(entry.name).value))
                continue

            node = DirectoryNode(name=entry.name, path=entry.path)
            if recursive:
                node.children = _descend(entry.path, ancestors)
            children.append(DirectoryEntry(node))

    return children


def _descend(path: str, ancestors: frozenset) -> list:
    canonical = os.path.realpath(path)
    if canonical in ancestors:
        logger.debug("Not descending into %s: it loops back to %s", path, canonical)
        return []

    try:
        return _read_children(path, True, ancestors | {canonical})
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return []
