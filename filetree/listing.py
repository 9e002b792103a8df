# "List directory" as the HTTP layer sees it: validate the target, walk it,
# sort every level and strip the root from every path.
#
# Walks block on filesystem I/O, so request handlers hand them to a small
# bounded thread pool (WalkPool) rather than running them inline.

import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor

from filetree.errors import NotADirectory, TargetNotFound
from filetree.models import DirectoryNode
from filetree.sanitize import sanitize_paths, strip_root
from filetree.sorting import sort_tree
from filetree.walker import walk_directory

logger = logging.getLogger(__name__)


def list_directory(root: str, target: str, recursive: bool = False) -> DirectoryNode:
    """
    Snapshot ``target`` (an absolute path under ``root``).

    The returned tree is sorted at every level and all paths in it are
    relative to ``root``.
    """
    try:
        metadata = os.stat(target)
    except OSError as exc:
        raise TargetNotFound(
            f"Failed to get metadata for {strip_root(target, root)}", target
        ) from exc

    if not stat.S_ISDIR(metadata.st_mode):
        raise NotADirectory(f"{strip_root(target, root)} is not a directory", target)

    node = walk_directory(target, recursive=recursive)
    sort_tree(node)
    sanitize_paths(node, root)
    return node


class WalkPool:
    def __init__(self, workers: int = 2):
        self.workers = max(1, workers)
        self._executor = ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="tree-walk"
        )

    def list_directory(self, root: str, target: str, recursive: bool = False) -> DirectoryNode:
        future = self._executor.submit(list_directory, root, target, recursive)
        return future.result()

    def shutdown(self, wait: bool = True) -> None:
        logger.debug("Shutting down walk pool")
        self._executor.shutdown(wait=wait)
