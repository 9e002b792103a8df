# Rewrites the absolute paths of a snapshot into root-relative ones so
# clients never see the server's on-disk layout.

import os

from filetree.models import DirectoryEntry, DirectoryNode


def strip_root(path: str, root: str) -> str:
    """
    Remove one leading ``root + os.sep`` from ``path``.

    ``root`` itself maps to ``""``. Paths outside ``root`` are returned
    unchanged; this is a best-effort rewrite, not a validation.
    """
    root = root.rstrip(os.sep) or os.sep
    if path == root:
        return ""

    prefix = root if root.endswith(os.sep) else root + os.sep
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def sanitize_paths(node: DirectoryNode, root: str) -> None:
    """Rewrite every path in the tree under ``node`` in place, depth-first."""
    node.path = strip_root(node.path, root)
    for child in node.children:
        if isinstance(child, DirectoryEntry):
            sanitize_paths(child.node, root)
        else:
            child.path = strip_root(child.path, root)
