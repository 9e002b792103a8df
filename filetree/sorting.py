# Deterministic ordering for directory listings: directories first,
# then files, each group ordered byte-wise (case-sensitive) by name.

import os

from filetree.models import DirectoryEntry, DirectoryNode


def entry_sort_key(entry) -> tuple[bool, bytes]:
    return (not isinstance(entry, DirectoryEntry), os.fsencode(entry.name))


def sort_entries(node: DirectoryNode) -> None:
    """Sort the immediate children of ``node`` in place."""
    node.children.sort(key=entry_sort_key)


def sort_tree(node: DirectoryNode) -> None:
    sort_entries(node)
    for child in node.children:
        if isinstance(child, DirectoryEntry):
            sort_tree(child.node)
