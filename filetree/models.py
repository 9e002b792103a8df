# In-memory snapshot of a directory tree.
#
# A DirectoryNode owns its children outright. Each child is one of two
# variants: DirectoryEntry (wraps a nested node) or FileEntry (leaf).
#
# Serialized shape:
#   {"name": ..., "path": ..., "entries": [
#       {"Directory": {"name": ..., "path": ..., "entries": [...]}},
#       {"File": {"name": ..., "path": ..., "category": ...}},
#   ]}

from dataclasses import dataclass, field
from typing import Union


@dataclass
class DirectoryNode:
    name: str
    path: str
    children: list["Entry"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "entries": [child.to_dict() for child in self.children],
        }


@dataclass
class DirectoryEntry:
    node: DirectoryNode

    @property
    def name(self) -> str:
        return self.node.name

    @property
    def path(self) -> str:
        return self.node.path

    def to_dict(self) -> dict:
        return {"Directory": self.node.to_dict()}


@dataclass
class FileEntry:
    name: str
    path: str
    category: str = "other"

    def to_dict(self) -> dict:
        return {
            "File": {
                "name": self.name,
                "path": self.path,
                "category": self.category,
            }
        }


Entry = Union[DirectoryEntry, FileEntry]
