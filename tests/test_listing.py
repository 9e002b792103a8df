import os

import pytest

from filetree.errors import NotADirectory, TargetNotFound
from filetree.listing import WalkPool, list_directory
from filetree.models import DirectoryEntry


def all_paths(node):
    yield node.path
    for child in node.children:
        if isinstance(child, DirectoryEntry):
            yield from all_paths(child.node)
        else:
            yield child.path


def test_list_root_recursive(sample_tree):
    root = str(sample_tree)
    node = list_directory(root, root, recursive=True)

    assert node.to_dict() == {
        "name": "root",
        "path": "",
        "entries": [
            {
                "Directory": {
                    "name": "a",
                    "path": "a",
                    "entries": [
                        {"File": {"name": "c.txt", "path": os.path.join("a", "c.txt"), "category": "text"}},
                    ],
                }
            },
            {"File": {"name": "b.txt", "path": "b.txt", "category": "text"}},
        ],
    }


def test_list_subdirectory(sample_tree):
    root = str(sample_tree)
    node = list_directory(root, os.path.join(root, "a"))

    assert node.name == "a"
    assert node.path == "a"
    assert [c.path for c in node.children] == [os.path.join("a", "c.txt")]


def test_no_path_keeps_root_prefix(sample_tree):
    (sample_tree / "a" / "deeper").mkdir()
    (sample_tree / "a" / "deeper" / "x.bin").write_bytes(b"\x00")
    root = str(sample_tree)
    node = list_directory(root, root, recursive=True)

    assert not any(p.startswith(root) for p in all_paths(node))


def test_missing_target(sample_tree):
    root = str(sample_tree)
    with pytest.raises(TargetNotFound) as excinfo:
        list_directory(root, os.path.join(root, "nope"))
    assert root not in str(excinfo.value)


def test_target_is_a_file(sample_tree):
    root = str(sample_tree)
    with pytest.raises(NotADirectory):
        list_directory(root, os.path.join(root, "b.txt"))


def test_walk_pool_runs_listing(sample_tree):
    root = str(sample_tree)
    pool = WalkPool(workers=2)
    try:
        node = pool.list_directory(root, root, recursive=True)
        with pytest.raises(NotADirectory):
            pool.list_directory(root, os.path.join(root, "b.txt"))
    finally:
        pool.shutdown()

    assert node.to_dict() == list_directory(root, root, recursive=True).to_dict()


def test_walk_pool_has_at_least_one_worker():
    pool = WalkPool(workers=0)
    try:
        assert pool.workers == 1
    finally:
        pool.shutdown()
