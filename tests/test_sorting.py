from filetree.models import DirectoryEntry, DirectoryNode, FileEntry
from filetree.sorting import sort_entries, sort_tree


def d(name, *children):
    return DirectoryEntry(DirectoryNode(name=name, path=name, children=list(children)))


def f(name):
    return FileEntry(name, name)


def names(node):
    return [child.name for child in node.children]


def test_directories_before_files():
    node = DirectoryNode("root", "", [f("a.txt"), d("z"), f("b.txt"), d("m")])
    sort_entries(node)

    assert names(node) == ["m", "z", "a.txt", "b.txt"]
    kinds = [isinstance(child, DirectoryEntry) for child in node.children]
    assert kinds == sorted(kinds, reverse=True)


def test_names_compare_case_sensitive_bytewise():
    node = DirectoryNode("root", "", [f("b"), f("B"), f("a"), f("A"), f("_")])
    sort_entries(node)

    assert names(node) == ["A", "B", "_", "a", "b"]


def test_non_ascii_names_sort_after_ascii():
    node = DirectoryNode("root", "", [f("été"), f("zed"), f("Zed")])
    sort_entries(node)

    assert names(node) == ["Zed", "zed", "été"]


def test_sort_entries_is_shallow():
    inner = d("a", f("y"), f("x"))
    node = DirectoryNode("root", "", [f("b"), inner])
    sort_entries(node)

    assert names(node) == ["a", "b"]
    assert names(inner.node) == ["y", "x"]


def test_sort_tree_orders_every_level():
    inner = d("a", f("y"), d("sub"), f("x"))
    node = DirectoryNode("root", "", [f("b"), inner])
    sort_tree(node)

    assert names(node) == ["a", "b"]
    assert names(inner.node) == ["sub", "x", "y"]


def test_sort_is_deterministic():
    children = [f("c"), d("b"), f("a"), d("a")]
    first = DirectoryNode("root", "", list(children))
    second = DirectoryNode("root", "", list(reversed(children)))
    sort_entries(first)
    sort_entries(second)

    assert names(first) == names(second) == ["a", "b", "a", "c"]
