import pytest

from dstructs.tree import Tree, TreeNode, main


def _sample():
    tree = Tree("A")
    for parent, child in [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")]:
        tree.add_child(parent, child)
    return tree


def test_preorder_visits_parents_before_children():
    assert list(_sample().preorder()) == [
        (0, "A"), (1, "B"), (2, "D"), (2, "E"), (1, "C"), (2, "F"),
    ]


def test_format_indents_by_depth():
    assert _sample().format() == "A\n  B\n    D\n    E\n  C\n    F"


def test_find_returns_node_with_parent_link():
    tree = _sample()
    node = tree.find("E")
    assert node.data == "E"
    assert node.parent.data == "B"
    assert tree.find("Z") is None


def test_add_child_to_missing_parent_raises():
    tree = _sample()
    with pytest.raises(KeyError):
        tree.add_child("Z", "Y")


def test_remove_drops_whole_subtree():
    tree = _sample()
    tree.remove("B")
    assert [data for _, data in tree.preorder()] == ["A", "C", "F"]
    assert tree.find("D") is None


def test_remove_root_is_refused():
    tree = _sample()
    with pytest.raises(ValueError):
        tree.remove("A")
    assert len(list(tree.preorder())) == 6


def test_remove_missing_raises():
    with pytest.raises(KeyError):
        _sample().remove("Q")


def test_node_add_child_accepts_node_or_data():
    root = TreeNode(1)
    wrapped = root.add_child(2)
    given = TreeNode(3)
    returned = root.add_child(given)
    assert returned is given
    assert [child.data for child in root.children] == [2, 3]
    assert wrapped.parent is root and given.parent is root


def test_node_remove_child_detaches():
    root = TreeNode(1)
    child = root.add_child(2)
    grandchild = child.add_child(3)
    root.remove_child(child)
    assert root.children == []
    assert child.parent is None
    assert grandchild.parent is None


def test_node_remove_non_child_raises():
    root = TreeNode(1)
    with pytest.raises(ValueError):
        root.remove_child(TreeNode(2))


def test_main_prints_tree(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "A\n  B\n    D\n    E\n  C\n    F\n"