"""Tests for recursive name sorting of the forest."""

from folder_select.core.selection.engine import SelectionEngine
from folder_select.core.tree.builder import build_forest
from folder_select.core.tree.sorter import name_sort_key, sort_forest
from folder_select.models.folder import Folder, Item


def test_roots_ordered_by_name() -> None:
    forest = build_forest(
        [Folder(id=1, name="B", parent=None), Folder(id=2, name="A", parent=None)],
        [Item(id=10, name="x", folder_id=1), Item(id=11, name="y", folder_id=2)],
    )
    assert [f.id for f in sort_forest(forest)] == [2, 1]


def test_sort_applies_at_every_depth() -> None:
    forest = build_forest(
        [
            Folder(id=1, name="root", parent=None),
            Folder(id=2, name="mid", parent=1),
            Folder(id=3, name="zeta", parent=2),
            Folder(id=4, name="alpha", parent=2),
        ],
        [
            Item(id=10, name="b", folder_id=3),
            Item(id=11, name="a", folder_id=3),
        ],
    )
    (root,) = sort_forest(forest)
    mid = root.children[0]
    assert [c.name for c in mid.children] == ["alpha", "zeta"]
    assert [i.name for i in mid.children[1].items] == ["a", "b"]


def test_sort_is_case_insensitive_with_lowercase_first() -> None:
    names = ["banana", "Apple", "apple", "Banana", "cherry"]
    assert sorted(names, key=name_sort_key) == ["apple", "Apple", "banana", "Banana", "cherry"]


def test_sort_groups_accented_letters_with_base_letter() -> None:
    names = ["zebra", "émile", "eve"]
    assert sorted(names, key=name_sort_key) == ["émile", "eve", "zebra"]


def test_sort_is_stable_for_equal_names() -> None:
    forest = build_forest(
        [
            Folder(id=1, name="same", parent=None),
            Folder(id=2, name="other", parent=None),
            Folder(id=3, name="same", parent=None),
        ],
        [],
    )
    assert [f.id for f in sort_forest(forest)] == [2, 1, 3]


def test_sort_is_idempotent(engine: SelectionEngine) -> None:
    once = engine.forest
    assert sort_forest(once) == once


def test_sample_forest_is_sorted(engine: SelectionEngine) -> None:
    roots = engine.forest
    assert [f.name for f in roots] == ["Personal", "Projects"]
    projects = roots[1]
    assert [c.name for c in projects.children] == ["Active", "archive"]
    assert [i.name for i in projects.children[1].items] == ["2018 report", "2019 report"]


def test_sort_orders_punctuation_before_digits_before_letters() -> None:
    names = ["ax", "1x", "_x", "~x", "Bx", "[x"]
    ordered = sorted(names, key=name_sort_key)
    assert ordered[-2:] == ["ax", "Bx"]
    assert ordered[-3] == "1x"
    assert set(ordered[:3]) == {"_x", "~x", "[x"}


def test_sort_handles_deep_chain() -> None:
    depth = 3000
    folders = [Folder(id=1, name="f1", parent=None)]
    folders.extend(Folder(id=i, name=f"f{i}", parent=i - 1) for i in range(2, depth + 1))

    (root,) = sort_forest(build_forest(folders, [Item(id=10, name="x", folder_id=depth)]))

    node, levels = root, 1
    while node.children:
        node = node.children[0]
        levels += 1
    assert levels == depth
    assert [i.id for i in node.items] == [10]
