"""Tests for the pure selection state transitions."""

import pytest

from folder_select.core.selection.state import (
    SelectionState,
    clear_selection,
    collapse_folder,
    expand_folder,
    folder_status,
    get_selected_item_ids,
    initial_state,
    toggle_folder_expansion,
    toggle_folder_selection,
    toggle_item_selection,
)
from folder_select.models.folder import SelectionStatus


def test_initial_state_expands_every_folder() -> None:
    state = initial_state([1, 2, 3])
    assert state.selected_item_ids == frozenset()
    assert state.expanded_folder_ids == {1, 2, 3}


def test_state_is_frozen() -> None:
    state = SelectionState()
    with pytest.raises(AttributeError):
        state.selected_item_ids = frozenset({1})  # type: ignore[misc]


def test_toggle_item_returns_new_state() -> None:
    before = SelectionState()
    after = toggle_item_selection(before, 7)
    assert after.selected_item_ids == {7}
    assert before.selected_item_ids == frozenset()
    assert toggle_item_selection(after, 7) == before


def test_toggle_folder_selects_all_when_partially_selected() -> None:
    state = SelectionState(selected_item_ids=frozenset({1, 99}))
    after = toggle_folder_selection(state, frozenset({1, 2, 3}))
    assert after.selected_item_ids == {1, 2, 3, 99}


def test_toggle_folder_deselects_all_when_fully_selected() -> None:
    state = SelectionState(selected_item_ids=frozenset({1, 2, 3, 99}))
    after = toggle_folder_selection(state, frozenset({1, 2, 3}))
    assert after.selected_item_ids == {99}


def test_toggle_folder_with_no_targets_is_unchanged() -> None:
    state = SelectionState(selected_item_ids=frozenset({5}))
    assert toggle_folder_selection(state, frozenset()) is state


def test_clear_selection_keeps_expansion() -> None:
    state = SelectionState(frozenset({1, 2}), frozenset({4}))
    cleared = clear_selection(state)
    assert get_selected_item_ids(cleared) == []
    assert cleared.expanded_folder_ids == {4}


def test_expansion_does_not_touch_selection() -> None:
    state = SelectionState(frozenset({1}), frozenset())
    state = expand_folder(state, 4)
    state = toggle_folder_expansion(state, 5)
    assert state.expanded_folder_ids == {4, 5}
    state = collapse_folder(toggle_folder_expansion(state, 5), 4)
    assert state.expanded_folder_ids == frozenset()
    assert state.selected_item_ids == {1}


@pytest.mark.parametrize(
    ("selected", "expected"),
    [
        (set(), SelectionStatus.UNSELECTED),
        ({1}, SelectionStatus.INDETERMINATE),
        ({1, 2}, SelectionStatus.SELECTED),
        ({3}, SelectionStatus.UNSELECTED),
    ],
)
def test_folder_status_partitions(selected: set[int], expected: SelectionStatus) -> None:
    state = SelectionState(selected_item_ids=frozenset(selected))
    assert folder_status(state, frozenset({1, 2})) is expected


def test_folder_without_items_is_unselected() -> None:
    state = SelectionState(selected_item_ids=frozenset({1}))
    assert folder_status(state, frozenset()) is SelectionStatus.UNSELECTED


def test_selected_ids_are_ascending() -> None:
    state = SelectionState(selected_item_ids=frozenset({30, 2, 11}))
    assert get_selected_item_ids(state) == [2, 11, 30]
