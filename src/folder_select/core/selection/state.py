"""Immutable selection state and the transitions that replace it."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from folder_select.models.folder import SelectionStatus


@dataclass(frozen=True)
class SelectionState:
    """Selected leaf item ids and expanded folder ids.

    Folder selection is never stored; it is derived from
    ``selected_item_ids`` and the tree shape.
    """

    selected_item_ids: frozenset[int] = frozenset()
    expanded_folder_ids: frozenset[int] = frozenset()


def initial_state(folder_ids: Iterable[int]) -> SelectionState:
    """Fresh state after a load: nothing selected, every folder expanded."""
    return SelectionState(expanded_folder_ids=frozenset(folder_ids))


def toggle_item_selection(state: SelectionState, item_id: int) -> SelectionState:
    return replace(state, selected_item_ids=state.selected_item_ids ^ {item_id})


def toggle_folder_selection(state: SelectionState, target_ids: frozenset[int]) -> SelectionState:
    """Deselect ``target_ids`` if all are selected, otherwise select all of them.

    An empty target set leaves the state unchanged.
    """
    if not target_ids:
        return state
    if target_ids <= state.selected_item_ids:
        return replace(state, selected_item_ids=state.selected_item_ids - target_ids)
    return replace(state, selected_item_ids=state.selected_item_ids | target_ids)


def clear_selection(state: SelectionState) -> SelectionState:
    return replace(state, selected_item_ids=frozenset())


def select_only(state: SelectionState, item_ids: Iterable[int]) -> SelectionState:
    return replace(state, selected_item_ids=frozenset(item_ids))


def toggle_folder_expansion(state: SelectionState, folder_id: int) -> SelectionState:
    return replace(state, expanded_folder_ids=state.expanded_folder_ids ^ {folder_id})


def expand_folder(state: SelectionState, folder_id: int) -> SelectionState:
    return replace(state, expanded_folder_ids=state.expanded_folder_ids | {folder_id})


def collapse_folder(state: SelectionState, folder_id: int) -> SelectionState:
    return replace(state, expanded_folder_ids=state.expanded_folder_ids - {folder_id})


def expand_all(state: SelectionState, folder_ids: Iterable[int]) -> SelectionState:
    return replace(state, expanded_folder_ids=frozenset(folder_ids))


def collapse_all(state: SelectionState) -> SelectionState:
    return replace(state, expanded_folder_ids=frozenset())


def folder_status(state: SelectionState, descendant_ids: frozenset[int]) -> SelectionStatus:
    """Classify a folder from its descendant item ids.

    A folder with no descendant items is always unselected.
    """
    selected_count = len(descendant_ids & state.selected_item_ids)
    if selected_count == 0:
        return SelectionStatus.UNSELECTED
    if selected_count == len(descendant_ids):
        return SelectionStatus.SELECTED
    return SelectionStatus.INDETERMINATE


def is_folder_selected(state: SelectionState, descendant_ids: frozenset[int]) -> bool:
    return folder_status(state, descendant_ids) is SelectionStatus.SELECTED


def is_folder_indeterminate(state: SelectionState, descendant_ids: frozenset[int]) -> bool:
    return folder_status(state, descendant_ids) is SelectionStatus.INDETERMINATE


def get_selected_item_ids(state: SelectionState) -> list[int]:
    """Selected item ids in ascending order."""
    return sorted(state.selected_item_ids)
