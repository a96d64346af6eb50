"""Selection engine: owns one sorted forest and its selection state."""

from collections.abc import Iterable

from loguru import logger

from folder_select.core.selection import state as transitions
from folder_select.core.selection.state import SelectionState
from folder_select.core.tree.navigation import descendant_item_index, index_folders, iter_items
from folder_select.models.folder import Folder, Item, SelectionStatus

FolderRef = Folder | int

_NO_ITEMS: frozenset[int] = frozenset()


def _folder_id(folder: FolderRef) -> int:
    return folder.id if isinstance(folder, Folder) else folder


class SelectionEngine:
    """Tri-state checkbox selection over a folder forest.

    Truth lives only in the set of selected item ids. Folder status is
    derived from each folder's descendant items, which are computed once
    per engine since the forest does not change during a session.

    Every mutator replaces the state with a new SelectionState; unknown ids
    never raise.
    """

    def __init__(self, forest: Iterable[Folder], state: SelectionState | None = None) -> None:
        self._forest = tuple(forest)
        self._folders = index_folders(self._forest)
        self._descendants = descendant_item_index(self._forest)
        self._items = {item.id: item for item in iter_items(self._forest)}
        self._state = state if state is not None else transitions.initial_state(self._folders)
        logger.debug(
            "Selection engine ready: {} folders, {} items",
            len(self._folders),
            len(self._items),
        )

    @property
    def forest(self) -> tuple[Folder, ...]:
        return self._forest

    @property
    def state(self) -> SelectionState:
        return self._state

    def get_folder(self, folder_id: int) -> Folder | None:
        return self._folders.get(folder_id)

    def get_item(self, item_id: int) -> Item | None:
        return self._items.get(item_id)

    def descendant_item_ids(self, folder: FolderRef) -> frozenset[int]:
        """Items owned by the folder directly or through any descendant folder."""
        return self._descendants.get(_folder_id(folder), _NO_ITEMS)

    # --- Queries (rendering contract) ---

    def folder_status(self, folder: FolderRef) -> SelectionStatus:
        return transitions.folder_status(self._state, self.descendant_item_ids(folder))

    def is_folder_selected(self, folder: FolderRef) -> bool:
        """True iff the folder has descendant items and all of them are selected."""
        return self.folder_status(folder) is SelectionStatus.SELECTED

    def is_folder_indeterminate(self, folder: FolderRef) -> bool:
        """True iff some, but not all, descendant items are selected."""
        return self.folder_status(folder) is SelectionStatus.INDETERMINATE

    def is_expanded(self, folder: FolderRef) -> bool:
        return _folder_id(folder) in self._state.expanded_folder_ids

    def is_item_selected(self, item_id: int) -> bool:
        return item_id in self._state.selected_item_ids

    def get_selected_item_ids(self) -> list[int]:
        return transitions.get_selected_item_ids(self._state)

    def selected_items(self) -> list[Item]:
        """Selected items present in the forest, ordered by id."""
        return [self._items[i] for i in self.get_selected_item_ids() if i in self._items]

    # --- Mutators ---

    def toggle_item_selection(self, item_id: int) -> SelectionState:
        """Flip one item's selection. Ids not in the forest leave the selection unchanged."""
        if item_id not in self._items:
            logger.debug("Item {} is not in the tree", item_id)
            return self._state
        self._state = transitions.toggle_item_selection(self._state, item_id)
        return self._state

    def toggle_folder_selection(
        self, folder_id: int, *, include_subfolders: bool = True
    ) -> SelectionState:
        """Select every descendant item, or deselect them all if already fully selected.

        Args:
            folder_id: Folder to toggle. Unknown ids leave the selection unchanged.
            include_subfolders: When False, only the folder's own items are
                toggled and checked for the fully-selected test.
        """
        if include_subfolders:
            targets = self.descendant_item_ids(folder_id)
        else:
            folder = self._folders.get(folder_id)
            targets = frozenset(i.id for i in folder.items) if folder else _NO_ITEMS
        if not targets:
            logger.debug("Folder {} has no items to toggle", folder_id)
        self._state = transitions.toggle_folder_selection(self._state, targets)
        return self._state

    def clear_and_select_folder(self, folder_id: int) -> SelectionState:
        """Replace the selection with exactly this folder's descendant items."""
        self._state = transitions.select_only(self._state, self.descendant_item_ids(folder_id))
        return self._state

    def clear_selection(self) -> SelectionState:
        self._state = transitions.clear_selection(self._state)
        return self._state

    def toggle_folder_expansion(self, folder_id: int) -> SelectionState:
        self._state = transitions.toggle_folder_expansion(self._state, folder_id)
        return self._state

    def expand_folder(self, folder_id: int) -> SelectionState:
        self._state = transitions.expand_folder(self._state, folder_id)
        return self._state

    def collapse_folder(self, folder_id: int) -> SelectionState:
        self._state = transitions.collapse_folder(self._state, folder_id)
        return self._state

    def expand_all(self) -> SelectionState:
        self._state = transitions.expand_all(self._state, self._folders)
        return self._state

    def collapse_all(self) -> SelectionState:
        self._state = transitions.collapse_all(self._state)
        return self._state
