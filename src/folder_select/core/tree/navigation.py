"""Tree navigation: folder walks, lookup index, descendant items."""

from collections.abc import Iterable, Iterator

from folder_select.models.folder import Folder, Item


def iter_folders(forest: Iterable[Folder]) -> Iterator[Folder]:
    """Yield every folder in the forest, depth-first, parents before children."""
    stack = list(reversed(tuple(forest)))
    while stack:
        folder = stack.pop()
        yield folder
        stack.extend(reversed(folder.children))


def iter_items(forest: Iterable[Folder]) -> Iterator[Item]:
    """Yield every item attached anywhere in the forest."""
    for folder in iter_folders(forest):
        yield from folder.items


def index_folders(forest: Iterable[Folder]) -> dict[int, Folder]:
    """Map folder id to folder for every folder in the forest."""
    return {folder.id: folder for folder in iter_folders(forest)}


def descendant_item_index(forest: Iterable[Folder]) -> dict[int, frozenset[int]]:
    """Compute descendant item ids for every folder in one bottom-up pass."""
    index: dict[int, frozenset[int]] = {}
    # Reverse pre-order visits every child before its parent.
    for folder in reversed(list(iter_folders(forest))):
        ids = {item.id for item in folder.items}
        for child in folder.children:
            ids |= index[child.id]
        index[folder.id] = frozenset(ids)
    return index
