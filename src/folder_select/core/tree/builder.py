"""Nest flat folder and item records into a rooted forest."""

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, replace

from loguru import logger

from folder_select.models.folder import Folder, Item


@dataclass(frozen=True)
class BuildStats:
    """Summary of a forest build."""

    roots: int
    folders_attached: int
    items_attached: int
    orphan_folders: int
    orphan_items: int


def build_forest_with_stats(
    folders: Iterable[Folder], items: Iterable[Item]
) -> tuple[tuple[Folder, ...], BuildStats]:
    """Build the forest and report how many records were attached or dropped.

    Args:
        folders: Flat folder records, in response order.
        items: Flat item records, in response order.

    Returns:
        Tuple of (root folders in first-seen order, BuildStats).
    """
    folders_by_id: dict[int, Folder] = {}
    child_ids: dict[int, list[int]] = {}
    root_ids: list[int] = []

    for folder in folders:
        if folder.id in folders_by_id:
            logger.debug("Dropping duplicate folder id {}", folder.id)
            continue
        folders_by_id[folder.id] = folder

    for folder in folders_by_id.values():
        if folder.parent is None:
            root_ids.append(folder.id)
        else:
            child_ids.setdefault(folder.parent, []).append(folder.id)

    # BFS from the roots. Folders with a missing parent, or caught in a
    # parent cycle, are never reached.
    order: list[int] = []
    todo: deque[int] = deque(root_ids)
    while todo:
        folder_id = todo.popleft()
        order.append(folder_id)
        todo.extend(child_ids.get(folder_id, ()))
    reachable = set(order)

    items_by_folder: dict[int, list[Item]] = {}
    seen_items: set[int] = set()
    orphan_items = 0
    for item in items:
        if item.id in seen_items:
            logger.debug("Dropping duplicate item id {}", item.id)
            continue
        seen_items.add(item.id)
        if item.folder_id not in reachable:
            logger.debug("Dropping item {}: folder {} not in tree", item.id, item.folder_id)
            orphan_items += 1
            continue
        items_by_folder.setdefault(item.folder_id, []).append(item)

    orphan_folders = len(folders_by_id) - len(reachable)
    if orphan_folders:
        orphan_ids = sorted(set(folders_by_id) - reachable)
        logger.debug("Dropping orphaned folders: {!r}", orphan_ids)

    # Children always come after their parent in BFS order, so assembling
    # in reverse finishes every child before its parent needs it.
    assembled: dict[int, Folder] = {}
    for folder_id in reversed(order):
        assembled[folder_id] = replace(
            folders_by_id[folder_id],
            children=tuple(assembled[c] for c in child_ids.get(folder_id, ())),
            items=tuple(items_by_folder.get(folder_id, ())),
        )

    forest = tuple(assembled[r] for r in root_ids)
    stats = BuildStats(
        roots=len(forest),
        folders_attached=len(reachable),
        items_attached=sum(len(v) for v in items_by_folder.values()),
        orphan_folders=orphan_folders,
        orphan_items=orphan_items,
    )
    return forest, stats


def build_forest(folders: Iterable[Folder], items: Iterable[Item]) -> tuple[Folder, ...]:
    """Nest folders under their parents and attach items to their folders.

    Sibling order is first-seen order from the input. Folders whose parent
    does not exist, and items whose folder is not in the tree, are dropped.
    """
    forest, _stats = build_forest_with_stats(folders, items)
    return forest
