"""Domain models for the folder tree."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Item:
    """A leaf item owned by exactly one folder."""

    id: int
    name: str
    folder_id: int


@dataclass(frozen=True)
class Folder:
    """A folder node. ``children`` and ``items`` are filled in by the tree builder."""

    id: int
    name: str
    parent: int | None
    children: tuple["Folder", ...] = ()
    items: tuple[Item, ...] = ()


@dataclass(frozen=True)
class ParsedRecords:
    """Flat folder and item records, in response order."""

    folders: tuple[Folder, ...]
    items: tuple[Item, ...]


class SelectionStatus(Enum):
    """Derived checkbox state of a folder."""

    UNSELECTED = "unselected"
    INDETERMINATE = "indeterminate"
    SELECTED = "selected"
