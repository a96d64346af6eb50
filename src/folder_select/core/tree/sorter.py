"""Order a forest by name at every depth."""

import unicodedata
from collections.abc import Iterable
from dataclasses import replace

from folder_select.core.tree.navigation import iter_folders
from folder_select.models.folder import Folder, Item


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _char_class(ch: str) -> str:
    # Spaces, punctuation and symbols < digits < letters.
    category = unicodedata.category(ch)
    if category[0] in "ZPSC":
        return "0"
    if category[0] == "N":
        return "1"
    return "2"


def name_sort_key(name: str) -> tuple[str, str, str]:
    """Locale-style collation key for display names.

    Compares letters first ignoring accents and case, then accents, then
    case with lowercase ahead of uppercase ("a" < "A" < "b"). Punctuation
    and symbols sort before digits, digits before letters.
    """
    folded = name.casefold()
    primary = "".join(_char_class(ch) + ch for ch in _strip_accents(folded))
    return (primary, folded, name.swapcase())


def sort_items(items: Iterable[Item]) -> tuple[Item, ...]:
    """Return items ordered by name; equal names keep their relative order."""
    return tuple(sorted(items, key=lambda item: name_sort_key(item.name)))


def _sort_folders(folders: Iterable[Folder]) -> list[Folder]:
    return sorted(folders, key=lambda folder: name_sort_key(folder.name))


def sort_forest(forest: Iterable[Folder]) -> tuple[Folder, ...]:
    """Return a copy of the forest with folders and items sorted at every depth."""
    roots = tuple(forest)
    # Reverse pre-order finishes every child before its parent.
    done: dict[int, Folder] = {}
    for folder in reversed(list(iter_folders(roots))):
        done[id(folder)] = replace(
            folder,
            children=tuple(done[id(c)] for c in _sort_folders(folder.children)),
            items=sort_items(folder.items),
        )
    return tuple(done[id(root)] for root in _sort_folders(roots))
