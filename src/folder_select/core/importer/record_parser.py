"""Parse the tabular folders/items response into domain models."""

from collections.abc import Mapping, Sequence
from typing import Any

from folder_select.config import UNNAMED_FOLDER, UNNAMED_ITEM
from folder_select.errors import MalformedResponse
from folder_select.models.folder import Folder, Item, ParsedRecords


def _section_rows(data: Mapping[str, Any], section: str) -> list[Sequence[Any]]:
    raw = data.get(section)
    if not isinstance(raw, Mapping):
        msg = f"Missing or invalid {section!r} section in response"
        raise MalformedResponse(msg)
    rows = raw.get("data")
    if not isinstance(rows, (list, tuple)):
        msg = f"{section!r}.data must be a list, got {type(rows).__name__}"
        raise MalformedResponse(msg)
    for index, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            msg = f"{section!r}.data[{index}] must be a row, got {type(row).__name__}"
            raise MalformedResponse(msg)
    return list(rows)


def _as_id(value: Any, *, section: str, index: int, column: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{section!r}.data[{index}] {column} must be an integer, got {value!r}"
        raise MalformedResponse(msg)
    return value


def _as_name(value: Any, fallback: str) -> str:
    if value is None or value == "":
        return fallback
    return str(value)


def parse_folder_row(row: Sequence[Any], *, index: int = 0) -> Folder:
    """Parse one ``(id, name, parentId)`` row.

    A row without a parent column is treated as a root folder.
    """
    if len(row) < 2:
        msg = f"'folders'.data[{index}] needs at least (id, name), got {list(row)!r}"
        raise MalformedResponse(msg)
    parent_raw = row[2] if len(row) > 2 else None
    parent = (
        None
        if parent_raw is None
        else _as_id(parent_raw, section="folders", index=index, column="parentId")
    )
    return Folder(
        id=_as_id(row[0], section="folders", index=index, column="id"),
        name=_as_name(row[1], UNNAMED_FOLDER),
        parent=parent,
    )


def parse_item_row(row: Sequence[Any], *, index: int = 0) -> Item:
    """Parse one ``(id, name, folderId)`` row."""
    if len(row) < 3:
        msg = f"'items'.data[{index}] needs (id, name, folderId), got {list(row)!r}"
        raise MalformedResponse(msg)
    return Item(
        id=_as_id(row[0], section="items", index=index, column="id"),
        name=_as_name(row[1], UNNAMED_ITEM),
        folder_id=_as_id(row[2], section="items", index=index, column="folderId"),
    )


def parse_response(data: Any) -> ParsedRecords:
    """Parse a raw API response into flat Folder and Item records.

    Args:
        data: Decoded response with ``folders`` and ``items`` sections, each
            holding ``columns`` (informational) and ``data`` (list of rows).

    Returns:
        ParsedRecords with folders and items in response order, and empty
        ``children``/``items`` on every folder.

    Raises:
        MalformedResponse: A section is missing, its ``data`` is not a list,
            or a row cannot be read.
    """
    if not isinstance(data, Mapping):
        msg = f"Response must be a JSON object, got {type(data).__name__}"
        raise MalformedResponse(msg)

    folder_rows = _section_rows(data, "folders")
    item_rows = _section_rows(data, "items")

    folders = tuple(parse_folder_row(row, index=i) for i, row in enumerate(folder_rows))
    items = tuple(parse_item_row(row, index=i) for i, row in enumerate(item_rows))
    return ParsedRecords(folders=folders, items=items)
