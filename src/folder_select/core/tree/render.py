"""Render a folder forest as an indented checkbox list."""

import io

from folder_select.core.selection.engine import SelectionEngine
from folder_select.models.folder import Folder, Item, SelectionStatus

_CHECKBOX = {
    SelectionStatus.SELECTED: "[x]",
    SelectionStatus.INDETERMINATE: "[-]",
    SelectionStatus.UNSELECTED: "[ ]",
}


def render_forest(
    engine: SelectionEngine,
    *,
    include_items: bool = True,
    show_ids: bool = True,
) -> str:
    """Render the engine's forest as a markdown-style checkbox tree.

    Args:
        engine: Selection engine holding the forest and current state.
        include_items: Whether to list items under expanded folders.
        show_ids: Whether to append ``(id=N)`` to each line.

    Returns:
        One line per visible folder or item. Collapsed folders with content
        get a summary line in place of their children.
    """
    out = io.StringIO()

    def label(name: str, node_id: int) -> str:
        return f"{name} (id={node_id})" if show_ids else name

    # Explicit stack so arbitrarily deep trees render.
    stack: list[tuple[Folder | Item, int]] = [(root, 0) for root in reversed(engine.forest)]
    while stack:
        node, depth = stack.pop()
        indent = "    " * depth

        if isinstance(node, Item):
            mark = "[x]" if engine.is_item_selected(node.id) else "[ ]"
            out.write(f"{indent}- {mark} {label(node.name, node.id)}\n")
            continue

        checkbox = _CHECKBOX[engine.folder_status(node)]
        out.write(f"{indent}- {checkbox} {label(node.name, node.id)}\n")

        entries: list[Folder | Item] = list(node.children)
        if include_items:
            entries.extend(node.items)

        if not engine.is_expanded(node):
            if entries:
                noun = "entry" if len(entries) == 1 else "entries"
                out.write(f"{indent}    - ... ({len(entries)} hidden {noun})\n")
            continue

        stack.extend((entry, depth + 1) for entry in reversed(entries))

    return out.getvalue()


def forest_to_dict(engine: SelectionEngine) -> list[dict[str, object]]:
    """Serialize the forest with derived selection state, for JSON output."""
    result: list[dict[str, object]] = []
    stack: list[tuple[Folder, list[dict[str, object]]]] = [
        (root, result) for root in reversed(engine.forest)
    ]
    while stack:
        folder, siblings = stack.pop()
        children: list[dict[str, object]] = []
        siblings.append(
            {
                "id": folder.id,
                "name": folder.name,
                "status": engine.folder_status(folder).value,
                "expanded": engine.is_expanded(folder),
                "children": children,
                "items": [
                    {
                        "id": item.id,
                        "name": item.name,
                        "selected": engine.is_item_selected(item.id),
                    }
                    for item in folder.items
                ],
            }
        )
        stack.extend((child, children) for child in reversed(folder.children))
    return result
