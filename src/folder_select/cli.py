"""CLI for browsing a folder tree and previewing checkbox selections."""

import json
from typing import Annotated

import typer
from loguru import logger

from folder_select.api import FolderApi
from folder_select.config import resolve_source
from folder_select.core.selection.engine import SelectionEngine
from folder_select.core.tree.render import forest_to_dict, render_forest
from folder_select.logging_config import configure_logging
from folder_select.session import FolderSession

app = typer.Typer(help="Folder tree with tri-state checkbox selection.")

SourceOption = Annotated[
    str | None,
    typer.Option("--source", "-s", help="Response URL or JSON file (default: auto-detect)"),
]
CacheOption = Annotated[
    bool,
    typer.Option("--cache", "-C", help="Cache HTTP responses and reuse them"),
]
SelectFolderOption = Annotated[
    list[int] | None,
    typer.Option(
        "--select-folder",
        "-f",
        help="Toggle selection of a folder (repeatable, applied before item toggles)",
    ),
]
SelectItemOption = Annotated[
    list[int] | None,
    typer.Option(
        "--select-item",
        "-i",
        help="Toggle selection of an item (repeatable, applied after folder toggles)",
    ),
]
FlatOption = Annotated[
    bool,
    typer.Option("--flat", help="Folder toggles affect only the folder's own items"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _open_session(source: str | None, cache: bool) -> FolderSession:
    """Load the tree, exiting with a message if the load fails."""
    src = source or resolve_source()
    logger.debug("Loading folders from {}", src)
    session = FolderSession(FolderApi(src, from_cache=cache))
    if not session.load():
        typer.echo(f"Could not load folders: {session.error}", err=True)
        raise typer.Exit(1)
    return session


def _apply_gestures(
    engine: SelectionEngine,
    *,
    folders: list[int] | None,
    items: list[int] | None,
    include_subfolders: bool,
) -> None:
    """Apply every folder toggle, then every item toggle.

    Each group keeps its command-line order; folder and item toggles are
    not interleaved.
    """
    for folder_id in folders or []:
        if engine.get_folder(folder_id) is None:
            logger.warning("Folder {} is not in the tree", folder_id)
        engine.toggle_folder_selection(folder_id, include_subfolders=include_subfolders)
    for item_id in items or []:
        if engine.get_item(item_id) is None:
            logger.warning("Item {} is not in the tree", item_id)
        engine.toggle_item_selection(item_id)


@app.command()
def show(
    source: SourceOption = None,
    cache: CacheOption = False,
    select_folder: SelectFolderOption = None,
    select_item: SelectItemOption = None,
    flat: FlatOption = False,
    collapse: Annotated[
        list[int] | None,
        typer.Option("--collapse", "-c", help="Collapse a folder (repeatable)"),
    ] = None,
    collapse_all: bool = typer.Option(False, "--collapse-all", help="Collapse every folder"),
    no_items: bool = typer.Option(False, "--no-items", help="List folders only"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the sorted folder tree with checkbox state."""
    engine = _open_session(source, cache).engine

    if collapse_all:
        engine.collapse_all()
    for folder_id in collapse or []:
        engine.collapse_folder(folder_id)
    _apply_gestures(
        engine, folders=select_folder, items=select_item, include_subfolders=not flat
    )

    if output_json:
        data = {
            "folders": forest_to_dict(engine),
            "selected_item_ids": engine.get_selected_item_ids(),
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(render_forest(engine, include_items=not no_items), nl=False)
    selected = engine.get_selected_item_ids()
    typer.echo(f"\nSelected item IDs: {', '.join(str(i) for i in selected)}")


@app.command()
def selected(
    source: SourceOption = None,
    cache: CacheOption = False,
    select_folder: SelectFolderOption = None,
    select_item: SelectItemOption = None,
    flat: FlatOption = False,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Print the selected item ids after applying the given toggles."""
    engine = _open_session(source, cache).engine
    _apply_gestures(
        engine, folders=select_folder, items=select_item, include_subfolders=not flat
    )

    ids = engine.get_selected_item_ids()
    if output_json:
        data = {
            "selected_item_ids": ids,
            "items": [
                {"id": i.id, "name": i.name, "folder_id": i.folder_id}
                for i in engine.selected_items()
            ],
            "count": len(ids),
        }
        typer.echo(json.dumps(data, indent=2))
    else:
        typer.echo(" ".join(str(i) for i in ids))


@app.command()
def folders(
    source: SourceOption = None,
    cache: CacheOption = False,
) -> None:
    """Summarize the loaded tree: roots, attached records and orphans."""
    session = _open_session(source, cache)
    stats = session.build_stats
    typer.echo(f"{stats.roots} root folders")
    typer.echo(f"  {stats.folders_attached} folders, {stats.items_attached} items in tree")
    typer.echo(
        f"  skipped {stats.orphan_folders} orphaned folders, {stats.orphan_items} orphaned items"
    )
