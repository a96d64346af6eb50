"""Load lifecycle for one viewing session: fetch, build, sort, select."""

from enum import Enum
from typing import Any

from loguru import logger

from folder_select.core.importer.record_parser import parse_response
from folder_select.core.selection.engine import SelectionEngine
from folder_select.core.tree.builder import BuildStats, build_forest_with_stats
from folder_select.core.tree.sorter import sort_forest
from folder_select.errors import MalformedResponse, SessionNotReady, TransportFailure
from folder_select.protocols import SourceProtocol


class LoadStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def build_engine(data: Any) -> tuple[SelectionEngine, BuildStats]:
    """Run a raw response through parse, build and sort, and wrap it in an engine.

    Raises:
        MalformedResponse: The response structure is invalid.
    """
    records = parse_response(data)
    forest, stats = build_forest_with_stats(records.folders, records.items)
    if stats.orphan_folders or stats.orphan_items:
        logger.debug(
            "Skipped {} orphaned folders and {} orphaned items",
            stats.orphan_folders,
            stats.orphan_items,
        )
    return SelectionEngine(sort_forest(forest)), stats


class FolderSession:
    """Holds the tree and selection for one viewer.

    Until a load succeeds there is no engine: ``engine`` raises
    SessionNotReady while loading or after a failed load. Every load
    discards the previous tree and selection.
    """

    def __init__(self, source: SourceProtocol) -> None:
        self._source = source
        self.status = LoadStatus.LOADING
        self.error: str | None = None
        self.stats: BuildStats | None = None
        self._engine: SelectionEngine | None = None

    def _not_ready(self) -> SessionNotReady:
        if self.status is LoadStatus.FAILED:
            return SessionNotReady(f"Folder tree failed to load: {self.error}")
        return SessionNotReady("Folder tree is still loading")

    @property
    def engine(self) -> SelectionEngine:
        if self._engine is None:
            raise self._not_ready()
        return self._engine

    @property
    def build_stats(self) -> BuildStats:
        """Statistics of the last successful load."""
        if self.stats is None:
            raise self._not_ready()
        return self.stats

    @property
    def is_ready(self) -> bool:
        return self.status is LoadStatus.READY

    def load(self) -> bool:
        """Fetch and build a fresh tree, replacing any previous one.

        Returns:
            True on success. On failure the session is FAILED and ``error``
            holds a user-facing message.
        """
        self.status = LoadStatus.LOADING
        self.error = None
        self.stats = None
        self._engine = None

        try:
            data = self._source.fetch()
            engine, stats = build_engine(data)
        except (TransportFailure, MalformedResponse) as e:
            logger.error("Failed to load folders: {}", e)
            self.status = LoadStatus.FAILED
            self.error = str(e)
            return False

        self._engine = engine
        self.stats = stats
        self.status = LoadStatus.READY
        logger.debug(
            "Loaded {} root folders ({} folders, {} items)",
            stats.roots,
            stats.folders_attached,
            stats.items_attached,
        )
        return True

    def refetch(self) -> bool:
        """Reload from the source; prior tree and selection are discarded."""
        return self.load()
