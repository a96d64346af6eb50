"""Folder tree building and tri-state checkbox selection."""

from folder_select.api import FolderApi
from folder_select.core.selection.engine import SelectionEngine
from folder_select.core.selection.state import SelectionState
from folder_select.errors import MalformedResponse, SessionNotReady, TransportFailure
from folder_select.models.folder import Folder, Item, SelectionStatus
from folder_select.protocols import SourceProtocol
from folder_select.session import FolderSession, LoadStatus

__all__ = [
    "Folder",
    "FolderApi",
    "FolderSession",
    "Item",
    "LoadStatus",
    "MalformedResponse",
    "SelectionEngine",
    "SelectionState",
    "SelectionStatus",
    "SessionNotReady",
    "SourceProtocol",
    "TransportFailure",
]
