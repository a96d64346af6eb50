"""Exceptions raised while loading a folder tree."""


class FolderSelectError(RuntimeError):
    """Base class for folder-select errors."""


class MalformedResponse(FolderSelectError, ValueError):
    """The response lacks the expected ``folders``/``items`` structure."""


class TransportFailure(FolderSelectError):
    """Fetching the response failed."""


class SessionNotReady(FolderSelectError):
    """The session has no loaded tree (still loading, or the load failed)."""
