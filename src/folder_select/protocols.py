"""Protocols for dependency injection in the folder session."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SourceProtocol(Protocol):
    """Protocol for response sources."""

    def fetch(self) -> Any:
        """Fetch and decode the raw folders/items response."""
        ...
