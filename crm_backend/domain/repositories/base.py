"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for the lookup shared by every repository."""

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...
