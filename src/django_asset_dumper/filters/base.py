"""Base class for asset filters."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseAssetFilter(ABC):
    """Abstract base class for asset filters.

    Filters receive the content of an asset while it is dumped and return the
    transformed content.
    """

    @abstractmethod
    def filter_dump(self, content: str) -> str:
        """Transform asset content.

        Args:
            content: The asset content produced so far.

        Returns:
            The filtered content.
        """
        ...
