"""Base class for dumpable assets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..filters.base import BaseAssetFilter


class BaseAsset(ABC):
    """A named unit of output content, possibly parameterized by variables.

    An asset declares the names of the variables it depends on (``vars``).
    Before it is dumped, a concrete value for each of them is assigned with
    :meth:`set_values`; the target path and the content may then depend on
    those values through ``{var}`` placeholders.
    """

    is_collection: bool = False
    """Whether this asset is made of leaf assets (see :meth:`leaves`)."""

    def __init__(
        self,
        filters: Iterable[BaseAssetFilter] = (),
        source_root: str | None = None,
        source_path: str | None = None,
        target_path: str | None = None,
        vars: Sequence[str] = (),
    ) -> None:
        self.filters = list(filters)
        self.source_root = source_root
        self.source_path = source_path
        self.target_path = target_path or ""
        self.vars = tuple(vars)
        self.values: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.source_path or self.target_path!r}>"

    def set_values(self, values: Mapping[str, Any]) -> None:
        self.values = dict(values)

    def leaves(self) -> tuple[BaseAsset, ...]:
        """Return the immediate leaf assets. Single assets have none."""
        return ()

    def dump(self) -> str:
        """Return the filtered content for the current values."""
        content = self.load()
        for asset_filter in self.filters:
            content = asset_filter.filter_dump(content)
        return content

    @abstractmethod
    def load(self) -> str:
        """Return the raw, unfiltered content for the current values."""
        ...

    @abstractmethod
    def get_last_modified(self) -> int:
        """Return the last modification timestamp for the current values."""
        ...
