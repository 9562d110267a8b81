"""Asset collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .base import BaseAsset


class AssetCollection(BaseAsset):
    """An asset made of an ordered sequence of leaf assets.

    Values assigned to the collection are propagated to every leaf. The
    collection's own source root and path are unknown.
    """

    is_collection: bool = True

    def __init__(self, assets: Iterable[BaseAsset] = (), **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._assets = list(assets)

    def leaves(self) -> tuple[BaseAsset, ...]:
        return tuple(self._assets)

    def set_values(self, values: Mapping[str, Any]) -> None:
        super().set_values(values)
        for asset in self._assets:
            asset.set_values(values)

    def load(self) -> str:
        return "\n".join(asset.dump() for asset in self._assets)

    def get_last_modified(self) -> int:
        return max((asset.get_last_modified() for asset in self._assets), default=0)
