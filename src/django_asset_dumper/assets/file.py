"""Leaf assets backed by a file or an in-memory string."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..exceptions import AssetSourceError
from ..variables import resolve_vars
from .base import BaseAsset


class FileAsset(BaseAsset):
    """An asset read from ``source_root / source_path``.

    ``{var}`` placeholders in the source path are resolved against the
    current values, so one file asset may stand for a family of files
    (e.g. ``css/theme_{theme}.css``).
    """

    def __init__(self, source_root: str, source_path: str, **kwargs: Any) -> None:
        super().__init__(source_root=source_root, source_path=source_path, **kwargs)

    def get_source_file(self) -> Path:
        path = resolve_vars(self.source_path or "", self.vars, self.values)
        return Path(self.source_root or "") / path

    def load(self) -> str:
        source = self.get_source_file()
        try:
            return source.read_text(encoding="utf-8")
        except OSError as e:
            raise AssetSourceError(f"Unable to read asset source {source}") from e

    def get_last_modified(self) -> int:
        source = self.get_source_file()
        try:
            return int(source.stat().st_mtime)
        except OSError as e:
            raise AssetSourceError(f"Unable to stat asset source {source}") from e


class StringAsset(BaseAsset):
    """An asset whose content is held in memory."""

    def __init__(self, content: str, last_modified: int = 0, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.content = content
        self.last_modified = last_modified

    def load(self) -> str:
        return resolve_vars(self.content, self.vars, self.values)

    def get_last_modified(self) -> int:
        return self.last_modified
