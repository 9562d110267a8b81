from .base import BaseAsset
from .collection import AssetCollection
from .file import FileAsset, StringAsset

__all__ = ["AssetCollection", "BaseAsset", "FileAsset", "StringAsset"]
