"""Errors raised while dumping assets."""


class AssetDumpError(Exception):
    """Base class for every error raised by django-asset-dumper."""


class MissingVariableConfig(AssetDumpError):
    """A declared asset variable has no configured value domain."""

    def __init__(self, var: str) -> None:
        super().__init__(f"No values configured for asset variable {var!r}")
        self.var = var


class AssetNotFound(AssetDumpError):
    """The asset manager has no asset under the requested name."""


class AssetSourceError(AssetDumpError):
    """An asset's source file cannot be read."""


class DirectoryCreateError(AssetDumpError):
    """The target directory of an asset cannot be created."""


class FileWriteError(AssetDumpError):
    """The target file of an asset cannot be written."""


class UnknownFilter(AssetDumpError):
    """A formula names a filter missing from the FILTERS setting."""
