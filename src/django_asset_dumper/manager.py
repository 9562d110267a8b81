"""Asset manager: named formulae and the assets built from them.

A formula describes how a named asset is built::

    ASSET_DUMPER = {
        "ASSETS": {
            "app_css": {
                "inputs": ["css/base.css", "css/app_{locale}.css"],
                "filters": ["?cssmin"],
                "output": "css/app_{locale}.css",
                "vars": ["locale"],
            },
        },
        "VARIABLES": {"locale": ["en", "fr"]},
    }

Filter names starting with ``?`` are skipped in debug mode. The optional
``debug`` option overrides the manager's debug mode for one asset.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Mapping
from typing import Any, NamedTuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .assets import AssetCollection, BaseAsset, FileAsset
from .conf import get_setting
from .exceptions import AssetNotFound
from .utils import get_filter, import_class

logger = logging.getLogger(__name__)


class Formula(NamedTuple):
    """The serializable recipe of a named asset."""

    inputs: list[str]
    filters: list[str]
    options: dict[str, Any]

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Formula:
        options = {
            "output": config.get("output"),
            "vars": list(config.get("vars", [])),
            "debug": config.get("debug"),
        }
        return cls(
            list(config.get("inputs", [])), list(config.get("filters", [])), options
        )

    @property
    def debug(self) -> bool | None:
        return self.options.get("debug")


class AssetManager:
    """Builds assets from named formulae."""

    def __init__(
        self,
        formulae: Mapping[str, Formula],
        source_root: str,
        debug: bool = False,
    ) -> None:
        self._formulae = dict(formulae)
        self.source_root = source_root
        self.debug = debug

    def get_names(self) -> list[str]:
        return list(self._formulae)

    def has_formula(self, name: str) -> bool:
        return name in self._formulae

    def get_formula(self, name: str) -> Formula:
        try:
            return self._formulae[name]
        except KeyError:
            raise AssetNotFound(f"There is no asset named {name!r}") from None

    def is_debug(self) -> bool:
        return self.debug

    def get_last_modified(self, asset: BaseAsset) -> int:
        return asset.get_last_modified()

    def get(self, name: str) -> BaseAsset:
        """Build the asset collection for ``name`` from its formula."""
        formula = self.get_formula(name)
        debug = self.is_debug() if formula.debug is None else formula.debug
        filters = [
            get_filter(filter_name.lstrip("?"))
            for filter_name in formula.filters
            if not (debug and filter_name.startswith("?"))
        ]
        var_names = formula.options.get("vars", [])
        output = formula.options.get("output") or _default_output(name, formula.inputs)

        stem, ext = posixpath.splitext(output)
        leaves = [
            FileAsset(
                self.source_root,
                source_path,
                filters=filters,
                target_path=f"{stem}_part_{index}{ext}",
                vars=var_names,
            )
            for index, source_path in enumerate(formula.inputs, start=1)
        ]
        logger.debug("Built asset %s from %d input(s)", name, len(leaves))
        return AssetCollection(leaves, target_path=output, vars=var_names)


def _default_output(name: str, inputs: list[str]) -> str:
    """Derive an output path from the asset name and its first input."""
    if inputs:
        _, ext = posixpath.splitext(inputs[0])
        if ext:
            return f"{name}{ext}"
    return name


def get_source_root() -> str:
    source_root: str | None = get_setting("SOURCE_ROOT")
    if source_root:
        return str(source_root)
    base_dir = getattr(settings, "BASE_DIR", None)
    if base_dir is None:
        raise ImproperlyConfigured(
            "ASSET_DUMPER['SOURCE_ROOT'] or BASE_DIR must be configured"
        )
    return str(base_dir)


def get_write_to() -> str:
    write_to: str | None = get_setting("WRITE_TO")
    if write_to:
        return str(write_to)
    static_root: str | None = getattr(settings, "STATIC_ROOT", None)
    if not static_root:
        raise ImproperlyConfigured(
            "ASSET_DUMPER['WRITE_TO'] or STATIC_ROOT must be configured"
        )
    return str(static_root)


def is_debug() -> bool:
    debug: bool | None = get_setting("DEBUG")
    if debug is None:
        return bool(getattr(settings, "DEBUG", False))
    return debug


def get_asset_manager() -> Any:
    """Import and instantiate the configured asset manager."""
    formulae = {
        name: Formula.from_config(config)
        for name, config in get_setting("ASSETS").items()
    }
    cls = import_class(get_setting("ASSET_MANAGER"))
    return cls(formulae, get_source_root(), debug=is_debug())
