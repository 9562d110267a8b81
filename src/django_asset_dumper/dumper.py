"""Dump orchestration for django-asset-dumper.

Pipeline per asset name: Resolve -> Expand variables -> Write -> Dump leaves
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from django.core.management.base import OutputWrapper
from django.core.management.color import no_style

from .assets import BaseAsset
from .exceptions import AssetDumpError, DirectoryCreateError, FileWriteError
from .tracker import VisitRecord, check_asset, check_asset_changed
from .variables import get_combinations, resolve_vars

logger = logging.getLogger(__name__)

VERBOSE = 2


class AssetDumper:
    """Writes the assets of an asset manager below a base directory.

    Progress lines go to ``stdout``; with ``verbosity`` of 2 or more the
    source files contributing to each written file are listed too.
    """

    def __init__(
        self,
        manager: Any,
        write_to: str,
        variables: Mapping[str, Sequence[Any]],
        stdout: Any = None,
        stderr: Any = None,
        style: Any = None,
        verbosity: int = 1,
    ) -> None:
        self.manager = manager
        self.write_to = write_to
        self.variables = variables
        self.stdout = stdout if stdout is not None else OutputWrapper(sys.stdout)
        self.stderr = stderr if stderr is not None else OutputWrapper(sys.stderr)
        self.style = style if style is not None else no_style()
        self.verbosity = verbosity

    def dump_all(self, names: Iterable[str] | None = None) -> VisitRecord:
        """Dump every named asset (all known names by default), in order."""
        visits = VisitRecord()
        for name in self._resolve_names(names):
            self.dump_asset(name, visits)
        return visits

    def dump_asset(self, name: str, visits: VisitRecord) -> None:
        """Write an asset.

        If the application or the asset is in debug mode, each leaf asset is
        dumped as well, unless the record shows it unchanged.
        """
        asset = self.manager.get(name)
        formula = (
            self.manager.get_formula(name) if self.manager.has_formula(name) else None
        )

        self.write_asset(asset)

        debug = formula.debug if formula is not None else None
        if debug is None:
            debug = self.manager.is_debug()
        if not debug:
            return

        for leaf in asset.leaves():
            # Keyed on the parent's source path: every leaf of one asset
            # shares the same record entry.
            leaf_key = f"{name}_{asset.source_path or ''}"
            if check_asset_changed(
                self.manager, asset, leaf_key, visits, self.variables
            ):
                self.write_asset(leaf)
            else:
                logger.debug("Skipping unchanged leaf %r of %s", leaf, name)

    def write_asset(self, asset: BaseAsset) -> None:
        """Write one file per variable combination of ``asset``."""
        combinations = get_combinations(asset.vars, self.variables)

        for combination in combinations:
            asset.set_values(combination)
            target = self.get_target(asset)

            directory = target.parent
            if not directory.is_dir():
                try:
                    directory.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise DirectoryCreateError(
                        f"Unable to create directory {directory}"
                    ) from e
                self._progress("[dir+]", directory)

            self._progress("[file+]", target)

            if self.verbosity >= VERBOSE:
                sources = asset.leaves() if asset.is_collection else (asset,)
                for source in sources:
                    root = source.source_root or "[unknown root]"
                    path = source.source_path or "[unknown path]"
                    self.stdout.write(f"        {self.style.WARNING(f'{root}/{path}')}")

            try:
                target.write_text(asset.dump(), encoding="utf-8")
            except OSError as e:
                raise FileWriteError(f"Unable to write file {target}") from e
            logger.info("Dumped %r to %s", asset, target)

    def get_target(self, asset: BaseAsset) -> Path:
        """Resolve the target file of ``asset`` for its current values."""
        target = f"{self.write_to.rstrip('/')}/{asset.target_path}"
        target = target.replace("_controller/", "")
        return Path(resolve_vars(target, asset.vars, asset.values))

    def watch(
        self,
        names: Iterable[str] | None = None,
        period: float = 1.0,
        iterations: int | None = None,
    ) -> VisitRecord:
        """Dump assets whenever they or their formulae change.

        Runs ``iterations`` passes, or forever when it is ``None``. A failing
        asset is reported and retried on the next pass.
        """
        visits = VisitRecord()
        passes = 0
        while iterations is None or passes < iterations:
            for name in self._resolve_names(names):
                try:
                    if check_asset(self.manager, name, visits, self.variables):
                        self.dump_asset(name, visits)
                except AssetDumpError as e:
                    logger.exception("Failed to dump asset %s", name)
                    self.stderr.write(f"  ERROR: {name} - {e}")
            passes += 1
            if iterations is None or passes < iterations:
                time.sleep(period)
        return visits

    def _resolve_names(self, names: Iterable[str] | None) -> list[str]:
        if names:
            return list(names)
        return list(self.manager.get_names())

    def _progress(self, tag: str, path: Path) -> None:
        self.stdout.write(
            f"{self.style.WARNING(time.strftime('%H:%M:%S'))} "
            f"{self.style.SUCCESS(tag)} {path}"
        )
