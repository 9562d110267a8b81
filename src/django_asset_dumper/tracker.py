"""Change detection for assets between two checks of the same dump run.

An asset variant is fingerprinted by its last modification time (the maximum
over every variable combination) and its serialized formula. The fingerprint
of each dump key is kept in a :class:`VisitRecord` that lives for one command
invocation only.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from .assets import BaseAsset
from .variables import get_combinations

logger = logging.getLogger(__name__)


class Visit(NamedTuple):
    """The fingerprint recorded for a dump key."""

    mtime: int
    formula: str | None


class VisitRecord:
    """Mutable mapping from dump key to its most recent :class:`Visit`.

    Every check overwrites the entry of its key, so only the last-checked
    fingerprint is retained.
    """

    def __init__(self) -> None:
        self._visits: dict[str, Visit] = {}

    def get(self, key: str) -> Visit | None:
        return self._visits.get(key)

    def record(self, key: str, mtime: int, formula: str | None) -> None:
        self._visits[key] = Visit(mtime, formula)


def serialize_formula(formula: Any) -> str | None:
    """Serialize a formula to a stable string, or ``None`` for no formula."""
    if formula is None:
        return None
    if hasattr(formula, "_asdict"):
        formula = formula._asdict()
    return json.dumps(formula, sort_keys=True, default=str)


def check_asset_changed(
    manager: Any,
    asset: BaseAsset,
    key: str,
    visits: VisitRecord,
    configured: Mapping[str, Sequence[Any]],
    formula: str | None = None,
) -> bool:
    """Return whether ``asset`` changed since ``key`` was last checked.

    The asset's values are left set to its last combination.
    """
    mtime = 0
    for combination in get_combinations(asset.vars, configured):
        asset.set_values(combination)
        mtime = max(mtime, manager.get_last_modified(asset))

    previous = visits.get(key)
    if previous is None:
        changed = True
    else:
        changed = previous.mtime != mtime or previous.formula != formula

    visits.record(key, mtime, formula)
    if not changed:
        logger.debug("Asset %s is unchanged (mtime %d)", key, mtime)
    return changed


def check_asset(
    manager: Any,
    name: str,
    visits: VisitRecord,
    configured: Mapping[str, Sequence[Any]],
) -> bool:
    """Return whether the named asset or its formula changed since last check."""
    formula = (
        serialize_formula(manager.get_formula(name))
        if manager.has_formula(name)
        else None
    )
    asset = manager.get(name)
    return check_asset_changed(manager, asset, name, visits, configured, formula)
