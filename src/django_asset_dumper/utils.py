"""Helpers for loading configured classes."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .conf import get_setting
from .exceptions import UnknownFilter


def get_filter(name: str) -> Any:
    """Instantiate the filter registered under ``name`` in the FILTERS setting."""
    registry: dict[str, str] = get_setting("FILTERS")
    try:
        filter_path = registry[name]
    except KeyError:
        raise UnknownFilter(f"Unknown asset filter {name!r}") from None
    cls = import_class(filter_path)
    return cls()


def import_class(dotted_path: str) -> type:
    """Import a class from a dotted path string."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = import_module(module_path)
    return getattr(module, class_name)  # type: ignore[no-any-return]
