"""Expansion of asset variables into concrete value combinations."""

from __future__ import annotations

import itertools
from collections.abc import Mapping, Sequence
from typing import Any

from .exceptions import MissingVariableConfig


def get_combinations(
    var_names: Sequence[str], configured: Mapping[str, Sequence[Any]]
) -> list[dict[str, Any]]:
    """Return every combination of values for the declared variables.

    The order is that of ``itertools.product``: the last declared variable
    varies fastest. An asset without variables has exactly one (empty)
    combination.
    """
    if not var_names:
        return [{}]

    domains = []
    for var in var_names:
        if var not in configured:
            raise MissingVariableConfig(var)
        domains.append(list(configured[var]))

    return [dict(zip(var_names, values)) for values in itertools.product(*domains)]


def resolve_vars(
    template: str, var_names: Sequence[str], values: Mapping[str, Any]
) -> str:
    """Replace ``{var}`` placeholders of the declared variables in ``template``."""
    for var in var_names:
        if var not in values:
            raise MissingVariableConfig(var)
        template = template.replace(f"{{{var}}}", str(values[var]))
    return template
