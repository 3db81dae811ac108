"""Configuration values from ``STIMTAB_`` environment variables.

A variable name maps to a configuration path by stripping the prefix,
lowercasing, and splitting on ``__``::

    STIMTAB_MARKUP__ELEMENT_ID=stim   ->  {"markup": {"element_id": "stim"}}
    STIMTAB_SERIALIZATION__INDENT=2   ->  {"serialization": {"indent": 2}}
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

ENV_PREFIX = "STIMTAB_"

_TRUE = frozenset({"true", "yes", "on"})
_FALSE = frozenset({"false", "no", "off"})
_NONE = frozenset({"none", "null"})


def parse_env_value(value: str) -> Any:
    """Convert a raw variable value to a scalar.

    Booleans must be spelled out (``true``/``false``, ``yes``/``no``,
    ``on``/``off``) so ``"1"`` stays usable as an integer seed. ``none`` and
    ``null`` clear optional settings. Anything else that is not a number is
    returned unchanged; pydantic coerces it to the field type.

    Examples
    --------
    >>> parse_env_value("1"), parse_env_value("on"), parse_env_value("0.5")
    (1, True, 0.5)
    """
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    if lowered in _NONE:
        return None
    for number in (int, float):
        try:
            return number(value)
        except ValueError:
            continue
    return value


def nest_keys(flat: Mapping[str, Any], separator: str = "__") -> dict[str, Any]:
    """Expand ``section__key`` names into nested dictionaries.

    Examples
    --------
    >>> nest_keys({"markup__element": "div", "profile": "dev"})
    {'markup': {'element': 'div'}, 'profile': 'dev'}
    """
    nested: dict[str, Any] = {}
    for key, value in flat.items():
        *sections, leaf = key.split(separator)
        target = nested
        for section in sections:
            target = target.setdefault(section, {})
        target[leaf] = value
    return nested


def env_to_nested_dict(env_vars: Mapping[str, str], prefix: str) -> dict[str, Any]:
    """Select prefixed variables and nest them by configuration path."""
    selected = {
        key[len(prefix) :].lower(): parse_env_value(value)
        for key, value in env_vars.items()
        if key.startswith(prefix)
    }
    return nest_keys(selected)


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Read configuration overrides from ``os.environ``."""
    return env_to_nested_dict(os.environ, prefix)
