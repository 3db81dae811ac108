"""Configuration loading.

A configuration is assembled from four layers, later layers winning:

1. the named profile (``default``, ``dev`` or ``test``)
2. an optional YAML file
3. ``STIMTAB_`` environment variables
4. keyword overrides such as ``markup__element="div"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stimtab.config.config import StimtabConfig
from stimtab.config.env import load_from_env, nest_keys
from stimtab.config.profiles import get_profile


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``, merging nested sections.

    Neither argument is modified.

    Examples
    --------
    >>> merge_configs({"markup": {"element": "p", "element_id": "x"}},
    ...               {"markup": {"element": "div"}})
    {'markup': {'element': 'div', 'element_id': 'x'}}
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Read a YAML mapping; an empty file reads as ``{}``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    yaml.YAMLError
        If the file is not valid YAML or does not hold a mapping.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open(encoding="utf-8") as f:
        try:
            content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise yaml.YAMLError(f"Expected a mapping at the top of {path}")
    return content


def load_config(
    config_path: Path | str | None = None,
    profile: str = "default",
    use_env: bool = True,
    **overrides: Any,
) -> StimtabConfig:
    """Assemble the effective configuration.

    Parameters
    ----------
    config_path : Path | str | None
        YAML file layered over the profile (default: none).
    profile : str
        Base profile name.
    use_env : bool
        Whether ``STIMTAB_`` variables are applied.
    **overrides : Any
        Final overrides; ``__`` separates section and key.

    Returns
    -------
    StimtabConfig
        The validated configuration.

    Raises
    ------
    ValueError
        If the profile is unknown.
    FileNotFoundError
        If ``config_path`` does not exist.
    yaml.YAMLError
        If the file cannot be parsed.
    pydantic.ValidationError
        If a merged value is invalid.

    Examples
    --------
    >>> load_config(use_env=False, markup__element="div").markup.element
    'div'
    """
    layers: list[dict[str, Any]] = []
    if config_path is not None:
        layers.append(load_yaml_file(config_path))
    if use_env:
        layers.append(load_from_env())
    if overrides:
        layers.append(nest_keys(overrides))

    merged: dict[str, Any] = get_profile(profile).model_dump()
    for layer in layers:
        merged = merge_configs(merged, layer)
    return StimtabConfig(**merged)
