"""Configuration serialization to YAML format.

This module provides functionality for serializing StimtabConfig objects to
YAML format, including conversion to dictionaries and saving to files.
"""

from pathlib import Path
from typing import Any

import yaml

from stimtab.config.config import StimtabConfig


def config_to_dict(
    config: StimtabConfig, include_defaults: bool = False
) -> dict[str, Any]:
    """Convert StimtabConfig to dictionary for YAML serialization.

    Parameters
    ----------
    config : StimtabConfig
        Configuration to convert.
    include_defaults : bool
        Whether to include default values. The profile name is always kept.

    Returns
    -------
    dict[str, Any]
        Dictionary representation suitable for YAML; paths become strings.

    Examples
    --------
    >>> config_to_dict(StimtabConfig())
    {'profile': 'default'}
    """
    config_dict: dict[str, Any] = config.model_dump(mode="json")

    if not include_defaults:
        default_dict: dict[str, Any] = StimtabConfig().model_dump(mode="json")
        config_dict = _remove_defaults(config_dict, default_dict)

    return {"profile": config.profile, **config_dict}


def _remove_defaults(
    config_dict: dict[str, Any], default_dict: dict[str, Any]
) -> dict[str, Any]:
    """Remove values that match defaults from config dictionary.

    Parameters
    ----------
    config_dict : dict[str, Any]
        Configuration dictionary.
    default_dict : dict[str, Any]
        Default configuration dictionary.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary with defaults removed.
    """
    result: dict[str, Any] = {}
    for key, value in config_dict.items():
        if key not in default_dict:
            result[key] = value
        elif isinstance(value, dict) and isinstance(default_dict[key], dict):
            nested_result = _remove_defaults(value, default_dict[key])  # type: ignore[arg-type]
            if nested_result:  # only include if not empty after removing defaults
                result[key] = nested_result
        elif value != default_dict[key]:
            result[key] = value
    return result


def to_yaml(config: StimtabConfig, include_defaults: bool = False) -> str:
    """Serialize configuration to YAML string.

    Parameters
    ----------
    config : StimtabConfig
        Configuration to serialize.
    include_defaults : bool
        If True, include all fields even if they have default values.
        If False, only include non-default values.

    Returns
    -------
    str
        YAML representation of configuration.

    Examples
    --------
    >>> yaml_str = to_yaml(StimtabConfig())
    >>> 'profile: default' in yaml_str
    True
    """
    config_dict = config_to_dict(config, include_defaults=include_defaults)

    return yaml.dump(
        config_dict,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )


def save_yaml(
    config: StimtabConfig,
    path: Path | str,
    include_defaults: bool = False,
    create_dirs: bool = True,
) -> None:
    """Save configuration to YAML file.

    Parameters
    ----------
    config : StimtabConfig
        Configuration to save.
    path : Path | str
        Path where YAML file should be saved.
    include_defaults : bool
        If True, include all fields even if they have default values.
    create_dirs : bool
        If True, create parent directories if they don't exist.

    Raises
    ------
    OSError
        If file cannot be written.
    FileNotFoundError
        If create_dirs is False and parent directory doesn't exist.
    """
    path = Path(path) if isinstance(path, str) else path

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.exists():
        raise FileNotFoundError(
            f"Parent directory does not exist: {path.parent}. "
            f"Set create_dirs=True to create it automatically."
        )

    yaml_str = to_yaml(config, include_defaults=include_defaults)

    try:
        with open(path, "w") as f:
            f.write(yaml_str)
    except OSError as e:
        raise OSError(f"Failed to write YAML file {path}: {e}") from e
