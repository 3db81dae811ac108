"""Default configuration for stimtab."""

from __future__ import annotations

from stimtab.config.config import StimtabConfig

DEFAULT_CONFIG = StimtabConfig(profile="default")
"""Default configuration instance.

This configuration uses all default values from each config model.
It's the base configuration used when no config file is provided.

Examples
--------
>>> from stimtab.config.defaults import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.profile
'default'
>>> DEFAULT_CONFIG.markup.element_id
'id_encode'
"""


def get_default_config() -> StimtabConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    StimtabConfig
        A deep copy of the default configuration.

    Examples
    --------
    >>> config = get_default_config()
    >>> config.generation.length
    5
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
