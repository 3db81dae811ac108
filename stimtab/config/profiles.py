"""Configuration profiles for stimtab.

This module provides pre-configured profiles for different environments
(development and testing) alongside the defaults.
"""

from __future__ import annotations

from pathlib import Path
from tempfile import gettempdir

from stimtab.config.config import StimtabConfig
from stimtab.config.generation import GenerationConfig
from stimtab.config.logging import LoggingConfig
from stimtab.config.output import SerializationConfig
from stimtab.config.paths import PathsConfig

# development profile: verbose logging, readable output
DEV_CONFIG = StimtabConfig(
    profile="dev",
    paths=PathsConfig(
        data_dir=Path("data"),
        output_dir=Path("experiment_dev"),
        create_dirs=True,
    ),
    serialization=SerializationConfig(indent=2),  # readable timeline variables
    logging=LoggingConfig(
        level="DEBUG",  # verbose logging for development
        console=True,
    ),
)
"""Development configuration profile.

Optimized for:
- Verbose logging (DEBUG level)
- Indented JSON for reading generated pages

Examples
--------
>>> from stimtab.config.profiles import DEV_CONFIG
>>> DEV_CONFIG.logging.level
'DEBUG'
>>> DEV_CONFIG.serialization.indent
2
"""

# test profile: minimal logging, fixed seed, temp directories
TEST_CONFIG = StimtabConfig(
    profile="test",
    paths=PathsConfig(
        data_dir=Path(gettempdir()) / "stimtab_test" / "data",
        output_dir=Path(gettempdir()) / "stimtab_test" / "experiment",
        create_dirs=True,
    ),
    generation=GenerationConfig(seed=42),  # reproducible tests
    logging=LoggingConfig(
        level="CRITICAL",  # minimal logging for tests
        console=False,  # quiet tests
    ),
)
"""Test configuration profile.

Optimized for:
- Reproducibility (fixed random seed)
- Temporary directories for isolation
- Minimal logging (CRITICAL level)

Examples
--------
>>> from stimtab.config.profiles import TEST_CONFIG
>>> TEST_CONFIG.logging.level
'CRITICAL'
>>> TEST_CONFIG.generation.seed
42
"""

# profile registry
PROFILES: dict[str, StimtabConfig] = {
    "default": StimtabConfig(),  # default from models
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of available configuration profiles.

Examples
--------
>>> from stimtab.config.profiles import PROFILES
>>> list(PROFILES.keys())
['default', 'dev', 'test']
"""


def get_profile(name: str) -> StimtabConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name (default, dev, test).

    Returns
    -------
    StimtabConfig
        A deep copy of the profile configuration.

    Raises
    ------
    ValueError
        If the profile name is unknown.

    Examples
    --------
    >>> config = get_profile("dev")
    >>> config.profile
    'dev'
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        raise ValueError(f"Unknown profile '{name}'. Available profiles: {available}")

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """List available profile names.

    Returns
    -------
    list[str]
        Sorted profile names.

    Examples
    --------
    >>> list_profiles()
    ['default', 'dev', 'test']
    """
    return sorted(PROFILES.keys())
