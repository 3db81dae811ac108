"""Configuration system for stimtab.

This module provides configuration models, default settings, and profiles
for table generation, markup, serialization, and page output.

Examples
--------
>>> from stimtab.config import StimtabConfig, get_default_config, get_profile
>>> config = get_default_config()
>>> config.profile
'default'
>>> get_profile("dev").logging.level
'DEBUG'
"""

from __future__ import annotations

from stimtab.config.config import StimtabConfig
from stimtab.config.defaults import DEFAULT_CONFIG, get_default_config
from stimtab.config.env import load_from_env
from stimtab.config.generation import GenerationConfig
from stimtab.config.loader import load_config, load_yaml_file, merge_configs
from stimtab.config.logging import LoggingConfig, configure_logging
from stimtab.config.markup import MarkupConfig
from stimtab.config.output import SerializationConfig
from stimtab.config.page import PageDefaultsConfig
from stimtab.config.paths import PathsConfig
from stimtab.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from stimtab.config.serialization import save_yaml, to_yaml

__all__ = [
    # Main config
    "StimtabConfig",
    # Config sections
    "PathsConfig",
    "GenerationConfig",
    "MarkupConfig",
    "SerializationConfig",
    "PageDefaultsConfig",
    "LoggingConfig",
    "configure_logging",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Profiles
    "DEV_CONFIG",
    "TEST_CONFIG",
    "PROFILES",
    "get_profile",
    "list_profiles",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Serialization
    "to_yaml",
    "save_yaml",
]
