"""Main configuration model for stimtab."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from stimtab.config.generation import GenerationConfig
from stimtab.config.logging import LoggingConfig
from stimtab.config.markup import MarkupConfig
from stimtab.config.output import SerializationConfig
from stimtab.config.page import PageDefaultsConfig
from stimtab.config.paths import PathsConfig


class StimtabConfig(BaseModel):
    """Main configuration for stimtab.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    paths : PathsConfig
        Paths configuration.
    generation : GenerationConfig
        Random string generation defaults.
    markup : MarkupConfig
        Markup generation defaults.
    serialization : SerializationConfig
        Timeline variable serialization defaults.
    page : PageDefaultsConfig
        Experiment page defaults.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = StimtabConfig()
    >>> config.profile
    'default'
    >>> config.markup.element
    'p'
    >>> config.serialization.markup_column
    'html'
    """

    profile: str = Field(default="default", description="Configuration profile name")
    paths: PathsConfig = Field(
        default_factory=PathsConfig, description="Paths configuration"
    )
    generation: GenerationConfig = Field(
        default_factory=GenerationConfig, description="Generation configuration"
    )
    markup: MarkupConfig = Field(
        default_factory=MarkupConfig, description="Markup configuration"
    )
    serialization: SerializationConfig = Field(
        default_factory=SerializationConfig,
        description="Serialization configuration",
    )
    page: PageDefaultsConfig = Field(
        default_factory=PageDefaultsConfig, description="Page configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert configuration to YAML string.

        Returns
        -------
        str
            Configuration as YAML string.

        Examples
        --------
        >>> config = StimtabConfig()
        >>> yaml_str = config.to_yaml()
        >>> 'profile: default' in yaml_str
        True
        """
        from stimtab.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=False)
