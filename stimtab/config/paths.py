"""Path configuration models for stimtab."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class PathsConfig(BaseModel):
    """Configuration for file system paths.

    Parameters
    ----------
    data_dir : Path
        Directory holding stimulus tables.
    output_dir : Path
        Directory generated experiment pages are written to.
    create_dirs : bool
        Whether to create directories if they don't exist.

    Examples
    --------
    >>> config = PathsConfig()
    >>> config.data_dir
    PosixPath('data')
    >>> config = PathsConfig(output_dir=Path("/absolute/path"))
    >>> config.output_dir
    PosixPath('/absolute/path')
    """

    data_dir: Path = Field(
        default=Path("data"), description="Directory holding stimulus tables"
    )
    output_dir: Path = Field(
        default=Path("experiment"), description="Directory for generated pages"
    )
    create_dirs: bool = Field(
        default=True, description="Create directories if they don't exist"
    )
