"""Entry point for ``python -m stimtab``."""

from stimtab.cli.main import cli

if __name__ == "__main__":
    cli()
