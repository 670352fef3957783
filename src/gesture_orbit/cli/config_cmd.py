from __future__ import annotations

from pathlib import Path

import typer

from ..config import Config
from .common import DEFAULT_USER_CONFIG_PATH, app

config_app = typer.Typer(help="Show or create the configuration file.")
app.add_typer(config_app, name="config")


@config_app.command("show")
def show_config_cmd(
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help=f"Path to config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
) -> None:
    """Print the effective configuration as JSON."""
    print(Config.load(config_path).model_dump_json(indent=2))


@config_app.command("init")
def init_config_cmd(
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help=f"Path to config file. Default: {DEFAULT_USER_CONFIG_PATH}"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Write the default configuration to the config file."""
    path = Config.validate_path(config_path)
    if path.exists() and not force:
        print(f"Config file {path} already exists, use --force to overwrite it.")
        raise typer.Exit(1)
    print(f"Default config written to {Config().save(path)}")
