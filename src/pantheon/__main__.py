"""Root CLI bootstrap."""

from __future__ import annotations

import typer

from pantheon import __version__
from pantheon.config import load_settings
from pantheon.logging_utils import configure_logging
from pantheon.plugins import build_plugin_manager


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pfs {__version__}")
        raise typer.Exit()


def create_cli_app(*, load_entrypoints: bool = True) -> typer.Typer:
    app = typer.Typer(name="pfs", help="Multi-command filesystem tool with PantheonFS mode", add_completion=False)

    @app.callback()
    def main_callback(
        verbose: bool = typer.Option(False, "--verbose", "--debug", "-v", help="enable debug log"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="show warning and errors only"),
        version: bool = typer.Option(
            False, "--version", callback=_version_callback, is_eager=True, help="show version and exit"
        ),
    ) -> None:
        settings = load_settings()
        level = settings.log_level
        if verbose:
            level = "DEBUG"
        elif quiet:
            level = "WARNING"
        configure_logging(level=level)

    manager = build_plugin_manager(load_entrypoints=load_entrypoints)
    manager.hook.register_cli_commands(app=app)
    return app


def main() -> None:
    create_cli_app()()


if __name__ == "__main__":
    main()
