"""Builtin plugin registering the pantheon command group."""

from __future__ import annotations

import typer

from pantheon.builtin.cli import app as pantheon_app
from pantheon.hookspecs import hookimpl


class PantheonCommands:
    @hookimpl
    def register_cli_commands(self, app: typer.Typer) -> None:
        app.add_typer(pantheon_app, name="pantheon")
