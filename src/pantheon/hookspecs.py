"""Pluggy hook namespace and host tool hook specifications."""

from __future__ import annotations

from typing import Any

import pluggy

PANTHEON_HOOK_NAMESPACE = "pantheon"
hookspec = pluggy.HookspecMarker(PANTHEON_HOOK_NAMESPACE)
hookimpl = pluggy.HookimplMarker(PANTHEON_HOOK_NAMESPACE)


class PantheonHookSpecs:
    """Hook contract for host tool extensions."""

    @hookspec
    def register_cli_commands(self, app: Any) -> None:
        """Register CLI commands onto the root Typer application.

        Host plugins add the native ``format``, ``mount``, ``umount`` and
        ``clone`` commands that pantheon commands are translated into.
        """
