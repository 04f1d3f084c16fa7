"""Plugin manager for the root CLI."""

from __future__ import annotations

import pluggy
from loguru import logger

from pantheon.builtin.plugin import PantheonCommands
from pantheon.hookspecs import PANTHEON_HOOK_NAMESPACE, PantheonHookSpecs

BUILTIN_PLUGIN_NAME = "builtin"


def build_plugin_manager(*, load_entrypoints: bool = True) -> pluggy.PluginManager:
    """Create the plugin manager with the builtin commands and installed host plugins."""

    manager = pluggy.PluginManager(PANTHEON_HOOK_NAMESPACE)
    manager.add_hookspecs(PantheonHookSpecs)
    manager.register(PantheonCommands(), name=BUILTIN_PLUGIN_NAME)
    if load_entrypoints:
        loaded = manager.load_setuptools_entrypoints(PANTHEON_HOOK_NAMESPACE)
        logger.debug("plugins.loaded count={}", loaded)
    return manager
