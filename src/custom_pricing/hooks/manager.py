"""Plugin manager factory."""

from __future__ import annotations

import pluggy

from custom_pricing.hooks import hookspecs


def get_plugin_manager(*plugins: object) -> pluggy.PluginManager:
    """Return a plugin manager with the lifecycle hookspecs and *plugins*."""
    pm = pluggy.PluginManager(hookspecs.PROJECT_NAME)
    pm.add_hookspecs(hookspecs)
    for plugin in plugins:
        pm.register(plugin)
    return pm
