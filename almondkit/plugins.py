"""Plugin interface and a manager that loads and unloads plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .logger import Logger

PluginFactory = Callable[[], Optional["Plugin"]]

_REQUIRED = ("initialize", "shutdown")


class Plugin(ABC):
    """A loadable extension with an initialize/shutdown lifecycle.

    Any class that provides callable ``initialize`` and ``shutdown`` methods
    counts as a plugin for ``isinstance`` checks.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the plugin for use."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release whatever the plugin holds."""

    @classmethod
    def __subclasshook__(cls, other):
        if cls is Plugin:
            if all(
                any(name in base.__dict__ and callable(base.__dict__[name]) for base in other.__mro__)
                for name in _REQUIRED
            ):
                return True
        return NotImplemented


class ExampleMod(Plugin):
    """A sample plugin that announces its lifecycle on standard output."""

    def initialize(self) -> None:
        print("ExampleMod initialized!")

    def shutdown(self) -> None:
        print("ExampleMod shutting down!")


class PluginManager:
    """Creates plugins from factories and shuts them down in reverse order."""

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._plugins: List[Plugin] = []

    def load_plugin(self, factory: Optional[PluginFactory]) -> bool:
        """Create a plugin with ``factory``, initialize and keep it.

        Returns False, after logging why, when no plugin could be created.
        """
        name = getattr(factory, "__qualname__", repr(factory))
        self._logger.log(f"Attempting to load plugin: {name}")

        if factory is None:
            self._logger.log(f"ERROR: Failed to load plugin: {name}")
            return False
        if not callable(factory):
            self._logger.log(f"ERROR: Missing entry point in plugin: {name}")
            return False

        plugin = factory()
        if plugin is None or not isinstance(plugin, Plugin):
            self._logger.log(f"ERROR: Failed to create plugin instance: {name}")
            return False

        plugin.initialize()
        self._plugins.append(plugin)
        self._logger.log(f"Successfully loaded plugin: {name}")
        return True

    def unload_all_plugins(self) -> None:
        """Shut down every plugin, most recently loaded first."""
        self._logger.log("Unloading all plugins...")
        for plugin in reversed(self._plugins):
            self._logger.log("Shutting down plugin...")
            plugin.shutdown()
        self._plugins.clear()
        self._logger.log("All plugins unloaded.")

    def __len__(self) -> int:
        return len(self._plugins)