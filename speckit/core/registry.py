# speckit/core/registry.py
"""
Plugin registry with lazy auto-discovery.

Emitters are plain classes living in a scanned package. A class is picked up
when it has the registry's required method and name attribute, so adding a
target language means dropping one module into the package - nothing else
changes.
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass, field
from typing import Any, Dict, List, Type

from speckit.logging.logger import get_logger

logger = get_logger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class PluginRegistryError(Exception):
    """Base error for plugin registry operations."""

    pass


class PluginNotFoundError(PluginRegistryError):
    """Raised when requested plugin doesn't exist."""

    pass


class DuplicatePluginError(PluginRegistryError):
    """Raised when two plugins have the same name."""

    pass


# =============================================================================
# PluginRegistry Class
# =============================================================================


@dataclass
class PluginRegistry:
    """
    Generic plugin registry with lazy auto-discovery.

    Args:
        name: Registry name (for error messages)
        scan_packages: Package names to scan for plugins (non-recursive)
        required_method: Method name that plugins must have
        plugin_name_attr: Attribute containing the plugin name
    """

    name: str
    scan_packages: List[str]
    required_method: str
    plugin_name_attr: str = "plugin_name"
    _plugins: Dict[str, Type[Any]] = field(default_factory=dict, repr=False)
    _discovered: bool = field(default=False, repr=False)

    def get(self, plugin_name: str) -> Type[Any]:
        """Get a plugin class by name."""
        self._ensure_discovered()

        if plugin_name not in self._plugins:
            available = sorted(self._plugins.keys())
            raise PluginNotFoundError(
                f"Unknown {self.name} plugin: {plugin_name!r}. Available: {available}"
            )

        return self._plugins[plugin_name]

    def list_available(self) -> List[str]:
        """List all available plugin names."""
        self._ensure_discovered()
        return sorted(self._plugins.keys())

    def register(self, plugin_class: Type[Any]) -> None:
        """Manually register a plugin class."""
        if not hasattr(plugin_class, self.required_method):
            raise PluginRegistryError(
                f"{self.name} plugin {plugin_class.__name__} missing required "
                f"method {self.required_method!r}"
            )

        if not hasattr(plugin_class, self.plugin_name_attr):
            raise PluginRegistryError(
                f"{self.name} plugin {plugin_class.__name__} missing required "
                f"attribute {self.plugin_name_attr!r}"
            )

        name = getattr(plugin_class, self.plugin_name_attr)

        if name in self._plugins:
            existing = self._plugins[name]
            if existing is not plugin_class:
                raise DuplicatePluginError(
                    f"Duplicate {self.name} plugin: {name!r}. "
                    f"Found in {existing.__module__} and {plugin_class.__module__}"
                )
            return

        self._plugins[name] = plugin_class
        logger.debug(f"Registered {self.name} plugin: {name!r}")

    def _ensure_discovered(self) -> None:
        """Run auto-discovery if not already done."""
        if self._discovered:
            return

        for package_name in self.scan_packages:
            package = importlib.import_module(package_name)
            self._scan_package(package)

        self._discovered = True
        logger.debug(
            f"Discovered {len(self._plugins)} {self.name} plugin(s): {sorted(self._plugins.keys())}"
        )

    def _scan_package(self, package: Any) -> None:
        """Scan a package for plugin classes (non-recursive)."""
        package_path = getattr(package, "__path__", None)
        if not package_path:
            return

        for _, modname, ispkg in pkgutil.iter_modules(package_path, prefix=f"{package.__name__}."):
            if ispkg:
                continue

            module = importlib.import_module(modname)
            self._scan_module(module)

    def _scan_module(self, module: Any) -> None:
        """Register classes defined in `module` that look like plugins."""
        for name in dir(module):
            if name.startswith("_"):
                continue

            obj = getattr(module, name)

            if not isinstance(obj, type):
                continue

            if not hasattr(obj, self.required_method):
                continue

            if not hasattr(obj, self.plugin_name_attr):
                continue

            # Skip classes merely imported into the module (base classes etc.)
            if obj.__module__ != module.__name__:
                continue

            self.register(obj)


__all__ = [
    "PluginRegistry",
    "PluginRegistryError",
    "PluginNotFoundError",
    "DuplicatePluginError",
]
