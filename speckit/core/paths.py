# speckit/core/paths.py
"""
Central path management for speckit.

ALL components that need project paths should use this module.

A speckit project is any directory holding a `spec-kit.yaml` file. Commands
locate it by walking up from the current directory, the same way git finds
its repository root.

Design principles:
- Single source of truth
- Project-relative by default
- Easy to override for testing
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

CONFIG_FILE = "spec-kit.yaml"
DEFAULT_PLAN_FILE = "plan.yaml"


class SpecKitPaths:
    """
    Central path management for speckit.

    Usage:
        from speckit.core.paths import SpecKitPaths

        root = SpecKitPaths.project_root()
        config_path = SpecKitPaths.config()

        # Override the project root for testing
        SpecKitPaths.set_project_root("/tmp/test_project")
    """

    _root_override: Optional[Path] = None

    @classmethod
    def set_project_root(cls, path: Optional[str | Path]) -> None:
        """
        Override the project root.

        Pass None to reset to discovery from the CWD.
        """
        if path is None:
            cls._root_override = None
        else:
            cls._root_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default discovery. Useful in tests."""
        cls._root_override = None

    @classmethod
    def find_project_root(cls, start: Optional[Path] = None) -> Optional[Path]:
        """
        Walk up from `start` (default: CWD) looking for spec-kit.yaml.

        Returns:
            Directory containing the config file, or None if not in a project
        """
        current = (start or Path.cwd()).resolve()

        for candidate in (current, *current.parents):
            if (candidate / CONFIG_FILE).is_file():
                return candidate

        return None

    @classmethod
    def project_root(cls) -> Optional[Path]:
        """The project root (override, else discovered, else None)."""
        if cls._root_override is not None:
            return cls._root_override
        return cls.find_project_root()

    @classmethod
    def config(cls, root: Optional[Path] = None) -> Path:
        """Path of spec-kit.yaml for a project (default: current project or CWD)."""
        base = root or cls.project_root() or Path.cwd()
        return base / CONFIG_FILE

    @classmethod
    def resolve(cls, relative: str | Path, root: Optional[Path] = None) -> Path:
        """Resolve a project-relative path; absolute paths pass through."""
        path = Path(relative)
        if path.is_absolute():
            return path
        base = root or cls.project_root() or Path.cwd()
        return base / path


__all__ = ["SpecKitPaths", "CONFIG_FILE", "DEFAULT_PLAN_FILE"]
