# speckit/cli/context.py
"""
Central CLI context - project root, config and derived paths.

All configuration reading for commands happens here.

Usage:
    from speckit.cli.context import CLIContext

    ctx = CLIContext.load()             # raises ConfigNotFoundError outside a project
    ctx.contract_path                   # <root>/openapi.yaml
    ctx.language                        # consumer language

    ctx = CLIContext.load(required=False)   # None outside a project
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from speckit.core.config import ConfigNotFoundError, ProjectConfig, load_config
from speckit.core.paths import CONFIG_FILE, SpecKitPaths
from speckit.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Resolved project settings for one command invocation."""

    root: Path
    config: ProjectConfig

    @classmethod
    def load(cls, required: bool = True) -> Optional["CLIContext"]:
        """
        Discover the project and load spec-kit.yaml.

        Raises:
            ConfigNotFoundError: Outside a project when `required`
            ConfigParseError, ConfigValidationError: Broken config
        """
        root = SpecKitPaths.project_root()

        if root is None or not SpecKitPaths.config(root).is_file():
            if required:
                raise ConfigNotFoundError(
                    f"Not in a speckit project (no {CONFIG_FILE} found from {Path.cwd()})"
                )
            return None

        config = load_config(SpecKitPaths.config(root))
        logger.debug(f"Loaded project '{config.name}' from {root}")
        return cls(root=root, config=config)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        return SpecKitPaths.config(self.root)

    @property
    def contract_path(self) -> Path:
        return SpecKitPaths.resolve(self.config.openapi, self.root)

    @property
    def plan_path(self) -> Path:
        return SpecKitPaths.resolve(self.config.plan, self.root)

    @property
    def output_dir(self) -> Path:
        return SpecKitPaths.resolve(self.config.consumer.output_dir, self.root)

    @property
    def language(self) -> str:
        return self.config.consumer.language

    @property
    def package_name(self) -> Optional[str]:
        return self.config.package_name


__all__ = ["CLIContext"]
