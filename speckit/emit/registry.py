# speckit/emit/registry.py
"""
Emitter registry.

Emitters are auto-discovered from speckit.emit.targets: any class defining
`language` and `emit` is registered under its language name.

Usage:
    from speckit.emit.registry import emit

    files = emit(operations, "python", EmitContext.from_title("Pet Store"))
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from speckit.contract.extractor import OperationDescriptor
from speckit.core.errors import UnsupportedLanguageError
from speckit.core.registry import PluginNotFoundError, PluginRegistry
from speckit.emit.base import EmitContext, Emitter
from speckit.logging.logger import get_logger
from speckit.logging.tags import EMIT

logger = get_logger(__name__)

EMITTER_REGISTRY = PluginRegistry(
    name="emitter",
    scan_packages=["speckit.emit.targets"],
    required_method="emit",
    plugin_name_attr="language",
)


def available_languages() -> List[str]:
    return EMITTER_REGISTRY.list_available()


def get_emitter(language: str) -> Emitter:
    """
    Instantiate the emitter for a language.

    Raises:
        UnsupportedLanguageError: No emitter is registered for `language`
    """
    try:
        emitter_cls = EMITTER_REGISTRY.get(language)
    except PluginNotFoundError:
        raise UnsupportedLanguageError(language, available_languages()) from None
    return emitter_cls()


def emit(
    operations: Sequence[OperationDescriptor],
    language: str,
    context: Optional[EmitContext] = None,
) -> Dict[str, str]:
    """Render the full file set for one language."""
    emitter = get_emitter(language)
    files = emitter.emit(operations, context or EmitContext())
    logger.debug(f"{EMIT} Rendered {len(files)} {language} file(s) for {len(operations)} operation(s)")
    return files


__all__ = ["EMITTER_REGISTRY", "available_languages", "emit", "get_emitter"]
