# speckit/emit/__init__.py
"""
Multi-target client emission.

- base: EmitContext, Emitter base class, template views
- naming: identifier case conversion
- rendering: jinja2 rendering
- registry: language -> emitter lookup and `emit()`
- writer: write a file map to disk
"""

from speckit.emit.base import EmitContext, Emitter
from speckit.emit.registry import available_languages, emit, get_emitter
from speckit.emit.rendering import render
from speckit.emit.writer import write_files

__all__ = [
    "EmitContext",
    "Emitter",
    "available_languages",
    "emit",
    "get_emitter",
    "render",
    "write_files",
]
