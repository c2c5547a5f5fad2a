# speckit/emit/rendering.py
"""
Jinja2 rendering for generated files.

Templates ship inside the package under speckit/emit/templates/<language>/.
A template id is the path relative to that directory without the ".jinja2"
suffix, e.g. "java/ApiClient.java".

Undefined variables raise instead of rendering empty, so a missing binding
is caught the first time an emitter runs.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, List, Mapping

from jinja2 import Environment, PackageLoader, StrictUndefined

TEMPLATE_SUFFIX = ".jinja2"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=PackageLoader("speckit.emit", "templates"),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
    )


def render(template_id: str, bindings: Mapping[str, Any]) -> str:
    """Render one template with the given bindings."""
    template = get_environment().get_template(f"{template_id}{TEMPLATE_SUFFIX}")
    return template.render(**bindings)


def list_templates(language: str) -> List[str]:
    """Template ids shipped for a language (sorted)."""
    prefix = f"{language}/"
    return sorted(
        name[: -len(TEMPLATE_SUFFIX)]
        for name in get_environment().list_templates()
        if name.startswith(prefix) and name.endswith(TEMPLATE_SUFFIX)
    )


__all__ = ["TEMPLATE_SUFFIX", "get_environment", "list_templates", "render"]
