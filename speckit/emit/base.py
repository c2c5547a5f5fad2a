# speckit/emit/base.py
"""
Emitter base class and the views templates render from.

An emitter turns OperationDescriptors into MethodViews (language-specific
names and types already resolved) and renders its fixed file set:

    files = {relative_path: render(template_id, bindings)}

Concrete emitters live in speckit.emit.targets and are discovered by
speckit.emit.registry.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Sequence, Set, Tuple

from speckit.contract.extractor import OperationDescriptor, ParamDescriptor
from speckit.contract.types import project, project_return
from speckit.emit.naming import derive_class_name, split_words, unique_identifier
from speckit.emit.rendering import render

DEFAULT_PACKAGE_NAME = "com.example.client"
DEFAULT_BASE_PATH = "http://localhost:8080/api/v1"

_WHITESPACE = re.compile(r"\s+")


def comment_text(text: str) -> str:
    """
    Flatten free text into one line that is safe inside any generated comment.

    Whitespace runs collapse to a single space. Comment and docstring
    terminators are broken up, and backslashes become slashes (Java reads
    `\\u` escapes even inside comments).
    """
    flat = _WHITESPACE.sub(" ", text or "").strip()
    return flat.replace("\\", "/").replace("*/", "* /").replace('"""', "'''")


def artifact_name(api_class_name: str) -> str:
    """PetStoreAPI -> pet-store-api-client"""
    words = [w.lower() for w in split_words(api_class_name)]
    return "-".join(words + ["client"])


@dataclass(frozen=True)
class EmitContext:
    """Naming options shared by all files of one emission."""

    package_name: str = DEFAULT_PACKAGE_NAME
    api_class_name: str = "Default"
    base_path: str = DEFAULT_BASE_PATH

    @classmethod
    def from_title(
        cls,
        title: str,
        package_name: Optional[str] = None,
        base_path: Optional[str] = None,
    ) -> "EmitContext":
        return cls(
            package_name=package_name or DEFAULT_PACKAGE_NAME,
            api_class_name=derive_class_name(title),
            base_path=base_path or DEFAULT_BASE_PATH,
        )


@dataclass(frozen=True)
class ParamView:
    name: str
    identifier: str
    native_type: str

    @property
    def placeholder(self) -> str:
        return "{" + self.name + "}"


@dataclass(frozen=True)
class MethodView:
    """One service method, with every name and type already projected."""

    name: str
    operation_id: str
    method: str
    path: str
    summary: str
    return_type: str
    native_return: str
    has_body: bool
    path_params: Tuple[ParamView, ...] = ()
    query_params: Tuple[ParamView, ...] = ()
    signature: str = ""
    example_call: str = ""

    @property
    def returns_value(self) -> bool:
        return self.return_type != "void"


class Emitter:
    """
    Base class for language emitters.

    Subclasses set `language` and `files` (relative path, template id) and
    implement the naming hooks. Everything else is shared.
    """

    language: ClassVar[str]
    files: ClassVar[Tuple[Tuple[str, str], ...]] = ()
    body_identifier: ClassVar[str] = "body"
    # Names the method templates bind as locals; parameters never take them
    local_names: ClassVar[FrozenSet[str]] = frozenset()

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def method_name(self, operation_id: str) -> str:
        raise NotImplementedError

    def param_identifier(self, name: str) -> str:
        raise NotImplementedError

    def signature(self, method: MethodView) -> str:
        raise NotImplementedError

    def example_call(self, method: MethodView) -> str:
        raise NotImplementedError

    def extra_bindings(self, context: EmitContext) -> Dict[str, Any]:
        return {}

    # -------------------------------------------------------------------------
    # Shared
    # -------------------------------------------------------------------------

    def param_view(self, param: ParamDescriptor, taken: Set[str]) -> ParamView:
        return ParamView(
            name=param.name,
            identifier=unique_identifier(self.param_identifier(param.name), taken),
            native_type=project(param.semantic_type, self.language),
        )

    def method_view(self, op: OperationDescriptor) -> MethodView:
        taken = set(self.local_names)
        if op.has_body:
            taken.add(self.body_identifier)
        path_params = tuple(self.param_view(p, taken) for p in op.path_params)
        query_params = tuple(self.param_view(p, taken) for p in op.query_params)
        view = MethodView(
            name=self.method_name(op.operation_id),
            operation_id=op.operation_id,
            method=op.method,
            path=op.path_template,
            summary=comment_text(op.summary),
            return_type=op.return_type,
            native_return=project_return(op.return_type, self.language),
            has_body=op.has_body,
            path_params=path_params,
            query_params=query_params,
        )
        return replace(view, signature=self.signature(view), example_call=self.example_call(view))

    def bindings(
        self, operations: Sequence[OperationDescriptor], context: EmitContext
    ) -> Dict[str, Any]:
        methods: List[MethodView] = [self.method_view(op) for op in operations]
        return {
            "package_name": context.package_name,
            "api_class_name": context.api_class_name,
            "base_path": context.base_path,
            "artifact_name": artifact_name(context.api_class_name),
            "methods": methods,
            "body": self.body_identifier,
            **self.extra_bindings(context),
        }

    def emit(
        self, operations: Sequence[OperationDescriptor], context: EmitContext
    ) -> Dict[str, str]:
        """Render the file set. Pure: same input, byte-identical output."""
        bindings = self.bindings(operations, context)
        return {path: render(template_id, bindings) for path, template_id in self.files}


__all__ = [
    "DEFAULT_BASE_PATH",
    "DEFAULT_PACKAGE_NAME",
    "EmitContext",
    "Emitter",
    "MethodView",
    "ParamView",
    "artifact_name",
    "comment_text",
]
