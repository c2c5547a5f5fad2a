# speckit/emit/targets/typescript.py
"""
TypeScript target: ApiService over an injected fetch-compatible transport.

Files:
    src/index.ts          runnable entry point
    src/api-service.ts    one async method per operation
    package.json          typescript + node typings
"""

from __future__ import annotations

from speckit.emit.base import Emitter, MethodView
from speckit.emit.naming import TYPESCRIPT_RESERVED, safe_identifier, to_camel_case


class TypeScriptEmitter(Emitter):
    language = "typescript"
    files = (
        ("src/index.ts", "typescript/index.ts"),
        ("src/api-service.ts", "typescript/api-service.ts"),
        ("package.json", "typescript/package.json"),
    )
    local_names = frozenset({"url", "queryParts", "encodeURIComponent"})

    def method_name(self, operation_id: str) -> str:
        return safe_identifier(to_camel_case(operation_id), TYPESCRIPT_RESERVED)

    def param_identifier(self, name: str) -> str:
        return safe_identifier(to_camel_case(name), TYPESCRIPT_RESERVED)

    def signature(self, method: MethodView) -> str:
        # Optional query parameters must trail the required ones
        params = [f"{p.identifier}: {p.native_type}" for p in method.path_params]
        if method.has_body:
            params.append(f"{self.body_identifier}: any")
        params += [f"{p.identifier}?: {p.native_type}" for p in method.query_params]
        return ", ".join(params)

    def example_call(self, method: MethodView) -> str:
        args = [f"'example-{p.name}'" for p in method.path_params]
        if method.has_body:
            args.append("{}")
        prefix = "const result = " if method.returns_value else ""
        return f"{prefix}await apiService.{method.name}({', '.join(args)});"
