# speckit/emit/targets/python.py
"""
Python target: ApiService over a requests.Session.

Files:
    main.py            runnable entry point
    api_service.py     one method per operation
    requirements.txt   requests
"""

from __future__ import annotations

from speckit.emit.base import Emitter, MethodView
from speckit.emit.naming import PYTHON_RESERVED, safe_identifier, to_snake_case


class PythonEmitter(Emitter):
    language = "python"
    files = (
        ("main.py", "python/main.py"),
        ("api_service.py", "python/api_service.py"),
        ("requirements.txt", "python/requirements.txt"),
    )
    local_names = frozenset({"self", "url", "query_parts"})

    def method_name(self, operation_id: str) -> str:
        return safe_identifier(to_snake_case(operation_id), PYTHON_RESERVED)

    def param_identifier(self, name: str) -> str:
        return safe_identifier(to_snake_case(name), PYTHON_RESERVED)

    def signature(self, method: MethodView) -> str:
        params = ["self"]
        params += [f"{p.identifier}: {p.native_type}" for p in method.path_params]
        if method.has_body:
            params.append(f"{self.body_identifier}: Any")
        params += [f"{p.identifier}: Optional[{p.native_type}] = None" for p in method.query_params]
        return ", ".join(params)

    def example_call(self, method: MethodView) -> str:
        args = [f'"example-{p.name}"' for p in method.path_params]
        if method.has_body:
            args.append("{}")
        prefix = "result = " if method.returns_value else ""
        return f"{prefix}api_service.{method.name}({', '.join(args)})"
