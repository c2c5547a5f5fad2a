# speckit/emit/targets/java.py
"""
Java target: java.net.http.HttpClient REST client, Maven build.

Files:
    src/main/java/Application.java   runnable entry point
    src/main/java/ApiClient.java     one method per operation
    pom.xml                          Gson dependency only
"""

from __future__ import annotations

from speckit.emit.base import Emitter, MethodView
from speckit.emit.naming import JAVA_RESERVED, safe_identifier, to_camel_case


class JavaEmitter(Emitter):
    language = "java"
    files = (
        ("src/main/java/Application.java", "java/Application.java"),
        ("src/main/java/ApiClient.java", "java/ApiClient.java"),
        ("pom.xml", "java/pom.xml"),
    )
    local_names = frozenset({"url", "queryParts"})

    def method_name(self, operation_id: str) -> str:
        return safe_identifier(to_camel_case(operation_id), JAVA_RESERVED)

    def param_identifier(self, name: str) -> str:
        return safe_identifier(to_camel_case(name), JAVA_RESERVED)

    def signature(self, method: MethodView) -> str:
        params = [f"{p.native_type} {p.identifier}" for p in method.path_params]
        params += [f"{p.native_type} {p.identifier}" for p in method.query_params]
        if method.has_body:
            params.append(f"Object {self.body_identifier}")
        return ", ".join(params)

    def example_call(self, method: MethodView) -> str:
        args = [f'"example-{p.name}"' for p in method.path_params]
        args += ["null"] * len(method.query_params)
        if method.has_body:
            args.append("null")
        prefix = "var result = " if method.returns_value else ""
        return f"{prefix}apiClient.{method.name}({', '.join(args)});"
