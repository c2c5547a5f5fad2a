# speckit/__init__.py
"""
speckit - contract-driven client generation.

Load an API contract, emit clients for Java, TypeScript and Python, plan
work from free-text intent, and keep network calls inside generated code.

Quick start:
    from speckit.contract import load_contract, extract_operations
    from speckit.emit import EmitContext, emit

    document = load_contract("openapi.yaml")
    files = emit(extract_operations(document), "python", EmitContext.from_title(document.title))
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
