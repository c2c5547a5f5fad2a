# speckit/contract/models.py
"""
Normalized contract model.

Pydantic models for the subset of OpenAPI speckit understands: info, servers,
paths → verbs → operations (parameters, request body, responses) and component
schemas. Unknown keys are ignored so newer contract documents still load.
Models are frozen; a ContractDocument is never mutated after loading.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Canonical verb traversal order for a path item
HTTP_METHODS: Tuple[str, ...] = ("get", "post", "put", "patch", "delete")

ParameterLocation = Literal["path", "query", "header", "cookie"]


class _ContractModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class SchemaObject(_ContractModel):
    """Schema subset: scalars, arrays, objects and $ref."""

    type: Optional[str] = None
    format: Optional[str] = None
    properties: Dict[str, SchemaObject] = Field(default_factory=dict)
    items: Optional[SchemaObject] = None
    required: List[str] = Field(default_factory=list)
    ref: Optional[str] = Field(default=None, alias="$ref")
    enum: Optional[List[Any]] = None
    description: Optional[str] = None

    @property
    def ref_name(self) -> Optional[str]:
        """Trailing path segment of $ref ("#/components/schemas/Pet" → "Pet")."""
        if not self.ref:
            return None
        return self.ref.rstrip("/").split("/")[-1] or None


class Parameter(_ContractModel):
    name: str
    location: ParameterLocation = Field(..., alias="in")
    required: bool = False
    schema_: Optional[SchemaObject] = Field(default=None, alias="schema")
    description: Optional[str] = None


class MediaType(_ContractModel):
    schema_: Optional[SchemaObject] = Field(default=None, alias="schema")


class RequestBody(_ContractModel):
    required: bool = False
    content: Dict[str, MediaType] = Field(default_factory=dict)


class ResponseSpec(_ContractModel):
    description: str = ""
    content: Optional[Dict[str, MediaType]] = None


class OperationSpec(_ContractModel):
    """One verb-bound endpoint."""

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    parameters: List[Parameter] = Field(default_factory=list)
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")
    responses: Dict[str, ResponseSpec] = Field(default_factory=dict)

    @field_validator("responses", mode="before")
    @classmethod
    def _status_codes_as_strings(cls, value: Any) -> Any:
        # YAML reads unquoted status codes (200:) as integers
        if isinstance(value, dict):
            return {str(code): response for code, response in value.items()}
        return value

    @field_validator("parameters", "tags", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PathItem(_ContractModel):
    get: Optional[OperationSpec] = None
    post: Optional[OperationSpec] = None
    put: Optional[OperationSpec] = None
    patch: Optional[OperationSpec] = None
    delete: Optional[OperationSpec] = None

    def operations(self) -> Iterator[Tuple[str, OperationSpec]]:
        """Yield (method, operation) pairs in canonical verb order."""
        for method in HTTP_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                yield method, operation


class Info(_ContractModel):
    title: str
    version: str = ""
    description: Optional[str] = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_string(cls, value: Any) -> Any:
        # "version: 1.0" parses as a float
        return "" if value is None else str(value)


class Server(_ContractModel):
    url: str
    description: Optional[str] = None


class Components(_ContractModel):
    schemas: Dict[str, SchemaObject] = Field(default_factory=dict)


class ContractDocument(_ContractModel):
    """Root of the normalized contract model."""

    openapi: str = ""
    info: Info
    servers: List[Server] = Field(default_factory=list)
    paths: Dict[str, PathItem] = Field(default_factory=dict)
    components: Optional[Components] = None

    @field_validator("openapi", mode="before")
    @classmethod
    def _openapi_as_string(cls, value: Any) -> Any:
        return "" if value is None else str(value)

    @field_validator("paths", "servers", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return {} if info.field_name == "paths" else []
        return value

    @property
    def title(self) -> str:
        return self.info.title


__all__ = [
    "HTTP_METHODS",
    "Components",
    "ContractDocument",
    "Info",
    "MediaType",
    "OperationSpec",
    "Parameter",
    "PathItem",
    "RequestBody",
    "ResponseSpec",
    "SchemaObject",
    "Server",
]
