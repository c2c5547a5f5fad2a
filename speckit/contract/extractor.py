# speckit/contract/extractor.py
"""
Operation extraction.

Flattens a ContractDocument into OperationDescriptors - the language-neutral
IR every emitter and the intent matcher consume.

Traversal order is document order for paths and canonical order
(GET, POST, PUT, PATCH, DELETE) for verbs. Operations without an
operationId are skipped, not rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Optional, Tuple

from speckit.contract.models import ContractDocument, OperationSpec
from speckit.contract.types import GENERIC_OBJECT, VOID, SemanticType, map_type
from speckit.core.errors import EmptyOperationSetError
from speckit.logging.logger import get_logger
from speckit.logging.tags import CONTRACT

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"
SUCCESS_CODES = ("200", "201")


@dataclass(frozen=True)
class ParamDescriptor:
    name: str
    semantic_type: SemanticType
    location: str


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Emitter-facing view of one operation.

    Attributes:
        operation_id: Unique operation identifier
        method: Upper-case HTTP verb
        path_template: Path with {param} placeholders
        summary: Summary, falling back to the operation id
        has_body: Whether the operation declares a request body
        params: Parameters in declaration order
        return_type: "void", a schema name, or "Object"
        tags: Contract tags (used for intent matching)
    """

    operation_id: str
    method: str
    path_template: str
    summary: str
    has_body: bool
    params: Tuple[ParamDescriptor, ...] = ()
    return_type: str = VOID
    tags: Tuple[str, ...] = field(default=())

    @property
    def path_params(self) -> Tuple[ParamDescriptor, ...]:
        return tuple(p for p in self.params if p.location == "path")

    @property
    def query_params(self) -> Tuple[ParamDescriptor, ...]:
        return tuple(p for p in self.params if p.location == "query")

    @property
    def is_collection(self) -> bool:
        """True when the path has no {param} segment."""
        return "{" not in self.path_template

    @property
    def returns_value(self) -> bool:
        return self.return_type != VOID


def infer_return_type(operation: OperationSpec) -> str:
    """
    Resolve the return type from the 200 (else 201) JSON response.

    No success response or no content → "void"; JSON content without a
    named schema → "Object"; otherwise the referenced schema name.
    """
    success = None
    for code in SUCCESS_CODES:
        if code in operation.responses:
            success = operation.responses[code]
            break

    if success is None or not success.content:
        return VOID

    media = success.content.get(JSON_MEDIA_TYPE)
    if media is None or media.schema_ is None:
        return GENERIC_OBJECT

    return media.schema_.ref_name or GENERIC_OBJECT


def _describe(path: str, method: str, operation: OperationSpec) -> OperationDescriptor:
    params = tuple(
        ParamDescriptor(
            name=p.name,
            semantic_type=map_type(p.schema_),
            location=p.location,
        )
        for p in operation.parameters
    )

    return OperationDescriptor(
        operation_id=operation.operation_id or "",
        method=method.upper(),
        path_template=path,
        summary=operation.summary or operation.operation_id or "",
        has_body=operation.request_body is not None,
        params=params,
        return_type=infer_return_type(operation),
        tags=tuple(operation.tags),
    )


def list_operations(document: ContractDocument) -> List[OperationDescriptor]:
    """All well-formed operations in traversal order. Never raises on empty."""
    descriptors: List[OperationDescriptor] = []

    for path, item in document.paths.items():
        for method, operation in item.operations():
            if not operation.operation_id:
                logger.debug(f"{CONTRACT} Skipping {method.upper()} {path}: no operationId")
                continue
            descriptors.append(_describe(path, method, operation))

    return descriptors


def extract_operations(
    document: ContractDocument,
    operation_ids: Optional[Iterable[str]] = None,
) -> List[OperationDescriptor]:
    """
    Extract operation descriptors, optionally filtered by id.

    Output order follows the document, never the filter.

    Raises:
        EmptyOperationSetError: If no operation survives extraction/filtering
    """
    descriptors = list_operations(document)

    wanted: Optional[AbstractSet[str]] = None
    if operation_ids is not None:
        wanted = frozenset(operation_ids)
        descriptors = [d for d in descriptors if d.operation_id in wanted]

    if not descriptors:
        raise EmptyOperationSetError(wanted)

    logger.debug(f"{CONTRACT} Extracted {len(descriptors)} operation(s)")
    return descriptors


__all__ = [
    "OperationDescriptor",
    "ParamDescriptor",
    "extract_operations",
    "infer_return_type",
    "list_operations",
]
