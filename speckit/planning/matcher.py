# speckit/planning/matcher.py
"""
Intent-to-operation matching.

Deterministic keyword/substring scoring, deliberately permissive: an
operation is selected when

    (entity match AND (action match OR no action detected))
    OR a token longer than 3 characters occurs in the operation id

Entity match: a token longer than 2 characters occurs in the operation's
id, path, summary or one of its tags (all lower-cased).
"""

from __future__ import annotations

import time
from typing import Callable, List, Mapping, Optional, Sequence, Set, Tuple, Union

from speckit.contract.extractor import OperationDescriptor
from speckit.logging.logger import get_logger
from speckit.logging.tags import PLAN
from speckit.planning.keywords import ACTION_KEYWORDS, ACTION_METHODS, ActionCategory
from speckit.planning.models import NoMatchResult, Task, TaskStatus

logger = get_logger(__name__)

MAX_TITLE_LENGTH = 50
ENTITY_TOKEN_MIN = 3
ID_TOKEN_MIN = 4


def default_task_id() -> str:
    return f"task-{int(time.time() * 1000)}"


def task_title(intent: str) -> str:
    """Capitalize the first character; cut to 47 chars + "..." past 50."""
    title = intent[:1].upper() + intent[1:]
    if len(title) > MAX_TITLE_LENGTH:
        return title[: MAX_TITLE_LENGTH - 3] + "..."
    return title


def classify_actions(
    intent: str,
    keyword_table: Mapping[ActionCategory, Sequence[str]] = ACTION_KEYWORDS,
) -> List[ActionCategory]:
    """Action categories whose keywords occur in the intent (table order)."""
    text = intent.lower()
    return [
        category
        for category, keywords in keyword_table.items()
        if any(keyword in text for keyword in keywords)
    ]


class IntentMatcher:
    """
    Turns free-text intent into at most one Task.

    Usage:
        matcher = IntentMatcher()
        result = matcher.plan("create and list all pets", operations)
        if isinstance(result, NoMatchResult):
            print(result.available)

    Args:
        keyword_table: Action category -> keywords
        id_factory: Produces task ids (injectable for tests)
    """

    def __init__(
        self,
        keyword_table: Mapping[ActionCategory, Sequence[str]] = ACTION_KEYWORDS,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.keyword_table = keyword_table
        self.id_factory = id_factory or default_task_id

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    @staticmethod
    def entity_match(tokens: Sequence[str], op: OperationDescriptor) -> bool:
        haystacks = [
            op.operation_id.lower(),
            op.path_template.lower(),
            op.summary.lower(),
            *(tag.lower() for tag in op.tags),
        ]
        return any(
            len(token) >= ENTITY_TOKEN_MIN and any(token in h for h in haystacks)
            for token in tokens
        )

    @staticmethod
    def action_match(actions: Sequence[ActionCategory], op: OperationDescriptor) -> bool:
        for action in actions:
            if op.method not in ACTION_METHODS[action]:
                continue
            if action is ActionCategory.LIST and not op.is_collection:
                continue
            return True
        return False

    @staticmethod
    def id_match(tokens: Sequence[str], op: OperationDescriptor) -> bool:
        op_id = op.operation_id.lower()
        return any(len(token) >= ID_TOKEN_MIN and token in op_id for token in tokens)

    def match(self, intent: str, operations: Sequence[OperationDescriptor]) -> List[str]:
        """Matched operation ids, deduplicated, in traversal order."""
        tokens = intent.lower().split()
        actions = classify_actions(intent, self.keyword_table)

        matched: List[str] = []
        seen: Set[str] = set()

        for op in operations:
            entity = self.entity_match(tokens, op)
            selected = entity and (not actions or self.action_match(actions, op))

            if selected or self.id_match(tokens, op):
                if op.operation_id not in seen:
                    seen.add(op.operation_id)
                    matched.append(op.operation_id)

        logger.debug(
            f"{PLAN} Actions {[a.value for a in actions]} matched {len(matched)} operation(s)"
        )
        return matched

    # -------------------------------------------------------------------------
    # Planning
    # -------------------------------------------------------------------------

    def plan(
        self, intent: str, operations: Sequence[OperationDescriptor]
    ) -> Union[Task, NoMatchResult]:
        matched = self.match(intent, operations)

        if not matched:
            available: Tuple[str, ...] = tuple(op.operation_id for op in operations)
            logger.info(f"{PLAN} No operations match intent {intent!r}")
            return NoMatchResult(intent=intent, available=available)

        return Task(
            id=self.id_factory(),
            title=task_title(intent),
            description=f"Implement: {intent}",
            status=TaskStatus.PENDING,
            operations=matched,
        )


__all__ = [
    "IntentMatcher",
    "classify_actions",
    "default_task_id",
    "task_title",
]
