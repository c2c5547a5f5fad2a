# speckit/services/plan_service.py
"""Service layer for planning: match intent against the contract and persist the plan."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from speckit.contract.extractor import list_operations
from speckit.contract.loader import load_contract
from speckit.logging.logger import get_logger
from speckit.logging.tags import PLAN
from speckit.planning.matcher import IntentMatcher
from speckit.planning.models import NoMatchResult, Plan, Task
from speckit.planning.store import create_plan, save_plan

logger = get_logger(__name__)


@dataclass
class PlanOutcome:
    """A saved plan, or the no-match result (nothing saved)."""

    result: Union[Task, NoMatchResult]
    plan: Optional[Plan] = None
    path: Optional[Path] = None

    @property
    def matched(self) -> bool:
        return isinstance(self.result, Task)


class PlanService:
    def __init__(self, matcher: Optional[IntentMatcher] = None):
        self.matcher = matcher or IntentMatcher()

    def plan(
        self,
        intent: str,
        contract_path: Union[str, Path],
        output: Union[str, Path],
        now: Optional[datetime] = None,
    ) -> PlanOutcome:
        """
        Match `intent` and save the plan to `output`.

        A NoMatchResult is returned as is; no plan file is written.
        """
        document = load_contract(contract_path)
        operations = list_operations(document)
        result = self.matcher.plan(intent, operations)

        if isinstance(result, NoMatchResult):
            return PlanOutcome(result=result)

        plan = create_plan(intent, result, now=now)
        path = save_plan(plan, output)
        logger.info(f"{PLAN} Plan with {len(result.operations)} operation(s) saved to {path}")
        return PlanOutcome(result=result, plan=plan, path=path)


__all__ = ["PlanOutcome", "PlanService"]
