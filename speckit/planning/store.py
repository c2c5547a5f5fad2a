# speckit/planning/store.py
"""
Plan persistence as YAML.

Layout:
    intent: create and list all pets
    createdAt: "2024-05-01T12:00:00+00:00"
    tasks:
      - id: task-1714564800000
        title: Create and list all pets
        description: "Implement: create and list all pets"
        status: pending
        operations: [createPet, listPets]

Concurrent writers are not guarded against.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import yaml

from speckit.core.errors import NotFoundError, ParseError
from speckit.logging.logger import get_logger
from speckit.logging.tags import PLAN
from speckit.planning.models import NoMatchResult, Plan, Task

logger = get_logger(__name__)


def create_plan(
    intent: str,
    result: Union[Task, NoMatchResult],
    now: Optional[datetime] = None,
) -> Plan:
    """Wrap a planning result in a Plan (a NoMatchResult gives no tasks)."""
    created = now or datetime.now(timezone.utc)
    tasks = [result] if isinstance(result, Task) else []
    return Plan(intent=intent, created_at=created.isoformat(), tasks=tasks)


def save_plan(plan: Plan, path: Union[str, Path]) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    with target.open("w", encoding="utf-8") as f:
        yaml.safe_dump(plan.to_dict(), f, sort_keys=False, indent=2)

    logger.debug(f"{PLAN} Saved plan with {len(plan.tasks)} task(s) to {target}")
    return target


def load_plan(path: Union[str, Path]) -> Plan:
    """
    Load a plan document.

    Raises:
        NotFoundError: If the plan file does not exist
        ParseError: If the file is not a valid plan document
    """
    p = Path(path)

    if not p.is_file():
        raise NotFoundError("Plan not found", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid plan syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ParseError("Plan root must be a mapping", path=p)

    try:
        return Plan.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"Invalid plan structure: {e!r}", path=p) from e


__all__ = ["create_plan", "load_plan", "save_plan"]
