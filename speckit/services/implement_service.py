# speckit/services/implement_service.py
"""
Service layer for `speckit implement` - generate code for plan tasks.

Task lifecycle: pending -> in-progress (before generation) -> completed
(after its files are written). The plan is saved after every completed
task, so a failure part way through keeps earlier completions. A dry run
renders and scans but neither moves tasks nor saves the plan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from speckit.core.errors import TaskNotFoundError
from speckit.logging.logger import get_logger
from speckit.logging.tags import PLAN
from speckit.planning.models import Plan, Task
from speckit.planning.store import load_plan, save_plan
from speckit.services.generation_service import GenerationResult, GenerationService

logger = get_logger(__name__)


@dataclass
class ImplementResult:
    plan: Plan
    tasks: List[Task] = field(default_factory=list)
    generations: List[GenerationResult] = field(default_factory=list)
    dry_run: bool = False

    @property
    def remaining(self) -> List[Task]:
        return self.plan.pending_tasks()


def select_tasks(plan: Plan, task_id: Optional[str] = None, all_pending: bool = False) -> List[Task]:
    """
    Tasks to implement: a named task, every pending task, or the first pending one.

    Raises:
        TaskNotFoundError: If `task_id` is not in the plan
    """
    if task_id is not None:
        task = plan.find_task(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return [task]

    pending = plan.pending_tasks()
    if all_pending:
        return pending
    return pending[:1]


class ImplementService:
    def __init__(self, generation: Optional[GenerationService] = None):
        self.generation = generation or GenerationService()

    def implement(
        self,
        plan_path: Union[str, Path],
        contract_path: Union[str, Path],
        language: str,
        output_dir: Union[str, Path],
        task_id: Optional[str] = None,
        all_pending: bool = False,
        dry_run: bool = False,
        package_name: Optional[str] = None,
    ) -> ImplementResult:
        plan = load_plan(plan_path)
        tasks = select_tasks(plan, task_id=task_id, all_pending=all_pending)
        result = ImplementResult(plan=plan, tasks=tasks, dry_run=dry_run)

        for task in tasks:
            if not dry_run:
                task.start()

            generation = self.generation.generate(
                contract_path,
                language,
                output_dir,
                operation_ids=task.operations,
                package_name=package_name,
                dry_run=dry_run,
            )
            result.generations.append(generation)

            if not dry_run:
                task.complete()
                save_plan(plan, plan_path)
                logger.info(f"{PLAN} Completed {task.id} ({len(generation.written)} file(s))")

        return result


__all__ = ["ImplementResult", "ImplementService", "select_tasks"]
