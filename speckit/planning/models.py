# speckit/planning/models.py
"""
Data models for implementation plans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass
class Task:
    """
    A unit of implementation work: the operations one intent selected.

    Attributes:
        id: "task-<ms timestamp>"
        title: Capitalized intent, at most 50 characters
        description: "Implement: <intent>"
        status: pending -> in-progress -> completed
        operations: Matched operation ids, in contract order
    """

    id: str
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    operations: List[str] = field(default_factory=list)

    def start(self) -> None:
        if self.status is not TaskStatus.PENDING:
            raise ValueError(f"Task {self.id} cannot start from status {self.status.value!r}")
        self.status = TaskStatus.IN_PROGRESS

    def complete(self) -> None:
        if self.status is not TaskStatus.IN_PROGRESS:
            raise ValueError(f"Task {self.id} cannot complete from status {self.status.value!r}")
        self.status = TaskStatus.COMPLETED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "operations": list(self.operations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            description=str(data.get("description", "")),
            status=TaskStatus(data.get("status", TaskStatus.PENDING.value)),
            operations=[str(op) for op in data.get("operations") or []],
        )


@dataclass
class Plan:
    """Persisted planning result: {intent, createdAt, tasks}."""

    intent: str
    created_at: str
    tasks: List[Task] = field(default_factory=list)

    def pending_tasks(self) -> List[Task]:
        return [t for t in self.tasks if t.status is TaskStatus.PENDING]

    def find_task(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.intent,
            "createdAt": self.created_at,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Plan":
        return cls(
            intent=str(data["intent"]),
            created_at=str(data["createdAt"]),
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
        )


@dataclass(frozen=True)
class NoMatchResult:
    """
    Intent matched no operation. Not an error.

    `available` lists every operation id so callers can show the catalog.
    """

    intent: str
    available: Tuple[str, ...] = ()


__all__ = ["NoMatchResult", "Plan", "Task", "TaskStatus"]
