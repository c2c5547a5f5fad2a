# speckit/planning/__init__.py
"""
Intent matching and task planning.

- keywords: action keyword table
- models: Task, Plan, NoMatchResult
- matcher: IntentMatcher
- store: plan YAML persistence
"""

from speckit.planning.keywords import ACTION_KEYWORDS, ActionCategory
from speckit.planning.matcher import IntentMatcher, classify_actions
from speckit.planning.models import NoMatchResult, Plan, Task, TaskStatus
from speckit.planning.store import create_plan, load_plan, save_plan

__all__ = [
    "ACTION_KEYWORDS",
    "ActionCategory",
    "IntentMatcher",
    "NoMatchResult",
    "Plan",
    "Task",
    "TaskStatus",
    "classify_actions",
    "create_plan",
    "load_plan",
    "save_plan",
]
