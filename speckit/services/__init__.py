# speckit/services/__init__.py
"""
Business logic behind CLI commands, free of UI concerns.
"""

from speckit.services.generation_service import GenerationResult, GenerationService
from speckit.services.implement_service import ImplementResult, ImplementService
from speckit.services.plan_service import PlanOutcome, PlanService

__all__ = [
    "GenerationResult",
    "GenerationService",
    "ImplementResult",
    "ImplementService",
    "PlanOutcome",
    "PlanService",
]
