# speckit/guardrails/__init__.py
"""
Static checks that keep network I/O inside the generated client.

- base: GuardrailRule, LinePredicate, Violation
- rules: DEFAULT_RULES
- engine: GuardrailEngine
- report: grouping and formatting
"""

from speckit.guardrails.base import GuardrailRule, LinePredicate, RegexPredicate, Violation
from speckit.guardrails.engine import GuardrailEngine, infer_language, is_comment
from speckit.guardrails.report import format_report, group_by_rule, violations_to_dicts
from speckit.guardrails.rules import DEFAULT_RULES

__all__ = [
    "DEFAULT_RULES",
    "GuardrailEngine",
    "GuardrailRule",
    "LinePredicate",
    "RegexPredicate",
    "Violation",
    "format_report",
    "group_by_rule",
    "infer_language",
    "is_comment",
    "violations_to_dicts",
]
