# speckit/guardrails/report.py
"""
Presentation of guardrail results.

The flat violation list is the contract; grouping and text formatting are
derived from it here.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from speckit.guardrails.base import Violation

RULE_WIDTH = 60

FIX_HINT = (
    "FIX: Remove direct HTTP calls and go through the generated client.\n"
    "All API interactions must use the code generated from the contract."
)


def group_by_rule(violations: Sequence[Violation]) -> Dict[str, List[Violation]]:
    """Violations keyed by rule name, in first-seen order."""
    grouped: Dict[str, List[Violation]] = {}
    for violation in violations:
        grouped.setdefault(violation.rule_name, []).append(violation)
    return grouped


def format_report(violations: Sequence[Violation]) -> str:
    """Human-readable report: a pass banner, or violations grouped by rule."""
    line = "=" * RULE_WIDTH

    if not violations:
        return "\n".join(
            [line, "GUARDRAILS CHECK PASSED", "No violations detected.", line, ""]
        )

    parts = [line, "GUARDRAILS CHECK FAILED", f"{len(violations)} violation(s) detected.", line]

    for rule_name, items in group_by_rule(violations).items():
        parts.append("")
        parts.append(f"[{rule_name}] - {len(items)} occurrence(s)")
        parts.append("-" * RULE_WIDTH)
        parts.append(f"  {items[0].message}")
        parts.extend(f"  - {v.location}" for v in items)

    parts.extend(["", line, FIX_HINT, line, ""])
    return "\n".join(parts)


def violations_to_dicts(violations: Sequence[Violation]) -> List[Dict[str, Any]]:
    """Machine-readable form (e.g. for JSON output)."""
    return [
        {
            "rule": v.rule_name,
            "file": v.file_path,
            "line": v.line_number,
            "message": v.message,
        }
        for v in violations
    ]


__all__ = ["FIX_HINT", "format_report", "group_by_rule", "violations_to_dicts"]
