# tests/test_guardrail_report.py
"""
Tests for guardrail report formatting.
"""

from __future__ import annotations

from speckit.guardrails.base import Violation
from speckit.guardrails.report import FIX_HINT, format_report, group_by_rule, violations_to_dicts

VIOLATIONS = [
    Violation("no-fetch", "src/a.ts", 2, "Direct fetch() calls are not allowed."),
    Violation("no-raw-url", "src/a.ts", 2, "Hardcoded URLs detected."),
    Violation("no-fetch", "src/b.ts", 9, "Direct fetch() calls are not allowed."),
]


class TestGrouping:
    def test_groups_in_first_seen_order(self):
        grouped = group_by_rule(VIOLATIONS)

        assert list(grouped) == ["no-fetch", "no-raw-url"]
        assert [v.location for v in grouped["no-fetch"]] == ["src/a.ts:2", "src/b.ts:9"]

    def test_empty(self):
        assert group_by_rule([]) == {}


class TestFormatReport:
    def test_pass(self):
        report = format_report([])

        assert "GUARDRAILS CHECK PASSED" in report
        assert "FAILED" not in report

    def test_fail(self):
        report = format_report(VIOLATIONS)

        assert "GUARDRAILS CHECK FAILED" in report
        assert "3 violation(s) detected." in report
        assert "[no-fetch] - 2 occurrence(s)" in report
        assert "[no-raw-url] - 1 occurrence(s)" in report
        assert "  - src/b.ts:9" in report
        assert FIX_HINT in report


class TestDicts:
    def test_keys(self):
        assert violations_to_dicts(VIOLATIONS[:1]) == [
            {
                "rule": "no-fetch",
                "file": "src/a.ts",
                "line": 2,
                "message": "Direct fetch() calls are not allowed.",
            }
        ]
