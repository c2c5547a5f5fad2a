# speckit/guardrails/rules.py
"""
Default rule set: forbid hand-written HTTP calls outside the generated client.
"""

from __future__ import annotations

import re
from typing import Tuple

from speckit.guardrails.base import GuardrailRule, RegexPredicate

JS_FAMILY = ("typescript", "javascript")

# Lines configuring the client (or XML metadata) may legitimately hold URLs
RAW_URL_SKIPS = (
    RegexPredicate.compile(r"xmlns", re.IGNORECASE),
    RegexPredicate.compile(r"xsi:", re.IGNORECASE),
    RegexPredicate.compile(r"schema", re.IGNORECASE),
    RegexPredicate.compile(r"setBasePath"),
    RegexPredicate.compile(r"basePath"),
    RegexPredicate.compile(r"base_path"),
    RegexPredicate.compile(r"Configuration\s*\("),
)

DEFAULT_RULES: Tuple[GuardrailRule, ...] = (
    GuardrailRule.create(
        "no-fetch",
        r"\bfetch\s*\(",
        "Direct fetch() calls are not allowed. Use the generated client instead.",
        languages=JS_FAMILY,
    ),
    GuardrailRule.create(
        "no-axios",
        r"\baxios\s*[.(]",
        "Direct axios calls are not allowed. Use the generated client instead.",
        languages=JS_FAMILY,
    ),
    GuardrailRule.create(
        "no-http-client",
        r"new\s+HttpClient\s*\(",
        "Direct HttpClient usage is not allowed. Use the generated client instead.",
        languages=("java",),
    ),
    GuardrailRule.create(
        "no-okhttp-direct",
        r"new\s+OkHttpClient\s*\(",
        "Direct OkHttpClient usage is not allowed. Use the generated client instead.",
        languages=("java",),
    ),
    GuardrailRule.create(
        "no-requests",
        r"requests\.(get|post|put|delete|patch)\s*\(",
        "Direct requests calls are not allowed. Use the generated client instead.",
        languages=("python",),
    ),
    GuardrailRule.create(
        "no-urllib",
        r"urllib\.(request|urlopen)",
        "Direct urllib usage is not allowed. Use the generated client instead.",
        languages=("python",),
    ),
    GuardrailRule.create(
        "no-raw-url",
        r"[\"'](https?://[^\"']+)[\"']",
        "Hardcoded URLs detected. API calls should go through the generated client.",
        skip_patterns=RAW_URL_SKIPS,
    ),
)


__all__ = ["DEFAULT_RULES", "JS_FAMILY", "RAW_URL_SKIPS"]
