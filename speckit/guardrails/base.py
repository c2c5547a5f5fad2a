# speckit/guardrails/base.py
"""
Guardrail rule types.

A rule answers: "does this source line bypass the generated client?"

Rules are immutable and hold LinePredicates rather than raw regexes, so a
rule can match on anything that can judge a single line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Optional, Protocol, Tuple, Union, runtime_checkable


@runtime_checkable
class LinePredicate(Protocol):
    """
    Protocol for single-line matchers.

    Implementations must be deterministic and side-effect free.
    """

    def matches(self, line: str) -> bool:
        ...


@dataclass(frozen=True)
class RegexPredicate:
    """Line predicate backed by a compiled regular expression (search)."""

    pattern: "re.Pattern[str]"

    @classmethod
    def compile(cls, pattern: str, flags: int = 0) -> "RegexPredicate":
        return cls(re.compile(pattern, flags))

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None

    def __str__(self) -> str:
        return self.pattern.pattern


PredicateLike = Union[str, LinePredicate]


def as_predicate(value: PredicateLike) -> LinePredicate:
    if isinstance(value, str):
        return RegexPredicate.compile(value)
    return value


@dataclass(frozen=True)
class GuardrailRule:
    """
    One forbidden pattern.

    Attributes:
        name: Rule id, e.g. "no-fetch"
        pattern: Predicate a line must match to violate the rule
        message: Shown for each violation
        languages: Languages the rule applies to (None = all)
        skip_patterns: Any match on the same line suppresses the violation
    """

    name: str
    pattern: LinePredicate
    message: str
    languages: Optional[FrozenSet[str]] = None
    skip_patterns: Tuple[LinePredicate, ...] = ()

    @classmethod
    def create(
        cls,
        name: str,
        pattern: PredicateLike,
        message: str,
        languages: Optional[Tuple[str, ...]] = None,
        skip_patterns: Tuple[PredicateLike, ...] = (),
    ) -> "GuardrailRule":
        """Build a rule, compiling plain-string patterns as regexes."""
        return cls(
            name=name,
            pattern=as_predicate(pattern),
            message=message,
            languages=frozenset(languages) if languages is not None else None,
            skip_patterns=tuple(as_predicate(p) for p in skip_patterns),
        )

    def applies_to(self, language: str) -> bool:
        return self.languages is None or language in self.languages

    def violated_by(self, line: str) -> bool:
        if not self.pattern.matches(line):
            return False
        return not any(skip.matches(line) for skip in self.skip_patterns)


@dataclass(frozen=True)
class Violation:
    """A rule hit. Line numbers are 1-indexed."""

    rule_name: str
    file_path: str
    line_number: int
    message: str

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line_number}"

    def __str__(self) -> str:
        return f"[{self.rule_name}] {self.location}: {self.message}"


__all__ = [
    "GuardrailRule",
    "LinePredicate",
    "PredicateLike",
    "RegexPredicate",
    "Violation",
    "as_predicate",
]
