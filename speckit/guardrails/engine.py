# speckit/guardrails/engine.py
"""
Guardrail engine - stateless line scanner.

For every file: infer the language from the extension, then for every
applicable rule and every non-comment line, test the rule's pattern and
its skip patterns. Violations come out ordered by file, then rule order,
then line number.

Usage:
    engine = GuardrailEngine()
    violations = engine.scan({"src/index.ts": source})
    passed = not violations
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, FrozenSet, List, Mapping, Sequence, Tuple, Union

from speckit.guardrails.base import GuardrailRule, Violation
from speckit.guardrails.rules import DEFAULT_RULES
from speckit.logging.logger import get_logger
from speckit.logging.tags import GUARD

logger = get_logger(__name__)

LANGUAGE_BY_EXTENSION: Dict[str, str] = {
    ".java": "java",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".py": "python",
}

SOURCE_EXTENSIONS: FrozenSet[str] = frozenset(LANGUAGE_BY_EXTENSION)
SKIPPED_EXTENSIONS: Tuple[str, ...] = (".xml", ".pom")
SKIPPED_DIRS: FrozenSet[str] = frozenset(
    {"node_modules", "dist", "build", "target", ".git", "__pycache__", ".venv", "venv"}
)

COMMENT_PREFIXES: Dict[str, Tuple[str, ...]] = {
    "java": ("//", "*", "/*"),
    "typescript": ("//", "*", "/*"),
    "javascript": ("//", "*", "/*"),
    "python": ("#", '"""', "'''"),
}


def infer_language(file_path: Union[str, Path]) -> str:
    """Language for a path by extension, or "unknown"."""
    return LANGUAGE_BY_EXTENSION.get(Path(file_path).suffix.lower(), "unknown")


def is_comment(line: str, language: str) -> bool:
    """Whether a line is a comment line (leading whitespace ignored)."""
    prefixes = COMMENT_PREFIXES.get(language)
    if not prefixes:
        return False
    return line.strip().startswith(prefixes)


class GuardrailEngine:
    """
    Scans sources against a fixed rule set.

    Args:
        rules: Rules in evaluation order (defaults to DEFAULT_RULES)
    """

    def __init__(self, rules: Sequence[GuardrailRule] = DEFAULT_RULES):
        self.rules: Tuple[GuardrailRule, ...] = tuple(rules)

    def scan_file(self, content: str, language: str, file_path: str = "<memory>") -> List[Violation]:
        lines = content.split("\n")
        violations: List[Violation] = []

        for rule in self.rules:
            if not rule.applies_to(language):
                continue

            for index, line in enumerate(lines, start=1):
                if is_comment(line, language):
                    continue
                if rule.violated_by(line):
                    violations.append(
                        Violation(
                            rule_name=rule.name,
                            file_path=file_path,
                            line_number=index,
                            message=rule.message,
                        )
                    )

        return violations

    def scan(self, files: Mapping[str, str]) -> List[Violation]:
        """Scan an in-memory file map (path -> content). XML files are skipped."""
        violations: List[Violation] = []

        for file_path, content in files.items():
            if str(file_path).lower().endswith(SKIPPED_EXTENSIONS):
                continue
            violations.extend(self.scan_file(content, infer_language(file_path), str(file_path)))

        logger.debug(f"{GUARD} Scanned {len(files)} file(s): {len(violations)} violation(s)")
        return violations

    def scan_tree(self, root: Union[str, Path]) -> List[Violation]:
        """
        Scan every source file under `root`, in sorted order.

        Dependency/build directories are skipped. A missing root yields [].
        """
        base = Path(root)
        if not base.exists():
            logger.debug(f"{GUARD} Nothing to scan at {base}")
            return []

        if base.is_file():
            paths = [base] if base.suffix.lower() in SOURCE_EXTENSIONS else []
        else:
            paths = list(self._walk(base))

        violations: List[Violation] = []
        for path in paths:
            content = path.read_text(encoding="utf-8", errors="replace")
            violations.extend(self.scan_file(content, infer_language(path), str(path)))

        logger.debug(f"{GUARD} Scanned {len(paths)} file(s) under {base}: {len(violations)} violation(s)")
        return violations

    @staticmethod
    def _walk(base: Path):
        for dirpath, dirnames, filenames in os.walk(base):
            dirnames[:] = sorted(d for d in dirnames if d not in SKIPPED_DIRS)
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if path.suffix.lower() in SOURCE_EXTENSIONS:
                    yield path


__all__ = [
    "COMMENT_PREFIXES",
    "GuardrailEngine",
    "LANGUAGE_BY_EXTENSION",
    "SKIPPED_DIRS",
    "SOURCE_EXTENSIONS",
    "infer_language",
    "is_comment",
]
