# tests/test_guardrails.py
"""
Tests for the guardrail engine.

These tests verify:
1. Forbidden calls are reported with 1-indexed line numbers
2. Comment lines are ignored
3. Skip patterns suppress matches on the same line
4. Rules only apply to their languages
5. Directory scans skip build/dependency directories and non-source files
"""

from __future__ import annotations

import pytest

from speckit.guardrails.base import GuardrailRule, LinePredicate, RegexPredicate, Violation
from speckit.guardrails.engine import GuardrailEngine, infer_language, is_comment
from speckit.guardrails.rules import DEFAULT_RULES


@pytest.fixture
def engine():
    return GuardrailEngine()


def rule_names(violations):
    return [v.rule_name for v in violations]


# =============================================================================
# Tests: Default Rules
# =============================================================================


class TestDefaultRules:
    def test_fetch_in_typescript(self, engine):
        source = 'import x from "y";\nconst res = await fetch("https://api.example.com/x");\n'

        violations = engine.scan({"src/app.ts": source})

        assert "no-fetch" in rule_names(violations)
        fetch = next(v for v in violations if v.rule_name == "no-fetch")
        assert fetch.line_number == 2
        assert fetch.file_path == "src/app.ts"

    def test_commented_fetch_is_ignored(self, engine):
        source = '// const res = await fetch("https://api.example.com/x");\n'

        assert engine.scan({"src/app.ts": source}) == []

    def test_base_path_suppresses_raw_url(self, engine):
        source = 'const config = { basePath: "https://api.example.com" };\n'

        assert engine.scan({"src/config.ts": source}) == []

    def test_raw_url_without_skip(self, engine):
        violations = engine.scan({"src/config.ts": 'const url = "https://api.example.com";\n'})

        assert rule_names(violations) == ["no-raw-url"]

    def test_axios_only_applies_to_js_family(self, engine):
        line = "axios.get(url);\n"

        assert rule_names(engine.scan({"a.ts": line})) == ["no-axios"]
        assert rule_names(engine.scan({"a.js": line})) == ["no-axios"]
        assert engine.scan({"A.java": line}) == []

    def test_java_http_client(self, engine):
        violations = engine.scan({"App.java": "HttpClient c = new HttpClient();\n"})

        assert rule_names(violations) == ["no-http-client"]

    def test_java_http_client_builder_is_allowed(self, engine):
        assert engine.scan({"App.java": "HttpClient c = HttpClient.newBuilder().build();\n"}) == []

    def test_python_requests_and_urllib(self, engine):
        source = "r = requests.get(url)\nurllib.request.urlopen(url)\n"

        violations = engine.scan({"app.py": source})

        assert [(v.rule_name, v.line_number) for v in violations] == [
            ("no-requests", 1),
            ("no-urllib", 2),
        ]

    def test_python_comment(self, engine):
        assert engine.scan({"app.py": "# requests.get(url)\n"}) == []

    def test_xml_files_are_skipped(self, engine):
        pom = '<project xmlns="http://maven.apache.org/POM/4.0.0">\n<url>"http://x.test"</url>\n'

        assert engine.scan({"pom.xml": pom}) == []

    def test_unknown_language_gets_universal_rules_only(self, engine):
        source = 'fetch("x")\nurl: "https://api.example.com"\n'

        assert rule_names(engine.scan({"notes.txt": source})) == ["no-raw-url"]

    def test_violation_order_is_rule_then_line(self, engine):
        source = 'fetch("https://a.test");\nfetch("https://b.test");\n'

        violations = engine.scan({"x.ts": source})

        assert [(v.rule_name, v.line_number) for v in violations] == [
            ("no-fetch", 1),
            ("no-fetch", 2),
            ("no-raw-url", 1),
            ("no-raw-url", 2),
        ]

    def test_rule_names_are_unique(self):
        names = [rule.name for rule in DEFAULT_RULES]

        assert len(names) == len(set(names))


# =============================================================================
# Tests: Rule Building Blocks
# =============================================================================


class TestRules:
    def test_custom_predicate(self):
        class ContainsPredicate:
            def __init__(self, text):
                self.text = text

            def matches(self, line):
                return self.text in line

        predicate = ContainsPredicate("socket")
        assert isinstance(predicate, LinePredicate)

        rule = GuardrailRule.create("no-socket", predicate, "No sockets.")
        engine = GuardrailEngine(rules=[rule])

        assert rule_names(engine.scan({"x.py": "s = socket(1)\n"})) == ["no-socket"]

    def test_string_patterns_compile_to_regex(self):
        rule = GuardrailRule.create("r", r"foo\(", "m", skip_patterns=("allowed",))

        assert isinstance(rule.pattern, RegexPredicate)
        assert rule.violated_by("foo()")
        assert not rule.violated_by("foo() # allowed")
        assert not rule.violated_by("bar()")

    def test_applies_to(self):
        assert GuardrailRule.create("r", "x", "m").applies_to("anything")
        assert not GuardrailRule.create("r", "x", "m", languages=("java",)).applies_to("python")

    def test_violation_str(self):
        violation = Violation("no-fetch", "src/a.ts", 3, "Nope.")

        assert violation.location == "src/a.ts:3"
        assert str(violation) == "[no-fetch] src/a.ts:3: Nope."


class TestHelpers:
    @pytest.mark.parametrize(
        "path,language",
        [
            ("a/B.java", "java"),
            ("x.ts", "typescript"),
            ("x.tsx", "typescript"),
            ("x.jsx", "javascript"),
            ("x.py", "python"),
            ("README.md", "unknown"),
        ],
    )
    def test_infer_language(self, path, language):
        assert infer_language(path) == language

    def test_is_comment(self):
        assert is_comment("   // call", "typescript")
        assert is_comment(" * doc", "java")
        assert is_comment("  # note", "python")
        assert not is_comment("# not a comment in ts", "typescript")
        assert not is_comment("// anything", "unknown")


# =============================================================================
# Tests: Directory Scan
# =============================================================================


class TestScanTree:
    def test_scans_sources_and_skips_dependencies(self, engine, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "app.ts").write_text('await fetch("/x");\n', encoding="utf-8")
        (tmp_path / "node_modules" / "lib").mkdir(parents=True)
        (tmp_path / "node_modules" / "lib" / "index.js").write_text('fetch("/x");\n', encoding="utf-8")
        (tmp_path / "README.md").write_text('fetch("/x")\n', encoding="utf-8")

        violations = engine.scan_tree(tmp_path)

        assert rule_names(violations) == ["no-fetch"]
        assert violations[0].file_path.endswith("app.ts")

    def test_sorted_file_order(self, engine, tmp_path):
        (tmp_path / "b.py").write_text("requests.get(u)\n", encoding="utf-8")
        (tmp_path / "a.py").write_text("requests.post(u)\n", encoding="utf-8")

        files = [v.file_path for v in engine.scan_tree(tmp_path)]

        assert files == [str(tmp_path / "a.py"), str(tmp_path / "b.py")]

    def test_single_file(self, engine, tmp_path):
        path = tmp_path / "app.py"
        path.write_text("requests.get(u)\n", encoding="utf-8")

        assert rule_names(engine.scan_tree(path)) == ["no-requests"]

    def test_missing_root(self, engine, tmp_path):
        assert engine.scan_tree(tmp_path / "missing") == []
