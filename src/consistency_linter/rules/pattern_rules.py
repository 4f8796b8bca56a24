import re

from ..models import PatternCategory
from .base import BasePatternRule

_TRY_CATCH_RE = re.compile(r"\btry\s*\{")
_THROW_RE = re.compile(r"\bthrow\b")


class ErrorHandlingRule(BasePatternRule):
    """try/catch vs. error-carrying return values vs. throws nobody catches"""

    _styles = {
        "try-catch": _TRY_CATCH_RE,
        "error-result": re.compile(
            r"\breturn\s*\{\s*(?:error|err)\s*[:,}]"
            r"|\breturn\s*\{\s*(?:ok|success)\s*:\s*false\b"
            r"|\breturn\s*\[\s*(?:error|err|null|undefined)\s*,"
            r"|\bResult\s*<"
        ),
        "unchecked-throw": _THROW_RE,
    }

    @property
    def rule_id(self) -> str:
        return "mixed-error-handling"

    @property
    def category(self) -> PatternCategory:
        return PatternCategory.ERROR_HANDLING

    @property
    def subject(self) -> str:
        return "error handling"

    @property
    def styles(self) -> dict[str, re.Pattern]:
        return self._styles

    @property
    def labels(self) -> dict[str, str]:
        return {
            "try-catch": "try/catch blocks",
            "error-result": "error-carrying return values",
            "unchecked-throw": "uncaught throw statements",
        }

    def styles_in(self, code: str) -> set[str]:
        found = super().styles_in(code)
        # a throw only counts as unchecked when the file never catches
        if "try-catch" in found:
            found.discard("unchecked-throw")
        return found


class AsyncStyleRule(BasePatternRule):
    _styles = {
        "async-await": re.compile(r"\bawait\b"),
        "promise-chains": re.compile(r"\.then\s*\("),
        "callbacks": re.compile(r"\(\s*err(?:or)?\s*,[^()]*\)\s*(?:=>|\{)"),
    }

    @property
    def rule_id(self) -> str:
        return "mixed-async-style"

    @property
    def category(self) -> PatternCategory:
        return PatternCategory.ASYNC_STYLE

    @property
    def subject(self) -> str:
        return "asynchronous code"

    @property
    def styles(self) -> dict[str, re.Pattern]:
        return self._styles

    @property
    def labels(self) -> dict[str, str]:
        return {
            "async-await": "async/await",
            "promise-chains": "promise chains (.then)",
            "callbacks": "error-first callbacks",
        }


class ImportStyleRule(BasePatternRule):
    _styles = {
        "es-modules": re.compile(
            r"^\s*import\s+(?:type\s+)?(?:[\w$*{}\s,]+\s+from\s+)?['\"]"
            r"|^\s*export\s+[^;\n]*\bfrom\s+['\"]",
            re.MULTILINE,
        ),
        "commonjs": re.compile(r"\brequire\s*\(\s*['\"]"),
    }

    @property
    def rule_id(self) -> str:
        return "mixed-import-style"

    @property
    def category(self) -> PatternCategory:
        return PatternCategory.IMPORT_STYLE

    @property
    def subject(self) -> str:
        return "module imports"

    @property
    def styles(self) -> dict[str, re.Pattern]:
        return self._styles

    @property
    def labels(self) -> dict[str, str]:
        return {
            "es-modules": "ES module imports",
            "commonjs": "CommonJS require()",
        }
