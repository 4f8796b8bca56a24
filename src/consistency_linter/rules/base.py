import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..lexer import ContextTag, DeclarationSite, Role
from ..models import NamingCategory, NamingIssue, PatternCategory, PatternIssue, Severity
from ..whitelists import DEFAULT_WHITELISTS, Whitelists


@dataclass(frozen=True)
class RuleContext:
    """Per-file facts shared by every naming rule"""

    file_path: str
    whitelists: Whitelists = DEFAULT_WHITELISTS
    is_test_file: bool = False
    camel_case_file: bool = False


class BaseRule(ABC):
    """Abstract base class for naming rules.

    A rule looks at one declaration site at a time. It applies only to the
    roles it lists, and it is skipped when the site carries any of the tags in
    ``suppressed_by``.
    """

    roles: frozenset[Role] = frozenset({Role.VARIABLE})
    suppressed_by: frozenset[ContextTag] = frozenset()

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'short-identifier')."""
        pass

    @property
    @abstractmethod
    def category(self) -> NamingCategory:
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Fixed severity for this rule."""
        pass

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    def check(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        """Return an issue for the site, or None."""
        if site.role not in self.roles or site.has_any(self.suppressed_by):
            return None
        return self.evaluate(site, context)

    @abstractmethod
    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        pass

    def _create_issue(
        self,
        context: RuleContext,
        site: DeclarationSite,
        suggestion: str,
        identifier: str | None = None,
    ) -> NamingIssue:
        """Helper to create an issue with rule defaults."""
        return NamingIssue(
            file_path=context.file_path,
            line=site.line,
            category=self.category.value,
            identifier=identifier if identifier is not None else site.name,
            severity=self.severity,
            suggestion=suggestion,
            rule_id=self.rule_id,
        )


class BasePatternRule(ABC):
    """Abstract base class for cross-file pattern rules.

    ``styles`` maps each style name to the regex that reveals it, in order of
    preference. A rule classifies every file first and only concludes once all
    files have been seen.
    """

    severity: Severity = Severity.MAJOR

    @property
    @abstractmethod
    def rule_id(self) -> str:
        pass

    @property
    @abstractmethod
    def category(self) -> PatternCategory:
        pass

    @property
    @abstractmethod
    def subject(self) -> str:
        """What is being compared, e.g. 'error handling'."""
        pass

    @property
    @abstractmethod
    def styles(self) -> dict[str, re.Pattern]:
        pass

    @property
    def labels(self) -> dict[str, str]:
        """Human-readable names for the styles."""
        return {}

    def label(self, style: str) -> str:
        return self.labels.get(style, style)

    def styles_in(self, code: str) -> set[str]:
        """Styles used by one file's masked source."""
        return {name for name, pattern in self.styles.items() if pattern.search(code)}

    def conclude(self, usage: dict[str, list[str]]) -> PatternIssue | None:
        """Turn style -> files usage into one issue when two or more styles coexist."""
        used = [style for style in self.styles if usage.get(style)]
        if len(used) < 2:
            return None

        order = list(self.styles)
        preferred = max(used, key=lambda s: (len(usage[s]), -order.index(s)))
        files = sorted({f for style in used for f in usage[style]})
        others = sorted({f for style in used if style != preferred for f in usage[style]})
        breakdown = ", ".join(f"{self.label(s)} ({len(usage[s])} files)" for s in used)

        return PatternIssue(
            files=tuple(files),
            category=self.category.value,
            identifier=", ".join(used),
            severity=self.severity,
            suggestion=(
                f"Standardize {self.subject} on {self.label(preferred)}; "
                f"{len(others)} file(s) use another style"
            ),
            description=f"Mixed {self.subject} styles: {breakdown}",
            rule_id=self.rule_id,
        )
