from dataclasses import dataclass, field
from enum import Enum

from .exceptions import ConfigurationError


class Severity(str, Enum):
    """Issue severity levels, ordered info < minor < major < critical"""

    INFO = "info"
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    @classmethod
    def parse(cls, value: "str | Severity") -> "Severity":
        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ConfigurationError(
                f"Unknown severity '{value}' (expected one of: {allowed})"
            ) from None


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.MINOR: 1,
    Severity.MAJOR: 2,
    Severity.CRITICAL: 3,
}


class NamingCategory(str, Enum):
    POOR_NAMING = "poor-naming"
    ABBREVIATION = "abbreviation"
    CONVENTION_MIX = "convention-mix"
    UNCLEAR = "unclear"


class PatternCategory(str, Enum):
    ERROR_HANDLING = "error-handling"
    ASYNC_STYLE = "async-style"
    IMPORT_STYLE = "import-style"


@dataclass(frozen=True, kw_only=True)
class Issue:
    """A single reported defect"""

    category: str
    identifier: str
    severity: Severity
    suggestion: str
    rule_id: str


@dataclass(frozen=True, kw_only=True)
class NamingIssue(Issue):
    """Line-scoped naming issue"""

    file_path: str
    line: int


@dataclass(frozen=True, kw_only=True)
class PatternIssue(Issue):
    """Issue scoped to the set of files that mix styles"""

    files: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class RetrievalFailure:
    """A file that could not be read during a run"""

    file_path: str
    message: str


@dataclass(frozen=True)
class ConventionResult:
    dominant_convention: str  # 'camelCase' or 'mixed'
    confidence_score: float


@dataclass(frozen=True)
class ReportSummary:
    files_analyzed: int
    total_issues: int
    naming_issues: int
    pattern_issues: int
    failed_files: int
    by_category: dict[str, int] = field(default_factory=dict)
    by_severity: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ConsistencyReport:
    """Aggregated result of one analysis run"""

    summary: ReportSummary
    naming_issues: tuple[NamingIssue, ...]
    pattern_issues: tuple[PatternIssue, ...]
    failures: tuple[RetrievalFailure, ...]
    conventions: ConventionResult | None
    recommendations: tuple[str, ...]
