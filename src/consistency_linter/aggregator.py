"""Orchestration: run the enabled engines and build a ConsistencyReport."""

import logging
from collections import Counter
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterable, Mapping, Sequence

from .conventions import (
    DEFAULT_MIXED_THRESHOLD,
    DEFAULT_SAMPLE_SIZE_PER_FILE,
    MIXED,
    ConventionDetector,
)
from .engine import NamingEngine, analyze_files
from .exceptions import ConfigurationError
from .models import (
    ConsistencyReport,
    ConventionResult,
    NamingCategory,
    NamingIssue,
    PatternCategory,
    PatternIssue,
    ReportSummary,
    RetrievalFailure,
    Severity,
)
from .patterns import PatternEngine
from .provider import DEFAULT_EXCLUDE, DEFAULT_EXTENSIONS, ContentProvider, FileContentProvider, find_source_files
from .registry import RuleRegistry, registry as default_registry
from .whitelists import Whitelists

logger = logging.getLogger(__name__)

POOR_NAMING_THRESHOLD = 5
ABBREVIATION_THRESHOLD = 10
UNCLEAR_THRESHOLD = 5

PATTERN_HEADLINES = {
    PatternCategory.ERROR_HANDLING.value: "Establish a consistent error handling strategy",
    PatternCategory.ASYNC_STYLE.value: "Use one asynchronous style",
    PatternCategory.IMPORT_STYLE.value: "Use one module system",
}

# camelCase spellings accepted by ConsistencyOptions.from_mapping
_OPTION_ALIASES = {
    "rootDir": "root_dir",
    "checkNaming": "check_naming",
    "checkPatterns": "check_patterns",
    "minSeverity": "min_severity",
    "ignoreRules": "ignore_rules",
    "maxWorkers": "max_workers",
    "sampleSizePerFile": "sample_size_per_file",
    "mixedThreshold": "mixed_threshold",
}

SourceFinder = Callable[[str, Iterable[str], Iterable[str]], list[str]]


@dataclass
class ConsistencyOptions:
    root_dir: str
    check_naming: bool = True
    check_patterns: bool = True
    min_severity: Severity | str = Severity.INFO
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude: tuple[str, ...] = DEFAULT_EXCLUDE
    ignore_rules: tuple[str, ...] = ()
    max_workers: int | None = None
    whitelists: Whitelists | None = None
    sample_size_per_file: int = DEFAULT_SAMPLE_SIZE_PER_FILE
    mixed_threshold: float = DEFAULT_MIXED_THRESHOLD

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ConsistencyOptions":
        """Build options from a dict using either camelCase or snake_case keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option '{key}'")
            kwargs[name] = value
        if "root_dir" not in kwargs:
            raise ConfigurationError("Option 'rootDir' is required")
        return cls(**kwargs)

    def validate(self) -> Severity:
        """Check the options before any file is touched; returns the parsed severity."""
        if not self.root_dir or not str(self.root_dir).strip():
            raise ConfigurationError("Root directory must not be empty")
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError("max_workers must be at least 1")
        return Severity.parse(self.min_severity)


class ConsistencyAnalyzer:
    """Runs naming and pattern analysis over a source tree"""

    def __init__(
        self,
        provider: ContentProvider | None = None,
        finder: SourceFinder | None = None,
        registry: RuleRegistry | None = None,
    ):
        self.provider = provider or FileContentProvider()
        self.finder = finder or find_source_files
        self.registry = registry or default_registry

    def run(self, options: ConsistencyOptions) -> ConsistencyReport:
        min_severity = options.validate()
        detector = ConventionDetector(options.sample_size_per_file, options.mixed_threshold)
        unknown = set(options.ignore_rules) - set(self.registry.rule_ids())
        if unknown:
            logger.warning("Ignoring unknown rule ids: %s", ", ".join(sorted(unknown)))

        files = sorted(self.finder(str(options.root_dir), options.extensions, options.exclude))
        logger.info("Analyzing %d files under %s", len(files), options.root_dir)

        engine = None
        if options.check_naming:
            engine = NamingEngine(options.whitelists, self.registry, options.ignore_rules)
        results = analyze_files(files, self.provider, engine, options.max_workers)

        failures = tuple(r.failure for r in results if r.failure is not None)
        contents = {r.file_path: r.content for r in results if r.content is not None}
        analyzed = [f for f in files if f in contents]

        naming_issues = sorted(
            (issue for r in results for issue in r.issues),
            key=lambda i: (i.file_path, i.line),
        )

        pattern_issues: list[PatternIssue] = []
        if options.check_patterns:
            pattern_issues = PatternEngine(self.registry, options.ignore_rules).analyze(analyzed, contents)

        conventions = detector.detect(analyzed, naming_issues) if options.check_naming else None

        naming_issues = [i for i in naming_issues if i.severity.rank >= min_severity.rank]
        pattern_issues = [i for i in pattern_issues if i.severity.rank >= min_severity.rank]

        report = build_report(analyzed, naming_issues, pattern_issues, failures, conventions, detector)
        logger.info(
            "Found %d issues (%d naming, %d pattern), %d unreadable files",
            report.summary.total_issues,
            report.summary.naming_issues,
            report.summary.pattern_issues,
            report.summary.failed_files,
        )
        return report


def build_report(
    files: Sequence[str],
    naming_issues: Sequence[NamingIssue],
    pattern_issues: Sequence[PatternIssue],
    failures: Sequence[RetrievalFailure],
    conventions: ConventionResult | None,
    detector: ConventionDetector | None = None,
) -> ConsistencyReport:
    all_issues = [*naming_issues, *pattern_issues]
    by_category = Counter(i.category for i in all_issues)
    by_severity = Counter(i.severity.value for i in all_issues)

    summary = ReportSummary(
        files_analyzed=len(files),
        total_issues=len(all_issues),
        naming_issues=len(naming_issues),
        pattern_issues=len(pattern_issues),
        failed_files=len(failures),
        by_category={c: by_category[c] for c in sorted(by_category)},
        by_severity={s.value: by_severity[s.value] for s in Severity},
    )
    return ConsistencyReport(
        summary=summary,
        naming_issues=tuple(naming_issues),
        pattern_issues=tuple(pattern_issues),
        failures=tuple(failures),
        conventions=conventions,
        recommendations=tuple(
            derive_recommendations(naming_issues, pattern_issues, failures, conventions, detector)
        ),
    )


def derive_recommendations(
    naming_issues: Sequence[NamingIssue],
    pattern_issues: Sequence[PatternIssue],
    failures: Sequence[RetrievalFailure] = (),
    conventions: ConventionResult | None = None,
    detector: ConventionDetector | None = None,
) -> list[str]:
    """Natural-language advice derived from how the issues are distributed."""
    counts = Counter(i.category for i in naming_issues)
    recommendations = []

    mixed = counts[NamingCategory.CONVENTION_MIX.value]
    if mixed > 0:
        recommendations.append(
            f"Standardize naming conventions: {mixed} snake_case identifier(s) found in a camelCase codebase"
        )
    poor = counts[NamingCategory.POOR_NAMING.value]
    if poor > POOR_NAMING_THRESHOLD:
        recommendations.append(
            f"Improve variable naming: {poor} single-letter names used outside loops and callbacks"
        )
    abbreviations = counts[NamingCategory.ABBREVIATION.value]
    if abbreviations > ABBREVIATION_THRESHOLD:
        recommendations.append(
            f"Expand abbreviations: {abbreviations} unexplained abbreviations found; "
            "whitelist project-specific terms that are intended"
        )
    unclear = counts[NamingCategory.UNCLEAR.value]
    if unclear > UNCLEAR_THRESHOLD:
        recommendations.append(
            f"Clarify intent: {unclear} booleans or functions lack an is/has prefix or an action verb"
        )

    for issue in pattern_issues:
        headline = PATTERN_HEADLINES.get(issue.category, "Make patterns consistent")
        recommendations.append(f"{headline}: {issue.suggestion}")

    if conventions is not None and conventions.dominant_convention == MIXED:
        threshold = detector.mixed_threshold if detector else DEFAULT_MIXED_THRESHOLD
        recommendations.append(
            "Agree on a single naming convention: convention mismatches exceed "
            f"{threshold:.0%} of sampled declarations"
        )

    if failures:
        recommendations.append(
            f"{len(failures)} file(s) could not be read; check permissions and encodings"
        )

    if not recommendations:
        recommendations.append("No major consistency issues found")
    return recommendations


def analyze_consistency(
    options: ConsistencyOptions | Mapping[str, Any],
    provider: ContentProvider | None = None,
) -> ConsistencyReport:
    """Top-level entry point: analyze the tree under options.root_dir."""
    if not isinstance(options, ConsistencyOptions):
        options = ConsistencyOptions.from_mapping(options)
    return ConsistencyAnalyzer(provider=provider).run(options)
