from consistency_linter.models import (
    ConsistencyReport,
    ConventionResult,
    NamingIssue,
    PatternIssue,
    RetrievalFailure,
)

from .models import (
    ConventionOut,
    FailureOut,
    NamingIssueOut,
    PatternIssueOut,
    ReportOut,
    SummaryOut,
)


def naming_issue_to_model(issue: NamingIssue) -> NamingIssueOut:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    return NamingIssueOut(
        severity=issue.severity,
        file_path=issue.file_path,
        line=issue.line,
        category=issue.category,
        identifier=issue.identifier,
        rule_id=issue.rule_id,
        suggestion=issue.suggestion,
    )


def pattern_issue_to_model(issue: PatternIssue) -> PatternIssueOut:
    return PatternIssueOut(
        severity=issue.severity,
        files=list(issue.files),
        category=issue.category,
        identifier=issue.identifier,
        rule_id=issue.rule_id,
        description=issue.description,
        suggestion=issue.suggestion,
    )


def conventions_to_model(result: ConventionResult) -> ConventionOut:
    return ConventionOut(
        dominant_convention=result.dominant_convention,
        confidence_score=result.confidence_score,
    )


def failure_to_model(failure: RetrievalFailure) -> FailureOut:
    return FailureOut(file_path=failure.file_path, message=failure.message)


def report_to_model(report: ConsistencyReport) -> ReportOut:
    summary = report.summary
    return ReportOut(
        summary=SummaryOut(
            files_analyzed=summary.files_analyzed,
            total_issues=summary.total_issues,
            naming_issues=summary.naming_issues,
            pattern_issues=summary.pattern_issues,
            failed_files=summary.failed_files,
            by_category=dict(summary.by_category),
            by_severity=dict(summary.by_severity),
        ),
        naming_issues=[naming_issue_to_model(i) for i in report.naming_issues],
        pattern_issues=[pattern_issue_to_model(i) for i in report.pattern_issues],
        failures=[failure_to_model(f) for f in report.failures],
        conventions=conventions_to_model(report.conventions) if report.conventions else None,
        recommendations=list(report.recommendations),
    )
