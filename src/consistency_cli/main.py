import json
import logging
from pathlib import Path
from typing import Optional

import typer
from consistency_linter.aggregator import ConsistencyAnalyzer
from consistency_linter.conventions import detect_naming_conventions
from consistency_linter.engine import NamingEngine, analyze_files
from consistency_linter.exceptions import ConfigurationError
from consistency_linter.models import ConsistencyReport
from consistency_linter.registry import registry

from .config import LintConfig
from .converters import conventions_to_model, failure_to_model, naming_issue_to_model, report_to_model

app = typer.Typer(help="Consistency Linter - Report naming and pattern inconsistencies in JS/TS code")

MAX_LISTED_FILES = 10


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    """Consistency Linter"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def check(
    root: Path = typer.Argument(Path("."), help="Directory to analyze"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    naming: Optional[bool] = typer.Option(None, "--naming/--no-naming", help="Run naming rules"),
    patterns: Optional[bool] = typer.Option(None, "--patterns/--no-patterns", help="Run pattern rules"),
    min_severity: Optional[str] = typer.Option(None, help="Minimum severity to show (info, minor, major, critical)"),
    workers: Optional[int] = typer.Option(None, help="Number of worker threads"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """Check naming and pattern consistency of a source tree"""
    try:
        if config_file is not None and not config_file.is_file():
            raise ConfigurationError(f"Config file '{config_file}' not found")
        config = LintConfig(config_file) if config_file else LintConfig.discover(root)
        options = config.to_options(
            root,
            check_naming=naming,
            check_patterns=patterns,
            min_severity=min_severity,
            max_workers=workers,
        )
        report = ConsistencyAnalyzer().run(options)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(report_to_model(report).model_dump_json(indent=2))
        return
    _print_report(report)


@app.command("naming")
def naming_cmd(
    files: list[Path] = typer.Argument(..., help="Files to analyze"),
    json_output: bool = typer.Option(False, "--json", help="Print issues as JSON"),
):
    """Run only the naming rules on the given files"""
    results = analyze_files([str(f) for f in files], engine=NamingEngine())
    issues = [issue for result in results for issue in result.issues]
    failures = [result.failure for result in results if result.failure is not None]
    read = [result.file_path for result in results if result.failure is None]
    conventions = detect_naming_conventions(read, issues)

    if json_output:
        payload = {
            "issues": [naming_issue_to_model(i).model_dump(mode="json") for i in issues],
            "failures": [failure_to_model(f).model_dump(mode="json") for f in failures],
            "conventions": conventions_to_model(conventions).model_dump(mode="json"),
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    for issue in issues:
        typer.echo(
            f"{issue.severity.value.upper()}: {issue.file_path}:{issue.line} "
            f"[{issue.category}] - {issue.suggestion}"
        )
    for failure in failures:
        typer.echo(f"UNREADABLE: {failure.file_path} - {failure.message}")
    typer.echo(f"\nTotal issues found: {len(issues)}")
    typer.echo(
        f"Dominant naming convention: {conventions.dominant_convention} "
        f"(confidence {conventions.confidence_score:.2f})"
    )


@app.command()
def rules():
    """List the built-in rules"""
    for rule in registry.get_naming_rules():
        typer.echo(f"{rule.rule_id:24} {rule.category.value:16} {rule.severity.value:8} {rule.description}")
    for rule in registry.get_pattern_rules():
        styles = ", ".join(rule.label(s) for s in rule.styles)
        typer.echo(f"{rule.rule_id:24} {rule.category.value:16} {rule.severity.value:8} {styles}")


def _print_report(report: ConsistencyReport):
    for issue in report.naming_issues:
        typer.echo(
            f"{issue.severity.value.upper()}: {issue.file_path}:{issue.line} "
            f"[{issue.category}] - {issue.suggestion}"
        )

    for issue in report.pattern_issues:
        typer.echo(
            f"{issue.severity.value.upper()}: {len(issue.files)} files [{issue.category}] - {issue.description}"
        )
        typer.echo(f"  -> {issue.suggestion}")
        for file_path in issue.files[:MAX_LISTED_FILES]:
            typer.echo(f"     {file_path}")
        if len(issue.files) > MAX_LISTED_FILES:
            typer.echo(f"     ... and {len(issue.files) - MAX_LISTED_FILES} more")

    for failure in report.failures:
        typer.echo(f"UNREADABLE: {failure.file_path} - {failure.message}")

    summary = report.summary
    typer.echo(
        f"\nTotal issues found: {summary.total_issues} "
        f"({summary.naming_issues} naming, {summary.pattern_issues} pattern) "
        f"in {summary.files_analyzed} files"
    )
    if report.conventions:
        typer.echo(
            f"Dominant naming convention: {report.conventions.dominant_convention} "
            f"(confidence {report.conventions.confidence_score:.2f})"
        )
    typer.echo("\nRecommendations:")
    for recommendation in report.recommendations:
        typer.echo(f"  - {recommendation}")


if __name__ == "__main__":
    app()
