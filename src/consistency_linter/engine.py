import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter
from pathlib import PurePath
from typing import Iterable, Sequence

from .exceptions import ContentRetrievalError
from .lexer import is_test_file, scan_declarations
from .models import NamingIssue, RetrievalFailure
from .provider import ContentProvider, FileContentProvider
from .registry import RuleRegistry, registry as default_registry
from .rules.base import RuleContext
from .whitelists import DEFAULT_WHITELISTS, Whitelists

logger = logging.getLogger(__name__)

CAMEL_CASE_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"})


def default_worker_count() -> int:
    return min(8, os.cpu_count() or 1)


def is_camel_case_file(file_path: str) -> bool:
    return PurePath(file_path).suffix.lower() in CAMEL_CASE_EXTENSIONS


class NamingEngine:
    """Applies the naming rules to one file's text.

    The engine is pure: no I/O, no state kept between calls, so one instance
    can be shared by worker threads.
    """

    def __init__(
        self,
        whitelists: Whitelists | None = None,
        registry: RuleRegistry | None = None,
        ignore: Iterable[str] = (),
    ):
        self.whitelists = whitelists or DEFAULT_WHITELISTS
        self.rules = (registry or default_registry).get_naming_rules(ignore=ignore)

    def analyze(self, text: str, file_path: str) -> list[NamingIssue]:
        """Run every naming rule; issues come out by line, then rule order."""
        context = RuleContext(
            file_path=file_path,
            whitelists=self.whitelists,
            is_test_file=is_test_file(file_path),
            camel_case_file=is_camel_case_file(file_path),
        )
        issues: list[NamingIssue] = []
        sites = scan_declarations(text, file_path)
        for _, line_sites in groupby(sites, key=attrgetter("line")):
            line_sites = list(line_sites)
            for rule in self.rules:
                for site in line_sites:
                    issue = rule.check(site, context)
                    if issue is not None:
                        issues.append(issue)
        return issues


@dataclass
class FileAnalysis:
    """Outcome of retrieving and analyzing one file"""

    file_path: str
    content: str | None = None
    issues: list[NamingIssue] = field(default_factory=list)
    failure: RetrievalFailure | None = None


def analyze_file(
    file_path: str,
    provider: ContentProvider,
    engine: NamingEngine | None,
) -> FileAnalysis:
    """Retrieve one file and, when an engine is given, run the naming rules on it."""
    try:
        content = provider.read(file_path)
    except ContentRetrievalError as e:
        logger.warning("Skipping %s: %s", file_path, e.reason)
        return FileAnalysis(file_path, failure=RetrievalFailure(file_path, e.reason))
    except (OSError, UnicodeDecodeError) as e:
        # custom providers may let plain I/O errors through
        logger.warning("Skipping %s: %s", file_path, e)
        return FileAnalysis(file_path, failure=RetrievalFailure(file_path, str(e)))

    issues = engine.analyze(content, file_path) if engine is not None else []
    logger.debug("%s: %d naming issues", file_path, len(issues))
    return FileAnalysis(file_path, content=content, issues=issues)


def analyze_files(
    files: Sequence[str],
    provider: ContentProvider | None = None,
    engine: NamingEngine | None = None,
    max_workers: int | None = None,
) -> list[FileAnalysis]:
    """Analyze files on a bounded thread pool; results keep the order of `files`."""
    provider = provider or FileContentProvider()
    workers = max(1, max_workers or default_worker_count())
    if len(files) <= 1 or workers == 1:
        return [analyze_file(f, provider, engine) for f in files]
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda f: analyze_file(f, provider, engine), files))


def analyze_naming(
    files: Sequence[str],
    provider: ContentProvider | None = None,
    whitelists: Whitelists | None = None,
    max_workers: int | None = None,
) -> list[NamingIssue]:
    """Naming issues for the given files, concatenated in caller order.

    Unreadable files are logged and skipped.
    """
    engine = NamingEngine(whitelists=whitelists)
    results = analyze_files(files, provider=provider, engine=engine, max_workers=max_workers)
    return [issue for result in results for issue in result.issues]
