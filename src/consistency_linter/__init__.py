"""
Consistency Linter - naming and pattern consistency checks for JavaScript/TypeScript

This package provides:
- Heuristic naming rules (short names, abbreviations, snake_case, booleans, verbs)
- Codebase-wide naming convention estimate
- Detection of mixed error-handling, async and import styles
- A report aggregating both with recommendations
"""

__version__ = "0.1.0"

from .aggregator import ConsistencyAnalyzer, ConsistencyOptions, analyze_consistency
from .conventions import ConventionDetector, detect_naming_conventions
from .engine import NamingEngine, analyze_naming
from .exceptions import ConfigurationError, ConsistencyError, ContentRetrievalError
from .models import (
    ConsistencyReport,
    ConventionResult,
    Issue,
    NamingIssue,
    PatternIssue,
    RetrievalFailure,
    Severity,
)
from .patterns import PatternEngine, analyze_patterns
from .provider import FileContentProvider, find_source_files
from .whitelists import Whitelists

__all__ = [
    "analyze_naming",
    "detect_naming_conventions",
    "analyze_patterns",
    "analyze_consistency",
    "NamingEngine",
    "PatternEngine",
    "ConventionDetector",
    "ConsistencyAnalyzer",
    "ConsistencyOptions",
    "ConsistencyReport",
    "ConventionResult",
    "Issue",
    "NamingIssue",
    "PatternIssue",
    "RetrievalFailure",
    "Severity",
    "Whitelists",
    "FileContentProvider",
    "find_source_files",
    "ConsistencyError",
    "ConfigurationError",
    "ContentRetrievalError",
]
