"""Codebase-wide naming convention estimate.

This is a coarse signal: the number of declaration sites is not counted but
estimated as ``len(files) * sample_size_per_file``. The only convention ever
claimed besides "mixed" is the camelCase default.
"""

from typing import Sequence

from .exceptions import ConfigurationError
from .models import ConventionResult, NamingCategory, NamingIssue

DEFAULT_SAMPLE_SIZE_PER_FILE = 10
DEFAULT_MIXED_THRESHOLD = 0.3

CAMEL_CASE = "camelCase"
MIXED = "mixed"
CAMEL_CASE_CONFIDENCE = 0.9
MIXED_CONFIDENCE = 0.5


class ConventionDetector:
    def __init__(
        self,
        sample_size_per_file: int = DEFAULT_SAMPLE_SIZE_PER_FILE,
        mixed_threshold: float = DEFAULT_MIXED_THRESHOLD,
    ):
        if sample_size_per_file <= 0:
            raise ConfigurationError("sample_size_per_file must be a positive integer")
        if not 0 <= mixed_threshold <= 1:
            raise ConfigurationError("mixed_threshold must be between 0 and 1")
        self.sample_size_per_file = sample_size_per_file
        self.mixed_threshold = mixed_threshold

    def detect(self, files: Sequence[str], issues: Sequence[NamingIssue]) -> ConventionResult:
        total_checks = len(files) * self.sample_size_per_file
        if total_checks == 0:
            return ConventionResult(CAMEL_CASE, CAMEL_CASE_CONFIDENCE)

        mixed_count = sum(1 for i in issues if i.category == NamingCategory.CONVENTION_MIX.value)
        if mixed_count / total_checks > self.mixed_threshold:
            return ConventionResult(MIXED, MIXED_CONFIDENCE)
        return ConventionResult(CAMEL_CASE, CAMEL_CASE_CONFIDENCE)


def detect_naming_conventions(files: Sequence[str], issues: Sequence[NamingIssue]) -> ConventionResult:
    """Estimate the dominant convention using the default tunables."""
    return ConventionDetector().detect(files, issues)
