import pytest

from consistency_linter.conventions import ConventionDetector, detect_naming_conventions
from consistency_linter.exceptions import ConfigurationError
from consistency_linter.models import NamingIssue, Severity


def make_issue(category="convention-mix", line=1):
    return NamingIssue(
        file_path="a.ts",
        line=line,
        category=category,
        identifier="user_name",
        severity=Severity.MINOR,
        suggestion="",
        rule_id="snake-case-identifier",
    )


def test_no_files_defaults_to_camel_case():
    result = detect_naming_conventions([], [])
    assert result.dominant_convention == "camelCase"
    assert result.confidence_score == 0.9


def test_ratio_above_threshold_is_mixed():
    issues = [make_issue(line=n) for n in range(4)]
    result = detect_naming_conventions(["a.ts"], issues)

    assert result.dominant_convention == "mixed"
    assert result.confidence_score == 0.5


def test_ratio_at_threshold_is_camel_case():
    issues = [make_issue(line=n) for n in range(3)]
    assert detect_naming_conventions(["a.ts"], issues).dominant_convention == "camelCase"


def test_only_convention_mix_issues_count():
    issues = [make_issue(category="poor-naming", line=n) for n in range(20)]
    assert detect_naming_conventions(["a.ts"], issues).dominant_convention == "camelCase"


def test_custom_tunables():
    detector = ConventionDetector(sample_size_per_file=2, mixed_threshold=0.4)
    assert detector.detect(["a.ts"], [make_issue()]).dominant_convention == "mixed"


@pytest.mark.parametrize("sample_size, threshold", [(0, 0.3), (10, 1.5), (10, -0.1)])
def test_invalid_tunables(sample_size, threshold):
    with pytest.raises(ConfigurationError):
        ConventionDetector(sample_size, threshold)
