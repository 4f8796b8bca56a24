import logging
from typing import Iterable, Mapping, Sequence

from .lexer import mask_source
from .models import PatternIssue
from .registry import RuleRegistry, registry as default_registry

logger = logging.getLogger(__name__)


class PatternEngine:
    """Finds styles that are mixed across a set of files.

    Every file is classified before any rule concludes, so the engine has to
    be handed the complete set of contents.
    """

    def __init__(self, registry: RuleRegistry | None = None, ignore: Iterable[str] = ()):
        self.rules = (registry or default_registry).get_pattern_rules(ignore=ignore)

    def analyze(self, files: Sequence[str], contents: Mapping[str, str]) -> list[PatternIssue]:
        usage: list[dict[str, list[str]]] = [{} for _ in self.rules]

        for file_path in files:
            text = contents.get(file_path)
            if text is None:
                continue
            code = mask_source(text, file_path)
            for rule, rule_usage in zip(self.rules, usage):
                for style in rule.styles_in(code):
                    rule_usage.setdefault(style, []).append(file_path)

        issues = []
        for rule, rule_usage in zip(self.rules, usage):
            issue = rule.conclude(rule_usage)
            if issue is not None:
                logger.info("%s: %s", rule.rule_id, issue.description)
                issues.append(issue)
        return issues


def analyze_patterns(files: Sequence[str], contents: Mapping[str, str]) -> list[PatternIssue]:
    return PatternEngine().analyze(files, contents)
