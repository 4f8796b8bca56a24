from typing import Iterable

from .rules.base import BasePatternRule, BaseRule


class RuleRegistry:
    """Registry for managing and loading naming and pattern rules"""

    def __init__(self):
        self._naming_rules: list[BaseRule] = []
        self._pattern_rules: list[BasePatternRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule | BasePatternRule):
        if isinstance(rule, BasePatternRule):
            self._pattern_rules.append(rule)
        else:
            self._naming_rules.append(rule)

    def get_naming_rules(self, ignore: Iterable[str] = ()) -> list[BaseRule]:
        """Naming rules in registration order, minus ignored rule ids."""
        skipped = set(ignore)
        return [r for r in self._naming_rules if r.rule_id not in skipped]

    def get_pattern_rules(self, ignore: Iterable[str] = ()) -> list[BasePatternRule]:
        skipped = set(ignore)
        return [r for r in self._pattern_rules if r.rule_id not in skipped]

    def rule_ids(self) -> list[str]:
        return [r.rule_id for r in self._naming_rules] + [r.rule_id for r in self._pattern_rules]

    def _load_builtin_rules(self):
        from .rules.naming_rules import (
            AbbreviationRule,
            BooleanClarityRule,
            ConventionMixRule,
            FunctionVerbRule,
            ShortIdentifierRule,
        )
        from .rules.pattern_rules import AsyncStyleRule, ErrorHandlingRule, ImportStyleRule

        self.register(ShortIdentifierRule())
        self.register(AbbreviationRule())
        self.register(ConventionMixRule())
        self.register(BooleanClarityRule())
        self.register(FunctionVerbRule())

        self.register(ErrorHandlingRule())
        self.register(AsyncStyleRule())
        self.register(ImportStyleRule())


registry = RuleRegistry()
