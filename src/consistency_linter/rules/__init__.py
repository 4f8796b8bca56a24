from .base import BasePatternRule, BaseRule, RuleContext
from .naming_rules import (
    AbbreviationRule,
    BooleanClarityRule,
    ConventionMixRule,
    FunctionVerbRule,
    ShortIdentifierRule,
    to_camel_case,
)
from .pattern_rules import AsyncStyleRule, ErrorHandlingRule, ImportStyleRule

__all__ = [
    "BaseRule",
    "BasePatternRule",
    "RuleContext",
    "ShortIdentifierRule",
    "AbbreviationRule",
    "ConventionMixRule",
    "BooleanClarityRule",
    "FunctionVerbRule",
    "ErrorHandlingRule",
    "AsyncStyleRule",
    "ImportStyleRule",
    "to_camel_case",
]
