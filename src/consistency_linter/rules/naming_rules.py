import re

from ..lexer import RESERVED_WORDS, ContextTag, DeclarationSite, Role
from ..models import NamingCategory, NamingIssue, Severity
from .base import BaseRule, RuleContext

ITERATOR_NAMES = frozenset("xyzijklnm")
# test files also tolerate throwaway fixtures a..h
TEST_FILE_SHORT_NAMES = ITERATOR_NAMES | frozenset("abcdefgh")

BOOLEAN_PREFIXES = ("is", "has", "should", "can", "will", "did")

ACTION_VERBS = (
    # read / query
    "get", "fetch", "load", "read", "find", "search", "query", "lookup",
    "list", "select", "pick", "collect", "count", "compute", "calculate",
    "measure", "resolve", "retrieve", "receive", "request", "peek",
    # write / CRUD
    "set", "put", "post", "patch", "create", "make", "build", "add",
    "insert", "append", "prepend", "push", "update", "upsert", "save",
    "store", "write", "delete", "remove", "clear", "reset", "drop", "pop",
    "shift", "unshift", "replace", "assign", "copy", "clone", "move",
    "rename", "merge", "split", "join", "concat",
    # transform
    "map", "filter", "reduce", "sort", "group", "chunk", "flatten",
    "transform", "convert", "parse", "format", "serialize", "deserialize",
    "encode", "decode", "encrypt", "decrypt", "hash", "normalize",
    "sanitize", "escape", "unescape", "strip", "trim", "pad", "wrap",
    "unwrap", "extract", "combine", "compose", "apply", "to", "from",
    "render", "generate", "compile", "translate", "interpolate", "round",
    "compare", "diff", "match", "test", "check", "validate", "verify",
    "ensure", "assert", "expect", "is", "has", "can", "should", "will",
    "did", "contains", "includes", "equals", "needs", "allow", "deny",
    # lifecycle / control
    "init", "initialize", "setup", "start", "stop", "run", "execute",
    "exec", "invoke", "call", "process", "perform", "handle", "prepare",
    "configure", "register", "unregister", "mount", "unmount", "open",
    "close", "connect", "disconnect", "attach", "detach", "bind", "unbind",
    "enable", "disable", "toggle", "show", "hide", "activate", "deactivate",
    "destroy", "dispose", "cleanup", "teardown", "refresh", "reload",
    "restore", "retry", "schedule", "cancel", "abort", "wait", "sleep",
    "throttle", "debounce", "try", "use", "track", "log", "print", "debug",
    "warn", "report", "record", "sync", "flush", "install", "uninstall",
    "import", "export", "download", "upload", "navigate", "redirect",
    "scroll", "focus", "blur", "click", "submit", "login",
    "logout", "authenticate", "authorize", "inject", "provide", "memoize",
    # messaging
    "send", "emit", "dispatch", "publish", "subscribe", "unsubscribe",
    "notify", "broadcast", "listen", "observe", "trigger", "fire", "reply",
    "respond", "forward", "queue", "enqueue", "dequeue", "consume", "poll",
)

ENTRY_POINTS = frozenset({"main", "init", "setup", "bootstrap"})
FACTORY_SUFFIXES = ("Factory", "Builder", "Creator", "Generator")
SELF_DOCUMENTING_LENGTH = 15
MIN_CAPITALIZATION_BOUNDARIES = 3

_ABBREVIATION_RE = re.compile(r"^([a-z]{1,3})(?=[A-Z_]|$)")
_SNAKE_CASE_RE = re.compile(r"^[a-z][a-z0-9]*_[a-z0-9_]*$")
_BOOLEAN_TYPE_RE = re.compile(r"^boolean\s*(?:\|\s*(?:null|undefined)\s*)*$", re.IGNORECASE)
_BOOLEAN_PREFIX_RE = re.compile(rf"^(?:{'|'.join(BOOLEAN_PREFIXES)})", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"^on[A-Z]")
_QUANTIFIER_PREFIX_RE = re.compile(
    r"^(?:all|each|every|total|count|num|max|min|sum|avg|first|last|any|some|many|default)[A-Z0-9_]"
)
_COLLECTION_SUFFIX_RE = re.compile(
    r"(?:List|Map|Set|Array|Collection|Items|Entries|Config|Configuration|Options|Settings"
    r"|Props|Params|Registry|Table|Schema|Dict|Index|Cache)$"
)
_CAP_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])[A-Z]")


def to_camel_case(name: str) -> str:
    """user_name -> userName; each underscore is dropped and the next character upper-cased."""
    return re.sub(r"_+([a-z0-9]?)", lambda m: m.group(1).upper(), name)


class ShortIdentifierRule(BaseRule):
    roles = frozenset({Role.VARIABLE, Role.PARAMETER})
    suppressed_by = frozenset({
        ContextTag.LOOP,
        ContextTag.COLLECTION_TRANSFORM,
        ContextTag.I18N,
        ContextTag.ARROW_PARAMETER,
    })

    @property
    def rule_id(self) -> str:
        return "short-identifier"

    @property
    def category(self) -> NamingCategory:
        return NamingCategory.POOR_NAMING

    @property
    def severity(self) -> Severity:
        return Severity.MINOR

    @property
    def description(self) -> str:
        return "Single-letter names outside loops, callbacks and the usual iterator letters."

    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        name = site.name
        if len(name) != 1 or not name.isalpha():
            return None
        exempt = TEST_FILE_SHORT_NAMES if context.is_test_file else ITERATOR_NAMES
        if name.lower() in exempt:
            return None
        return self._create_issue(
            context, site, f"Use descriptive variable name instead of single letter '{name}'"
        )


class AbbreviationRule(BaseRule):
    roles = frozenset({Role.VARIABLE, Role.PARAMETER})
    suppressed_by = frozenset({ContextTag.ARROW_PARAMETER})

    # domain overrides only ever cover one- and two-letter tokens
    OVERRIDE_MAX_LENGTH = 2
    OVERRIDE_TAGS = frozenset({ContextTag.DATE_TIME, ContextTag.USER_AUTH})

    @property
    def rule_id(self) -> str:
        return "abbreviation"

    @property
    def category(self) -> NamingCategory:
        return NamingCategory.ABBREVIATION

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def description(self) -> str:
        return "Names built on a 1-3 letter shortening that is not a known word or abbreviation."

    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        match = _ABBREVIATION_RE.match(site.name)
        if not match:
            return None
        token = match.group(1)
        if context.whitelists.suppresses(token):
            return None
        if len(token) <= self.OVERRIDE_MAX_LENGTH and site.has_any(self.OVERRIDE_TAGS):
            return None
        return self._create_issue(
            context,
            site,
            f"Consider using full word instead of abbreviation '{token}'",
            identifier=token,
        )


class ConventionMixRule(BaseRule):
    roles = frozenset({Role.VARIABLE, Role.FUNCTION})

    @property
    def rule_id(self) -> str:
        return "snake-case-identifier"

    @property
    def category(self) -> NamingCategory:
        return NamingCategory.CONVENTION_MIX

    @property
    def severity(self) -> Severity:
        return Severity.MINOR

    @property
    def description(self) -> str:
        return "snake_case declarations in camelCase (TypeScript/JavaScript) files."

    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        if not context.camel_case_file or not _SNAKE_CASE_RE.match(site.name):
            return None
        return self._create_issue(
            context,
            site,
            f"Use camelCase '{to_camel_case(site.name)}' instead of snake_case in TypeScript/JavaScript",
        )


class BooleanClarityRule(BaseRule):
    roles = frozenset({Role.VARIABLE, Role.PARAMETER})

    @property
    def rule_id(self) -> str:
        return "boolean-prefix"

    @property
    def category(self) -> NamingCategory:
        return NamingCategory.UNCLEAR

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        if not site.annotation or not _BOOLEAN_TYPE_RE.match(site.annotation):
            return None
        if _BOOLEAN_PREFIX_RE.match(site.name):
            return None
        return self._create_issue(
            context,
            site,
            f"Boolean variable '{site.name}' should start with is/has/should/can/will/did for clarity",
        )


class FunctionVerbRule(BaseRule):
    roles = frozenset({Role.FUNCTION})

    @property
    def rule_id(self) -> str:
        return "function-verb"

    @property
    def category(self) -> NamingCategory:
        return NamingCategory.UNCLEAR

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    @property
    def description(self) -> str:
        return "Function names that do not start with an action verb."

    def evaluate(self, site: DeclarationSite, context: RuleContext) -> NamingIssue | None:
        name = site.name
        # PascalCase functions are components/constructors
        if not name[0].islower():
            return None
        if name in ENTRY_POINTS or name in RESERVED_WORDS:
            return None
        if name.startswith(ACTION_VERBS) or self._is_exception(name):
            return None
        return self._create_issue(
            context,
            site,
            f"Function '{name}' should start with an action verb (get, set, create, etc.)",
        )

    @staticmethod
    def _is_exception(name: str) -> bool:
        return (
            name.endswith(FACTORY_SUFFIXES)
            or bool(_EVENT_HANDLER_RE.match(name))
            or len(name) > SELF_DOCUMENTING_LENGTH
            or bool(_QUANTIFIER_PREFIX_RE.match(name))
            or bool(_COLLECTION_SUFFIX_RE.search(name))
            or len(_CAP_BOUNDARY_RE.findall(name)) >= MIN_CAPITALIZATION_BOUNDARIES
        )
