"""Declaration sites of JavaScript/TypeScript source.

Finds identifier declaration sites (variables, parameters, function names) in
the tree-sitter syntax tree and attaches a set of context tags to each one.
Rules consume the sites, never the raw text. Roles come from the tree; the
context tags are line-level heuristics read from the masked source, where
comments and literal bodies have been blanked out.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from tree_sitter import Node

from .syntax import ASTWalker, mask, parse


class Role(str, Enum):
    VARIABLE = "variable"
    PARAMETER = "parameter"
    FUNCTION = "function"


class ContextTag(str, Enum):
    LOOP = "loop"
    COLLECTION_TRANSFORM = "collection-transform"
    I18N = "i18n"
    ARROW_PARAMETER = "arrow-parameter"
    DATE_TIME = "date-time-vocabulary"
    USER_AUTH = "user-auth-vocabulary"
    TEST_FILE = "test-file"


@dataclass(frozen=True)
class DeclarationSite:
    """One declared identifier with its role and context"""

    name: str
    role: Role
    line: int
    column: int
    annotation: str | None = None
    tags: frozenset[ContextTag] = frozenset()

    def has_any(self, tags) -> bool:
        return not self.tags.isdisjoint(tags)


RESERVED_WORDS = frozenset({
    "await", "break", "case", "catch", "class", "const", "continue",
    "debugger", "default", "delete", "do", "else", "enum", "export",
    "extends", "false", "finally", "for", "function", "if", "implements",
    "import", "in", "instanceof", "interface", "let", "new", "null",
    "package", "private", "protected", "public", "return", "static", "super",
    "switch", "this", "throw", "true", "try", "typeof", "var", "void",
    "while", "with", "yield", "async", "of", "undefined",
})

FUNCTION_NODES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
    "function_expression",
    "function",
    "generator_function",
})
# function nodes that can appear in callback position
ANONYMOUS_FUNCTION_NODES = frozenset({"function_expression", "function", "generator_function"})
TYPED_PARAMETER_NODES = frozenset({"required_parameter", "optional_parameter"})
DECLARATION_KEYWORDS = frozenset({"const", "let", "var"})

_LOOP_RE = re.compile(r"\b(?:for|while)\s*\(|\bfor\s+await\s*\(|\bdo\s*\{")
_COLLECTION_RE = re.compile(
    r"\.(?:map|filter|reduce|reduceRight|forEach|find|findIndex|findLast|some|every|sort|flatMap)\s*\("
)
_I18N_RE = re.compile(
    r"\b(?:i18n|i18next|intl)\b|\buseTranslation\s*\(|\btranslate\s*\(|\bformatMessage\s*\("
    r"|\$t\s*\(|(?<![\w$.])t\s*\("
)
_TEST_FILE_RE = re.compile(r"(?:\.(?:test|spec)|_test)\.[^./\\]+$")
_WORD_RE = re.compile(r"[A-Z]?[a-z]+|[A-Z]+(?![a-z])")

DATE_TIME_VOCABULARY = (
    "date", "time", "moment", "dayjs", "luxon", "duration", "hour", "minute",
    "second", "day", "week", "month", "year", "timezone", "calendar", "clock",
)
USER_AUTH_VOCABULARY = (
    "user", "auth", "login", "logout", "signin", "signup", "session",
    "token", "account", "credential", "password", "passwd", "permission",
    "role", "profile", "principal", "jwt",
)


def is_test_file(file_path: str) -> bool:
    """Test files are recognized by their suffix (foo.test.ts, foo.spec.js, foo_test.js)."""
    return bool(_TEST_FILE_RE.search(PurePath(file_path).name))


def mask_source(text: str, file_path: str = "") -> str:
    """Blank out comments and literal bodies, keeping delimiters and newlines."""
    return mask(parse(text, file_path))


def _mentions(words: list[str], vocabulary: tuple[str, ...]) -> bool:
    """True when a word of the line starts with a vocabulary root (userId, timestamps)."""
    return any(word.startswith(root) for word in words for root in vocabulary)


def line_tags(code_line: str) -> frozenset[ContextTag]:
    """Context tags derived from one masked source line."""
    tags = set()
    if _LOOP_RE.search(code_line):
        tags.add(ContextTag.LOOP)
    if _COLLECTION_RE.search(code_line):
        tags.add(ContextTag.COLLECTION_TRANSFORM)
    if _I18N_RE.search(code_line):
        tags.add(ContextTag.I18N)
    words = [w.lower() for w in _WORD_RE.findall(code_line)]
    if _mentions(words, DATE_TIME_VOCABULARY):
        tags.add(ContextTag.DATE_TIME)
    if _mentions(words, USER_AUTH_VOCABULARY):
        tags.add(ContextTag.USER_AUTH)
    return frozenset(tags)


class SourceScanner:
    """Extracts declaration sites from one file's syntax tree"""

    def __init__(self, text: str, file_path: str = ""):
        self.file_path = file_path
        self.tree = parse(text, file_path)
        self.masked = mask(self.tree)
        self.lines = self.masked.split("\n")
        self._line_tags = [line_tags(line) for line in self.lines]
        self._file_tags = frozenset({ContextTag.TEST_FILE}) if is_test_file(file_path) else frozenset()

    def scan(self) -> list[DeclarationSite]:
        sites = []
        for node in ASTWalker.iter_nodes(self.tree.root):
            if node.type == "variable_declarator":
                sites.extend(self._variable(node))
            elif node.type == "for_in_statement":
                sites.extend(self._loop_variable(node))
            elif node.type in FUNCTION_NODES:
                sites.extend(self._function(node))
            elif node.type == "arrow_function":
                sites.extend(self._arrow_function(node))
        unique = {(s.line, s.column, s.role): s for s in sites}
        return sorted(unique.values(), key=lambda s: (s.line, s.column))

    def tags_at(self, line: int) -> frozenset[ContextTag]:
        return self._line_tags[line - 1] | self._file_tags

    def _text(self, node: Node) -> str:
        return ASTWalker.get_text(node, self.tree.source)

    def _site(self, name_node: Node, role: Role, annotation: str | None = None,
              extra_tags: frozenset[ContextTag] = frozenset(),
              header_line: int | None = None) -> DeclarationSite:
        line = name_node.start_point[0] + 1
        column = name_node.start_point[1]
        tags = self.tags_at(line) | extra_tags
        if header_line is not None and header_line != line:
            tags |= self.tags_at(header_line)
        return DeclarationSite(self._text(name_node), role, line, column, annotation, tags)

    def _annotation(self, node: Node) -> str | None:
        """Text of the node's type annotation without the colon."""
        type_node = node.child_by_field_name("type")
        if type_node is None:
            return None
        if type_node.type == "type_annotation":
            inner = type_node.named_children
            if not inner:
                return None
            type_node = inner[0]
        return self._text(type_node).strip() or None

    def _variable(self, node: Node):
        name = node.child_by_field_name("name")
        # destructuring patterns are skipped
        if name is not None and name.type == "identifier":
            yield self._site(name, Role.VARIABLE, self._annotation(node))

    def _loop_variable(self, node: Node):
        if not any(child.type in DECLARATION_KEYWORDS for child in node.children):
            return
        left = node.child_by_field_name("left")
        if left is not None and left.type == "identifier":
            yield self._site(left, Role.VARIABLE)

    def _function(self, node: Node):
        name = node.child_by_field_name("name")
        if name is not None and name.type == "identifier":
            yield self._site(name, Role.FUNCTION)
        params = node.child_by_field_name("parameters")
        if params is None:
            return
        extra = frozenset()
        if name is None and node.type in ANONYMOUS_FUNCTION_NODES:
            extra = frozenset({ContextTag.ARROW_PARAMETER})
        yield from self._parameters(params, extra, node.start_point[0] + 1)

    def _arrow_function(self, node: Node):
        arrow_tag = frozenset({ContextTag.ARROW_PARAMETER})
        header_line = node.start_point[0] + 1
        single = node.child_by_field_name("parameter")
        if single is not None:
            if single.type == "identifier":
                yield self._site(single, Role.PARAMETER, extra_tags=arrow_tag, header_line=header_line)
            return
        params = node.child_by_field_name("parameters")
        if params is not None:
            yield from self._parameters(params, arrow_tag, header_line)

    def _parameters(self, params: Node, extra_tags: frozenset[ContextTag], header_line: int):
        for param in params.named_children:
            pattern = param
            annotation = None
            if param.type in TYPED_PARAMETER_NODES:
                pattern = param.child_by_field_name("pattern")
                annotation = self._annotation(param)
            elif param.type == "assignment_pattern":
                pattern = param.child_by_field_name("left")
            if pattern is not None and pattern.type == "rest_pattern":
                pattern = ASTWalker.get_child_of_type(pattern, "identifier")
            if pattern is None or pattern.type != "identifier":
                continue
            yield self._site(pattern, Role.PARAMETER, annotation,
                             extra_tags=extra_tags, header_line=header_line)


def scan_declarations(text: str, file_path: str = "") -> list[DeclarationSite]:
    """Declaration sites in text, ordered by line then column."""
    return SourceScanner(text, file_path).scan()
