"""Tree-sitter access for JavaScript and TypeScript sources."""

import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import Iterator

import tree_sitter_javascript as tsjs
import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser, Tree

JAVASCRIPT = Language(tsjs.language())
TYPESCRIPT = Language(tsts.language_typescript())
TSX = Language(tsts.language_tsx())

_LANGUAGE_BY_SUFFIX = {
    ".js": JAVASCRIPT,
    ".jsx": JAVASCRIPT,
    ".mjs": JAVASCRIPT,
    ".cjs": JAVASCRIPT,
    ".ts": TYPESCRIPT,
    ".mts": TYPESCRIPT,
    ".cts": TYPESCRIPT,
    ".tsx": TSX,
}

_NOT_NEWLINE = re.compile(rb"[^\n]")


def language_for(file_path: str) -> Language:
    """Grammar for a file; unknown suffixes are parsed as TypeScript."""
    return _LANGUAGE_BY_SUFFIX.get(PurePath(file_path).suffix.lower(), TYPESCRIPT)


@dataclass
class SourceTree:
    """A parsed file together with the bytes it was parsed from"""

    tree: Tree
    source: bytes

    @property
    def root(self) -> Node:
        return self.tree.root_node


def parse(text: str, file_path: str = "") -> SourceTree:
    """Parse text with the grammar matching file_path. Never raises on bad syntax."""
    source = text.encode("utf-8")
    parser = Parser(language_for(file_path))
    return SourceTree(parser.parse(source), source)


class ASTWalker:
    """Utilities for traversing the JS/TS syntax tree"""

    @staticmethod
    def iter_nodes(node: Node) -> Iterator[Node]:
        """Depth-first, pre-order traversal without recursion."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def get_text(node: Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Node | None:
        for child in node.named_children:
            if child.type == type_name:
                return child
        return None


def literal_ranges(root: Node) -> Iterator[tuple[int, int]]:
    """Byte ranges holding comment text or the bodies of string, template and regex literals.

    Quote and slash delimiters are left out of the ranges; template
    substitutions are excluded since they contain code.
    """
    for node in ASTWalker.iter_nodes(root):
        if node.type == "comment":
            yield node.start_byte, node.end_byte
        elif node.type == "string":
            yield node.start_byte + 1, node.end_byte - 1
        elif node.type == "regex":
            pattern = node.child_by_field_name("pattern")
            if pattern is not None:
                yield pattern.start_byte, pattern.end_byte
        elif node.type == "template_string":
            start = node.start_byte + 1
            for child in node.named_children:
                if child.type == "template_substitution":
                    yield start, child.start_byte
                    start = child.end_byte
            yield start, node.end_byte - 1


def mask(tree: SourceTree) -> str:
    """Source text with literal bodies and comments blanked, newlines kept."""
    masked = bytearray(tree.source)
    for start, end in literal_ranges(tree.root):
        if start < end:
            masked[start:end] = _NOT_NEWLINE.sub(b" ", bytes(masked[start:end]))
    return masked.decode("utf-8", errors="replace")
