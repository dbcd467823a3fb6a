"""Declaration records exchanged between the Go parser, printer and splitter.

The parser produces these from a tree-sitter tree; the printer turns a
``SourceFile`` of them back into Go text. Declaration bodies stay opaque:
they carry their verbatim source text plus the tree node they came from, so
the splitter can traverse them without knowing Go's grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_sitter import Node, Tree


class DeclKind(str, Enum):
    """Kinds of top-level declarations the splitter distinguishes."""

    TYPE = 'type'
    CONST = 'const'
    VAR = 'var'
    FUNCTION = 'function'
    METHOD = 'method'


@dataclass(frozen=True)
class ImportEntry:
    """One import spec.

    Attributes:
        path: The import path without quotes, e.g. ``net/http``.
        alias: The explicit package name, ``.`` or ``_``, if one was given.
        literal: The quoted path exactly as written in the source.
    """

    path: str
    alias: str | None = None
    literal: str | None = None

    @property
    def bound_name(self) -> str:
        """The identifier code uses to refer to this import."""
        if self.alias:
            return self.alias
        return self.path.split('/')[-1]

    def to_source(self) -> str:
        literal = self.literal or f'"{self.path}"'
        if self.alias:
            return f'{self.alias} {literal}'
        return literal


@dataclass(frozen=True)
class Declaration:
    """A type, const or var declaration, kept as an opaque fragment."""

    kind: DeclKind
    text: str
    node: Node | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class FunctionDecl:
    """A function or method declaration.

    Attributes:
        name: The declared name; for methods, without the receiver.
        text: Verbatim source, including an attached doc comment.
        receiver: The receiver parameter list for methods, e.g. ``(s *Server)``.
        node: The tree-sitter node of the declaration.
    """

    name: str
    text: str
    receiver: str | None = None
    node: Node | None = field(default=None, compare=False, repr=False)

    @property
    def kind(self) -> DeclKind:
        return DeclKind.METHOD if self.receiver else DeclKind.FUNCTION


@dataclass
class SourceFile:
    """A synthetic Go file: package clause, imports, then declarations."""

    package_name: str
    imports: list[ImportEntry] = field(default_factory=list)
    declarations: list[Declaration | FunctionDecl] = field(default_factory=list)


@dataclass
class ParsedFile:
    """A successfully parsed Go source.

    Attributes:
        source: The parsed bytes, UTF-8 with LF line endings.
        tree: The tree-sitter syntax tree.
        package_name: Name from the package clause.
        path: Label used in error messages, usually the file path.
    """

    source: bytes
    tree: Tree
    package_name: str
    path: str = '<source>'

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text_of(self, node: Node, start_byte: int | None = None) -> str:
        """Return the source text spanned by a node."""
        start = node.start_byte if start_byte is None else start_byte
        return self.source[start : node.end_byte].decode('utf-8')
