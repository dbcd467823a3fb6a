"""Go language support for gosplit.

This package parses Go source with tree-sitter and prints declaration lists
back into Go text.

Classes:
    GoParser: Parses Go source into a ParsedFile.
    GoPrinter: Renders a SourceFile into Go source.
    ParsedFile: A parsed source plus its syntax tree.
    SourceFile: A synthetic declaration list to print.
"""

from gosplit.syntax.nodes import (
    Declaration,
    DeclKind,
    FunctionDecl,
    ImportEntry,
    ParsedFile,
    SourceFile,
)
from gosplit.syntax.parser import GoParser
from gosplit.syntax.printer import GoPrinter
from gosplit.syntax.walk import fold, walk

__all__ = [
    'Declaration',
    'DeclKind',
    'FunctionDecl',
    'GoParser',
    'GoPrinter',
    'ImportEntry',
    'ParsedFile',
    'SourceFile',
    'fold',
    'walk',
]
