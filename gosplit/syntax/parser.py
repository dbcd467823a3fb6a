"""Go parser built on tree-sitter.

tree-sitter is error tolerant, so a tree is produced even for broken input.
``GoParser`` turns such trees into ``ParseError`` so that callers only ever
see well-formed sources.
"""

import logging
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from gosplit.exceptions import ParseError
from gosplit.syntax.nodes import ParsedFile
from gosplit.syntax.walk import walk

GO_LANGUAGE = Language(tree_sitter_go.language())

logger = logging.getLogger(__name__)


class GoParser:
    """Parses Go source text into a ``ParsedFile``."""

    def __init__(self):
        self.parser = Parser(GO_LANGUAGE)

    def parse(self, source: bytes | str, path: str = '<source>') -> ParsedFile:
        """Parse Go source.

        Args:
            source: The Go source, as bytes or text.
            path: Label used in error messages.

        Returns:
            The parsed file.

        Raises:
            ParseError: If the source is not UTF-8, has a syntax error or has
                no package clause.
        """
        if isinstance(source, bytes):
            try:
                source = source.decode('utf-8')
            except UnicodeDecodeError as e:
                raise ParseError(path, details='invalid UTF-8', cause=e) from e

        # gofmt writes LF line endings; declarations are joined with LF
        source = source.replace('\r\n', '\n').encode('utf-8')

        tree = self.parser.parse(source)
        root = tree.root_node

        if root.has_error:
            error = _first_error(root)
            if error is None:
                raise ParseError(path, details='syntax error')
            details = f'missing {error.type}' if error.is_missing else 'syntax error'
            raise ParseError(
                path,
                details=details,
                line=error.start_point[0] + 1,
                column=error.start_point[1] + 1,
            )

        package_name = _package_name(root, source)
        if package_name is None:
            raise ParseError(path, details='missing package clause')

        logger.debug(f'Parsed {path}: package {package_name}')
        return ParsedFile(
            source=source, tree=tree, package_name=package_name, path=path
        )

    def parse_file(self, path: str | Path) -> ParsedFile:
        """Read and parse a Go file.

        Raises:
            ParseError: If the file cannot be read or parsed.
        """
        try:
            source = Path(path).read_bytes()
        except OSError as e:
            raise ParseError(str(path), cause=e) from e
        return self.parse(source, path=str(path))


def _first_error(root: Node) -> Node | None:
    for node in walk(root):
        if node.type == 'ERROR' or node.is_missing:
            return node
    return None


def _package_name(root: Node, source: bytes) -> str | None:
    for child in root.named_children:
        if child.type != 'package_clause':
            continue
        for part in child.named_children:
            if part.type == 'package_identifier':
                return source[part.start_byte : part.end_byte].decode('utf-8')
    return None
