"""Separates a parsed Go file into the parts the splitter redistributes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gosplit.syntax.nodes import Declaration, DeclKind, FunctionDecl, ImportEntry

if TYPE_CHECKING:
    from tree_sitter import Node

    from gosplit.syntax.nodes import ParsedFile

logger = logging.getLogger(__name__)

_VALUE_KINDS = {
    'const_declaration': DeclKind.CONST,
    'var_declaration': DeclKind.VAR,
}


@dataclass
class ExtractedSource:
    """Top-level contents of a Go file, each list in source order.

    Attributes:
        package_name: Name from the package clause.
        imports: Every import spec of every import declaration.
        type_decls: Type declarations.
        value_decls: Const and var declarations.
        functions: Function and method declarations.
    """

    package_name: str
    imports: list[ImportEntry] = field(default_factory=list)
    type_decls: list[Declaration] = field(default_factory=list)
    value_decls: list[Declaration] = field(default_factory=list)
    functions: list[FunctionDecl] = field(default_factory=list)


def extract_declarations(parsed: ParsedFile) -> ExtractedSource:
    """Walk the top level of a parsed file and sort its declarations.

    A run of comments ending on the line directly above a declaration is
    kept as part of that declaration's text. Other comments are dropped.

    Args:
        parsed: The parsed Go file.

    Returns:
        The extracted package name, imports and declarations.
    """
    result = ExtractedSource(package_name=parsed.package_name)

    doc: list[Node] = []
    last_end_row = -1

    for node in parsed.root.named_children:
        if node.type == 'comment':
            if node.start_point[0] == last_end_row:
                # trailing comment of the previous declaration
                continue
            if doc and node.start_point[0] > doc[-1].end_point[0] + 1:
                doc = []
            doc.append(node)
            continue

        start_byte = None
        if doc and doc[-1].end_point[0] + 1 == node.start_point[0]:
            start_byte = doc[0].start_byte
        doc = []
        last_end_row = node.end_point[0]

        if node.type == 'import_declaration':
            result.imports.extend(_import_entries(parsed, node))
        elif node.type == 'type_declaration':
            result.type_decls.append(
                Declaration(
                    kind=DeclKind.TYPE,
                    text=parsed.text_of(node, start_byte),
                    node=node,
                )
            )
        elif node.type in _VALUE_KINDS:
            result.value_decls.append(
                Declaration(
                    kind=_VALUE_KINDS[node.type],
                    text=parsed.text_of(node, start_byte),
                    node=node,
                )
            )
        elif node.type in ('function_declaration', 'method_declaration'):
            result.functions.append(_function_decl(parsed, node, start_byte))

    logger.debug(
        f'Extracted from {parsed.path}: {len(result.imports)} imports, '
        f'{len(result.type_decls)} type declarations, '
        f'{len(result.value_decls)} const/var declarations, '
        f'{len(result.functions)} functions'
    )
    return result


def _import_entries(parsed: ParsedFile, declaration: Node) -> list[ImportEntry]:
    specs = []
    for child in declaration.named_children:
        if child.type == 'import_spec':
            specs.append(child)
        elif child.type == 'import_spec_list':
            specs.extend(c for c in child.named_children if c.type == 'import_spec')

    entries = []
    for spec in specs:
        path_node = spec.child_by_field_name('path')
        name_node = spec.child_by_field_name('name')
        literal = parsed.text_of(path_node)
        entries.append(
            ImportEntry(
                path=literal.strip('"`'),
                alias=parsed.text_of(name_node) if name_node is not None else None,
                literal=literal,
            )
        )
    return entries


def _function_decl(
    parsed: ParsedFile, node: Node, start_byte: int | None
) -> FunctionDecl:
    name_node = node.child_by_field_name('name')
    receiver_node = node.child_by_field_name('receiver')
    return FunctionDecl(
        name=parsed.text_of(name_node),
        text=parsed.text_of(node, start_byte),
        receiver=parsed.text_of(receiver_node) if receiver_node is not None else None,
        node=node,
    )
