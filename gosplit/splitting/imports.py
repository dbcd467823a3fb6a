"""Import filtering for split output files.

Decides which of the source file's imports each output group still needs.
The check is syntactic: every identifier token in the group's declarations
counts as a reference, whether it names a package, a local variable or a
struct field. An import survives if its bound name is among them.

Two consequences are accepted as they are:
    - an import is kept when a local name merely shadows its bound name;
    - blank (``_``) and dot (``.``) imports never match and are always dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from gosplit.syntax.walk import fold

if TYPE_CHECKING:
    from tree_sitter import Node

    from gosplit.splitting.partitioner import Group
    from gosplit.syntax.nodes import ImportEntry

logger = logging.getLogger(__name__)

IDENTIFIER_TYPES = frozenset(
    {
        'identifier',
        'type_identifier',
        'field_identifier',
        'package_identifier',
        'label_name',
    }
)

# import names that code can never refer to
UNBOUND_NAMES = frozenset({'_', '.'})

# member-style accesses and the field naming their left-hand side
QUALIFIER_FIELDS = {
    'selector_expression': 'operand',
    'qualified_type': 'package',
}


def _collect(names: set[str], node: Node) -> set[str]:
    if node.type in IDENTIFIER_TYPES:
        names.add(node.text.decode('utf-8'))
    elif node.type in QUALIFIER_FIELDS:
        qualifier = node.child_by_field_name(QUALIFIER_FIELDS[node.type])
        if qualifier is not None and qualifier.type in IDENTIFIER_TYPES:
            names.add(qualifier.text.decode('utf-8'))
    return names


def collect_identifiers(nodes: Iterable[Node]) -> set[str]:
    """Collect every bare and qualifying identifier under the given nodes.

    Args:
        nodes: Root nodes of the declarations to scan.

    Returns:
        The set of identifier names found.
    """
    return fold([n for n in nodes if n is not None], _collect, set())


def filter_imports(
    imports: Sequence[ImportEntry], identifiers: set[str]
) -> list[ImportEntry]:
    """Keep the imports whose bound name is in ``identifiers``, in order.

    Blank and dot imports bind no usable name and are never kept.
    """
    return [
        entry
        for entry in imports
        if entry.bound_name not in UNBOUND_NAMES and entry.bound_name in identifiers
    ]


class ImportResolver:
    """Computes the imports each group of declarations references.

    Example:
        >>> resolver = ImportResolver(extracted.imports)
        >>> group.imports = resolver.resolve(group)
    """

    def __init__(self, imports: Sequence[ImportEntry]):
        """Initialize the resolver.

        Args:
            imports: The full import list of the source file. Entries are
                shared with every group and never modified.
        """
        self.imports = list(imports)

    def resolve(self, group: Group) -> list[ImportEntry]:
        """Return the subset of imports referenced by a group.

        Scans every function of the group and, for the group that carries
        them, the type, const and var declarations.
        """
        nodes = [fn.node for fn in group.functions]
        nodes.extend(decl.node for decl in group.pinned_decls)

        identifiers = collect_identifiers(nodes)
        required = filter_imports(self.imports, identifiers)

        dropped = [e.path for e in self.imports if e not in required]
        if dropped:
            logger.debug(f'Group {group.index}: dropping imports {dropped}')
        return required
