"""Partitioning of function declarations into output groups.

This module provides the ``Group`` dataclass and ``partition``, which cuts a
function list into contiguous, near-equal groups, one per output file.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gosplit.syntax.nodes import Declaration, FunctionDecl, ImportEntry

logger = logging.getLogger(__name__)


@dataclass
class Group:
    """One contiguous slice of functions destined for a single output file.

    Attributes:
        index: Position of the group, 0 for the first file.
        functions: The functions of this group, in source order.
        type_decls: The type declarations; only group 0 has a list here,
            possibly empty. Every other group has ``None``.
        value_decls: Const and var declarations, pinned like ``type_decls``.
        imports: The imports this group references, set by the import resolver.
        suffix: The filename suffix, set by the suffix namer.
    """

    index: int
    functions: list[FunctionDecl]
    type_decls: list[Declaration] | None = None
    value_decls: list[Declaration] | None = None
    imports: list[ImportEntry] = field(default_factory=list)
    suffix: str | None = None

    @property
    def carries_types(self) -> bool:
        return self.type_decls is not None

    @property
    def function_names(self) -> list[str]:
        return [fn.name for fn in self.functions]

    @property
    def pinned_decls(self) -> list[Declaration]:
        """Type declarations followed by const and var declarations."""
        return [*(self.type_decls or []), *(self.value_decls or [])]


def group_size(function_count: int, num_files: int) -> int:
    """Number of functions per group: ``ceil(function_count / num_files)``."""
    return math.ceil(function_count / num_files)


def partition(
    functions: Sequence[FunctionDecl],
    num_files: int,
    type_decls: Sequence[Declaration] = (),
    value_decls: Sequence[Declaration] = (),
) -> list[Group]:
    """Split functions into at most ``num_files`` ordered groups.

    Every group but the last holds ``ceil(F / num_files)`` functions; the last
    takes the remainder. Groups that would be empty are not created, so fewer
    than ``num_files`` groups come back when there are too few functions.
    Group 0 always receives the type, const and var declarations.

    Args:
        functions: All function declarations, in source order.
        num_files: Requested number of output files.
        type_decls: Type declarations to pin to group 0.
        value_decls: Const and var declarations to pin to group 0.

    Returns:
        The groups, in index order.

    Raises:
        ValueError: If ``functions`` is empty or ``num_files`` is below 1.
    """
    if num_files < 1:
        raise ValueError(f'num_files must be at least 1, got {num_files}')
    if not functions:
        raise ValueError('cannot partition an empty function list')

    size = group_size(len(functions), num_files)
    groups = []

    for index in range(num_files):
        start = index * size
        if start >= len(functions):
            break
        chunk = list(functions[start : start + size])
        if index == 0:
            groups.append(
                Group(
                    index=0,
                    functions=chunk,
                    type_decls=list(type_decls),
                    value_decls=list(value_decls),
                )
            )
        else:
            groups.append(Group(index=index, functions=chunk))

    logger.debug(
        f'Partitioned {len(functions)} functions into {len(groups)} groups '
        f'of sizes {[len(g.functions) for g in groups]}'
    )
    return groups
