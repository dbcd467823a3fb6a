"""Generic traversal over tree-sitter trees."""

from collections.abc import Callable, Iterator
from typing import TypeVar

from tree_sitter import Node

T = TypeVar('T')


def walk(node: Node) -> Iterator[Node]:
    """Iterate over every node of a subtree in pre-order.

    Uses a tree cursor, so deep expressions do not hit the recursion limit.
    Anonymous tokens (punctuation, keywords) are yielded too.

    Args:
        node: The root of the subtree to visit.

    Yields:
        The root node followed by all of its descendants.
    """
    cursor = node.walk()
    returning = False
    while True:
        if not returning:
            yield cursor.node
            if cursor.goto_first_child():
                continue
        if cursor.goto_next_sibling():
            returning = False
        elif cursor.goto_parent():
            returning = True
        else:
            break


def fold(nodes: list[Node], visit: Callable[[T, Node], T], initial: T) -> T:
    """Fold ``visit`` over every node of every subtree in ``nodes``."""
    acc = initial
    for root in nodes:
        for node in walk(root):
            acc = visit(acc, node)
    return acc
