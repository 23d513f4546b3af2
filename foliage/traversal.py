"""
Traversal algorithms over a node store

All functions work on node ids and never expose the synthetic document
root: it is neither a parent nor an ancestor of anything as far as callers
are concerned.
"""

from typing import Iterator, Optional

from .document.node_data import NodeKind


def parent_index(document, index: int) -> Optional[int]:
    """Parent id, or None for the root and for top-level nodes"""
    parent = document.record(index).parent
    if parent is None or document.record(parent).is_root:
        return None
    return parent


def descendants(document, index: int) -> Iterator[int]:
    """Pre-order depth-first walk below `index`, excluding `index` itself"""
    stack = list(reversed(document.record(index).children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(document.record(current).children))


def ancestors(document, index: int) -> Iterator[int]:
    """Ancestors of `index`, nearest first"""
    parent = parent_index(document, index)
    while parent is not None:
        yield parent
        parent = parent_index(document, parent)


def sibling_index(document, index: int, offset: int) -> Optional[int]:
    record = document.record(index)
    if record.parent is None:
        return None

    siblings = document.record(record.parent).children
    position = record.position + offset
    if 0 <= position < len(siblings):
        return siblings[position]
    return None


def following_siblings(document, index: int) -> Iterator[int]:
    sibling = sibling_index(document, index, 1)
    while sibling is not None:
        yield sibling
        sibling = sibling_index(document, sibling, 1)


def preceding_siblings(document, index: int) -> Iterator[int]:
    """Siblings before `index`, nearest first"""
    sibling = sibling_index(document, index, -1)
    while sibling is not None:
        yield sibling
        sibling = sibling_index(document, sibling, -1)


def collect_text(document, index: int) -> str:
    """Concatenate every text node at or below `index` in document order"""
    record = document.record(index)
    if record.kind is NodeKind.TEXT:
        return record.content

    parts = []
    for current in descendants(document, index):
        current_record = document.record(current)
        if current_record.kind is NodeKind.TEXT:
            parts.append(current_record.content)
    return ''.join(parts)


def depth(document, index: int) -> int:
    """Number of ancestors below the root; top-level nodes are at depth 0"""
    return sum(1 for _ in ancestors(document, index))
