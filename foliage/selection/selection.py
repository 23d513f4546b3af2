"""
Selection - an immutable, ordered, duplicate-free list of nodes

Every query returns a new Selection, so chains like
``doc.find(Attr("id", "m")).find(Name("a"))`` never share state and
iterating a Selection twice yields the same nodes.
"""

from typing import Iterable, Iterator, List, Optional

from .. import traversal
from ..document.node import Node
from ..predicate.base import as_predicate


class Selection:
    """Ordered, deduplicated view over nodes of a single document"""

    __slots__ = ('_document', '_indices')

    def __init__(self, document, indices: Iterable[int] = ()):
        self._document = document
        # dict keeps first occurrence order while dropping repeats
        self._indices = tuple(dict.fromkeys(indices))

    @property
    def document(self):
        return self._document

    @property
    def indices(self):
        return self._indices

    def _node(self, index: int) -> Node:
        return Node(self._document, index)

    # Queries

    def find(self, predicate) -> 'Selection':
        """
        Search the subtree of every member (members themselves excluded)

        Results follow member order, then pre-order within each subtree;
        a node reachable from several members appears once, at its first
        position.
        """
        predicate = as_predicate(predicate)
        visited = set()
        found = []

        for root in self._indices:
            # an earlier member's walk already covered this subtree
            if root in visited:
                continue
            for index in traversal.descendants(self._document, root):
                if index in visited:
                    continue
                visited.add(index)
                if predicate.matches(self._node(index)):
                    found.append(index)

        return Selection(self._document, found)

    def filter(self, predicate) -> 'Selection':
        """Keep only the members that match `predicate` themselves"""
        predicate = as_predicate(predicate)
        return Selection(
            self._document,
            (index for index in self._indices if predicate.matches(self._node(index)))
        )

    def parent(self) -> 'Selection':
        parents = (traversal.parent_index(self._document, index) for index in self._indices)
        return Selection(self._document, (index for index in parents if index is not None))

    def parents(self) -> 'Selection':
        """Ancestors of every member, nearest first"""
        return Selection(self._document, (
            ancestor
            for index in self._indices
            for ancestor in traversal.ancestors(self._document, index)
        ))

    def children(self) -> 'Selection':
        return Selection(self._document, (
            child
            for index in self._indices
            for child in self._document.record(index).children
        ))

    def next(self) -> 'Selection':
        return self._siblings(1)

    def prev(self) -> 'Selection':
        return self._siblings(-1)

    def _siblings(self, offset: int) -> 'Selection':
        siblings = (traversal.sibling_index(self._document, index, offset) for index in self._indices)
        return Selection(self._document, (index for index in siblings if index is not None))

    # Terminal operations

    def first(self) -> Optional[Node]:
        return self._node(self._indices[0]) if self._indices else None

    def last(self) -> Optional[Node]:
        return self._node(self._indices[-1]) if self._indices else None

    def iter(self) -> Iterator[Node]:
        return iter(self)

    def is_empty(self) -> bool:
        return not self._indices

    def text(self) -> str:
        """Text of every member, concatenated"""
        return ''.join(traversal.collect_text(self._document, index) for index in self._indices)

    def texts(self) -> List[str]:
        return [traversal.collect_text(self._document, index) for index in self._indices]

    def attr(self, name: str) -> Optional[str]:
        """Attribute of the first member, if any"""
        first = self.first()
        return first.attr(name) if first is not None else None

    def attrs(self, name: str) -> List[str]:
        """Values of `name` across members that carry it"""
        values = (self._node(index).attr(name) for index in self._indices)
        return [value for value in values if value is not None]

    # Container protocol

    def __iter__(self) -> Iterator[Node]:
        return (self._node(index) for index in self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __bool__(self) -> bool:
        return bool(self._indices)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return Selection(self._document, self._indices[item])
        return self._node(self._indices[item])

    def __contains__(self, node) -> bool:
        if not isinstance(node, Node) or node.document is not self._document:
            return False
        return node.index in self._indices

    def __eq__(self, other):
        if not isinstance(other, Selection):
            return NotImplemented
        return self._document is other._document and self._indices == other._indices

    def __hash__(self):
        return hash((id(self._document), self._indices))

    def __repr__(self):
        return f"<Selection {len(self._indices)} node(s)>"
