"""
Node handle - a lightweight (document, id) reference into a node store
"""

import re
from typing import List, Mapping, Optional

from .. import traversal
from .node_data import EMPTY_ATTRIBUTES, NodeKind, NodeRecord

# HTML splits class lists on ASCII whitespace only
_CLASS_SEPARATOR = re.compile(r'[ \t\n\f\r]+')


def split_classes(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [token for token in _CLASS_SEPARATOR.split(value) if token]


class Node:
    """Read-only view of one node; equal when document and id are the same"""

    __slots__ = ('_document', '_index')

    def __init__(self, document, index: int):
        self._document = document
        self._index = index

    @property
    def document(self):
        return self._document

    @property
    def index(self) -> int:
        return self._index

    @property
    def record(self) -> NodeRecord:
        """The raw store record behind this handle"""
        return self._document.record(self._index)

    @property
    def kind(self) -> NodeKind:
        return self.record.kind

    @property
    def name(self) -> Optional[str]:
        """Tag name, defined only for elements"""
        record = self.record
        if record.kind is NodeKind.ELEMENT:
            return record.name
        return None

    tag_name = name

    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    def is_comment(self) -> bool:
        return self.kind is NodeKind.COMMENT

    # Attributes

    def attrs(self) -> Mapping[str, str]:
        """Attributes in parser order; empty for anything but elements"""
        record = self.record
        if record.kind is NodeKind.ELEMENT:
            return record.attributes
        return EMPTY_ATTRIBUTES

    def attr(self, name: str) -> Optional[str]:
        return self.attrs().get(name)

    def has_attr(self, name: str) -> bool:
        return name in self.attrs()

    def classes(self) -> List[str]:
        return split_classes(self.attr('class'))

    # Content

    def text(self) -> str:
        return traversal.collect_text(self._document, self._index)

    def as_text(self) -> Optional[str]:
        record = self.record
        return record.content if record.kind is NodeKind.TEXT else None

    def as_comment(self) -> Optional[str]:
        record = self.record
        return record.content if record.kind is NodeKind.COMMENT else None

    # Navigation

    def _handle(self, index: Optional[int]) -> Optional['Node']:
        if index is None:
            return None
        return Node(self._document, index)

    def parent(self) -> Optional['Node']:
        return self._handle(traversal.parent_index(self._document, self._index))

    def next_sibling(self) -> Optional['Node']:
        return self._handle(traversal.sibling_index(self._document, self._index, 1))

    def prev_sibling(self) -> Optional['Node']:
        return self._handle(traversal.sibling_index(self._document, self._index, -1))

    def first_child(self) -> Optional['Node']:
        children = self.record.children
        return self._handle(children[0] if children else None)

    def last_child(self) -> Optional['Node']:
        children = self.record.children
        return self._handle(children[-1] if children else None)

    def children(self):
        from ..selection.selection import Selection
        return Selection(self._document, self.record.children)

    def ancestors(self):
        from ..selection.selection import Selection
        return Selection(self._document, traversal.ancestors(self._document, self._index))

    def descendants(self):
        from ..selection.selection import Selection
        return Selection(self._document, traversal.descendants(self._document, self._index))

    # Queries

    def find(self, predicate):
        """Search this node's subtree, excluding the node itself"""
        from ..selection.selection import Selection
        return Selection(self._document, (self._index,)).find(predicate)

    def is_(self, predicate) -> bool:
        from ..predicate.base import as_predicate
        return as_predicate(predicate).matches(self)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self._document is other._document and self._index == other._index

    def __hash__(self):
        return hash((id(self._document), self._index))

    def __repr__(self):
        record = self.record
        if record.kind is NodeKind.ELEMENT:
            return f"<Node {self._index} <{record.name}>>"
        if record.content is not None:
            preview = record.content[:30]
            return f"<Node {self._index} {record.kind.value} {preview!r}>"
        return f"<Node {self._index} {record.kind.value}>"
