"""
Built-in predicates

Element-only predicates (Name, Attr, Class, Element) never match text,
comment or root nodes.
"""

from dataclasses import dataclass
from typing import Optional

from ..document.node import Node, split_classes
from ..document.node_data import NodeKind
from .base import Predicate


@dataclass(frozen=True)
class AnyNode(Predicate):
    """Matches every node"""

    def matches(self, node: Node) -> bool:
        return True


@dataclass(frozen=True)
class Element(Predicate):
    """Matches any element, whatever its tag"""

    def matches(self, node: Node) -> bool:
        return node.kind is NodeKind.ELEMENT


@dataclass(frozen=True)
class Text(Predicate):
    """Matches text nodes"""

    def matches(self, node: Node) -> bool:
        return node.kind is NodeKind.TEXT


@dataclass(frozen=True)
class Comment(Predicate):
    """Matches comment nodes"""

    def matches(self, node: Node) -> bool:
        return node.kind is NodeKind.COMMENT


@dataclass(frozen=True)
class Name(Predicate):
    """Matches elements whose tag name equals `tag` exactly

    html.parser lowercases tag names, so tags are normally given in
    lowercase.
    """
    tag: str

    def matches(self, node: Node) -> bool:
        return node.name == self.tag


@dataclass(frozen=True)
class Attr(Predicate):
    """Matches elements carrying attribute `key`

    With a `value`, the attribute must equal it exactly; without one, only
    its presence is tested.
    """
    key: str
    value: Optional[str] = None

    def matches(self, node: Node) -> bool:
        actual = node.attr(self.key)
        if actual is None:
            return False
        return self.value is None or actual == self.value


@dataclass(frozen=True)
class Class(Predicate):
    """Matches elements whose class list contains `name` as a whole token"""
    name: str

    def matches(self, node: Node) -> bool:
        return self.name in split_classes(node.attr('class'))
