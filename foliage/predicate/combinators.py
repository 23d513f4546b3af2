"""
Boolean and structural combinators

A combinator's decision depends only on its operands: Not(Name("div"))
matches every node that is not a div element, text and comments included.
Use Element() & ~Name("div") to restrict the negation to elements.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from ..document.node import Node
from ..errors import InvalidPredicateError
from .base import Predicate, as_predicate

logger = logging.getLogger(__name__)


class _Variadic(Predicate):
    """Shared plumbing for And/Or, which take two or more operands"""

    __slots__ = ('_predicates',)
    symbol = ''

    def __init__(self, *predicates):
        if len(predicates) < 2:
            message = f"{type(self).__name__} needs at least two predicates, got {len(predicates)}"
            logger.warning(message)
            raise InvalidPredicateError(message)
        self._predicates: Tuple[Predicate, ...] = tuple(as_predicate(p) for p in predicates)

    @property
    def predicates(self) -> Tuple[Predicate, ...]:
        return self._predicates

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._predicates == other._predicates

    def __hash__(self):
        return hash((type(self).__name__, self._predicates))

    def __repr__(self):
        return f"({f' {self.symbol} '.join(repr(p) for p in self._predicates)})"


class And(_Variadic):
    """Matches when every operand matches; stops at the first failure"""
    symbol = '&'

    def matches(self, node: Node) -> bool:
        return all(p.matches(node) for p in self._predicates)


class Or(_Variadic):
    """Matches when any operand matches; stops at the first success"""
    symbol = '|'

    def matches(self, node: Node) -> bool:
        return any(p.matches(node) for p in self._predicates)


@dataclass(frozen=True)
class Not(Predicate):
    predicate: Predicate

    def __post_init__(self):
        object.__setattr__(self, 'predicate', as_predicate(self.predicate))

    def matches(self, node: Node) -> bool:
        return not self.predicate.matches(node)


@dataclass(frozen=True)
class Descendant(Predicate):
    """Matches nodes matching `predicate` with some ancestor matching `ancestor`"""
    ancestor: Predicate
    predicate: Predicate

    def __post_init__(self):
        object.__setattr__(self, 'ancestor', as_predicate(self.ancestor))
        object.__setattr__(self, 'predicate', as_predicate(self.predicate))

    def matches(self, node: Node) -> bool:
        if not self.predicate.matches(node):
            return False
        return any(self.ancestor.matches(a) for a in node.ancestors())


@dataclass(frozen=True)
class Child(Predicate):
    """Matches nodes matching `predicate` whose parent matches `parent`"""
    parent: Predicate
    predicate: Predicate

    def __post_init__(self):
        object.__setattr__(self, 'parent', as_predicate(self.parent))
        object.__setattr__(self, 'predicate', as_predicate(self.predicate))

    def matches(self, node: Node) -> bool:
        if not self.predicate.matches(node):
            return False
        parent = node.parent()
        return parent is not None and self.parent.matches(parent)
