"""
Base Predicate Interface - a pure yes/no test over a single node
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from ..document.node import Node
from ..errors import InvalidPredicateError

logger = logging.getLogger(__name__)


class Predicate(ABC):
    """Base interface for all predicates

    Subclasses implement `matches`. Predicates compose with `&`, `|` and `~`,
    and plain callables are accepted on either side of an operator.
    """

    @abstractmethod
    def matches(self, node: Node) -> bool:
        """Decide whether `node` satisfies this predicate"""

    def __call__(self, node: Node) -> bool:
        return self.matches(node)

    def __and__(self, other) -> 'Predicate':
        from .combinators import And
        return And(self, other)

    def __rand__(self, other) -> 'Predicate':
        from .combinators import And
        return And(other, self)

    def __or__(self, other) -> 'Predicate':
        from .combinators import Or
        return Or(self, other)

    def __ror__(self, other) -> 'Predicate':
        from .combinators import Or
        return Or(other, self)

    def __invert__(self) -> 'Predicate':
        from .combinators import Not
        return Not(self)

    def descendant(self, other) -> 'Predicate':
        """Nodes matching `other` that sit somewhere below a node matching self"""
        from .combinators import Descendant
        return Descendant(self, other)

    def child(self, other) -> 'Predicate':
        """Nodes matching `other` whose parent matches self"""
        from .combinators import Child
        return Child(self, other)


@dataclass(frozen=True)
class FunctionPredicate(Predicate):
    """Adapts any `(Node) -> bool` callable to the Predicate interface"""
    function: Callable[[Node], bool]

    def matches(self, node: Node) -> bool:
        return bool(self.function(node))


def as_predicate(value) -> Predicate:
    """Return `value` as a Predicate, wrapping plain callables"""
    if isinstance(value, Predicate):
        return value
    if isinstance(value, type) and issubclass(value, Predicate):
        message = f"{value.__name__} is a predicate class, use an instance such as {value.__name__}()"
    elif callable(value):
        return FunctionPredicate(value)
    else:
        message = f"Expected a Predicate or a callable, got {type(value).__name__}: {value!r}"

    logger.warning(message)
    raise InvalidPredicateError(message)
