"""
Predicates - composable node tests
"""

from .base import Predicate, FunctionPredicate, as_predicate
from .builtins import AnyNode, Element, Text, Comment, Name, Attr, Class
from .combinators import And, Or, Not, Descendant, Child

__all__ = [
    'Predicate',
    'FunctionPredicate',
    'as_predicate',
    'AnyNode',
    'Element',
    'Text',
    'Comment',
    'Name',
    'Attr',
    'Class',
    'And',
    'Or',
    'Not',
    'Descendant',
    'Child'
]
