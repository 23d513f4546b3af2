"""
foliage - jQuery-like predicate queries over parsed HTML documents
"""

import logging

from .errors import (
    ErrorType,
    FoliageError,
    DocumentBuildError,
    MalformedTreeError,
    NodeIndexError,
    InvalidPredicateError,
)
from .config import ParseConfig
from .document import Document, Node, NodeKind, NodeRecord, TreeBuilder
from .predicate import (
    Predicate,
    FunctionPredicate,
    as_predicate,
    AnyNode,
    Element,
    Text,
    Comment,
    Name,
    Attr,
    Class,
    And,
    Or,
    Not,
    Descendant,
    Child,
)
from .selection import Selection
from .monitoring import LogManager, DocumentStats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'ErrorType',
    'FoliageError',
    'DocumentBuildError',
    'MalformedTreeError',
    'NodeIndexError',
    'InvalidPredicateError',
    'ParseConfig',
    'Document',
    'Node',
    'NodeKind',
    'NodeRecord',
    'TreeBuilder',
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
    'Child',
    'Selection',
    'LogManager',
    'DocumentStats'
]
