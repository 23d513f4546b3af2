"""
Error types raised by foliage

Absence (no match, missing attribute, no parent) is never an error; these
exceptions only signal contract violations by the caller or by the tree
producer.
"""

from enum import Enum


class ErrorType(Enum):
    """Classification of the failures foliage can raise"""
    BUILD_ERROR = "build_error"              # markup could not be turned into a tree
    MALFORMED_TREE = "malformed_tree"        # store invariants violated
    NODE_INDEX = "node_index"                # id outside the store
    INVALID_PREDICATE = "invalid_predicate"  # value cannot act as a predicate


class FoliageError(Exception):
    """Base class for all foliage errors"""

    error_type = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        if self.error_type is None:
            return self.message
        return f"{self.error_type.value}: {self.message}"


class DocumentBuildError(FoliageError):
    """Markup or soup could not be converted into a Document"""
    error_type = ErrorType.BUILD_ERROR


class MalformedTreeError(FoliageError, ValueError):
    """A node store does not satisfy the tree invariants"""
    error_type = ErrorType.MALFORMED_TREE


class NodeIndexError(FoliageError, IndexError):
    """A node id does not exist in the document"""
    error_type = ErrorType.NODE_INDEX


class InvalidPredicateError(FoliageError, TypeError):
    """A value was used as a predicate but is neither a Predicate nor callable"""
    error_type = ErrorType.INVALID_PREDICATE
