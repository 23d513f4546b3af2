"""
Document model - node store, node handles and tree building
"""

from .node_data import NodeKind, NodeRecord
from .node import Node
from .builder import TreeBuilder, records_from_soup
from .document import Document

__all__ = [
    'NodeKind',
    'NodeRecord',
    'Node',
    'TreeBuilder',
    'records_from_soup',
    'Document'
]
