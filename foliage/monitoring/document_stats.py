from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from .. import traversal
from ..document.node_data import NodeKind


@dataclass
class DocumentStats:
    """Size and shape summary of a document"""
    total_nodes: int = 0
    elements: int = 0
    texts: int = 0
    comments: int = 0
    max_depth: int = 0
    tag_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document) -> 'DocumentStats':
        stats = cls()
        tag_counts = defaultdict(int)
        # depth per node id; parents always come before their children
        depths = {}

        for index in traversal.descendants(document, 0):
            record = document.record(index)
            parent = record.parent
            depths[index] = depths[parent] + 1 if parent in depths else 0
            stats.max_depth = max(stats.max_depth, depths[index])
            stats.total_nodes += 1

            if record.kind is NodeKind.ELEMENT:
                stats.elements += 1
                tag_counts[record.name] += 1
            elif record.kind is NodeKind.TEXT:
                stats.texts += 1
            elif record.kind is NodeKind.COMMENT:
                stats.comments += 1

        stats.tag_counts = dict(tag_counts)
        return stats

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
