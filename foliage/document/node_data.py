from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class NodeKind(Enum):
    """Kinds of records held in a node store"""
    DOCUMENT = "document"   # synthetic root, always id 0
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


EMPTY_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class NodeRecord:
    """A single entry of the node store

    `position` is the record's index inside its parent's `children`, which
    gives constant time sibling lookup.
    """
    index: int
    kind: NodeKind
    parent: Optional[int] = None
    position: int = 0
    children: Tuple[int, ...] = ()
    name: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=lambda: EMPTY_ATTRIBUTES)
    content: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.kind is NodeKind.DOCUMENT
