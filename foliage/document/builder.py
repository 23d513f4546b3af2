"""
Tree building - converts parser output into an immutable node store
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag

from ..config import ParseConfig
from ..errors import DocumentBuildError
from .node_data import EMPTY_ATTRIBUTES, NodeKind, NodeRecord

logger = logging.getLogger(__name__)

_END_ELEMENT = object()


class TreeBuilder:
    """Collects nodes in document order and freezes them into records

    The builder always starts with the synthetic document root (id 0).
    Elements are opened with `start_element` and closed with `end_element`;
    text and comments are appended to the innermost open element.
    """

    def __init__(self):
        self._nodes: List[Dict] = []
        self._open: List[int] = []
        self._add(NodeKind.DOCUMENT)

    def _add(self, kind: NodeKind, **fields) -> int:
        index = len(self._nodes)
        parent = self._open[-1] if self._open else None
        position = 0
        if parent is not None:
            siblings = self._nodes[parent]['children']
            position = len(siblings)
            siblings.append(index)

        self._nodes.append({
            'index': index,
            'kind': kind,
            'parent': parent,
            'position': position,
            'children': [],
            **fields
        })
        if kind is NodeKind.DOCUMENT:
            self._open.append(index)
        return index

    @property
    def depth(self) -> int:
        """Number of currently open elements"""
        return len(self._open) - 1

    def start_element(self, name: str, attributes: Optional[Dict[str, str]] = None) -> int:
        attributes = MappingProxyType(dict(attributes)) if attributes else EMPTY_ATTRIBUTES
        index = self._add(NodeKind.ELEMENT, name=name, attributes=attributes)
        self._open.append(index)
        return index

    def end_element(self) -> int:
        if len(self._open) < 2:
            logger.warning("end_element called with no open element")
            raise DocumentBuildError("end_element called with no open element")
        return self._open.pop()

    def text(self, content: str) -> int:
        return self._add(NodeKind.TEXT, content=content)

    def comment(self, content: str) -> int:
        return self._add(NodeKind.COMMENT, content=content)

    def build(self) -> Tuple[NodeRecord, ...]:
        """Freeze the collected nodes; elements still open are closed implicitly"""
        if self.depth:
            logger.debug(f"Closing {self.depth} unclosed element(s) at end of input")
            del self._open[1:]

        return tuple(
            NodeRecord(
                index=node['index'],
                kind=node['kind'],
                parent=node['parent'],
                position=node['position'],
                children=tuple(node['children']),
                name=node.get('name'),
                attributes=node.get('attributes', EMPTY_ATTRIBUTES),
                content=node.get('content'),
            )
            for node in self._nodes
        )


def _attribute_value(value) -> str:
    # BeautifulSoup splits multi-valued attributes such as class into lists
    if isinstance(value, str):
        return value
    return ' '.join(value)


def records_from_soup(soup: Tag, config: Optional[ParseConfig] = None) -> Tuple[NodeRecord, ...]:
    """
    Convert a BeautifulSoup tree into node records

    Args:
        soup: A BeautifulSoup document, or any Tag (which becomes the single
            top-level node)
        config: Controls which strings are kept

    Returns:
        Frozen records, root first, in document order
    """
    if not isinstance(soup, Tag):
        message = f"Expected a BeautifulSoup Tag, got {type(soup).__name__}"
        logger.warning(message)
        raise DocumentBuildError(message)

    config = config or ParseConfig()
    builder = TreeBuilder()

    if isinstance(soup, BeautifulSoup):
        stack = list(reversed(list(soup.children)))
    else:
        stack = [soup]

    while stack:
        item = stack.pop()

        if item is _END_ELEMENT:
            builder.end_element()
        elif isinstance(item, Tag):
            attributes = {k: _attribute_value(v) for k, v in item.attrs.items()}
            builder.start_element(item.name, attributes)
            stack.append(_END_ELEMENT)
            stack.extend(reversed(list(item.children)))
        elif isinstance(item, config.skipped_string_types):
            continue
        elif isinstance(item, Comment):
            if config.keep_comments:
                builder.comment(str(item))
        elif isinstance(item, NavigableString):
            text = str(item)
            if config.skip_whitespace_text and not text.strip():
                continue
            builder.text(text)

    return builder.build()
