#!/usr/bin/env python3
"""
Document - owns the immutable node store built from a parsed HTML tree
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from .. import traversal
from ..config import ParseConfig
from ..errors import DocumentBuildError, MalformedTreeError, NodeIndexError
from ..selection.selection import Selection
from .builder import TreeBuilder, records_from_soup
from .node import Node
from .node_data import NodeKind, NodeRecord

logger = logging.getLogger(__name__)


class Document:
    """
    A parsed HTML document held as a flat, read-only node store

    Record 0 is a synthetic root; every other record is an element, text or
    comment node whose id equals its position in document order.
    """

    def __init__(self, records: Optional[Sequence[NodeRecord]] = None, config: Optional[ParseConfig] = None):
        self.config = config or ParseConfig()
        if records is None:
            records = TreeBuilder().build()
        self._records = tuple(records)

        if self.config.validate:
            self.validate()

        logger.debug(f"Document built with {len(self._records)} nodes")

    @classmethod
    def from_html(cls, markup, config: Optional[ParseConfig] = None) -> 'Document':
        """
        Parse markup with BeautifulSoup and build a Document from the result

        Args:
            markup: HTML as str, bytes, or a file-like object with read()
            config: Parser name and conversion options
        """
        config = config or ParseConfig()
        if not isinstance(markup, (str, bytes)) and not hasattr(markup, 'read'):
            message = f"Cannot parse markup of type {type(markup).__name__}"
            logger.warning(message)
            raise DocumentBuildError(message)

        try:
            soup = BeautifulSoup(markup, config.parser)
        except (FeatureNotFound, ParserRejectedMarkup) as e:
            logger.warning(f"Failed to parse markup with {config.parser}: {e}")
            raise DocumentBuildError(f"Parser {config.parser!r} rejected the markup: {e}") from e

        return cls.from_soup(soup, config)

    @classmethod
    def from_soup(cls, soup, config: Optional[ParseConfig] = None) -> 'Document':
        """Build a Document from an already parsed BeautifulSoup tree"""
        return cls(records_from_soup(soup, config), config)

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[ParseConfig] = None,
                  encoding: Optional[str] = None) -> 'Document':
        """Parse a file; without an explicit encoding BeautifulSoup detects the charset"""
        if encoding is None:
            markup = Path(path).read_bytes()
        else:
            markup = Path(path).read_text(encoding=encoding)
        return cls.from_html(markup, config)

    # Store access

    def record(self, index: int) -> NodeRecord:
        return self._records[index]

    def nth(self, index: int) -> Node:
        if not 0 <= index < len(self._records):
            message = f"Node {index} does not exist (document has {len(self._records)} nodes)"
            logger.warning(message)
            raise NodeIndexError(message)
        return Node(self, index)

    def root(self) -> Node:
        return Node(self, 0)

    # Queries

    def find(self, predicate) -> Selection:
        """Every node below the root matching `predicate`, in document order"""
        return Selection(self, (0,)).find(predicate)

    def nodes(self) -> Selection:
        return Selection(self, traversal.descendants(self, 0))

    def text(self) -> str:
        return traversal.collect_text(self, 0)

    def stats(self):
        from ..monitoring.document_stats import DocumentStats
        return DocumentStats.from_document(self)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    def __repr__(self):
        return f"<Document {len(self._records)} nodes>"

    # Invariants

    def validate(self) -> None:
        """
        Check that the store is a single-rooted tree in document order

        Raises:
            MalformedTreeError: on the first violation found
        """
        records = self._records
        if not records or records[0].kind is not NodeKind.DOCUMENT or records[0].parent is not None:
            self._malformed("record 0 must be a parentless document root")

        for position, record in enumerate(records):
            if record.index != position:
                self._malformed(f"record at position {position} has id {record.index}")

            if position and record.kind is NodeKind.DOCUMENT:
                self._malformed(f"node {position} is a second document root")

            if position:
                parent = record.parent
                if parent is None or not 0 <= parent < position:
                    self._malformed(f"node {position} has invalid parent {parent}")
                siblings = records[parent].children
                if not 0 <= record.position < len(siblings) or siblings[record.position] != position:
                    self._malformed(f"node {position} is not listed at slot {record.position} of node {parent}")

            if record.children and record.kind not in (NodeKind.DOCUMENT, NodeKind.ELEMENT):
                self._malformed(f"{record.kind.value} node {position} has children")

            for child in record.children:
                if not position < child < len(records) or records[child].parent != position:
                    self._malformed(f"node {position} lists {child} as a child it does not own")

        # Parents precede children, so the walk below cannot loop
        for expected, index in enumerate(traversal.descendants(self, 0), start=1):
            if index != expected:
                self._malformed(f"node {index} found where node {expected} was expected in document order")

    def _malformed(self, message: str):
        logger.warning(f"Malformed node store: {message}")
        raise MalformedTreeError(message)
