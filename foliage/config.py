from dataclasses import dataclass
from typing import Tuple

from bs4.element import Declaration, Doctype, ProcessingInstruction


@dataclass
class ParseConfig:
    """Configuration for turning markup into a Document"""
    parser: str = "html.parser"          # BeautifulSoup tree builder
    keep_comments: bool = True
    skip_whitespace_text: bool = False   # drop text nodes that are only whitespace
    validate: bool = False               # check store invariants on construction
    skipped_string_types: Tuple[type, ...] = None

    def __post_init__(self):
        if self.skipped_string_types is None:
            self.skipped_string_types = (Doctype, Declaration, ProcessingInstruction)
