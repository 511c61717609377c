"""Data models for md-toc-html."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from .slugify import IdAllocator


class BlockState(Enum):
    """Converter states used while walking Markdown lines.

    Attributes:
        NORMAL: Default state for regular text and table rows.
        IN_CODE_BLOCK: Between an opening and a closing fence.
    """

    NORMAL = auto()
    IN_CODE_BLOCK = auto()


@dataclass(frozen=True)
class HeadingRecord:
    """A heading found during conversion, in document order.

    Attributes:
        level: Heading level from 1 to 6.
        text: Display text with bold markers removed.
        id: Anchor id written to the heading element, unique within the document.
    """

    level: int
    text: str
    id: str


@dataclass
class ConverterContext:
    """Mutable state for one conversion.

    A fresh context is created for every call to `convert_markdown`, so ids
    and buffered table rows never leak between documents.

    Attributes:
        state: Current block state.
        code_language: Language tag of the open code block, empty when absent.
        in_table: Whether a divider has been seen for the buffered rows.
        table_rows: Buffered rows, each a list of already formatted cells.
        table_lines: Source lines of the buffered rows.
        preserve_unicode: Whether heading ids keep Unicode letters and digits.
        ids: Allocator handing out heading ids.
        headings: Headings found so far.
        html: Emitted HTML fragments.
    """

    state: BlockState = BlockState.NORMAL
    code_language: str = ""
    in_table: bool = False
    table_rows: list[list[str]] = field(default_factory=list)
    table_lines: list[str] = field(default_factory=list)
    preserve_unicode: bool = False
    ids: IdAllocator = field(default_factory=IdAllocator)
    headings: list[HeadingRecord] = field(default_factory=list)
    html: list[str] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Structured result of converting a Markdown document.

    Attributes:
        body_html: HTML for the document body.
        headings: Headings in document order, used to build the TOC.
    """

    body_html: str
    headings: list[HeadingRecord]

    @property
    def title(self) -> str | None:
        """Text of the first heading, or None when there are no headings."""
        return self.headings[0].text if self.headings else None
