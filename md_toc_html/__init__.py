"""
md-toc-html: Markdown to HTML converter with a scroll-synced table of contents.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    md-toc-html -m README.md -o site/index.html

Library Usage:
    from pathlib import Path
    from md_toc_html import build_page, convert_markdown

    result = convert_markdown(Path("README.md").read_text())
    html = build_page(result)
"""

from .converter import convert_markdown
from .exceptions import (
    ConversionError,
    InputNotFoundError,
    InputUnreadableError,
    OutputWriteError,
)
from .inline import format_inline
from .models import ConversionResult, HeadingRecord
from .page import SCRIPT, STYLESHEET, build_page, render_page
from .slugify import IdAllocator, sanitize_id
from .toc import render_toc, render_toc_tree

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "convert_markdown",
    "render_toc",
    "render_toc_tree",
    "render_page",
    "build_page",
    "sanitize_id",
    "format_inline",
    # Data models
    "ConversionResult",
    "HeadingRecord",
    "IdAllocator",
    # Static assets
    "STYLESHEET",
    "SCRIPT",
    # Exceptions
    "ConversionError",
    "InputNotFoundError",
    "InputUnreadableError",
    "OutputWriteError",
    # Version
    "__version__",
]
