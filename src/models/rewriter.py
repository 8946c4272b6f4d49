"""
Rewriter-specific data models

Type-safe structures for rewrite results.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.errors import MdError


@dataclass
class TransformResult:
    """
    Outcome of transforming one document

    Returned by file_transform() and collected by the CLI, one per document.

    Attributes:
        source: Path of the source document
        output_file: Destination path (derived even when the transform fails)
        status: True when the whole document was rewritten
        directive_count: Directive lines resolved into fenced blocks
        dropped_count: ^code lines that matched no directive shape
        error: The failure that aborted the transform, if any

    Example:
        TransformResult(
            source="guide.dev.md",
            output_file="guide.md",
            status=True,
            directive_count=3,
            dropped_count=0,
        )
    """
    source: str
    output_file: str
    status: bool = False
    directive_count: int = 0
    dropped_count: int = 0
    error: Optional["MdError"] = None
