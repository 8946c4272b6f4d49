"""
mdrel - Literate-programming preprocessor for markdown

Keeps documentation in sync with source code by replacing ^code(...)
directives with fenced blocks extracted from the referenced files.
"""

__version__ = "1.0.0"

from .lib import (
    DirectiveParser,
    Rewriter,
    Extractor,
    file_transform,
    document_rewrite,
    MdError,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "DirectiveParser",
    "Rewriter",
    "Extractor",
    "file_transform",
    "document_rewrite",
    "MdError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
