"""
mdrel - Literate-programming preprocessor for markdown

Resolves ^code(...) inclusion directives into fenced code blocks.
"""

__version__ = "1.0.0"

from .parser import DirectiveParser, directive_detect
from .language import language_guess
from .extractor import Extractor, lines_extract
from .rewriter import Rewriter, document_rewrite, file_transform
from .provider import FileContentProvider, MemoryContentProvider, outputPath_derive
from .errors import MdError
from .log import LOG, state_connectToLogger

__all__ = [
    "DirectiveParser",
    "directive_detect",
    "language_guess",
    "Extractor",
    "lines_extract",
    "Rewriter",
    "document_rewrite",
    "file_transform",
    "FileContentProvider",
    "MemoryContentProvider",
    "outputPath_derive",
    "MdError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
