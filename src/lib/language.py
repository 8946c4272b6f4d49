"""
Fence language resolution

Maps the extension of a directive's referenced file to the language tag
written after the opening code fence.
"""

import re
from typing import Dict, Optional

from ..config import appsettings
from ..models.directives import Directive

# extension -> fence tag, for extensions whose tag differs from the extension
LANGUAGE_TABLE: Dict[str, str] = {
    'rs': 'rust',
}

_extension_pattern = re.compile(r"\.([^./\\]+)$")


def extension_get(filename: str) -> str:
    """Return the trailing dot-delimited extension of a filename, or ''"""
    match = _extension_pattern.search(filename)
    return match.group(1) if match else ""


def language_guess(directive: Directive, overrides: Optional[Dict[str, str]] = None) -> str:
    """
    Guess the fence language tag for a directive

    Known extensions are remapped through LANGUAGE_TABLE, extended by
    appsettings.language_overrides. Any other extension is used verbatim,
    and a filename without an extension yields an empty tag.

    Args:
        directive: Parsed directive whose filename is inspected
        overrides: Extra mappings; defaults to appsettings.language_overrides

    Returns:
        Language tag (possibly empty)

    Example:
        >>> language_guess(WholeFile("src/main.rs"))
        'rust'
        >>> language_guess(WholeFile("setup.py"))
        'py'
        >>> language_guess(WholeFile("Makefile"))
        ''
    """
    extension = extension_get(directive.filename)
    if not extension:
        return ""

    table = dict(LANGUAGE_TABLE)
    table.update(appsettings.language_overrides if overrides is None else overrides)
    return table.get(extension, extension)
