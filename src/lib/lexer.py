"""
Custom Pygments lexer for mdrel source documents

Highlights ^code(...) inclusion directives inside markdown so that a
document's directives stand out when listed on a terminal. get_lexer()
follows appsettings.directive_prefix.

Token types:
- Keyword: The ^code directive prefix
- Punctuation: Parentheses and commas
- Name.Builtin: Referenced filename
- Name.Label: Section name
- Number.Integer: Line range bounds
- Text: Everything else (plain markdown)
"""

import re
from typing import Dict, Optional, Type

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    Keyword,
    Number,
    Whitespace,
    Error,
)

from ..config import appsettings

DEFAULT_PREFIX = "^code"


class DirectiveLexer(RegexLexer):
    """
    Lexer for markdown documents carrying mdrel directives

    Example:
        ^code(src/lib.rs, setup)

    Tokens:
        ^code → Keyword
        ( → Punctuation
        src/lib.rs → Name.Builtin
        , → Punctuation
        setup → Name.Label
        ) → Punctuation
    """

    name = 'mdrel'
    aliases = ['mdrel', 'md-rel']
    filenames = ['*.dev.md']

    tokens = {
        'root': [
            # Directive prefix at the start of a line
            (r'^(\^code)(\()', bygroups(Keyword, Punctuation), 'directive'),

            # Everything else is plain markdown
            (r'[^\n]+', Text),
            (r'\n', Whitespace),
        ],

        'directive': [
            (r'[ \t]+', Whitespace),
            (r',', Punctuation, 'arguments'),
            (r'\)', Punctuation, '#pop'),
            (r'[^,\s)]+', Name.Builtin),
            # Unterminated directive: flag the rest of the line
            (r'[^\n]*\n', Error, '#pop'),
        ],

        'arguments': [
            (r'[ \t]+', Whitespace),
            (r',', Punctuation),
            (r'[0-9]+', Number.Integer),
            (r'[a-zA-Z]+', Name.Label),
            (r'\)', Punctuation, '#pop:2'),
            (r'[^\n]*\n', Error, '#pop:2'),
        ],
    }


_lexer_classes: Dict[str, Type[DirectiveLexer]] = {DEFAULT_PREFIX: DirectiveLexer}


def lexerClass_forPrefix(prefix: str) -> Type[DirectiveLexer]:
    """
    Build (once) a DirectiveLexer subclass recognizing another prefix

    Only the root state changes; the directive and argument states are
    inherited from DirectiveLexer.
    """
    if prefix not in _lexer_classes:
        root = [
            (r'^(' + re.escape(prefix) + r')(\()', bygroups(Keyword, Punctuation), 'directive'),
        ] + DirectiveLexer.tokens['root'][1:]
        _lexer_classes[prefix] = type(
            'DirectiveLexer', (DirectiveLexer,), {'tokens': {'root': root}}
        )
    return _lexer_classes[prefix]


def get_lexer(prefix: Optional[str] = None) -> DirectiveLexer:
    """
    Get a DirectiveLexer instance

    Args:
        prefix: Directive prefix to highlight (defaults to appsettings.directive_prefix)

    Returns:
        DirectiveLexer instance ready for use with Pygments
    """
    prefix = appsettings.directive_prefix if prefix is None else prefix
    return lexerClass_forPrefix(prefix)()
