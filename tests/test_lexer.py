"""
Directive lexer tests

Tests Pygments tokenization of mdrel directive lines.
"""

from pygments.token import Keyword, Name, Number, Punctuation, Text, Error

from mdrel.lib.lexer import DirectiveLexer, get_lexer


def tokens_of(source):
    """Non-whitespace (token, value) pairs for a source string"""
    return [(token, value) for token, value in get_lexer().get_tokens(source) if value.strip()]


class TestDirectiveTokens:
    """Test tokens inside directives"""

    def test_whole_file(self):
        """Prefix, parentheses and filename"""
        assert tokens_of("^code(src/lib.rs)\n") == [
            (Keyword, "^code"),
            (Punctuation, "("),
            (Name.Builtin, "src/lib.rs"),
            (Punctuation, ")"),
        ]

    def test_section(self):
        """Section names are labels"""
        tokens = tokens_of("^code(lib.rs, setup)\n")
        assert (Name.Label, "setup") in tokens
        assert (Punctuation, ",") in tokens

    def test_line_range(self):
        """Line bounds are integers"""
        tokens = tokens_of("^code( lib.rs , 3 , 12 )\n")
        assert (Number.Integer, "3") in tokens
        assert (Number.Integer, "12") in tokens
        assert tokens[-1] == (Punctuation, ")")

    def test_unterminated_directive(self):
        """A directive without its closing parenthesis is flagged"""
        tokens = tokens_of("^code(lib.rs, setup; oops\n")
        assert (Error, "; oops\n") in tokens


class TestPlainText:
    """Test ordinary markdown"""

    def test_plain_line(self):
        """Markdown lines are plain text"""
        assert tokens_of("# Heading\n") == [(Text, "# Heading")]

    def test_inline_mention(self):
        """A prefix in the middle of a line is not a directive"""
        assert tokens_of("see ^code(a.rs)\n") == [(Text, "see ^code(a.rs)")]

    def test_default_prefix_ignores_other_prefixes(self):
        """Only the configured prefix opens a directive"""
        assert tokens_of("@include(a.py)\n") == [(Text, "@include(a.py)")]

    def test_lexer_metadata(self):
        """Lexer registers for development documents"""
        lexer = DirectiveLexer()
        assert "mdrel" in lexer.aliases
        assert "*.dev.md" in lexer.filenames


class TestConfiguredPrefix:
    """Test lexers built for another directive prefix"""

    def test_custom_prefix(self):
        """The root rule follows the given prefix"""
        tokens = [(t, v) for t, v in get_lexer("@include").get_tokens("@include(a.py, 1, 2)\n") if v.strip()]
        assert tokens[0] == (Keyword, "@include")
        assert (Name.Builtin, "a.py") in tokens
        assert (Number.Integer, "2") in tokens

    def test_custom_prefix_drops_default(self):
        """^code is plain text once another prefix is configured"""
        tokens = [(t, v) for t, v in get_lexer("@include").get_tokens("^code(a.rs)\n") if v.strip()]
        assert tokens == [(Text, "^code(a.rs)")]

    def test_follows_settings(self, monkeypatch):
        """Without an argument the lexer uses the configured prefix"""
        from mdrel.config import appsettings
        monkeypatch.setattr(appsettings, "directive_prefix", "%%snip")
        tokens = [(t, v) for t, v in get_lexer().get_tokens("%%snip(x.c)\n") if v.strip()]
        assert tokens[0] == (Keyword, "%%snip")

    def test_lexer_class_reused(self):
        """One lexer class is built per prefix"""
        assert type(get_lexer("@include")) is type(get_lexer("@include"))
        assert isinstance(get_lexer("@include"), DirectiveLexer)
