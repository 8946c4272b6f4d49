"""
Language resolver tests

Tests mapping of referenced filename extensions to fence language tags.
"""

import pytest

from mdrel.lib.language import language_guess, extension_get
from mdrel.models.directives import WholeFile, Section, LineRange


class TestExtension:
    """Test extension extraction"""

    @pytest.mark.parametrize("filename,expected", [
        ("a.rs", "rs"),
        ("src/lib.py", "py"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        ("dir.d/Makefile", ""),
        ("trailing.", ""),
    ])
    def test_extension_get(self, filename, expected):
        """Trailing dot-delimited suffix only"""
        assert extension_get(filename) == expected


class TestLanguageGuess:
    """Test fence tags"""

    def test_rust_remapped(self):
        """rs is the one built-in remapping"""
        assert language_guess(WholeFile("a.rs"), overrides={}) == "rust"

    def test_other_extension_verbatim(self):
        """Unknown extensions are used as-is"""
        assert language_guess(Section("setup.py", "main"), overrides={}) == "py"
        assert language_guess(LineRange("build.sh", 0, 3), overrides={}) == "sh"

    def test_no_extension_empty(self):
        """No extension gives an empty tag"""
        assert language_guess(WholeFile("Makefile"), overrides={}) == ""

    def test_overrides_extend_table(self):
        """Overrides add mappings without removing the built-in one"""
        overrides = {"py": "python"}
        assert language_guess(WholeFile("a.py"), overrides=overrides) == "python"
        assert language_guess(WholeFile("a.rs"), overrides=overrides) == "rust"

    def test_overrides_can_replace_builtin(self):
        """An override for rs wins over the built-in table"""
        assert language_guess(WholeFile("a.rs"), overrides={"rs": "rs"}) == "rs"
