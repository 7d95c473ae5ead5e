"""
Tests for profanity_validation/wordlist.py
"""

import pytest

from profanity_validation.config import ConfigurationError
from profanity_validation.patterns import compile_word_pattern
from profanity_validation.wordlist import (
    DEFAULT_BLACKLIST,
    DEFAULT_WHITELIST,
    load_wordlist,
    save_wordlist,
)


# ---------------------------------------------------------------------------
# load_wordlist / save_wordlist
# ---------------------------------------------------------------------------

class TestLoadWordlist:
    def test_one_entry_per_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("fuck\nshit\n", encoding="utf-8")
        assert load_wordlist(path) == ["fuck", "shit"]

    def test_comments_and_blanks_skipped(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# banned words\n\n  fuck  \n   \n# shit\nass\n", encoding="utf-8")
        assert load_wordlist(path) == ["fuck", "ass"]

    def test_keeps_case(self, tmp_path):
        """Whitelist files rely on the exact spelling."""
        path = tmp_path / "whitelist.txt"
        path.write_text("Duck\n", encoding="utf-8")
        assert load_wordlist(str(path)) == ["Duck"]

    def test_unicode(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("scheiße\n", encoding="utf-8")
        assert load_wordlist(path) == ["scheiße"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_wordlist(tmp_path / "missing.txt")

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"f\xffck\n")
        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_wordlist(path)


class TestSaveWordlist:
    def test_save_then_load(self, tmp_path):
        path = tmp_path / "words.txt"
        save_wordlist(["fuck", "Duck"], path)
        assert load_wordlist(path) == ["fuck", "Duck"]

    def test_accepts_generator(self, tmp_path):
        path = tmp_path / "words.txt"
        save_wordlist((w for w in ("a", "b")), path)
        assert load_wordlist(path) == ["a", "b"]


# ---------------------------------------------------------------------------
# Default lists
# ---------------------------------------------------------------------------

class TestDefaultLists:
    def test_blacklist_lowercase_single_words(self):
        for word in DEFAULT_BLACKLIST:
            assert word == word.lower()
            assert word.strip() and " " not in word

    def test_no_duplicates(self):
        assert len(DEFAULT_BLACKLIST) == len(set(DEFAULT_BLACKLIST))
        assert len(DEFAULT_WHITELIST) == len(set(DEFAULT_WHITELIST))

    def test_lists_do_not_overlap(self):
        assert not set(DEFAULT_BLACKLIST) & set(DEFAULT_WHITELIST)

    def test_every_whitelist_entry_needs_exempting(self):
        """Each whitelisted token would otherwise be flagged."""
        matchers = [compile_word_pattern(word) for word in DEFAULT_BLACKLIST]
        for token in DEFAULT_WHITELIST:
            assert any(m.search(token) for m in matchers), f"{token!r} is never flagged"
