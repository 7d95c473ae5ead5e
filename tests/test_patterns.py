"""
Tests for profanity_validation/patterns.py

Covers the fragment builders, two-phase expansion and the WordMatcher.
"""

import re
import string

import pytest

from profanity_validation.patterns import (
    CHARACTER_FRAGMENTS,
    SEPARATOR,
    SEPARATOR_FRAGMENT,
    CharacterClass,
    WordMatcher,
    build_escaped_expression,
    compile_word_pattern,
    expand_word,
    render_fragments,
)


class TestBuildEscapedExpression:
    """Tests for character class construction."""

    def test_one_or_more(self):
        fragment = build_escaped_expression(['a', 'b'])
        assert fragment.min_count == 1
        assert fragment.quantifier == "+?"
        assert fragment.expression == "[ab]+?"

    def test_zero_or_more(self):
        fragment = build_escaped_expression(['a'], min_count=0)
        assert fragment.quantifier == "*?"

    def test_special_characters_escaped(self):
        fragment = build_escaped_expression([']', '\\', '^', '-'])
        assert re.fullmatch(fragment.expression, "]\\^-")
        assert not re.fullmatch(fragment.expression, "a")

    def test_escaped_characters_inserted_verbatim(self):
        fragment = build_escaped_expression(['_'], [r'\s'])
        assert fragment.source == r"[\s_]"
        assert fragment.matches(' ')
        assert fragment.matches('\t')

    def test_rejects_multi_character_literal(self):
        with pytest.raises(ValueError):
            build_escaped_expression(['ab'])

    @pytest.mark.parametrize("escape", [r'\w', r'\d'])
    def test_rejects_unknown_escape(self, escape):
        """Only the whitespace class appears in the separator table."""
        with pytest.raises(ValueError):
            build_escaped_expression([], [escape])


class TestCharacterClass:
    def test_matches_case_insensitively(self):
        fragment = CHARACTER_FRAGMENTS['a'][0]
        assert fragment.matches('a')
        assert fragment.matches('A')
        assert fragment.matches('Á')
        assert fragment.matches('4')

    def test_rejects_other_letters(self):
        assert not CHARACTER_FRAGMENTS['a'][0].matches('b')

    def test_literal_has_no_quantifier(self):
        fragment = expand_word("1")[0]
        assert isinstance(fragment, CharacterClass)
        assert fragment.quantifier == ""
        assert fragment.expression == "1"


class TestSeparatorFragment:
    def test_optional(self):
        assert SEPARATOR_FRAGMENT.min_count == 0

    def test_matches_separators(self):
        for char in ' \t._-*()/':
            assert SEPARATOR_FRAGMENT.matches(char), f"{char!r} not a separator"

    def test_rejects_letters(self):
        for char in 'az09':
            assert not SEPARATOR_FRAGMENT.matches(char)

    def test_expression_is_valid_regex(self):
        assert re.fullmatch(SEPARATOR_FRAGMENT.expression, "_. -()")


class TestCharacterFragments:
    def test_one_per_letter(self):
        assert sorted(CHARACTER_FRAGMENTS) == list(string.ascii_lowercase)

    def test_each_ends_with_placeholder(self):
        for letter, fragments in CHARACTER_FRAGMENTS.items():
            assert fragments[-1] is SEPARATOR
            assert fragments[0].quantifier == "+?"


class TestExpansion:
    """Tests for the two-phase expansion."""

    def test_letters_get_placeholders(self):
        fragments = expand_word("ab")
        assert fragments == [
            CHARACTER_FRAGMENTS['a'][0], SEPARATOR,
            CHARACTER_FRAGMENTS['b'][0], SEPARATOR,
        ]

    def test_non_letters_are_literals(self):
        fragments = expand_word("f4")
        assert len(fragments) == 3
        assert fragments[2].source == "4"
        assert not fragments[2].repeat

    def test_uppercase_letters_expanded(self):
        assert expand_word("F") == expand_word("f")

    def test_render_replaces_placeholders(self):
        rendered = render_fragments(expand_word("fuck"))
        assert SEPARATOR not in rendered
        assert rendered[1] is SEPARATOR_FRAGMENT

    def test_expression_case_normalized(self):
        assert compile_word_pattern("FUCK").expression == compile_word_pattern("fuck").expression


class TestCompileWordPattern:
    def test_empty_word_rejected(self):
        with pytest.raises(ValueError):
            compile_word_pattern("")

    def test_cached(self):
        assert compile_word_pattern("fuck") is compile_word_pattern("fuck")

    def test_returns_matcher(self):
        matcher = compile_word_pattern("fuck")
        assert isinstance(matcher, WordMatcher)
        assert matcher.word == "fuck"


class TestWordMatcher:
    """Tests for obfuscation-tolerant search."""

    @pytest.mark.parametrize("text", [
        "fuck", "FUCK", "f.u.c.k", "f u c k", "fu(_)ck", "f4ck", "fück",
        "ƒuck", "fuuuuuck", "motherfucker", "f__u__c__k", "fu©k",
    ])
    def test_detects(self, text):
        assert compile_word_pattern("fuck").search(text)

    @pytest.mark.parametrize("text", [
        "", "duck", "fuk", "fcuk", "f-u-c", "hello",
    ])
    def test_ignores(self, text):
        assert not compile_word_pattern("fuck").search(text)

    @pytest.mark.parametrize("text", [
        "fuck", "FuCk", "f.u.c.k", "fu(_)ck", "f4ck", "fück", "ƒuck", "xfuckx",
        "duck", "fuk", "f-u-c", "", "f u c k", "fu\\ck", "f[u]ck",
    ])
    def test_agrees_with_regex(self, text):
        matcher = compile_word_pattern("fuck")
        expected = re.search(matcher.expression, text, re.IGNORECASE) is not None
        assert matcher.search(text) == expected

    def test_literal_characters_matched_exactly(self):
        matcher = compile_word_pattern("b00b")
        assert matcher.search("b00b")
        assert matcher.search("B00B")
        assert not matcher.search("boob")

    def test_linear_on_ambiguous_input(self):
        """'!' is an i, an l and a separator; a backtracking engine stalls here."""
        matcher = compile_word_pattern("ilk")
        assert not matcher.search("!" * 20000)
        assert matcher.search("!" * 20000 + "k")
