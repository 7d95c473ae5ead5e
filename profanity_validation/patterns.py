"""
Pattern generation for obfuscated profanity.

A blacklist word is turned into a matcher in two phases:

1. Expand: every letter becomes a fragment sequence meaning "this letter or any
   of its substitutes, one or more times" followed by a SEPARATOR placeholder.
   Characters without a substitution entry become literal fragments.
2. Render: each placeholder is replaced by the separator fragment ("zero or
   more noise characters").

The rendered fragments double as regular expression source (``expression``)
and as a small NFA that ``WordMatcher.search`` runs in time linear in the
input. Several substitutes are also separators (``!``, ``|``, ``(``), which
makes a backtracking engine explode on hostile input.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, FrozenSet, Iterable, List, Mapping, Sequence, Set, Tuple, Union

from .substitutions import (
    CHARACTER_SUBSTITUTIONS,
    ESCAPED_SEPARATOR_CHARACTERS,
    SEPARATOR_CHARACTERS,
)

logger = logging.getLogger(__name__)


# Pattern escapes allowed in a character class and the test each one stands for
ESCAPE_PREDICATES: Mapping[str, Callable[[str], bool]] = MappingProxyType({
    r'\s': str.isspace,
})


@dataclass(frozen=True)
class CharacterClass:
    """One pattern element: a set of characters and how often it may repeat."""
    characters: FrozenSet[str]  # Lowercased
    source: str  # Pattern source without quantifier
    min_count: int = 1
    repeat: bool = True
    escapes: Tuple[str, ...] = ()

    @property
    def quantifier(self) -> str:
        # Lazy, so a letter does not swallow characters of the next letter
        if not self.repeat:
            return ""
        return "+?" if self.min_count else "*?"

    @property
    def expression(self) -> str:
        return self.source + self.quantifier

    def matches(self, char: str) -> bool:
        """Case-insensitive membership test for one character."""
        if char.lower() in self.characters:
            return True
        return any(ESCAPE_PREDICATES[e](char) for e in self.escapes)


class _Placeholder:
    """Marker rendered as the separator fragment."""

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = _Placeholder()

Fragment = Union[CharacterClass, _Placeholder]


def build_escaped_expression(
    characters: Iterable[str] = (),
    escaped_characters: Iterable[str] = (),
    min_count: int = 1,
) -> CharacterClass:
    """
    Build a repeatable character class from literal characters.

    Args:
        characters: Single characters, escaped when rendered
        escaped_characters: Class escapes inserted verbatim (e.g. ``\\s``)
        min_count: 1 for "one or more", 0 for "zero or more"

    Raises:
        ValueError: On a multi-character literal or an unknown escape
    """
    characters = list(characters)
    escaped_characters = tuple(escaped_characters)

    for char in characters:
        if len(char) != 1:
            raise ValueError(f"Substitutes must be single characters, got {char!r}")
    for escape in escaped_characters:
        if escape not in ESCAPE_PREDICATES:
            raise ValueError(f"Unsupported class escape {escape!r}")

    body = ''.join(escaped_characters) + ''.join(re.escape(c) for c in characters)
    return CharacterClass(
        characters=frozenset(c.lower() for c in characters),
        source=f"[{body}]",
        min_count=min_count,
        escapes=escaped_characters,
    )


def literal_fragment(char: str) -> CharacterClass:
    """Fragment matching ``char`` exactly once."""
    return CharacterClass(
        characters=frozenset({char.lower()}),
        source=re.escape(char),
        repeat=False,
    )


def build_separator_fragment() -> CharacterClass:
    """Fragment for "zero or more separator characters"."""
    return build_escaped_expression(
        SEPARATOR_CHARACTERS,
        ESCAPED_SEPARATOR_CHARACTERS,
        min_count=0,
    )


def build_character_fragments() -> Mapping[str, Tuple[Fragment, ...]]:
    """Per-letter fragment sequences, each ending in a SEPARATOR placeholder."""
    fragments = {}
    for letter, substitutes in CHARACTER_SUBSTITUTIONS.items():
        fragments[letter] = (build_escaped_expression(substitutes), SEPARATOR)
    return MappingProxyType(fragments)


SEPARATOR_FRAGMENT: CharacterClass = build_separator_fragment()
CHARACTER_FRAGMENTS: Mapping[str, Tuple[Fragment, ...]] = build_character_fragments()


def expand_word(word: str) -> List[Fragment]:
    """Expand a word into its fragment sequence (phase 1)."""
    fragments: List[Fragment] = []
    for char in word:
        if char.lower() in CHARACTER_FRAGMENTS:
            fragments.extend(CHARACTER_FRAGMENTS[char.lower()])
        else:
            fragments.append(literal_fragment(char))
    return fragments


def render_fragments(
    fragments: Sequence[Fragment],
    separator: CharacterClass = SEPARATOR_FRAGMENT,
) -> Tuple[CharacterClass, ...]:
    """Replace every SEPARATOR placeholder with the separator fragment (phase 2)."""
    return tuple(separator if f is SEPARATOR else f for f in fragments)


class WordMatcher:
    """
    Compiled matcher for one blacklist word.

    ``search`` answers whether any substring of the text matches, like
    ``re.search`` with ``re.IGNORECASE`` on ``expression`` would, in
    O(len(text) * len(elements)) time.
    """

    def __init__(self, word: str, elements: Sequence[CharacterClass]):
        self.word = word
        self.elements = tuple(elements)
        self._accept = len(self.elements)
        self._start = self._closure({0})

    @property
    def expression(self) -> str:
        """Equivalent regular expression source (use with re.IGNORECASE)."""
        return ''.join(e.expression for e in self.elements)

    def _closure(self, states: Set[int]) -> FrozenSet[int]:
        # Follow "zero occurrences" edges of optional elements
        pending = list(states)
        closed = set(states)
        while pending:
            index = pending.pop()
            if index < self._accept and self.elements[index].min_count == 0:
                if index + 1 not in closed:
                    closed.add(index + 1)
                    pending.append(index + 1)
        return frozenset(closed)

    def search(self, text: str) -> bool:
        """Return True if some substring of ``text`` matches the word."""
        if self._accept in self._start:
            return True

        active: FrozenSet[int] = frozenset()
        for char in text:
            following = set()
            for index in active | self._start:
                element = self.elements[index]
                if element.matches(char):
                    following.add(index + 1)
                    if element.repeat:
                        following.add(index)

            active = self._closure(following)
            if self._accept in active:
                return True

        return False

    def __repr__(self) -> str:
        return f"WordMatcher({self.word!r})"


@lru_cache(maxsize=None)
def compile_word_pattern(word: str) -> WordMatcher:
    """
    Build the matcher for one blacklist word.

    Results are cached per word; the tables they derive from never change.

    Raises:
        ValueError: If ``word`` is empty
    """
    if not word:
        raise ValueError("Cannot build a profanity pattern for an empty word")

    matcher = WordMatcher(word, render_fragments(expand_word(word)))
    logger.debug(f"Compiled pattern for '{word}' ({len(matcher.elements)} elements)")
    return matcher
