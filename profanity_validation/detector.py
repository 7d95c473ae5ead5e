"""
Profanity detection in user-submitted text.

Features:
- Letter substitutions (f4ck, ƒúck, $hit)
- Separator noise between letters (f.u.c.k, fu(_)ck)
- Spaced-out words across whitespace (f u c k)
- Exact, case-sensitive whitelist of tokens that must never be flagged
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .config import Config, ProfanityConfig
from .patterns import WordMatcher, compile_word_pattern
from .substitutions import SEPARATOR_CHARACTERS
from .wordlist import DEFAULT_BLACKLIST, DEFAULT_WHITELIST, load_wordlist

logger = logging.getLogger(__name__)


DEFAULT_MAX_WORD_LENGTH = 64
DEFAULT_MASK_CHARACTER = "*"

# Tokens are split on the space character only; tabs, newlines and other
# whitespace stay inside the token and count as separator noise
_TOKEN_RE = re.compile(r'[^ ]+')
_SEPARATOR_SET = frozenset(SEPARATOR_CHARACTERS)


@dataclass(frozen=True)
class DetectionResult:
    """The token that made a text profane."""
    token: str
    word: str  # Blacklist word whose pattern matched
    start: int
    end: int


@dataclass(frozen=True)
class RejectedEntry:
    """A blacklist or whitelist entry skipped during construction."""
    source: str  # "blacklist" or "whitelist"
    entry: Any
    reason: str


def _is_spacing_token(token: str) -> bool:
    """Single characters and pure separator runs can be part of a spaced-out word."""
    return len(token) == 1 or all(c in _SEPARATOR_SET or c.isspace() for c in token)


def iter_candidates(text: str) -> Iterator[Tuple[str, int]]:
    """
    Yield (candidate, offset) pairs to test, in text order.

    Candidates are the space-delimited tokens. A run of two or more
    consecutive spacing tokens ("f u c k") is also yielded, as the unchanged
    slice of text, right before its members.
    """
    tokens = list(_TOKEN_RE.finditer(text))
    index = 0

    while index < len(tokens):
        end = index
        while end < len(tokens) and _is_spacing_token(tokens[end].group()):
            end += 1

        if end - index >= 2:
            run_start = tokens[index].start()
            yield text[run_start:tokens[end - 1].end()], run_start

        stop = max(end, index + 1)
        for match in tokens[index:stop]:
            yield match.group(), match.start()
        index = stop


class ProfanityDetector:
    """
    Detects blacklisted words written with substitutions and separators.

    The detector is immutable once built: reconfiguring means constructing a
    new one. Invalid list entries are skipped, logged and kept in
    ``rejected_entries``.

    Args:
        blacklist: Words to ban, matched case-insensitively
        whitelist: Whole tokens that are never profane, compared exactly
        short_circuit: Stop scanning at the first matching token even when it
            is whitelisted. When False, whitelisted tokens are skipped and the
            rest of the text is still scanned.
        max_word_length: Longer blacklist entries are rejected
        mask_character: Character used by ``obfuscate_if_profane``
    """

    def __init__(
        self,
        blacklist: Iterable[Any] = (),
        whitelist: Iterable[Any] = (),
        *,
        short_circuit: bool = True,
        max_word_length: int = DEFAULT_MAX_WORD_LENGTH,
        mask_character: str = DEFAULT_MASK_CHARACTER,
    ):
        if max_word_length < 1:
            raise ValueError("max_word_length must be positive")
        if not isinstance(mask_character, str) or len(mask_character) != 1:
            raise ValueError(f"mask_character must be a single character, got {mask_character!r}")

        self.short_circuit = short_circuit
        self.max_word_length = max_word_length
        self.mask_character = mask_character
        self._rejected: List[RejectedEntry] = []

        self._blacklist = self._clean_blacklist(blacklist)
        self._whitelist = self._clean_whitelist(whitelist)
        self._patterns: Tuple[WordMatcher, ...] = tuple(
            compile_word_pattern(word) for word in self._blacklist
        )
        self.rejected_entries: Tuple[RejectedEntry, ...] = tuple(self._rejected)

        logger.info(
            f"Profanity detector ready: {len(self._blacklist)} blacklist words, "
            f"{len(self._whitelist)} whitelist entries, "
            f"{len(self.rejected_entries)} rejected"
        )

    @classmethod
    def from_config(cls, config: Union[Config, ProfanityConfig]) -> "ProfanityDetector":
        """
        Build a detector from configuration, merging word list files and,
        when requested, the bundled default lists.

        Raises:
            ConfigurationError: If a setting is malformed or a configured word
                list file cannot be read
        """
        if isinstance(config, Config):
            config = config.profanity
        config.validate()

        blacklist = list(config.blacklist)
        whitelist = list(config.whitelist)

        if config.blacklist_path:
            blacklist.extend(load_wordlist(config.blacklist_path))
        if config.whitelist_path:
            whitelist.extend(load_wordlist(config.whitelist_path))
        if config.use_default_lists:
            blacklist.extend(DEFAULT_BLACKLIST)
            whitelist.extend(DEFAULT_WHITELIST)

        return cls(
            blacklist,
            whitelist,
            short_circuit=config.short_circuit,
            max_word_length=config.max_word_length,
            mask_character=config.mask_character,
        )

    @property
    def blacklist(self) -> Tuple[str, ...]:
        return self._blacklist

    @property
    def whitelist(self) -> frozenset:
        return self._whitelist

    def _reject(self, source: str, entry: Any, reason: str) -> None:
        self._rejected.append(RejectedEntry(source, entry, reason))
        logger.warning(f"Skipping {source} entry {entry!r}: {reason}")

    def _clean_blacklist(self, entries: Iterable[Any]) -> Tuple[str, ...]:
        words = {}
        for entry in entries:
            if not isinstance(entry, str):
                self._reject("blacklist", entry, "not a string")
                continue

            word = entry.strip().lower()
            if not word:
                self._reject("blacklist", entry, "empty")
            elif any(c.isspace() for c in word):
                self._reject("blacklist", entry, "contains whitespace")
            elif len(word) > self.max_word_length:
                self._reject("blacklist", entry, f"longer than {self.max_word_length} characters")
            else:
                words.setdefault(word, None)
        return tuple(words)

    def _clean_whitelist(self, entries: Iterable[Any]) -> frozenset:
        tokens = set()
        for entry in entries:
            if not isinstance(entry, str):
                self._reject("whitelist", entry, "not a string")
            elif not entry.strip():
                self._reject("whitelist", entry, "empty")
            else:
                tokens.add(entry.strip())
        return frozenset(tokens)

    def _match_word(self, candidate: str) -> Optional[str]:
        """Return the first blacklist word whose pattern matches the candidate."""
        for matcher in self._patterns:
            if matcher.search(candidate):
                return matcher.word
        return None

    def scan(self, text: str) -> Optional[DetectionResult]:
        """
        Find the token that makes ``text`` profane.

        Tokens are checked in order against every pattern in blacklist order.
        A matching token listed verbatim in the whitelist is not profane; with
        ``short_circuit`` it also ends the scan.

        Returns:
            The deciding DetectionResult, or None when the text is clean
        """
        if not text or not isinstance(text, str):
            return None

        for candidate, start in iter_candidates(text):
            word = self._match_word(candidate)
            if word is None:
                continue

            if candidate in self._whitelist:
                logger.debug(f"Whitelisted token '{candidate}' matched '{word}'")
                if self.short_circuit:
                    return None
                continue

            logger.debug(f"Detected profanity: '{candidate}' -> '{word}' at {start}")
            return DetectionResult(
                token=candidate,
                word=word,
                start=start,
                end=start + len(candidate),
            )

        return None

    def has_profanity(self, text: str) -> bool:
        """Check whether some token of ``text`` is a non-whitelisted profanity."""
        return self.scan(text) is not None

    def obfuscate_if_profane(self, text: str) -> str:
        """Return ``text`` unchanged, or masked to the same length if profane."""
        if self.has_profanity(text):
            return self.mask_character * len(text)
        return text

    def __repr__(self) -> str:
        return (
            f"ProfanityDetector(blacklist={len(self._blacklist)} words, "
            f"whitelist={len(self._whitelist)} entries, "
            f"short_circuit={self.short_circuit})"
        )
