"""
Word list files and the bundled default lists.

Word list files hold one entry per line; blank lines and lines starting with
``#`` are ignored.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .config import ConfigurationError

logger = logging.getLogger(__name__)


# Core words flagged when default lists are requested
DEFAULT_BLACKLIST = (
    "fuck", "shit", "ass", "bitch", "cunt",
    "cock", "dick", "piss", "bastard",
    "whore", "slut", "twat", "wank",
    "nigger", "nigga", "fag", "faggot", "retard",
)

# Whole tokens that contain a default blacklist word but are safe.
# Compared exactly, so only the lowercase spelling is exempt.
DEFAULT_WHITELIST = (
    # Contains "ass"
    "class", "classic", "classes", "pass", "passed", "passage", "passenger",
    "passion", "passive", "passport", "password", "mass", "bass", "grass",
    "glass", "brass", "compass", "embassy", "harass", "assign", "assist",
    "asset", "assets", "assemble", "assembly", "assert", "assess", "assume",
    "assure", "associate", "association", "cassette", "massachusetts",

    # Contains "cock"
    "cockpit", "cockatoo", "cockatiel", "cocktail", "cockroach", "peacock",
    "shuttlecock", "hitchcock", "hancock",

    # Contains "dick"
    "dickens", "dickinson", "dickson",

    # Contains "shit"
    "shiitake",
)


def load_wordlist(path: Union[str, Path]) -> List[str]:
    """
    Load entries from a word list file, keeping file order.

    Args:
        path: Path to the word list file

    Returns:
        List of stripped entries

    Raises:
        ConfigurationError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Word list not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = []
            for line in f:
                word = line.strip()
                if word and not word.startswith('#'):
                    words.append(word)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Failed to read word list {path}: {e}") from e

    logger.info(f"Loaded {len(words)} entries from {path}")
    return words


def save_wordlist(words: Iterable[str], output_path: Union[str, Path]) -> None:
    """Save word list entries to a file, one per line."""
    words = list(words)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("# Word list for profanity_validation\n")
        f.write("# One entry per line, lines starting with # are comments\n\n")
        for word in words:
            f.write(f"{word}\n")

    logger.info(f"Saved {len(words)} entries to {output_path}")
