"""
Character tables used to build obfuscation-tolerant profanity patterns.

Both tables are fixed at import time and exposed read-only.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple


# Noise characters that may appear between the letters of a spaced-out word
# (f_u_c_k, f.u.c.k). Escaped when rendered into a character class.
SEPARATOR_CHARACTERS: Tuple[str, ...] = (
    '@', '#', '%', '&', '_', ';', "'", '"', ',', '~', '`', '|', '!', '$',
    '^', '*', '(', ')', '-', '+', '=', '{', '}', '[', ']', ':', '<', '>',
    '?', '.', '/',
)

# Already valid inside a character class, inserted verbatim
ESCAPED_SEPARATOR_CHARACTERS: Tuple[str, ...] = (
    r'\s',
)


_SUBSTITUTIONS: Dict[str, Tuple[str, ...]] = {
    'a': (
        'a', '4', '@', '*',
        'Á', 'á', 'À', 'Â', 'à', 'â', 'Ä', 'ä', 'Ã', 'ã', 'Å', 'å', 'æ', 'Æ',
        # Greek
        'α', 'Δ', 'Λ', 'λ',
    ),
    'b': ('b', '8', '\\', '3', 'ß', 'Β', 'β'),
    'c': ('c', 'Ç', 'ç', 'ć', 'Ć', 'č', 'Č', '¢', '€', '<', '(', '{', '©'),
    'd': ('d', '\\', ')', 'Þ', 'þ', 'Ð', 'ð'),
    'e': (
        'e', '3', '€', '*',
        'È', 'è', 'É', 'é', 'Ê', 'ê', 'ë', 'Ë', 'ē', 'Ē', 'ė', 'Ė', 'ę', 'Ę',
        '∑',
    ),
    'f': ('f', 'ƒ'),
    'g': ('g', '6', '9'),
    'h': ('h', 'Η'),
    'i': (
        'i', '!', '|', ']', '[', '1', '∫', '*',
        'Ì', 'Í', 'Î', 'Ï', 'ì', 'í', 'î', 'ï', 'ī', 'Ī', 'į', 'Į',
    ),
    'j': ('j',),
    'k': ('k', 'Κ', 'κ'),
    'l': ('l', '!', '|', ']', '[', '£', '∫', 'Ì', 'Í', 'Î', 'Ï', 'ł', 'Ł'),
    'm': ('m',),
    'n': ('n', 'η', 'Ν', 'Π', 'ñ', 'Ñ', 'ń', 'Ń'),
    'o': (
        'o', '0', '*',
        'Ο', 'ο', 'Φ', '¤', '°',
        'ø', 'ô', 'Ô', 'ö', 'Ö', 'ò', 'Ò', 'ó', 'Ó', 'œ', 'Œ', 'Ø', 'ō', 'Ō',
        'õ', 'Õ',
    ),
    'p': ('p', 'ρ', 'Ρ', '¶', 'þ'),
    'q': ('q',),
    'r': ('r', '®'),
    's': ('s', '5', '$', '§', 'ß', 'Ś', 'ś', 'Š', 'š'),
    't': ('t', 'Τ', 'τ'),
    'u': (
        'u', 'v', '@', '4', '*',
        'υ', 'µ', 'û', 'ü', 'ù', 'ú', 'ū', 'Û', 'Ü', 'Ù', 'Ú', 'Ū',
    ),
    'v': ('v', 'υ', 'ν'),
    'w': ('w', 'ω', 'ψ', 'Ψ'),
    'x': ('x', 'Χ', 'χ'),
    'y': ('y', '¥', 'γ', 'ÿ', 'ý', 'Ÿ', 'Ý'),
    'z': ('z', 'Ζ', 'ž', 'Ž', 'ź', 'Ź', 'ż', 'Ż'),
}

# Letter -> ordered substitutes, de-duplicated while keeping first occurrence
CHARACTER_SUBSTITUTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    letter: tuple(dict.fromkeys(substitutes))
    for letter, substitutes in _SUBSTITUTIONS.items()
})
