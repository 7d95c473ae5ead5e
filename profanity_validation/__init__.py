"""
Profanity Validation
====================

Rule-based detection of obfuscated profanity (leetspeak, homoglyphs,
separator noise, diacritics) with an exact-token whitelist.
"""

__version__ = "0.1.0"

# Export key classes for convenience
from .config import Config, ConfigurationError, ProfanityConfig
from .detector import DetectionResult, ProfanityDetector
from .rules import ProfanityValidationError, RinseWithSoap

__all__ = [
    'Config',
    'ConfigurationError',
    'ProfanityConfig',
    'DetectionResult',
    'ProfanityDetector',
    'ProfanityValidationError',
    'RinseWithSoap',
]
