"""
Form validation rule backed by a ProfanityDetector.
"""

import logging
from typing import Any, Optional

from .config import Config, ProfanityConfig
from .detector import ProfanityDetector

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "The {attribute} field contains profanity."


class ProfanityValidationError(ValueError):
    """Raised when a validated value contains profanity."""

    def __init__(self, attribute: str, message: str):
        self.attribute = attribute
        self.message = message
        super().__init__(message)


class RinseWithSoap:
    """
    Validation rule failing for profane values.

    Without a detector the bundled default word lists are used.

    Usage:
        rule = RinseWithSoap(ProfanityDetector(["fuck"]))
        rule("username", form["username"])  # raises ProfanityValidationError
    """

    def __init__(self, detector: Optional[ProfanityDetector] = None, message: str = DEFAULT_MESSAGE):
        if detector is None:
            detector = ProfanityDetector.from_config(ProfanityConfig(use_default_lists=True))
        self.detector = detector
        self.message = message

    @classmethod
    def from_config(cls, config: Config, message: str = DEFAULT_MESSAGE) -> "RinseWithSoap":
        return cls(ProfanityDetector.from_config(config), message)

    def passes(self, value: Any) -> bool:
        # Only text can be profane
        if not isinstance(value, str):
            return True
        return not self.detector.has_profanity(value)

    def __call__(self, attribute: str, value: Any) -> None:
        if not self.passes(value):
            logger.debug(f"Validation failed for '{attribute}'")
            raise ProfanityValidationError(attribute, self.message.format(attribute=attribute))
