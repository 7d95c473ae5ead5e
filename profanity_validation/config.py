"""
Configuration loader for profanity_validation.

Loads blacklist/whitelist settings from a YAML file with sensible defaults.
Both the flat persisted structure::

    blacklist: [fuck, shit]
    whitelist: [Duck]

and a sectioned file with ``profanity:`` and ``logging:`` keys are accepted.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the blacklist/whitelist source is missing or malformed."""
    pass


@dataclass
class ProfanityConfig:
    """Configuration for profanity detection."""
    blacklist: List[str] = field(default_factory=list)
    whitelist: List[str] = field(default_factory=list)
    blacklist_path: str = ""  # Extra word list file merged into blacklist
    whitelist_path: str = ""  # Extra word list file merged into whitelist
    use_default_lists: bool = False  # Merge the bundled default lists
    short_circuit: bool = True  # Stop at the first match even if whitelisted
    max_word_length: int = 64
    mask_character: str = "*"

    def validate(self) -> None:
        """
        Check the type of every setting.

        Raises:
            ConfigurationError: On the first malformed setting
        """
        for key in ('blacklist', 'whitelist'):
            value = getattr(self, key)
            if not isinstance(value, (list, tuple)):
                raise ConfigurationError(f"'{key}' must be a list, got {type(value).__name__}")

        for key in ('blacklist_path', 'whitelist_path'):
            value = getattr(self, key)
            if value is None:
                setattr(self, key, "")
            elif not isinstance(value, str):
                raise ConfigurationError(f"'{key}' must be a path string, got {value!r}")

        for key in ('use_default_lists', 'short_circuit'):
            value = getattr(self, key)
            if not isinstance(value, bool):
                raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")

        value = self.max_word_length
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"'max_word_length' must be a positive integer, got {value!r}")

        mask = self.mask_character
        if not isinstance(mask, str) or len(mask) != 1:
            raise ConfigurationError(f"'mask_character' must be a single character, got {mask!r}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: str = ""


@dataclass
class Config:
    """Main configuration container."""
    profanity: ProfanityConfig = field(default_factory=ProfanityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> "Config":
        """
        Load configuration from a YAML file.

        If no path is provided, uses default values.
        Missing keys in the config file will use defaults.

        Raises:
            ConfigurationError: If the file is missing, unreadable or malformed
        """
        config = cls()

        if config_path is None:
            return config

        config_path = Path(config_path)
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e

        config.update(data)
        return config

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a configuration from an already parsed mapping."""
        config = cls()
        config.update(data)
        return config

    def update(self, data: Any) -> None:
        """
        Apply a parsed configuration mapping on top of the current values.

        Raises:
            ConfigurationError: If the mapping or one of its values is malformed
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        # Flat persisted structure
        for key in ('blacklist', 'whitelist'):
            if key in data:
                setattr(self.profanity, key, _as_list(key, data[key]))

        # Update profanity config
        if 'profanity' in data:
            for key, value in _as_section('profanity', data['profanity']).items():
                if key in ('blacklist', 'whitelist'):
                    value = _as_list(key, value)
                if hasattr(self.profanity, key):
                    setattr(self.profanity, key, value)
                else:
                    logger.warning(f"Ignoring unknown profanity setting: {key}")

        # Update logging config
        if 'logging' in data:
            for key, value in _as_section('logging', data['logging']).items():
                if hasattr(self.logging, key):
                    setattr(self.logging, key, value)

        self._validate()

    def _validate(self) -> None:
        self.profanity.validate()

        for key in ('level', 'log_file'):
            value = getattr(self.logging, key)
            if value is None:
                setattr(self.logging, key, "")
            elif not isinstance(value, str):
                raise ConfigurationError(f"'logging.{key}' must be a string, got {value!r}")

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        from .logging_config import setup_logging

        setup_logging(
            level=self.logging.level,
            log_file=self.logging.log_file or None,
        )

    def save(self, config_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        data = asdict(self)
        logger.info(f"Saving configuration to {config_path}")

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)


def _as_list(key: str, value: Any) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(f"'{key}' must be a list, got {type(value).__name__}")
    return list(value)


def _as_section(name: str, value: Any) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"'{name}' section must be a mapping, got {type(value).__name__}")
    return value

