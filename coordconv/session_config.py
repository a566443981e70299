"""
Configuration for the interactive conversion session.

Supports defaults, YAML files and an environment variable naming the file.
"""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Optional
import logging
import os

import yaml

from coordconv.messages import CATALOGS, Messages

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "COORDCONV_CONFIG"
CONFIG_SECTION = "coordconv"


class FlowMode(str, Enum):
    """Prompt sequencing used by the interactive session.

    COMBINED: one prompt accepts a decimal pair for both axes; otherwise the
        longitude is asked for in the same notation as the latitude.
    SPLIT: latitude and longitude are always asked for on separate prompts.
    """
    COMBINED = "combined"
    SPLIT = "split"


class Language(str, Enum):
    """Language of prompts and messages."""
    ENGLISH = "en"
    JAPANESE = "ja"


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for one interactive session.

    Attributes:
        flow: Prompt sequencing variant
        language: Language of prompts and messages
        echo_decimal: Print the parsed decimal pair before asking for the
            output notation
    """
    flow: FlowMode = FlowMode.COMBINED
    language: Language = Language.ENGLISH
    echo_decimal: bool = True

    @property
    def messages(self) -> Messages:
        return CATALOGS[self.language.value]

    @classmethod
    def from_yaml(cls, path: str) -> 'SessionConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            SessionConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = SessionConfig.from_yaml('coordconv.yaml')
            >>> print(config.flow)
            FlowMode.COMBINED
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  flow: ...\n  ..."
            )

        logger.debug("Loaded session configuration from %s", config_path)
        return cls.from_dict(data[CONFIG_SECTION] or {})

    @staticmethod
    def _parse_enum(enum_cls, key: str, value):
        try:
            return enum_cls(value)
        except ValueError:
            valid = [member.value for member in enum_cls]
            raise ValueError(
                f"Invalid {key} '{value}'. "
                f"Must be one of: {', '.join(valid)}"
            ) from None

    @classmethod
    def from_dict(cls, config: dict) -> 'SessionConfig':
        """Create configuration from dictionary.

        Args:
            config: Dictionary with optional keys 'flow', 'language' and
                'echo_decimal'. Missing keys keep their defaults.

        Returns:
            SessionConfig instance

        Raises:
            ValueError: If configuration contains unknown keys or invalid values
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        unknown = set(config) - {'flow', 'language', 'echo_decimal'}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        defaults = cls()
        flow = defaults.flow
        if 'flow' in config:
            flow = cls._parse_enum(FlowMode, 'flow', config['flow'])

        language = defaults.language
        if 'language' in config:
            language = cls._parse_enum(Language, 'language', config['language'])

        echo_decimal = config.get('echo_decimal', defaults.echo_decimal)
        if not isinstance(echo_decimal, bool):
            raise ValueError(f"'echo_decimal' must be a boolean, got {type(echo_decimal)}")

        return cls(flow=flow, language=language, echo_decimal=echo_decimal)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary suitable for YAML serialization."""
        return {
            'flow': self.flow.value,
            'language': self.language.value,
            'echo_decimal': self.echo_decimal,
        }

    def with_overrides(
        self,
        flow: Optional[FlowMode] = None,
        language: Optional[Language] = None,
    ) -> 'SessionConfig':
        """Return a copy with any given (non-None) values replaced."""
        changes = {}
        if flow is not None:
            changes['flow'] = flow
        if language is not None:
            changes['language'] = language
        return replace(self, **changes)


def get_default_config() -> SessionConfig:
    """Get default session configuration (combined flow, English messages)."""
    return SessionConfig()


def load_config(path: Optional[str] = None) -> SessionConfig:
    """Load configuration from path, else from $COORDCONV_CONFIG, else defaults.

    Raises:
        FileNotFoundError: If the named file does not exist
        ValueError: If the file is malformed
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        return get_default_config()
    return SessionConfig.from_yaml(path)
