"""
Configuration for Inversi sessions and tools.
"""
import json
import os
from pathlib import Path
from typing import Dict, Optional

MODES = ('two_player', 'vs_ai')
ORACLES = ('none', 'scripted', 'http')
PLAYERS = ('black', 'white')


class ConfigError(ValueError):
    """Raised for invalid configuration values."""


class InversiConfig:
    """Configuration for a game session."""

    ENV_PREFIX = 'INVERSI_'

    def __init__(self,
                 # Game
                 mode: str = 'vs_ai',
                 ai_player: str = 'white',
                 seed: Optional[int] = None,

                 # Opponent oracle
                 oracle: str = 'none',
                 oracle_url: Optional[str] = None,
                 oracle_token: Optional[str] = None,
                 oracle_timeout: float = 30.0,

                 # Presentation
                 think_delay: float = 0.0,

                 # Logging
                 log_level: str = 'INFO'):

        self.mode = mode
        self.ai_player = ai_player
        self.seed = seed

        self.oracle = oracle
        self.oracle_url = oracle_url
        self.oracle_token = oracle_token
        self.oracle_timeout = oracle_timeout

        self.think_delay = think_delay

        self.log_level = log_level

    def validate(self) -> 'InversiConfig':
        """
        Check values for consistency.

        Returns:
            InversiConfig: self, for chaining

        Raises:
            ConfigError: If any value is out of range
        """
        if self.mode not in MODES:
            raise ConfigError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.ai_player not in PLAYERS:
            raise ConfigError(f"ai_player must be one of {PLAYERS}, got {self.ai_player!r}")
        if self.oracle not in ORACLES:
            raise ConfigError(f"oracle must be one of {ORACLES}, got {self.oracle!r}")
        if self.oracle == 'http' and not self.oracle_url:
            raise ConfigError("oracle_url is required for the http oracle")
        for key in ('oracle_timeout', 'think_delay'):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.oracle_timeout <= 0:
            raise ConfigError("oracle_timeout must be positive")
        if self.think_delay < 0:
            raise ConfigError("think_delay must not be negative")
        return self

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'InversiConfig':
        """Create config from dictionary."""
        unknown = set(config_dict) - set(cls().__dict__)
        if unknown:
            raise ConfigError(f"unknown config keys: {sorted(unknown)}")
        return cls(**config_dict)

    @classmethod
    def from_json(cls, path) -> 'InversiConfig':
        """Load config from a JSON file."""
        with open(Path(path), 'r') as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_env(cls, environ=None) -> 'InversiConfig':
        """
        Build config from INVERSI_* environment variables.

        E.g. INVERSI_ORACLE=http INVERSI_ORACLE_URL=http://localhost:9000/move
        """
        environ = os.environ if environ is None else environ
        defaults = cls().__dict__
        values = {}
        for key, default in defaults.items():
            raw = environ.get(cls.ENV_PREFIX + key.upper())
            if raw is None:
                continue
            try:
                if key in ('oracle_timeout', 'think_delay'):
                    values[key] = float(raw)
                elif key == 'seed':
                    values[key] = int(raw)
                else:
                    values[key] = raw
            except ValueError as e:
                raise ConfigError(f"invalid value for {cls.ENV_PREFIX}{key.upper()}: {raw!r}") from e
        return cls(**values)
