"""
Runtime configuration read from the environment.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got '{raw}'")


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Settings shared by builders and machines.

    Attributes:
        dev_mode: Log every step and keep a bounded history of runs
        metrics_enabled: Record Prometheus metrics for builds and runs
        history_size: Number of runs kept while in dev mode
        log_level: Default CLI log level
    """
    dev_mode: bool = False
    metrics_enabled: bool = True
    history_size: int = 20
    log_level: str = "INFO"

    def __post_init__(self):
        if self.history_size <= 0:
            raise ConfigurationError(f"history_size must be > 0, got {self.history_size}")
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{self.log_level}'"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RuntimeConfig":
        """Build a config from DFA_* environment variables"""
        env = os.environ if environ is None else environ

        raw_size = env.get('DFA_HISTORY_SIZE', '20')
        try:
            history_size = int(raw_size)
        except ValueError:
            raise ConfigurationError(f"DFA_HISTORY_SIZE must be an integer, got '{raw_size}'") from None

        return cls(
            dev_mode=_parse_bool('DFA_DEV_MODE', env.get('DFA_DEV_MODE', 'false')),
            metrics_enabled=_parse_bool('DFA_METRICS', env.get('DFA_METRICS', 'true')),
            history_size=history_size,
            log_level=env.get('DFA_LOG_LEVEL', 'INFO').strip().upper(),
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)
