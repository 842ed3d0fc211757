"""Environment configuration loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from evm_asm.asm.forks import LATEST, Hardfork

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when a configuration value is invalid."""


@dataclass(frozen=True, slots=True)
class Config:
    fork: Hardfork = LATEST
    log_level: str = "WARNING"


def load_config() -> Config:
    """Load configuration from environment variables (and a .env file).

    Raises ConfigError if EVM_FORK or LOG_LEVEL is not recognised.
    """
    load_dotenv(find_dotenv(usecwd=True))

    raw_fork = os.environ.get("EVM_FORK", "")
    try:
        fork = Hardfork.parse(raw_fork) if raw_fork else LATEST
    except ValueError as e:
        raise ConfigError(str(e)) from e

    log_level = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(_LEVELS)}, got {log_level!r}")

    return Config(fork=fork, log_level=log_level)


def configure_logging(config: Config) -> None:
    """Attach a stream handler to the ``evm_asm`` logger at the configured level.

    Safe to call repeatedly; only one handler is ever installed.
    """
    pkg_logger = logging.getLogger("evm_asm")
    pkg_logger.setLevel(config.log_level)

    if not any(getattr(h, "_evm_asm", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._evm_asm = True  # type: ignore[attr-defined]
        pkg_logger.addHandler(handler)
