from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Closed set of verbosity names accepted by the CLI and MLISP_LOG_LEVEL
LOG_LEVELS = ("none", "info", "debug")

_TRUTHY = {"1", "true", "yes", "on"}


def log_level_from_env(env: Mapping[str, str], default: str = "none") -> str:
    raw = env.get("MLISP_LOG_LEVEL")
    if not raw:
        return default
    return validate_log_level(raw.strip().lower())


def validate_log_level(name: str) -> str:
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {name!r}, expected one of {', '.join(LOG_LEVELS)}")
    return name


def flag_from_env(env: Mapping[str, str], var: str, default: bool = False) -> bool:
    raw = env.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class Config:
    """Interpreter run settings.

    log_level:  one of LOG_LEVELS; "debug" also logs every term with its value.
    keep_going: report a failing term and carry on instead of stopping the run.
    """

    log_level: str = "none"
    keep_going: bool = False

    def __post_init__(self) -> None:
        validate_log_level(self.log_level)

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        log_level: Optional[str] = None,
        keep_going: Optional[bool] = None,
    ) -> Config:
        """Read MLISP_LOG_LEVEL and MLISP_KEEP_GOING (defaults: none, off).

        A setting passed explicitly wins, and its variable is not read.
        """
        if env is None:
            env = os.environ
        if log_level is None:
            log_level = log_level_from_env(env)
        if keep_going is None:
            keep_going = flag_from_env(env, "MLISP_KEEP_GOING")
        return cls(log_level=log_level, keep_going=keep_going)
