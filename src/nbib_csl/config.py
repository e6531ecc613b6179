"""Runtime configuration for the converter."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ConverterConfig:
    strict: bool = False
    indent: int = 2
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ConverterConfig":
        """Build a config from NBIB_CSL_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()

        strict = env.get("NBIB_CSL_STRICT")
        if strict is not None:
            config.strict = strict.strip().lower() in _TRUE_VALUES

        indent = env.get("NBIB_CSL_INDENT")
        if indent:
            try:
                config.indent = max(0, int(indent))
            except ValueError:
                pass

        level = (env.get("NBIB_CSL_LOG_LEVEL") or "").strip().upper()
        if level in LOG_LEVELS:
            config.log_level = level
        return config
