"""
Start-up settings for the userbench server, read from USERBENCH_* environment variables.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from uvicorn.config import LOG_LEVELS

ENV_PREFIX = "USERBENCH_"
VARIANTS = ("standard", "minimal")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    variant: str = "standard"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")
        if self.variant not in VARIANTS:
            raise ValueError(f"variant must be one of {', '.join(VARIANTS)}, got {self.variant!r}")
        if self.log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Load settings from the environment, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        port_raw = env.get(ENV_PREFIX + "PORT")
        try:
            port = int(port_raw) if port_raw is not None else defaults.port
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {port_raw!r}") from None

        debug_raw = env.get(ENV_PREFIX + "DEBUG")
        debug = _parse_bool(ENV_PREFIX + "DEBUG", debug_raw) if debug_raw is not None else defaults.debug

        return cls(
            host=env.get(ENV_PREFIX + "HOST", defaults.host),
            port=port,
            debug=debug,
            variant=env.get(ENV_PREFIX + "VARIANT", defaults.variant).lower(),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )

    def override(self, **changes) -> "Settings":
        """Return a copy with the non-None values in ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def configure_logging(level: str = "INFO") -> None:
    numeric = LOG_LEVELS[level.lower()]
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("userbench").setLevel(numeric)
