"""
Engine Configuration
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_MAX_CRITICAL_PAIRS,
    DEFAULT_VERIFY_ORACLE,
    ENV_MAX_PAIRS,
    ENV_VERIFY_ORACLE,
    FALSY,
    TRUTHY,
)


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for the primality engine.

    max_critical_pairs: Maximum number of homogeneous pairs checked by is_prime
    verify_oracle: Compare every oracle answer with the ring's membership test
    """
    max_critical_pairs: int = DEFAULT_MAX_CRITICAL_PAIRS
    verify_oracle: bool = DEFAULT_VERIFY_ORACLE

    def __post_init__(self):
        """Validate configuration."""
        if self.max_critical_pairs < 1:
            raise ValueError(f"max_critical_pairs must be >= 1, got {self.max_critical_pairs}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a configuration from GRADED_IDEAL_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}

        raw_pairs = env.get(ENV_MAX_PAIRS)
        if raw_pairs:
            try:
                kwargs["max_critical_pairs"] = int(raw_pairs)
            except ValueError:
                raise ValueError(f"{ENV_MAX_PAIRS} must be an integer, got {raw_pairs!r}") from None

        raw_verify = env.get(ENV_VERIFY_ORACLE)
        if raw_verify:
            flag = raw_verify.strip().lower()
            if flag in TRUTHY:
                kwargs["verify_oracle"] = True
            elif flag in FALSY:
                kwargs["verify_oracle"] = False
            else:
                raise ValueError(f"{ENV_VERIFY_ORACLE} must be a boolean flag, got {raw_verify!r}")

        return cls(**kwargs)
