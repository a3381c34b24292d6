"""Engine configuration (single source of truth)

Every tunable engine parameter lives here and can be overridden through
environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from .enums import OverflowPolicy
from .exceptions import ConfigurationError


def _get_env_int(key: str, default: int) -> int:
    """Read an integer setting from the environment"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Read a boolean setting from the environment"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """Engine configuration (immutable)

    Environment overrides:
    - JITSU_VALUE_POLICY: ``clamp`` or ``strict`` handling of card value overflow
    - JITSU_ALLOW_ROUNDS_AFTER_END: keep resolving rounds once a winner exists
    - JITSU_EVENT_HISTORY: number of events kept by the event bus
    - JITSU_LOG_LEVEL: log level used by logging_config.setup_logging
    - JITSU_DEBUG: debug mode
    """

    # ==================== Card values ====================
    max_card_value: int = 255
    overflow_policy: str = field(
        default_factory=lambda: os.environ.get("JITSU_VALUE_POLICY", "clamp").strip().lower()
    )

    # ==================== Game flow ====================
    allow_rounds_after_end: bool = field(
        default_factory=lambda: _get_env_bool("JITSU_ALLOW_ROUNDS_AFTER_END", False)
    )

    # ==================== Events ====================
    event_history: int = field(
        default_factory=lambda: _get_env_int("JITSU_EVENT_HISTORY", 100)
    )

    # ==================== Logging and debugging ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("JITSU_LOG_LEVEL", "INFO")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("JITSU_DEBUG", False)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from the environment"""
        return cls()

    @property
    def value_policy(self) -> OverflowPolicy:
        """Overflow policy as an enum member"""
        try:
            return OverflowPolicy(self.overflow_policy)
        except ValueError:
            raise ConfigurationError(
                f"Unknown overflow policy: {self.overflow_policy!r}",
                config_key="overflow_policy",
            ) from None

    def validate(self) -> list[str]:
        """Check the configuration and return a list of problems (empty if valid)"""
        errors: list[str] = []
        if not 1 <= self.max_card_value <= 255:
            errors.append(f"max_card_value must be in 1..255, got {self.max_card_value}")
        allowed = {p.value for p in OverflowPolicy}
        if self.overflow_policy not in allowed:
            errors.append(
                f"overflow_policy must be one of {sorted(allowed)}, got {self.overflow_policy!r}"
            )
        if self.event_history < 0:
            errors.append(f"event_history must be >= 0, got {self.event_history}")
        return errors

    def get(self, key: str, default: Any = None) -> Any:
        """Dict-style access"""
        return getattr(self, key, default)


_config: GameConfig | None = None


def get_config() -> GameConfig:
    """Return the global config (lazily created)"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the global config (used by tests)"""
    global _config
    _config = None
