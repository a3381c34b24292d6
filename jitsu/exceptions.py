"""Game exceptions
Defines the error types raised by the rules engine, each carrying a message
and an optional ``details`` dict for logging.
"""

from __future__ import annotations

from typing import Any


class GameError(Exception):
    """Base class for all engine errors

    Every game-related exception inherits from this class so callers can
    catch engine failures in one place.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialise the error

        Args:
            message: human readable message
            details: extra structured context (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Card errors ====================


class CardValueError(GameError, ArithmeticError):
    """Card value out of range

    Raised when a card is built with a value outside ``0..max_value``, or
    when a score change overflows under the strict policy.
    """

    def __init__(
        self,
        message: str | None = None,
        value: int | None = None,
        max_value: int | None = None,
    ):
        if message is None:
            message = "Card value out of range"
        details: dict[str, Any] = {}
        if value is not None:
            details["value"] = value
        if max_value is not None:
            details["max_value"] = max_value
        super().__init__(message, details)
        self.value = value
        self.max_value = max_value


class InvalidCombinationError(GameError):
    """Malformed input to the end-condition check"""

    def __init__(self, message: str | None = None, size: int | None = None):
        if message is None:
            message = "Invalid card combination"
        details: dict[str, Any] = {}
        if size is not None:
            details["size"] = size
        super().__init__(message, details)
        self.size = size


# ==================== Power errors ====================


class UnknownPowerError(GameError):
    """No handler is registered for a power type"""

    def __init__(self, message: str | None = None, power_type: str | None = None):
        if message is None:
            message = "No handler registered for power"
        details: dict[str, Any] = {}
        if power_type:
            details["power_type"] = power_type
        super().__init__(message, details)
        self.power_type = power_type


# ==================== Game state errors ====================


class GameStateError(GameError):
    """Base class for game state errors"""

    def __init__(
        self,
        message: str | None = None,
        current_state: str | None = None,
        expected_state: str | None = None,
    ):
        if message is None:
            message = "Invalid game state"
        details: dict[str, Any] = {}
        if current_state:
            details["current_state"] = current_state
        if expected_state:
            details["expected_state"] = expected_state
        super().__init__(message, details)
        self.current_state = current_state
        self.expected_state = expected_state


class GameAlreadyFinishedError(GameStateError):
    """A round was played after the game ended"""

    def __init__(self, message: str | None = None, winner: str | None = None):
        if message is None:
            message = "Game already finished"
        super().__init__(message, current_state="ended")
        self.winner = winner
        if winner is not None:
            self.details["winner"] = winner


# ==================== Configuration errors ====================


class ConfigurationError(GameError):
    """Invalid configuration"""

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = "Configuration error"
        details: dict[str, Any] = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


# ==================== Helpers ====================


def raise_if_game_finished(status_value: str, winner: str | None = None) -> None:
    """Raise if the game has ended

    Args:
        status_value: current ``GameStatus`` value
        winner: name of the winner, if known

    Raises:
        GameAlreadyFinishedError: the game has ended
    """
    if status_value == "ended":
        raise GameAlreadyFinishedError(winner=winner)
