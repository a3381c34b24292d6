"""
Card-Jitsu rules engine
Two-player elemental card game: cards, powers, round resolution, end
condition and the round orchestrator.
"""

from .card import (
    Card, NoPower, ChangeScore, ChangeElement, DiscardOpponentCardByElement,
    DiscardOpponentCardByColor, TriggerSideEffect, RestrictElementNextRound,
    LowerValueWinsTieNextRound, MAX_CARD_VALUE, adjust_value,
)
from .config import GameConfig, get_config, reset_config
from .effects import PowerEffectRegistry, apply_power, create_default_registry
from .engine import GameState, RoundOutcome, new_game, play_round
from .enums import Color, Element, GameStatus, OverflowPolicy
from .events import EventBus, EventType, GameEvent
from .exceptions import (
    CardValueError, ConfigurationError, GameAlreadyFinishedError, GameError,
    InvalidCombinationError, UnknownPowerError,
)
from .player import Player
from .round_resolver import determine_winner, score_round
from .win_checker import GameOverInfo, WinConditionChecker, check_end_condition

__all__ = [
    # cards
    'Card', 'NoPower', 'ChangeScore', 'ChangeElement', 'DiscardOpponentCardByElement',
    'DiscardOpponentCardByColor', 'TriggerSideEffect', 'RestrictElementNextRound',
    'LowerValueWinsTieNextRound', 'MAX_CARD_VALUE', 'adjust_value',
    'Color', 'Element', 'GameStatus', 'OverflowPolicy',
    # players and state
    'Player', 'GameState', 'RoundOutcome', 'new_game', 'play_round',
    # rules
    'PowerEffectRegistry', 'apply_power', 'create_default_registry',
    'determine_winner', 'score_round',
    'GameOverInfo', 'WinConditionChecker', 'check_end_condition',
    # events
    'EventBus', 'EventType', 'GameEvent',
    # config and errors
    'GameConfig', 'get_config', 'reset_config',
    'GameError', 'CardValueError', 'ConfigurationError', 'GameAlreadyFinishedError',
    'InvalidCombinationError', 'UnknownPowerError',
]

__version__ = '1.0.0'
