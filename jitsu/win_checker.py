"""End-condition checker
Decides whether either player's scored pile holds a winning combination.

A winning combination is three scored cards whose colors are pairwise
distinct and whose elements are either pairwise distinct or all identical.
Piles are rescanned every round; nothing is cached between rounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import TYPE_CHECKING, Iterable, Sequence

from .card import Card
from .enums import Color, Element
from .exceptions import InvalidCombinationError

if TYPE_CHECKING:
    from .engine import GameState
    from .player import Player

logger = logging.getLogger(__name__)

COMBINATION_SIZE = 3


@dataclass(slots=True)
class GameOverInfo:
    """End-condition result"""

    is_over: bool
    winner: Player | None
    combination: tuple[Card, Card, Card] | None = None
    # both players qualified in the same pass; player1 was reported
    contested: bool = False


def is_winning_combination(cards: Sequence[Card]) -> bool:
    """Whether three cards form a winning combination

    Raises:
        InvalidCombinationError: not exactly three cards, or a card with
            non-enum color/element data
    """
    if len(cards) != COMBINATION_SIZE:
        raise InvalidCombinationError(
            f"A combination has exactly {COMBINATION_SIZE} cards", size=len(cards)
        )
    for card in cards:
        if not isinstance(card.color, Color) or not isinstance(card.element, Element):
            raise InvalidCombinationError(f"Malformed card in combination: {card!r}")

    colors = {card.color for card in cards}
    elements = {card.element for card in cards}
    if len(colors) != COMBINATION_SIZE:
        return False
    return len(elements) == COMBINATION_SIZE or len(elements) == 1


def find_winning_combination(pile: Iterable[Card]) -> tuple[Card, Card, Card] | None:
    """Return the first winning 3-card combination in a pile, or None"""
    for combo in combinations(pile, COMBINATION_SIZE):
        if is_winning_combination(combo):
            return combo
    return None


def has_winning_combination(pile: Iterable[Card]) -> bool:
    """Whether a pile holds any winning combination"""
    return find_winning_combination(pile) is not None


class WinConditionChecker:
    """End-condition checker

    Player1 is checked before player2. When both qualify in the same pass
    player1 is reported and the result is flagged as contested.
    """

    def __init__(self, state: GameState):
        """
        Args:
            state: the game being checked
        """
        self.state = state

    def check_game_over(self) -> GameOverInfo:
        """Scan both scored piles

        Returns:
            GameOverInfo: the result of this pass
        """
        p1 = self.state.player1
        p2 = self.state.player2

        combo1 = find_winning_combination(p1.score)
        combo2 = find_winning_combination(p2.score)

        if combo1 is not None:
            contested = combo2 is not None
            if contested:
                logger.warning(
                    "Both %s and %s hold a winning combination; %s wins on seat priority",
                    p1.name, p2.name, p1.name,
                )
            return GameOverInfo(is_over=True, winner=p1, combination=combo1, contested=contested)

        if combo2 is not None:
            return GameOverInfo(is_over=True, winner=p2, combination=combo2)

        return GameOverInfo(is_over=False, winner=None)

    def is_game_over(self) -> bool:
        """Whether either player has won"""
        return self.check_game_over().is_over


def check_end_condition(state: GameState) -> Player | None:
    """Return the game winner, or None while nobody qualifies"""
    return WinConditionChecker(state).check_game_over().winner
