"""Round resolution
Decides who wins a round from the two played cards and scores the winning
card.

Resolution order:
1. a card of an element restricted by the active side effect forfeits
2. the elemental beats table (Fire > Snow > Water > Fire) decides outright
3. on equal elements the value policy compares effective values;
   equal effective values are a draw
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .card import Card, LowerValueWinsTieNextRound, RestrictElementNextRound

if TYPE_CHECKING:
    from .card import SideEffect
    from .player import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValuePolicy:
    """How card values are compared once elements tie

    Attributes:
        name: policy name used in logs
        effective_value: maps a card to the number that is compared
        compare: returns >0 if the first value wins, <0 if the second wins,
            0 for a draw
    """

    name: str
    effective_value: Callable[[Card], int]
    compare: Callable[[int, int], int]


def _identity(card: Card) -> int:
    return card.value


HIGHER_WINS = ValuePolicy("higher_wins", _identity, lambda a, b: a - b)
LOWER_WINS = ValuePolicy("lower_wins", _identity, lambda a, b: b - a)


def policy_for(side_effect: 'SideEffect | None') -> ValuePolicy:
    """Pick the value policy for the active side effect"""
    if isinstance(side_effect, LowerValueWinsTieNextRound):
        return LOWER_WINS
    return HIGHER_WINS


def determine_winner(
    player1: 'Player',
    card1: Card,
    player2: 'Player',
    card2: Card,
    side_effect: 'SideEffect | None' = None,
    policy: ValuePolicy | None = None,
) -> 'Player | None':
    """Determine the round winner

    Args:
        player1: first player
        card1: card played by the first player
        player2: second player
        card2: card played by the second player
        side_effect: side effect active for this round
        policy: value policy override (derived from ``side_effect`` if omitted)

    Returns:
        The winning player, or None for a draw
    """
    if isinstance(side_effect, RestrictElementNextRound):
        restricted = side_effect.element
        forfeit1 = card1.element is restricted
        forfeit2 = card2.element is restricted
        if forfeit1 and forfeit2:
            logger.debug("Both cards are %s (restricted): draw", restricted.name)
            return None
        if forfeit1:
            return player2
        if forfeit2:
            return player1

    if card1.element.beats(card2.element):
        return player1
    if card2.element.beats(card1.element):
        return player2

    # same element: fall through to the numbers
    policy = policy or policy_for(side_effect)
    result = policy.compare(policy.effective_value(card1), policy.effective_value(card2))
    if result > 0:
        return player1
    if result < 0:
        return player2
    return None


def score_round(
    winner: 'Player | None',
    player1: 'Player',
    card1: Card,
    player2: 'Player',
    card2: Card,
) -> Card | None:
    """Append the winning card to the winner's scored pile

    Returns:
        The scored card, or None on a draw
    """
    if winner is None:
        return None
    card = card1 if winner is player1 else card2
    winner.add_score(card)
    return card
