"""
Built-in power handlers
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..card import (
    ChangeElement,
    ChangeScore,
    DiscardOpponentCardByColor,
    DiscardOpponentCardByElement,
    NoPower,
    TriggerSideEffect,
    adjust_value,
)
from .base import PowerEffect

if TYPE_CHECKING:
    from ..card import SideEffect
    from ..config import GameConfig
    from ..player import Player

logger = logging.getLogger(__name__)


class NoPowerEffect(PowerEffect[NoPower]):
    """Vanilla card: nothing happens"""

    def apply(self, power: NoPower, owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        return None


class ChangeScoreEffect(PowerEffect[ChangeScore]):
    """
    Shift the value of every card already in the owner's scored pile.

    The card being played is not in the pile yet, so it is never affected.
    """

    def apply(self, power: ChangeScore, owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        policy = config.value_policy
        # owner.score is only reassigned once every card has been adjusted
        adjusted = [
            card.with_value(adjust_value(card.value, power.delta, policy, config.max_card_value))
            for card in owner.score
        ]
        owner.score[:] = adjusted
        logger.debug("%s: %d scored cards shifted by %+d", owner.name, len(adjusted), power.delta)
        return None


class ChangeElementEffect(PowerEffect[ChangeElement]):
    """Convert the opponent's remaining hand cards from one element to another"""

    def apply(self, power: ChangeElement, owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        converted = opponent.convert_hand_elements(power.source, power.target)
        logger.debug(
            "%s: %d %s cards -> %s",
            opponent.name, converted, power.source.name, power.target.name,
        )
        return None


class DiscardByElementEffect(PowerEffect[DiscardOpponentCardByElement]):
    """Discard the first opponent hand card of an element (no-op if none)"""

    def apply(self, power: DiscardOpponentCardByElement, owner: 'Player',
              opponent: 'Player', config: 'GameConfig') -> 'SideEffect | None':
        discarded = opponent.discard_first_by_element(power.element)
        if discarded is None:
            logger.debug("%s holds no %s card to discard", opponent.name, power.element.name)
        else:
            logger.debug("%s discards %s", opponent.name, discarded)
        return None


class DiscardByColorEffect(PowerEffect[DiscardOpponentCardByColor]):
    """Discard the first opponent hand card of a color (no-op if none)"""

    def apply(self, power: DiscardOpponentCardByColor, owner: 'Player',
              opponent: 'Player', config: 'GameConfig') -> 'SideEffect | None':
        discarded = opponent.discard_first_by_color(power.color)
        if discarded is None:
            logger.debug("%s holds no %s card to discard", opponent.name, power.color.name)
        else:
            logger.debug("%s discards %s", opponent.name, discarded)
        return None


class TriggerSideEffectEffect(PowerEffect[TriggerSideEffect]):
    """Hand the side effect back to the caller; nobody is mutated"""

    def apply(self, power: TriggerSideEffect, owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        return power.effect
