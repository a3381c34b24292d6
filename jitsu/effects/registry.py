"""
Power effect registry
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional

from ..card import POWER_TYPES
from ..config import get_config
from ..exceptions import UnknownPowerError
from .base import PowerEffect

if TYPE_CHECKING:
    from ..card import Card, SideEffect
    from ..config import GameConfig
    from ..player import Player

logger = logging.getLogger(__name__)


class PowerEffectRegistry:
    """
    Power effect registry

    Maps a power type to its PowerEffect handler. apply_power() routes every
    played card through this registry; a power type without a handler is an
    error, never a silent no-op.
    """

    def __init__(self):
        self._effects: Dict[type, PowerEffect] = {}

    def register(self, power_type: type, effect: PowerEffect) -> None:
        """Register the handler for a power type"""
        self._effects[power_type] = effect

    def get(self, power_type: type) -> Optional[PowerEffect]:
        """Look up the handler for a power type"""
        return self._effects.get(power_type)

    def has(self, power_type: type) -> bool:
        """Whether a handler is registered for a power type"""
        return power_type in self._effects

    def missing(self) -> list[type]:
        """Built-in power types with no registered handler"""
        return [t for t in POWER_TYPES if t not in self._effects]

    def apply(self, card: 'Card', owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        """Apply ``card``'s power through its registered handler"""
        power_type = type(card.power)
        effect = self._effects.get(power_type)
        if effect is None:
            raise UnknownPowerError(power_type=power_type.__name__)
        if card.has_power:
            logger.debug("%s plays %s", owner.name, card)
        return effect.apply(card.power, owner, opponent, config)


def create_default_registry() -> PowerEffectRegistry:
    """
    Create a registry with every built-in power handler

    Returns:
        A registry covering all power types
    """
    from ..card import (
        ChangeElement, ChangeScore, DiscardOpponentCardByColor,
        DiscardOpponentCardByElement, NoPower, TriggerSideEffect,
    )
    from .powers import (
        ChangeElementEffect, ChangeScoreEffect, DiscardByColorEffect,
        DiscardByElementEffect, NoPowerEffect, TriggerSideEffectEffect,
    )

    registry = PowerEffectRegistry()
    registry.register(NoPower, NoPowerEffect())
    registry.register(ChangeScore, ChangeScoreEffect())
    registry.register(ChangeElement, ChangeElementEffect())
    registry.register(DiscardOpponentCardByElement, DiscardByElementEffect())
    registry.register(DiscardOpponentCardByColor, DiscardByColorEffect())
    registry.register(TriggerSideEffect, TriggerSideEffectEffect())

    missing = registry.missing()
    if missing:
        raise UnknownPowerError(
            "Default registry is missing power handlers",
            power_type=", ".join(t.__name__ for t in missing),
        )
    return registry


_default_registry: Optional[PowerEffectRegistry] = None


def get_default_registry() -> PowerEffectRegistry:
    """Return the shared default registry (lazily created)"""
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


def apply_power(card: 'Card', owner: 'Player', opponent: 'Player', *,
                config: 'GameConfig | None' = None,
                registry: Optional[PowerEffectRegistry] = None) -> 'SideEffect | None':
    """
    Apply a played card's power

    Args:
        card: the card being played
        owner: player who played it
        opponent: the other player
        config: engine configuration (global config if omitted)
        registry: handler registry (default registry if omitted)

    Returns:
        The side effect the power triggers, or None
    """
    registry = registry or get_default_registry()
    return registry.apply(card, owner, opponent, config or get_config())
