"""
Power effect base class
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from ..card import SideEffect
    from ..config import GameConfig
    from ..player import Player

P = TypeVar("P")


class PowerEffect(ABC, Generic[P]):
    """
    Abstract base class for power handlers

    Each power type (ChangeScore, ChangeElement, ...) has one PowerEffect
    subclass; PowerEffectRegistry routes a played card's power to it by type.
    """

    @abstractmethod
    def apply(self, power: P, owner: 'Player', opponent: 'Player',
              config: 'GameConfig') -> 'SideEffect | None':
        """
        Apply the power

        Args:
            power: the power carried by the played card
            owner: player who played the card
            opponent: the other player
            config: engine configuration (overflow policy, value range)

        Returns:
            A side effect to install for the next round, or None
        """
