"""Player model
A player holds a hand of playable cards and a scored pile of cards won.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .card import Card
from .enums import Color, Element


@dataclass
class Player:
    """
    Player

    Attributes:
        name: player identifier
        hand: cards available to play, in hand order
        score: cards won in rounds, in win order
    """

    name: str
    hand: list[Card] = field(default_factory=list)
    score: list[Card] = field(default_factory=list)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def score_size(self) -> int:
        return len(self.score)

    def draw_cards(self, cards: list[Card]) -> None:
        """Add cards to the end of the hand"""
        self.hand.extend(cards)

    def remove_played(self, card: Card) -> bool:
        """Take a played card out of the hand

        Returns:
            True if an equal card was found and removed
        """
        return self._discard_first(lambda c: c == card) is not None

    def discard_first_by_element(self, element: Element) -> Card | None:
        """Discard the first hand card of ``element`` (None if there is none)"""
        return self._discard_first(lambda c: c.element is element)

    def discard_first_by_color(self, color: Color) -> Card | None:
        """Discard the first hand card of ``color`` (None if there is none)"""
        return self._discard_first(lambda c: c.color is color)

    def convert_hand_elements(self, source: Element, target: Element) -> int:
        """Turn every ``source`` card in hand into ``target``

        Returns:
            Number of cards converted
        """
        converted = 0
        for i, card in enumerate(self.hand):
            if card.element is source:
                self.hand[i] = card.with_element(target)
                converted += 1
        return converted

    def add_score(self, card: Card) -> None:
        """Append a won card to the scored pile"""
        self.score.append(card)

    def _discard_first(self, predicate: Callable[[Card], bool]) -> Card | None:
        for i, card in enumerate(self.hand):
            if predicate(card):
                return self.hand.pop(i)
        return None

    def __str__(self) -> str:
        return self.name
