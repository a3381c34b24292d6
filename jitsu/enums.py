"""Element, color and game-status enumerations.

Kept in a standalone module so card.py, round_resolver.py and engine.py can
all import them without going through each other.
"""

from __future__ import annotations

from enum import Enum


class Element(Enum):
    """Card element"""

    FIRE = "fire"
    WATER = "water"
    SNOW = "snow"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def beats(self, other: Element) -> bool:
        """Whether this element wins outright against ``other``"""
        return BEATS[self] is other


# Fire melts snow, snow freezes water, water puts out fire.
BEATS: dict[Element, Element] = {
    Element.FIRE: Element.SNOW,
    Element.SNOW: Element.WATER,
    Element.WATER: Element.FIRE,
}

if set(BEATS) != set(Element) or set(BEATS.values()) != set(Element):
    raise RuntimeError("BEATS must map every element to exactly one victim")


class Color(Enum):
    """Card color"""

    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class GameStatus(Enum):
    """Game status"""

    IN_PROGRESS = "in_progress"
    ENDED = "ended"


class OverflowPolicy(Enum):
    """What happens when a score change pushes a card value out of range"""

    CLAMP = "clamp"  # pin to [0, max]
    STRICT = "strict"  # raise CardValueError
