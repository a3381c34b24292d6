"""Card system
Defines cards, card powers and the one-round side effects a power can
trigger.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from .enums import Color, Element, OverflowPolicy
from .exceptions import CardValueError

MAX_CARD_VALUE = 255
"""Card values are unsigned 8-bit quantities."""


# ==================== Side effects ====================


@dataclass(frozen=True, slots=True)
class RestrictElementNextRound:
    """Cards of ``element`` forfeit the next round"""

    element: Element

    def describe(self) -> str:
        return f"{self.element.label} is restricted next round"


@dataclass(frozen=True, slots=True)
class LowerValueWinsTieNextRound:
    """On an element tie next round, the lower value wins"""

    def describe(self) -> str:
        return "lower value wins ties next round"


SideEffect = Union[RestrictElementNextRound, LowerValueWinsTieNextRound]


# ==================== Powers ====================


@dataclass(frozen=True, slots=True)
class NoPower:
    """Vanilla card"""

    def describe(self) -> str:
        return "no power"


@dataclass(frozen=True, slots=True)
class ChangeScore:
    """Add ``delta`` to the value of every card in the owner's scored pile"""

    delta: int

    def describe(self) -> str:
        return f"scored cards {self.delta:+d}"


@dataclass(frozen=True, slots=True)
class ChangeElement:
    """Turn every ``source`` card in the opponent's hand into ``target``"""

    source: Element
    target: Element

    def describe(self) -> str:
        return f"opponent {self.source.label} -> {self.target.label}"


@dataclass(frozen=True, slots=True)
class DiscardOpponentCardByElement:
    """Discard the opponent's first hand card of ``element``"""

    element: Element

    def describe(self) -> str:
        return f"discard opponent {self.element.label}"


@dataclass(frozen=True, slots=True)
class DiscardOpponentCardByColor:
    """Discard the opponent's first hand card of ``color``"""

    color: Color

    def describe(self) -> str:
        return f"discard opponent {self.color.label}"


@dataclass(frozen=True, slots=True)
class TriggerSideEffect:
    """Install ``effect`` for the next round"""

    effect: SideEffect

    def describe(self) -> str:
        return self.effect.describe()


Power = Union[
    NoPower,
    ChangeScore,
    ChangeElement,
    DiscardOpponentCardByElement,
    DiscardOpponentCardByColor,
    TriggerSideEffect,
]

POWER_TYPES: tuple[type, ...] = (
    NoPower,
    ChangeScore,
    ChangeElement,
    DiscardOpponentCardByElement,
    DiscardOpponentCardByColor,
    TriggerSideEffect,
)


# ==================== Card ====================


@dataclass(frozen=True, slots=True)
class Card:
    """Card

    Cards compare structurally: two cards with identical fields are the
    same card.

    Attributes:
        element: element used by the beats table
        value: numeric value, 0..MAX_CARD_VALUE
        color: color used by the end condition and colour discards
        power: power applied when the card is played
    """

    element: Element
    value: int
    color: Color
    power: Power = field(default_factory=NoPower)

    def __post_init__(self):
        # accept enum values from plain data
        if isinstance(self.element, str):
            object.__setattr__(self, "element", Element(self.element))
        if isinstance(self.color, str):
            object.__setattr__(self, "color", Color(self.color))
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise CardValueError(f"Card value must be an int, got {self.value!r}")
        if not 0 <= self.value <= MAX_CARD_VALUE:
            raise CardValueError(value=self.value, max_value=MAX_CARD_VALUE)

    @property
    def has_power(self) -> bool:
        return not isinstance(self.power, NoPower)

    def with_value(self, value: int) -> Card:
        """Copy of this card with a new value"""
        return replace(self, value=value)

    def with_element(self, element: Element) -> Card:
        """Copy of this card with a new element"""
        return replace(self, element=element)

    def describe(self) -> str:
        """Short description, e.g. ``Fire 5 Red``"""
        text = f"{self.element.label} {self.value} {self.color.label}"
        if self.has_power:
            text += f" [{self.power.describe()}]"
        return text

    def __str__(self) -> str:
        return self.describe()


def adjust_value(
    value: int,
    delta: int,
    policy: OverflowPolicy = OverflowPolicy.CLAMP,
    max_value: int = MAX_CARD_VALUE,
) -> int:
    """Apply ``delta`` to a card value under an overflow policy

    Args:
        value: current value
        delta: signed change
        policy: CLAMP stops the result at the bound it crossed; STRICT raises
        max_value: upper bound of the value range

    Returns:
        The adjusted value

    Raises:
        CardValueError: the result is out of range under STRICT
    """
    result = value + delta
    if 0 <= result <= max_value:
        return result
    if policy is OverflowPolicy.STRICT:
        kind = "underflow" if result < 0 else "overflow"
        raise CardValueError(
            f"Card value {kind}: {value} {delta:+d}", value=result, max_value=max_value
        )
    if result < 0:
        return 0
    # a value already above max_value is never lowered by a positive delta
    return max(max_value, value) if delta > 0 else result
