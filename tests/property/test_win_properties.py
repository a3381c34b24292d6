"""End-condition property tests (property-based).

Invariants:
1. the pile scan agrees with a brute-force triple loop
2. a repeated color never wins, whatever the elements
3. pile order does not matter
4. adding cards to a winning pile keeps it winning
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given, settings
from hypothesis import strategies as st

from jitsu.card import Card
from jitsu.enums import Color, Element
from jitsu.win_checker import has_winning_combination, is_winning_combination

elements = st.sampled_from(list(Element))
colors = st.sampled_from(list(Color))


@st.composite
def card_strategy(draw):
    return Card(draw(elements), draw(st.integers(min_value=0, max_value=12)), draw(colors))


piles = st.lists(card_strategy(), max_size=7)


def _brute_force(pile: list[Card]) -> bool:
    n = len(pile)
    for i in range(n):
        for j in range(i + 1, n):
            for k in range(j + 1, n):
                a, b, c = pile[i], pile[j], pile[k]
                colors_distinct = len({a.color, b.color, c.color}) == 3
                el = {a.element, b.element, c.element}
                if colors_distinct and len(el) in (1, 3):
                    return True
    return False


@given(pile=piles)
@settings(max_examples=300)
def test_scan_matches_brute_force(pile: list[Card]) -> None:
    assert has_winning_combination(pile) == _brute_force(pile)


@given(e1=elements, e2=elements, e3=elements, color=colors, other=colors)
@settings(max_examples=200)
def test_repeated_color_never_wins(e1, e2, e3, color, other) -> None:
    combo = [Card(e1, 1, color), Card(e2, 2, color), Card(e3, 3, other)]
    assert not is_winning_combination(combo)


@given(pile=piles, data=st.data())
@settings(max_examples=200)
def test_order_independent(pile: list[Card], data) -> None:
    shuffled = data.draw(st.permutations(pile))
    assert has_winning_combination(pile) == has_winning_combination(shuffled)


@given(pile=piles, extra=piles)
@settings(max_examples=200)
def test_winning_is_monotonic(pile: list[Card], extra: list[Card]) -> None:
    if has_winning_combination(pile):
        assert has_winning_combination(pile + extra)
