"""Tests for jitsu.round_resolver."""

import pytest

from jitsu.card import Card, LowerValueWinsTieNextRound, RestrictElementNextRound
from jitsu.enums import Color, Element
from jitsu.player import Player
from jitsu.round_resolver import (
    HIGHER_WINS,
    LOWER_WINS,
    ValuePolicy,
    determine_winner,
    policy_for,
    score_round,
)

BEATING_PAIRS = [
    (Element.FIRE, Element.SNOW),
    (Element.SNOW, Element.WATER),
    (Element.WATER, Element.FIRE),
]


@pytest.fixture
def players():
    return Player("P1"), Player("P2")


class TestElementalPrecedence:
    @pytest.mark.parametrize("winner_el,loser_el", BEATING_PAIRS)
    def test_beating_element_wins_regardless_of_value(self, players, winner_el, loser_el):
        p1, p2 = players
        card1 = Card(winner_el, 1, Color.RED)
        card2 = Card(loser_el, 9, Color.BLUE)
        assert determine_winner(p1, card1, p2, card2) is p1

    @pytest.mark.parametrize("winner_el,loser_el", BEATING_PAIRS)
    def test_reverse_pairing_goes_to_player2(self, players, winner_el, loser_el):
        p1, p2 = players
        card1 = Card(loser_el, 12, Color.RED)
        card2 = Card(winner_el, 2, Color.BLUE)
        assert determine_winner(p1, card1, p2, card2) is p2

    def test_fire_one_beats_snow_nine(self, players):
        p1, p2 = players
        assert determine_winner(
            p1, Card(Element.FIRE, 1, Color.RED), p2, Card(Element.SNOW, 9, Color.BLUE)
        ) is p1


class TestNumericComparison:
    @pytest.mark.parametrize("element", list(Element))
    def test_equal_elements_equal_values_draw(self, players, element):
        p1, p2 = players
        assert determine_winner(
            p1, Card(element, 5, Color.RED), p2, Card(element, 5, Color.BLUE)
        ) is None

    @pytest.mark.parametrize("element", list(Element))
    def test_higher_value_wins(self, players, element):
        p1, p2 = players
        assert determine_winner(
            p1, Card(element, 8, Color.RED), p2, Card(element, 3, Color.BLUE)
        ) is p1
        assert determine_winner(
            p1, Card(element, 3, Color.RED), p2, Card(element, 8, Color.BLUE)
        ) is p2

    def test_players_with_same_name_are_told_apart(self):
        p1, p2 = Player("Twin"), Player("Twin")
        winner = determine_winner(
            p1, Card(Element.FIRE, 2, Color.RED), p2, Card(Element.FIRE, 7, Color.BLUE)
        )
        assert winner is p2


class TestLowerValueWins:
    def test_lower_value_wins_on_element_tie(self, players):
        p1, p2 = players
        effect = LowerValueWinsTieNextRound()
        assert determine_winner(
            p1, Card(Element.WATER, 2, Color.RED), p2, Card(Element.WATER, 8, Color.BLUE),
            side_effect=effect,
        ) is p1

    def test_equal_values_still_draw(self, players):
        p1, p2 = players
        assert determine_winner(
            p1, Card(Element.WATER, 4, Color.RED), p2, Card(Element.WATER, 4, Color.BLUE),
            side_effect=LowerValueWinsTieNextRound(),
        ) is None

    def test_elements_still_take_precedence(self, players):
        p1, p2 = players
        assert determine_winner(
            p1, Card(Element.FIRE, 9, Color.RED), p2, Card(Element.SNOW, 1, Color.BLUE),
            side_effect=LowerValueWinsTieNextRound(),
        ) is p1

    def test_policy_for(self):
        assert policy_for(None) is HIGHER_WINS
        assert policy_for(LowerValueWinsTieNextRound()) is LOWER_WINS
        assert policy_for(RestrictElementNextRound(Element.FIRE)) is HIGHER_WINS

    def test_custom_policy(self, players):
        p1, p2 = players
        # compare on value modulo 5: 7 -> 2, 4 -> 4
        modulo = ValuePolicy("mod5", lambda c: c.value % 5, lambda a, b: a - b)
        assert determine_winner(
            p1, Card(Element.SNOW, 7, Color.RED), p2, Card(Element.SNOW, 4, Color.BLUE),
            policy=modulo,
        ) is p2


class TestRestrictElement:
    def test_restricted_card_forfeits(self, players):
        p1, p2 = players
        effect = RestrictElementNextRound(Element.FIRE)
        # fire would beat snow, but fire is restricted
        assert determine_winner(
            p1, Card(Element.FIRE, 9, Color.RED), p2, Card(Element.SNOW, 1, Color.BLUE),
            side_effect=effect,
        ) is p2

    def test_player2_forfeits(self, players):
        p1, p2 = players
        effect = RestrictElementNextRound(Element.WATER)
        assert determine_winner(
            p1, Card(Element.SNOW, 1, Color.RED), p2, Card(Element.WATER, 9, Color.BLUE),
            side_effect=effect,
        ) is p1

    def test_both_restricted_draw(self, players):
        p1, p2 = players
        effect = RestrictElementNextRound(Element.SNOW)
        assert determine_winner(
            p1, Card(Element.SNOW, 9, Color.RED), p2, Card(Element.SNOW, 1, Color.BLUE),
            side_effect=effect,
        ) is None

    def test_unrestricted_cards_resolve_normally(self, players):
        p1, p2 = players
        effect = RestrictElementNextRound(Element.SNOW)
        assert determine_winner(
            p1, Card(Element.FIRE, 1, Color.RED), p2, Card(Element.WATER, 1, Color.BLUE),
            side_effect=effect,
        ) is p2


class TestScoreRound:
    def test_winner_gets_own_card(self, players):
        p1, p2 = players
        card1 = Card(Element.FIRE, 5, Color.RED)
        card2 = Card(Element.SNOW, 3, Color.BLUE)
        assert score_round(p1, p1, card1, p2, card2) == card1
        assert p1.score == [card1]
        assert p2.score == []

    def test_player2_winner(self, players):
        p1, p2 = players
        card1 = Card(Element.FIRE, 5, Color.RED)
        card2 = Card(Element.WATER, 3, Color.BLUE)
        score_round(p2, p1, card1, p2, card2)
        assert p2.score == [card2]

    def test_draw_scores_nothing(self, players):
        p1, p2 = players
        card = Card(Element.FIRE, 5, Color.RED)
        assert score_round(None, p1, card, p2, card) is None
        assert p1.score == [] and p2.score == []
