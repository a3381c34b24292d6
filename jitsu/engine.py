"""
Game engine
Owns the two players and the cross-round side effect, and sequences one
round at a time:

    played cards leave the hands
    -> powers (player1's card, then player2's)
    -> round winner
    -> scoring
    -> end condition
    -> the round's active side effect expires

A side effect triggered during round N is stored on the state and becomes
the active effect of round N+1 only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .card import Card, SideEffect
from .config import GameConfig, get_config
from .effects.registry import PowerEffectRegistry, apply_power, get_default_registry
from .enums import GameStatus
from .events import EventBus, EventType
from .exceptions import ConfigurationError, raise_if_game_finished
from .player import Player
from .round_resolver import determine_winner, score_round
from .status_fsm import GameStatusFSM
from .win_checker import WinConditionChecker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RoundOutcome:
    """
    Result of one round

    Attributes:
        round_number: 1-based round counter
        round_winner: player who won the round, None on a draw
        game_winner: player who has won the game, if any
        side_effect: side effect that will be active during the next round
        scored_card: card added to the round winner's pile
        contested: both players held a winning combination this round
    """
    round_number: int
    round_winner: Optional[Player]
    game_winner: Optional[Player]
    side_effect: Optional[SideEffect]
    scored_card: Optional[Card] = None
    contested: bool = False

    @property
    def is_draw(self) -> bool:
        return self.round_winner is None

    @property
    def game_over(self) -> bool:
        return self.game_winner is not None


@dataclass(frozen=True, slots=True)
class _RoundSnapshot:
    """Player and round state put back when a round fails part-way"""
    hands: tuple[list[Card], list[Card]]
    scores: tuple[list[Card], list[Card]]
    side_effect: Optional[SideEffect]
    round_number: int

    @classmethod
    def capture(cls, state: GameState) -> _RoundSnapshot:
        p1, p2 = state.player1, state.player2
        return cls(
            hands=(list(p1.hand), list(p2.hand)),
            scores=(list(p1.score), list(p2.score)),
            side_effect=state.side_effect,
            round_number=state.round_number,
        )

    def restore(self, state: GameState) -> None:
        for player, hand, score in zip(state.players, self.hands, self.scores):
            player.hand[:] = hand
            player.score[:] = score
        state.side_effect = self.side_effect
        state.active_side_effect = None
        state.round_number = self.round_number


@dataclass
class GameState:
    """
    Game state

    Attributes:
        player1: first player (checked first by the end condition)
        player2: second player
        side_effect: effect stored for the next round
        active_side_effect: effect in force while a round is resolving;
            always None between rounds
        winner: game winner once the game has ended
        round_number: number of rounds played
    """
    player1: Player
    player2: Player
    side_effect: Optional[SideEffect] = None
    active_side_effect: Optional[SideEffect] = None
    winner: Optional[Player] = None
    round_number: int = 0
    config: GameConfig = field(default_factory=get_config)
    event_bus: EventBus = field(default_factory=EventBus)
    registry: PowerEffectRegistry = field(default_factory=get_default_registry)
    fsm: GameStatusFSM = field(default_factory=GameStatusFSM)

    @property
    def status(self) -> GameStatus:
        return self.fsm.current

    @property
    def is_over(self) -> bool:
        return self.fsm.is_over

    @property
    def players(self) -> tuple[Player, Player]:
        return (self.player1, self.player2)

    def opponent_of(self, player: Player) -> Player:
        return self.player2 if player is self.player1 else self.player1

    def play_round(self, card1: Card, card2: Card) -> RoundOutcome:
        """Shortcut for ``play_round(self, card1, card2)``"""
        return play_round(self, card1, card2)


def new_game(
    name1: str,
    name2: str,
    *,
    config: GameConfig | None = None,
    event_bus: EventBus | None = None,
) -> GameState:
    """
    Create a game with two empty-handed players

    Args:
        name1: first player's name
        name2: second player's name
        config: engine configuration (global config if omitted)
        event_bus: event bus to publish on (a fresh one if omitted)

    Raises:
        ConfigurationError: the configuration does not validate
    """
    config = config or get_config()
    errors = config.validate()
    if errors:
        raise ConfigurationError("; ".join(errors))

    state = GameState(
        player1=Player(name=name1),
        player2=Player(name=name2),
        config=config,
        event_bus=event_bus or EventBus(max_history=config.event_history),
    )
    logger.info("New game: %s vs %s", name1, name2)
    state.event_bus.emit(EventType.GAME_START, players=state.players)
    return state


def play_round(state: GameState, card1: Card, card2: Card) -> RoundOutcome:
    """
    Resolve one round

    Args:
        state: game state (mutated)
        card1: card played by player1
        card2: card played by player2

    Returns:
        RoundOutcome: what happened this round

    Raises:
        GameAlreadyFinishedError: the game has ended and the config does not
            allow further rounds
        CardValueError: a score change overflowed under the strict policy;
            hands, scored piles, the stored side effect and the round counter
            are left as they were before the call
    """
    if not state.config.allow_rounds_after_end:
        raise_if_game_finished(
            state.status.value, state.winner.name if state.winner else None
        )

    bus = state.event_bus
    p1, p2 = state.player1, state.player2

    snapshot = _RoundSnapshot.capture(state)
    state.round_number += 1
    state.active_side_effect = state.side_effect
    state.side_effect = None
    bus.emit(EventType.ROUND_START, round_number=state.round_number,
             side_effect=state.active_side_effect)

    try:
        # played cards are out of the hand before any power looks at it
        for player, card in ((p1, card1), (p2, card2)):
            player.remove_played(card)
            bus.emit(EventType.CARD_PLAYED, round_number=state.round_number,
                     player=player, card=card)

        triggered: Optional[SideEffect] = None
        for owner, card in ((p1, card1), (p2, card2)):
            effect = apply_power(card, owner, state.opponent_of(owner),
                                 config=state.config, registry=state.registry)
            if card.has_power:
                bus.emit(EventType.POWER_APPLIED, round_number=state.round_number,
                         player=owner, card=card, power=card.power)
            if effect is not None:
                # last write wins
                triggered = effect

        round_winner = determine_winner(p1, card1, p2, card2,
                                        side_effect=state.active_side_effect)
        scored = score_round(round_winner, p1, card1, p2, card2)
        if round_winner is None:
            logger.info("Round %d: %s vs %s is a draw", state.round_number, card1, card2)
            bus.emit(EventType.ROUND_DRAWN, round_number=state.round_number,
                     cards=(card1, card2))
        else:
            logger.info("Round %d: %s wins with %s", state.round_number, round_winner.name, scored)
            bus.emit(EventType.ROUND_WON, round_number=state.round_number,
                     player=round_winner, card=scored)

        info = WinConditionChecker(state).check_game_over()
        if info.is_over and state.winner is None:
            state.winner = info.winner
            state.fsm.transition(GameStatus.ENDED)
            logger.info("%s wins the game after %d rounds", info.winner.name, state.round_number)
            bus.emit(EventType.GAME_END, round_number=state.round_number,
                     player=info.winner, combination=info.combination,
                     contested=info.contested)
    except Exception:
        snapshot.restore(state)
        logger.warning("Round %d rolled back", snapshot.round_number + 1, exc_info=True)
        raise
    finally:
        expired = state.active_side_effect
        state.active_side_effect = None
        if expired is not None:
            bus.emit(EventType.SIDE_EFFECT_EXPIRED, round_number=state.round_number,
                     side_effect=expired)

    state.side_effect = triggered
    if triggered is not None:
        logger.debug("Side effect for round %d: %s", state.round_number + 1, triggered)
        bus.emit(EventType.SIDE_EFFECT_TRIGGERED, round_number=state.round_number,
                 side_effect=triggered)

    bus.emit(EventType.ROUND_END, round_number=state.round_number)
    return RoundOutcome(
        round_number=state.round_number,
        round_winner=round_winner,
        game_winner=state.winner,
        side_effect=state.side_effect,
        scored_card=scored,
        contested=info.contested,
    )
