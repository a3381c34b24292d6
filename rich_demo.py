"""Scripted Card-Jitsu match narrated with rich.

The engine only reports structured events; everything printed here is done
by event-bus subscribers.

Usage:
    python rich_demo.py
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jitsu import (
    Card, ChangeElement, Color, DiscardOpponentCardByColor, Element, EventType,
    GameEvent, GameState, LowerValueWinsTieNextRound, TriggerSideEffect, new_game,
)
from logging_config import setup_logging

ELEMENT_STYLES = {
    Element.FIRE: "bold red",
    Element.WATER: "bold blue",
    Element.SNOW: "bold white",
}

HAND_1: list[Card] = [
    Card(Element.FIRE, 5, Color.RED),
    Card(Element.SNOW, 4, Color.YELLOW, TriggerSideEffect(LowerValueWinsTieNextRound())),
    Card(Element.WATER, 2, Color.BLUE),
    Card(Element.SNOW, 7, Color.YELLOW, ChangeElement(Element.WATER, Element.FIRE)),
    Card(Element.SNOW, 3, Color.GREEN),
]

HAND_2: list[Card] = [
    Card(Element.WATER, 3, Color.BLUE),
    Card(Element.SNOW, 6, Color.GREEN),
    Card(Element.WATER, 8, Color.ORANGE),
    Card(Element.WATER, 9, Color.PURPLE, DiscardOpponentCardByColor(Color.RED)),
    Card(Element.WATER, 10, Color.RED),
]


def card_text(card: Card) -> Text:
    return Text(card.describe(), style=ELEMENT_STYLES[card.element])


def narrate(state: GameState, console: Console) -> None:
    """Subscribe console narration to the game's event bus"""
    bus = state.event_bus

    def on_round_start(event: GameEvent) -> None:
        console.rule(f"Round {event.round_number}")
        effect = event.data.get("side_effect")
        if effect is not None:
            console.print(f"[dim]Active side effect: {effect.describe()}[/dim]")

    def on_card_played(event: GameEvent) -> None:
        line = Text(f"{event.player.name} played ")
        line.append_text(card_text(event.card))
        console.print(line)

    def on_round_won(event: GameEvent) -> None:
        console.print(f"[bold green]{event.player.name} wins the round![/bold green]")

    def on_round_drawn(event: GameEvent) -> None:
        console.print("[yellow]The round is a draw.[/yellow]")

    def on_side_effect(event: GameEvent) -> None:
        console.print(f"[magenta]Next round: {event.data['side_effect'].describe()}[/magenta]")

    def on_game_end(event: GameEvent) -> None:
        combo = event.data.get("combination") or ()
        body = Text(f"{event.player.name} wins the game!\n", style="bold")
        for card in combo:
            body.append_text(card_text(card))
            body.append("\n")
        console.print(Panel(body, title="Game over", border_style="green"))

    bus.subscribe(EventType.ROUND_START, on_round_start)
    bus.subscribe(EventType.CARD_PLAYED, on_card_played)
    bus.subscribe(EventType.ROUND_WON, on_round_won)
    bus.subscribe(EventType.ROUND_DRAWN, on_round_drawn)
    bus.subscribe(EventType.SIDE_EFFECT_TRIGGERED, on_side_effect)
    bus.subscribe(EventType.GAME_END, on_game_end)


def score_table(state: GameState) -> Table:
    table = Table(title="Scored cards", expand=True, border_style="blue")
    table.add_column("Player", style="cyan", no_wrap=True)
    table.add_column("Cards")
    for player in state.players:
        cards = Text(", ").join(card_text(c) for c in player.score) if player.score else Text("-")
        table.add_row(player.name, cards)
    return table


def run_demo(console: Console | None = None) -> GameState:
    """Play the scripted rounds until the game ends"""
    console = console or Console(highlight=False)
    state = new_game("Player 1", "Player 2")
    state.player1.draw_cards(list(HAND_1))
    state.player2.draw_cards(list(HAND_2))
    narrate(state, console)

    # each player plays the first card left in hand
    while not state.is_over and state.player1.hand and state.player2.hand:
        state.play_round(state.player1.hand[0], state.player2.hand[0])

    console.print(score_table(state))
    return state


def main() -> None:
    setup_logging(enable_file=False, enable_console=True)
    run_demo()


if __name__ == "__main__":
    main()
