"""Main entry point for LibreCards."""

import asyncio
import logging
import os
import random
import sys
import uuid

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .agents.bot import BotPlayer
from .cards.deck import Deck
from .communication.markdown_logger import MarkdownLogger
from .config import GameConfig, load_config
from .core.entities import Player
from .core.errors import GameError
from .engine.session import GameSession
from .llm.openrouter import OpenRouterClient


# Load environment variables
load_dotenv()

console = Console()


def setup_logging(level: str = "WARNING") -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def display_welcome():
    """Display welcome message."""
    console.print(Panel.fit(
        "[bold magenta]LIBRECARDS[/bold magenta]\n"
        "[dim]A party game for horrible bots[/dim]",
        border_style="magenta",
    ))
    console.print()


def display_round(round_number: int, session: GameSession, bots: dict[uuid.UUID, BotPlayer]):
    """Display the template and the judge of a round."""
    judge = bots[session.judge_player_id]
    console.print(Panel(
        f"[bold]{session.template_card.content}[/bold]\n"
        f"[dim]Judge: {judge.name}[/dim]",
        title=f"Round {round_number}",
        border_style="cyan",
    ))


def display_submissions(session: GameSession, bots: dict[uuid.UUID, BotPlayer]):
    """Display what everyone played."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Player", style="cyan")
    table.add_column("Cards", style="green")

    for player_id, cards in session.submissions.items():
        table.add_row(bots[player_id].name, " / ".join(card.content for card in cards))

    console.print(table)
    console.print()


async def play_round(
    round_number: int,
    session: GameSession,
    owner: Player,
    bots: dict[uuid.UUID, BotPlayer],
) -> None:
    """Start a round, let every bot but the judge play, then close it."""
    session.start_game(owner.id)
    display_round(round_number, session, bots)
    judge_id = session.judge_player_id
    template = session.template_card

    for bot in bots.values():
        if bot.player.id == judge_id:
            continue
        card_ids = await bot.choose_cards(template, bots[judge_id].name)
        session.play_cards(bot.player.id, card_ids)

    display_submissions(session, bots)
    session.finish_round(judge_id)


async def main():
    """Main entry point."""
    setup_logging(os.getenv("LIBRECARDS_LOG_LEVEL", "WARNING"))
    display_welcome()

    # Load configuration
    config_path = sys.argv[1] if len(sys.argv) > 1 else "config/game.yaml"
    console.print(f"[dim]Loading config from: {config_path}[/dim]")
    try:
        config_data = load_config(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    game_config = GameConfig.from_dict(config_data.get("game", {}))

    # Bots play randomly without an API key
    api_key = os.getenv("OPENROUTER_API_KEY")
    llm_client = OpenRouterClient(api_key=api_key) if api_key else None
    if llm_client is None:
        console.print("[yellow]OPENROUTER_API_KEY not set, bots will play random cards.[/yellow]")

    rng = random.Random(game_config.seed)
    deck = Deck.from_yaml(game_config.deck_path, rng=rng)
    journal = MarkdownLogger(base_dir="games")
    journal.start_game()

    players = [Player(uuid.uuid4(), name=p["name"]) for p in config_data.get("players", [])]
    if not players:
        console.print("[red]No players configured.[/red]")
        sys.exit(1)

    owner = players[0]
    session = GameSession.create(game_config, owner, deck, journal=journal)
    for player in players[1:]:
        session.join(player)

    bots = {
        player.id: BotPlayer(
            player=player,
            model=pconfig.get("model", "anthropic/claude-sonnet-4"),
            llm_client=llm_client,
            rng=rng,
        )
        for player, pconfig in zip(players, config_data["players"])
    }
    console.print(f"[cyan]{len(bots)} players at the table, {owner.name} owns the lobby.[/cyan]")
    console.print()

    rounds_played = 0
    try:
        for round_number in range(1, game_config.rounds + 1):
            await play_round(round_number, session, owner, bots)
            rounds_played += 1
    except GameError as e:
        console.print(f"\n[red]Game stopped: {e}[/red]")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted by user.[/yellow]")
        sys.exit(0)
    finally:
        journal.log_game_end(rounds_played)

    console.print(f"[dim]Game journal saved to: {journal.game_dir}[/dim]")


def run():
    """Entry point for the CLI."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
