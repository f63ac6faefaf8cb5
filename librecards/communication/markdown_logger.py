"""Markdown journal of the rounds played in a game."""

from datetime import datetime
from pathlib import Path
from typing import Optional


class MarkdownLogger:
    """Writes rounds, templates and submissions to a markdown file."""

    def __init__(self, base_dir: str = "games"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for game journals.
        """
        self.base_dir = Path(base_dir)
        self.game_dir: Optional[Path] = None
        self.game_id: Optional[str] = None
        self.round_number = 0

    @property
    def journal_file(self) -> Path:
        if self.game_dir is None:
            raise RuntimeError("start_game() must be called before logging")
        return self.game_dir / "rounds.md"

    def start_game(self, game_id: Optional[str] = None) -> Path:
        """Start a journal for a new game.

        Args:
            game_id: Optional game identifier. If not provided, uses timestamp.

        Returns:
            Path to the game directory.
        """
        if game_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
            game_id = f"game_{timestamp}"

        self.game_id = game_id
        self.game_dir = self.base_dir / game_id
        self.game_dir.mkdir(parents=True, exist_ok=True)
        self.round_number = 0

        with open(self.journal_file, "w") as f:
            f.write(f"# LibreCards Game - {self.game_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("---\n\n")

        return self.game_dir

    def log_round_start(self, template: str, judge: str, players: list[str]) -> None:
        """Log the start of a round.

        Args:
            template: Content of the round's template card.
            judge: Name of the judge.
            players: Names of everyone in the round, judge included.
        """
        self.round_number += 1
        with open(self.journal_file, "a") as f:
            f.write(f"## Round {self.round_number}\n\n")
            f.write(f"> {template}\n\n")
            f.write(f"Judge: **{judge}**\n\n")
            f.write(f"Players: {', '.join(players)}\n\n")
            f.write("| Player | Cards |\n")
            f.write("|--------|-------|\n")

    def log_play(self, player: str, cards: list[str]) -> None:
        with open(self.journal_file, "a") as f:
            f.write(f"| {player} | {' / '.join(cards)} |\n")

    def log_round_end(self) -> None:
        with open(self.journal_file, "a") as f:
            f.write("\n*Round closed by the judge.*\n\n")

    def log_game_end(self, rounds_played: int) -> None:
        with open(self.journal_file, "a") as f:
            f.write("---\n\n")
            f.write("# GAME OVER\n\n")
            f.write(f"Rounds played: {rounds_played}\n")
            f.write(f"\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
