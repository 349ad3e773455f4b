"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from unocore.config import Settings

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO against scripted opponents")


def _settings() -> Settings:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e))
    logging.basicConfig(level=settings.log_level)
    return settings


@app.command()
def play(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Your display name (UNO_PLAYER_NAME)"),
    opponents: Optional[int] = typer.Option(
        None,
        "--opponents",
        "-o",
        min=1,
        max=3,
        help="Number of automated seats, 1-3 (UNO_AUTOMATED_SEATS)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (UNO_SEED)"),
) -> None:
    """Play a single match in the terminal."""
    from unocore.agents.human_agent import HumanAgent
    from unocore.orchestration.game_runner import GameRunner

    settings = _settings()
    player_name = name or settings.player_name

    def show(state) -> None:
        typer.echo(f"> {state.narrative}")

    def refuse(error) -> None:
        typer.echo(f"Not allowed: {error.message}")

    runner = GameRunner(
        HumanAgent(name=player_name),
        automated_seats=opponents or settings.automated_seats,
        player_name=player_name,
        seed=seed if seed is not None else settings.seed,
        max_turns=settings.max_turns,
        on_transition=show,
        on_reject=refuse,
    )
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None (unfinished)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    opponents: Optional[int] = typer.Option(
        None,
        "--opponents",
        "-o",
        min=1,
        max=3,
        help="Number of automated seats, 1-3 (UNO_AUTOMATED_SEATS)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed (UNO_SEED)"),
) -> None:
    """Run headless matches with a scripted agent in the human seat."""
    from unocore.orchestration.tournament import run_tournament

    settings = _settings()
    wins = run_tournament(
        automated_seats=opponents or settings.automated_seats,
        num_games=games,
        seed=seed if seed is not None else settings.seed,
        max_turns=settings.max_turns,
    )
    typer.echo("Tournament results:")
    for seat_name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {seat_name}: {w} wins")


if __name__ == "__main__":
    app()
