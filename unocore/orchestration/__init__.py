"""Game orchestration."""

from unocore.orchestration.game_runner import GameResult, GameRunner
from unocore.orchestration.tournament import run_tournament

__all__ = ["GameResult", "GameRunner", "run_tournament"]
