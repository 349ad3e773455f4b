"""Tournament - run many headless matches and aggregate results."""

import random
from collections import defaultdict

from unocore.agents.scripted_agent import ScriptedAgent
from unocore.orchestration.game_runner import GameRunner


def run_tournament(
    automated_seats: int = 3,
    num_games: int = 100,
    seed: int | None = None,
    max_turns: int = 1000,
) -> dict[str, int]:
    """Play ``num_games`` matches with a ScriptedAgent in the human seat.

    Returns:
        Dict mapping seat name to number of wins.
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(
            ScriptedAgent(),
            automated_seats=automated_seats,
            player_name="Scripted",
            seed=rng.randint(0, 2**31 - 1),
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
