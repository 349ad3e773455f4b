"""Simulate a match with the scripted agent in the human seat, printing every event."""

from unocore.agents import ScriptedAgent
from unocore.orchestration.game_runner import GameRunner


def main():
    runner = GameRunner(
        ScriptedAgent(name="Bot0"),
        automated_seats=3,
        player_name="Bot0",
        seed=42,
        on_transition=lambda state: print(f"> {state.narrative}"),
    )
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Cards accounted for: {result.final_state.card_count()}")

if __name__ == "__main__":
    main()
