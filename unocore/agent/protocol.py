"""Agent protocol - interface that drives the human (non-automated) seat."""

from typing import Protocol

from unocore.engine import Intent, PlayerView


class AgentProtocol(Protocol):
    """Interface for agents sitting in the human seat."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_intent(self, player_view: PlayerView, seat_id: str) -> Intent:
        """Choose the next intent for the seat.

        Args:
            player_view: Filtered view with only this seat's hand and public info.
            seat_id: This agent's seat ID.

        Returns:
            PlayCard, DrawCard, DeclareLowCard or ChallengeLowCard. Rejected intents
            leave the game unchanged and the agent is asked again.
        """
        ...
