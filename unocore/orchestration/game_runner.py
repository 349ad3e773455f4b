"""Single game runner."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unocore.engine import (
    AutomatedTurn,
    GameState,
    OpponentPolicy,
    Phase,
    PlayerView,
    Start,
    step,
)
from unocore.errors import EngineError

if TYPE_CHECKING:
    from unocore.agent.protocol import AgentProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    seat_names: tuple[str, ...]
    final_state: GameState


class GameRunner:
    """Runs a single UNO match to completion.

    The runner is the only caller of the engine, so intents are applied one at a
    time. Automated seats act through ``AutomatedTurn``; the human seat asks
    ``agent``.
    """

    def __init__(
        self,
        agent: "AgentProtocol",
        automated_seats: int = 3,
        player_name: str = "Player",
        seed: Optional[int] = None,
        max_turns: int = 1000,
        policy: Optional[OpponentPolicy] = None,
        on_transition: Optional[Callable[[GameState], None]] = None,
        on_reject: Optional[Callable[[EngineError], None]] = None,
    ):
        self._agent = agent
        self._automated_seats = automated_seats
        self._player_name = player_name
        self._rng = random.Random(seed)
        self._max_turns = max_turns
        self._policy = policy or OpponentPolicy()
        self._on_transition = on_transition
        self._on_reject = on_reject

    def run(self) -> GameResult:
        """Run the game and return the result."""
        start = step(
            GameState.pending(),
            Start(player_name=self._player_name, automated_seat_count=self._automated_seats),
            self._rng,
            self._policy,
        )
        if not start.accepted:
            raise ValueError(f"Cannot start game: {start.error}")
        state = start.state
        self._notify(state)
        num_turns = 0

        while state.phase is Phase.IN_PROGRESS and num_turns < self._max_turns:
            seat = state.active_seat()
            if seat.is_automated:
                intent = AutomatedTurn()
            else:
                intent = self._agent.choose_intent(PlayerView.from_state(state, seat.id), seat.id)

            transition = step(state, intent, self._rng, self._policy)
            num_turns += 1
            if not transition.accepted:
                logger.debug("%s rejected for %s: %s", type(intent).__name__, seat.name, transition.error)
                if self._on_reject is not None and not seat.is_automated:
                    self._on_reject(transition.error)
                continue
            state = transition.state
            self._notify(state)

        if state.phase is not Phase.CONCLUDED:
            logger.warning("Match stopped after %d turns without a winner", num_turns)

        winner = None
        if state.winner_seat_id is not None:
            winner = state.seats[state.seat_index(state.winner_seat_id)].name
        return GameResult(
            winner=winner,
            num_turns=num_turns,
            seat_names=tuple(s.name for s in state.seats),
            final_state=state,
        )

    def _notify(self, state: GameState) -> None:
        if self._on_transition is not None:
            self._on_transition(state)
