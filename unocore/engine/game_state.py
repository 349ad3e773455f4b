"""Game state for UNO."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, FrozenSet, List, Optional, Tuple

from unocore.engine.card import Card, Color
from unocore.errors import InvariantViolation


class Phase(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    CONCLUDED = "concluded"


class Direction(IntEnum):
    """Seat step per turn."""

    FORWARD = 1
    BACKWARD = -1

    def flipped(self) -> "Direction":
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


class EffectTag(str, Enum):
    """Machine-readable cue for the effect(s) of the latest transition."""

    REVERSE = "reverse"
    SKIP = "skip"
    DRAW_TWO = "draw2"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild4"
    WIN = "win"
    SHUFFLE = "shuffle"
    UNO = "uno"
    CAUGHT = "caught"


@dataclass(frozen=True)
class Seat:
    """One participant slot. ``hand`` keeps the order cards were received in."""

    id: str
    name: str
    is_automated: bool
    hand: Tuple[Card, ...] = ()
    has_declared_low_card: bool = False

    def find_card(self, card_id: str) -> Optional[Card]:
        return next((c for c in self.hand if c.id == card_id), None)


@dataclass(frozen=True)
class GameState:
    """Immutable UNO game state. Every transition builds a new one."""

    seats: Tuple[Seat, ...]
    active_seat_index: int
    deck: Tuple[Card, ...]  # top is last
    discard: Tuple[Card, ...]  # top is last
    ambient_color: Color
    direction: Direction
    phase: Phase
    winner_seat_id: Optional[str] = None
    narrative: str = ""
    effect_tags: FrozenSet[EffectTag] = frozenset()
    history: Tuple[str, ...] = field(default_factory=tuple)  # Log of events

    @classmethod
    def pending(cls) -> "GameState":
        """Empty state waiting for a Start intent."""
        return cls(
            seats=(),
            active_seat_index=0,
            deck=(),
            discard=(),
            ambient_color=Color.RED,
            direction=Direction.FORWARD,
            phase=Phase.PENDING,
        )

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard[-1] if self.discard else None

    def active_seat(self) -> Seat:
        return self.seats[self.active_seat_index]

    def seat_index(self, seat_id: str) -> Optional[int]:
        return next((i for i, s in enumerate(self.seats) if s.id == seat_id), None)

    def card_count(self) -> int:
        """Cards across deck, discard and all hands."""
        return len(self.deck) + len(self.discard) + sum(len(s.hand) for s in self.seats)


def check_invariants(state: GameState) -> None:
    """Raise InvariantViolation if ``state`` is malformed."""
    if state.phase is Phase.PENDING:
        return
    if not 0 <= state.active_seat_index < len(state.seats):
        raise InvariantViolation(
            f"active_seat_index {state.active_seat_index} outside 0..{len(state.seats) - 1}"
        )
    if state.phase is Phase.IN_PROGRESS and state.ambient_color == Color.WILD:
        raise InvariantViolation("ambient color is wild during play")


@dataclass
class PlayerView:
    """Filtered game state visible to a single seat.

    Contains only that seat's hand and public info.
    """

    seat_id: str
    my_hand: List[Card]
    top_discard: Optional[Card]
    ambient_color: Color
    direction: Direction
    active_seat_id: Optional[str]
    phase: Phase
    winner_seat_id: Optional[str]
    seat_names: Dict[str, str]
    num_cards_per_seat: Dict[str, int]
    declared: Dict[str, bool]
    deck_size: int
    narrative: str
    history: List[str]  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, seat_id: str) -> "PlayerView":
        """Create a view from full game state, hiding other seats' hands."""
        own = next((s for s in state.seats if s.id == seat_id), None)
        active = state.active_seat().id if state.seats else None
        return cls(
            seat_id=seat_id,
            my_hand=list(own.hand) if own else [],
            top_discard=state.top_discard(),
            ambient_color=state.ambient_color,
            direction=state.direction,
            active_seat_id=active,
            phase=state.phase,
            winner_seat_id=state.winner_seat_id,
            seat_names={s.id: s.name for s in state.seats},
            num_cards_per_seat={s.id: len(s.hand) for s in state.seats},
            declared={s.id: s.has_declared_low_card for s in state.seats},
            deck_size=len(state.deck),
            narrative=state.narrative,
            history=list(state.history[-10:]),  # Last 10 events
        )
