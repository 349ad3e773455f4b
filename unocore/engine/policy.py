"""Scripted decision policy for automated seats."""

import random
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from unocore.engine.card import PLAYABLE_COLORS, Card, Color, Kind
from unocore.engine.game_state import GameState
from unocore.engine.rules import playable_cards

# Higher plays first.
KIND_PRIORITY = {
    Kind.WILD_DRAW_FOUR: 6,
    Kind.WILD: 5,
    Kind.DRAW_TWO: 4,
    Kind.SKIP: 3,
    Kind.REVERSE: 2,
    Kind.NUMBER: 1,
}


@dataclass(frozen=True)
class Move:
    """Policy decision. ``card`` is None when the seat has to draw."""

    card: Optional[Card] = None
    color: Optional[Color] = None


class OpponentPolicy:
    """Plays the most disruptive legal card, then picks the color it holds most of.

    Card choice is deterministic for a given hand order. Declaring a low card is
    left to chance so automated seats can be caught now and then.
    """

    def __init__(self, declare_probability: float = 0.5):
        if not 0.0 <= declare_probability <= 1.0:
            raise ValueError(f"declare_probability must be within [0, 1], got {declare_probability}")
        self.declare_probability = declare_probability

    def choose_move(self, state: GameState) -> Move:
        """Move for the active seat."""
        return self.choose_card(state.active_seat().hand, state.top_discard(), state.ambient_color)

    def choose_card(
        self,
        hand: Sequence[Card],
        top: Optional[Card],
        ambient_color: Color,
    ) -> Move:
        if top is None:
            return Move()
        candidates = playable_cards(hand, top, ambient_color)
        if not candidates:
            return Move()
        # max() keeps the first of equal keys, so ties fall back to hand order
        card = max(candidates, key=lambda c: KIND_PRIORITY[c.kind])
        color = None
        if card.is_wild:
            color = self.choose_color([c for c in hand if c.id != card.id])
        return Move(card=card, color=color)

    @staticmethod
    def choose_color(hand: Iterable[Card]) -> Color:
        """Most common color among non-wild cards; earlier colors win ties, red if none."""
        counts = Counter(c.color for c in hand if not c.is_wild)
        best = Color.RED
        for color in PLAYABLE_COLORS:
            if counts[color] > counts[best]:
                best = color
        return best

    def should_declare(self, state: GameState, rng: random.Random) -> bool:
        """Whether the active seat announces its low card before playing its second-to-last."""
        if len(state.active_seat().hand) != 2:
            return False
        return rng.random() < self.declare_probability
