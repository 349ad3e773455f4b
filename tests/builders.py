"""Builders for hand-crafted game states."""

from typing import Optional, Sequence

from unocore.engine import Card, Color, Direction, GameState, Phase, Seat

_COLORS = {"r": Color.RED, "b": Color.BLUE, "g": Color.GREEN, "y": Color.YELLOW, "w": Color.WILD}
_VALUES = {"s": "skip", "rev": "reverse", "d2": "draw_two", "wild": "wild", "wd4": "wild_draw_four"}


def card(code: str, suffix: str = "") -> Card:
    """Build a card from a short code: r3, bs, grev, yd2, wwild, wwd4.

    ``suffix`` keeps ids unique when the same card appears twice.
    """
    color = _COLORS[code[0]]
    rest = code[1:]
    value = rest if rest.isdigit() else _VALUES[rest]
    return Card(id=f"{code}{suffix}", color=color, value=value)


def cards(*codes: str) -> tuple:
    return tuple(card(c) for c in codes)


def build_state(
    hands: Sequence[Sequence[Card]],
    discard: Sequence[Card],
    deck: Sequence[Card] = (),
    ambient: Optional[Color] = None,
    active: int = 0,
    direction: Direction = Direction.FORWARD,
    automated: Optional[Sequence[bool]] = None,
    declared: Optional[Sequence[bool]] = None,
) -> GameState:
    """An in-progress state with seats player_0..player_n named P0..Pn."""
    automated = automated or [i > 0 for i in range(len(hands))]
    declared = declared or [False] * len(hands)
    seats = tuple(
        Seat(
            id=f"player_{i}",
            name=f"P{i}",
            is_automated=automated[i],
            hand=tuple(hand),
            has_declared_low_card=declared[i],
        )
        for i, hand in enumerate(hands)
    )
    return GameState(
        seats=seats,
        active_seat_index=active,
        deck=tuple(deck),
        discard=tuple(discard),
        ambient_color=ambient or discard[-1].color,
        direction=direction,
        phase=Phase.IN_PROGRESS,
    )
