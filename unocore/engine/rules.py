"""UNO rules: card legality and turn sequencing."""

from typing import Iterable, List

from unocore.engine.card import Card, Color
from unocore.engine.game_state import Direction


def can_play(card: Card, top: Card, ambient_color: Color) -> bool:
    """Check if a card can be played on ``top`` while ``ambient_color`` is in force."""
    # Wild can always be played
    if card.is_wild:
        return True
    # Match by color
    if card.color == ambient_color:
        return True
    # Match by value (number, or action kind regardless of color)
    if card.value == top.value:
        return True
    return False


def playable_cards(hand: Iterable[Card], top: Card, ambient_color: Color) -> List[Card]:
    """Legal cards from ``hand``, in hand order."""
    return [c for c in hand if can_play(c, top, ambient_color)]


def next_seat(
    current_index: int,
    seat_count: int,
    direction: Direction,
    skip_one: bool = False,
) -> int:
    """Index of the seat that acts after ``current_index``.

    With ``skip_one`` the step is applied twice. With two seats that lands back
    on ``current_index``: Skip and Reverse forfeit the opponent's turn.
    """
    if seat_count < 2:
        raise ValueError(f"Need at least 2 seats, got {seat_count}")
    if not 0 <= current_index < seat_count:
        raise ValueError(f"Seat index {current_index} out of range for {seat_count} seats")
    steps = 2 if skip_one else 1
    return (current_index + steps * int(direction)) % seat_count
