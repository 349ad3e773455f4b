"""Deck creation, shuffling, dealing and reshuffling."""

import random
from typing import List, Optional, Sequence, Tuple

from unocore.engine.card import ACTION_VALUES, NUMBER_VALUES, PLAYABLE_COLORS, Card, Color

CANONICAL_DECK_SIZE = 108
HAND_SIZE = 7


def build_deck() -> List[Card]:
    """Create the canonical, unshuffled 108-card UNO deck.

    - 4 colors × (one 0, two each of 1-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards, ids c000..c107
    """
    specs: List[Tuple[Color, str]] = []

    for color in PLAYABLE_COLORS:
        # One zero per color
        specs.append((color, "0"))
        # Two of each 1-9 and action cards per color
        for value in NUMBER_VALUES[1:] + ACTION_VALUES:
            specs.append((color, value))
            specs.append((color, value))

    for _ in range(4):
        specs.append((Color.WILD, "wild"))
        specs.append((Color.WILD, "wild_draw_four"))

    return [Card(id=f"c{i:03d}", color=color, value=value) for i, (color, value) in enumerate(specs)]


def shuffle_cards(cards: Sequence[Card], rng: random.Random) -> List[Card]:
    """Return a shuffled copy of ``cards``; the input is left untouched."""
    shuffled = list(cards)
    rng.shuffle(shuffled)
    return shuffled


def create_deck(rng: random.Random) -> List[Card]:
    """Create a shuffled 108-card deck."""
    return shuffle_cards(build_deck(), rng)


def deal(
    deck: Sequence[Card],
    seat_count: int,
    hand_size: int = HAND_SIZE,
) -> Tuple[List[List[Card]], List[Card]]:
    """Deal ``hand_size`` cards to each seat round-robin from the tail of the deck."""
    remaining = list(deck)
    hands: List[List[Card]] = [[] for _ in range(seat_count)]
    for _ in range(hand_size):
        for hand in hands:
            if remaining:
                hand.append(remaining.pop())
    return hands, remaining


def flip_starter(deck: Sequence[Card]) -> Tuple[Optional[Card], List[Card]]:
    """Pop cards off the tail until a non-wild one turns up.

    Every wild popped on the way goes back to the bottom of the deck.
    """
    remaining = list(deck)
    for _ in range(len(remaining)):
        card = remaining.pop()
        if not card.is_wild:
            return card, remaining
        remaining.insert(0, card)
    return None, remaining


def reshuffle_discard(
    discard: Sequence[Card],
    rng: random.Random,
) -> Tuple[List[Card], List[Card]]:
    """Shuffle everything under the top discard into a fresh deck."""
    if not discard:
        return [], []
    return shuffle_cards(discard[:-1], rng), [discard[-1]]
