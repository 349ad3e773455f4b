"""Card effects: what happens to the table once a legal card is played."""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Tuple

from unocore.engine.card import PLAYABLE_COLORS, Card, Color, Kind
from unocore.engine.game_state import EffectTag, GameState, Phase
from unocore.engine.rules import next_seat

logger = logging.getLogger(__name__)

PENALTY_CARDS = {Kind.DRAW_TWO: 2, Kind.WILD_DRAW_FOUR: 4}

# Color used when a wild is played without a usable choice.
DEFAULT_WILD_COLOR = Color.RED


def describe(card: Card) -> str:
    if card.is_wild:
        return card.value.replace("_", " ")
    return f"{card.color.value} {card.value.replace('_', ' ')}"


def with_event(
    state: GameState,
    narrative: str,
    tags: Iterable[EffectTag] = (),
    **changes,
) -> GameState:
    """Copy ``state`` with ``changes`` applied and ``narrative`` logged as the latest event."""
    return replace(
        state,
        narrative=narrative,
        effect_tags=frozenset(tags),
        history=state.history + (narrative,),
        **changes,
    )


def draw_cards(
    deck: Tuple[Card, ...],
    count: int,
) -> Tuple[Tuple[Card, ...], Tuple[Card, ...]]:
    """Take ``count`` cards off the top of the deck, or nothing if it holds fewer.

    Returns (drawn, remaining); drawn is in pop order.
    """
    if count <= 0 or len(deck) < count:
        return (), deck
    return tuple(reversed(deck[-count:])), deck[:-count]


def _wild_color(chosen: Optional[Color]) -> Color:
    """Coerce a host-supplied color (enum or plain string); anything unplayable means red."""
    if chosen is None:
        return DEFAULT_WILD_COLOR
    try:
        color = Color(chosen)
    except ValueError:
        return DEFAULT_WILD_COLOR
    return color if color in PLAYABLE_COLORS else DEFAULT_WILD_COLOR


def resolve_play(
    state: GameState,
    card: Card,
    chosen_color: Optional[Color] = None,
) -> GameState:
    """Apply an already-validated play by the active seat and return the new state."""
    seats = list(state.seats)
    idx = state.active_seat_index
    actor = seats[idx]
    hand = tuple(c for c in actor.hand if c.id != card.id)
    discard = state.discard + (card,)

    # Check win
    if not hand:
        seats[idx] = replace(actor, hand=hand)
        return with_event(
            state,
            f"{actor.name} won the game!",
            {EffectTag.WIN},
            seats=tuple(seats),
            discard=discard,
            phase=Phase.CONCLUDED,
            winner_seat_id=actor.id,
        )

    # A declaration only covers the hand it was made for
    seats[idx] = replace(
        actor,
        hand=hand,
        has_declared_low_card=actor.has_declared_low_card and len(hand) <= 1,
    )

    deck = state.deck
    direction = state.direction
    color = _wild_color(chosen_color) if card.is_wild else card.color
    skip = False
    advance = True
    tags = set()
    narrative = f"{actor.name} played {describe(card)}"
    kind = card.kind

    if kind is Kind.REVERSE:
        direction = direction.flipped()
        # Two seats: reversing hands the turn straight back
        advance = len(seats) > 2
        tags.add(EffectTag.REVERSE)
        narrative = f"{actor.name} reversed the direction"
    elif kind is Kind.SKIP:
        skip = True
        tags.add(EffectTag.SKIP)
        narrative = f"{actor.name} skipped the next player"
    elif kind is Kind.WILD:
        tags.add(EffectTag.WILD)
        narrative = f"{actor.name} changed the color to {color.value}"
    elif kind in PENALTY_CARDS:
        penalty = PENALTY_CARDS[kind]
        target_idx = next_seat(idx, len(seats), direction)
        target = seats[target_idx]
        drawn, deck = draw_cards(deck, penalty)
        skip = True
        prefix = (
            f"{actor.name} changed the color to {color.value} and"
            if kind is Kind.WILD_DRAW_FOUR
            else actor.name
        )
        if drawn:
            seats[target_idx] = replace(target, hand=target.hand + drawn)
            tags.add(EffectTag.WILD_DRAW_FOUR if kind is Kind.WILD_DRAW_FOUR else EffectTag.DRAW_TWO)
            narrative = f"{prefix} made {target.name} draw {penalty} cards"
        else:
            logger.info("Deck holds %d cards, %s penalty of %d is void", len(deck), card, penalty)
            tags.add(EffectTag.SKIP)
            narrative = f"{prefix} skipped {target.name} (deck too small to draw {penalty})"

    next_idx = next_seat(idx, len(seats), direction, skip) if advance else idx

    return with_event(
        state,
        narrative,
        tags,
        seats=tuple(seats),
        deck=deck,
        discard=discard,
        ambient_color=color,
        direction=direction,
        active_seat_index=next_idx,
    )
