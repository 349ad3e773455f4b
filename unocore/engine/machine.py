"""Game state machine: (state, intent) -> new state.

Rejected intents never raise. ``step`` returns the prior state untouched together
with the EngineError explaining the rejection; ``apply_intent`` drops the
diagnostic and just returns the state.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional

from unocore.engine.deck import create_deck, deal, flip_starter, reshuffle_discard
from unocore.engine.effects import draw_cards, resolve_play, with_event
from unocore.engine.game_state import (
    Direction,
    EffectTag,
    GameState,
    Phase,
    Seat,
    check_invariants,
)
from unocore.engine.intents import (
    AutomatedTurn,
    ChallengeLowCard,
    DeclareLowCard,
    DrawCard,
    Intent,
    PlayCard,
    Reset,
    Start,
)
from unocore.engine.policy import OpponentPolicy
from unocore.engine.rules import can_play, next_seat
from unocore.errors import (
    EngineError,
    IllegalMove,
    InsufficientDeck,
    InvalidArgument,
    InvalidPhase,
    NotFound,
)

logger = logging.getLogger(__name__)

MIN_AUTOMATED_SEATS = 1
MAX_AUTOMATED_SEATS = 3
DEFAULT_PLAYER_NAME = "Player"
LOW_CARD_PENALTY = 2


@dataclass(frozen=True)
class Transition:
    """Outcome of one intent: the resulting state and, if rejected, why."""

    state: GameState
    error: Optional[EngineError] = None

    @property
    def accepted(self) -> bool:
        return self.error is None


def _require_in_progress(state: GameState) -> None:
    if state.phase is not Phase.IN_PROGRESS:
        raise InvalidPhase(f"No match in progress (phase={state.phase.value})")


def _start(state: GameState, intent: Start, rng: random.Random, policy: OpponentPolicy) -> GameState:
    if state.phase is not Phase.PENDING:
        raise InvalidPhase("A match has already been started; reset first")
    count = intent.automated_seat_count
    if not MIN_AUTOMATED_SEATS <= count <= MAX_AUTOMATED_SEATS:
        raise InvalidArgument(
            f"automated_seat_count must be {MIN_AUTOMATED_SEATS}-{MAX_AUTOMATED_SEATS}, got {count}"
        )

    deck = create_deck(rng)
    hands, deck = deal(deck, count + 1)
    starter, deck = flip_starter(deck)
    if starter is None:
        raise InsufficientDeck("Deck has no non-wild card to start the discard pile")

    names = [(intent.player_name or "").strip() or DEFAULT_PLAYER_NAME]
    names += [f"CPU {i}" for i in range(1, count + 1)]
    seats = tuple(
        Seat(id=f"player_{i}", name=name, is_automated=i > 0, hand=tuple(hand))
        for i, (name, hand) in enumerate(zip(names, hands))
    )
    return GameState(
        seats=seats,
        active_seat_index=0,
        deck=tuple(deck),
        discard=(starter,),
        ambient_color=starter.color,
        direction=Direction.FORWARD,
        phase=Phase.IN_PROGRESS,
        narrative="Game started",
    )


def _play(state: GameState, intent: PlayCard, rng: random.Random, policy: OpponentPolicy) -> GameState:
    _require_in_progress(state)
    seat = state.active_seat()
    card = seat.find_card(intent.card_id)
    if card is None:
        raise NotFound(f"Card {intent.card_id} is not in {seat.name}'s hand")
    top = state.top_discard()
    if top is None or not can_play(card, top, state.ambient_color):
        raise IllegalMove(f"{card} cannot be played on {top} while {state.ambient_color.value} is in force")
    return resolve_play(state, card, intent.chosen_color)


def _draw(state: GameState, intent: DrawCard, rng: random.Random, policy: OpponentPolicy) -> GameState:
    _require_in_progress(state)
    if not state.deck:
        if len(state.discard) <= 1:
            raise InsufficientDeck("Deck is empty and there is nothing to reshuffle")
        deck, discard = reshuffle_discard(state.discard, rng)
        logger.info("Reshuffled %d discarded cards into the deck", len(deck))
        return with_event(
            state,
            "Deck was reshuffled",
            {EffectTag.SHUFFLE},
            deck=tuple(deck),
            discard=tuple(discard),
        )

    idx = state.active_seat_index
    seat = state.active_seat()
    (card,), deck = draw_cards(state.deck, 1)
    seats = list(state.seats)
    seats[idx] = replace(seat, hand=seat.hand + (card,), has_declared_low_card=False)

    top = state.top_discard()
    if top is not None and can_play(card, top, state.ambient_color):
        # Turn stays put so the drawn card can be played
        return with_event(
            state,
            f"{seat.name} drew a card that can be played",
            seats=tuple(seats),
            deck=deck,
        )
    return with_event(
        state,
        f"{seat.name} drew a card",
        seats=tuple(seats),
        deck=deck,
        active_seat_index=next_seat(idx, len(seats), state.direction),
    )


def _declare(state: GameState, intent: DeclareLowCard, rng: random.Random, policy: OpponentPolicy) -> GameState:
    _require_in_progress(state)
    seat = state.active_seat()
    if len(seat.hand) != 1:
        raise IllegalMove(f"{seat.name} holds {len(seat.hand)} cards, not 1")
    seats = list(state.seats)
    seats[state.active_seat_index] = replace(seat, has_declared_low_card=True)
    return with_event(state, f"{seat.name} called UNO!", {EffectTag.UNO}, seats=tuple(seats))


def _challenge(state: GameState, intent: ChallengeLowCard, rng: random.Random, policy: OpponentPolicy) -> GameState:
    _require_in_progress(state)
    idx = state.seat_index(intent.target_seat_id)
    if idx is None:
        raise NotFound(f"No seat {intent.target_seat_id}")
    target = state.seats[idx]
    if len(target.hand) != 1 or target.has_declared_low_card:
        raise IllegalMove(f"{target.name} cannot be challenged")
    drawn, deck = draw_cards(state.deck, LOW_CARD_PENALTY)
    if not drawn:
        raise InsufficientDeck(f"Deck holds {len(state.deck)} cards, penalty needs {LOW_CARD_PENALTY}")
    seats = list(state.seats)
    seats[idx] = replace(target, hand=target.hand + drawn)
    return with_event(
        state,
        f"{target.name} was caught not saying UNO and drew {LOW_CARD_PENALTY} cards",
        {EffectTag.CAUGHT},
        seats=tuple(seats),
        deck=deck,
    )


def _automated(state: GameState, intent: AutomatedTurn, rng: random.Random, policy: OpponentPolicy) -> GameState:
    _require_in_progress(state)
    seat = state.active_seat()
    if not seat.is_automated:
        raise IllegalMove(f"{seat.name} is not an automated seat")

    move = policy.choose_move(state)
    if move.card is None:
        return _draw(state, DrawCard(), rng, policy)

    if not policy.should_declare(state, rng):
        return resolve_play(state, move.card, move.color)

    seats = list(state.seats)
    seats[state.active_seat_index] = replace(seat, has_declared_low_card=True)
    declared = with_event(state, f"{seat.name} called UNO!", {EffectTag.UNO}, seats=tuple(seats))
    played = resolve_play(declared, move.card, move.color)
    return replace(played, effect_tags=played.effect_tags | {EffectTag.UNO})


def _reset(state: GameState, intent: Reset, rng: random.Random, policy: OpponentPolicy) -> GameState:
    return GameState.pending()


_HANDLERS: Dict[type, Callable[..., GameState]] = {
    Start: _start,
    PlayCard: _play,
    DrawCard: _draw,
    DeclareLowCard: _declare,
    ChallengeLowCard: _challenge,
    AutomatedTurn: _automated,
    Reset: _reset,
}


def step(
    state: GameState,
    intent: Intent,
    rng: Optional[random.Random] = None,
    policy: Optional[OpponentPolicy] = None,
) -> Transition:
    """Apply one intent and report whether it was accepted."""
    handler = _HANDLERS.get(type(intent))
    if handler is None:
        error: EngineError = InvalidArgument(f"Unknown intent {intent!r}")
        logger.info("Rejected %r: %s", intent, error)
        return Transition(state, error)

    try:
        new_state = handler(state, intent, rng or random.Random(), policy or OpponentPolicy())
    except EngineError as e:
        logger.info("Rejected %s: %s", type(intent).__name__, e)
        return Transition(state, e)

    check_invariants(new_state)
    logger.debug("%s accepted: %s", type(intent).__name__, new_state.narrative)
    return Transition(new_state)


def apply_intent(
    state: GameState,
    intent: Intent,
    rng: Optional[random.Random] = None,
    policy: Optional[OpponentPolicy] = None,
) -> GameState:
    """Apply one intent and return the new state (the same state if rejected)."""
    return step(state, intent, rng, policy).state
