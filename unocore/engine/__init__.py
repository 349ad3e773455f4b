"""Game engine for UNO."""

from unocore.engine.card import Card, Color, Kind, PLAYABLE_COLORS
from unocore.engine.deck import (
    CANONICAL_DECK_SIZE,
    build_deck,
    create_deck,
    deal,
    flip_starter,
    reshuffle_discard,
    shuffle_cards,
)
from unocore.engine.game_state import (
    Direction,
    EffectTag,
    GameState,
    Phase,
    PlayerView,
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
from unocore.engine.machine import Transition, apply_intent, step
from unocore.engine.policy import Move, OpponentPolicy
from unocore.engine.rules import can_play, next_seat, playable_cards

__all__ = [
    "Card",
    "Color",
    "Kind",
    "PLAYABLE_COLORS",
    "CANONICAL_DECK_SIZE",
    "build_deck",
    "create_deck",
    "deal",
    "flip_starter",
    "reshuffle_discard",
    "shuffle_cards",
    "Direction",
    "EffectTag",
    "GameState",
    "Phase",
    "PlayerView",
    "Seat",
    "check_invariants",
    "AutomatedTurn",
    "ChallengeLowCard",
    "DeclareLowCard",
    "DrawCard",
    "Intent",
    "PlayCard",
    "Reset",
    "Start",
    "Transition",
    "apply_intent",
    "step",
    "Move",
    "OpponentPolicy",
    "can_play",
    "next_seat",
    "playable_cards",
]
