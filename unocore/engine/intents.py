"""Intents accepted by the game state machine."""

from dataclasses import dataclass
from typing import Optional, Union

from unocore.engine.card import Color


@dataclass(frozen=True)
class Start:
    """Begin a match: one human seat plus ``automated_seat_count`` (1-3) automated seats."""

    player_name: str
    automated_seat_count: int = 3


@dataclass(frozen=True)
class PlayCard:
    """Play a card from the active seat's hand. For wilds, chosen_color picks the new color."""

    card_id: str
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class DrawCard:
    """Draw one card for the active seat (or reshuffle when the deck is empty)."""

    pass


@dataclass(frozen=True)
class DeclareLowCard:
    """Active seat announces it is down to one card."""

    pass


@dataclass(frozen=True)
class ChallengeLowCard:
    """Catch a seat holding one card without having declared it."""

    target_seat_id: str


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class AutomatedTurn:
    """Let the opponent policy act for the active (automated) seat."""

    pass


Intent = Union[Start, PlayCard, DrawCard, DeclareLowCard, ChallengeLowCard, Reset, AutomatedTurn]
