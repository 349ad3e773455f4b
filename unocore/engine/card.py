"""Card, Color and Kind types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. WILD marks the color-less wild family."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    WILD = "wild"


# Fixed order also used for tie-breaking when a color has to be picked.
PLAYABLE_COLORS = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


class Kind(str, Enum):
    """What a card does when played."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


NUMBER_VALUES = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
ACTION_VALUES = ("skip", "reverse", "draw_two")
WILD_VALUES = ("wild", "wild_draw_four")
CARD_VALUES = NUMBER_VALUES + ACTION_VALUES + WILD_VALUES


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number/action cards: color is one of the four playable colors, value is
    "0"-"9", "skip", "reverse" or "draw_two".
    For wild cards: color is Color.WILD, value is "wild" or "wild_draw_four".
    The id is unique within one match and is what hands are searched by.
    """

    id: str
    color: Color
    value: str

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if self.value in WILD_VALUES and self.color is not Color.WILD:
            raise ValueError("Wild cards must have color=Color.WILD")
        if self.value not in WILD_VALUES and self.color is Color.WILD:
            raise ValueError("Non-wild cards must have a playable color")

    @property
    def kind(self) -> Kind:
        if self.value in NUMBER_VALUES:
            return Kind.NUMBER
        return Kind(self.value)

    @property
    def number(self) -> Optional[int]:
        return int(self.value) if self.value in NUMBER_VALUES else None

    @property
    def is_wild(self) -> bool:
        return self.color is Color.WILD

    def __str__(self) -> str:
        if self.is_wild:
            return self.value
        return f"{self.color.value}_{self.value}"
