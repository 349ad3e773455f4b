"""Human agent - reads intents from terminal."""

from typing import Callable

from unocore.engine import (
    PLAYABLE_COLORS,
    ChallengeLowCard,
    Color,
    DeclareLowCard,
    DrawCard,
    Intent,
    PlayCard,
    PlayerView,
)

HELP = "Enter a card number to play it, 'd' to draw, 'u' to call UNO, 'c <seat#>' to catch a seat."


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human", input_fn: Callable[[str], str] = input):
        self._name = name
        self._input = input_fn

    @property
    def name(self) -> str:
        return self._name

    def choose_intent(self, player_view: PlayerView, seat_id: str) -> Intent:
        hand = player_view.my_hand
        seat_ids = list(player_view.seat_names)

        print("\n--- Your turn ---")
        print(f"Last action: {player_view.narrative}")
        print(f"Top discard: {player_view.top_discard}  (color: {player_view.ambient_color.value})")
        for i, sid in enumerate(seat_ids):
            if sid != seat_id:
                print(f"  seat {i}: {player_view.seat_names[sid]} holds {player_view.num_cards_per_seat[sid]} cards")
        print("Your hand:")
        for i, card in enumerate(hand):
            print(f"  {i}: {card}")
        print(HELP)

        while True:
            try:
                raw = self._input("> ").strip().lower()
            except EOFError:
                return DrawCard()
            if raw == "d":
                return DrawCard()
            if raw == "u":
                return DeclareLowCard()
            if raw.startswith("c "):
                target = raw[2:].strip()
                if target.isdigit() and int(target) < len(seat_ids):
                    return ChallengeLowCard(target_seat_id=seat_ids[int(target)])
            elif raw.isdigit() and int(raw) < len(hand):
                card = hand[int(raw)]
                if card.is_wild:
                    return PlayCard(card_id=card.id, chosen_color=self._ask_color())
                return PlayCard(card_id=card.id)
            print("Invalid. Try again.")

    def _ask_color(self) -> Color:
        options = ", ".join(c.value for c in PLAYABLE_COLORS)
        while True:
            try:
                raw = self._input(f"Choose a color ({options}): ").strip().lower()
            except EOFError:
                return Color.RED
            for color in PLAYABLE_COLORS:
                if raw in (color.value, color.value[0]):
                    return color
            print("Invalid. Try again.")
