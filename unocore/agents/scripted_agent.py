"""Scripted agent - plays the human seat with the opponent policy, for headless runs."""

from typing import Optional

from unocore.engine import (
    ChallengeLowCard,
    DeclareLowCard,
    DrawCard,
    Intent,
    OpponentPolicy,
    PlayCard,
    PlayerView,
)

# Cards the deck must hold before a challenge is worth issuing.
CHALLENGE_PENALTY = 2


class ScriptedAgent:
    """Never forgets to call UNO and catches anyone who does."""

    def __init__(self, name: str = "scripted", policy: Optional[OpponentPolicy] = None):
        self._name = name
        self._policy = policy or OpponentPolicy()

    @property
    def name(self) -> str:
        return self._name

    def choose_intent(self, player_view: PlayerView, seat_id: str) -> Intent:
        if player_view.deck_size >= CHALLENGE_PENALTY:
            for sid, count in player_view.num_cards_per_seat.items():
                if sid != seat_id and count == 1 and not player_view.declared[sid]:
                    return ChallengeLowCard(target_seat_id=sid)

        if len(player_view.my_hand) == 1 and not player_view.declared[seat_id]:
            return DeclareLowCard()

        move = self._policy.choose_card(
            player_view.my_hand,
            player_view.top_discard,
            player_view.ambient_color,
        )
        if move.card is None:
            return DrawCard()
        return PlayCard(card_id=move.card.id, chosen_color=move.color)
