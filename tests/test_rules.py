"""Unit tests for card legality and turn sequencing."""

import pytest

from builders import card
from unocore.engine import (
    PLAYABLE_COLORS,
    Card,
    Color,
    Direction,
    build_deck,
    can_play,
    next_seat,
    playable_cards,
)


def _distinct_cards() -> list[Card]:
    seen = {}
    for c in build_deck():
        seen.setdefault((c.color, c.value), c)
    return list(seen.values())


@pytest.mark.parametrize("ambient", PLAYABLE_COLORS)
def test_can_play_matches_rule_for_every_pair(ambient: Color) -> None:
    distinct = _distinct_cards()
    assert len(distinct) == 54
    for top in distinct:
        for c in distinct:
            expected = c.color is Color.WILD or c.color == ambient or c.value == top.value
            assert can_play(c, top, ambient) is expected, (c, top, ambient)


def test_can_play_examples() -> None:
    assert can_play(card("bs"), card("rs"), Color.RED)  # kind match across colors
    assert can_play(card("b3"), card("r3"), Color.RED)  # number match
    assert not can_play(card("b4"), card("r3"), Color.RED)
    assert can_play(card("wwd4"), card("wwild"), Color.GREEN)  # wild on wild
    assert can_play(card("g8"), card("wwild"), Color.GREEN)  # ambient after a wild
    assert not can_play(card("r8"), card("wwild"), Color.GREEN)


def test_playable_cards_keeps_hand_order() -> None:
    hand = [card("b4"), card("r9"), card("wwild"), card("g3"), card("r1")]
    assert [c.id for c in playable_cards(hand, card("y3"), Color.RED)] == ["r9", "wwild", "g3", "r1"]


@pytest.mark.parametrize(
    "current,count,direction,skip,expected",
    [
        (0, 4, Direction.FORWARD, False, 1),
        (0, 4, Direction.FORWARD, True, 2),
        (3, 4, Direction.FORWARD, False, 0),
        (3, 4, Direction.FORWARD, True, 1),
        (0, 4, Direction.BACKWARD, False, 3),
        (0, 4, Direction.BACKWARD, True, 2),
        (1, 3, Direction.BACKWARD, True, 2),
        (0, 2, Direction.FORWARD, True, 0),
        (1, 2, Direction.BACKWARD, True, 1),
        (1, 2, Direction.FORWARD, False, 0),
    ],
)
def test_next_seat(current, count, direction, skip, expected) -> None:
    assert next_seat(current, count, direction, skip) == expected


def test_next_seat_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        next_seat(0, 1, Direction.FORWARD)
    with pytest.raises(ValueError):
        next_seat(4, 4, Direction.FORWARD)


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(id="x", color=Color.RED, value="wild")
    with pytest.raises(ValueError):
        Card(id="x", color=Color.WILD, value="7")
    with pytest.raises(ValueError):
        Card(id="x", color=Color.RED, value="10")
    assert card("r7").number == 7
    assert card("rs").number is None
    assert str(card("gd2")) == "green_draw_two"
    assert str(card("wwd4")) == "wild_draw_four"
