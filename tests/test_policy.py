"""Tests for the scripted opponent policy."""

import random

import pytest

from builders import build_state, card, cards
from unocore.engine import Color, Move, OpponentPolicy


def _move(hand, top="r3", ambient=None):
    state = build_state([cards("g1"), hand], discard=cards(top), ambient=ambient, active=1)
    return OpponentPolicy().choose_move(state)


def test_no_legal_card_means_draw() -> None:
    assert _move(cards("b1", "g2")) == Move()


def test_priority_order() -> None:
    hand = cards("r5", "rrev", "rs", "rd2", "wwild", "wwd4")
    assert _move(hand).card.id == "wwd4"
    assert _move(hand[:5]).card.id == "wwild"
    assert _move(hand[:4]).card.id == "rd2"
    assert _move(hand[:3]).card.id == "rs"
    assert _move(hand[:2]).card.id == "rrev"
    assert _move(hand[:1]).card.id == "r5"


def test_ties_broken_by_hand_order() -> None:
    assert _move(cards("b1", "r7", "r5")).card.id == "r7"
    assert _move(cards("gs", "rs"), top="bs", ambient=Color.BLUE).card.id == "gs"


def test_only_legal_cards_considered() -> None:
    # Blue skip outranks a number but is not playable on red 3
    assert _move(cards("bs", "r9")).card.id == "r9"


def test_non_wild_has_no_color() -> None:
    assert _move(cards("r9")).color is None


def test_wild_color_is_most_common() -> None:
    move = _move(cards("b1", "wwild", "g2", "g5", "y1"))
    assert move.card.id == "wwild"
    assert move.color is Color.GREEN


def test_wild_color_ties_and_empty() -> None:
    assert _move(cards("wwild", "b1", "g1")).color is Color.BLUE
    assert _move(cards("wwild")).color is Color.RED
    assert _move(cards("wwd4", "wwild")).color is Color.RED


def test_choose_color_ignores_wilds() -> None:
    hand = [card("wwild", "-1"), card("wwild", "-2"), card("y4")]
    assert OpponentPolicy.choose_color(hand) is Color.YELLOW


def test_should_declare_only_on_second_to_last() -> None:
    always = OpponentPolicy(declare_probability=1.0)
    three = build_state([cards("g1"), cards("r1", "r2", "r4")], discard=cards("r3"), active=1)
    two = build_state([cards("g1"), cards("r1", "r2")], discard=cards("r3"), active=1)
    assert not always.should_declare(three, random.Random(0))
    assert always.should_declare(two, random.Random(0))
    assert not OpponentPolicy(declare_probability=0.0).should_declare(two, random.Random(0))


def test_should_declare_is_random() -> None:
    policy = OpponentPolicy()
    two = build_state([cards("g1"), cards("r1", "r2")], discard=cards("r3"), active=1)
    rng = random.Random(42)
    outcomes = {policy.should_declare(two, rng) for _ in range(50)}
    assert outcomes == {True, False}


def test_invalid_probability() -> None:
    with pytest.raises(ValueError):
        OpponentPolicy(declare_probability=1.5)
