"""Unit tests for deck construction, dealing and reshuffling."""

import random
from collections import Counter

from builders import card
from unocore.engine import (
    CANONICAL_DECK_SIZE,
    Color,
    build_deck,
    create_deck,
    deal,
    flip_starter,
    reshuffle_discard,
    shuffle_cards,
)


def test_build_deck_size_and_ids() -> None:
    deck = build_deck()
    assert len(deck) == CANONICAL_DECK_SIZE == 108
    assert len({c.id for c in deck}) == 108


def test_build_deck_composition() -> None:
    counts = Counter((c.color, c.value) for c in build_deck())
    for color in (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW):
        assert counts[(color, "0")] == 1
        for value in ("1", "5", "9", "skip", "reverse", "draw_two"):
            assert counts[(color, value)] == 2
    assert counts[(Color.WILD, "wild")] == 4
    assert counts[(Color.WILD, "wild_draw_four")] == 4


def test_create_deck_reproducible() -> None:
    d1 = create_deck(random.Random(123))
    d2 = create_deck(random.Random(123))
    assert [c.id for c in d1] == [c.id for c in d2]
    assert sorted(c.id for c in d1) == [c.id for c in build_deck()]


def test_shuffle_does_not_mutate_input() -> None:
    original = build_deck()
    snapshot = list(original)
    shuffled = shuffle_cards(original, random.Random(7))
    assert original == snapshot
    assert shuffled != original
    assert sorted(c.id for c in shuffled) == sorted(c.id for c in original)


def test_deal_round_robin_from_tail() -> None:
    deck = build_deck()
    hands, rest = deal(deck, 3)
    assert [len(h) for h in hands] == [7, 7, 7]
    assert len(rest) == 108 - 21
    assert hands[0][0] == deck[-1]
    assert hands[1][0] == deck[-2]
    assert hands[2][0] == deck[-3]
    assert hands[0][1] == deck[-4]
    assert rest == deck[:-21]


def test_flip_starter_returns_wilds_to_bottom() -> None:
    number = card("r4")
    wild = card("wwild")
    wd4 = card("wwd4")
    starter, rest = flip_starter([number, wild, wd4])
    assert starter == number
    assert rest == [wild, wd4]


def test_flip_starter_all_wild() -> None:
    wilds = [card("wwild", suffix=str(i)) for i in range(3)]
    starter, rest = flip_starter(wilds)
    assert starter is None
    assert sorted(c.id for c in rest) == sorted(c.id for c in wilds)


def test_reshuffle_keeps_top_discard() -> None:
    discard = [card("r1"), card("b2"), card("g3"), card("y4")]
    deck, new_discard = reshuffle_discard(discard, random.Random(3))
    assert new_discard == [discard[-1]]
    assert sorted(c.id for c in deck) == sorted(c.id for c in discard[:-1])


def test_reshuffle_empty_discard() -> None:
    assert reshuffle_discard([], random.Random(3)) == ([], [])
