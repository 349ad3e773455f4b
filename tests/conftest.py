"""Pytest fixtures shared across the engine tests."""

import pytest

from builders import card


@pytest.fixture
def filler():
    """Ten distinct yellow 9s to pad decks with."""
    return tuple(card("y9", suffix=f"-{i}") for i in range(10))
