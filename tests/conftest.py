"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmen.core.enums import Color
from chessmen.core.pieces import Bishop, King, Knight, Pawn, Queen, Rook


@pytest.fixture
def bishop() -> Bishop:
    return Bishop(0, 2, Color.WHITE)


@pytest.fixture
def knight() -> Knight:
    return Knight(0, 1, Color.WHITE)


@pytest.fixture
def rook() -> Rook:
    return Rook(0, 0, Color.WHITE)


@pytest.fixture
def queen() -> Queen:
    return Queen(0, 3, Color.WHITE)


@pytest.fixture
def king() -> King:
    return King(0, 4, Color.WHITE)


@pytest.fixture
def white_pawn() -> Pawn:
    return Pawn(1, 1, Color.WHITE)


@pytest.fixture
def black_pawn() -> Pawn:
    return Pawn(6, 1, Color.BLACK)
