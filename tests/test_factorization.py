# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Factorization result tests for tdivtool."""

from __future__ import annotations

import pytest

from tdivtool.factorization import Factorization


def test_ordering() -> None:
    """Test that factors iterate in ascending order regardless of insertion order."""
    factorization = Factorization({13: 1, 2: 3, 7: 2})

    assert list(factorization) == [2, 7, 13]
    assert list(factorization.items()) == [(2, 3), (7, 2), (13, 1)]


def test_reconstruction() -> None:
    """Test reconstructing the factored number."""
    assert Factorization({2: 2, 3: 1}).n == 12
    assert Factorization().n == 1
    assert Factorization({2: 2, 3: 1}).primes() == [2, 2, 3]


def test_str() -> None:
    """Test the human-readable form."""
    assert str(Factorization({3: 1, 2: 2})) == "2^2 * 3"
    assert str(Factorization({2147483647: 1})) == "2147483647"
    assert str(Factorization()) == "1"


def test_equality() -> None:
    """Test comparison against other mappings."""
    assert Factorization({2: 2, 3: 1}) == {2: 2, 3: 1}
    assert Factorization({2: 2, 3: 1}) != {2: 1, 3: 1}
    assert Factorization() == {}
    assert hash(Factorization({2: 2, 3: 1})) == hash(Factorization([(3, 1), (2, 2)]))


def test_pairs_are_merged() -> None:
    """Test that repeated primes in pair input accumulate their exponents."""
    assert Factorization([(2, 1), (3, 1), (2, 1)]) == {2: 2, 3: 1}


def test_invalid_exponent() -> None:
    """Test that non-positive exponents are rejected."""
    with pytest.raises(ValueError, match="must be positive"):
        Factorization({2: 0})


def test_immutable() -> None:
    """Test that a factorization cannot be modified."""
    factorization = Factorization({2: 2})

    with pytest.raises(TypeError):
        factorization[3] = 1  # type: ignore[index]
