# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Prime factorization result."""

from __future__ import annotations

import math

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Factorization(Mapping[int, int]):
    """Immutable mapping of prime factors to their exponents, iterated in ascending order of prime."""

    __slots__ = ("_factors",)

    _factors: dict[int, int]

    def __init__(self, factors: Mapping[int, int] | Iterable[tuple[int, int]] = ()) -> None:
        items = factors.items() if isinstance(factors, Mapping) else factors
        merged: dict[int, int] = {}

        for prime, exponent in items:
            if exponent < 1:
                msg = f"Exponent of {prime} must be positive, got {exponent}"
                raise ValueError(msg)

            merged[prime] = merged.get(prime, 0) + exponent

        self._factors = dict(sorted(merged.items()))

    def __getitem__(self, prime: int) -> int:
        return self._factors[prime]

    def __iter__(self) -> Iterator[int]:
        return iter(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __hash__(self) -> int:
        return hash(tuple(self._factors.items()))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Mapping):
            return dict(self.items()) == dict(other.items())

        return NotImplemented

    def __repr__(self) -> str:
        return f"Factorization({self._factors!r})"

    def __str__(self) -> str:
        if not self._factors:
            return "1"

        return " * ".join(str(p) if e == 1 else f"{p}^{e}" for p, e in self._factors.items())

    @property
    def n(self) -> int:
        """The number this factorization reconstructs."""
        return math.prod(p**e for p, e in self._factors.items())

    def primes(self) -> list[int]:
        """Return the prime factors in ascending order, repeated according to multiplicity."""
        return [p for p, e in self._factors.items() for _ in range(e)]
