# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Base class and input conversion for factoring algorithms."""

from __future__ import annotations

import operator

from abc import ABC, abstractmethod
from collections import Counter
from typing import SupportsIndex

from tdivtool.constants import MAX_INPUT
from tdivtool.errors import InputOutOfRangeError
from tdivtool.factorization import Factorization
from tdivtool.util import is_prime


def to_int31(value: SupportsIndex, minimum: int = 1) -> int:
    """Convert an integer-like value to a plain int within [minimum, MAX_INPUT].

    Raises:
        TypeError: If the value is not an integer.
        InputOutOfRangeError: If the value lies outside the supported range.
    """
    if isinstance(value, bool):
        msg = "Expected an integer, got bool"
        raise TypeError(msg)

    n = operator.index(value)

    if n < minimum or n > MAX_INPUT:
        raise InputOutOfRangeError(n, minimum, MAX_INPUT)

    return n


class FactorAlgorithm(ABC):
    """A factoring algorithm able to split off a single factor of a composite number."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name of the algorithm."""

    @abstractmethod
    def find_single_factor(self, n: SupportsIndex) -> int:
        """Return a non-trivial factor of the composite n."""

    def factor(self, n: SupportsIndex) -> Factorization:
        """Factor n completely by repeatedly splitting off single factors.

        Returns:
            Factorization: The prime factorization of n.
        """
        pending = [to_int31(n)]
        factors: Counter[int] = Counter()

        while pending:
            m = pending.pop()

            if m == 1:
                continue

            if is_prime(m):
                factors[m] += 1
                continue

            factor = self.find_single_factor(m)
            pending.extend([factor, m // factor])

        return Factorization(factors)
