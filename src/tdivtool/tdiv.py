# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Trial division factoring of 31-bit integers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tdivtool.algorithm import FactorAlgorithm, to_int31
from tdivtool.constants import NUM_PRIMES_FOR_31_BIT_TDIV
from tdivtool.errors import InputIsPrimeError, InputOutOfRangeError
from tdivtool.factorization import Factorization
from tdivtool.primes import default_prime_table
from tdivtool.util import log_factor_result

if TYPE_CHECKING:
    from typing import SupportsIndex

    from tdivtool.primes import PrimeSource


class TDiv31Preload(FactorAlgorithm):
    """Trial division preloading all primes needed for inputs up to 2^31 - 1.

    sqrt(2^31 - 1) = 46340.95, so every composite input has a prime factor below 46341. The preloaded prefix holds
    those 4792 primes plus the next one, 46349, whose square exceeds every supported input.
    """

    _primes: tuple[int, ...]

    def __init__(self, prime_source: PrimeSource | None = None) -> None:
        source = prime_source if prime_source is not None else default_prime_table()
        source.ensure_count(NUM_PRIMES_FOR_31_BIT_TDIV)

        self._primes = tuple(source.get(i) for i in range(NUM_PRIMES_FOR_31_BIT_TDIV))

    @property
    def name(self) -> str:
        return "TDiv31Preload"

    @property
    def primes(self) -> tuple[int, ...]:
        """The preloaded prime prefix."""
        return self._primes

    def factor(self, n: SupportsIndex) -> Factorization:
        """Factor n completely in a single ascending pass over the preloaded primes.

        Returns:
            Factorization: The prime factorization of n. Empty for n = 1.

        Raises:
            InputOutOfRangeError: If n is not in [1, 2^31 - 1].
        """
        original_n = to_int31(n)
        n = original_n
        factors: dict[int, int] = {}

        for p in self._primes:
            if n % p == 0:
                exponent = 0

                while n % p == 0:
                    exponent += 1
                    n //= p

                factors[p] = exponent

            if p * p > n:
                # No factor <= sqrt(n) remains, so any cofactor is prime.
                if n > 1:
                    factors[n] = 1
                break
        else:
            raise InputOutOfRangeError(original_n, 1, self._primes[-1] ** 2 - 1)

        result = Factorization(factors)
        log_factor_result([self.name], original_n, result.primes(), level="DEBUG")

        return result

    def find_single_factor(self, n: SupportsIndex) -> int:
        """Return the smallest prime factor of the composite n.

        Raises:
            InputOutOfRangeError: If n is not in [2, 2^31 - 1].
            InputIsPrimeError: If n is prime.
        """
        n = to_int31(n, minimum=2)

        # For a composite n the scan never passes floor(sqrt(n)).
        for p in self._primes:
            if p * p > n:
                break

            if n % p == 0:
                return p

        raise InputIsPrimeError(n)
