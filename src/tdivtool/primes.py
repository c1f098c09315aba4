# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Growable table of the smallest primes."""

from __future__ import annotations

import math
import threading

from functools import cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

from loguru import logger

from tdivtool.errors import PrimeTableUnderrunError


class PrimeSource(Protocol):
    """Anything able to supply the i-th prime once enough primes have been ensured."""

    def ensure_count(self, n: int) -> PrimeSource: ...

    def get(self, i: int) -> int: ...


def sieve_primes(limit: int) -> list[int]:
    """Generate a list of prime numbers below the specified limit.

    Returns:
        list[int]: Ascending list of prime numbers less than the limit.
    """
    if limit < 3:  # noqa: PLR2004
        return []

    prime_flags = bytearray([1]) * limit
    prime_flags[0] = prime_flags[1] = 0

    for i in range(2, math.isqrt(limit - 1) + 1):
        if prime_flags[i]:
            prime_flags[i * i :: i] = bytes(len(range(i * i, limit, i)))

    return [i for i in range(2, limit) if prime_flags[i]]


def prime_count_limit(n: int) -> int:
    """Return a sieve limit guaranteed to contain at least n primes.

    Uses Rosser's bound p_n < n (ln n + ln ln n), valid for n >= 6.
    """
    if n < 6:  # noqa: PLR2004
        return 15

    return int(n * (math.log(n) + math.log(math.log(n)))) + 1


class PrimeTable:
    """Ascending table of the first K primes, grown on demand.

    Growth is serialized by a lock. Entries are only ever appended, so reads of already populated indices need no
    locking.
    """

    _generator: Callable[[int], list[int]]
    _primes: list[int]
    _lock: threading.Lock

    def __init__(self, generator: Callable[[int], list[int]] = sieve_primes) -> None:
        self._generator = generator
        self._primes = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._primes)

    def ensure_count(self, n: int) -> PrimeTable:
        """Grow the table until it holds at least n primes.

        Returns:
            PrimeTable: This table, to allow chaining.
        """
        if len(self._primes) >= n:
            return self

        with self._lock:
            # Another thread may have grown the table while we waited.
            if len(self._primes) >= n:
                return self

            limit = prime_count_limit(n)
            primes = self._generator(limit)

            while len(primes) < n:
                limit *= 2
                primes = self._generator(limit)

            old_count = len(self._primes)
            self._primes.extend(primes[old_count:])

            logger.debug(
                "Grew prime table from {} to {} primes (largest {})", old_count, len(self._primes), self._primes[-1]
            )

        return self

    def get(self, i: int) -> int:
        """Return the i-th prime (0-indexed).

        Raises:
            PrimeTableUnderrunError: If the table has not been grown to include index i.
        """
        if i < 0 or i >= len(self._primes):
            msg = f"Prime index {i} requested but only {len(self._primes)} primes are available"
            raise PrimeTableUnderrunError(msg)

        return self._primes[i]

    def snapshot(self, count: int) -> tuple[int, ...]:
        """Return the first count primes as an immutable tuple.

        Raises:
            PrimeTableUnderrunError: If fewer than count primes are available.
        """
        if count > len(self._primes):
            msg = f"{count} primes requested but only {len(self._primes)} primes are available"
            raise PrimeTableUnderrunError(msg)

        return tuple(self._primes[:count])


@cache
def default_prime_table() -> PrimeTable:
    """Return the process-wide shared prime table."""
    return PrimeTable()
