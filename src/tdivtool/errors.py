# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Error types for tdivtool."""


class TDivError(Exception):
    """Base class for factoring errors."""


class InputOutOfRangeError(TDivError, ValueError):
    """Raised when an input lies outside the range an algorithm supports."""

    def __init__(self, n: int, minimum: int, maximum: int) -> None:
        super().__init__(f"N = {n} is outside the supported range [{minimum}, {maximum}]")
        self.n = n
        self.minimum = minimum
        self.maximum = maximum


class NoSmallFactorError(TDivError, ValueError):
    """Raised when no prime within the supported range divides the input."""

    def __init__(self, n: int, message: str | None = None) -> None:
        super().__init__(message or f"N = {n} has no factor within the supported range")
        self.n = n


class InputIsPrimeError(NoSmallFactorError):
    """Raised when a single factor is requested for a prime input."""

    def __init__(self, n: int) -> None:
        super().__init__(n, f"N = {n} is prime")


class PrimeTableUnderrunError(TDivError, IndexError):
    """Raised when a prime is requested before the table has been grown to include it."""
