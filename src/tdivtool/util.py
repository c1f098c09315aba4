# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Utility functions for tdivtool."""

from __future__ import annotations

import os
import sys
import tempfile

from functools import cache
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

import gmpy2

from loguru import logger

from tdivtool.constants import MAX_INPUT
from tdivtool.errors import InputOutOfRangeError
from tdivtool.primes import sieve_primes

SMALL_PRIMES: list[int] = sieve_primes(100)

# Bases 2, 3, 5 and 7 make Miller-Rabin deterministic below 3,215,031,751.
MILLER_RABIN_BASES = (2, 3, 5, 7)

_handler_id: int | None = None


@cache
def is_prime(n: int) -> bool:
    """Check if a 31-bit number is prime.

    Small inputs are settled by trial division. Anything left over is checked with strong probable prime tests to
    bases 2, 3, 5 and 7, which no composite below 3,215,031,751 passes.

    Raises:
        InputOutOfRangeError: If n exceeds 2^31 - 1.
    """
    if n > MAX_INPUT:
        raise InputOutOfRangeError(n, 0, MAX_INPUT)

    if n < 2:  # noqa: PLR2004
        return False

    for p in SMALL_PRIMES:
        if p * p > n:
            return True
        if n % p == 0:
            return n == p

    return all(gmpy2.is_strong_prp(n, base) for base in MILLER_RABIN_BASES)


def log_factor_result(methods: Iterable[str], n: int, factors: list[int], level: str = "INFO") -> None:
    """Log the result of a factorization."""
    logger.log(level, "{} -> {} = {}", ", ".join(methods), n, " * ".join(map(str, sorted(factors))) or "1")


def setup_logger(level: str = "INFO") -> None:
    """Set up the logger for the application.

    Log lines go to stderr so that results printed to stdout stay machine-readable. Only loguru's default handler, or
    the handler installed by an earlier call, is replaced.
    """
    global _handler_id  # noqa: PLW0603

    logger.remove(0 if _handler_id is None else _handler_id)
    logger.enable("tdivtool")

    logger_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <magenta>{elapsed}</magenta> | "
        "<level>{level: <8}</level> | <level>{message}</level>"
    )

    _handler_id = logger.add(sys.stderr, format=logger_format, level=level)


def safe_write(path: Path, data: bytes) -> None:
    """Safely write data to a file by using a temporary file and renaming it."""
    target_path = path.parent

    with tempfile.NamedTemporaryFile(mode="wb", delete=False, dir=target_path, suffix=".tmp") as f:
        f.write(data)

        temp_path = Path(f.name)
        f.flush()
        os.fsync(f.fileno())

    temp_path.replace(path)
