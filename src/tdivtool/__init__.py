# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Exact factorization of 31-bit integers by trial division."""

from loguru import logger

from tdivtool.algorithm import FactorAlgorithm, to_int31
from tdivtool.errors import (
    InputIsPrimeError,
    InputOutOfRangeError,
    NoSmallFactorError,
    PrimeTableUnderrunError,
    TDivError,
)
from tdivtool.factorization import Factorization
from tdivtool.primes import PrimeSource, PrimeTable, default_prime_table
from tdivtool.tdiv import TDiv31Preload

# Library logging stays silent until an application calls util.setup_logger.
logger.disable("tdivtool")

__all__ = [
    "FactorAlgorithm",
    "Factorization",
    "InputIsPrimeError",
    "InputOutOfRangeError",
    "NoSmallFactorError",
    "PrimeSource",
    "PrimeTable",
    "PrimeTableUnderrunError",
    "TDiv31Preload",
    "TDivError",
    "default_prime_table",
    "to_int31",
]
