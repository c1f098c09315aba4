# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Constants for 31-bit trial division."""

# Largest supported input, Integer.MAX_VALUE in 32-bit terms.
MAX_INPUT = 2**31 - 1

# ceil(sqrt(MAX_INPUT)). Any composite input has a prime factor below this.
PRIME_BOUND = 46341

# All 4792 primes below PRIME_BOUND, plus 46349 so that p * p > N always terminates the scan.
NUM_PRIMES_FOR_31_BIT_TDIV = 4793
