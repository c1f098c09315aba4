# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>

import sys
import time

from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, TypeAdapter
from tap import Tap

from tdivtool.config import Config, read_config
from tdivtool.errors import TDivError
from tdivtool.factorization import Factorization
from tdivtool.tdiv import TDiv31Preload
from tdivtool.util import is_prime, safe_write, setup_logger


class Arguments(Tap):
    """Utility for factoring 31-bit integers by trial division"""

    numbers: list[int]  # Integers to factor, each in [1, 2^31 - 1]
    config_path: Path | None = None  # Path to the JSON-formatted configuration file
    single: bool = False  # Only report the smallest prime factor of each (composite) number
    output_format: Literal["text", "json"] | None = None  # Output format (overrides the configuration file)
    output_path: Path | None = None  # Also write the results to this file (overrides the configuration file)

    def configure(self) -> None:
        self.add_argument("numbers")


class FactorResult(BaseModel):
    n: int
    factors: list[tuple[int, int]] | None = None
    factor: int | None = None
    error: str | None = None


def format_text(results: list[FactorResult]) -> str:
    lines: list[str] = []

    for result in results:
        if result.error is not None:
            lines.append(f"{result.n}: {result.error}")
        elif result.factor is not None:
            lines.append(f"{result.n}: {result.factor}")
        elif result.factors is not None:
            lines.append(f"{result.n} = {Factorization(result.factors)}")

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    args = Arguments().parse_args(argv)

    if args.config_path is None:
        config = Config()
    else:
        try:
            config = read_config(args.config_path)
        except FileNotFoundError:
            setup_logger()
            logger.error("Configuration file not found")
            sys.exit(1)

    setup_logger(config.log_level)

    output_format = args.output_format or config.output_format
    output_path = args.output_path or config.output_path

    tdiv = TDiv31Preload()
    results: list[FactorResult] = []

    logger.info("Factoring {} number{}", len(args.numbers), "s" if len(args.numbers) != 1 else "")

    start_time = time.monotonic()

    for n in args.numbers:
        try:
            if args.single:
                results.append(FactorResult(n=n, factor=tdiv.find_single_factor(n)))
                continue

            factorization = tdiv.factor(n)
        except TDivError as e:
            logger.error("Unable to process {}: {}", n, e)
            results.append(FactorResult(n=n, error=str(e)))
            continue

        if config.verify and (factorization.n != n or not all(is_prime(p) for p in factorization)):
            logger.critical("Verification failed for {}: {}", n, factorization)
            sys.exit(4)

        results.append(FactorResult(n=n, factors=list(factorization.items())))

    duration = time.monotonic() - start_time
    failed_count = len([result for result in results if result.error is not None])

    logger.info("Processed {} numbers in {:.2f} seconds", len(results), duration)

    if output_format == "json":
        output = TypeAdapter(list[FactorResult]).dump_json(results, indent=2, exclude_none=True).decode("utf-8")
    else:
        output = format_text(results)

    print(output)

    if output_path is not None:
        safe_write(output_path, (output + "\n").encode("utf-8"))

    if failed_count > 0:
        logger.warning("{} of {} numbers were rejected", failed_count, len(results))
        sys.exit(3)
