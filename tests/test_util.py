# SPDX-License-Identifier: MIT
# SPDX-FileCopyrightText: 2024 Jason Lynch <jason@aexoden.com>
"""Utility tests for tdivtool."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from loguru import logger

from tdivtool import util
from tdivtool.constants import MAX_INPUT
from tdivtool.errors import InputOutOfRangeError
from tdivtool.primes import sieve_primes
from tdivtool.util import is_prime, log_factor_result, safe_write, setup_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def messages() -> Iterator[list[str]]:
    captured: list[str] = []
    logger.enable("tdivtool")
    handler_id = logger.add(lambda message: captured.append(message.record["message"]), level="DEBUG")

    yield captured

    logger.remove(handler_id)
    logger.disable("tdivtool")


def test_is_prime() -> None:
    """Test primality checks against a sieve."""
    primes = set(sieve_primes(20000))

    assert [n for n in range(-5, 20000) if is_prime(n)] == sorted(primes)
    assert is_prime(46349)
    assert is_prime(999999937)
    assert is_prime(MAX_INPUT)
    assert not is_prime(2147117569)
    assert not is_prime(MAX_INPUT - 1)

    # Strong pseudoprimes to bases 2, 3 and 5.
    assert not is_prime(25326001)
    assert not is_prime(1373653)


def test_is_prime_out_of_range() -> None:
    """Test that primality checks are limited to 31-bit inputs."""
    with pytest.raises(InputOutOfRangeError):
        is_prime(MAX_INPUT + 1)


def test_log_factor_result(messages: list[str]) -> None:
    """Test logging a factorization."""
    log_factor_result(["TDiv31Preload"], 12, [3, 2, 2], level="DEBUG")
    log_factor_result(["TDiv31Preload"], 1, [])

    assert messages == ["TDiv31Preload -> 12 = 2 * 2 * 3", "TDiv31Preload -> 1 = 1"]


def test_setup_logger(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that log lines go to stderr and handlers installed by others are kept."""
    captured: list[str] = []
    other_id = logger.add(lambda message: captured.append(message.record["message"]), level="INFO")
    monkeypatch.setattr(util, "_handler_id", logger.add(lambda _: None))

    setup_logger("INFO")
    setup_logger("INFO")
    log_factor_result(["TDiv31Preload"], 15, [3, 5])

    output = capsys.readouterr()
    logger.remove(util._handler_id)  # noqa: SLF001
    logger.remove(other_id)
    logger.disable("tdivtool")

    assert output.out == ""
    assert output.err.count("TDiv31Preload -> 15 = 3 * 5") == 1
    assert captured == ["TDiv31Preload -> 15 = 3 * 5"]


def test_safe_write(tmp_path: Path) -> None:
    """Test atomic file replacement."""
    path = tmp_path / "results.txt"
    path.write_text("old", encoding="utf-8")

    safe_write(path, b"12 = 2^2 * 3\n")

    assert path.read_text(encoding="utf-8") == "12 = 2^2 * 3\n"
    assert [p.name for p in tmp_path.iterdir()] == ["results.txt"]
