"""Guessing game: enter a tip, compare it with a random draw, pick tips from a pool."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from typing import TextIO

from .quicktip import _read_int as _read_int_or_none
from .quicktip import _rng_or_default

_DUPLICATE = "Duplicate number. Please enter a unique number.\n"


def _invalid(maximum: int) -> str:
    return f"Invalid number. Please enter a number between 1 and {maximum}:\n"


def _join(numbers: Iterable[int]) -> str:
    return ", ".join(str(n) for n in numbers)


def _read_int(stream: TextIO) -> int:
    number = _read_int_or_none(stream)
    return 0 if number is None else number


class LottoGame:
    """A player's tip of ``count`` numbers out of 1..maximum and a winning draw."""

    def __init__(
        self,
        count: int,
        maximum: int,
        line_width: int,
        rng: random.Random | None = None,
    ) -> None:
        self.count = count
        self.maximum = maximum
        self.line_width = line_width
        self.rng = _rng_or_default(rng)
        self.numbers: list[int] = []
        self.winning_numbers: list[int] = []

    def set_numbers(self, numbers: Iterable[int]) -> None:
        """Set the player's tip; raise ValueError unless it is valid."""
        numbers = list(numbers)
        if len(numbers) != self.count:
            raise ValueError(f"expected {self.count} numbers, got {len(numbers)}")
        if len(set(numbers)) != len(numbers):
            raise ValueError("numbers must be unique")
        if any(not 1 <= n <= self.maximum for n in numbers):
            raise ValueError(f"numbers must lie between 1 and {self.maximum}")
        self.numbers = numbers

    def generate_winning_numbers(self) -> list[int]:
        """Draw distinct winning numbers in draw order and return them."""
        self.winning_numbers = self.rng.sample(range(1, self.maximum + 1), self.count)
        return list(self.winning_numbers)

    def matching_numbers(self) -> list[int]:
        """The player's numbers that were drawn, in the player's order."""
        return [n for n in self.numbers if n in self.winning_numbers]

    def format_ticket(self) -> str:
        """Show every number of the range with how often the player picked it."""
        parts = ["Your ticket:\n"]
        for number in range(1, self.maximum + 1):
            parts.append(f"{number:02d} ({self.numbers.count(number)}), ")
            if number % self.line_width == 0:
                parts.append("\n")
        parts.append("\n")
        return "".join(parts)

    def format_result(self) -> str:
        matches = sum(self.winning_numbers.count(n) for n in self.numbers)
        if matches == self.count:
            return "Congratulations, you won!\n"
        return (
            "Sorry, you didn't win this time. "
            f"You had {matches} matching numbers.\n"
        )

    def pick_from_pool(self, pool: Iterable[int]) -> list[int]:
        """Pick ``count`` distinct entries of the pool in random order."""
        pool = list(pool)
        if len(pool) < self.count:
            raise ValueError(f"pool holds {len(pool)} numbers, {self.count} needed")
        return self.rng.sample(pool, self.count)


def read_unique_numbers(
    count: int, maximum: int, input_stream: TextIO, output_stream: TextIO
) -> list[int]:
    """Ask for ``count`` unique numbers in 1..maximum until each one is valid.

    Raises EOFError if the input ends first.
    """
    output_stream.write(f"Enter {count} unique numbers between 1 and {maximum}:\n")
    # Slots not yet filled hold 0, so 0 counts as already taken.
    slots = [0] * count
    for index in range(count):
        while True:
            number = _read_int(input_stream)
            if number in slots:
                output_stream.write(_DUPLICATE)
            elif 1 <= number <= maximum:
                slots[index] = number
                break
            else:
                output_stream.write(_invalid(maximum))
    return slots


def read_pool(maximum: int, input_stream: TextIO, output_stream: TextIO) -> list[int]:
    """Collect unique numbers in 1..maximum until -1 or the end of input."""
    output_stream.write(
        f"Enter unique numbers between 1 and {maximum} to form a pool (-1 to stop):\n"
    )
    pool: list[int] = []
    while True:
        try:
            number = _read_int(input_stream)
        except EOFError:
            break
        if number == -1:
            break
        if number in pool:
            output_stream.write(_DUPLICATE)
        elif 1 <= number <= maximum:
            pool.append(number)
        else:
            output_stream.write(_invalid(maximum))
    output_stream.write(f"Pool: {_join(pool)}\n")
    return pool


def play(
    count: int,
    maximum: int,
    line_width: int,
    input_stream: TextIO,
    output_stream: TextIO,
) -> LottoGame:
    """Run one full round and return the game that was played."""
    game = LottoGame(count, maximum, line_width)
    write = output_stream.write

    write("getNumbers\n")
    game.set_numbers(read_unique_numbers(count, maximum, input_stream, output_stream))

    write("generateNumbers\n")
    game.generate_winning_numbers()

    write("printWinningNumbers\n")
    write("Winning numbers:\n" + "".join(f"{n} " for n in game.winning_numbers) + "\n")

    write("printTicket\n")
    write(game.format_ticket())

    write("checkTicket\n")
    write(game.format_result())

    write("printMatchingNumbers\n")
    write(f"You had following matching numbers: {_join(game.matching_numbers())}\n")

    write("getNumbersFromPool\n")
    selected = game.pick_from_pool(read_pool(maximum, input_stream, output_stream))
    write(f"Your numbers: {_join(selected)}\n")
    return game


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-guessing",
        description="Play 6 aus 49, 5 aus 50 and 2 aus 12 against a random draw.",
    )
    parser.parse_args(argv)
    out = sys.stdout
    out.write("Welcome to the Lotto Game!\n")
    rounds = (
        ("Lotto 6 aus 49", 6, 49, 7),
        ("Lotto 5 aus 50", 5, 50, 10),
        ("Lotto 2 aus 12", 2, 12, 6),
    )
    try:
        for title, count, maximum, width in rounds:
            out.write(f"{title}\n")
            play(count, maximum, width, sys.stdin, out)
    except EOFError:
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0