"""Number pools: enter numbers by hand, draw from them, and keep lines in files."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections.abc import Iterable
from os import PathLike
from typing import TextIO, Union

PathType = Union[str, "PathLike[str]"]

_LEADING_INT = re.compile(r"[+-]?\d+")


def _read_token(stream: TextIO) -> str:
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise EOFError
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def _read_int(stream: TextIO) -> int:
    match = _LEADING_INT.match(_read_token(stream))
    return int(match.group()) if match else 0


def read_pool(maximum: int, input_stream: TextIO, output_stream: TextIO) -> list[int]:
    """Collect numbers in 1..maximum until -1 or the end of input.

    Duplicates are kept once; the pool is returned in ascending order.
    """
    pool: set[int] = set()
    while True:
        output_stream.write(f"Enter a number between 1 and {maximum}\n")
        try:
            number = _read_int(input_stream)
        except EOFError:
            break
        if number == -1:
            break
        if 0 < number <= maximum:
            pool.add(number)
        else:
            output_stream.write("Wrong input\n")
    return sorted(pool)


def draw_from_pool(
    pool: Iterable[int], count: int, rng: random.Random | None = None
) -> list[int]:
    """Pick up to ``count`` distinct pool entries; fewer if the pool runs out."""
    rng = rng if rng is not None else random.Random()
    candidates = list(dict.fromkeys(pool))
    take = max(0, min(count, len(candidates)))
    return sorted(rng.sample(candidates, take))


def draw_numbers(
    count: int, maximum: int, rng: random.Random | None = None
) -> list[int]:
    """Draw ``count`` distinct numbers from 1..maximum in ascending order."""
    if count <= 0:
        return []
    if count > maximum:
        raise ValueError(f"cannot draw {count} distinct numbers out of 1..{maximum}")
    rng = rng if rng is not None else random.Random()
    return sorted(rng.sample(range(1, maximum + 1), count))


def format_numbers(numbers: Iterable[int], width: int) -> str:
    """Each number right-aligned in a field of ``width``, then a line break."""
    return "".join(str(n).rjust(width) for n in numbers) + "\n"


def save_lines(path: PathType, lines: Iterable[str]) -> None:
    """Write each line to ``path`` followed by a line break."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def load_lines(path: PathType) -> list[str]:
    """Read the lines of ``path`` without their line breaks."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def _run(input_stream: TextIO, output_stream: TextIO, rng: random.Random) -> list[int]:
    write = output_stream.write
    write(
        "Welcome to the Lotto-Programm\n"
        "1. Lotto 6 aus 49\n"
        "2. Eurolotto\n"
        "3. manual input\n"
        "4. custom\n"
        "5. Exit\n"
    )
    maximum = 0
    try:
        choice = _read_int(input_stream)
    except EOFError:
        return []
    if choice in (1, 2):
        write("Lotto 6 aus 49\n")
        maximum = 49
        write(format_numbers(draw_numbers(6, maximum, rng), 7))
    elif choice == 3:
        write("Manual input\n")
        maximum = 49
        read_pool(maximum, input_stream, output_stream)
    elif choice == 4:
        write("Custom\n")
        try:
            write("How many numbers do you want to play?\n")
            _read_int(input_stream)
            write("How many numbers are in the pool?\n")
            maximum = _read_int(input_stream)
            write("How many numbers do you want to display?\n")
            _read_int(input_stream)
        except EOFError:
            return []
    elif choice == 5:
        write("Exit\n")
    else:
        write("Wrong input\n")
    return read_pool(maximum, input_stream, output_stream)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-pool",
        description="Draw 6 aus 49 numbers and enter a number pool by hand.",
    )
    parser.parse_args(argv)
    _run(sys.stdin, sys.stdout, random.Random())
    return 0