"""Lotto board: draw numbers and mark them on a table of the whole range."""

from __future__ import annotations

import argparse
import random
import re
import sys
from os import PathLike
from typing import TextIO, Union

PathType = Union[str, "PathLike[str]"]

MAX_POOL_SIZE = 30
DEFAULT_FILE = "lotto.txt"

_LEADING_INT = re.compile(r"[+-]?\d+")

_MENU = (
    "0: Exit\n1: Generate numbers\n"
    "2: lotto( 6,49, 7) - Normal Lotto\n"
    "3: lotto( 5,50,10) \n"
    "4: lotto( 2,12, 6) \n"
    "5: lotto( x, y, z) User input\n"
    "6: Clear numbers\n"
    "7 Input Pool\n"
    "Enter your choice: "
)
_SEPARATOR = "_____________________________________________\n"
_END_LINE = "_ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _ _\n"


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


def _read_int(stream: TextIO) -> int | None:
    match = _LEADING_INT.match(_read_token(stream))
    return int(match.group()) if match else None


class Lotto:
    """``size`` numbers drawn from ``range_min``..``range_max``, shown ``table_width`` per row."""

    def __init__(
        self,
        size: int = 6,
        range_max: int = 49,
        table_width: int = 10,
        rng: random.Random | None = None,
    ) -> None:
        if size > range_max:
            raise ValueError("size cannot be greater than rangeMax")
        self.size = size
        self.range_min = 1
        self.range_max = range_max
        self.table_width = table_width
        self.rng = rng if rng is not None else random.Random()
        self.numbers: list[int] = []

    def generate(self) -> list[int]:
        """Draw ``size`` numbers, repeats allowed, and append them to ``numbers``."""
        if self.size > 0 and self.range_max < self.range_min:
            raise ValueError("there is no number to draw from")
        drawn = [
            self.rng.randint(self.range_min, self.range_max) for _ in range(self.size)
        ]
        self.numbers.extend(drawn)
        return drawn

    def render(self) -> str:
        """Every number of the range, drawn ones in brackets, ``table_width`` per row."""
        if self.table_width <= 0 and self.range_max >= self.range_min:
            raise ValueError("the table width must be greater than 0")
        chosen = set(self.numbers)
        parts: list[str] = []
        for number in range(self.range_min, self.range_max + 1):
            if number in chosen:
                parts.append(f"[{number:02d}] ")
            else:
                parts.append(f" {number:02d}  ")
            if (number - self.range_min + 1) % self.table_width == 0:
                parts.append("\n")
        return "".join(parts)

    def save(self, path: PathType) -> None:
        """Write the rendered table to ``path``."""
        text = self.render()
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)


def read_pool(
    minimum: int, maximum: int, input_stream: TextIO, output_stream: TextIO
) -> list[int]:
    """Collect up to 30 unique numbers in minimum..maximum until -1 or end of input.

    Returns them in ascending order.
    """
    pool: set[int] = set()
    while len(pool) < MAX_POOL_SIZE:
        output_stream.write(
            f"Enter a number between {minimum} and {maximum} (-1 to stop): "
        )
        try:
            number = _read_int(input_stream)
        except EOFError:
            break
        if number == -1:
            break
        if number is None or not minimum <= number <= maximum:
            output_stream.write(
                f"Invalid number! Please enter a number between {minimum} and {maximum}.\n"
            )
            continue
        if number in pool:
            output_stream.write(
                "Number already exists! Please enter a different number.\n"
            )
            continue
        pool.add(number)
    return sorted(pool)


class Controller:
    """Menu that switches the board between game settings and draws numbers."""

    PRESETS = {2: (6, 49, 7), 3: (5, 50, 10), 4: (2, 12, 6)}

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.lotto = Lotto(0, 0, 0, rng)
        self.pool: list[int] = []
        defaults = Lotto()
        self._pool_range = (defaults.range_min, defaults.range_max)

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _generate_and_show(self) -> None:
        self.lotto.generate()
        self._write(self.lotto.render())

    def run(self) -> None:
        """Show the menu until the user chooses 0 or input runs out."""
        try:
            self._loop()
        except EOFError:
            return
        self._write(_END_LINE)

    def _loop(self) -> None:
        while True:
            self._write(_MENU)
            choice = _read_int(self._in)
            if choice == 0:
                self._write("Goodbye!\n")
                return
            if choice == 1:
                self._generate_and_show()
            elif choice in self.PRESETS:
                size, range_max, width = self.PRESETS[choice]
                self.lotto.size = size
                self.lotto.range_max = range_max
                self.lotto.table_width = width
                self._generate_and_show()
            elif choice == 5:
                self._user_input()
            elif choice == 6:
                self.lotto.numbers = []
            else:
                if choice == 7:
                    minimum, maximum = self._pool_range
                    self.pool = read_pool(minimum, maximum, self._in, self._out)
                self._write(_SEPARATOR)

    def _user_input(self) -> None:
        self._write("Enter the amount of numbers to be picked: ")
        limit = _read_int(self._in) or 0
        self.lotto.size = limit
        for _ in range(limit):
            self._write(
                f"Enter a number between {self.lotto.range_min} "
                f"and {self.lotto.range_max}: "
            )
            number = _read_int(self._in)
            self.lotto.numbers.append(number if number is not None else 0)
        self._write(self.lotto.render())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-board",
        description="Draw lotto numbers and mark them on a board.",
    )
    parser.parse_args(argv)
    Controller().run()
    return 0