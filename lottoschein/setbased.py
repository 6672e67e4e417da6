"""Lotto numbers kept as a set, saved to and loaded from text files."""

from __future__ import annotations

import argparse
import random
import re
import sys
from os import PathLike
from typing import TextIO, Union

PathType = Union[str, "PathLike[str]"]

NORMAL_FILE = "normal_lotto.txt"
EURO_FILE = "euro_lotto.txt"
EURO_MAIN_COUNT = 5
EURO_MAIN_MAX = 50
EURO_STAR_COUNT = 2
EURO_STAR_MAX = 12

_LEADING_INT = re.compile(r"[+-]?\d+")


class NumberSet:
    """A set of up to ``count`` numbers out of 1..maximum, ``line_break`` per row."""

    def __init__(
        self,
        count: int,
        maximum: int,
        line_break: int,
        rng: random.Random | None = None,
    ) -> None:
        self.count = count
        self.maximum = maximum
        self.line_break = line_break
        self.rng = rng if rng is not None else random.Random()
        self.numbers: set[int] = set()

    def generate(self) -> None:
        """Add random numbers until the set holds ``count`` of them."""
        if self.count > self.maximum and len(self.numbers) < self.count:
            raise ValueError(
                f"cannot hold {self.count} distinct numbers out of 1..{self.maximum}"
            )
        while len(self.numbers) < self.count:
            self.numbers.add(self.rng.randint(1, self.maximum))

    def save(self, path: PathType) -> None:
        """Write one number per line in ascending order."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(f"{number}\n" for number in sorted(self.numbers))

    def load(self, path: PathType) -> None:
        """Add the numbers stored in ``path``; reading stops at the first non-integer."""
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        for token in text.split():
            try:
                self.numbers.add(int(token))
            except ValueError:
                break

    def format(self) -> str:
        """Every number of the range with a running pick counter, ``line_break`` per row.

        Picked numbers show how many picked numbers came before them; the
        others show 0.
        """
        if self.line_break <= 0 and self.maximum >= 1:
            raise ValueError("the line break must be greater than 0")
        parts: list[str] = []
        seen = 0
        for number in range(1, self.maximum + 1):
            if number in self.numbers:
                parts.append(f"({seen}x){number:02d}, ")
                seen += 1
            else:
                parts.append(f"(0x){number:02d}, ")
            if number % self.line_break == 0:
                parts.append("\n")
        return "".join(parts)


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


class LottoController:
    """Menu for normal lotto and Eurolotto, entering or generating numbers."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        rng: random.Random | None = None,
        normal_file: PathType = NORMAL_FILE,
        euro_file: PathType = EURO_FILE,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        rng = rng if rng is not None else random.Random()
        self.normal = NumberSet(6, 49, 7, rng)
        self.euro = NumberSet(EURO_MAIN_COUNT + EURO_STAR_COUNT, EURO_MAIN_MAX, 10, rng)
        self.normal_file = normal_file
        self.euro_file = euro_file

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_number(self) -> int:
        number = _read_int(self._in)
        return number if number is not None else 0

    def run(self) -> None:
        """Show the menu until the user chooses 4 or input runs out."""
        try:
            while True:
                self._write(
                    "Menu:\n1. Normal Lotto\n2. Euro Lotto\n3. Load Numbers\n"
                    "4. Exit\nEnter your choice: "
                )
                choice = _read_int(self._in)
                if choice == 1:
                    self._play_normal()
                elif choice == 2:
                    self._play_euro()
                elif choice == 3:
                    self._write("Enter the filename: ")
                    filename = _read_token(self._in)
                    self._load(self.normal, filename)
                    self._write(self.normal.format())
                elif choice == 4:
                    self._write("Exiting...\n")
                else:
                    self._write("Invalid choice. Please try again.\n")
                self._write("\n")
                if choice == 4:
                    return
        except EOFError:
            return

    def _ask_input_type(self) -> str | None:
        self._write("Enter numbers manually (M) or generate random numbers (R)? ")
        kind = _read_token(self._in)[0].upper()
        if kind in ("M", "R"):
            return kind
        self._write("Invalid input.\n")
        return None

    def _play_normal(self) -> None:
        kind = self._ask_input_type()
        if kind is None:
            return
        numbers = self.normal
        if kind == "M":
            self._write(
                f"Enter {numbers.count} numbers between 1 and {numbers.maximum}: "
            )
            for _ in range(numbers.count):
                numbers.numbers.add(self._read_number())
        else:
            numbers.generate()
        self._store_and_show(numbers, self.normal_file)

    def _play_euro(self) -> None:
        kind = self._ask_input_type()
        if kind is None:
            return
        numbers = self.euro
        if kind == "M":
            self._write(f"Enter {EURO_MAIN_COUNT} numbers between 1 and {EURO_MAIN_MAX}: ")
            for _ in range(numbers.count - EURO_STAR_COUNT):
                numbers.numbers.add(self._read_number())
            self._write(f"Enter {EURO_STAR_COUNT} numbers between 1 and {EURO_STAR_MAX}: ")
            # Stars are stored shifted past the main range to keep them apart.
            for _ in range(EURO_STAR_COUNT):
                numbers.numbers.add(self._read_number() + EURO_MAIN_MAX)
        else:
            numbers.generate()
        self._store_and_show(numbers, self.euro_file)

    def _store_and_show(self, numbers: NumberSet, path: PathType) -> None:
        try:
            numbers.save(path)
        except OSError:
            self._write(f"Unable to open file: {path}\n")
        else:
            self._write(f"Numbers saved to file: {path}\n")
        self._load(numbers, path)
        self._write(numbers.format())

    def _load(self, numbers: NumberSet, path: PathType) -> None:
        try:
            numbers.load(path)
        except OSError:
            self._write(f"Unable to open file: {path}\n")
        else:
            self._write(f"Numbers loaded from file: {path}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-sets",
        description="Enter or generate lotto numbers and keep them in files.",
    )
    parser.add_argument("--normal-file", default=NORMAL_FILE)
    parser.add_argument("--euro-file", default=EURO_FILE)
    args = parser.parse_args(argv)
    LottoController(normal_file=args.normal_file, euro_file=args.euro_file).run()
    return 0