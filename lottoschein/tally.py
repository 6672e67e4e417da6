"""Tally of how often each number of a lotto range was drawn or entered."""

from __future__ import annotations

import random
from collections.abc import Iterable
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]


class Tally:
    """Counts per number of 1..maximum, shown ``width`` numbers per row."""

    def __init__(self, maximum: int, width: int) -> None:
        if width <= 0:
            raise ValueError("the table width must be greater than 0")
        self.maximum = maximum
        self.width = width
        self.counts: dict[int, int] = {n: 0 for n in range(1, maximum + 1)}

    def draw(self, count: int, rng: random.Random | None = None) -> list[int]:
        """Draw ``count`` numbers from 1..maximum, repeats allowed, and count them."""
        if count < 0:
            raise ValueError("the number of draws cannot be negative")
        if self.maximum < 1:
            raise ValueError("there is no number to draw from")
        rng = rng if rng is not None else random.Random()
        numbers = [rng.randint(1, self.maximum) for _ in range(count)]
        self.add(numbers)
        return numbers

    def add(self, numbers: Iterable[int]) -> None:
        """Count each of ``numbers`` once more; lays tickets on top of each other."""
        for number in numbers:
            self.counts[number] = self.counts.get(number, 0) + 1

    def save(self, path: PathType) -> None:
        """Write one ``0xNN: count`` line for every number of the range."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(
                f"0x{n:02d}: {self.counts.get(n, 0)}\n"
                for n in range(1, self.maximum + 1)
            )

    def load(self, path: PathType) -> None:
        """Set counts from a file written by :meth:`save`.

        Lines without ``": "`` are skipped; a malformed number raises ValueError.
        """
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                key, sep, value = line.rstrip("\n").partition(": ")
                if not sep:
                    continue
                key = key.strip()
                if key[:2].lower() == "0x":
                    key = key[2:]
                self.counts[int(key)] = int(value)

    def format_hex_table(self) -> str:
        """Labels row by row, then counts row by row, as three-digit fields."""
        parts: list[str] = []
        for n in range(1, self.maximum + 1):
            if n % self.width == 1:
                parts.append("\n")
            parts.append(f"0x{n:02d} ")
        parts.append("\n\n")
        for n in range(1, self.maximum + 1):
            if n % self.width == 1:
                parts.append("\n")
            parts.append(f"{self.counts.get(n, 0):03d} ")
        parts.append("\n\n")
        return "".join(parts)

    def format_pairs(self) -> str:
        """``number|count`` pairs, ``width`` per row."""
        numbers = list(range(1, self.maximum + 1))
        rows = (
            "".join(f"{n}|{self.counts.get(n, 0)} " for n in numbers[i : i + self.width])
            for i in range(0, len(numbers), self.width)
        )
        return "\n".join(rows)

    def format_dashes(self) -> str:
        """A ticket sheet with a ``-NN|count -`` cell for every number."""
        parts = ["Lottoschein: \n", "Lottoscheinzahlen|Anzahl: \n"]
        for n in range(1, self.maximum + 1):
            parts.append(f"-{n:02d}|{self.counts.get(n, 0)} -\t")
            if n % self.width == 0:
                parts.append("\n")
        return "".join(parts)