"""Quick tips for Lotto 6 aus 49 and Eurolotto, drawn from a stored pool if wanted."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from typing import TextIO, Union

PathType = Union[str, "PathLike[str]"]

DEFAULT_FILE = "manual_numbers.txt"
MAX_POOL_SIZE = 30
POOL_MAXIMUM = 49

_LEADING_INT = re.compile(r"[+-]?\d+")


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _spaced(numbers: Iterable[int]) -> str:
    return " ".join(str(n) for n in numbers)


def _read_token(stream: TextIO) -> str:
    """Read the next whitespace-separated token; raise EOFError at end of input."""
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
    """Read the leading integer of the next token, or None if it has none."""
    match = _LEADING_INT.match(_read_token(stream))
    return int(match.group()) if match else None


def generate(count: int, maximum: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` distinct numbers from 1..maximum in ascending order."""
    if not 0 <= count <= maximum:
        raise ValueError(f"cannot draw {count} numbers out of 1..{maximum}")
    return sorted(_rng_or_default(rng).sample(range(1, maximum + 1), count))


class FrequencyTracker:
    """Counts how often each number has been drawn."""

    def __init__(self) -> None:
        self.counts: Counter[int] = Counter()

    def update(self, numbers: Iterable[int]) -> None:
        self.counts.update(numbers)

    def format(self) -> str:
        lines = ["Häufigkeit aller gezogenen Zahlen:"]
        lines.extend(f"{number}: {count}" for number, count in sorted(self.counts.items()))
        return "\n".join(lines) + "\n"


@dataclass
class NumberStorage:
    """Stores a list of numbers in a text file, one per line."""

    path: PathType

    def save(self, numbers: Iterable[int]) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.writelines(f"{number}\n" for number in numbers)

    def load(self) -> list[int]:
        """Read the stored numbers; a missing file yields an empty list.

        Reading stops at the first token that is not an integer.
        """
        try:
            with open(self.path, encoding="utf-8") as handle:
                text = handle.read()
        except FileNotFoundError:
            return []
        numbers: list[int] = []
        for token in text.split():
            try:
                numbers.append(int(token))
            except ValueError:
                break
        return numbers


class LotteryGame:
    """A game that draws ``draw_count`` numbers from 1..maximum or from a manual pool."""

    def __init__(
        self,
        name: str,
        maximum: int,
        draw_count: int,
        rng: random.Random | None = None,
    ) -> None:
        self.name = name
        self.maximum = maximum
        self.draw_count = draw_count
        self.rng = _rng_or_default(rng)
        self.manual: list[int] = []

    def _draw_main(self) -> list[int]:
        if len(self.manual) >= self.draw_count:
            return sorted(self.rng.sample(self.manual, self.draw_count))
        return generate(self.draw_count, self.maximum, self.rng)

    def draw(self) -> list[int]:
        """Draw a sorted tip, using the manual pool when it is large enough."""
        return self._draw_main()


class Lotto649(LotteryGame):
    """Six numbers out of 49."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("Lotto 6 aus 49", 49, 6, rng)


class EuroLotto(LotteryGame):
    """Five numbers out of 50 followed by two stars out of 12."""

    STAR_COUNT = 2
    MAX_STAR = 12

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("Eurolotto", 50, 5, rng)

    def draw(self) -> list[int]:
        """Return the sorted main numbers followed by the sorted stars."""
        return self._draw_main() + generate(self.STAR_COUNT, self.MAX_STAR, self.rng)


class Application:
    """Menu that draws tips, collects a number pool and shows frequencies."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        path: PathType = DEFAULT_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        rng = _rng_or_default(rng)
        self.games: list[LotteryGame] = [Lotto649(rng), EuroLotto(rng)]
        self.storage = NumberStorage(path)
        self.tracker = FrequencyTracker()

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _menu(self) -> str:
        count = len(self.games)
        lines = ["\n--- Menu ---"]
        lines.extend(f"{index} - {game.name}" for index, game in enumerate(self.games, 1))
        extras = ("Eigene Zahlen eingeben", "Häufigkeitsverteilung anzeigen", "Ende")
        lines.extend(f"{count + offset} - {label}" for offset, label in enumerate(extras, 1))
        return "\n".join(lines) + "\nAuswahl: "

    def run(self) -> None:
        """Show the menu until the user chooses to end or input runs out."""
        count = len(self.games)
        try:
            while True:
                self._write(self._menu())
                choice = _read_int(self._in)
                if choice is None:
                    continue
                if choice == count + 3:
                    return
                if 1 <= choice <= count:
                    self._play(self.games[choice - 1])
                elif choice == count + 1:
                    self._enter_pool()
                elif choice == count + 2:
                    self._write(self.tracker.format())
                else:
                    self._write("Ungültige Auswahl\n")
        except EOFError:
            return

    def _play(self, game: LotteryGame) -> None:
        stored = self.storage.load()
        game.manual = []
        if stored:
            self._write("Es wurden gespeicherte Zahlen gefunden. Verwenden? (j/n): ")
            if _read_token(self._in)[0] in ("j", "J"):
                game.manual = stored
        numbers = game.draw()
        self._write(f"\nTipp für {game.name}:\n")
        self._write(_spaced(numbers[: game.draw_count]) + "\n")
        if isinstance(game, EuroLotto):
            self._write("Sterne: " + _spaced(numbers[game.draw_count :]) + "\n")
        self.tracker.update(numbers)

    def _enter_pool(self) -> None:
        pool: list[int] = []
        self._write(f"Gib bis zu {MAX_POOL_SIZE} Zahlen ein (-1 beendet):\n")
        while len(pool) < MAX_POOL_SIZE:
            number = _read_int(self._in)
            if number == -1:
                break
            if number is None or not 1 <= number <= POOL_MAXIMUM:
                self._write(f"Ungültig, 1-{POOL_MAXIMUM} erlaubt\n")
            elif number in pool:
                self._write("Duplikat, nochmal\n")
            else:
                pool.append(number)
        self.storage.save(pool)
        self._write("Zahlen gespeichert.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-quicktip",
        description="Draw quick tips for Lotto 6 aus 49 and Eurolotto.",
    )
    parser.add_argument(
        "--file", default=DEFAULT_FILE, help="file holding the stored number pool"
    )
    args = parser.parse_args(argv)
    Application(path=args.file).run()
    return 0