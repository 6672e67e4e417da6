"""Lottery systems: 6 aus 49 and Eurolotto with manual pools and frequency counts."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Iterable
from os import PathLike
from typing import Union

PathType = Union[str, "PathLike[str]"]


class WrongSystemError(ValueError):
    """Raised when a saved number file belongs to another lottery system."""


class LotterySystem(ABC):
    """Common state of a lottery system: manual pool, drawn tickets, frequencies."""

    def __init__(self, name: str, rng: random.Random | None = None) -> None:
        self.name = name
        self.ticket_count = 1
        self.use_manual = False
        self._manual: list[int] = []
        self.tickets: list[list[int]] = []
        self.frequencies: Counter[int] = Counter()
        self.rng = rng if rng is not None else random.Random()

    @property
    def manual_numbers(self) -> list[int]:
        """The manually entered numbers, in the order they were added."""
        return list(self._manual)

    def clear(self) -> None:
        """Forget the drawn tickets and their frequencies."""
        self.tickets.clear()
        self.frequencies.clear()

    def add_manual_number(self, number: int) -> None:
        """Add a number to the manual pool; raise ValueError on a duplicate."""
        if number in self._manual:
            raise ValueError(f"number {number} already entered")
        self._manual.append(number)

    def clear_manual_numbers(self) -> None:
        self._manual.clear()

    def save_manual_numbers(self, path: PathType) -> None:
        """Write the system name and then one manual number per line."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{self.name}\n")
            handle.writelines(f"{number}\n" for number in self._manual)

    def load_manual_numbers(self, path: PathType) -> None:
        """Replace the manual pool with the numbers saved for this system.

        Raises WrongSystemError if the file was saved by another system; the
        current pool is then left untouched. Reading stops at the first token
        that is not an integer, and duplicates are skipped.
        """
        with open(path, encoding="utf-8") as handle:
            header = handle.readline().rstrip("\n")
            if header != self.name:
                raise WrongSystemError(
                    f"file holds numbers for {header!r}, not {self.name!r}"
                )
            rest = handle.read()
        self.clear_manual_numbers()
        for token in rest.split():
            try:
                number = int(token)
            except ValueError:
                break
            if number not in self._manual:
                self._manual.append(number)

    def update_frequencies(self, numbers: Iterable[int]) -> None:
        self.frequencies.update(numbers)

    def _random_pick(self, maximum: int, count: int) -> list[int]:
        return self.rng.sample(range(1, maximum + 1), count)

    @abstractmethod
    def generate(self) -> None:
        """Draw ``ticket_count`` tickets, replacing earlier ones."""

    @abstractmethod
    def format_tickets(self) -> str:
        """Render the drawn tickets as text."""

    def format_frequencies(self) -> str:
        lines = [f"\nFrequency Distribution for {self.name}:"]
        lines.extend(
            f"Number {number}: {count} times"
            for number, count in sorted(self.frequencies.items())
        )
        return "\n".join(lines) + "\n"


class Lotto6aus49(LotterySystem):
    """Six numbers out of 1..49."""

    MAX_NUMBER = 49
    NUMBERS_PER_TICKET = 6

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("Lotto 6 aus 49", rng)

    def generate(self) -> None:
        self.clear()
        for _ in range(self.ticket_count):
            pool = (
                [n for n in self._manual if 1 <= n <= self.MAX_NUMBER]
                if self.use_manual
                else []
            )
            if len(pool) >= self.NUMBERS_PER_TICKET:
                ticket = self.rng.sample(pool, self.NUMBERS_PER_TICKET)
            else:
                ticket = self._random_pick(self.MAX_NUMBER, self.NUMBERS_PER_TICKET)
            ticket.sort()
            self.tickets.append(ticket)
            self.update_frequencies(ticket)

    def format_tickets(self) -> str:
        lines = [f"\n--- {self.name} Ticket ---"]
        for index, ticket in enumerate(self.tickets, start=1):
            lines.append(f"Ticket {index}: " + "".join(f"{n} " for n in ticket))
        return "\n".join(lines) + "\n"


class Eurolotto(LotterySystem):
    """Five main numbers out of 1..50 plus two euro numbers out of 1..12."""

    MAX_MAIN_NUMBER = 50
    MAX_EURO_NUMBER = 12
    MAIN_NUMBERS_PER_TICKET = 5
    EURO_NUMBERS_PER_TICKET = 2

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("Eurolotto", rng)
        self.euro_tickets: list[list[int]] = []
        self.euro_frequencies: Counter[int] = Counter()

    def clear(self) -> None:
        super().clear()
        self.euro_tickets.clear()
        self.euro_frequencies.clear()

    def _manual_pools(self) -> tuple[list[int], list[int]]:
        main_pool: list[int] = []
        euro_pool: list[int] = []
        for number in self._manual:
            if 1 <= number <= self.MAX_MAIN_NUMBER:
                main_pool.append(number)
            elif 1 <= number <= self.MAX_EURO_NUMBER:
                euro_pool.append(number)
        return main_pool, euro_pool

    def generate(self) -> None:
        self.clear()
        for _ in range(self.ticket_count):
            main_pool, euro_pool = self._manual_pools() if self.use_manual else ([], [])
            if (
                len(main_pool) >= self.MAIN_NUMBERS_PER_TICKET
                and len(euro_pool) >= self.EURO_NUMBERS_PER_TICKET
            ):
                main = self.rng.sample(main_pool, self.MAIN_NUMBERS_PER_TICKET)
                euro = self.rng.sample(euro_pool, self.EURO_NUMBERS_PER_TICKET)
            else:
                main = self._random_pick(
                    self.MAX_MAIN_NUMBER, self.MAIN_NUMBERS_PER_TICKET
                )
                euro = self._random_pick(
                    self.MAX_EURO_NUMBER, self.EURO_NUMBERS_PER_TICKET
                )
            main.sort()
            euro.sort()
            self.tickets.append(main)
            self.euro_tickets.append(euro)
            self.update_frequencies(main)
            self.euro_frequencies.update(euro)

    def format_tickets(self) -> str:
        lines = [f"\n--- {self.name} Ticket ---"]
        for index, (main, euro) in enumerate(
            zip(self.tickets, self.euro_tickets), start=1
        ):
            lines.append(
                f"Ticket {index}: Main numbers: "
                + "".join(f"{n} " for n in main)
                + "| Euro numbers: "
                + "".join(f"{n} " for n in euro)
            )
        return "\n".join(lines) + "\n"

    def format_frequencies(self) -> str:
        lines = ["\nFrequency Distribution for Euro Numbers:"]
        lines.extend(
            f"Euro Number {number}: {count} times"
            for number, count in sorted(self.euro_frequencies.items())
        )
        return super().format_frequencies() + "\n".join(lines) + "\n"