"""Lotto tickets drawn at random and rendered as a table with superscript counts."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass, field

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

_SUPERSCRIPTS = ("⁰", "¹", "²", "³", "⁴", "⁵", "⁶", "⁷", "⁸", "⁹")


@dataclass(frozen=True)
class Ticket:
    """A ticket of ``number_count`` numbers out of 1..maximum, shown ``width`` per row.

    ``amounts`` maps each picked number to how often it was picked; ``drawn``
    keeps the picked numbers in the order they came out of the draw.
    """

    number_count: int
    maximum: int
    width: int
    amounts: Mapping[int, int] = field(default_factory=dict)
    drawn: tuple[int, ...] = ()

    @classmethod
    def random(
        cls,
        count: int,
        maximum: int,
        width: int,
        rng: random.Random | None = None,
    ) -> Ticket:
        """Draw ``count`` distinct numbers from 1..maximum, each counted once."""
        if count < 0:
            raise ValueError("the number of picks cannot be negative")
        if count > maximum:
            raise ValueError(
                f"cannot pick {count} numbers out of a range of {maximum}"
            )
        if width <= 0:
            raise ValueError("the table width must be greater than 0")
        rng = rng if rng is not None else random.Random()
        numbers = list(range(1, maximum + 1))
        rng.shuffle(numbers)
        drawn = tuple(numbers[:count])
        return cls(count, maximum, width, {n: 1 for n in drawn}, drawn)

    def count(self, number: int) -> int:
        """How often ``number`` was picked; 0 if it was not."""
        return self.amounts.get(number, 0)


def to_superscript(number: int) -> str:
    """Write a non-negative integer with superscript digits."""
    if number < 0:
        raise ValueError("only non-negative numbers have a superscript form")
    return "".join(_SUPERSCRIPTS[int(digit)] for digit in str(number))


def render_table(ticket: Ticket, color: bool = True) -> str:
    """Render every number of the ticket's range with its pick count as a superscript."""
    if ticket.width <= 0:
        raise ValueError("the table width must be greater than 0")
    reset, blue, yellow = (RESET, BLUE, YELLOW) if color else ("", "", "")
    rule = f"{reset}------\t" * ticket.width + "\n"

    parts = [
        "Ihr Lottoschein:\n",
        f"\nLegende: {blue}Zahl{reset}^ {yellow}Anzahl {reset}\n",
        "\n",
        rule,
    ]
    for number in range(1, ticket.maximum + 1):
        parts.append(f"{reset}|{blue} {number:02d}{reset}")
        amount = ticket.count(number)
        if amount:
            parts.append(f"{yellow}{to_superscript(amount)}")
        else:
            parts.append(f"{reset}⁰")
        parts.append("\t")
        if number % ticket.width == 0:
            parts.append("\n")
    parts.append(rule)
    parts.append("\n")
    return "".join(parts)