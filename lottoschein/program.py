"""Menu-driven program that draws lotto tickets and shows them as tables."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import TextIO

from .table import BLUE, CYAN, GREEN, MAGENTA, RED, RESET, YELLOW, Ticket, render_table

_LEADING_INT = re.compile(r"[+-]?\d+")

TOO_MANY_PICKS = (
    "Die Anzahl der zu ziehenden Zahlen kann nicht größer sein als der Zahlenbereich."
)
BAD_WIDTH = "Die Anzahl der Zahlen pro Zeile muss größer als 0 sein."


class Program:
    """Reads menu choices from a text stream and prints drawn tickets."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        rng: random.Random | None = None,
        color: bool = True,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.color = color
        self.ticket = Ticket(0, 0, 0)

    def _c(self, code: str) -> str:
        return code if self.color else ""

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_token(self) -> str:
        char = self._in.read(1)
        while char and char.isspace():
            char = self._in.read(1)
        if not char:
            raise EOFError
        chars = []
        while char and not char.isspace():
            chars.append(char)
            char = self._in.read(1)
        return "".join(chars)

    def _read_int(self) -> int | None:
        match = _LEADING_INT.match(self._read_token())
        return int(match.group()) if match else None

    def _menu(self) -> str:
        reset, blue = self._c(RESET), self._c(BLUE)
        magenta, cyan = self._c(MAGENTA), self._c(CYAN)
        return (
            "Bitte wählen Sie ein Spiel aus:\n"
            f"{blue}\t\t1: Normales Lotto | 6 aus 49{reset}\n"
            f"{blue}\t\t2: Eurolotto | 5 aus 50 + 2 aus 12{reset}\n"
            f"{blue}\t\t3: {reset}\n"
            f"{magenta}\t\t4: customRunXofY{reset}\n"
            f"{magenta}\t\t5: customRunLoop{reset}\n"
            f"{cyan}\t\t6: inputNumbersIntoPool{reset}\n"
            f"{cyan}\t\t7: {reset}\n"
            f"{cyan}\t\t8: {reset}\n"
            f"{cyan}\t\t9: {reset}\n"
            f"{cyan}\t\t0: Beenden{reset}\n"
        )

    def _show(self, count: int, maximum: int, width: int) -> None:
        self.ticket = Ticket.random(count, maximum, width, self.rng)
        self._write(render_table(self.ticket, self.color))

    def run(self) -> None:
        """Show the menu until the user chooses 0 or input runs out."""
        reset = self._c(RESET)
        self._write(f"{self._c(GREEN)}:Program Started:{reset}\n")
        try:
            while True:
                self._write(self._menu())
                choice = self._read_int()
                if choice == 0:
                    self._write(f"{self._c(YELLOW)}Beenden{reset}\n")
                    return
                if choice == 1:
                    self._write("Normales Lotto\n6 aus 49\n")
                    self._show(6, 49, 7)
                elif choice == 2:
                    self._write("Eurolotto\nTable 1\n5 aus 50\n")
                    self._show(5, 50, 5)
                    self._write("Table 2\n2 aus 12\n")
                    self._show(2, 12, 6)
                elif choice == 3:
                    pass
                elif choice in (4, 6):
                    label = "customRun" if choice == 4 else "inputNumbersIntoPool"
                    self._write(f"{self._c(BLUE)}{label}{reset}\n")
                    self._custom_from_input()
                elif choice == 5:
                    self._write(f"{self._c(BLUE)}customRunLoop{reset}\n")
                    self._loop()
                elif choice in (7, 8, 9):
                    self._write("break")
                else:
                    self._write(f"{self._c(RED)}Falsche Eingabe{reset}\n")
        except EOFError:
            return

    def _ask_settings(self) -> tuple[int, int, int]:
        self._write("Lotto\n")
        self._write("Wie viele Zahlen sollen gezogen werden?\n")
        count = self._read_int() or 0
        self._write("Wie viele Zahlen sollen zur Auswahl stehen?\n")
        maximum = self._read_int() or 0
        self._write("Wie viele Zahlen sollen pro Reihe angezeigt werden?\n")
        width = self._read_int() or 0
        return count, maximum, width

    def _custom_from_input(self) -> None:
        settings = self._ask_settings()
        try:
            self.custom_run(*settings)
        except ValueError as error:
            self._write(f"{error}\n")

    def _loop(self) -> None:
        settings = self._ask_settings()
        while True:
            try:
                self.custom_run(*settings)
            except ValueError as error:
                self._write(f"{error}\n")
                return
            if not self._in.readline():
                raise EOFError

    def custom_run(self, count: int, maximum: int, width: int) -> Ticket:
        """Draw ``count`` out of ``maximum``, print the table and return the ticket."""
        if count > maximum:
            raise ValueError(TOO_MANY_PICKS)
        if width <= 0:
            raise ValueError(BAD_WIDTH)
        ticket = Ticket.random(count, maximum, width, self.rng)
        self._write(f"{count} aus {maximum}\n")
        self.ticket = ticket
        self._write(render_table(ticket, self.color))
        return ticket


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein-program",
        description="Draw lotto tickets and show them as tables.",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="print without terminal colours"
    )
    args = parser.parse_args(argv)
    Program(color=not args.no_color).run()
    print("Program exited successfully")
    return 0