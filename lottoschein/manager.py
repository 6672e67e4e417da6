"""Interactive menu around the 6 aus 49 and Eurolotto systems."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import TextIO

from .systems import Eurolotto, LotterySystem, Lotto6aus49, WrongSystemError

DEFAULT_FILE = "manual_numbers.txt"
MAX_MANUAL_NUMBERS = 30

_MENU = (
    "\n=== Lottery Program Menu ===\n"
    "1 - Lotto 6 aus 49\n"
    "2 - Eurolotto\n"
    "3 - Enter own numbers\n"
    "4 - Save manual numbers\n"
    "5 - Load manual numbers\n"
    "6 - End program\n"
    "Enter your choice: "
)

_LEADING_INT = re.compile(r"[+-]?\d+")


class LotteryManager:
    """Reads menu choices from a text stream and drives the lottery systems."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        path: str = DEFAULT_FILE,
        rng: random.Random | None = None,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.path = path
        rng = rng if rng is not None else random.Random()
        self.lotto6aus49 = Lotto6aus49(rng)
        self.eurolotto = Eurolotto(rng)
        self.current: LotterySystem = self.lotto6aus49

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _next_token(self) -> str:
        while True:
            line = self._in.readline()
            if not line:
                raise EOFError
            token = line.strip()
            if token:
                return token

    def _read_int(self) -> int:
        match = _LEADING_INT.match(self._next_token())
        return int(match.group()) if match else 0

    def _read_char(self) -> str:
        return self._next_token()[0]

    def run(self) -> None:
        """Show the menu until the user ends the program or input runs out."""
        actions = {
            1: lambda: self._play(self.lotto6aus49),
            2: lambda: self._play(self.eurolotto),
            3: self._enter_own_numbers,
            4: self._save,
            5: self._load,
        }
        try:
            while True:
                self._write(_MENU)
                choice = self._read_int()
                if choice == 6:
                    self._write("Ending program. Goodbye!\n")
                    return
                action = actions.get(choice)
                if action is None:
                    self._write("Invalid choice. Please try again.\n")
                else:
                    action()
        except EOFError:
            return

    def _play(self, system: LotterySystem) -> None:
        self.current = system
        self._write(f"\nSelected system: {system.name}\n")
        self._write("Enter number of tickets to generate: ")
        system.ticket_count = self._read_int()
        self._write("Use manually entered numbers? (y/n): ")
        system.use_manual = self._read_char() in ("y", "Y")
        system.generate()
        self._write(system.format_tickets())
        self._write(system.format_frequencies())

    def _enter_own_numbers(self) -> None:
        self._write(
            "\n=== Enter Own Numbers ===\n"
            "Select lottery system:\n"
            "1 - Lotto 6 aus 49\n"
            "2 - Eurolotto\n"
            "Enter your choice: "
        )
        choice = self._read_int()
        if choice == 1:
            self.current = self.lotto6aus49
        elif choice == 2:
            self.current = self.eurolotto
        else:
            self._write("Invalid choice. Returning to main menu.\n")
            return

        system = self.current
        system.clear_manual_numbers()
        self._write(f"\nEnter up to {MAX_MANUAL_NUMBERS} numbers for {system.name}\n")
        self._write("Enter -1 to finish\n")
        count = 0
        while count < MAX_MANUAL_NUMBERS:
            self._write(f"Enter number {count + 1}: ")
            number = self._read_int()
            if number == -1:
                break
            try:
                system.add_manual_number(number)
            except ValueError:
                self._write(
                    "Number already entered. Please enter a different number.\n"
                )
            else:
                count += 1
        self._write(f"\nEntered {count} numbers for {system.name}\n")
        self._write(
            "Entered numbers: "
            + "".join(f"{n} " for n in system.manual_numbers)
            + "\n"
        )

    def _save(self) -> None:
        if not self.current.manual_numbers:
            self._write("No manual numbers to save.\n")
            return
        try:
            self.current.save_manual_numbers(self.path)
        except OSError:
            self._write("Failed to save manual numbers.\n")
        else:
            self._write(f"Manual numbers saved to {self.path}\n")

    def _load(self) -> None:
        try:
            self.current.load_manual_numbers(self.path)
        except (OSError, WrongSystemError):
            self._write("Failed to load manual numbers or wrong system.\n")
            return
        self._write(f"Manual numbers loaded from {self.path}\n")
        self._write(
            "Loaded numbers: "
            + "".join(f"{n} " for n in self.current.manual_numbers)
            + "\n"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lottoschein", description="Generate Lotto 6 aus 49 and Eurolotto tickets."
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_FILE,
        help="file for saving and loading manual numbers",
    )
    args = parser.parse_args(argv)
    LotteryManager(path=args.file).run()
    return 0