# lottoschein

Console tools for filling in lottery tickets: Lotto 6 aus 49 and
Eurolotto (5 aus 50 plus 2 aus 12). Numbers are drawn at random or
picked from a pool of your own numbers, shown as tables with how often
each number came up, and saved to and loaded from plain text files.

Pure Python, no dependencies, Python 3.10 or later.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Commands

All commands read their answers from standard input and stop when you
choose the exit entry or the input ends.

### `lottoschein`

The main program. Its menu offers:

1. Lotto 6 aus 49
2. Eurolotto
3. Enter own numbers (up to 30, `-1` finishes, a number already entered is refused)
4. Save manual numbers
5. Load manual numbers
6. End program

When generating, you give the number of tickets and answer `y` or `n`
to using your own numbers. A Lotto 6 aus 49 ticket is taken from your
own numbers when at least six of them lie in 1..49; otherwise it is
drawn at random. For Eurolotto, own numbers in 1..50 form the main pool
and only own numbers in 1..12 that fall outside that range would form
the euro pool, so Eurolotto tickets come out drawn at random. Each run
ends with the frequency distribution of the drawn numbers.

Manual numbers are kept in `manual_numbers.txt`; `--file PATH` chooses
another file. The file starts with the name of its system, and loading
it into the other system fails with a message.

### `lottoschein-quicktip`

Menu: Lotto 6 aus 49, Eurolotto, enter own numbers (up to 30 in 1..49,
`-1` ends, stored in the file), show the frequency of all drawn numbers,
end. If stored numbers exist, you are asked (`j`/`n`) whether to draw
from them. `--file PATH` sets the file (default `manual_numbers.txt`).

### `lottoschein-guess`

Three rounds: 6 aus 49, 5 aus 50 and 2 aus 12. In each you type your
unique numbers, then see the winning numbers, your ticket, whether you
won and which numbers matched; finally you enter a pool (`-1` ends) and
numbers are picked from it.

### `lottoschein-program`

Coloured ticket tables with superscript counts: normal Lotto, Eurolotto
as two tables, and custom "x aus y" draws, once or repeatedly.
`--no-color` prints without terminal colours.

### `lottoschein-board`

A board of the whole range with the picked numbers in brackets:
generate numbers, switch to 6/49, 5/50 or 2/12, enter numbers by hand,
clear them, or enter a pool of up to 30 numbers.

### `lottoschein-sets`

Enter or generate numbers for normal Lotto or Euro Lotto, save them to
a file, load them back and print the tally; or load numbers from a file
you name. `--normal-file` and `--euro-file` set the files (defaults
`normal_lotto.txt` and `euro_lotto.txt`).

### `lottoschein-pool`

Draws a 6 aus 49 tip, or lets you enter numbers or custom settings, and
then collects a pool of numbers until `-1`.

## Using it from Python

    import random
    from lottoschein.systems import Eurolotto, Lotto6aus49, WrongSystemError

    lotto = Lotto6aus49(random.Random(7))
    for number in (3, 7, 12, 19, 28, 41, 45):
        lotto.add_manual_number(number)   # ValueError on a duplicate
    lotto.use_manual = True
    lotto.ticket_count = 3
    lotto.generate()
    print(lotto.format_tickets())
    print(lotto.format_frequencies())

    lotto.save_manual_numbers("manual_numbers.txt")
    try:
        Eurolotto().load_manual_numbers("manual_numbers.txt")
    except WrongSystemError:
        print("saved for another system")

Other building blocks:

- `lottoschein.quicktip.generate(count, maximum, rng)` – sorted distinct
  numbers from 1 to `maximum`; `Lotto649`, `EuroLotto`,
  `FrequencyTracker` and `NumberStorage`.
- `lottoschein.guessing.LottoGame` – a tip, a winning draw, matches and
  picks from a pool.
- `lottoschein.table.Ticket.random(count, maximum, width, rng)`,
  `render_table(ticket, color)` and `to_superscript(number)`.
- `lottoschein.tally.Tally` – per-number counts, saved as `0xNN: count`
  lines, with `format_hex_table`, `format_pairs` and `format_dashes`.
- `lottoschein.board.Lotto` – draws with repeats and a bracketed board.
- `lottoschein.setbased.NumberSet` – a set of numbers with save, load
  and a running-count table.
- `lottoschein.pool` – `read_pool`, `draw_from_pool`, `draw_numbers`,
  `format_numbers`, `save_lines` and `load_lines`.

Every class and function that draws numbers takes a `random.Random`
instance, so a seeded generator gives repeatable tickets.

## What it does not do

There is no command or function that prints a quick pick together with
a zero-padded count of every number in the range; the count tables
available are those of `Tally`, `LottoGame.format_ticket`,
`NumberSet.format` and `render_table`. Nothing is checked against real
draw results, and there is no graphical interface.