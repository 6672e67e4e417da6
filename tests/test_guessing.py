import io
import random

import pytest

from lottoschein.guessing import (
    LottoGame,
    main,
    play,
    read_pool,
    read_unique_numbers,
)


def _game(count=6, maximum=49, width=7, seed=0):
    return LottoGame(count, maximum, width, random.Random(seed))


def test_set_numbers_accepts_valid_tip():
    game = _game()
    game.set_numbers([1, 2, 3, 4, 5, 49])
    assert game.numbers == [1, 2, 3, 4, 5, 49]


@pytest.mark.parametrize(
    "numbers",
    [[1, 2, 3, 4, 5], [1, 1, 2, 3, 4, 5], [0, 1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 50]],
)
def test_set_numbers_rejects_invalid(numbers):
    with pytest.raises(ValueError):
        _game().set_numbers(numbers)


def test_generate_winning_numbers_unique_in_range():
    game = _game(seed=3)
    winning = game.generate_winning_numbers()
    assert winning == game.winning_numbers
    assert len(set(winning)) == 6
    assert all(1 <= n <= 49 for n in winning)


def test_matching_numbers_in_player_order():
    game = _game()
    game.set_numbers([1, 2, 3, 4, 5, 6])
    game.winning_numbers = [6, 5, 40, 41, 42, 1]
    assert game.matching_numbers() == [1, 5, 6]
    assert game.format_result() == (
        "Sorry, you didn't win this time. You had 3 matching numbers.\n"
    )


def test_format_result_win():
    game = _game()
    game.set_numbers([7, 8, 9, 10, 11, 12])
    game.winning_numbers = [12, 11, 10, 9, 8, 7]
    assert game.format_result() == "Congratulations, you won!\n"
    assert sorted(game.matching_numbers()) == [7, 8, 9, 10, 11, 12]


def test_format_ticket_layout():
    game = _game(count=2, maximum=12, width=6)
    game.set_numbers([3, 12])
    lines = game.format_ticket().split("\n")
    assert lines[0] == "Your ticket:"
    assert lines[1].count("), ") == 6
    assert lines[1].startswith("01 (0), 02 (0), 03 (1), ")
    assert lines[2].endswith("12 (1), ")
    assert lines[3:] == ["", ""]


def test_pick_from_pool_subset():
    game = _game(count=3, maximum=49)
    pool = [4, 8, 15, 16, 23, 42]
    picked = game.pick_from_pool(pool)
    assert len(picked) == 3
    assert len(set(picked)) == 3
    assert set(picked) <= set(pool)
    assert pool == [4, 8, 15, 16, 23, 42]


def test_pick_from_pool_too_small():
    with pytest.raises(ValueError):
        _game().pick_from_pool([1, 2, 3])


def test_read_unique_numbers_rejects_duplicates_and_range():
    out = io.StringIO()
    numbers = read_unique_numbers(2, 49, io.StringIO("5\n5\n60\n0\n7\n"), out)
    text = out.getvalue()
    assert numbers == [5, 7]
    assert text.startswith("Enter 2 unique numbers between 1 and 49:\n")
    assert text.count("Duplicate number. Please enter a unique number.\n") == 2
    assert text.count("Invalid number. Please enter a number between 1 and 49:\n") == 1


def test_read_unique_numbers_end_of_input():
    with pytest.raises(EOFError):
        read_unique_numbers(3, 49, io.StringIO("1 2\n"), io.StringIO())


def test_read_pool_stops_at_minus_one():
    out = io.StringIO()
    pool = read_pool(12, io.StringIO("3\n3\n99\n4\n-1\n8\n"), out)
    assert pool == [3, 4]
    assert out.getvalue().endswith("Pool: 3, 4\n")
    assert "Duplicate number. Please enter a unique number.\n" in out.getvalue()


def test_read_pool_stops_at_end_of_input():
    assert read_pool(12, io.StringIO("1 2"), io.StringIO()) == [1, 2]


def test_play_runs_all_steps_in_order():
    out = io.StringIO()
    game = play(2, 12, 6, io.StringIO("1 2\n1 2 3 -1\n"), out)
    text = out.getvalue()
    markers = [
        "getNumbers\n",
        "generateNumbers\n",
        "printWinningNumbers\n",
        "printTicket\n",
        "checkTicket\n",
        "printMatchingNumbers\n",
        "getNumbersFromPool\n",
    ]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)
    assert game.numbers == [1, 2]
    assert "Pool: 1, 2, 3\n" in text
    picked = [int(n) for n in text.split("Your numbers: ")[1].strip().split(", ")]
    assert len(picked) == 2
    assert set(picked) <= {1, 2, 3}


def test_main_plays_three_rounds(monkeypatch, capsys):
    data = "1 2 3 4 5 6\n1 2 3 4 5 6 -1\n1 2 3 4 5\n1 2 3 4 5 -1\n1 2\n1 2 -1\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Welcome to the Lotto Game!\n")
    assert text.index("Lotto 5 aus 50\n") < text.index("Lotto 2 aus 12\n")
    assert text.count("Your numbers: ") == 3


def test_main_fails_on_missing_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1