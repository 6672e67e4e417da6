import io
import random

import pytest

from lottoschein.pool import (
    draw_from_pool,
    draw_numbers,
    format_numbers,
    load_lines,
    main,
    read_pool,
    save_lines,
)


def test_read_pool_collects_sorted_unique_numbers():
    out = io.StringIO()
    pool = read_pool(49, io.StringIO("5 3 5 0 -1 7"), out)
    assert pool == [3, 5]
    text = out.getvalue()
    assert text.count("Wrong input\n") == 1
    assert text.count("Enter a number between 1 and 49\n") == 5


def test_read_pool_stops_at_end_of_input():
    pool = read_pool(10, io.StringIO("10 11 1"), io.StringIO())
    assert pool == [1, 10]


def test_read_pool_rejects_everything_with_empty_range():
    out = io.StringIO()
    assert read_pool(0, io.StringIO("1 2 -1"), out) == []
    assert out.getvalue().count("Wrong input\n") == 2


def test_draw_from_pool_is_sorted_subset():
    pool = [4, 8, 15, 16, 23, 42, 7, 9]
    drawn = draw_from_pool(pool, 6, random.Random(11))
    assert len(drawn) == 6
    assert set(drawn) <= set(pool)
    assert drawn == sorted(drawn)


def test_draw_from_pool_takes_all_when_pool_is_small():
    assert draw_from_pool([9, 2, 5], 6, random.Random(0)) == [2, 5, 9]


def test_draw_from_pool_negative_count_picks_nothing():
    assert draw_from_pool([1, 2, 3], -2) == []


def test_draw_numbers_distinct_in_range():
    numbers = draw_numbers(6, 49, random.Random(4))
    assert len(set(numbers)) == 6
    assert numbers == sorted(numbers)
    assert all(1 <= n <= 49 for n in numbers)


def test_draw_numbers_rejects_too_many():
    with pytest.raises(ValueError):
        draw_numbers(13, 12)


def test_format_numbers_right_aligns():
    assert format_numbers([3, 17], 4) == "   3  17\n"


def test_format_numbers_width_zero_keeps_digits():
    assert format_numbers([1, 2], 0) == "12\n"


def test_save_and_load_lines_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    lines = ["Lotto 6 aus 49", "1 2 3", ""]
    save_lines(path, lines)
    assert load_lines(path) == lines


def test_load_lines_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_lines(tmp_path / "missing.txt")


def test_main_draws_six_aus_49(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n-1\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Lotto 6 aus 49\n" in text
    drawn_line = text.split("Lotto 6 aus 49\n")[2].splitlines()[0]
    numbers = [int(n) for n in drawn_line.split()]
    assert len(set(numbers)) == 6
    assert all(1 <= n <= 49 for n in numbers)


def test_main_manual_input_then_pool(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 4 60 -1 2 -1"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "Manual input\n" in text
    assert text.count("Wrong input\n") == 1


def test_main_wrong_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9 -1"))
    assert main([]) == 0
    assert "Wrong input\n" in capsys.readouterr().out