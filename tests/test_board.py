import io
import random

import pytest

from lottoschein.board import Controller, Lotto, read_pool


def test_size_greater_than_range_is_rejected():
    with pytest.raises(ValueError):
        Lotto(7, 5, 3)


def test_generate_appends_numbers_in_range():
    lotto = Lotto(6, 49, 7, random.Random(1))
    first = lotto.generate()
    second = lotto.generate()
    assert len(first) == 6 and len(second) == 6
    assert lotto.numbers == first + second
    assert all(1 <= n <= 49 for n in lotto.numbers)


def test_render_marks_drawn_numbers():
    lotto = Lotto(2, 4, 2)
    lotto.numbers = [1, 4]
    assert lotto.render() == "[01]  02  \n 03  [04] \n"


def test_render_row_count_follows_width():
    lotto = Lotto(6, 49, 7, random.Random(3))
    lotto.generate()
    text = lotto.render()
    assert text.count("\n") == 7
    assert text.count("[") == len(set(lotto.numbers))


def test_render_with_zero_width_fails():
    lotto = Lotto(1, 5, 0)
    with pytest.raises(ValueError):
        lotto.render()


def test_save_writes_rendered_table(tmp_path):
    lotto = Lotto(5, 50, 10, random.Random(5))
    lotto.generate()
    path = tmp_path / "lotto.txt"
    lotto.save(path)
    assert path.read_text(encoding="utf-8") == lotto.render()


def test_read_pool_rejects_duplicates_and_out_of_range():
    out = io.StringIO()
    pool = read_pool(1, 49, io.StringIO("5 5 60 3 -1\n"), out)
    assert pool == [3, 5]
    assert "Number already exists!" in out.getvalue()
    assert "Invalid number!" in out.getvalue()


def test_read_pool_stops_after_thirty_numbers():
    numbers = " ".join(str(n) for n in range(1, 41))
    pool = read_pool(1, 49, io.StringIO(numbers), io.StringIO())
    assert pool == list(range(1, 31))


def test_read_pool_stops_at_end_of_input():
    pool = read_pool(1, 49, io.StringIO("9 2"), io.StringIO())
    assert pool == [2, 9]


def test_controller_preset_draws_and_exits():
    out = io.StringIO()
    controller = Controller(io.StringIO("2\n0\n"), out, random.Random(2))
    controller.run()
    assert controller.lotto.size == 6
    assert controller.lotto.range_max == 49
    assert len(controller.lotto.numbers) == 6
    assert "Goodbye!" in out.getvalue()


def test_controller_user_input_after_clear():
    out = io.StringIO()
    controller = Controller(io.StringIO("2\n6\n5\n3\n1 2 3\n0\n"), out, random.Random(4))
    controller.run()
    assert controller.lotto.numbers == [1, 2, 3]
    assert "[01] [02] [03] " in out.getvalue()


def test_controller_pool_and_invalid_choice():
    out = io.StringIO()
    controller = Controller(io.StringIO("7\n4 8 -1\n9\n0\n"), out)
    controller.run()
    assert controller.pool == [4, 8]
    assert out.getvalue().count("_____________________________________________") == 2