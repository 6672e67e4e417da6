import io
import random

from lottoschein.manager import LotteryManager, main


def run_manager(text, path):
    out = io.StringIO()
    manager = LotteryManager(
        io.StringIO(text), out, path=str(path), rng=random.Random(7)
    )
    manager.run()
    return manager, out.getvalue()


def test_exit(tmp_path):
    _, out = run_manager("6\n", tmp_path / "m.txt")
    assert "=== Lottery Program Menu ===" in out
    assert out.endswith("Ending program. Goodbye!\n")


def test_invalid_choice(tmp_path):
    _, out = run_manager("9\nabc\n6\n", tmp_path / "m.txt")
    assert out.count("Invalid choice. Please try again.") == 2
    assert out.count("=== Lottery Program Menu ===") == 3


def test_end_of_input_stops(tmp_path):
    _, out = run_manager("", tmp_path / "m.txt")
    assert out.count("Enter your choice: ") == 1
    assert "Goodbye" not in out


def test_enter_and_save_numbers(tmp_path):
    path = tmp_path / "m.txt"
    manager, out = run_manager("3\n1\n5\n5\n7\n-1\n4\n6\n", path)
    assert "Number already entered. Please enter a different number." in out
    assert "Entered 2 numbers for Lotto 6 aus 49" in out
    assert "Entered numbers: 5 7 \n" in out
    assert f"Manual numbers saved to {path}" in out
    assert manager.lotto6aus49.manual_numbers == [5, 7]
    assert path.read_text(encoding="utf-8") == "Lotto 6 aus 49\n5\n7\n"


def test_load_numbers(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("Lotto 6 aus 49\n5\n7\n", encoding="utf-8")
    manager, out = run_manager("5\n6\n", path)
    assert "Loaded numbers: 5 7 \n" in out
    assert manager.lotto6aus49.manual_numbers == [5, 7]


def test_load_wrong_system(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("Eurolotto\n1\n", encoding="utf-8")
    manager, out = run_manager("5\n6\n", path)
    assert "Failed to load manual numbers or wrong system." in out
    assert manager.lotto6aus49.manual_numbers == []


def test_load_missing_file(tmp_path):
    _, out = run_manager("5\n6\n", tmp_path / "absent.txt")
    assert "Failed to load manual numbers or wrong system." in out


def test_save_without_numbers(tmp_path):
    path = tmp_path / "m.txt"
    _, out = run_manager("4\n6\n", path)
    assert "No manual numbers to save." in out
    assert not path.exists()


def test_invalid_system_in_entry(tmp_path):
    _, out = run_manager("3\n7\n6\n", tmp_path / "m.txt")
    assert "Invalid choice. Returning to main menu." in out


def test_entry_stops_at_thirty(tmp_path):
    numbers = "".join(f"{n}\n" for n in range(1, 32))
    manager, out = run_manager("3\n2\n" + numbers + "6\n", tmp_path / "m.txt")
    assert "Entered 30 numbers for Eurolotto" in out
    assert manager.eurolotto.manual_numbers == list(range(1, 31))


def test_play_with_manual_numbers(tmp_path):
    text = "3\n1\n1\n2\n3\n4\n5\n6\n-1\n1\n1\ny\n6\n"
    _, out = run_manager(text, tmp_path / "m.txt")
    assert "Selected system: Lotto 6 aus 49" in out
    assert "Ticket 1: 1 2 3 4 5 6 \n" in out
    assert "Number 1: 1 times" in out


def test_play_eurolotto(tmp_path):
    manager, out = run_manager("2\n2\nn\n6\n", tmp_path / "m.txt")
    assert "--- Eurolotto Ticket ---" in out
    assert "Ticket 2: Main numbers: " in out
    assert "Frequency Distribution for Euro Numbers:" in out
    assert len(manager.eurolotto.tickets) == 2
    assert manager.current is manager.eurolotto


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    path = tmp_path / "m.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n9\n-1\n4\n6\n"))
    assert main(["--file", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "Lotto 6 aus 49\n9\n"
    assert "Ending program. Goodbye!" in capsys.readouterr().out