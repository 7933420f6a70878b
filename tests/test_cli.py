import io

import pytest
from boggle.cli import main


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncats\nbone\nbones\nsing\nrepo\n")
    return path


def _run(monkeypatch, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    return main(argv)


def test_play_full_game(monkeypatch, capsys, dict_file):
    stdin = "4\nCATS\nREPO\nBONE\nDIGS\nbone cat bone ???\nbones wxyz sing ???\n"
    rc = _run(monkeypatch, ["play", "--dictionary", str(dict_file), "--min-length", "4"], stdin)
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Player 1 Score: 0",
        "Correct.",
        "Player 1 Score: 1",
        "cat is too short.",
        "Player 1 Score: 1",
        "bone is already found.",
        "Player 1 Score: 1",
        "Player 2 Score: 0",
        "Correct.",
        "Player 2 Score: 2",
        "wxyz is not a word.",
        "Player 2 Score: 2",
        "sing is not on board.",
        "Player 2 Score: 2",
        "Player 1 Score: 1",
        "Player 2 Score: 2",
        "Player 2 wins!",
        "All Possible Words: BONE BONES CATS REPO ",
    ]


def test_play_end_of_input_ends_turns(monkeypatch, capsys, dict_file):
    rc = _run(monkeypatch, ["play", "--dictionary", str(dict_file), "--min-length", "4"], "2 C A T S")
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == ["Player 1 Score: 0", "Player 2 Score: 0", "Player 1 Score: 0", "Player 2 Score: 0"]
    assert out[4] == "It's a tie!"
    assert out[5] == "All Possible Words: CATS "


def test_play_custom_end_turn(monkeypatch, capsys, dict_file):
    stdin = "2 CATS cats END cats"
    rc = _run(monkeypatch, ["play", "--dictionary", str(dict_file), "--min-length", "4", "--end-turn", "END"], stdin)
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert "It's a tie!" in out


def test_play_invalid_board_size(monkeypatch, capsys, dict_file):
    rc = _run(monkeypatch, ["play", "--dictionary", str(dict_file)], "0\n")
    assert rc == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Invalid board size 0")


def test_play_invalid_board_character(monkeypatch, capsys, dict_file):
    rc = _run(monkeypatch, ["play", "--dictionary", str(dict_file)], "2 C A 7 S")
    assert rc == 1
    assert "alphabetic" in capsys.readouterr().err


def test_missing_dictionary(monkeypatch, capsys, tmp_path):
    rc = _run(monkeypatch, ["play", "--dictionary", str(tmp_path / "nope.txt")], "2 CATS")
    assert rc == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_solve_board_file(capsys, dict_file, tmp_path):
    board_file = tmp_path / "board.txt"
    board_file.write_text("4\nCATS\nREPO\nBONE\nDIGS\n")
    rc = main(["solve", "--dictionary", str(dict_file), "--min-length", "4", str(board_file)])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["BONE", "BONES", "CATS", "REPO"]


def test_solve_stdin_min_length(monkeypatch, capsys, dict_file):
    rc = _run(monkeypatch, ["solve", "--dictionary", str(dict_file), "--min-length", "3"], "2 CATS")
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == ["CAT", "CATS"]


@pytest.mark.parametrize("size", ["40", "0", "big"])
def test_max_size_flag_is_bounded(capsys, dict_file, size):
    with pytest.raises(SystemExit) as exc:
        main(["solve", "--dictionary", str(dict_file), "--max-size", size])
    assert exc.value.code == 2
    assert "--max-size" in capsys.readouterr().err


def test_max_size_flag_lowers_cap(monkeypatch, capsys, dict_file):
    rc = _run(monkeypatch, ["solve", "--dictionary", str(dict_file), "--max-size", "2"], "3 ABCDEFGHI")
    assert rc == 1
    assert "between 1 and 2" in capsys.readouterr().err
