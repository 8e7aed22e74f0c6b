import io

import pytest

from contestkit import april9, march19, nena20_third
from contestkit.cli import main


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_independent_sets_from_stdin(monkeypatch, capsys):
    _feed(monkeypatch, "2 1\n1 2\n")
    assert main(["march19", "a"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_bard_songs_matches_module(monkeypatch, capsys):
    text = "3 2\n2 1 2\n2 2 3\n"
    _feed(monkeypatch, text)
    assert main(["april9", "d"]) == 0
    assert capsys.readouterr().out == april9.run("d", text)


def test_uppercase_problem_letter(monkeypatch, capsys):
    text = "10 3 4\n"
    _feed(monkeypatch, text)
    assert main(["march19", "M"]) == 0
    assert capsys.readouterr().out == march19.run("m", text)


def test_reads_input_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("6 1000\n", encoding="utf-8")
    assert main(["nena20", "r", str(path)]) == 0
    assert capsys.readouterr().out == nena20_third.run("r", "6 1000\n")


def test_unknown_problem_exits(monkeypatch):
    _feed(monkeypatch, "")
    with pytest.raises(SystemExit) as caught:
        main(["april9", "a"])
    assert caught.value.code == 2


def test_unknown_contest_exits():
    with pytest.raises(SystemExit) as caught:
        main(["winter", "a"])
    assert caught.value.code == 2


def test_truncated_input_reports_error(monkeypatch, capsys):
    _feed(monkeypatch, "2 1\n1\n")
    assert main(["march19", "a"]) == 1
    assert "unexpected end of input" in capsys.readouterr().err


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["nena20", "r", str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err.startswith("contestkit:")