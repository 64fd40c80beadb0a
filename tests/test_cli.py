from review_stars.cli import main, resolve_filename
from review_stars.errors import UsageError

import pytest


def test_resolve_filename():
    assert resolve_filename([]) == "review.txt"
    assert resolve_filename(["mine.txt"]) == "mine.txt"
    with pytest.raises(UsageError):
        resolve_filename(["a.txt", "b.txt"])


def test_full_run_with_argument(tmp_path, monkeypatch, lexicon_file, write_text, capsys):
    monkeypatch.chdir(tmp_path)
    write_text("mine.txt", "good good bad")
    assert main(["mine.txt"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "mine.txt score: 1.00" in out
    assert out[-1] == "mine.txt Stars: 4"


def test_default_target(tmp_path, monkeypatch, lexicon_file, write_text, capsys):
    monkeypatch.chdir(tmp_path)
    write_text("review.txt", "bad bad bad bad")
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "review.txt Stars: 1"


def test_too_many_arguments_touches_nothing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["a.txt", "b.txt"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error: Too many arguments"
    assert out[1].startswith("Usage: review-stars <filename>")
    assert len(out) == 2


def test_missing_lexicon_exits_1(tmp_path, monkeypatch, write_text, capsys):
    monkeypatch.chdir(tmp_path)
    write_text("review.txt", "good")
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Error opening file")
    assert "Stars" not in out


def test_missing_target_exits_1(tmp_path, monkeypatch, lexicon_file, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["missing.txt"]) == 1
    out = capsys.readouterr().out
    assert "Error: Error opening file" in out
    assert "Stars" not in out


def test_flag_like_extra_argument_is_usage_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["a.txt", "--verbose"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error: Too many arguments"
    assert len(out) == 2


def test_dash_prefixed_filename_is_rated(tmp_path, monkeypatch, lexicon_file, write_text, capsys):
    monkeypatch.chdir(tmp_path)
    write_text("-notes.txt", "good great")
    assert main(["-notes.txt"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "-notes.txt Stars: 4"
