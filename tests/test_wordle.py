from pathlib import Path

import pytest
from WordleFilter import words as words_mod
from WordleFilter.wordle import Colors, main


@pytest.fixture
def word_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("+crane\n+slate\n-roate\n+sleep\n", encoding="utf-8")
    return p


def test_list(word_file, capsys):
    assert main(["-q", "-w", str(word_file), "list", "+5e"]) == 0
    out = capsys.readouterr().out
    assert f"{Colors.white}- crane{Colors.reset}" in out
    assert f"{Colors.grey}- roate{Colors.reset}" in out
    assert "sleep" not in out.split("Filter:")[0]
    assert "- char 5 must be e" in out


def test_list_single_match(word_file, capsys):
    assert main(["-q", "-w", str(word_file), "list", "+1s3e"]) == 0
    out = capsys.readouterr().out
    assert f"{Colors.green}- sleep{Colors.reset}" in out


def test_list_no_match(word_file, capsys):
    assert main(["-q", "-w", str(word_file), "list", "eap"]) == 0
    out = capsys.readouterr().out
    assert f"{Colors.red}No matches{Colors.reset}" in out


def test_list_invalid_key(word_file, capsys):
    assert main(["-q", "-w", str(word_file), "list", "xX"]) == 0
    out = capsys.readouterr().out
    assert "Invalid input: X" in out
    assert "- word must not contain: x" in out


def test_missing_word_list(tmp_path: Path, capsys):
    assert main(["-q", "-w", str(tmp_path / "nope.txt"), "list", "a"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_build(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(words_mod, "iter_wordlist",
                        lambda lang: iter(["about", "roate", "xysti"]))
    freq = {"about": 6.5, "roate": 2.0, "xysti": 0.5}
    monkeypatch.setattr(words_mod, "zipf_frequency",
                        lambda w, lang: freq[w])
    p = tmp_path / "words.txt"
    assert main(["-q", "-w", str(p), "build"]) == 0
    assert p.read_text(encoding="utf-8") == "+about\n-roate\n"
