import io

import pytest

from gradekit.palindrome import is_palindrome, main


@pytest.mark.parametrize(
    "text",
    ["radar", "", "Radar", "A man, a plan, a canal: Panama", "x", "12321ab!ba"],
)
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["Uhm hai", "hello", "ab"])
def test_non_palindromes(text):
    assert is_palindrome(text) is False


def test_non_letters_are_ignored():
    assert is_palindrome("r-a-d-a-r") == is_palindrome("radar")


def test_main_reports_each_word(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("radar hello\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Your input: radar" in out
    assert "You have entered a palindrome!" in out
    assert "Your input: hello" in out
    assert "You have not entered a palindrome." in out
    assert out.rstrip().endswith("Thank you for using this program. Goodbyte!")


def test_main_stops_at_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Q radar\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Your input" not in out
    assert "Goodbyte!" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("level"))
    assert main() == 0
    out = capsys.readouterr().out
    assert out.count("Please enter a string (q to quit): ") == 2
    assert "You have entered a palindrome!" in out