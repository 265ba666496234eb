import io
import string

import pytest

from drillbook.charclass import CharClass, classify, main


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("A", CharClass.UPPER),
        ("Z", CharClass.UPPER),
        ("a", CharClass.LOWER),
        ("z", CharClass.LOWER),
        ("0", CharClass.DIGIT),
        ("9", CharClass.DIGIT),
        ("!", CharClass.PUNCTUATION),
        ("~", CharClass.PUNCTUATION),
        (" ", CharClass.PUNCTUATION),
        ("\x7f", CharClass.OTHER),
    ],
)
def test_classify(ch, expected):
    assert classify(ch) is expected


def test_all_ascii_punctuation_is_punctuation():
    assert all(classify(ch) is CharClass.PUNCTUATION for ch in string.punctuation)


def test_every_letter_and_digit():
    assert {classify(ch) for ch in string.ascii_uppercase} == {CharClass.UPPER}
    assert {classify(ch) for ch in string.ascii_lowercase} == {CharClass.LOWER}
    assert {classify(ch) for ch in string.digits} == {CharClass.DIGIT}


@pytest.mark.parametrize("ch", ["\x1f", "\n", "\x00", "é"])
def test_out_of_range_raises(ch):
    with pytest.raises(ValueError, match="out of range"):
        classify(ch)


@pytest.mark.parametrize("text", ["", "ab"])
def test_not_single_character_raises(text):
    with pytest.raises(ValueError):
        classify(text)


def test_main_prints_class(capsys):
    assert main(["q"]) == 0
    assert capsys.readouterr().out == "lower case letter\n"


def test_main_uses_first_non_blank_character(capsys):
    assert main(["  Hello"]) == 0
    assert capsys.readouterr().out == "upper case letter\n"


def test_main_out_of_range(capsys):
    assert main(["\x01"]) == 1
    assert capsys.readouterr().out == "char is out of range [32, 127]\n"


def test_main_blank_input_fails(capsys):
    assert main(["   "]) == 1
    assert capsys.readouterr().out == "no character given\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "digit\n"