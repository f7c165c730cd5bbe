"""Tests for AnswerReader and interactive config acquisition."""

import pytest

from mathdrill.core.practice_config import PracticeConfig
from mathdrill.services.prompts import parse_decimal, prompt_practice_config


# ---------------------------------------------------------------------------
# AnswerReader
# ---------------------------------------------------------------------------

def test_read_line_trims(make_reader):
    reader = make_reader(["   hello  "])
    assert reader.read_line("> ") == "hello"


def test_read_line_eof(make_reader):
    reader = make_reader([])
    with pytest.raises(EOFError):
        reader.read_line("> ")


def test_blank_line_is_not_eof(make_reader):
    reader = make_reader([""])
    assert reader.read_line("> ") == ""


def test_read_int_reprompts_until_valid(make_reader, out):
    reader = make_reader(["", "twelve", "1.5", " 42 "])
    assert reader.read_int() == 42
    text = out.getvalue()
    assert text.count("Please enter a valid number!") == 3
    assert text.count("Your answer: ") == 4


def test_read_int_negative(make_reader):
    assert make_reader(["-7"]).read_int() == -7


def test_read_float_rejects_non_finite(make_reader, out):
    reader = make_reader(["nan", "inf", "abc", "0.25"])
    assert reader.read_float() == pytest.approx(0.25)
    assert out.getvalue().count("Please enter a valid decimal number!") == 3


def test_read_int_eof_mid_reprompt(make_reader):
    reader = make_reader(["x"])
    with pytest.raises(EOFError):
        reader.read_int()


# ---------------------------------------------------------------------------
# prompt_practice_config
# ---------------------------------------------------------------------------

def test_prompt_config_both_blank(make_reader, out):
    config = prompt_practice_config(make_reader(["", ""]))
    assert config == PracticeConfig.default()
    assert "Setting default 10 minutes." in out.getvalue()
    assert "=== Practice Configuration ===" in out.getvalue()


def test_prompt_config_count_only(make_reader, out):
    config = prompt_practice_config(make_reader(["3", ""]))
    assert config == PracticeConfig(num_questions=3, time_limit=None)
    assert "Setting default" not in out.getvalue()


def test_prompt_config_garbage(make_reader):
    config = prompt_practice_config(make_reader(["many", "later"]))
    assert config == PracticeConfig(num_questions=5, time_limit=None)


def test_read_int_rejects_underscores_and_non_ascii(make_reader, out):
    reader = make_reader(["1_000", "١٢", "12"])
    assert reader.read_int() == 12
    assert out.getvalue().count("Please enter a valid number!") == 2


@pytest.mark.parametrize("text", ["0_5", "Infinity", "1e999", "."])
def test_parse_decimal_rejects(text):
    with pytest.raises(ValueError):
        parse_decimal(text)


@pytest.mark.parametrize("text, expected", [
    ("0.25", 0.25),
    (".5",   0.5),
    ("2.",   2.0),
    ("-1e-2", -0.01),
])
def test_parse_decimal_accepts(text, expected):
    assert parse_decimal(text) == pytest.approx(expected)
