"""
tests/test_parser.py

Тесты разбора количества дисков и интерактивного ввода.
"""

import io

import pytest

from hanoi_io.parser import parse_num_layers, prompt_num_layers, INT_MAX, PROMPT
from utils.error_handling import InputError, InvalidArgumentError


@pytest.mark.parametrize("text, expected", [
    ("1", 1),
    ("12", 12),
    ("+3", 3),
    ("  7", 7),
    ("007", 7),
    (str(INT_MAX), INT_MAX),
])
def test_parse_valid(text, expected):
    assert parse_num_layers(text) == expected


@pytest.mark.parametrize("text, message", [
    ("abc", "must be an integer"),
    ("3x", "must be an integer"),
    ("3 ", "must be an integer"),
    ("1.5", "must be an integer"),
    ("", "must be an integer"),
    ("1_000", "must be an integer"),
    ("0", "greater than zero"),
    ("-3", "greater than zero"),
    (str(INT_MAX + 1), "less than"),
    ("99999999999999999999999", "less than"),
])
def test_parse_invalid(text, message):
    with pytest.raises(InvalidArgumentError) as exc:
        parse_num_layers(text)

    assert message in str(exc.value)
    assert str(exc.value).startswith("Error:")


def test_prompt_skips_blank_and_invalid_lines():
    stdin = io.StringIO("\nabc\n0\n4\n")
    stdout = io.StringIO()

    assert prompt_num_layers(stdin, stdout) == 4

    text = stdout.getvalue()
    assert text.count(PROMPT) == 4
    assert "Error: num_layers must be an integer" in text
    assert "Error: num_layers must be greater than zero" in text


def test_prompt_accepts_last_line_without_newline():
    assert prompt_num_layers(io.StringIO("2"), io.StringIO()) == 2


def test_prompt_end_of_input():
    stdout = io.StringIO()

    with pytest.raises(InputError) as exc:
        prompt_num_layers(io.StringIO("\n\n"), stdout)

    assert stdout.getvalue().count(PROMPT) == 3
    assert str(exc.value).startswith("Error:")
    assert exc.value.stream == "stderr"
