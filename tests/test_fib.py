import io

import pytest

from nexusprover import fib


def test_zero_steps_returns_second_value():
    assert fib.fibonacci(0, 7, 11) == 11


@pytest.mark.parametrize("n", [1, 2, 5, 20, 60])
def test_recurrence(n):
    a, b = 1, 1
    assert fib.fibonacci(n + 1, a, b) == (
        fib.fibonacci(n, a, b) + fib.fibonacci(n - 1, a, b)
    ) % 2**32


def test_first_step_is_sum():
    assert fib.fibonacci(1, 3, 4) == 3 + 4


def test_wraps_at_32_bits():
    assert fib.fibonacci(1, 0xFFFFFFFF, 1) == 0
    assert 0 <= fib.fibonacci(100, 1, 1) <= 0xFFFFFFFF


def test_parse_defaults():
    assert fib.parse_inputs(["5"]) == (5, 1, 1)


def test_parse_invalid_optional_falls_back():
    assert fib.parse_inputs([" 5 ", "x", "3"]) == (5, 1, 3)


def test_parse_accepts_plus_sign():
    assert fib.parse_inputs(["+4", "2", "3"]) == (4, 2, 3)


def test_parse_missing_first_line():
    with pytest.raises(ValueError, match="No first input provided"):
        fib.parse_inputs([])


@pytest.mark.parametrize("bad", ["abc", "-1", "4294967296", ""])
def test_parse_invalid_first_line(bad):
    with pytest.raises(ValueError, match="Failed to parse first input as u32"):
        fib.parse_inputs([bad])


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n1\n1\n"))
    assert fib.main([]) == 0
    assert capsys.readouterr().out == "89\n"


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert fib.main([]) == 1
    assert "No first input provided" in capsys.readouterr().err