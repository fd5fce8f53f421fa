import pytest

from cdrills.basics import add, interest
from cdrills.cli import build_parser, main, run
from cdrills.decisions import calculate
from cdrills.integers import to_binary


def test_run_add_formats_sum():
    assert run("add", ["2", "3"]) == f"Sum = {add(2, 3)}"


def test_run_interest_matches_library():
    assert run("interest", ["1000", "5", "2"]) == str(interest(1000.0, 5.0, 2.0))


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%"])
def test_run_calc_matches_calculate(op):
    assert run("calc", ["17", "5", op]) == str(calculate(17, 5, op))


def test_run_calc_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero not allowed"):
        run("calc", ["4", "0", "/"])


def test_run_calc_invalid_operator():
    with pytest.raises(ValueError, match="Invalid operator"):
        run("calc", ["4", "2", "^"])


@pytest.mark.parametrize("n", [0, 5, 64])
def test_run_binary_round_trip(n):
    out = run("binary", [str(n)])
    assert out == to_binary(n)
    assert int(out, 2) == n


def test_run_unknown_command():
    with pytest.raises(ValueError):
        run("nope", ["1"])


def test_run_wrong_value_count():
    with pytest.raises(ValueError):
        run("add", ["1"])


def test_run_rejects_non_numeric():
    with pytest.raises(ValueError):
        run("add", ["one", "2"])


def test_parser_collects_values():
    args = build_parser().parse_args(["calc", "8", "3", "-"])
    assert args.command == "calc"
    assert args.values == ["8", "3", "-"]


def test_parser_rejects_missing_values():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["interest", "1000", "5"])


def test_main_prints_result(capsys):
    assert main(["add", "4", "9"]) == 0
    assert capsys.readouterr().out == run("add", ["4", "9"]) + "\n"


def test_main_reports_error(capsys):
    assert main(["calc", "1", "0", "%"]) == 1
    captured = capsys.readouterr()
    assert "Division by zero not allowed" in captured.err
    assert captured.out == ""