"""Tests for the command-line shell, formatting helpers and config."""
import argparse
import io

import pytest

import main
from config.config import CLI_CONFIG, validate_config
from utils.formatting import format_result, parse_precision


def make_args(**overrides):
    values = {
        "expressions": [],
        "precision": None,
        "ask_precision": False,
        "show_postfix": False,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def scripted_input(lines):
    iterator = iter(lines)

    def _input(prompt=""):
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return _input


class TestFormatting:

    def test_shortest_form(self):
        assert format_result(14.0) == "14"
        assert format_result(0.5) == "0.5"
        assert format_result(-6.0) == "-6"

    def test_fixed_precision(self):
        assert format_result(3.14159265, 3) == "3.142"
        assert format_result(2.0, 2) == "2.00"
        assert format_result(1.5, 0) == "2"

    def test_special_values(self):
        assert format_result(float("nan"), 4) == "nan"
        assert format_result(float("inf")) == "inf"
        assert format_result(float("-inf"), 2) == "-inf"

    def test_parse_precision(self):
        assert parse_precision("4") == 4
        assert parse_precision(" 0 ") == 0

    @pytest.mark.parametrize("text", ["-1", "abc", "", "1.5", str(CLI_CONFIG["max_precision"] + 1)])
    def test_parse_precision_rejects(self, text):
        with pytest.raises(ValueError):
            parse_precision(text)


class TestConfig:

    def test_validate_config(self):
        validate_config()


class TestRunExpression:

    def test_success(self):
        out, err = io.StringIO(), io.StringIO()
        assert main.run_expression("2+3*4", out=out, err=err)
        assert out.getvalue() == "14\n"
        assert err.getvalue() == ""

    def test_precision_and_postfix(self):
        out, err = io.StringIO(), io.StringIO()
        assert main.run_expression("1/3", precision=4, show_postfix=True, out=out, err=err)
        assert out.getvalue() == "RPN: 1 3 /\n0.3333\n"

    def test_error(self):
        out, err = io.StringIO(), io.StringIO()
        assert not main.run_expression("5/0", show_postfix=True, out=out, err=err)
        assert out.getvalue() == ""
        assert err.getvalue() == "Error: Division by zero\n"


class TestInteractiveLoop:

    def test_reads_until_quit(self):
        out, err = io.StringIO(), io.StringIO()
        lines = ["2+2", "", "(1", "quit", "3+3"]
        status = main.interactive_loop(make_args(), scripted_input(lines), out, err)
        assert status == 0
        assert out.getvalue() == f"4\n{CLI_CONFIG['farewell']}\n"
        assert err.getvalue().startswith("Error: Mismatched parentheses")

    def test_stops_on_eof(self):
        out, err = io.StringIO(), io.StringIO()
        main.interactive_loop(make_args(), scripted_input(["1+1"]), out, err)
        assert out.getvalue() == f"2\n{CLI_CONFIG['farewell']}\n"

    def test_asks_for_precision(self):
        out, err = io.StringIO(), io.StringIO()
        args = make_args(ask_precision=True)
        main.interactive_loop(args, scripted_input(["pi", "2", "e", "oops"]), out, err)
        lines = out.getvalue().splitlines()
        assert lines[0] == "3.14"
        assert lines[1] == repr(2.718281828459045)
        assert "Precision must be an integer" in err.getvalue()

    def test_fixed_precision_skips_prompt(self):
        out, err = io.StringIO(), io.StringIO()
        args = make_args(precision=2, ask_precision=True)
        main.interactive_loop(args, scripted_input(["1/4", "exit"]), out, err)
        assert out.getvalue().splitlines()[0] == "0.25"


class TestCli:

    def test_one_shot_success(self, capsys):
        assert main.cli(["2**3**2", "10-3-2"]) == 0
        assert capsys.readouterr().out == "512\n5\n"

    def test_one_shot_failure_status(self, capsys):
        assert main.cli(["1+1", "1+2)"]) == 1
        captured = capsys.readouterr()
        assert captured.out == "2\n"
        assert "Mismatched parentheses" in captured.err

    def test_precision_flag(self, capsys):
        assert main.cli(["--precision", "3", "sqrt(2)"]) == 0
        assert capsys.readouterr().out == "1.414\n"

    def test_invalid_precision_flag(self, capsys):
        assert main.cli(["--precision", "x", "1"]) == 2
        assert "Precision must be an integer" in capsys.readouterr().err

    def test_leading_minus_expression(self, capsys):
        assert main.cli(["-3+5"]) == 0
        assert capsys.readouterr().out == "2\n"

    def test_leading_minus_expressions_keep_order(self, capsys):
        assert main.cli(["1", "-(1+2)", "--precision", "1", "-2**2"]) == 0
        assert capsys.readouterr().out == "1.0\n-3.0\n-4.0\n"

    def test_unknown_long_option_is_rejected(self, capsys):
        with pytest.raises(SystemExit) as info:
            main.cli(["--bogus", "1"])
        assert info.value.code == 2
        assert "unrecognized arguments: --bogus" in capsys.readouterr().err

    def test_leading_minus_followed_by_plain_expression(self, capsys):
        assert main.cli(["-3+5", "2*3"]) == 0
        assert capsys.readouterr().out == "2\n6\n"
