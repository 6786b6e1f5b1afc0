"""
Test: command-line driver.

The driver parses flags and element values, prints frequencies, regime and
characteristic values, then asks for initial conditions (or takes them from
--initial) and prints the solution constants.
"""
import math

import pytest

from pyrlc import InitialConditions
from pyrlc.cli import (
    FormatConfig,
    main,
    parse_initial_conditions,
    prompt_initial_conditions,
)


def _decline():
    return None


class TestReport:

    def test_series_overdamped(self, capsys):
        assert main(["-s", "-n", "3", "1", "1", "--precision", "6"], prompt=_decline) == 0
        out = capsys.readouterr().out

        assert "Calculating for natural response series RLC" in out
        assert "Found Neper frequency of: 1.5" in out
        assert "Found resonant radian frequency of: 1" in out
        assert "Overdamped:" in out
        assert "s1: -0.381966" in out
        assert "s2: -2.61803" in out
        assert "Found C1" not in out

    def test_series_critical(self, capsys):
        main(["-s", "-n", "2", "1", "1"], prompt=_decline)
        out = capsys.readouterr().out

        assert "Critically Damped:" in out
        assert "s: -1" in out

    def test_parallel_underdamped(self, capsys):
        main(["--parallel", "--natural", "2", "1", "1", "--precision", "6"], prompt=_decline)
        out = capsys.readouterr().out

        assert "Calculating for natural response parallel RLC" in out
        assert "Found Neper frequency of: 0.25" in out
        assert "Underdamped:" in out
        assert "w: 0.968246" in out

    def test_default_precision_is_twenty_digits(self, capsys):
        main(["-s", "-n", "1", "1", "3"], prompt=_decline)
        out = capsys.readouterr().out
        # 1 / sqrt(3) printed with 20 significant digits
        assert f"Found resonant radian frequency of: {1.0 / math.sqrt(3.0):.20g}" in out


class TestConstants:

    def test_initial_flag_skips_prompt(self, capsys):
        def fail():
            raise AssertionError("prompt should not be called")

        main(["-s", "-n", "2", "1", "1", "--initial", "1", "0", "--precision", "6"], prompt=fail)
        out = capsys.readouterr().out
        assert "Found C1: 0.5  C2: 1" in out

    def test_prompt_result_used(self, capsys):
        main(["-s", "-n", "2", "1", "1", "--precision", "6"],
             prompt=lambda: InitialConditions(voltage=1.0, current=0.0))
        out = capsys.readouterr().out
        assert "Found C1: 0.5  C2: 1" in out

    def test_forced_negative_source(self, capsys):
        # series R=1, L=C=1, src=-2, V=I=0: c1 = 2, c2 = (0 + 0.5*2) / sqrt(0.75)
        main(["-s", "-f", "1", "1", "1", "-2", "--initial", "0", "0", "--precision", "6"])
        out = capsys.readouterr().out
        assert "Calculating for forced response series RLC" in out
        assert "Found C1: 2  C2: 1.1547" in out


class TestBadArguments:

    @pytest.mark.parametrize("argv", [
        [],
        ["-s"],
        ["-s", "-n"],
        ["-s", "-n", "1", "1"],
        ["-n", "1", "1", "1"],
        ["-s", "1", "1", "1"],
        ["-s", "-p", "-n", "1", "1", "1"],
        ["-x", "-n", "1", "1", "1"],
        ["-s", "-n", "0", "1", "1"],
        ["-s", "-n", "1", "-1", "1"],
        ["-s", "-n", "one", "1", "1"],
        ["-s", "-n", "1", "1", "1", "--precision", "0"],
    ])
    def test_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv, prompt=_decline)
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert "usage:" in captured.err
        assert "Found Neper frequency" not in captured.out

    @pytest.mark.parametrize("flag", ["-?", "-h", "--help"])
    def test_help(self, flag, capsys):
        with pytest.raises(SystemExit) as exc:
            main([flag])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "Parallel RLC" in out
        assert "Forced response" in out


class TestPrompt:

    @staticmethod
    def _scripted(lines):
        it = iter(lines)

        def read():
            try:
                return next(it)
            except StopIteration:
                raise EOFError
        return read

    def test_yes_then_values(self):
        written = []
        result = prompt_initial_conditions(self._scripted(["y", "1.5 -0.25"]), written.append)
        assert result == InitialConditions(voltage=1.5, current=-0.25)
        assert any("[Y\\N]" in w for w in written)

    def test_no(self):
        assert prompt_initial_conditions(self._scripted(["N"]), lambda s: None) is None

    def test_eof(self):
        assert prompt_initial_conditions(self._scripted([]), lambda s: None) is None

    def test_retries_on_bad_input(self):
        written = []
        result = prompt_initial_conditions(self._scripted(["Y", "abc", "1", "3 4"]), written.append)
        assert result == InitialConditions(voltage=3.0, current=4.0)
        assert sum("Invalid input" in w for w in written) == 2


class TestParsing:

    def test_parse(self):
        assert parse_initial_conditions(" 2  -1e-3 ") == InitialConditions(2.0, -1e-3)

    @pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "nan 1"])
    def test_parse_rejects(self, text):
        with pytest.raises(ValueError):
            parse_initial_conditions(text)


def test_format_config():
    assert FormatConfig().precision == 20
    assert FormatConfig(precision=3).number(3.14159) == "3.14"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
