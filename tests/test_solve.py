"""
Tests for the report format and command-line entry point.
"""

import pytest

from bouncy_numbers.solve import format_report, main
from bouncy_numbers.config import THRESHOLD, REFERENCE_FIRST_OVER_99


class TestFormatReport:
    """Tests for the two-line report."""

    def test_exact_format(self):
        report = format_report(0.99, 1587000)
        assert report == (
            "The proportion needed is: 0.990000\n"
            "The first number to meet that proportion is:1587000"
        )

    def test_no_space_before_answer(self):
        assert format_report(0.5, 538).endswith("proportion is:538")

    def test_six_decimals(self):
        assert format_report(0.5, 538).splitlines()[0] == "The proportion needed is: 0.500000"


class TestMain:
    """Tests for the entry point."""

    def test_rejects_unknown_arguments(self):
        with pytest.raises(SystemExit):
            main(["--threshold", "0.5"])

    @pytest.mark.slow
    def test_output(self, capsys):
        """With no arguments the program prints exactly the two report lines."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out == format_report(THRESHOLD, REFERENCE_FIRST_OVER_99) + "\n"

    @pytest.mark.slow
    def test_verbose_output(self, capsys):
        assert main(["--verbose"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "Level 7: crossing at 1587000" in lines[-3]
        assert lines[-1] == "The first number to meet that proportion is:1587000"
