"""
tests/test_report.py
--------------------
Unit testy dla modułu reliability_calc.report.
"""

import pytest

from reliability_calc.metrics import compute_results
from reliability_calc.report import (
    REPORT_FILENAME,
    format_report,
    format_time,
    save_report,
)


# ---------------------------------------------------------------------------
# Testy: format_time
# ---------------------------------------------------------------------------


class TestFormatTime:
    @pytest.mark.parametrize(
        "value, expected",
        [(10.0, "10"), (0.0, "0"), (2.5, "2.5"), (188.5, "188.5"), (0.1, "0.1")],
    )
    def test_format(self, value, expected):
        assert format_time(value) == expected


# ---------------------------------------------------------------------------
# Testy: format_report
# ---------------------------------------------------------------------------


class TestFormatReport:
    def test_without_results(self):
        """Brak obliczeń → tylko nagłówek i lista czasów."""
        text = format_report([10.0, 20.0])
        assert text == (
            "Raport Niezawodności\n"
            "\n"
            "Wprowadzone czasy do awarii:\n"
            "1. 10 godzin\n"
            "2. 20 godzin\n"
        )
        assert "Wyniki obliczeń" not in text

    def test_with_results(self):
        times = [1.0, 3.0, 5.0, 7.0]
        text = format_report(times, compute_results(times, 4.0))
        lines = text.splitlines()
        assert lines[:7] == [
            "Raport Niezawodności",
            "",
            "Wprowadzone czasy do awarii:",
            "1. 1 godzin",
            "2. 3 godzin",
            "3. 5 godzin",
            "4. 7 godzin",
        ]
        assert lines[7:] == [
            "",
            "Wyniki obliczeń dla t = 4:",
            "F*(t): 0.500",
            "R*(t): 0.500",
            "f*(t): 0.250",
            "λ*(t): 0.5000000000",
            "E*T (średni czas do awarii): 4.00 godzin",
        ]

    def test_empty_list(self):
        assert format_report([]).splitlines() == [
            "Raport Niezawodności",
            "",
            "Wprowadzone czasy do awarii:",
        ]

    def test_custom_unit(self):
        text = format_report([1.5], unit="cykli")
        assert "1. 1.5 cykli" in text


# ---------------------------------------------------------------------------
# Testy: save_report
# ---------------------------------------------------------------------------


class TestSaveReport:
    def test_writes_utf8(self, tmp_path):
        target = tmp_path / "raport.txt"
        content = format_report([10.0], compute_results([10.0], 5.0))
        path = save_report(content, target)
        assert path == target
        assert target.read_text(encoding="utf-8") == content
        assert "λ*(t)" in target.read_bytes().decode("utf-8")

    def test_default_filename(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = save_report("x\n")
        assert path.name == REPORT_FILENAME == "reliability_report.txt"
        assert (tmp_path / REPORT_FILENAME).read_text(encoding="utf-8") == "x\n"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            save_report("x", tmp_path / "brak" / "raport.txt")
