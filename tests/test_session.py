"""
tests/test_session.py
---------------------
Testy sesji kalkulatora (reliability_calc.session): walidacja pól,
przejścia stanów okna wyników, reset i eksport raportu.
"""

import pytest

from reliability_calc.session import (
    T_INPUT_ERROR,
    TIME_INPUT_ERROR,
    CalculatorSession,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def session() -> CalculatorSession:
    return CalculatorSession()


@pytest.fixture
def filled_session(session) -> CalculatorSession:
    """Sesja z czasami {1, 3, 5, 7}."""
    for value in ("1", "3", "5", "7"):
        assert session.add_time(value)
    return session


# ---------------------------------------------------------------------------
# Testy: dodawanie / usuwanie
# ---------------------------------------------------------------------------


class TestAddRemove:
    def test_add_from_pending_input(self, session):
        session.time_input = "12"
        assert session.add_time()
        assert session.count == 1
        assert session.time_input == ""

    @pytest.mark.parametrize("text", ["-5", "", "abc"])
    def test_rejected_input(self, filled_session, text):
        assert not filled_session.add_time(text)
        assert filled_session.count == 4
        assert filled_session.error_message == TIME_INPUT_ERROR
        # niepoprawny tekst zostaje w polu do poprawienia
        assert filled_session.time_input == text

    def test_successful_add_clears_error(self, session):
        session.add_time("-1")
        assert session.error_message
        assert session.add_time("1")
        assert session.error_message == ""

    def test_messages_replace_each_other(self, session):
        session.add_time("-1")
        session.calculate("")
        assert session.error_message == T_INPUT_ERROR

    def test_remove_time(self, filled_session):
        filled_session.remove_time(0)
        assert filled_session.times.values == (3.0, 5.0, 7.0)

    def test_remove_out_of_range(self, filled_session):
        with pytest.warns(UserWarning):
            filled_session.remove_time(99)
        assert filled_session.count == 4


# ---------------------------------------------------------------------------
# Testy: obliczenia i stan okna wyników
# ---------------------------------------------------------------------------


class TestCalculate:
    def test_calculate_shows_results(self, filled_session):
        assert filled_session.calculate("4")
        assert filled_session.results_visible
        assert filled_session.result.F == "0.500"
        assert filled_session.result.mean_time == "4.00"
        assert filled_session.error_message == ""

    def test_invalid_t_keeps_state(self, filled_session):
        filled_session.calculate("4")
        previous = filled_session.result
        filled_session.close_results()

        assert not filled_session.calculate("-2")
        assert filled_session.error_message == T_INPUT_ERROR
        assert filled_session.result is previous
        assert not filled_session.results_visible

    def test_no_data(self, session):
        """Pusta lista → jawny komunikat o braku danych, brak wyniku."""
        assert not session.calculate("1")
        assert session.result is None
        assert not session.results_visible
        assert "Brak danych" in session.error_message

    def test_close_keeps_result(self, filled_session):
        filled_session.calculate("4")
        filled_session.close_results()
        assert not filled_session.results_visible
        assert filled_session.result is not None

    def test_new_calculation_replaces_result(self, filled_session):
        filled_session.calculate("4")
        filled_session.calculate("10")
        assert filled_session.result.t == 10.0
        assert filled_session.result.R == "0.000"

    def test_result_is_snapshot(self, filled_session):
        filled_session.calculate("4")
        filled_session.add_time("100")
        assert filled_session.result.n == 4
        assert filled_session.result.mean_time == "4.00"

    def test_add_remove_do_not_change_visibility(self, filled_session):
        filled_session.calculate("4")
        filled_session.add_time("9")
        filled_session.remove_time(0)
        assert filled_session.results_visible
        filled_session.close_results()
        filled_session.add_time("2")
        assert not filled_session.results_visible


# ---------------------------------------------------------------------------
# Testy: reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_reset_clears_everything(self, filled_session):
        filled_session.calculate("4")
        filled_session.time_input = "8"
        filled_session.add_time("-1")
        filled_session.reset()

        assert filled_session.count == 0
        assert filled_session.result is None
        assert not filled_session.results_visible
        assert filled_session.time_input == ""
        assert filled_session.t_input == ""
        assert filled_session.error_message == ""

    def test_reset_on_fresh_session(self, session):
        session.reset()
        assert session.count == 0
        assert session.result is None


# ---------------------------------------------------------------------------
# Testy: raport
# ---------------------------------------------------------------------------


class TestReport:
    def test_report_without_calculation(self, session):
        session.add_time("10")
        session.add_time("20")
        assert session.report_text().splitlines() == [
            "Raport Niezawodności",
            "",
            "Wprowadzone czasy do awarii:",
            "1. 10 godzin",
            "2. 20 godzin",
        ]

    def test_report_after_reset_has_no_results(self, filled_session):
        filled_session.calculate("4")
        filled_session.reset()
        assert "Wyniki obliczeń" not in filled_session.report_text()

    def test_report_after_close_keeps_results(self, filled_session):
        filled_session.calculate("4")
        filled_session.close_results()
        assert "Wyniki obliczeń dla t = 4:" in filled_session.report_text()

    def test_export(self, filled_session, tmp_path):
        filled_session.calculate("3")
        path = filled_session.export_report(tmp_path / "r.txt")
        text = path.read_text(encoding="utf-8")
        assert "f*(t): 0.250" in text
        assert text == filled_session.report_text()
