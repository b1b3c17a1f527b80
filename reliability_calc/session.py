"""
session.py
----------
Stan jednej sesji kalkulatora (niezależny od GUI):

    - lista czasów do awarii (FailureTimeSet),
    - surowa zawartość pól "czas do awarii" i "wartość t",
    - ostatni wynik obliczeń (ResultSet),
    - bieżący komunikat błędu,
    - widoczność okna z wynikami.

Przejścia stanów:

    Idle ──calculate(t)──▶ ResultsShown ──close_results()──▶ Idle (wynik ukryty)
      ▲                                                        │
      └──────────────────────────── reset() ◀──────────────────┘ (wynik usunięty)

add_time / remove_time są dozwolone w każdym stanie i nie zmieniają
widoczności okna wyników.
"""

from __future__ import annotations

from pathlib import Path

from .failure_times import FailureTimeSet, ReliabilityError, parse_non_negative
from .metrics import ResultSet, compute_results
from .report import DEFAULT_UNIT, format_report, save_report

TIME_INPUT_ERROR = "Czas do awarii nie może być ujemny ani pusty."
T_INPUT_ERROR = "Wartość t nie może być ujemna ani pusta."


class CalculatorSession:
    """
    Sesja interaktywna: przechowuje dane wejściowe i ostatni wynik.

    Metody nie rzucają wyjątków walidacji – błąd trafia do
    ``error_message`` (nowy komunikat zastępuje poprzedni), a stan
    pozostaje bez zmian. Każda operacja zwraca True przy powodzeniu.

    Przykład
    --------
    >>> session = CalculatorSession()
    >>> for value in ("2", "4", "6"):
    ...     _ = session.add_time(value)
    >>> session.calculate("5")
    True
    >>> session.result.mean_time
    '4.00'
    """

    def __init__(self, unit: str = DEFAULT_UNIT) -> None:
        self.unit = unit
        self.times = FailureTimeSet()
        self.time_input: str = ""
        self.t_input: str = ""
        self.result: ResultSet | None = None
        self.error_message: str = ""
        self.results_visible: bool = False

    # ------------------------------------------------------------------
    # Dane wejściowe
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Liczba wprowadzonych czasów do awarii."""
        return len(self.times)

    def add_time(self, text: str | None = None) -> bool:
        """Dodaje czas z pola (lub z ``text``); czyści pole i błąd po sukcesie."""
        if text is not None:
            self.time_input = text
        try:
            self.times.add(self.time_input)
        except ReliabilityError:
            self.error_message = TIME_INPUT_ERROR
            return False

        self.time_input = ""
        self.error_message = ""
        return True

    def remove_time(self, index: int) -> None:
        self.times.remove_at(index)

    # ------------------------------------------------------------------
    # Obliczenia
    # ------------------------------------------------------------------

    def calculate(self, text: str | None = None) -> bool:
        """
        Liczy wskaźniki dla t z pola (lub z ``text``) i pokazuje wyniki.

        Niepoprawne t lub pusta lista czasów → komunikat błędu, poprzedni
        wynik i widoczność okna pozostają bez zmian.
        """
        if text is not None:
            self.t_input = text
        try:
            t = parse_non_negative(self.t_input, label="Wartość t")
        except ReliabilityError:
            self.error_message = T_INPUT_ERROR
            return False

        try:
            self.result = compute_results(self.times, t)
        except ReliabilityError as exc:
            self.error_message = str(exc)
            return False

        self.results_visible = True
        self.error_message = ""
        return True

    def close_results(self) -> None:
        """Ukrywa okno wyników; wynik pozostaje zapamiętany."""
        self.results_visible = False

    def reset(self) -> None:
        self.times.clear()
        self.time_input = ""
        self.t_input = ""
        self.result = None
        self.results_visible = False
        self.error_message = ""

    # ------------------------------------------------------------------
    # Raport
    # ------------------------------------------------------------------

    def report_text(self) -> str:
        return format_report(self.times, self.result, unit=self.unit)

    def export_report(self, path: str | Path | None = None) -> Path:
        """Zapisuje raport do pliku (domyślnie reliability_report.txt)."""
        return save_report(self.report_text(), path)
