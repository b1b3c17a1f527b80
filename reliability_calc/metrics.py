"""
metrics.py
----------
Empiryczne wskaźniki niezawodności wyznaczane z listy czasów do awarii:

    F*(t) = liczba czasów < t / n                 – prawdopodobieństwo awarii
    R*(t) = 1 − F*(t)                             – funkcja niezawodności
    f*(t) = c / ((n · c) lub 1),  c = #(T ≤ t)    – funkcja gęstości
    λ*(t) = f*(t) / R*(t)  (0, gdy R*(t) = 0)     – intensywność uszkodzeń
    E*T   = średnia arytmetyczna czasów           – średni czas do awarii

Uwaga do f*(t): wzór redukuje się do 1/n, gdy c > 0, oraz do 0, gdy c = 0.

Wszystkie wartości liczone są od zera przy każdym wywołaniu (brak cache).
Dla n = 0 funkcje F/R/f/λ rzucają InsufficientDataError zamiast zwracać NaN.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd

from .failure_times import ReliabilityError


# ---------------------------------------------------------------------------
# Precyzja prezentacji
# ---------------------------------------------------------------------------

PROBABILITY_DIGITS: int = 3   # F, R, f
HAZARD_DIGITS: int = 10       # λ – bardzo małe wartości muszą być widoczne
MEAN_DIGITS: int = 2          # E*T

FORMULAS: tuple[tuple[str, str, str], ...] = (
    ("F*(t)", "Prawdopodobieństwo awarii przed czasem t.", "F*(t) = P(T < t)"),
    ("R*(t)", "Prawdopodobieństwo działania do czasu t.", "R*(t) = 1 - F*(t)"),
    (
        "f*(t)",
        "Funkcja gęstości.",
        "f*(t) = liczba awarii dokładnie w czasie t / liczba urządzeń",
    ),
    ("λ*(t)", "Intensywność uszkodzeń.", "λ*(t) = f*(t) / R*(t)"),
    ("E*T", "Oczekiwany czas do awarii.", "E*T = średnia z wprowadzonych czasów"),
)


class InsufficientDataError(ReliabilityError):
    """Brak czasów do awarii – wskaźników nie da się wyznaczyć."""


# ---------------------------------------------------------------------------
# Wynik obliczeń
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResultSet:
    """Migawka wyników dla danego zbioru czasów i punktu t."""

    t: float
    n: int
    F: str
    R: str
    f: str
    lambda_: str
    mean_time: str

    def to_dict(self) -> dict[str, str | float | int]:
        return {
            "t": self.t,
            "n": self.n,
            "F": self.F,
            "R": self.R,
            "f": self.f,
            "lambda": self.lambda_,
            "E_T": self.mean_time,
        }


# ---------------------------------------------------------------------------
# Funkcje punktowe
# ---------------------------------------------------------------------------


def _require_data(times: Sequence[float]) -> int:
    n = len(times)
    if n == 0:
        raise InsufficientDataError(
            "Brak danych: wprowadź co najmniej jeden czas do awarii."
        )
    return n


def calculate_f(times: Sequence[float], t: float) -> float:
    """F*(t): odsetek czasów ściśle mniejszych od t."""
    n = _require_data(times)
    failures_before_t = sum(1 for time in times if time < t)
    return failures_before_t / n


def calculate_r(times: Sequence[float], t: float) -> float:
    """R*(t) = 1 − F*(t)."""
    return 1.0 - calculate_f(times, t)


def calculate_density(times: Sequence[float], t: float) -> float:
    """
    f*(t) = c / ((n · c) lub 1), gdzie c = liczba czasów ≤ t.

    Mianownik równy 0 (c = 0) zastępowany jest przez 1, więc f*(t) = 0,
    gdy żaden czas nie jest ≤ t, a w przeciwnym razie f*(t) = 1/n.
    """
    n = _require_data(times)
    failures_up_to_t = sum(1 for time in times if time <= t)
    denominator = n * failures_up_to_t or 1
    return failures_up_to_t / denominator


def calculate_lambda(times: Sequence[float], t: float) -> float:
    """λ*(t) = f*(t) / R*(t); przy R*(t) = 0 zwraca 0."""
    r_t = calculate_r(times, t)
    if r_t == 0:
        return 0.0
    return calculate_density(times, t) / r_t


def calculate_mean_time(times: Sequence[float]) -> float:
    """E*T – średnia arytmetyczna; 0 dla pustej listy."""
    if len(times) == 0:
        return 0.0
    return sum(times) / len(times)


# ---------------------------------------------------------------------------
# Komplet wyników
# ---------------------------------------------------------------------------


def compute_results(times: Iterable[float], t: float) -> ResultSet:
    """
    Wyznacza F*, R*, f*, λ* w punkcie t oraz E*T i formatuje je do raportu.

    Parametry
    ----------
    times : Iterable[float]
        Czasy do awarii (każdy ≥ 0).
    t : float
        Punkt, w którym liczone są wskaźniki (≥ 0).

    Zwraca
    -------
    ResultSet
        Wartości jako napisy o stałej precyzji (3 / 10 / 2 miejsca).

    Rzuca
    ------
    InsufficientDataError
        Gdy lista czasów jest pusta.
    """
    snapshot = tuple(times)
    _require_data(snapshot)

    return ResultSet(
        t=t,
        n=len(snapshot),
        F=f"{calculate_f(snapshot, t):.{PROBABILITY_DIGITS}f}",
        R=f"{calculate_r(snapshot, t):.{PROBABILITY_DIGITS}f}",
        f=f"{calculate_density(snapshot, t):.{PROBABILITY_DIGITS}f}",
        lambda_=f"{calculate_lambda(snapshot, t):.{HAZARD_DIGITS}f}",
        mean_time=f"{calculate_mean_time(snapshot):.{MEAN_DIGITS}f}",
    )


def tabulate_metrics(times: Iterable[float], t_values: Iterable[float]) -> pd.DataFrame:
    """
    Przebieg F*, R*, f*, λ* dla wielu punktów t (wartości liczbowe).

    Zwraca
    -------
    pd.DataFrame
        Kolumny: t, F, R, f, lambda – jeden wiersz na punkt t.

    Przykład
    --------
    >>> df = tabulate_metrics([1, 3, 5, 7], [0, 2, 4, 6, 8])
    >>> df["F"].tolist()
    [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    snapshot = tuple(times)
    _require_data(snapshot)

    rows = [
        {
            "t": float(t),
            "F": calculate_f(snapshot, t),
            "R": calculate_r(snapshot, t),
            "f": calculate_density(snapshot, t),
            "lambda": calculate_lambda(snapshot, t),
        }
        for t in t_values
    ]
    return pd.DataFrame(rows, columns=["t", "F", "R", "f", "lambda"])
