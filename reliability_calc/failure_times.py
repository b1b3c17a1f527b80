"""
failure_times.py
----------------
Zbiór czasów do awarii (FailureTimeSet) wprowadzanych ręcznie przez
użytkownika oraz walidacja pojedynczych wartości liczbowych.

Reguły walidacji:
    - wartość musi dać się sparsować jako liczba rzeczywista
      (dopuszczalny przecinek jako separator dziesiętny, np. "12,5"),
    - wartość musi być skończona i nieujemna (≥ 0).

Duplikaty są dozwolone, a kolejność wprowadzania = kolejność wyświetlania.
"""

from __future__ import annotations

import math
import warnings
from typing import Iterable, Iterator

import pandas as pd


# ---------------------------------------------------------------------------
# Wyjątki
# ---------------------------------------------------------------------------


class ReliabilityError(ValueError):
    """Bazowy wyjątek kalkulatora niezawodności."""


class ValidationError(ReliabilityError):
    """Wartość z pola tekstowego nie jest poprawną, nieujemną liczbą."""


# ---------------------------------------------------------------------------
# Walidacja
# ---------------------------------------------------------------------------


def parse_non_negative(text: str | float, label: str = "Wartość") -> float:
    """
    Zamienia tekst z pola wejściowego na nieujemną liczbę rzeczywistą.

    Parametry
    ----------
    text : str | float
        Surowa zawartość pola (np. "12.5", " 3 ", "7,25") lub gotowa liczba.
    label : str
        Nazwa pola używana w komunikacie błędu.

    Zwraca
    -------
    float
        Sparsowana wartość ≥ 0.

    Rzuca
    ------
    ValidationError
        Gdy tekst jest pusty, nie jest liczbą, jest NaN/inf lub jest ujemny.
    """
    if isinstance(text, str):
        cleaned = text.strip().replace(",", ".")
        if not cleaned:
            raise ValidationError(f"{label}: pole jest puste.")
        try:
            value = float(cleaned)
        except ValueError:
            raise ValidationError(f"{label}: '{text}' nie jest liczbą.")
    else:
        value = float(text)

    if not math.isfinite(value):
        raise ValidationError(f"{label}: wartość musi być skończona.")
    if value < 0:
        raise ValidationError(f"{label}: wartość nie może być ujemna.")
    return value


# ---------------------------------------------------------------------------
# Zbiór czasów do awarii
# ---------------------------------------------------------------------------


class FailureTimeSet:
    """
    Uporządkowana lista czasów do awarii (każdy element ≥ 0).

    Przykład
    --------
    >>> times = FailureTimeSet()
    >>> times.add("10")
    10.0
    >>> times.add("20,5")
    20.5
    >>> times.remove_at(0)
    >>> list(times)
    [20.5]
    """

    def __init__(self, values: Iterable[float | str] = ()) -> None:
        self._times: list[float] = []
        for value in values:
            self.add(value)

    def add(self, value: str | float) -> float:
        """Waliduje i dopisuje czas na koniec listy. Zwraca dodaną wartość."""
        time = parse_non_negative(value, label="Czas do awarii")
        self._times.append(time)
        return time

    def remove_at(self, index: int) -> None:
        """
        Usuwa element o podanej pozycji (0-based).

        Indeks spoza zakresu nie zmienia stanu, zgłaszane jest jedynie
        ostrzeżenie UserWarning.
        """
        if not 0 <= index < len(self._times):
            warnings.warn(
                f"Brak czasu do awarii o indeksie {index} "
                f"(liczba elementów: {len(self._times)}). Pominięto.",
                UserWarning,
                stacklevel=2,
            )
            return
        del self._times[index]

    def clear(self) -> None:
        self._times.clear()

    @property
    def values(self) -> tuple[float, ...]:
        """Niezmienna migawka bieżących wartości."""
        return tuple(self._times)

    def to_series(self) -> pd.Series:
        """Czasy jako pd.Series numerowana od 1 (jak w raporcie)."""
        return pd.Series(
            self._times,
            index=pd.RangeIndex(1, len(self._times) + 1, name="Nr"),
            name="Czas_do_awarii",
            dtype="float64",
        )

    def __len__(self) -> int:
        return len(self._times)

    def __iter__(self) -> Iterator[float]:
        return iter(self._times)

    def __getitem__(self, index: int) -> float:
        return self._times[index]

    def __repr__(self) -> str:
        return f"FailureTimeSet({self._times!r})"
