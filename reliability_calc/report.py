"""
report.py
---------
Raport tekstowy z wprowadzonych czasów do awarii i (opcjonalnie) wyników
obliczeń.

Układ raportu:

    Raport Niezawodności

    Wprowadzone czasy do awarii:
    1. 10 godzin
    2. 20 godzin

    Wyniki obliczeń dla t = 15:          ← tylko gdy istnieje ResultSet
    F*(t): 0.500
    ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .metrics import ResultSet

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

REPORT_FILENAME: str = "reliability_report.txt"
REPORT_ENCODING: str = "utf-8"
REPORT_HEADER: str = "Raport Niezawodności"
DEFAULT_UNIT: str = "godzin"


def format_time(value: float) -> str:
    """10.0 → "10", 2.5 → "2.5" (bez zbędnego ".0")."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_report(
    times: Iterable[float],
    result: ResultSet | None = None,
    *,
    unit: str = DEFAULT_UNIT,
) -> str:
    """
    Składa treść raportu jako jeden napis.

    Parametry
    ----------
    times : Iterable[float]
        Wprowadzone czasy do awarii (w kolejności wprowadzania).
    result : ResultSet | None
        Ostatni wynik obliczeń; None → raport bez sekcji wyników.
    unit : str
        Etykieta jednostki dopisywana do czasów. Domyślnie "godzin".
    """
    lines = [REPORT_HEADER, "", "Wprowadzone czasy do awarii:"]
    lines += [
        f"{index}. {format_time(time)} {unit}"
        for index, time in enumerate(times, start=1)
    ]

    if result is not None:
        lines += [
            "",
            f"Wyniki obliczeń dla t = {format_time(result.t)}:",
            f"F*(t): {result.F}",
            f"R*(t): {result.R}",
            f"f*(t): {result.f}",
            f"λ*(t): {result.lambda_}",
            f"E*T (średni czas do awarii): {result.mean_time} {unit}",
        ]

    return "\n".join(lines) + "\n"


def save_report(content: str, path: str | Path | None = None) -> Path:
    """
    Zapisuje treść raportu jako UTF-8. Domyślnie do REPORT_FILENAME
    w bieżącym katalogu. Błędy zapisu (OSError) są propagowane.
    """
    target = Path(path) if path is not None else Path(REPORT_FILENAME)
    target.write_text(content, encoding=REPORT_ENCODING)
    return target
