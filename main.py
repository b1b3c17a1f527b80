"""
main.py – Demo kalkulatora empirycznych wskaźników niezawodności
=================================================================
Uruchom: python main.py
"""

import pandas as pd

from reliability_calc import (
    CalculatorSession,
    tabulate_metrics,
    FORMULAS,
)

# ---------------------------------------------------------------------------
# Przykładowe czasy do awarii [h] (symulacja ręcznego wprowadzania)
# ---------------------------------------------------------------------------

FAILURE_TIMES = ["120", "340", "95", "410", "275", "-5", "", "188,5", "520", "300"]

T_POINTS = [0.0, 100.0, 200.0, 300.0, 400.0, 500.0, 600.0]


def print_separator(char: str = "─", width: int = 80) -> None:
    print(char * width)


def run_demo() -> None:
    T_QUERY = "300"

    print()
    print("=" * 80)
    print("  EMPIRYCZNE WSKAŹNIKI NIEZAWODNOŚCI – F*(t), R*(t), f*(t), λ*(t), E*T")
    print("=" * 80)

    # ------------------------------------------------------------------
    # 1. Wzory
    # ------------------------------------------------------------------
    print("\n📐 WZORY OBLICZEŃ\n")
    for symbol, description, formula in FORMULAS:
        print(f"  {symbol:<6} {description:<45} {formula}")

    # ------------------------------------------------------------------
    # 2. Wprowadzanie danych (z walidacją)
    # ------------------------------------------------------------------
    print("\n\n📋 WPROWADZANIE CZASÓW DO AWARII\n")
    session = CalculatorSession()
    for raw in FAILURE_TIMES:
        if session.add_time(raw):
            print(f"  {raw!r:>10} → dodano")
        else:
            print(f"  {raw!r:>10} → ⚠ {session.error_message}")

    print_separator()
    print(f"  Liczba wprowadzonych czasów do awarii: {session.count}")
    print()
    print(session.times.to_series().describe().to_string())

    # ------------------------------------------------------------------
    # 3. Wyniki dla pojedynczego t
    # ------------------------------------------------------------------
    print(f"\n\n🔢 WYNIKI DLA t = {T_QUERY}\n")
    if not session.calculate(T_QUERY):
        print(f"  [!] {session.error_message}")
        return
    r = session.result
    print(f"  F*(t) = {r.F}")
    print(f"  R*(t) = {r.R}")
    print(f"  f*(t) = {r.f}")
    print(f"  λ*(t) = {r.lambda_}")
    print(f"  E*T   = {r.mean_time} {session.unit}")

    # ------------------------------------------------------------------
    # 4. Przebieg wskaźników w funkcji t
    # ------------------------------------------------------------------
    print("\n\n📊 PRZEBIEG WSKAŹNIKÓW W FUNKCJI t\n")
    df = tabulate_metrics(session.times, T_POINTS)
    with pd.option_context("display.float_format", "{:.4f}".format):
        print(df.to_string(index=False))

    # ------------------------------------------------------------------
    # 5. Raport
    # ------------------------------------------------------------------
    print("\n\n📄 RAPORT\n")
    print_separator()
    print(session.report_text(), end="")
    print_separator()

    try:
        path = session.export_report()
        print(f"\nZapisano raport do '{path}'.")
    except OSError as e:
        print(f"\n[!] Błąd zapisu raportu: {e}")


if __name__ == "__main__":
    run_demo()
