"""
Reliability Calculator Package
Obliczanie empirycznych wskaźników niezawodności (F*, R*, f*, λ*, E*T)
na podstawie listy czasów do awarii.
"""

from .session import CalculatorSession

from .failure_times import (
    FailureTimeSet,
    ReliabilityError,
    ValidationError,
    parse_non_negative,
)
from .metrics import (
    calculate_f,
    calculate_r,
    calculate_density,
    calculate_lambda,
    calculate_mean_time,
    compute_results,
    tabulate_metrics,
    InsufficientDataError,
    ResultSet,
    FORMULAS,
)
from .report import format_report, save_report, REPORT_FILENAME

__all__ = [
    # Sesja
    "CalculatorSession",
    # Czasy do awarii
    "FailureTimeSet",
    "ReliabilityError",
    "ValidationError",
    "parse_non_negative",
    # Wskaźniki
    "calculate_f",
    "calculate_r",
    "calculate_density",
    "calculate_lambda",
    "calculate_mean_time",
    "compute_results",
    "tabulate_metrics",
    "InsufficientDataError",
    "ResultSet",
    "FORMULAS",
    # Raport
    "format_report",
    "save_report",
    "REPORT_FILENAME",
]
