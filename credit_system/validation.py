"""Validation rules shared by the request models.

Field constraints are declared on the pydantic models in
:mod:`credit_system.dto.request`. This module holds what they share: the
CPF pattern, the clock and policy dependent credit rules, and the mapping
of pydantic errors to :class:`Violation` records.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable

from pydantic_core import PydanticCustomError

CPF_PATTERN = r"^\d{3}\.\d{3}\.\d{3}-\d{2}$"

# Location prefixes FastAPI adds to request errors
REQUEST_LOCATIONS = ("body", "query", "path")


@dataclass(frozen=True)
class Violation:
    """A single violated constraint.

    ``field`` uses the external (camelCase) field name.
    """

    field: str
    message: str


def violations_from_errors(
    errors: Iterable[dict[str, Any]], skip: tuple[str, ...] = ()
) -> list[Violation]:
    """Convert pydantic error dicts to violations, keeping their order.

    Parameters
    ----------
    errors : Iterable[dict[str, Any]]
        Output of ``ValidationError.errors()``.
    skip : tuple[str, ...]
        Location parts dropped from the field name, e.g. ``"body"``.

    Returns
    -------
    list[Violation]
        One violation per error; a whole-payload error is named ``body``.
    """
    violations = []
    for error in errors:
        names = [str(part) for part in error["loc"] if part not in skip]
        violations.append(Violation(".".join(names) or "body", error["msg"]))
    return violations


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month.

    Parameters
    ----------
    start : date
        Anchor date.
    months : int
        Number of months to add (may be zero).

    Returns
    -------
    date
        Shifted date; ``date(2024, 1, 31)`` plus one month is
        ``date(2024, 2, 29)``.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def check_first_installment(value: date, today: date, max_months: int) -> date:
    """First installment must fall after ``today`` and within ``max_months`` of it.

    Parameters
    ----------
    value : date
        Requested first installment date.
    today : date
        Reference date, normally supplied by the application clock.
    max_months : int
        Width of the allowed window in months.

    Raises
    ------
    PydanticCustomError
        Reported by pydantic as an error on the validated field.
    """
    if value <= today:
        raise PydanticCustomError("future_date", "must be a future date")
    limit = add_months(today, max_months)
    if value > limit:
        raise PydanticCustomError(
            "installment_window",
            "must be within {months} months (on or before {limit})",
            {"months": max_months, "limit": limit.isoformat()},
        )
    return value


def check_installments(value: int, minimum: int, maximum: int) -> int:
    if value < minimum or value > maximum:
        raise PydanticCustomError(
            "installments_range",
            "must be between {minimum} and {maximum}",
            {"minimum": minimum, "maximum": maximum},
        )
    return value
