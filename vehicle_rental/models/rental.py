from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from vehicle_rental.exceptions import InvalidDateRangeError, ValidationError
from vehicle_rental.models.customer import CustomerBase
from vehicle_rental.models.vehicle import VehicleBase
from vehicle_rental.utils.constants import DATE_FMT
from vehicle_rental.utils.filters import fmt_number

_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ------------------------- calendar helpers -------------------------
def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Days in ``month`` of ``year``; 0 for a month outside 1..12."""
    if month < 1 or month > 12:
        return 0
    days = _MONTH_DAYS[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def _split(date: str) -> tuple[int, int, int]:
    return int(date[0:4]), int(date[5:7]), int(date[8:10])


def validate_date(date: str) -> bool:
    """True iff ``date`` is a calendar-valid YYYY-MM-DD string."""
    if not isinstance(date, str) or not _DATE_SHAPE.fullmatch(date):
        return False
    year, month, day = _split(date)
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(month, year)


def days_since_epoch(date: str) -> int:
    """
    Absolute day counter: complete years before ``year`` (from year 1),
    complete months before ``month``, plus the day of month.
    Only the difference between two counters is meaningful.
    """
    year, month, day = _split(date)
    total = day
    total += sum(366 if is_leap_year(y) else 365 for y in range(1, year))
    total += sum(days_in_month(m, year) for m in range(1, month))
    return total


# ============================ Rental ============================
@dataclass
class Rental:
    """
    An active rental. It refers to the vehicle and the customer by key only;
    the manager owns the entities and resolves them when a cost or a report
    is needed.
    """
    registration: str
    customer_id: str
    start_date: str
    end_date: str

    def __post_init__(self) -> None:
        if not self.registration:
            raise ValidationError("Vehicle cannot be null.")
        if not self.customer_id:
            raise ValidationError("Customer cannot be null.")
        if not validate_date(self.start_date):
            raise InvalidDateRangeError(f"Start date must be in format {DATE_FMT}.")
        if not validate_date(self.end_date):
            raise InvalidDateRangeError(f"End date must be in format {DATE_FMT}.")
        if self.end_date <= self.start_date:
            raise InvalidDateRangeError("End date must be later than start date.")

    def set_end_date(self, end: str) -> None:
        if not validate_date(end):
            raise InvalidDateRangeError(f"End date must be in format {DATE_FMT}.")
        if end <= self.start_date:
            raise InvalidDateRangeError("End date must be later than start date.")
        self.end_date = end

    def rental_duration_days(self) -> int:
        """Whole days between start and end, never less than one."""
        days = days_since_epoch(self.end_date) - days_since_epoch(self.start_date)
        return max(1, days)

    def total_cost(self, vehicle: Optional[VehicleBase]) -> float:
        if vehicle is None:
            return 0.0
        return vehicle.compute_rent_cost(self.rental_duration_days())

    def describe(self, vehicle: Optional[VehicleBase], customer: Optional[CustomerBase]) -> str:
        if vehicle is None or customer is None:
            return "Rental: [Empty/Invalid]"
        return "\n".join([
            f"Rental Details [{self.start_date} - {self.end_date}]:",
            f"  Duration: {self.rental_duration_days()} days",
            f"  Total Cost: {fmt_number(self.total_cost(vehicle))} zl",
            "--- Vehicle Info ---",
            vehicle.describe(),
            "--- Customer Info ---",
            customer.describe(),
        ])
