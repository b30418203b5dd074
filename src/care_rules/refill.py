"""
Medication Refill Module.

Projects when a medication's stock runs out and flags low stock.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

# Doses per day for the frequency labels offered by the client
FREQUENCY_DOSES = {
    "Daily": 1,
    "Twice Daily": 2,
    "Thrice Daily": 3,
}


@dataclass(frozen=True)
class Medication:
    """Stock and dosing snapshot of a medication."""

    name: str
    doses_per_day: int
    stock_units: int
    refill_threshold: int
    last_taken_at: Optional[datetime] = None


def doses_per_day_for(frequency: str) -> int:
    """Map a frequency label to doses per day (unknown labels count as three)."""
    return FREQUENCY_DOSES.get(frequency, 3)


def estimate_refill_date(stock_units: int, doses_per_day: int, today: date) -> date:
    """
    Project the date the stock reaches zero.

    Args:
        stock_units: Units left, >= 0
        doses_per_day: Doses taken per day, must be >= 1
        today: Reference date

    Returns:
        today plus the number of whole days the stock covers
    """
    days_remaining = stock_units // doses_per_day
    return today + timedelta(days=days_remaining)


def is_low_stock(medication: Medication) -> bool:
    """A medication is low when stock is at or below its refill threshold."""
    return medication.stock_units <= medication.refill_threshold


def taken_on(medication: Medication, day: date) -> bool:
    """Whether the last recorded dose was taken on the given day."""
    if medication.last_taken_at is None:
        return False
    return medication.last_taken_at.date() == day
