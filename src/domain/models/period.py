"""Domain models for date windows and calendar months."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
import calendar

from src.domain.errors import InvalidPeriod


class PeriodPreset(str, Enum):
    """Fixed trailing windows offered by the dashboard."""

    LAST_30_DAYS = "last-30-days"
    LAST_3_MONTHS = "last-3-months"
    LAST_6_MONTHS = "last-6-months"
    LAST_12_MONTHS = "last-12-months"


@dataclass(frozen=True)
class ExplicitPeriod:
    """Caller-provided bounds; either may be missing or an ISO string."""

    start: date | str | None = None
    end: date | str | None = None


PeriodSelector = PeriodPreset | ExplicitPeriod | str


@dataclass(frozen=True)
class PeriodWindow:
    """Inclusive date window with start <= end."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidPeriod(
                f"Period start {self.start} is after end {self.end}"
            )

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end


@dataclass(frozen=True, order=True)
class MonthKey:
    """Calendar month used as a time-series bucket key."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month number: {self.month}")

    @classmethod
    def of(cls, value: date) -> "MonthKey":
        return cls(year=value.year, month=value.month)

    def shift(self, months: int) -> "MonthKey":
        index = self.year * 12 + (self.month - 1) + months
        return MonthKey(year=index // 12, month=index % 12 + 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(
            self.year,
            self.month,
            calendar.monthrange(self.year, self.month)[1],
        )

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.label


__all__ = [
    "PeriodPreset",
    "ExplicitPeriod",
    "PeriodSelector",
    "PeriodWindow",
    "MonthKey",
]
