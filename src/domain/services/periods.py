"""Resolution of period selectors into concrete date windows."""

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from src.domain.errors import InvalidPeriod
from src.domain.models.period import (
    ExplicitPeriod,
    MonthKey,
    PeriodPreset,
    PeriodSelector,
    PeriodWindow,
)


DEFAULT_PRESET = PeriodPreset.LAST_6_MONTHS

_PRESET_MONTHS = {
    PeriodPreset.LAST_3_MONTHS: 3,
    PeriodPreset.LAST_6_MONTHS: 6,
    PeriodPreset.LAST_12_MONTHS: 12,
}
_LAST_30_DAYS = timedelta(days=30)


def resolve_period(
    selector: PeriodSelector | None,
    today: date,
) -> PeriodWindow:
    """Resolve a period selector into an inclusive window.

    Fixed presets end on the last day of the month containing ``today`` and
    start at ``today`` minus the preset offset. Explicit periods are used
    verbatim and fall back to the last six months when a bound is missing.

    Args:
        selector: Preset, preset tag string, explicit bounds or None.
        today: Reference date.

    Returns:
        PeriodWindow: The resolved window.

    Raises:
        InvalidPeriod: Unknown tag, malformed date or start after end.
    """
    if selector is None:
        return _resolve_preset(DEFAULT_PRESET, today)
    if isinstance(selector, ExplicitPeriod):
        return _resolve_explicit(selector, today)
    return _resolve_preset(parse_preset(selector), today)


def parse_preset(value: PeriodPreset | str) -> PeriodPreset:
    """Return the preset matching a tag such as ``last-3-months``."""
    if isinstance(value, PeriodPreset):
        return value
    cleaned = str(value).strip().lower().replace("_", "-")
    try:
        return PeriodPreset(cleaned)
    except ValueError as exc:
        raise InvalidPeriod(f"Unknown period selector: {value!r}") from exc


def parse_date(value: date | str, field_name: str = "date") -> date:
    """Parse a date or an ISO ``YYYY-MM-DD`` string.

    Raises:
        InvalidPeriod: When the value is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidPeriod(
            f"Invalid {field_name} '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def describe_selector(selector: PeriodSelector | None) -> str:
    """Return a stable label for the selector, as stored with reports."""
    if isinstance(selector, ExplicitPeriod):
        if selector.start and selector.end:
            return "custom"
        return DEFAULT_PRESET.value
    if selector is None:
        return DEFAULT_PRESET.value
    return parse_preset(selector).value


def last_day_of_month(value: date) -> date:
    return MonthKey.of(value).last_day


def months_before(value: date, months: int) -> date:
    """Return ``value`` shifted back by whole calendar months.

    A day missing from the target month rolls over into the next one:
    2024-05-31 minus 3 months is 2024-03-02.
    """
    anchor = value.replace(day=1) - relativedelta(months=months)
    return anchor + timedelta(days=value.day - 1)


def _resolve_preset(preset: PeriodPreset, today: date) -> PeriodWindow:
    if preset is PeriodPreset.LAST_30_DAYS:
        start = today - _LAST_30_DAYS
    else:
        start = months_before(today, _PRESET_MONTHS[preset])
    return PeriodWindow(start=start, end=last_day_of_month(today))


def _resolve_explicit(selector: ExplicitPeriod, today: date) -> PeriodWindow:
    if not selector.start or not selector.end:
        return _resolve_preset(DEFAULT_PRESET, today)
    start = parse_date(selector.start, "start date")
    end = parse_date(selector.end, "end date")
    return PeriodWindow(start=start, end=end)


__all__ = [
    "DEFAULT_PRESET",
    "resolve_period",
    "parse_preset",
    "parse_date",
    "describe_selector",
    "last_day_of_month",
    "months_before",
]
