from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

PAST_DATE_REASON = "You cannot select a past date for appointment!"


@dataclass(frozen=True)
class CalendarRules:
    closed_weekdays: frozenset[int] = field(default_factory=lambda: frozenset({6}))  # Sunday
    reject_past_dates: bool = True
    horizon_days: int | None = None  # None disables the advance-booking limit

    @classmethod
    def from_settings(cls, settings) -> "CalendarRules":
        return cls(
            closed_weekdays=frozenset(settings.CLOSED_WEEKDAYS),
            reject_past_dates=settings.REJECT_PAST_DATES,
            horizon_days=settings.BOOKING_HORIZON_DAYS,
        )


@dataclass(frozen=True)
class DateDecision:
    accepted: bool
    reason: str = ""


def business_today(timezone: ZoneInfo) -> date:
    return datetime.now(timezone).date()


def calendar_day(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def validate_booking_date(candidate: date, today: date, rules: CalendarRules) -> DateDecision:
    """Accept or reject a candidate booking date. Never adjusts the date."""
    day = calendar_day(candidate)
    today = calendar_day(today)

    if rules.reject_past_dates and day < today:
        return DateDecision(False, PAST_DATE_REASON)

    if day.weekday() in rules.closed_weekdays:
        return DateDecision(False, f"We are closed on {calendar.day_name[day.weekday()]}s!")

    if rules.horizon_days is not None and day > today + timedelta(days=rules.horizon_days):
        return DateDecision(
            False,
            f"Appointments cannot be made more than {rules.horizon_days} days in advance",
        )

    return DateDecision(True)


def earliest_bookable_date(today: date, rules: CalendarRules) -> date | None:
    """
    First day on or after today that is not a closed weekday. None if every weekday
    is closed or the first open day lies beyond the booking horizon.
    """
    if len(rules.closed_weekdays) >= 7:
        return None
    today = calendar_day(today)
    day = today
    while day.weekday() in rules.closed_weekdays:
        day += timedelta(days=1)
    if rules.horizon_days is not None and day > today + timedelta(days=rules.horizon_days):
        return None
    return day
