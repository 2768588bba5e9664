"""
Tests for the business-calendar date rules.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from barberbook.application.utils.date_rules import (
    PAST_DATE_REASON,
    CalendarRules,
    earliest_bookable_date,
    validate_booking_date,
)

TODAY = date(2024, 5, 15)  # Wednesday


def test_past_dates_rejected():
    """Every day before today is rejected with the past-date reason."""
    rules = CalendarRules()
    for days_back in (1, 2, 6, 30, 365):
        decision = validate_booking_date(TODAY - timedelta(days=days_back), TODAY, rules)
        assert decision.accepted is False
        assert decision.reason == PAST_DATE_REASON


def test_today_is_accepted():
    assert validate_booking_date(TODAY, TODAY, CalendarRules()).accepted is True


def test_comparison_ignores_time_of_day():
    """A late-evening today and an early-morning 'now' still compare as the same day."""
    candidate = datetime(2024, 5, 15, 0, 1)
    now = datetime(2024, 5, 15, 23, 59)
    assert validate_booking_date(candidate, now, CalendarRules()).accepted is True


def test_sundays_rejected_however_far_ahead():
    rules = CalendarRules()
    sunday = date(2024, 5, 19)
    for weeks in (0, 1, 10, 52):
        decision = validate_booking_date(sunday + timedelta(weeks=weeks), TODAY, rules)
        assert decision.accepted is False
        assert decision.reason == "We are closed on Sundays!"


def test_weekdays_and_saturday_accepted():
    rules = CalendarRules()
    for offset in range(0, 4):  # Wed..Sat
        assert validate_booking_date(TODAY + timedelta(days=offset), TODAY, rules).accepted is True
    assert validate_booking_date(date(2024, 5, 20), TODAY, rules).accepted is True  # Monday


def test_closed_weekday_is_configurable():
    rules = CalendarRules(closed_weekdays=frozenset({0}))  # Monday
    assert validate_booking_date(date(2024, 5, 19), TODAY, rules).accepted is True
    decision = validate_booking_date(date(2024, 5, 20), TODAY, rules)
    assert decision.accepted is False
    assert decision.reason == "We are closed on Mondays!"


def test_past_dates_allowed_when_rule_disabled():
    rules = CalendarRules(reject_past_dates=False)
    assert validate_booking_date(date(2024, 5, 14), TODAY, rules).accepted is True


def test_booking_horizon():
    rules = CalendarRules(horizon_days=30)
    assert validate_booking_date(TODAY + timedelta(days=30), TODAY, rules).accepted is True
    decision = validate_booking_date(TODAY + timedelta(days=31), TODAY, rules)
    assert decision.accepted is False
    assert decision.reason == "Appointments cannot be made more than 30 days in advance"


def test_horizon_disabled_by_default():
    assert validate_booking_date(TODAY + timedelta(days=400), TODAY, CalendarRules()).accepted is True


def test_earliest_bookable_date_skips_closed_days():
    saturday = date(2024, 5, 18)
    sunday = date(2024, 5, 19)
    rules = CalendarRules()
    assert earliest_bookable_date(saturday, rules) == saturday
    assert earliest_bookable_date(sunday, rules) == date(2024, 5, 20)


def test_earliest_bookable_date_when_always_closed():
    rules = CalendarRules(closed_weekdays=frozenset(range(7)))
    assert earliest_bookable_date(TODAY, rules) is None


def test_earliest_bookable_date_respects_horizon():
    sunday = date(2024, 5, 19)
    assert earliest_bookable_date(sunday, CalendarRules(horizon_days=0)) is None
    assert earliest_bookable_date(sunday, CalendarRules(horizon_days=1)) == date(2024, 5, 20)
    assert earliest_bookable_date(TODAY, CalendarRules(horizon_days=0)) == TODAY
