#! /usr/bin/env python
"""ISO 8601 week dates

ISO weeks start on a Monday and week 1 of a year is the week that
contains 4th January (equivalently, the week containing the year's
first Thursday).  As a result the first few days of January may belong
to the last week of the previous *week-year* and the last few days of
December may belong to week 1 of the next."""

from collections import namedtuple

from .errors import Field, OutOfRange
from .formatter import format_year
from .gregorian import (
    Weekday,
    day_number,
    day_number_weekday,
    from_day_number,
    iso_weekday,
    leap_year,
    weekday)
from .validate import check_int


def weeks_in_year(year):
    """Returns the number of ISO weeks in a year.

    Most years have 52 weeks of course, but if the year begins on a
    Thursday or a leap year begins on a Wednesday then it has 53."""
    jan1 = weekday(year, 1, 1)
    if jan1 == Weekday.Thursday:
        return 53
    elif jan1 == Weekday.Wednesday and leap_year(year):
        return 53
    else:
        return 52


def _monday(days):
    # the day number of the Monday on or before day number *days*
    return days - iso_weekday(day_number_weekday(days)) + 1


def week_one_monday(year):
    """Returns the day number of the Monday that starts week 1"""
    return _monday(day_number(year, 1, 4))


def iso_week(year, month, day):
    """Returns a tuple of (week_year, week) for a calendar date"""
    monday = _monday(day_number(year, month, day))
    week = (monday - week_one_monday(year)) // 7 + 1
    if week < 1:
        # belongs to the last week of the previous week-year
        return year - 1, weeks_in_year(year - 1)
    elif week > weeks_in_year(year):
        # belongs to week 1 of the next week-year
        return year + 1, 1
    else:
        return year, week


def week_date_day_number(week_year, week, weekday):
    """Returns the day number of a week date

    *weekday* uses the ISO numbering, 1=Monday to 7=Sunday."""
    return week_one_monday(week_year) + (week - 1) * 7 + weekday - 1


class WeekDate(namedtuple('WeekDate', ('week_year', 'week', 'weekday'))):

    """A date expressed as week-year, week and ISO weekday

    For example, Tuesday in week 3 of 2024::

        WeekDate(2024, 3, 2)

    The weekday uses the ISO numbering: 1 is Monday and 7 is Sunday.
    The constructor validates the weekday first and then the week
    against the number of weeks in *week_year*, raising
    :class:`isochron.errors.OutOfRange`.  WeekDate instances are
    tuples and hence immutable and hashable."""

    __slots__ = ()

    def __new__(cls, week_year, week, weekday):
        check_int("week_year", week_year)
        check_int("week", week)
        check_int("weekday", weekday)
        if weekday < 1 or weekday > 7:
            raise OutOfRange(Field.Weekday, weekday)
        if week < 1 or week > weeks_in_year(week_year):
            raise OutOfRange(Field.Week, week, year=week_year)
        return super(WeekDate, cls).__new__(cls, week_year, week, weekday)

    @classmethod
    def _make(cls, iterable):
        # _replace uses _make, keep it on the validated path
        return cls(*iterable)

    @classmethod
    def _unchecked(cls, week_year, week, weekday):
        return tuple.__new__(cls, (week_year, week, weekday))

    @classmethod
    def from_calendar(cls, year, month, day):
        """Returns the week date of a calendar date

        The calendar date is assumed to be valid."""
        week_year, week = iso_week(year, month, day)
        return cls._unchecked(
            week_year, week, iso_weekday(weekday(year, month, day)))

    @classmethod
    def from_moment(cls, moment):
        """Returns the week date of *moment* under its own UTC offset"""
        c = moment.components
        return cls.from_calendar(c.year, c.month, c.day)

    @classmethod
    def from_str(cls, src):
        """Constructs a WeekDate by parsing an ISO 8601 week date

        The extended and basic forms are accepted, 2024-W03-1 and
        2024W031, and no time may follow.  See
        :func:`isochron.parser.parse_week_date`."""
        from .parser import parse_week_date
        return parse_week_date(src)

    def get_day_number(self):
        """Returns the number of days since the epoch"""
        return week_date_day_number(self.week_year, self.week, self.weekday)

    def to_calendar(self):
        """Returns a tuple of (year, month, day)"""
        return from_day_number(self.get_day_number())

    def to_moment(self, utc_offset=0):
        """Returns the :class:`isochron.moment.Moment` at the start of
        this date on the wall clock of *utc_offset*"""
        from .moment import Moment
        return Moment.from_week_date(self, utc_offset)

    def get_string(self, basic=False):
        """Formats this date, for example 2024-W03-2

        basic
            True/False, selects basic form, e.g., 2024W032"""
        if basic:
            return "%sW%02i%i" % (
                format_year(self.week_year), self.week, self.weekday)
        else:
            return "%s-W%02i-%i" % (
                format_year(self.week_year), self.week, self.weekday)

    def __str__(self):
        return self.get_string()
