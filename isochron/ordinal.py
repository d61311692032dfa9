#! /usr/bin/env python
"""ISO 8601 ordinal dates"""

from collections import namedtuple

from .errors import Field, OutOfRange
from .formatter import format_year
from .gregorian import day_number, days_in_year, month_day, ordinal_day
from .validate import check_int


def to_ordinal(year, month, day):
    """Returns the day of the year for a calendar date"""
    return ordinal_day(year, month, day)


def from_ordinal(year, day):
    """Returns a tuple of (month, day) for an ordinal day of *year*"""
    return month_day(year, day)


class OrdinalDate(namedtuple('OrdinalDate', ('year', 'day'))):

    """A date expressed as a year and a day within that year

    Day 1 is 1st January and the last day is 365 or, in leap years,
    366.  For example, the 39th day of 2024 (8th February)::

        OrdinalDate(2024, 39)

    The constructor raises :class:`isochron.errors.OutOfRange` if *day*
    is not valid for *year*."""

    __slots__ = ()

    def __new__(cls, year, day):
        check_int("year", year)
        check_int("day", day)
        if day < 1 or day > days_in_year(year):
            raise OutOfRange(Field.OrdinalDay, day, year=year)
        return super(OrdinalDate, cls).__new__(cls, year, day)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def _unchecked(cls, year, day):
        return tuple.__new__(cls, (year, day))

    @classmethod
    def from_calendar(cls, year, month, day):
        """Returns the ordinal date of a (valid) calendar date"""
        return cls._unchecked(year, to_ordinal(year, month, day))

    @classmethod
    def from_moment(cls, moment):
        """Returns the ordinal date of *moment* under its own UTC offset"""
        c = moment.components
        return cls.from_calendar(c.year, c.month, c.day)

    @classmethod
    def from_str(cls, src):
        """Parses an ordinal date such as 2024-039 or 2024039"""
        from .parser import parse_ordinal_date
        return parse_ordinal_date(src)

    def to_calendar(self):
        """Returns a tuple of (year, month, day)"""
        month, day = from_ordinal(self.year, self.day)
        return self.year, month, day

    def get_day_number(self):
        """Returns the number of days since the epoch"""
        return day_number(*self.to_calendar())

    def to_moment(self, utc_offset=0):
        """Returns the :class:`isochron.moment.Moment` at the start of
        this date on the wall clock of *utc_offset*"""
        from .moment import Moment
        return Moment.from_ordinal_date(self, utc_offset)

    def get_string(self, basic=False):
        """Formats this date, for example 2024-039 or 2024039 (basic)"""
        if basic:
            return "%s%03i" % (format_year(self.year), self.day)
        else:
            return "%s-%03i" % (format_year(self.year), self.day)

    def __str__(self):
        return self.get_string()
