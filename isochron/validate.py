#! /usr/bin/env python
"""Range checks for date and time components

Each function checks its arguments in a fixed order and raises
:class:`isochron.errors.OutOfRange` for the first one that fails, so a
value is either accepted in full or not at all."""

from .errors import Field, OutOfRange
from .gregorian import SECONDS_PER_DAY, SECONDS_PER_MINUTE, days_in_month


NANOSECONDS_PER_SECOND = 1000000000


def check_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("%s must be an integer, not %s" %
                        (name, repr(value)))


def check_date(year, month, day):
    """Checks a calendar date

    The day is checked against the length of the month, taking leap
    years into account."""
    check_int("year", year)
    check_int("month", month)
    check_int("day", day)
    if month < 1 or month > 12:
        raise OutOfRange(Field.Month, month)
    if day < 1 or day > days_in_month(month, year):
        raise OutOfRange(Field.Day, day, month=month, year=year)


def check_nanoseconds(nanoseconds):
    """Checks a fractional second expressed in nanoseconds"""
    check_int("nanoseconds", nanoseconds)
    if nanoseconds < 0 or nanoseconds >= NANOSECONDS_PER_SECOND:
        raise OutOfRange(Field.Fraction, nanoseconds)


def check_time(hour, minute, second, nanoseconds=0, allow_24=False):
    """Checks a time of day

    The second may be 60 to allow for leap seconds.  If *allow_24* is
    True then hour 24 is accepted, provided all the remaining fields are
    zero, it represents midnight at the end of the day.  Any of minute
    and second may be None, for times with reduced precision."""
    check_int("hour", hour)
    if hour < 0 or hour > 24 or (hour == 24 and not allow_24):
        raise OutOfRange(Field.Hour, hour)
    if minute is not None:
        check_int("minute", minute)
        if minute < 0 or minute > 59:
            raise OutOfRange(Field.Minute, minute)
    if second is not None:
        check_int("second", second)
        if second < 0 or second > 60:
            raise OutOfRange(Field.Second, second)
    check_nanoseconds(nanoseconds)
    if hour == 24 and (minute or second or nanoseconds):
        raise OutOfRange(Field.Hour, hour)


def check_components(year, month, day, hour=0, minute=0, second=0,
                     nanoseconds=0):
    """Checks a complete set of calendar components

    The checks are made in the order: month, day, hour, minute, second,
    fraction."""
    check_date(year, month, day)
    check_time(hour, minute, second, nanoseconds)


def check_offset(utc_offset):
    """Checks a UTC offset expressed in seconds

    Offsets must be a whole number of minutes and less than a day in
    either direction."""
    check_int("utc_offset", utc_offset)
    if (utc_offset % SECONDS_PER_MINUTE or
            abs(utc_offset) >= SECONDS_PER_DAY):
        raise OutOfRange(Field.Timezone, utc_offset)
