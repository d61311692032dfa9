#! /usr/bin/env python
"""Exceptions raised by the isochron package

All failures are raised as subclasses of :class:`DateTimeError`.  The
classes carry structured attributes describing the offending value so
that callers can build their own messages::

    try:
        m = Moment.from_str("2023-02-29")
    except OutOfRange as err:
        # err.field == Field.Day, err.value == 29
        # err.month == 2, err.year == 2023
        pass"""


class Field(object):

    """Defines constants naming the component an error refers to."""
    Year = "year"               #: calendar year (or week-year)
    Month = "month"             #: month of year
    Day = "day"                 #: day of month
    Time = "time"               #: the time as a whole, e.g., 24:30:00
    Hour = "hour"               #: hour of day
    Minute = "minute"           #: minute of hour
    Second = "second"           #: second of minute
    Fraction = "fraction"       #: fractional second
    Timezone = "timezone"       #: UTC offset or zone designator
    Week = "week"               #: ISO week number
    Weekday = "weekday"         #: ISO weekday, 1..7
    OrdinalDay = "ordinal_day"  #: day of year
    Repetitions = "repetitions"     #: recurrence count
    Years = "years"             #: duration years
    Months = "months"           #: duration months
    Days = "days"               #: duration days
    Hours = "hours"             #: duration hours
    Minutes = "minutes"         #: duration minutes
    Seconds = "seconds"         #: duration seconds


class DateTimeError(ValueError):

    """Base error for all isochron exceptions"""
    pass


class InvalidFormat(DateTimeError):

    """Raised when the overall shape of a string is not recognised

    detail
        A short description of what was expected."""

    def __init__(self, detail):
        super(InvalidFormat, self).__init__(detail)
        self.detail = detail


class DurationFormatError(InvalidFormat):

    """Raised for a malformed duration, e.g., P or P1H"""
    pass


class IntervalFormatError(InvalidFormat):

    """Raised for a malformed interval, e.g., P1D/P2D"""
    pass


class RecurrenceFormatError(InvalidFormat):

    """Raised for a malformed recurring interval, e.g., R5"""
    pass


class InvalidComponent(DateTimeError):

    """Raised when a component is syntactically invalid

    field
        One of the :class:`Field` constants

    text
        The source text that could not be parsed for *field*"""

    def __init__(self, field, text):
        super(InvalidComponent, self).__init__(
            "invalid %s: %r" % (field, text))
        self.field = field
        self.text = text


class OutOfRange(DateTimeError):

    """Raised when a component is outside its valid range

    field
        One of the :class:`Field` constants

    value
        The offending (integer) value

    month, year
        Context needed to explain why *value* is invalid, or None.  For
        example, day 29 is only out of range for month 2 in a year that
        is not a leap year."""

    def __init__(self, field, value, month=None, year=None):
        if month is not None:
            msg = "%s %i out of range for %04i-%02i" % (
                field, value, year, month)
        elif year is not None:
            msg = "%s %i out of range for %04i" % (field, value, year)
        else:
            msg = "%s %i out of range" % (field, value)
        super(OutOfRange, self).__init__(msg)
        self.field = field
        self.value = value
        self.month = month
        self.year = year
