#! /usr/bin/env python
"""ISO 8601 durations

Durations are symbolic: P1M is one month, not 30 days, and no attempt is
made to compare or add durations with different components."""

from .errors import Field, OutOfRange
from .formatter import format_fraction
from .mixins import FrozenMixin
from .validate import check_int, check_nanoseconds


class Duration(FrozenMixin):

    """A class for representing ISO durations

    Each of years, months, days, hours, minutes and seconds is a
    non-negative integer, nanoseconds is the fraction of the seconds
    component, e.g., P1Y2M3DT4H5M6.5S is::

        Duration(years=1, months=2, days=3, hours=4, minutes=5, seconds=6,
                 nanoseconds=500000000)

    Durations are immutable and hashable, two durations are equal only
    if all of their components are equal."""

    __slots__ = ('years', 'months', 'days', 'hours', 'minutes', 'seconds',
                 'nanoseconds')

    _fields = (
        ('years', Field.Years),
        ('months', Field.Months),
        ('days', Field.Days),
        ('hours', Field.Hours),
        ('minutes', Field.Minutes),
        ('seconds', Field.Seconds))

    def __init__(self, years=0, months=0, days=0, hours=0, minutes=0,
                 seconds=0, nanoseconds=0):
        values = (years, months, days, hours, minutes, seconds)
        for (name, field), value in zip(self._fields, values):
            check_int(name, value)
            if value < 0:
                raise OutOfRange(field, value)
        check_nanoseconds(nanoseconds)
        self._freeze(years=years, months=months, days=days, hours=hours,
                     minutes=minutes, seconds=seconds,
                     nanoseconds=nanoseconds)

    @classmethod
    def from_str(cls, src):
        """Constructs a Duration by parsing an ISO 8601 string

        See :func:`isochron.parser.parse_duration` for details."""
        from .parser import parse_duration
        return parse_duration(src)

    def get_calendar_duration(self):
        """Returns a tuple of (years, months, days, hours, minutes,
        seconds, nanoseconds)"""
        return (self.years, self.months, self.days, self.hours,
                self.minutes, self.seconds, self.nanoseconds)

    def is_zero(self):
        """True if all components are zero"""
        return not any(self.get_calendar_duration())

    def get_string(self, dp='.'):
        """Formats this duration, e.g., P1DT12H

        dp
            the decimal sign to use for fractional seconds, "." or ","

        Zero components are omitted, a zero duration is written PT0S."""
        if self.is_zero():
            return "PT0S"
        date_part = []
        for value, designator in ((self.years, 'Y'), (self.months, 'M'),
                                  (self.days, 'D')):
            if value:
                date_part.append("%i%s" % (value, designator))
        time_part = []
        for value, designator in ((self.hours, 'H'), (self.minutes, 'M')):
            if value:
                time_part.append("%i%s" % (value, designator))
        if self.seconds or self.nanoseconds:
            time_part.append("%i%sS" % (
                self.seconds, format_fraction(self.nanoseconds, dp)))
        if time_part:
            return 'P' + ''.join(date_part) + 'T' + ''.join(time_part)
        else:
            return 'P' + ''.join(date_part)

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return ("Duration(years=%i, months=%i, days=%i, hours=%i, "
                "minutes=%i, seconds=%i, nanoseconds=%i)" %
                self.get_calendar_duration())

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.get_calendar_duration() == other.get_calendar_duration()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.get_calendar_duration())
