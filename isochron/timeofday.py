#! /usr/bin/env python
"""Times of day

Unlike a :class:`isochron.moment.Moment`, a :class:`Time` is not tied to
a particular date.  It may be given to a reduced precision (hours only,
or hours and minutes) and the zone may be unknown.  The special value
24:00 represents the end of the day."""

from collections import namedtuple

from .errors import DateTimeError
from .formatter import format_fraction, format_zone
from .gregorian import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from .validate import check_offset, check_time


class Time(namedtuple('Time', ('hour', 'minute', 'second', 'nanoseconds',
                               'utc_offset'))):

    """A time of day

    hour
        0-24, 24 is only allowed if all the remaining fields are zero

    minute
        0-59 or None for a time with hour precision

    second
        0-60 or None for a time with minute (or hour) precision

    nanoseconds
        the fraction of the second, can only be non-zero if second is
        given

    utc_offset
        the zone offset in seconds or None if the zone is unknown

    For example, 12:30 with an unknown zone and 09:00:00.5 in UTC::

        Time(12, 30)
        Time(9, 0, 0, 500000000, utc_offset=0)

    Equality is field-wise, so 12:30 and 12:30:00 are different values
    (they have different precision)."""

    __slots__ = ()

    def __new__(cls, hour, minute=None, second=None, nanoseconds=0,
                utc_offset=None):
        if minute is None and second is not None:
            raise DateTimeError("time with seconds requires minutes")
        if second is None and nanoseconds:
            raise DateTimeError("time with a fraction requires seconds")
        check_time(hour, minute, second, nanoseconds, allow_24=True)
        if utc_offset is not None:
            check_offset(utc_offset)
        return super(Time, cls).__new__(
            cls, hour, minute, second, nanoseconds, utc_offset)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def from_str(cls, src):
        """Constructs a Time by parsing an ISO 8601 string

        See :func:`isochron.parser.parse_time` for details."""
        from .parser import parse_time
        return parse_time(src)

    def is_end_of_day(self):
        """True if this is 24:00, the midnight at the end of a day"""
        return self.hour == 24

    def get_total_seconds(self):
        """Returns the whole number of seconds since midnight

        Missing fields count as 0 and 24:00 returns 86400.  A leap
        second is counted as the first second of the next minute."""
        if self.hour == 24:
            return SECONDS_PER_DAY
        return (self.hour * SECONDS_PER_HOUR +
                (self.minute or 0) * SECONDS_PER_MINUTE +
                (self.second or 0))

    def get_string(self, basic=False, dp="."):
        """Formats this time, e.g., 12:30:45.5Z

        basic
            True/False, selects basic form, e.g., 123045.5Z

        dp
            the decimal sign to use for the fraction, "." or ","

        The time is written to its own precision.  A known zone is
        written as "Z" if the offset is zero and in the offset form
        otherwise."""
        fields = ["%02i" % self.hour]
        if self.minute is not None:
            fields.append("%02i" % self.minute)
        if self.second is not None:
            fields.append("%02i" % self.second)
        if basic:
            result = ''.join(fields)
        else:
            result = ':'.join(fields)
        result += format_fraction(self.nanoseconds, dp)
        if self.utc_offset == 0:
            result += "Z"
        elif self.utc_offset is not None:
            result += format_zone(self.utc_offset, basic)
        return result

    def __str__(self):
        return self.get_string()
