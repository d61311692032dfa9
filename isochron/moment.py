#! /usr/bin/env python
"""Instants in time

A :class:`Moment` is an instant identified by a count of seconds since
the epoch (1970-01-01T00:00:00Z) and a count of nanoseconds.  It also
carries a UTC offset but the offset is only used when the moment is
broken down into calendar components or formatted, two moments are
equal if they refer to the same instant regardless of their offsets::

    >>> a = Moment.from_str("2024-01-15T12:00:00Z")
    >>> b = Moment.from_str("2024-01-15T17:30:00+05:30")
    >>> a == b
    True
    >>> b.get_string(zone=ZoneFormat.OffsetExtended)
    '2024-01-15T17:30:00+05:30'"""

import time as pytime

from collections import namedtuple

from .formatter import DateFormat, TimeFormat, ZoneFormat, format_moment
from .gregorian import (
    SECONDS_PER_DAY,
    day_number,
    iso_weekday,
    ordinal_day,
    to_calendar,
    to_epoch,
    weekday)
from .mixins import FrozenMixin, SortableMixin
from .ordinal import OrdinalDate
from .validate import (
    NANOSECONDS_PER_SECOND,
    check_components,
    check_int,
    check_nanoseconds,
    check_offset)
from .weekdate import WeekDate, iso_week


class CalendarComponents(
        namedtuple('CalendarComponents', ('year', 'month', 'day', 'hour',
                                          'minute', 'second', 'nanoseconds',
                                          'weekday'))):

    """The calendar view of a :class:`Moment`

    The fields are year, month, day, hour, minute, second (0-60),
    nanoseconds and weekday.  The weekday is derived from the date and
    uses the Gregorian numbering, 0 is Sunday (see
    :class:`isochron.gregorian.Weekday`), the :attr:`iso_weekday`
    property gives the ISO numbering instead.

    The constructor validates the components and derives the weekday,
    it does not take a weekday argument::

        CalendarComponents(2024, 2, 29, 12, 30)"""

    __slots__ = ()

    def __new__(cls, year, month, day, hour=0, minute=0, second=0,
                nanoseconds=0):
        check_components(year, month, day, hour, minute, second,
                         nanoseconds)
        return super(CalendarComponents, cls).__new__(
            cls, year, month, day, hour, minute, second, nanoseconds,
            weekday(year, month, day))

    @classmethod
    def _make(cls, iterable):
        # the weekday is always recalculated
        return cls(*tuple(iterable)[:7])

    @classmethod
    def _unchecked(cls, year, month, day, hour, minute, second,
                   nanoseconds):
        return tuple.__new__(cls, (year, month, day, hour, minute, second,
                                   nanoseconds, weekday(year, month, day)))

    @classmethod
    def from_moment(cls, moment):
        """Returns the components of *moment* under its UTC offset"""
        year, month, day, hour, minute, second = to_calendar(
            moment.epoch_seconds, moment.utc_offset)
        return cls._unchecked(year, month, day, hour, minute, second,
                              moment.nanoseconds)

    @property
    def iso_weekday(self):
        """The weekday using the ISO numbering, 1=Monday to 7=Sunday"""
        return iso_weekday(self.weekday)


class Moment(SortableMixin, FrozenMixin):

    """An instant in time

    epoch_seconds
        The number of whole seconds since 1970-01-01T00:00:00Z, negative
        for earlier instants.

    nanoseconds
        The fraction of the second, an integer in the range 0 to
        999999999.

    utc_offset
        The offset, in seconds, used when displaying this moment.  It
        must be a whole number of minutes less than 24 hours in either
        direction, positive values are East of Greenwich.

    Moments are immutable, comparable and hashable.  Comparisons and
    hashing ignore the utc_offset."""

    __slots__ = ('epoch_seconds', 'nanoseconds', 'utc_offset')

    def __init__(self, epoch_seconds=0, nanoseconds=0, utc_offset=0):
        check_int("epoch_seconds", epoch_seconds)
        check_nanoseconds(nanoseconds)
        check_offset(utc_offset)
        self._freeze(epoch_seconds=epoch_seconds, nanoseconds=nanoseconds,
                     utc_offset=utc_offset)

    @classmethod
    def _unchecked(cls, epoch_seconds, nanoseconds=0, utc_offset=0):
        moment = cls.__new__(cls)
        moment._freeze(epoch_seconds=epoch_seconds, nanoseconds=nanoseconds,
                       utc_offset=utc_offset)
        return moment

    @classmethod
    def from_calendar(cls, year, month, day, hour=0, minute=0, second=0,
                      nanoseconds=0, utc_offset=0):
        """Constructs a Moment from calendar components

        The components are the wall clock under *utc_offset*, so::

            Moment.from_calendar(2024, 1, 15, 17, 30, utc_offset=19800)

        is the same instant as 2024-01-15T12:00:00Z.  All components are
        validated, a second of 60 (a leap second) is accepted and treated
        as the first second of the following minute."""
        check_components(year, month, day, hour, minute, second,
                         nanoseconds)
        check_offset(utc_offset)
        return cls._unchecked(
            to_epoch(year, month, day, hour, minute, second) - utc_offset,
            nanoseconds, utc_offset)

    @classmethod
    def from_week_date(cls, week_date, utc_offset=0):
        """Returns the Moment at the start of *week_date*

        week_date
            A :class:`isochron.weekdate.WeekDate` instance

        The moment is midnight on the wall clock of *utc_offset*."""
        check_offset(utc_offset)
        return cls._unchecked(
            week_date.get_day_number() * SECONDS_PER_DAY - utc_offset, 0,
            utc_offset)

    @classmethod
    def from_ordinal_date(cls, ordinal_date, utc_offset=0):
        """Returns the Moment at the start of *ordinal_date*

        As for :meth:`from_week_date` but for an
        :class:`isochron.ordinal.OrdinalDate`."""
        check_offset(utc_offset)
        return cls._unchecked(
            ordinal_date.get_day_number() * SECONDS_PER_DAY - utc_offset, 0,
            utc_offset)

    @classmethod
    def from_str(cls, src):
        """Constructs a Moment by parsing an ISO 8601 string

        See :func:`isochron.parser.parse_moment` for details."""
        from .parser import parse_moment
        return parse_moment(src)

    @classmethod
    def from_now(cls):
        """Constructs a Moment representing the current time in UTC"""
        seconds, nanoseconds = divmod(pytime.time_ns(),
                                      NANOSECONDS_PER_SECOND)
        return cls._unchecked(seconds, nanoseconds)

    @property
    def components(self):
        """The :class:`CalendarComponents` of this moment

        The components are calculated on demand for the moment's own
        UTC offset."""
        return CalendarComponents.from_moment(self)

    @property
    def iso_weekday(self):
        return self.components.iso_weekday

    @property
    def ordinal_day(self):
        c = self.components
        return ordinal_day(c.year, c.month, c.day)

    @property
    def iso_week(self):
        c = self.components
        return iso_week(c.year, c.month, c.day)[1]

    @property
    def iso_week_year(self):
        c = self.components
        return iso_week(c.year, c.month, c.day)[0]

    def get_day_number(self):
        """Returns the day number of this moment's (local) date"""
        c = self.components
        return day_number(c.year, c.month, c.day)

    def to_week_date(self):
        """Returns the :class:`isochron.weekdate.WeekDate` of this moment"""
        return WeekDate.from_moment(self)

    def to_ordinal_date(self):
        """Returns the :class:`isochron.ordinal.OrdinalDate` of this
        moment"""
        return OrdinalDate.from_moment(self)

    def with_offset(self, utc_offset):
        """Returns the same instant displayed with a new *utc_offset*"""
        check_offset(utc_offset)
        return self._unchecked(self.epoch_seconds, self.nanoseconds,
                               utc_offset)

    def shift(self, days=0, seconds=0, nanoseconds=0):
        """Returns a new Moment offset from this one

        The arguments are integers, they may be negative and they may
        exceed their natural ranges, e.g., shift(nanoseconds=1500000000)
        moves the moment 1.5 seconds later.  Days are always 86400
        seconds long.  The UTC offset is preserved."""
        check_int("days", days)
        check_int("seconds", seconds)
        check_int("nanoseconds", nanoseconds)
        carry, nanoseconds = divmod(self.nanoseconds + nanoseconds,
                                    NANOSECONDS_PER_SECOND)
        return self._unchecked(
            self.epoch_seconds + days * SECONDS_PER_DAY + seconds + carry,
            nanoseconds, self.utc_offset)

    def get_string(self, date=DateFormat.CalendarExtended,
                   time=TimeFormat.Extended, zone=ZoneFormat.UTC):
        """Formats this moment

        See :func:`isochron.formatter.format_moment` for details."""
        return format_moment(self, date=date, time=time, zone=zone)

    def sortkey(self):
        return (self.epoch_seconds, self.nanoseconds)

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return "Moment(epoch_seconds=%i, nanoseconds=%i, utc_offset=%i)" % (
            self.epoch_seconds, self.nanoseconds, self.utc_offset)
