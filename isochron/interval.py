#! /usr/bin/env python
"""ISO 8601 time intervals and recurring intervals

An interval takes one of four shapes, each represented by its own
class derived from :class:`Interval`:

    :class:`StartEnd`       2019-08-27T00:00:00Z/2019-08-29T00:00:00Z
    :class:`DurationOnly`   P3D
    :class:`StartDuration`  2019-08-27T00:00:00Z/P3D
    :class:`DurationEnd`    P3D/2019-08-29T00:00:00Z

The shape is fixed by the class, :attr:`Interval.has_start` and friends
are derived from it rather than from the values stored."""

from .duration import Duration
from .errors import Field, OutOfRange
from .mixins import FrozenMixin
from .moment import Moment
from .validate import check_int


def _check_moment(name, value):
    if not isinstance(value, Moment):
        raise TypeError("%s must be a Moment, not %s" % (name, repr(value)))


def _check_duration(value):
    if not isinstance(value, Duration):
        raise TypeError("duration must be a Duration, not %s" % repr(value))


class Interval(FrozenMixin):

    """Abstract class for representing ISO intervals

    Instances are immutable and hashable.  Two intervals are equal if
    they have the same shape and equal parts."""

    __slots__ = ()

    #: the names of the parts this shape is made of, in written order
    parts = ()

    @classmethod
    def from_str(cls, src):
        """Constructs an Interval by parsing an ISO 8601 string

        The result is an instance of the class matching the shape of
        *src*.  See :func:`isochron.parser.parse_interval`."""
        from .parser import parse_interval
        return parse_interval(src)

    @property
    def has_start(self):
        return 'start' in self.parts

    @property
    def has_end(self):
        return 'end' in self.parts

    @property
    def has_duration(self):
        return 'duration' in self.parts

    @property
    def start(self):
        """The start :class:`isochron.moment.Moment` or None"""
        return None

    @property
    def end(self):
        """The end :class:`isochron.moment.Moment` or None"""
        return None

    @property
    def duration(self):
        """The :class:`isochron.duration.Duration` or None"""
        return None

    def get_values(self):
        """Returns a tuple of the parts of this interval"""
        return tuple(getattr(self, p) for p in self.parts)

    def get_string(self):
        """Formats this interval

        Moments are written in the default format (extended calendar
        date and time in UTC)."""
        return '/'.join(str(v) for v in self.get_values())

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__,
                           ", ".join(repr(v) for v in self.get_values()))

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (type(self) is type(other) and
                self.get_values() == other.get_values())

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__, self.get_values()))


class StartEnd(Interval):

    """An interval given by its start and end moments"""

    __slots__ = ('_start', '_end')
    parts = ('start', 'end')

    def __init__(self, start, end):
        _check_moment("start", start)
        _check_moment("end", end)
        self._freeze(_start=start, _end=end)

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end


class DurationOnly(Interval):

    """An interval given by its duration alone"""

    __slots__ = ('_duration', )
    parts = ('duration', )

    def __init__(self, duration):
        _check_duration(duration)
        self._freeze(_duration=duration)

    @property
    def duration(self):
        return self._duration


class StartDuration(Interval):

    """An interval given by its start and duration"""

    __slots__ = ('_start', '_duration')
    parts = ('start', 'duration')

    def __init__(self, start, duration):
        _check_moment("start", start)
        _check_duration(duration)
        self._freeze(_start=start, _duration=duration)

    @property
    def start(self):
        return self._start

    @property
    def duration(self):
        return self._duration


class DurationEnd(Interval):

    """An interval given by its duration and end"""

    __slots__ = ('_duration', '_end')
    parts = ('duration', 'end')

    def __init__(self, duration, end):
        _check_duration(duration)
        _check_moment("end", end)
        self._freeze(_duration=duration, _end=end)

    @property
    def duration(self):
        return self._duration

    @property
    def end(self):
        return self._end


class RecurringInterval(FrozenMixin):

    """A repeating interval, e.g., R5/2019-01-01T00:00:00Z/P1D

    repetitions
        The number of repetitions, a non-negative integer, or None for
        an unlimited number of repetitions.

    interval
        An :class:`Interval` instance"""

    __slots__ = ('repetitions', 'interval')

    def __init__(self, repetitions, interval):
        if repetitions is not None:
            check_int("repetitions", repetitions)
            if repetitions < 0:
                raise OutOfRange(Field.Repetitions, repetitions)
        if not isinstance(interval, Interval):
            raise TypeError("interval must be an Interval, not %s" %
                            repr(interval))
        self._freeze(repetitions=repetitions, interval=interval)

    @classmethod
    def from_str(cls, src):
        """Constructs a RecurringInterval by parsing an ISO 8601 string

        See :func:`isochron.parser.parse_recurring_interval`."""
        from .parser import parse_recurring_interval
        return parse_recurring_interval(src)

    def is_unlimited(self):
        """True if the number of repetitions is unbounded"""
        return self.repetitions is None

    def get_string(self):
        if self.repetitions is None:
            return "R/" + self.interval.get_string()
        else:
            return "R%i/%s" % (self.repetitions, self.interval.get_string())

    def __str__(self):
        return self.get_string()

    def __repr__(self):
        return "RecurringInterval(%s, %s)" % (repr(self.repetitions),
                                              repr(self.interval))

    def __eq__(self, other):
        if not isinstance(other, RecurringInterval):
            return NotImplemented
        return (self.repetitions == other.repetitions and
                self.interval == other.interval)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.repetitions, self.interval))
