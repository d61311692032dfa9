#! /usr/bin/env python
"""isochron: ISO 8601 dates, times, durations and intervals

The most commonly used names are available directly from the package::

    from isochron import Moment, Duration, Interval

    m = Moment.from_str("2024-01-15T12:30:00+05:30")
    m.get_string()                      # '2024-01-15T07:00:00Z'
    Duration.from_str("P1DT12H").hours  # 12

See the individual modules for details."""

from .duration import Duration                          # noqa
from .errors import (                                   # noqa
    DateTimeError,
    DurationFormatError,
    Field,
    IntervalFormatError,
    InvalidComponent,
    InvalidFormat,
    OutOfRange,
    RecurrenceFormatError)
from .formatter import DateFormat, TimeFormat, ZoneFormat   # noqa
from .gregorian import Weekday                          # noqa
from .interval import (                                 # noqa
    DurationEnd,
    DurationOnly,
    Interval,
    RecurringInterval,
    StartDuration,
    StartEnd)
from .moment import CalendarComponents, Moment          # noqa
from .ordinal import OrdinalDate                        # noqa
from .timeofday import Time                             # noqa
from .weekdate import WeekDate                          # noqa
