#! /usr/bin/env python
"""JSON representation of the isochron value types

Each value is represented by a single JSON string containing its
canonical ISO 8601 form, e.g., a :class:`isochron.moment.Moment` is
encoded as "2024-01-15T12:30:00Z" and a
:class:`isochron.duration.Duration` as "P1DT12H"::

    >>> dumps({"start": Moment.from_str("2024-01-15T12:30:00Z")})
    '{"start": "2024-01-15T12:30:00Z"}'
    >>> loads('"P1DT12H"', Duration)
    Duration(years=0, months=0, days=1, hours=12, minutes=0, seconds=0, \
nanoseconds=0)"""

import json

from .duration import Duration
from .errors import InvalidFormat
from .interval import Interval, RecurringInterval
from .moment import Moment
from .ordinal import OrdinalDate
from .timeofday import Time
from .weekdate import WeekDate


#: the types that are encoded as strings
VALUE_TYPES = (Moment, Time, Duration, Interval, RecurringInterval,
               WeekDate, OrdinalDate)


class ISO8601JSONEncoder(json.JSONEncoder):

    """A JSON encoder that writes isochron values as strings

    Pass as the *cls* argument of json.dumps.  WeekDate, OrdinalDate
    and Time are tuples so they are only recognised when encoded
    directly or as values within other containers."""

    def default(self, obj):
        if isinstance(obj, VALUE_TYPES):
            return str(obj)
        return super(ISO8601JSONEncoder, self).default(obj)

    def iterencode(self, o, _one_shot=False):
        return super(ISO8601JSONEncoder, self).iterencode(
            self._convert(o), _one_shot)

    def _convert(self, o):
        # tuple subclasses never reach default so convert them first
        if isinstance(o, VALUE_TYPES):
            return str(o)
        elif isinstance(o, dict):
            return dict((k, self._convert(v)) for k, v in o.items())
        elif isinstance(o, (list, tuple)):
            return [self._convert(v) for v in o]
        else:
            return o


def dumps(value, **kws):
    """Returns the JSON text for *value*

    *value* may be any JSON-serialisable object containing isochron
    values, the keyword arguments are passed to json.dumps."""
    return json.dumps(value, cls=ISO8601JSONEncoder, **kws)


def loads(data, cls):
    """Decodes a JSON string value as an instance of *cls*

    data
        JSON text containing a single string

    cls
        One of :class:`isochron.moment.Moment`,
        :class:`isochron.timeofday.Time`,
        :class:`isochron.duration.Duration`,
        :class:`isochron.interval.Interval`,
        :class:`isochron.interval.RecurringInterval`,
        :class:`isochron.weekdate.WeekDate`,
        :class:`isochron.ordinal.OrdinalDate`

    If the JSON value is not a string then
    :class:`isochron.errors.InvalidFormat` is raised."""
    value = json.loads(data)
    if not isinstance(value, str):
        raise InvalidFormat("expected JSON string, found %r" % data)
    return cls.from_str(value)
