#! /usr/bin/env python
"""Parsing of ISO 8601 strings

The module functions are the main entry points::

    parse_moment("2024-01-15T12:30:00Z")
    parse_moment("2024-W03-1")
    parse_time("12:30")
    parse_week_date("2024-W03-1")
    parse_ordinal_date("2024-015")
    parse_duration("P1DT12H")
    parse_interval("2019-08-27/P3D")
    parse_recurring_interval("R5/2019-01-01T00:00:00Z/P1D")

The form of a date is detected from the string itself: a "W" indicates
a week date, otherwise hyphens indicate the extended format (one hyphen
for an ordinal date, two for a calendar date) and in the basic format 7
characters indicate an ordinal date and 8 a calendar date.  A date
without a time is midnight UTC and a time without a zone is taken to be
in UTC.

All fields are fixed width and years are always four digits, the
reduced precision, truncated and expanded representations are not
supported."""

import logging

from .duration import Duration
from .errors import (
    DurationFormatError,
    Field,
    InvalidComponent,
    InvalidFormat,
    IntervalFormatError,
    OutOfRange,
    RecurrenceFormatError)
from .gregorian import SECONDS_PER_HOUR, SECONDS_PER_MINUTE
from .interval import (
    DurationEnd,
    DurationOnly,
    RecurringInterval,
    StartDuration,
    StartEnd)
from .moment import Moment
from .ordinal import OrdinalDate
from .scanner import BasicParser
from .timeofday import Time
from .weekdate import WeekDate


#: the number of fraction digits kept, the rest are discarded
FRACTION_DIGITS = 9

# characters that end the text reported for a bad component
_SEPARATORS = "-:W.,+Z"


def _check_text(src):
    if not isinstance(src, str):
        raise TypeError("expected str, not %s" % repr(src))


def zone_position(time_str):
    """Returns the index of the zone designator in *time_str*

    A trailing "Z" marks UTC, otherwise the last "+" starts the zone.
    The last "-" also starts the zone, except at position 0 where it
    can't follow a time.  Returns -1 if there is no zone."""
    if time_str.endswith('Z'):
        return len(time_str) - 1
    zpos = time_str.rfind('+')
    if zpos < 0:
        zpos = time_str.rfind('-')
        if zpos == 0:
            zpos = -1
    return zpos


class ISO8601Parser(BasicParser):

    r"""A parser for ISO 8601 date, time and duration strings

    The require\_* methods parse a production starting at the current
    position.  Syntax errors in individual fields raise
    :class:`isochron.errors.InvalidComponent`, errors in the overall
    structure raise :class:`isochron.errors.InvalidFormat` or one of
    its subclasses."""

    def component_text(self, start, ndigits):
        """Returns the text of a (bad) component starting at *start*"""
        end = start
        while end < len(self.src) and self.src[end] not in _SEPARATORS:
            end += 1
        text = self.src[start:end]
        if text.isdigit():
            # too many digits
            return text
        return text[:ndigits]

    def require_field(self, ndigits, field):
        """Parses a fixed width field of *ndigits* digits

        Returns the integer value of the field.  If there are too few or
        too many digits then :class:`isochron.errors.InvalidComponent`
        is raised for *field*."""
        start = self.pos
        digits = self.parse_digits(ndigits, ndigits)
        if digits is None or self.match_digit():
            raise InvalidComponent(field, self.component_text(start, ndigits))
        return int(digits)

    def require_separator(self, sep, production):
        if not self.parse(sep):
            raise InvalidFormat("expected %s, found %r" % (production,
                                                           self.src))

    def require_date(self):
        """Parses a complete date

        The parser must be positioned at the start of a string containing
        only the date.  Returns a tuple of (year, month, day), week and
        ordinal dates are validated and converted to calendar dates but
        calendar dates are returned unchecked."""
        src = self.src[self.pos:]
        if 'W' in src:
            return self.require_week_date(
                basic=('-' not in src)).to_calendar()
        elif '-' in src:
            ndashes = src.count('-')
            if ndashes == 1:
                return self.require_ordinal_date(basic=False).to_calendar()
            elif ndashes == 2:
                return self.require_calendar_date(basic=False)
            else:
                raise InvalidFormat(
                    "expected YYYY-MM-DD or YYYY-DDD, found %r" % src)
        elif len(src) == 7:
            return self.require_ordinal_date(basic=True).to_calendar()
        elif len(src) == 8:
            return self.require_calendar_date(basic=True)
        else:
            raise InvalidFormat(
                "expected YYYYMMDD or YYYYDDD, found %r" % src)

    def require_calendar_date(self, basic=False):
        year = self.require_field(4, Field.Year)
        if not basic:
            self.require_separator('-', "YYYY-MM-DD")
        month = self.require_field(2, Field.Month)
        if not basic:
            self.require_separator('-', "YYYY-MM-DD")
        day = self.require_field(2, Field.Day)
        self.require_end("end of date")
        return year, month, day

    def require_week_date(self, basic=False):
        """Parses a week date, returning a :class:`WeekDate`"""
        week_year = self.require_field(4, Field.Year)
        if not basic:
            self.require_separator('-', "YYYY-Www-D")
        self.require_separator('W', "YYYY-Www-D")
        week = self.require_field(2, Field.Week)
        if not basic:
            self.require_separator('-', "YYYY-Www-D")
        weekday = self.require_field(1, Field.Weekday)
        self.require_end("end of week date")
        return WeekDate(week_year, week, weekday)

    def require_ordinal_date(self, basic=False):
        """Parses an ordinal date, returning an :class:`OrdinalDate`"""
        year = self.require_field(4, Field.Year)
        if not basic:
            self.require_separator('-', "YYYY-DDD")
        day = self.require_field(3, Field.OrdinalDay)
        self.require_end("end of ordinal date")
        return OrdinalDate(year, day)

    def require_fraction(self):
        """Parses a decimal sign and fraction, returning nanoseconds

        Either "." or "," may be used.  Digits beyond nanosecond
        precision are discarded."""
        start = self.pos
        if self.parse_one(".,") is None:
            self.parser_error("decimal sign")
        digits = self.parse_digits(1)
        if digits is None:
            raise InvalidComponent(Field.Fraction, self.src[start:])
        if len(digits) > FRACTION_DIGITS:
            logging.debug("Truncating fraction %s to %i digits",
                          digits, FRACTION_DIGITS)
            digits = digits[:FRACTION_DIGITS]
        return int(digits.ljust(FRACTION_DIGITS, '0'))

    def require_time(self):
        """Parses a time of day with an optional zone

        The time is written hh, hh:mm or hh:mm:ss (extended) or hh, hhmm
        or hhmmss (basic).  A fraction may follow the seconds.  The zone,
        if present, must end the string.

        Returns a tuple of (hour, minute, second, nanoseconds,
        utc_offset) where minute and second are None if they were
        omitted and utc_offset is None if there is no zone."""
        zpos = zone_position(self.src[self.pos:])
        if zpos < 0:
            end = len(self.src)
        else:
            end = self.pos + zpos
        body = ISO8601Parser(self.src[self.pos:end])
        hour = body.require_field(2, Field.Hour)
        minute = second = None
        nanoseconds = 0
        if ':' in body.src:
            if body.parse(':'):
                minute = body.require_field(2, Field.Minute)
                if body.parse(':'):
                    second = body.require_field(2, Field.Second)
        elif body.match_digit():
            minute = body.require_field(2, Field.Minute)
            if body.match_digit():
                second = body.require_field(2, Field.Second)
        if second is not None and body.match_one(".,"):
            nanoseconds = body.require_fraction()
        body.require_end("end of time")
        self.setpos(end)
        if zpos < 0:
            utc_offset = None
        else:
            utc_offset = self.require_zone()
        return hour, minute, second, nanoseconds, utc_offset

    def require_zone(self):
        """Parses a zone designator, returning the offset in seconds

        The designator must end the string, it is one of Z, +hh:mm,
        +hhmm or +hh (or the same with -)."""
        start = self.pos
        if self.parse('Z'):
            zoffset = 0
        else:
            sign = self.parse_one("+-")
            zhour = self.parse_digits(2, 2)
            zminute = "00"
            if zhour is not None and not self.match_end():
                self.parse(':')
                zminute = self.parse_digits(2, 2)
            if sign is None or zhour is None or zminute is None:
                raise InvalidComponent(Field.Timezone, self.src[start:])
            zhour = int(zhour)
            zminute = int(zminute)
            zoffset = zhour * SECONDS_PER_HOUR + zminute * SECONDS_PER_MINUTE
            if sign == '-':
                zoffset = -zoffset
            if zhour > 23 or zminute > 59:
                raise OutOfRange(Field.Timezone, zoffset)
        if not self.match_end():
            raise InvalidComponent(Field.Timezone, self.src[start:])
        return zoffset

    def require_duration_value(self, designators):
        """Parses a duration component, returning (value, designator)

        designators
            the designators that may follow the value

        Only a seconds value may carry a fraction, in which case value is
        a tuple of (seconds, nanoseconds)."""
        digits = self.parse_digits(1)
        if digits is None:
            raise DurationFormatError(
                "expected digits at [%i] in %r" % (self.pos, self.src))
        value = int(digits)
        fraction = None
        if self.match_one(".,") and 'S' in designators:
            fraction = self.require_fraction()
        designator = self.parse_one(designators)
        if designator is None:
            raise DurationFormatError(
                "expected one of %s at [%i] in %r" %
                (designators, self.pos, self.src))
        if fraction is not None:
            if designator != 'S':
                raise DurationFormatError(
                    "only seconds may have a fraction in %r" % self.src)
            value = (value, fraction)
        return value, designator

    def require_duration(self):
        """Parses a duration, returning a :class:`Duration` instance

        The format is P[nY][nM][nD][T[nH][nM][nS]] where the components
        must appear in order and the seconds may have a fraction."""
        if not self.parse('P'):
            raise DurationFormatError("expected P, found %r" % self.src)
        values = {}
        designators = "YMD"
        while designators and not self.match_end() and not self.match('T'):
            value, d = self.require_duration_value(designators)
            values[d] = value
            designators = designators[designators.index(d) + 1:]
        time_values = {}
        if self.parse('T'):
            designators = "HMS"
            while designators and not self.match_end():
                value, d = self.require_duration_value(designators)
                time_values[d] = value
                designators = designators[designators.index(d) + 1:]
            if not time_values:
                raise DurationFormatError(
                    "expected time component after T in %r" % self.src)
        elif not values:
            raise DurationFormatError(
                "duration must have at least one component: %r" % self.src)
        if not self.match_end():
            raise DurationFormatError(
                "unexpected %r at [%i] in %r" %
                (self.the_char, self.pos, self.src))
        seconds = time_values.get('S', 0)
        if isinstance(seconds, tuple):
            seconds, nanoseconds = seconds
        else:
            nanoseconds = 0
        return Duration(years=values.get('Y', 0), months=values.get('M', 0),
                        days=values.get('D', 0),
                        hours=time_values.get('H', 0),
                        minutes=time_values.get('M', 0),
                        seconds=seconds, nanoseconds=nanoseconds)


def parse_moment(src):
    """Parses a date or a date and time, returning a Moment

    The moment's UTC offset is set from the zone designator, 0 if there
    is none.  A time of 24:00 is the midnight at the end of the day,
    e.g., 2024-01-15T24:00:00 is the same moment as 2024-01-16T00:00:00.
    Any other time with hour 24 is an error."""
    _check_text(src)
    if not src:
        raise InvalidFormat("empty string")
    date_str, tdesignator, time_str = src.partition('T')
    year, month, day = ISO8601Parser(date_str).require_date()
    hour = minute = second = nanoseconds = utc_offset = 0
    if tdesignator:
        p = ISO8601Parser(time_str)
        hour, minute, second, nanoseconds, utc_offset = p.require_time()
        minute = minute or 0
        second = second or 0
        if utc_offset is None:
            utc_offset = 0
    if hour == 24:
        if minute or second or nanoseconds:
            raise InvalidComponent(Field.Time, time_str)
        logging.debug("Normalising 24:00 in %s to the following day", src)
        return Moment.from_calendar(
            year, month, day, utc_offset=utc_offset).shift(days=1)
    return Moment.from_calendar(year, month, day, hour, minute, second,
                                nanoseconds, utc_offset)


def parse_time(src):
    """Parses a time of day, returning a :class:`Time` instance

    An optional leading "T" is ignored.  The precision and zone are
    those written, e.g., "12:30" has no seconds and no zone."""
    _check_text(src)
    p = ISO8601Parser(src)
    p.parse('T')
    hour, minute, second, nanoseconds, utc_offset = p.require_time()
    if hour == 24 and (minute or second or nanoseconds):
        raise InvalidComponent(Field.Time, src)
    return Time(hour, minute, second, nanoseconds, utc_offset)


def parse_week_date(src):
    """Parses a week date, e.g., 2024-W03-1 or 2024W031

    Returns a :class:`WeekDate` with the week-year, week and weekday as
    written, the date is not converted to the calendar."""
    _check_text(src)
    if not src:
        raise InvalidFormat("empty string")
    return ISO8601Parser(src).require_week_date(basic=('-' not in src))


def parse_ordinal_date(src):
    """Parses an ordinal date, e.g., 2024-039 or 2024039"""
    _check_text(src)
    if not src:
        raise InvalidFormat("empty string")
    return ISO8601Parser(src).require_ordinal_date(basic=('-' not in src))


def parse_duration(src):
    """Parses a duration, returning a :class:`Duration` instance"""
    _check_text(src)
    return ISO8601Parser(src).require_duration()


def parse_interval(src):
    """Parses an interval, returning an instance of the matching shape

    A duration on its own is returned as a :class:`DurationOnly`
    interval.  Otherwise the string is split at the first "/" and each
    side is a duration if it starts with "P", only one side may be."""
    _check_text(src)
    if src.startswith('P') and '/' not in src:
        return DurationOnly(parse_duration(src))
    first, slash, second = src.partition('/')
    if not slash:
        raise IntervalFormatError(
            "expected start/end, start/duration or duration/end, found %r" %
            src)
    first_duration = first.startswith('P')
    second_duration = second.startswith('P')
    if first_duration and second_duration:
        raise IntervalFormatError("interval with two durations: %r" % src)
    elif first_duration:
        return DurationEnd(parse_duration(first), parse_moment(second))
    elif second_duration:
        return StartDuration(parse_moment(first), parse_duration(second))
    else:
        return StartEnd(parse_moment(first), parse_moment(second))


def parse_recurring_interval(src):
    """Parses a recurring interval, e.g., R5/2019-01-01T00:00:00Z/P1D

    The repetition count may be omitted, R/... repeats without
    limit."""
    _check_text(src)
    if not src.startswith('R'):
        raise RecurrenceFormatError(
            "recurring interval must start with R: %r" % src)
    if len(src) == 1:
        raise RecurrenceFormatError("expected repetitions or /, found R")
    repetitions, slash, interval = src[1:].partition('/')
    if not slash:
        raise RecurrenceFormatError(
            "expected / after repetitions in %r" % src)
    if repetitions:
        p = BasicParser(repetitions)
        count = p.parse_digits(1)
        if count is None or not p.match_end():
            raise RecurrenceFormatError(
                "invalid repetitions %r in %r" % (repetitions, src))
        repetitions = int(count)
    else:
        repetitions = None
    return RecurringInterval(repetitions, parse_interval(interval))
