#! /usr/bin/env python
"""Formatting of moments as ISO 8601 strings

A representation is chosen along three independent axes: the date
(:class:`DateFormat`), the time (:class:`TimeFormat`) and the zone
(:class:`ZoneFormat`).  The default is the extended calendar form with
an extended time in UTC, e.g., 2024-01-15T12:30:00Z::

    format_moment(m)
    format_moment(m, date=DateFormat.WeekBasic, time=TimeFormat.Basic,
                  zone=ZoneFormat.OffsetBasic)
    # 2024W031T180000+0530"""

from .errors import Field, OutOfRange
from .gregorian import SECONDS_PER_HOUR, SECONDS_PER_MINUTE


class DateFormat(object):

    """Defines constants for the date part of a representation."""
    CalendarExtended = 1    #: YYYY-MM-DD
    CalendarBasic = 2       #: YYYYMMDD
    WeekExtended = 3        #: YYYY-Www-D
    WeekBasic = 4           #: YYYYWwwD
    OrdinalExtended = 5     #: YYYY-DDD
    OrdinalBasic = 6        #: YYYYDDD


class TimeFormat(object):

    """Defines constants for the time part of a representation."""
    Omit = 0            #: no time (and hence no zone)
    Extended = 1        #: hh:mm:ss
    Basic = 2           #: hhmmss


class ZoneFormat(object):

    """Defines constants for the zone part of a representation.

    With UTC, the wall clock is converted to UTC and marked with "Z".
    The offset forms use the wall clock of the moment's own offset and
    mark it explicitly, even if the offset is zero.  Omit also uses the
    moment's own wall clock but leaves the zone unstated."""
    Omit = 0                #: no zone designator
    UTC = 1                 #: Z
    OffsetExtended = 2      #: +hh:mm
    OffsetBasic = 3         #: +hhmm


def format_year(year):
    """Formats a year using four digits

    Expanded representations are not supported, years outside the range
    0000 to 9999 raise :class:`isochron.errors.OutOfRange`."""
    if year < 0 or year > 9999:
        raise OutOfRange(Field.Year, year)
    return "%04i" % year


def format_fraction(nanoseconds, dp="."):
    """Formats a fraction of a second

    Returns an empty string for 0, otherwise the decimal sign *dp*
    followed by the fraction with trailing zeros removed, e.g.,
    500000000 is formatted as ".5"."""
    if not nanoseconds:
        return ""
    return dp + ("%09i" % nanoseconds).rstrip("0")


def format_zone(utc_offset, basic=False):
    """Formats a UTC offset given in seconds, e.g., -05:00

    basic
        True/False, selects basic form, e.g., -0500

    The result always uses the offset form, a zero offset is formatted
    as +00:00."""
    if utc_offset < 0:
        zstr = "-"
    else:
        zstr = "+"
    hour, minute = divmod(abs(utc_offset), SECONDS_PER_HOUR)
    minute = minute // SECONDS_PER_MINUTE
    if basic:
        return "%s%02i%02i" % (zstr, hour, minute)
    else:
        return "%s%02i:%02i" % (zstr, hour, minute)


def format_time(hour, minute, second, nanoseconds=0, basic=False):
    """Formats a complete time of day, e.g., 12:30:45.5"""
    if basic:
        stem = "%02i%02i%02i" % (hour, minute, second)
    else:
        stem = "%02i:%02i:%02i" % (hour, minute, second)
    return stem + format_fraction(nanoseconds)


def _format_date(moment, date):
    if date in (DateFormat.CalendarExtended, DateFormat.CalendarBasic):
        c = moment.components
        if date == DateFormat.CalendarBasic:
            return "%s%02i%02i" % (format_year(c.year), c.month, c.day)
        else:
            return "%s-%02i-%02i" % (format_year(c.year), c.month, c.day)
    elif date in (DateFormat.WeekExtended, DateFormat.WeekBasic):
        return moment.to_week_date().get_string(
            basic=(date == DateFormat.WeekBasic))
    elif date in (DateFormat.OrdinalExtended, DateFormat.OrdinalBasic):
        return moment.to_ordinal_date().get_string(
            basic=(date == DateFormat.OrdinalBasic))
    else:
        raise ValueError("unknown DateFormat: %s" % repr(date))


def format_moment(moment, date=DateFormat.CalendarExtended,
                  time=TimeFormat.Extended, zone=ZoneFormat.UTC):
    """Formats *moment* as an ISO 8601 string

    date
        One of the :class:`DateFormat` constants

    time
        One of the :class:`TimeFormat` constants

    zone
        One of the :class:`ZoneFormat` constants, ignored if *time* is
        :attr:`TimeFormat.Omit` as a zone can only follow a time.  In
        that case the date is the one on the moment's own wall clock."""
    if time not in (TimeFormat.Omit, TimeFormat.Extended, TimeFormat.Basic):
        raise ValueError("unknown TimeFormat: %s" % repr(time))
    if zone == ZoneFormat.UTC and time != TimeFormat.Omit:
        moment = moment.with_offset(0)
    elif zone not in (ZoneFormat.Omit, ZoneFormat.UTC,
                      ZoneFormat.OffsetExtended, ZoneFormat.OffsetBasic):
        raise ValueError("unknown ZoneFormat: %s" % repr(zone))
    result = [_format_date(moment, date)]
    if time != TimeFormat.Omit:
        c = moment.components
        result.append("T")
        result.append(format_time(c.hour, c.minute, c.second,
                                   c.nanoseconds,
                                   basic=(time == TimeFormat.Basic)))
        if zone == ZoneFormat.UTC:
            result.append("Z")
        elif zone == ZoneFormat.OffsetExtended:
            result.append(format_zone(moment.utc_offset))
        elif zone == ZoneFormat.OffsetBasic:
            result.append(format_zone(moment.utc_offset, basic=True))
    return "".join(result)
