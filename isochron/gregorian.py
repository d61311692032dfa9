#! /usr/bin/env python
"""Proleptic Gregorian calendar arithmetic

The functions in this module convert between three coordinate systems:

    seconds since the epoch (1970-01-01T00:00:00Z),

    day numbers (whole days since the epoch, negative before it) and

    calendar dates (year, month, day) together with the time of day.

They work for any integer year using the astronomical convention that
includes a year 0 (which is a leap year).  None of these functions
validate their arguments: out of range values give meaningless results
rather than errors.  Use :mod:`isochron.validate` before calling them
with untrusted values."""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

DAYS_PER_YEAR = 365
DAYS_PER_LEAP_YEAR = 366

MONTH_SIZES = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_SIZES_LEAPYEAR = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
MONTH_OFFSETS = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
MONTH_OFFSETS_LEAPYEAR = (
    0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335)

# cycle lengths used when decomposing a day count
QUAD_CENTURY = 146097   # 365*400+97 always holds
CENTURY = 36524         # 365*100+24 excludes centennial leap
QUAD_YEAR = 1461        # 365*4+1    includes leap

#: the number of days from 0001-01-01 to the epoch, 1970-01-01
EPOCH_DAY = 719162


class Weekday(object):

    """Defines constants for the days of the week

    The values use the Gregorian (Western) numbering with Sunday as 0,
    this is the numbering used by :attr:`CalendarComponents.weekday`.
    ISO 8601 numbers the days 1 (Monday) to 7 (Sunday), use
    :meth:`iso_number` and :meth:`from_iso_number` to convert."""
    Sunday = 0
    Monday = 1
    Tuesday = 2
    Wednesday = 3
    Thursday = 4
    Friday = 5
    Saturday = 6

    names = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday",
             "Friday", "Saturday")

    @staticmethod
    def iso_number(weekday):
        """Returns the ISO weekday number, 1..7, for *weekday*"""
        return 7 if weekday == 0 else weekday

    @staticmethod
    def from_iso_number(iso_weekday):
        """Returns the Gregorian weekday number, 0..6, for *iso_weekday*"""
        return 0 if iso_weekday == 7 else iso_weekday

    @classmethod
    def name(cls, weekday):
        """Returns the English name of *weekday*"""
        return cls.names[weekday]


def leap_year(year):
    """leap_year returns True if *year* is a leap year and False otherwise.

    Note that leap years famously fall on all years that divide by 4
    except those that divide by 100 but including those that divide
    by 400."""
    if year % 4:            # doesn't divide by 4
        return False
    elif year % 100:        # doesn't divide by 100
        return True
    elif year % 400:        # doesn't divide by 400
        return False
    else:
        return True


def month_sizes(year):
    """Returns the tuple of month lengths for *year*"""
    if leap_year(year):
        return MONTH_SIZES_LEAPYEAR
    else:
        return MONTH_SIZES


def days_in_month(month, year):
    """Returns the number of days in *month* of *year*"""
    return month_sizes(year)[month - 1]


def days_in_year(year):
    if leap_year(year):
        return DAYS_PER_LEAP_YEAR
    else:
        return DAYS_PER_YEAR


def ordinal_day(year, month, day):
    """Returns the day of the year, 1 being 1st January"""
    if leap_year(year):
        return MONTH_OFFSETS_LEAPYEAR[month - 1] + day
    else:
        return MONTH_OFFSETS[month - 1] + day


def month_day(year, ordinal):
    """Returns a tuple of (month, day) for day *ordinal* of *year*

    The inverse of :func:`ordinal_day`."""
    day = ordinal
    month = 1
    for m in month_sizes(year):
        if day > m:
            day = day - m
            month = month + 1
        else:
            break
    return month, day


def day_number(year, month, day):
    """Returns the number of days since the epoch

    1970-01-01 is day 0, earlier dates return negative numbers.  The
    calculation uses floor division throughout so the count of leap
    years is correct for years before year 1 too."""
    y = year - 1
    days = y * 365 + y // 4 - y // 100 + y // 400
    return days + ordinal_day(year, month, day) - 1 - EPOCH_DAY


def from_day_number(days):
    """Returns a tuple of (year, month, day) for a day number

    The inverse of :func:`day_number`.  Rather than stepping through the
    years the day count is split into 400 year cycles, each of which has
    exactly the same number of days, then into centuries, four-year
    periods and finally single years."""
    # rebase so that 0 is 0001-01-01
    abs_day = days + EPOCH_DAY
    # divmod floors, so negative day numbers land in an earlier cycle
    n400, abs_day = divmod(abs_day, QUAD_CENTURY)
    # the last century of a quad century is one day longer than the
    # others as it ends in a leap year
    n100, abs_day = divmod(abs_day, CENTURY)
    n4, abs_day = divmod(abs_day, QUAD_YEAR)
    # likewise the last year of a quad year is the long one
    n1, abs_day = divmod(abs_day, 365)
    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    if n100 == 4 or n1 == 4:
        # the last day of a long century or quad year
        return year - 1, 12, 31
    month, day = month_day(year, abs_day + 1)
    return year, month, day


def day_number_weekday(days):
    """Returns the weekday, 0=Sunday, of a day number

    The epoch was a Thursday."""
    return (days + Weekday.Thursday) % 7


def weekday(year, month, day):
    """Returns the day of week 0-6

    0 being Sunday for the given year, month and day"""
    return day_number_weekday(day_number(year, month, day))


def iso_weekday(weekday):
    """Remaps a Gregorian weekday (0=Sunday) to ISO (7=Sunday)"""
    return Weekday.iso_number(weekday)


def to_epoch(year, month, day, hour=0, minute=0, second=0):
    """Returns the number of seconds since the epoch

    The arguments are treated as a UTC wall clock.  A second of 60 (a
    leap second) simply counts as the first second of the following
    minute."""
    return (day_number(year, month, day) * SECONDS_PER_DAY +
            hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second)


def to_calendar(epoch_seconds, utc_offset=0):
    """Returns a tuple of (year, month, day, hour, minute, second)

    epoch_seconds
        The number of seconds since the epoch

    utc_offset
        The number of seconds to add to UTC to get the wall clock time
        that is returned, positive values are East of Greenwich."""
    days, seconds = divmod(epoch_seconds + utc_offset, SECONDS_PER_DAY)
    year, month, day = from_day_number(days)
    hour, seconds = divmod(seconds, SECONDS_PER_HOUR)
    minute, second = divmod(seconds, SECONDS_PER_MINUTE)
    return year, month, day, hour, minute, second
