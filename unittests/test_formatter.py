#! /usr/bin/env python

"""Runs unit tests on the isochron.formatter module"""

import unittest

import isochron.formatter as formatter

from isochron.errors import Field, OutOfRange
from isochron.formatter import DateFormat, TimeFormat, ZoneFormat
from isochron.moment import Moment


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(HelperTests),
        loader.loadTestsFromTestCase(FormatTests),
        loader.loadTestsFromTestCase(RoundTripTests)
    ))


DATE_FORMATS = (
    DateFormat.CalendarExtended,
    DateFormat.CalendarBasic,
    DateFormat.WeekExtended,
    DateFormat.WeekBasic,
    DateFormat.OrdinalExtended,
    DateFormat.OrdinalBasic)


class HelperTests(unittest.TestCase):

    def test_fraction(self):
        self.assertTrue(formatter.format_fraction(0) == "")
        self.assertTrue(formatter.format_fraction(500000000) == ".5")
        self.assertTrue(formatter.format_fraction(120000000) == ".12")
        self.assertTrue(formatter.format_fraction(1) == ".000000001")
        self.assertTrue(formatter.format_fraction(999999999) ==
                        ".999999999")
        self.assertTrue(formatter.format_fraction(500000000, ",") == ",5")

    def test_zone(self):
        self.assertTrue(formatter.format_zone(0) == "+00:00")
        self.assertTrue(formatter.format_zone(19800) == "+05:30")
        self.assertTrue(formatter.format_zone(19800, basic=True) == "+0530")
        self.assertTrue(formatter.format_zone(-18000) == "-05:00")
        self.assertTrue(formatter.format_zone(-1800, True) == "-0030")
        self.assertTrue(formatter.format_zone(86340) == "+23:59")

    def test_year(self):
        self.assertTrue(formatter.format_year(0) == "0000")
        self.assertTrue(formatter.format_year(5) == "0005")
        self.assertTrue(formatter.format_year(9999) == "9999")
        for year in (-1, 10000):
            try:
                formatter.format_year(year)
                self.fail("format_year(%i)" % year)
            except OutOfRange as err:
                self.assertTrue(err.field == Field.Year)
                self.assertTrue(err.value == year)

    def test_time(self):
        self.assertTrue(formatter.format_time(9, 5, 0) == "09:05:00")
        self.assertTrue(formatter.format_time(9, 5, 0, basic=True) ==
                        "090500")
        self.assertTrue(formatter.format_time(23, 59, 60, 250000000) ==
                        "23:59:60.25")


class FormatTests(unittest.TestCase):

    def setUp(self):        # noqa
        # 12:30:45.5 in India is 07:00:45.5 UTC
        self.m = Moment.from_calendar(2024, 1, 15, 12, 30, 45, 500000000,
                                      utc_offset=19800)

    def test_default(self):
        self.assertTrue(formatter.format_moment(self.m) ==
                        "2024-01-15T07:00:45.5Z")
        self.assertTrue(self.m.get_string() == "2024-01-15T07:00:45.5Z")
        self.assertTrue(str(Moment()) == "1970-01-01T00:00:00Z")

    def test_zones(self):
        m = self.m
        self.assertTrue(m.get_string(zone=ZoneFormat.OffsetExtended) ==
                        "2024-01-15T12:30:45.5+05:30")
        self.assertTrue(m.get_string(zone=ZoneFormat.OffsetBasic) ==
                        "2024-01-15T12:30:45.5+0530")
        self.assertTrue(m.get_string(zone=ZoneFormat.Omit) ==
                        "2024-01-15T12:30:45.5")
        m = m.with_offset(0)
        self.assertTrue(m.get_string(zone=ZoneFormat.OffsetExtended) ==
                        "2024-01-15T07:00:45.5+00:00")
        m = m.with_offset(-18000)
        self.assertTrue(m.get_string(zone=ZoneFormat.OffsetExtended) ==
                        "2024-01-15T02:00:45.5-05:00")
        self.assertTrue(m.get_string(zone=ZoneFormat.UTC) ==
                        "2024-01-15T07:00:45.5Z")

    def test_basic(self):
        self.assertTrue(
            self.m.get_string(DateFormat.CalendarBasic, TimeFormat.Basic,
                              ZoneFormat.OffsetBasic) ==
            "20240115T123045.5+0530")
        self.assertTrue(
            self.m.get_string(DateFormat.CalendarBasic, TimeFormat.Basic) ==
            "20240115T070045.5Z")

    def test_week(self):
        m = Moment.from_calendar(2024, 1, 15)
        self.assertTrue(m.get_string(DateFormat.WeekExtended) ==
                        "2024-W03-1T00:00:00Z")
        self.assertTrue(m.get_string(DateFormat.WeekBasic, TimeFormat.Basic)
                        == "2024W031T000000Z")
        # conversion to UTC can move the date into a different week-year
        m = Moment.from_calendar(2024, 1, 1, 1, utc_offset=7200)
        self.assertTrue(m.get_string(DateFormat.WeekExtended) ==
                        "2023-W52-7T23:00:00Z")
        self.assertTrue(m.get_string(DateFormat.WeekExtended,
                                     zone=ZoneFormat.OffsetExtended) ==
                        "2024-W01-1T01:00:00+02:00")

    def test_ordinal(self):
        m = Moment.from_calendar(2024, 1, 15)
        self.assertTrue(m.get_string(DateFormat.OrdinalExtended) ==
                        "2024-015T00:00:00Z")
        self.assertTrue(m.get_string(DateFormat.OrdinalBasic,
                                     TimeFormat.Basic) == "2024015T000000Z")
        m = Moment.from_calendar(2024, 12, 31, 23, 59, 59)
        self.assertTrue(m.get_string(DateFormat.OrdinalExtended) ==
                        "2024-366T23:59:59Z")

    def test_date_only(self):
        m = self.m
        self.assertTrue(m.get_string(time=TimeFormat.Omit) == "2024-01-15")
        self.assertTrue(m.get_string(DateFormat.WeekBasic, TimeFormat.Omit)
                        == "2024W031")
        self.assertTrue(m.get_string(DateFormat.OrdinalExtended,
                                     TimeFormat.Omit,
                                     ZoneFormat.OffsetExtended) ==
                        "2024-015")
        # the date is taken from the moment's own wall clock
        m = Moment.from_calendar(2024, 1, 1, 1, utc_offset=7200)
        self.assertTrue(m.get_string(time=TimeFormat.Omit) == "2024-01-01")

    def test_fraction(self):
        m = Moment.from_calendar(2024, 1, 15, 12, 30, 45)
        self.assertTrue(str(m) == "2024-01-15T12:30:45Z")
        m = Moment.from_calendar(2024, 1, 15, 12, 30, 45, 1000)
        self.assertTrue(str(m) == "2024-01-15T12:30:45.000001Z")

    def test_errors(self):
        m = Moment.from_calendar(10000, 1, 1)
        for date in DATE_FORMATS:
            try:
                m.get_string(date)
                self.fail("year 10000")
            except OutOfRange as err:
                self.assertTrue(err.field == Field.Year)
        # a negative offset can push the wall clock into year -1
        m = Moment.from_calendar(0, 1, 1).with_offset(-60)
        try:
            m.get_string(zone=ZoneFormat.OffsetExtended)
            self.fail("year -1")
        except OutOfRange:
            pass
        self.assertTrue(m.get_string() == "0000-01-01T00:00:00Z")
        for kwargs in ({'date': 0}, {'time': 3}, {'zone': 4}):
            try:
                self.m.get_string(**kwargs)
                self.fail("bad format %s" % repr(kwargs))
            except ValueError:
                pass


class RoundTripTests(unittest.TestCase):

    def test_round_trip(self):
        moments = (
            Moment(),
            Moment(-1, 1),
            Moment.from_calendar(2024, 2, 29, 23, 59, 59, 999999999,
                                 utc_offset=-18000),
            Moment.from_calendar(2020, 12, 31, 12, 0, 0, 500000000,
                                 utc_offset=50400),
            Moment.from_calendar(2021, 1, 3, 10, 15, utc_offset=-570 * 60),
            Moment.from_calendar(1, 1, 1),
            Moment.from_calendar(9999, 12, 31, 23, 59, 59),
            Moment.from_calendar(1900, 2, 28, 0, 0, 0, 1000))
        for m in moments:
            for date in DATE_FORMATS:
                for time in (TimeFormat.Extended, TimeFormat.Basic):
                    for zone in (ZoneFormat.UTC, ZoneFormat.OffsetExtended,
                                 ZoneFormat.OffsetBasic, ZoneFormat.Omit):
                        if zone == ZoneFormat.Omit and m.utc_offset:
                            # read back as UTC
                            continue
                        src = m.get_string(date, time, zone)
                        m2 = Moment.from_str(src)
                        self.assertTrue(m2 == m, "%s: %s" % (src, repr(m2)))
                        if zone in (ZoneFormat.OffsetExtended,
                                    ZoneFormat.OffsetBasic):
                            self.assertTrue(m2.utc_offset == m.utc_offset,
                                            src)


if __name__ == "__main__":
    unittest.main()
