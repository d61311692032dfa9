#! /usr/bin/env python

"""Runs unit tests on the isochron.duration module"""

import unittest

from isochron.duration import Duration
from isochron.errors import DurationFormatError, Field, OutOfRange
from isochron.parser import parse_duration


def suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite((
        loader.loadTestsFromTestCase(DurationTests),
        loader.loadTestsFromTestCase(DurationParserTests)
    ))


class DurationTests(unittest.TestCase):

    def test_constructor(self):
        d = Duration()
        self.assertTrue(d.get_calendar_duration() == (0, 0, 0, 0, 0, 0, 0))
        self.assertTrue(d.is_zero())
        d = Duration(1, 2, 3, 4, 5, 6, 500000000)
        self.assertTrue(d.years == 1)
        self.assertTrue(d.months == 2)
        self.assertTrue(d.days == 3)
        self.assertTrue(d.hours == 4)
        self.assertTrue(d.minutes == 5)
        self.assertTrue(d.seconds == 6)
        self.assertTrue(d.nanoseconds == 500000000)
        self.assertFalse(d.is_zero())
        self.assertFalse(Duration(nanoseconds=1).is_zero())
        # components are not normalised
        d = Duration(hours=36, minutes=90)
        self.assertTrue(d.hours == 36 and d.days == 0)

    def test_errors(self):
        for name, field in (('years', Field.Years),
                            ('months', Field.Months),
                            ('days', Field.Days),
                            ('hours', Field.Hours),
                            ('minutes', Field.Minutes),
                            ('seconds', Field.Seconds)):
            try:
                Duration(**{name: -1})
                self.fail("negative %s" % name)
            except OutOfRange as err:
                self.assertTrue(err.field == field)
                self.assertTrue(err.value == -1)
            try:
                Duration(**{name: 1.5})
                self.fail("float %s" % name)
            except TypeError:
                pass
        try:
            Duration(nanoseconds=10 ** 9)
            self.fail("nanoseconds overflow")
        except OutOfRange as err:
            self.assertTrue(err.field == Field.Fraction)

    def test_immutable(self):
        d = Duration(days=1)
        try:
            d.days = 2
            self.fail("Duration is mutable")
        except AttributeError:
            pass
        self.assertTrue(d.days == 1)

    def test_equality(self):
        self.assertTrue(Duration(days=1) == Duration(days=1))
        self.assertTrue(Duration(days=1) != Duration(hours=24))
        self.assertFalse(Duration(days=1) == "P1D")
        self.assertTrue(hash(Duration(months=1)) == hash(Duration(months=1)))
        self.assertTrue(len(set((Duration(), Duration(), Duration(days=1))))
                        == 2)

    def test_get_string(self):
        self.assertTrue(Duration().get_string() == "PT0S")
        self.assertTrue(str(Duration(years=1)) == "P1Y")
        self.assertTrue(str(Duration(months=1)) == "P1M")
        self.assertTrue(str(Duration(minutes=1)) == "PT1M")
        self.assertTrue(str(Duration(days=1, hours=12)) == "P1DT12H")
        self.assertTrue(str(Duration(1, 2, 3, 4, 5, 6, 500000000)) ==
                        "P1Y2M3DT4H5M6.5S")
        self.assertTrue(str(Duration(seconds=0, nanoseconds=250000000)) ==
                        "PT0.25S")
        self.assertTrue(Duration(seconds=1, nanoseconds=5).get_string(",") ==
                        "PT1,000000005S")
        self.assertTrue(str(Duration(years=1, seconds=1)) == "P1YT1S")

    def test_repr(self):
        self.assertTrue(repr(Duration(days=3)) ==
                        "Duration(years=0, months=0, days=3, hours=0, "
                        "minutes=0, seconds=0, nanoseconds=0)")

    def test_from_str(self):
        d = Duration.from_str("P3D")
        self.assertTrue(d == Duration(days=3))


class DurationParserTests(unittest.TestCase):

    def test_components(self):
        d = parse_duration("P1Y2M3DT4H5M6S")
        self.assertTrue(d.get_calendar_duration() == (1, 2, 3, 4, 5, 6, 0))
        self.assertTrue(parse_duration("P1M") == Duration(months=1))
        self.assertTrue(parse_duration("PT1M") == Duration(minutes=1))
        self.assertTrue(parse_duration("P1MT1M") ==
                        Duration(months=1, minutes=1))
        self.assertTrue(parse_duration("PT36H") == Duration(hours=36))
        self.assertTrue(parse_duration("P0D").is_zero())
        self.assertTrue(parse_duration("PT0S").is_zero())
        self.assertTrue(parse_duration("P10000Y") == Duration(years=10000))
        self.assertTrue(parse_duration("P007D") == Duration(days=7))

    def test_fraction(self):
        d = parse_duration("PT1.5S")
        self.assertTrue(d.seconds == 1)
        self.assertTrue(d.nanoseconds == 500000000)
        d = parse_duration("PT0,000000001S")
        self.assertTrue(d == Duration(nanoseconds=1))
        d = parse_duration("P1DT2H3M4.25S")
        self.assertTrue(d == Duration(days=1, hours=2, minutes=3, seconds=4,
                                      nanoseconds=250000000))

    def test_round_trip(self):
        for src in ("P1Y", "P1Y2M3DT4H5M6.5S", "PT0S", "P1DT12H",
                    "PT0.000000001S", "P2M10D", "PT5M"):
            self.assertTrue(str(parse_duration(src)) == src, src)

    def test_errors(self):
        for src in ("", "P", "PT", "P1DT", "1D", "P1", "P1H", "PT1D",
                    "P1D2Y", "P1Y1Y", "PT1S1M", "P1W", "-P1D", "P-1D",
                    "P1.5D", "PT1.5M", "PT1.5H", "PT.5S", "PT1.S",
                    "P1DX", "P1D ", "pT1S", "P1DT1HT1M"):
            try:
                parse_duration(src)
                self.fail("parse_duration(%s)" % repr(src))
            except DurationFormatError:
                pass
            except ValueError as err:
                # malformed fractions are reported on the fraction field
                self.assertTrue(src in ("PT.5S", "PT1.S"),
                                "%s: %s" % (src, str(err)))
        try:
            parse_duration(None)
            self.fail("parse_duration(None)")
        except TypeError:
            pass


if __name__ == "__main__":
    unittest.main()
