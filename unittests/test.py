#! /usr/bin/env python
"""Runs unit tests on all isochron modules"""

import unittest
import logging

import test_duration
import test_formatter
import test_gregorian
import test_interval
import test_json_codec
import test_moment
import test_ordinal
import test_parser
import test_scanner
import test_timeofday
import test_validate
import test_weekdate


all_tests = unittest.TestSuite()
all_tests.addTest(test_duration.suite())
all_tests.addTest(test_formatter.suite())
all_tests.addTest(test_gregorian.suite())
all_tests.addTest(test_interval.suite())
all_tests.addTest(test_json_codec.suite())
all_tests.addTest(test_moment.suite())
all_tests.addTest(test_ordinal.suite())
all_tests.addTest(test_parser.suite())
all_tests.addTest(test_scanner.suite())
all_tests.addTest(test_timeofday.suite())
all_tests.addTest(test_validate.suite())
all_tests.addTest(test_weekdate.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
