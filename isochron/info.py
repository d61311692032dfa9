#! /usr/bin/env python
"""The module creates some basic constants to describe the isochron package."""

title_name = "isochron"
name = "isochron"
copyright = "\xA92026, the isochron authors"

major_version = "0.1"
build_date = "20261019"
version = "%s.%s" % (major_version, build_date)

title = (
    "isochron: "
    "ISO 8601 date, time, duration and interval codec")

home = "https://github.com/isochron/isochron"
