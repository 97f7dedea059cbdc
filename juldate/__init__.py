#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
juldate: conversion between calendar dates and Julian days.
"""

from juldate.calendar import Calendar, WeekDay
from juldate.dtmath import (CalendarDate, JulianDay, classify, is_gregorian,
                            to_julian_day, from_julian_day, leap_year,
                            day_of_the_week, day_of_the_year, difference,
                            days_between, MJD, RMJD, day_fraction, weekday_nr)
from juldate.errors import (JulDateError, CalendarDateError, InvalidJulianDay,
                            WeekDayError, NonIntegerDecimal, InvalidDayNumber)
from juldate import batch

__version__ = "0.1.0"

__all__ = ["Calendar", "WeekDay", "CalendarDate", "JulianDay", "classify",
           "is_gregorian", "to_julian_day", "from_julian_day", "leap_year",
           "day_of_the_week", "day_of_the_year", "difference", "days_between",
           "MJD", "RMJD", "day_fraction", "weekday_nr", "JulDateError",
           "CalendarDateError", "InvalidJulianDay", "WeekDayError",
           "NonIntegerDecimal", "InvalidDayNumber", "batch"]
