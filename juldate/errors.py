#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by juldate.
"""


class JulDateError(Exception):
    pass


class CalendarDateError(JulDateError):
    pass


class InvalidJulianDay(CalendarDateError, ValueError):
    """A negative Julian day can not be converted to a calendar date."""

    def __init__(self, day):
        self.day = day
        super().__init__(f"Julian day must be >= 0 ({day})")


class WeekDayError(JulDateError):
    pass


class NonIntegerDecimal(WeekDayError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"weekday number is not an integer ({value})")


class InvalidDayNumber(WeekDayError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"weekday number must be in 0..6 ({value})")
