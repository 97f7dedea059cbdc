#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Calendar systems and weekdays.

Two calendars are distinguished: the Julian calendar, in use until
October 4, 1582, and the Gregorian calendar that follows it on
October 15, 1582. The week was not affected by the reform, so in 1582
Thursday October 4 was followed by Friday October 15.
"""

from decimal import Decimal
from enum import Enum, IntEnum
from juldate.constants import wdays
from juldate.errors import NonIntegerDecimal, InvalidDayNumber


class Calendar(Enum):
    GREGORIAN = "Gregorian"
    JULIAN = "Julian"


class WeekDay(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_decimal(cls, d:Decimal) -> "WeekDay":
        """
        Decode a weekday number.

        Parameters
        ----------
        d : Decimal or int
            Weekday number, 0 is Sunday.

        Raises
        ------
        NonIntegerDecimal
            d has a fractional part or is not a finite number.
        InvalidDayNumber
            d is an integer outside 0..6.

        Returns
        -------
        WeekDay
        """
        d = Decimal(d)
        if not d.is_finite() or d != d.to_integral_value():
            raise NonIntegerDecimal(d)
        n = int(d)
        if not 0 <= n <= 6:
            raise InvalidDayNumber(n)
        return cls(n)

    def __str__(self):
        return wdays[self.value]
