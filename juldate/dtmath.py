#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Date math on Julian day numbers.

These algorithms use Julian day numbers to compute differences between dates.
This way a continuous time scale is established starting at -4712.
A julian day starts at mean noon at the Greenwich meridian.

The Gregorian calendar reform is taken into account: the day following
October 4, 1582 (Julian calendar) is October 15, 1582.

The year before +1 is defined as the year 0 (as is usually done in astronomy).

The JD algorithm follows Meeus. All arithmetic is done with exact decimals,
so JD(1957, 10, 4.81) is 2436116.31 and not a nearby binary float.
"""

from collections import namedtuple
from decimal import Decimal, ROUND_HALF_EVEN
from math import floor
from juldate.constants import (REFORM_DATE, REFORM_JDN, YEAR_DAYS,
                               MONTH_DAYS, JD_OFFSET, C_OFFSET, ALPHA0,
                               CENTURY, HALF, WDAY_OFFSET, MJD0, SPD)
from juldate.calendar import Calendar, WeekDay
from juldate.errors import InvalidJulianDay
from juldate.logger import get_logger

log = get_logger(__name__)


def _decimal(x) -> Decimal:
    """
    Convert a number to Decimal.

    Floats go through their shortest repr, so 4.81 becomes Decimal("4.81")
    rather than the exact value of the nearest binary float.
    """
    if isinstance(x, Decimal):
        return x
    if isinstance(x, float):
        return Decimal(repr(x))
    return Decimal(x)


class CalendarDate(namedtuple("CalendarDate", ["year", "month", "day"])):
    """
    A date in the (mixed Julian/Gregorian) civil calendar.

    year  : int, astronomical numbering (0 is 1 BCE, negative years allowed)
    month : int, 1..12
    day   : Decimal, day of the month. The fraction is the time of day,
            e.g. 4.81 is 19:26:24 on the 4th.

    The constructor does NOT validate its input. The year, month and day
    MUST form a real calendar date; anything else gives meaningless results
    in every conversion and query. Dates in the reform gap
    (1582-10-05..1582-10-14) never existed and are treated as Julian.
    Refer to your local calendar if uncertain.
    """

    __slots__ = ()

    def __new__(cls, year:int, month:int, day:Decimal):
        return super().__new__(cls, int(year), int(month), _decimal(day))

    @classmethod
    def _make(cls, iterable):  # also used by _replace
        return cls(*iterable)

    @classmethod
    def from_julian_day(cls, jd):
        return from_julian_day(jd)

    def calendar(self):
        return classify(self)

    def is_gregorian(self):
        return is_gregorian(self)

    def to_julian_day(self):
        return to_julian_day(self)

    def leap_year(self, astronomical=False):
        return leap_year(self, astronomical)

    def day_of_the_week(self):
        return day_of_the_week(self)

    def day_of_the_year(self, astronomical=False):
        return day_of_the_year(self, astronomical)

    def __sub__(self, b):
        if isinstance(b, CalendarDate):
            return difference(self, b)
        return NotImplemented

    def __str__(self):
        return f"{self.year}-{self.month:02d}-{self.day}"


class JulianDay(namedtuple("JulianDay", ["day"])):
    """
    Decimal number of days since -4712-01-01 12:00 (Julian calendar).

    day + 0.5 is an integer at midnight. Any value is a valid JulianDay, but
    only day >= 0 can be converted to a CalendarDate.
    """

    __slots__ = ()

    def __new__(cls, day:Decimal):
        return super().__new__(cls, _decimal(day))

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def to_calendar_date(self):
        return from_julian_day(self)

    def __float__(self):
        return float(self.day)

    def __str__(self):
        return f"JD {self.day}"


def classify(date:CalendarDate) -> Calendar:
    """
    The calendar in use at the given date.

    Dates before October 15, 1582 are Julian, later dates Gregorian.

    Parameters
    ----------
    date : CalendarDate

    Returns
    -------
    Calendar
        Calendar.JULIAN or Calendar.GREGORIAN
    """
    year, month, day = date
    if (year, month, day) < REFORM_DATE:
        return Calendar.JULIAN
    return Calendar.GREGORIAN


def is_gregorian(date:CalendarDate) -> bool:
    return classify(date) is Calendar.GREGORIAN


def to_julian_day(date:CalendarDate) -> JulianDay:
    """
    Julian day of a calendar date.

    Assumes that year, month and day are valid.

    Parameters
    ----------
    date : CalendarDate

    Returns
    -------
    JulianDay
        The corresponding Julian day.
    """
    YYYY, MM, DD = date
    if MM in (1, 2):
        Y = YYYY - 1
        M = MM + 12
    else:
        Y = YYYY
        M = MM
    if is_gregorian(date):          # decided on the unshifted date
        A = Y // 100
        B = 2 - A + A // 4
    else:
        B = 0
    jd = floor(YEAR_DAYS * (Y + 4716)) + floor(MONTH_DAYS * (M + 1)) \
        + DD + B - JD_OFFSET
    return JulianDay(jd)


def from_julian_day(jd:JulianDay) -> CalendarDate:
    """
    Reverse Julian Day. Compute the calendar date of jd.

    The day of the result carries the day fraction (time of day).
    A valid julian day does not necessarily correspond to a date that was
    produced by to_julian_day, but every jd >= 0 gives some date.

    Parameters
    ----------
    jd : JulianDay
         Julian day. jd must be positive (or zero).

    Raises
    ------
    InvalidJulianDay
        If jd is negative.

    Returns
    -------
    CalendarDate
    """
    if not isinstance(jd, JulianDay):
        jd = JulianDay(jd)
    if jd.day < 0:
        raise InvalidJulianDay(jd.day)

    jd5 = jd.day + HALF
    Z   = floor(jd5)
    F   = jd5 - Z
    if Z < REFORM_JDN:
        A = Z
    else:
        alpha = floor((Z - ALPHA0) / CENTURY)  # positive
        A = Z + 1 + alpha - alpha // 4
    B = A + 1524
    C = floor((B - C_OFFSET) / YEAR_DAYS)
    D = floor(YEAR_DAYS * C)
    E = floor((B - D) / MONTH_DAYS)
    DD = B - D - floor(MONTH_DAYS * E) + F
    if E < 14:
        MM = E - 1
    else:
        MM = E - 13
    if MM > 2:
        YYYY = C - 4716
    else:
        YYYY = C - 4715
    return CalendarDate(YYYY, MM, DD)


def _is_julian_leapyear(year:int) -> bool:
    """
    Quadrennial leap year rule.

    1 BCE (0) is a leap year.
    """
    return year % 4 == 0


def _is_gregorian_leapyear(year:int) -> bool:
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


def leap_year(date:CalendarDate, astronomical:bool=False) -> bool:
    """
    Check if the year of date is a leap year.

    The rule that is applied depends on the calendar of the date itself
    (see classify).

    By default the reference rule set is used: Gregorian dates test only
    year % 4, Julian dates apply the centennial exception. This is the
    reverse of the historical rules, which are used when astronomical is
    True (Julian: every 4th year, Gregorian: every 4th year except
    centuries not divisible by 400).

    Parameters
    ----------
    date : CalendarDate

    astronomical : bool
        Apply the historically correct rules.

    Returns
    -------
    bool
        True if the year is a leap year.
    """
    gregorian = is_gregorian(date)
    if astronomical:
        if gregorian:
            return _is_gregorian_leapyear(date.year)
        return _is_julian_leapyear(date.year)
    if gregorian:
        return _is_julian_leapyear(date.year)
    return _is_gregorian_leapyear(date.year)


def day_of_the_week(date:CalendarDate) -> WeekDay:
    """
    The day of the week of date.

    The day is rounded to the nearest whole day (half to even) before the
    lookup. The week was not changed by the calendar reform.

    Parameters
    ----------
    date : CalendarDate

    Returns
    -------
    WeekDay
    """
    day_0hr = date.day.to_integral_value(rounding=ROUND_HALF_EVEN)
    jd = to_julian_day(CalendarDate(date.year, date.month, day_0hr))
    log.debug("day_of_the_week(%s): %s", date, jd)
    n = jd.day + WDAY_OFFSET
    return WeekDay.from_decimal(n - 7 * floor(n / 7))  # n mod 7, also for n < 0


def day_of_the_year(date:CalendarDate, astronomical:bool=False) -> int:
    """
    Ordinal day in the year, 1..365 (366 in leap years).

    Parameters
    ----------
    date : CalendarDate

    astronomical : bool
        Leap year rule, see leap_year.

    Returns
    -------
    int
    """
    K = 1 if leap_year(date, astronomical) else 2
    M = date.month
    N = 275 * M // 9 - K * ((M + 9) // 12) + date.day - 30
    return int(N)


def difference(lhs:CalendarDate, rhs:CalendarDate) -> Decimal:
    """Days from rhs to lhs: JD(lhs) - JD(rhs)."""
    return to_julian_day(lhs).day - to_julian_day(rhs).day


def days_between(lhs:CalendarDate, rhs:CalendarDate) -> Decimal:
    return abs(difference(lhs, rhs))


def MJD(date:CalendarDate) -> Decimal:
    """
    Modified Julian day of a valid date.

    Parameters
    ----------
    date : CalendarDate

    Returns
    -------
    Decimal
        JD - 2400000.5. MJD 0 is 1858-11-17 at midnight.
    """
    return to_julian_day(date).day - MJD0


def RMJD(mjd:Decimal) -> CalendarDate:
    return from_julian_day(JulianDay(_decimal(mjd) + MJD0))


def day_fraction(hh:int=0, mm:int=0, ss:Decimal=0) -> Decimal:
    """
    Time of day as an exact fraction of a day.

    CalendarDate(2000, 1, 1 + day_fraction(12)) is noon on January 1.
    """
    ssum = (_decimal(ss) + _decimal(mm) * 60) + _decimal(hh) * 3600
    return ssum / SPD


# 0 is sunday, 1 is monday etc.
def weekday_nr(jd:JulianDay) -> WeekDay:
    if not isinstance(jd, JulianDay):
        jd = JulianDay(jd)
    return WeekDay(floor(jd.day + WDAY_OFFSET) % 7)
