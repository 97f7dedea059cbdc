#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants for Julian day arithmetic.

All numbers that take part in the date conversions are exact decimals.
Mixing them with floats raises TypeError.
"""

from decimal import Decimal

wdays   = { 0:"Sunday", 1:"Monday", 2:"Tuesday", 3:"Wednesday", 4:"Thursday",
            5:"Friday", 6:"Saturday" }

REFORM_DATE = (1582, 10, 15)   # first Gregorian day
REFORM_JDN  = 2299161          # integer JD of the reform date (at noon)

# Meeus, Astronomical Algorithms, chapter 7
YEAR_DAYS   = Decimal("365.25")
MONTH_DAYS  = Decimal("30.6001")
JD_OFFSET   = Decimal("1524.5")
C_OFFSET    = Decimal("122.1")
ALPHA0      = Decimal("1867216.25")
CENTURY     = Decimal("36524.25")
HALF        = Decimal("0.5")
WDAY_OFFSET = Decimal("1.5")

MJD0    = Decimal("2400000.5")     # For computing Modified Julian days

SPD     = 86400                    # seconds per day
