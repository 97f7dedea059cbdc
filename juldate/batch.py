#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Array versions of the Julian day conversions.

For bulk data (tables, time series) the Decimal functions in dtmath are slow.
The kernels below do the same computation in float64 and are compiled with
numba. float64 is exact for whole and half days up to 2**53, so for integer
calendar days the results are identical to dtmath. A fractional day is
rounded once, to the float64 nearest the exact Julian day.
"""

import numpy as np
from juldate.cnumba import cnjit
from juldate.errors import InvalidJulianDay


@cnjit(cache=False)
def _jd_kernel(years, months, days):
    n = years.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        YYYY = years[i]
        MM = months[i]
        DD = days[i]
        if MM <= 2:
            Y = YYYY - 1
            M = MM + 12
        else:
            Y = YYYY
            M = MM
        if YYYY < 1582 or (YYYY == 1582 and (MM < 10 or (MM == 10 and DD < 15))):
            B = 0
        else:
            A = Y // 100
            B = 2 - A + A // 4
        # whole and half days first, the day (with fraction) last
        out[i] = np.floor(365.25 * (Y + 4716)) + np.floor(30.6001 * (M + 1)) \
            + B - 1524.5 + DD
    return out


@cnjit(cache=False)
def _rjd_kernel(jds):
    n = jds.shape[0]
    years = np.empty(n, dtype=np.int64)
    months = np.empty(n, dtype=np.int64)
    days = np.empty(n, dtype=np.float64)
    for i in range(n):
        jd5 = jds[i] + 0.5
        Z = np.floor(jd5)
        F = jd5 - Z
        if Z < 2299161:
            A = Z
        else:
            alpha = np.floor((Z - 1867216.25) / 36524.25)
            A = Z + 1 + alpha - np.floor(alpha / 4)
        B = A + 1524
        C = np.floor((B - 122.1) / 365.25)
        D = np.floor(365.25 * C)
        E = np.floor((B - D) / 30.6001)
        days[i] = B - D - np.floor(30.6001 * E) + F
        if E < 14:
            MM = E - 1
        else:
            MM = E - 13
        if MM > 2:
            YYYY = C - 4716
        else:
            YYYY = C - 4715
        months[i] = int(MM)
        years[i] = int(YYYY)
    return years, months, days


def julian_days(years:np.ndarray, months:np.ndarray, days:np.ndarray) -> np.ndarray:
    """
    Julian days of arrays of calendar dates.

    Parameters
    ----------
    years : array_like of int

    months : array_like of int

    days : array_like of float
        Day of the month, the fraction is the time of day.
        Arguments are broadcast against each other.

    Returns
    -------
    ndarray of float64
        Julian days in the broadcast shape.
    """
    y, m, d = np.broadcast_arrays(np.asarray(years, dtype=np.int64),
                                  np.asarray(months, dtype=np.int64),
                                  np.asarray(days, dtype=np.float64))
    shape = y.shape
    jd = _jd_kernel(np.array(y).ravel(), np.array(m).ravel(),
                    np.array(d).ravel())
    return jd.reshape(shape)


def calendar_dates(jds:np.ndarray) -> (np.ndarray, np.ndarray, np.ndarray):
    """
    Calendar dates of an array of Julian days.

    Parameters
    ----------
    jds : array_like of float
        Julian days, all >= 0.

    Raises
    ------
    InvalidJulianDay
        If any of the Julian days is negative.

    Returns
    -------
    years, months, days : ndarray
        int64, int64 and float64 arrays in the shape of jds. days carries
        the day fraction.
    """
    jd = np.array(jds, dtype=np.float64)
    shape = jd.shape
    jd = jd.ravel()
    negative = jd < 0
    if np.any(negative):
        raise InvalidJulianDay(jd[negative][0])
    years, months, days = _rjd_kernel(jd)
    return years.reshape(shape), months.reshape(shape), days.reshape(shape)


def weekdays(jds:np.ndarray) -> np.ndarray:
    """
    Weekday numbers of an array of Julian days, 0 is Sunday.

    Negative Julian days are allowed.
    """
    jd = np.asarray(jds, dtype=np.float64)
    return (np.floor(jd + 1.5) % 7).astype(np.int64)
