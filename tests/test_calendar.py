#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the Calendar and WeekDay enumerations.
"""


from juldate.calendar import *
from juldate.errors import WeekDayError, JulDateError
from decimal import Decimal
import pytest


def test_calendar_values():
    assert(Calendar.GREGORIAN.value == "Gregorian")
    assert(Calendar.JULIAN.value == "Julian")
    assert(len(Calendar) == 2)

def test_weekday_order():
    assert([int(d) for d in WeekDay] == list(range(7)))
    assert(WeekDay.SUNDAY == 0)
    assert(WeekDay.SATURDAY == 6)

def test_weekday_str():
    assert(str(WeekDay.WEDNESDAY) == "Wednesday")
    assert(str(WeekDay(0)) == "Sunday")

def test_from_decimal():
    assert(WeekDay.from_decimal(Decimal("3")) is WeekDay.WEDNESDAY)
    assert(WeekDay.from_decimal(Decimal("3.000")) is WeekDay.WEDNESDAY)
    assert(WeekDay.from_decimal(0) is WeekDay.SUNDAY)
    assert(WeekDay.from_decimal(Decimal("6")) is WeekDay.SATURDAY)

def test_from_decimal_non_integer():
    with pytest.raises(NonIntegerDecimal) as excinfo:
        WeekDay.from_decimal(Decimal("2.5"))
    assert(excinfo.value.value == Decimal("2.5"))
    with pytest.raises(NonIntegerDecimal):
        WeekDay.from_decimal(Decimal("NaN"))
    with pytest.raises(NonIntegerDecimal):
        WeekDay.from_decimal(Decimal("Infinity"))

def test_from_decimal_out_of_range():
    with pytest.raises(InvalidDayNumber) as excinfo:
        WeekDay.from_decimal(Decimal("7"))
    assert(excinfo.value.value == 7)
    with pytest.raises(InvalidDayNumber):
        WeekDay.from_decimal(Decimal("-1"))

def test_error_hierarchy():
    for exc in (NonIntegerDecimal, InvalidDayNumber):
        assert(issubclass(exc, WeekDayError))
        assert(issubclass(exc, JulDateError))
        assert(issubclass(exc, ValueError))
