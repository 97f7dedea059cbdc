#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Numba compilation switch.

cnjit behaves like numba.njit when numba_acc is set (config.ini, [Numba]
jit). Otherwise the decorated function is returned as is and runs as plain
Python with identical results.
"""

import numba
from juldate.config import numba_jit

numba_acc = numba_jit


def cnjit(signature_or_function=None, **kwargs):
    if callable(signature_or_function):  # bare @cnjit
        if numba_acc:
            return numba.njit(**kwargs)(signature_or_function)
        return signature_or_function

    def decorator(func):
        if numba_acc:
            if signature_or_function is None:
                return numba.njit(**kwargs)(func)
            return numba.njit(signature_or_function, **kwargs)(func)
        return func
    return decorator
