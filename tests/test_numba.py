#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the numba switch.
"""

import json
import os
import subprocess
import sys
import numpy as np
import pytest


def test_numba_installed():
    import numba

def test_cnumba():
    import juldate.cnumba

def test_acc():
    import juldate.cnumba
    from juldate.config import numba_jit
    assert(juldate.cnumba.numba_acc == numba_jit)

def test_cnjit_forms():
    from juldate.cnumba import cnjit

    @cnjit
    def add(a, b):
        return a + b

    @cnjit(cache=False)
    def mul(a, b):
        return a * b

    @cnjit('f8(f8, f8)')
    def sub(a, b):
        return a - b

    assert(add(1.5, 2.0) == 3.5)
    assert(mul(3, 4) == 12)
    assert(sub(1.0, 0.25) == 0.75)

def test_cnjit_arrays():
    from juldate.cnumba import cnjit

    @cnjit
    def total(a):
        s = 0.0
        for i in range(a.shape[0]):
            s += a[i]
        return s

    assert(total(np.array([0.5, 1.5, 2.0])) == 4.0)

BATCH_SCRIPT = """
import json
import juldate.config as config
from juldate.cnumba import numba_acc
from juldate.batch import julian_days, calendar_dates, weekdays
jd = julian_days([1957, 333, 1582, 1582, -4712], [10, 1, 10, 10, 1],
                 [4.81, 27.5, 4, 15, 1.5])
years, months, days = calendar_dates(jd)
print(json.dumps({"acc": numba_acc, "level": config.log_level,
                  "jd": jd.tolist(), "years": years.tolist(),
                  "months": months.tolist(), "days": days.tolist(),
                  "weekdays": weekdays(jd).tolist()}))
"""

def run_batch(env):
    root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    env = dict(env)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [root, env.get("PYTHONPATH", "")] if p)
    out = subprocess.run([sys.executable, "-c", BATCH_SCRIPT], env=env,
                         cwd=root, capture_output=True, text=True, check=True)
    return json.loads(out.stdout)

def test_config_override_disables_jit(tmp_path):
    ini = tmp_path / "juldate.ini"
    ini.write_text("[Numba]\njit = no\n\n[Logging]\nlevel = debug\n")
    env = {k: v for k, v in os.environ.items() if k != "JULDATE_CONFIG"}
    compiled = run_batch(env)
    env["JULDATE_CONFIG"] = str(ini)
    plain = run_batch(env)
    assert(compiled["acc"] is True)
    assert(plain["acc"] is False)
    assert(plain["level"] == "DEBUG")
    for key in ("jd", "years", "months", "days", "weekdays"):
        assert(plain[key] == compiled[key])
    assert(plain["jd"][0] == 2436116.31)
    assert(plain["years"] == [1957, 333, 1582, 1582, -4712])
    assert(plain["weekdays"] == [5, 6, 4, 5, 1])

def test_config_override_missing_file(tmp_path):
    env = dict(os.environ, JULDATE_CONFIG=str(tmp_path / "missing.ini"))
    with pytest.raises(subprocess.CalledProcessError):
        run_batch(env)
