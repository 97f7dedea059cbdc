#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Package settings.

The defaults live in config.ini next to this module. A second ini file
named by the JULDATE_CONFIG environment variable is read afterwards and
overrides them.
"""

import os
from configparser import ConfigParser


path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

user_config = os.environ.get("JULDATE_CONFIG")
if user_config:
    if not os.path.isfile(user_config):
        raise FileNotFoundError(f"{user_config}")
    config.read(user_config)

# Numba
numba_jit = config.getboolean("Numba", "jit", fallback=True)

# Logging
log_level   = config.get("Logging", "level", fallback="WARNING").upper()
log_format  = config.get("Logging", "format",
                         fallback="%(levelname)s | %(name)s | %(message)s")
log_datefmt = config.get("Logging", "datefmt", fallback=None)
