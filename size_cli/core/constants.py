"""Unit tiers, range limits and config paths for size-cli."""

import os
import pathlib

HOME = str(pathlib.Path.home())

CONFIG_PATHS = [
    os.path.join(HOME, ".sizerc"),
    os.path.join(HOME, ".config", "size-cli", "config.json"),
]

# Largest amount the formatter accepts (unsigned 64-bit).
MAX_AMOUNT = 2**64 - 1

KB = 1024
MB = 1024**2
GB = 1024**3
TB = 1024**4
PB = 1024**5
EB = 1024**6

# (divisor, short label, full word); amounts >= PB land in the exa tier
UNIT_TIERS = [
    (1, "", ""),
    (KB, "k", "kilo"),
    (MB, "m", "mega"),
    (GB, "g", "giga"),
    (TB, "t", "tera"),
    (EB, "e", "exa"),
]

HEX_FORMATS = {"X", "x"}
NUMBER_FORMATS = {"N", "F"} | HEX_FORMATS
HEX_PREFIX = "0x"

# Glob metacharacters understood in path specs
GLOB_CHARS = "*?["
