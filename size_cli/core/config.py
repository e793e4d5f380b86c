#!/usr/bin/env python3
"""Configuration for size-cli: default formatting and traversal options."""
from __future__ import annotations

import json
import os
from typing import Any

from .constants import CONFIG_PATHS, NUMBER_FORMATS
from .options import FormatOptions

DEFAULTS: dict[str, Any] = {
    "decimals": 2,
    "round_down": False,
    "bytes_text": False,
    "upper_case": False,
    "title_case": False,
    "long": False,
    "no_space": False,
    "extra_byte_digits": False,
    "format_string": "N",
    "prefix_text": None,
    "include_hidden": False,
}

VALID_KEYS = frozenset(DEFAULTS.keys())
BOOL_KEYS = frozenset(k for k, v in DEFAULTS.items() if isinstance(v, bool))
MAX_DECIMALS = 15


def config_path() -> str:
    """File written by `size-cli config --init` (~/.sizerc)."""
    return CONFIG_PATHS[0]


def config_exists() -> bool:
    return any(os.path.isfile(p) for p in CONFIG_PATHS)


def load() -> dict[str, Any]:
    """Defaults overlaid with the valid keys of the first readable config file."""
    out = dict(DEFAULTS)
    for p in CONFIG_PATHS:
        if not os.path.isfile(p):
            continue
        try:
            with open(p, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, dict):
                continue
            for k, v in raw.items():
                if k not in VALID_KEYS:
                    continue
                if k in BOOL_KEYS and isinstance(v, bool):
                    out[k] = v
                elif k == "decimals" and isinstance(v, int) and not isinstance(v, bool):
                    if 0 <= v <= MAX_DECIMALS:
                        out[k] = v
                elif k == "format_string" and v in NUMBER_FORMATS:
                    out[k] = v
                elif k == "prefix_text" and (v is None or isinstance(v, str)):
                    out[k] = v[:32] if v else v
            return out
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            continue
    return out


def save(cfg: dict[str, Any], path: str | None = None) -> None:
    """Persist formatting defaults as JSON.

    Only recognised keys are written, sorted; missing ones take their
    default value so the file always lists every setting.
    """
    p = path or config_path()
    dirname = os.path.dirname(p)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    to_write = {k: cfg.get(k, DEFAULTS[k]) for k in sorted(VALID_KEYS)}
    with open(p, "w", encoding="utf-8") as f:
        json.dump(to_write, f, indent=2)


def init_config(overwrite: bool = False) -> tuple[str, bool]:
    """Write the defaults to config_path() unless a file is already there.

    Returns (path, written).
    """
    p = config_path()
    if os.path.isfile(p) and not overwrite:
        return p, False
    save(DEFAULTS, p)
    return p, True


def format_options_from(cfg: dict[str, Any]) -> FormatOptions:
    """Build FormatOptions from a loaded config dict (include_hidden is ignored)."""
    return FormatOptions(
        decimals=cfg.get("decimals", DEFAULTS["decimals"]),
        round_down=cfg.get("round_down", False),
        bytes_text=cfg.get("bytes_text", False),
        upper_case=cfg.get("upper_case", False),
        title_case=cfg.get("title_case", False),
        long=cfg.get("long", False),
        no_space=cfg.get("no_space", False),
        extra_byte_digits=cfg.get("extra_byte_digits", False),
        format_string=cfg.get("format_string", "N"),
        prefix_text=cfg.get("prefix_text"),
    )
