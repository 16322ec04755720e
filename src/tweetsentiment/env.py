# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import os

TRUE_WORDS = {"1", "true", "yes", "on", "y"}
FALSE_WORDS = {"0", "false", "no", "off", "n"}


def get_env(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value


def get_int_env(name: str, default: int) -> int:
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_bool_env(name: str, default: bool = False) -> bool:
    raw = get_env(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    return default


def default_delimiter() -> str:
    return get_env("SENTIMENT_DELIMITER", ",") or ","


def default_encoding() -> str:
    return get_env("SENTIMENT_ENCODING", "utf-8") or "utf-8"


def default_top_tokens() -> int:
    return max(get_int_env("SENTIMENT_TOP_TOKENS", 0), 0)


def default_quiet() -> bool:
    return get_bool_env("SENTIMENT_QUIET", False)
