# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

from .errors import MalformedRecordError

NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")
# C-locale whitespace only; \xa0 and other Unicode spaces stay inside a word
WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")
LEADING_INT_RE = re.compile(r"^[ \t\n\v\f\r]*([+-]?[0-9]+)")

# label, id, date, query, user, text
SKIPPED_FIELDS = 4


def _safe_text(value: object) -> str:
    return str(value or "")


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def tokenize(text: str) -> list[str]:
    """Split ``text`` on whitespace and keep the lowercased ASCII letters and digits of each word.

    Words with nothing left after cleaning are dropped, so no token is empty.
    """
    tokens: list[str] = []
    for word in WHITESPACE_RE.split(_safe_text(text)):
        cleaned = NON_ALNUM_RE.sub("", word).lower()
        if cleaned:
            tokens.append(cleaned)
    return tokens


def parse_record(line: str, delimiter: str = ",") -> tuple[str, str]:
    """Return ``(first_field, text)`` where ``text`` is everything after the 5th delimiter.

    Delimiters inside the text are kept verbatim. A line with fewer than five
    delimiters has an empty text field.
    """
    parts = _strip_eol(_safe_text(line)).split(delimiter, SKIPPED_FIELDS + 1)
    first = parts[0]
    if len(parts) <= SKIPPED_FIELDS + 1:
        return first, ""
    return first, parts[SKIPPED_FIELDS + 1]


def leading_field(line: str, delimiter: str = ",") -> str:
    return _strip_eol(_safe_text(line)).split(delimiter, 1)[0]


def second_field(line: str, delimiter: str = ",") -> str:
    parts = _strip_eol(_safe_text(line)).split(delimiter, 2)
    if len(parts) < 2:
        return ""
    return parts[1].strip()


def parse_code(field: str) -> int:
    """Parse the leading integer of ``field``; trailing characters are ignored."""
    match = LEADING_INT_RE.match(_safe_text(field))
    if match is None:
        raise MalformedRecordError(_safe_text(field))
    return int(match.group(1))
