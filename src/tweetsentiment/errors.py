# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path


class SentimentError(Exception):
    """Base class for pipeline errors."""


class ResourceOpenError(SentimentError):
    """An input or output file could not be opened."""

    def __init__(self, path: Path | str, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"cannot open {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedRecordError(SentimentError, ValueError):
    """A label or identifier field does not start with an integer."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"not an integer: {field!r}")
