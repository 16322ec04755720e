# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path
from typing import IO

from .env import default_encoding
from .errors import ResourceOpenError


def open_text(path: Path | str, mode: str = "r", *, encoding: str | None = None) -> IO[str]:
    """Open a corpus or output file, turning ``OSError`` into :class:`ResourceOpenError`."""
    try:
        return open(Path(path), mode, encoding=encoding or default_encoding(), errors="replace", newline="\n")
    except OSError as exc:
        raise ResourceOpenError(path, exc.strerror or str(exc)) from exc
