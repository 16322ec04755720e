# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
