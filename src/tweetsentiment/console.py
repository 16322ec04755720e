# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass

import pandas as pd
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

ASCII_BANNER = r"""
 _                     _
| |___      _____  ___| |_
| __\ \ /\ / / _ \/ _ \ __|
| |_ \ V  V /  __/  __/ |_
 \__| \_/\_/ \___|\___|\__|
"""


@dataclass
class SentimentConsole:
    enabled: bool = True
    quiet: bool = False

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None
        self._err_console = Console(stderr=True, color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console and not self.quiet:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Tweet sentiment", border_style="cyan"))

    def info(self, text: str) -> None:
        if self._console and not self.quiet:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}", highlight=False)

    def warn(self, text: str) -> None:
        if self._err_console:
            self._err_console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}", highlight=False)

    def error(self, text: str) -> None:
        if self._err_console:
            self._err_console.print(f"[bold red]ERROR[/bold red] {escape(text)}", highlight=False)

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        if not self._console or self.quiet:
            return
        table = Table(title=title, show_lines=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for key in sorted(metrics.keys()):
            table.add_row(key, f"{float(metrics[key]):.4f}")
        self._console.print(table)

    def tokens_table(self, frame: pd.DataFrame, *, title: str) -> None:
        if not self._console or self.quiet or frame.empty:
            return
        table = Table(title=title, show_lines=False)
        for column in frame.columns:
            table.add_column(str(column), justify="left" if column == "token" else "right")
        for row in frame.itertuples(index=False):
            table.add_row(*(str(value) for value in row))
        self._console.print(table)


def quiet_console() -> SentimentConsole:
    return SentimentConsole(quiet=True)
