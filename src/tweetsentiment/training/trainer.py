# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..console import SentimentConsole, quiet_console
from ..env import default_delimiter
from ..errors import MalformedRecordError, ResourceOpenError
from ..features import parse_code, parse_record, tokenize
from ..files import open_text
from ..model import FrequencyModel, FrequencyModelBuilder
from ..schemas import Label, TrainingSummary


def train_with_summary(
    lines: Iterable[str],
    *,
    delimiter: str | None = None,
    console: SentimentConsole | None = None,
) -> tuple[FrequencyModel, TrainingSummary]:
    delimiter = delimiter or default_delimiter()
    console = console or quiet_console()
    builder = FrequencyModelBuilder()
    summary = TrainingSummary()

    rows = iter(lines)
    next(rows, None)  # header
    for line_no, line in enumerate(rows, start=2):
        summary.rows_read += 1
        label_field, text = parse_record(line, delimiter)
        try:
            code = parse_code(label_field)
        except MalformedRecordError as exc:
            summary.rows_malformed += 1
            console.error(f"line {line_no}: malformed sentiment label {exc.field!r}, skipped")
            continue

        label = Label.from_code(code)
        tokens = tokenize(text)
        if label is None:
            summary.rows_unknown_class += 1
            continue

        summary.rows_counted += 1
        for token in tokens:
            builder.increment(label, token)

    model = builder.freeze()
    summary.positive_tokens = model.positive_token_count
    summary.negative_tokens = model.negative_token_count
    summary.positive_vocabulary = len(model.positive_counts)
    summary.negative_vocabulary = len(model.negative_counts)
    return model, summary


def train(
    lines: Iterable[str],
    *,
    delimiter: str | None = None,
    console: SentimentConsole | None = None,
) -> FrequencyModel:
    model, _summary = train_with_summary(lines, delimiter=delimiter, console=console)
    return model


def train_file(
    path: Path | str,
    *,
    delimiter: str | None = None,
    console: SentimentConsole | None = None,
) -> tuple[FrequencyModel, TrainingSummary]:
    """Train from a CSV file. An unreadable file yields an empty model."""
    console = console or quiet_console()
    try:
        with open_text(path) as handle:
            model, summary = train_with_summary(handle, delimiter=delimiter, console=console)
    except ResourceOpenError as exc:
        console.error(f"error opening training file: {exc}")
        return FrequencyModelBuilder().freeze(), TrainingSummary()

    console.info(
        f"Training completed. Positive words: {summary.positive_tokens}, "
        f"Negative words: {summary.negative_tokens}"
    )
    if summary.rows_malformed:
        console.warn(f"{summary.rows_malformed} malformed training rows skipped")
    return model, summary
