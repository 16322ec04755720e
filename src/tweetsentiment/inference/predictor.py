# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ..console import SentimentConsole, quiet_console
from ..env import default_delimiter
from ..errors import ResourceOpenError
from ..features import parse_record, tokenize
from ..files import open_text
from ..model import FrequencyModel
from ..schemas import Label, PredictionRecord


def score(tokens: Iterable[str], model: FrequencyModel) -> tuple[int, int]:
    pos_score = 0
    neg_score = 0
    for token in tokens:
        pos_score += model.positive_score(token)
        neg_score += model.negative_score(token)
    return pos_score, neg_score


def decide(pos_score: int, neg_score: int) -> Label:
    # ties, including 0 == 0, go to NEGATIVE
    return Label.POSITIVE if pos_score > neg_score else Label.NEGATIVE


def classify(text: str, model: FrequencyModel) -> Label:
    return decide(*score(tokenize(text), model))


def predict(
    lines: Iterable[str],
    model: FrequencyModel,
    *,
    delimiter: str | None = None,
) -> Iterator[PredictionRecord]:
    delimiter = delimiter or default_delimiter()
    rows = iter(lines)
    next(rows, None)  # header
    for line in rows:
        identifier, text = parse_record(line, delimiter)
        yield PredictionRecord(identifier=identifier, label=classify(text, model))


def predict_file(
    test_path: Path | str,
    results_path: Path | str,
    model: FrequencyModel,
    *,
    delimiter: str | None = None,
    console: SentimentConsole | None = None,
) -> int | None:
    """Write ``"<code>, <identifier>"`` lines to ``results_path``, using ``delimiter`` in place of the comma.

    Returns the number of predictions written, or ``None`` when either file
    cannot be opened.
    """
    delimiter = delimiter or default_delimiter()
    console = console or quiet_console()
    count = 0
    try:
        with open_text(test_path) as source, open_text(results_path, "w") as results:
            for record in predict(source, model, delimiter=delimiter):
                results.write(record.to_line(delimiter) + "\n")
                count += 1
    except ResourceOpenError as exc:
        console.error(f"error opening test or results file: {exc}")
        return None

    console.info(f"Prediction completed for {count} tweets.")
    return count
