# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from . import __version__
from .console import SentimentConsole
from .env import default_quiet, default_top_tokens
from .evaluation.evaluate import evaluate_files
from .inference.predictor import predict_file
from .model import FrequencyModel
from .schemas import Label
from .training.trainer import train_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweetsentiment",
        description="Train a word-frequency sentiment classifier, predict a test set and score it.",
    )
    parser.add_argument("train", type=Path, help="Training CSV (label,id,date,query,user,text)")
    parser.add_argument("test", type=Path, help="Test CSV (id,...,text)")
    parser.add_argument("truth", type=Path, help="Ground-truth CSV aligned with the test file")
    parser.add_argument("results", type=Path, help="Output file for '<code>, <id>' predictions")
    parser.add_argument("accuracy", type=Path, help="Output file for the accuracy figure")
    parser.add_argument("--quiet", action="store_true", default=default_quiet(), help="Only print warnings and errors")
    parser.add_argument(
        "--top",
        type=int,
        default=default_top_tokens(),
        metavar="N",
        help="Show the N most frequent tokens per class after training",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def top_token_frame(model: FrequencyModel, label: Label, max_items: int) -> pd.DataFrame:
    """Most frequent tokens of one class, ties broken alphabetically."""
    column = "positive" if label is Label.POSITIVE else "negative"
    frame = model.to_frame()
    if max_items <= 0:
        return frame.iloc[0:0]
    ranked = frame[frame[column] > 0].sort_values(by=[column, "token"], ascending=[False, True])
    return ranked.head(max_items).reset_index(drop=True)


def _show_top_tokens(console: SentimentConsole, model: FrequencyModel, max_items: int) -> None:
    for label in (Label.POSITIVE, Label.NEGATIVE):
        console.tokens_table(top_token_frame(model, label, max_items), title=f"Top {label.name.lower()} tokens")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    console = SentimentConsole(quiet=args.quiet)
    console.banner()

    model, _summary = train_file(args.train, console=console)
    _show_top_tokens(console, model, args.top)

    predict_file(args.test, args.results, model, console=console)

    report = evaluate_files(args.truth, args.results, args.accuracy, console=console)
    if report is not None:
        console.metrics_table(report.metrics(), title="Evaluation")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
