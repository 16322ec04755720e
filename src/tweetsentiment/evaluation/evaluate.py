# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from sklearn.metrics import confusion_matrix, f1_score, precision_score, recall_score

from ..console import SentimentConsole, quiet_console
from ..env import default_delimiter
from ..errors import MalformedRecordError, ResourceOpenError
from ..features import leading_field, parse_code, second_field
from ..files import open_text
from ..schemas import EvaluationReport, Label


def _binary(codes: list[int]) -> list[int]:
    return [1 if code == Label.POSITIVE else 0 for code in codes]


def _fill_metrics(report: EvaluationReport, y_true: list[int], y_pred: list[int]) -> None:
    if not y_true:
        return
    true_bin = _binary(y_true)
    pred_bin = _binary(y_pred)
    tn, fp, fn, tp = confusion_matrix(true_bin, pred_bin, labels=[0, 1]).ravel()
    report.precision = float(precision_score(true_bin, pred_bin, zero_division=0))
    report.recall = float(recall_score(true_bin, pred_bin, zero_division=0))
    report.f1 = float(f1_score(true_bin, pred_bin, zero_division=0))
    report.tn, report.fp, report.fn, report.tp = int(tn), int(fp), int(fn), int(tp)


def evaluate_report(
    ground_truth: Iterable[str],
    predictions: Iterable[str],
    *,
    delimiter: str | None = None,
    prediction_header: bool = False,
    check_ids: bool = False,
    console: SentimentConsole | None = None,
) -> EvaluationReport:
    """Compare the two streams line by line and stop at the shorter one.

    Pairs are matched by position, not by identifier. ``check_ids`` only
    counts and reports identifier mismatches; it never changes the accuracy.
    """
    delimiter = delimiter or default_delimiter()
    console = console or quiet_console()
    report = EvaluationReport()
    y_true: list[int] = []
    y_pred: list[int] = []

    truth_rows = iter(ground_truth)
    pred_rows = iter(predictions)
    next(truth_rows, None)
    if prediction_header:
        next(pred_rows, None)

    for pair_no, (truth_line, pred_line) in enumerate(zip(truth_rows, pred_rows), start=1):
        try:
            actual = parse_code(leading_field(truth_line, delimiter))
            predicted = parse_code(leading_field(pred_line, delimiter))
        except MalformedRecordError as exc:
            report.skipped += 1
            console.error(f"pair {pair_no}: invalid line in ground truth or results ({exc}), skipped")
            continue

        if check_ids:
            truth_id = second_field(truth_line, delimiter)
            pred_id = second_field(pred_line, delimiter)
            if truth_id != pred_id:
                report.mismatched_ids += 1
                console.warn(f"pair {pair_no}: identifier {truth_id!r} paired with prediction for {pred_id!r}")

        y_true.append(actual)
        y_pred.append(predicted)
        if actual == predicted:
            report.correct += 1
        report.total += 1

    report.accuracy = report.correct / report.total if report.total > 0 else 0.0
    _fill_metrics(report, y_true, y_pred)
    return report


def evaluate(
    ground_truth: Iterable[str],
    predictions: Iterable[str],
    *,
    delimiter: str | None = None,
    prediction_header: bool = False,
    console: SentimentConsole | None = None,
) -> float:
    return evaluate_report(
        ground_truth,
        predictions,
        delimiter=delimiter,
        prediction_header=prediction_header,
        console=console,
    ).accuracy


def evaluate_files(
    truth_path: Path | str,
    results_path: Path | str,
    accuracy_path: Path | str,
    *,
    delimiter: str | None = None,
    check_ids: bool = False,
    console: SentimentConsole | None = None,
) -> EvaluationReport | None:
    """Score ``results_path`` against ``truth_path`` and write the accuracy line.

    Returns ``None`` without writing when any of the three files cannot be opened.
    """
    console = console or quiet_console()
    try:
        with open_text(truth_path) as truth, open_text(results_path) as results:
            report = evaluate_report(
                truth,
                results,
                delimiter=delimiter,
                check_ids=check_ids,
                console=console,
            )
        with open_text(accuracy_path, "w") as out:
            out.write(f"{report.accuracy}\n")
    except ResourceOpenError as exc:
        console.error(f"error opening ground truth, results or accuracy file: {exc}")
        return None

    console.info(f"Evaluation completed. Accuracy: {report.accuracy}")
    if report.mismatched_ids:
        console.warn(f"{report.mismatched_ids} prediction lines did not line up with ground-truth identifiers")
    return report
