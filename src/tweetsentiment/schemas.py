# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Label(IntEnum):
    NEGATIVE = 0
    POSITIVE = 4

    @classmethod
    def from_code(cls, code: int) -> Label | None:
        """Map a corpus code to a label, or ``None`` for any other class."""
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class PredictionRecord:
    identifier: str
    label: Label

    @property
    def code(self) -> int:
        return int(self.label)

    def to_line(self, delimiter: str = ",") -> str:
        return f"{self.code}{delimiter} {self.identifier}"


@dataclass(slots=True)
class TrainingSummary:
    rows_read: int = 0
    rows_counted: int = 0
    rows_malformed: int = 0
    rows_unknown_class: int = 0
    positive_tokens: int = 0
    negative_tokens: int = 0
    positive_vocabulary: int = 0
    negative_vocabulary: int = 0


@dataclass(slots=True)
class EvaluationReport:
    accuracy: float = 0.0
    correct: int = 0
    total: int = 0
    skipped: int = 0
    mismatched_ids: int = 0
    precision: float = 0.0
    recall: float = 0.0
    f1: float = 0.0
    tn: int = 0
    fp: int = 0
    fn: int = 0
    tp: int = 0

    def metrics(self) -> dict[str, float]:
        return {
            "accuracy": float(self.accuracy),
            "precision": float(self.precision),
            "recall": float(self.recall),
            "f1": float(self.f1),
            "correct": float(self.correct),
            "total": float(self.total),
            "skipped": float(self.skipped),
            "tn": float(self.tn),
            "fp": float(self.fp),
            "fn": float(self.fn),
            "tp": float(self.tp),
        }
