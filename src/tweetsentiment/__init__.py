# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Word-frequency tweet sentiment classifier."""

__version__ = "0.1.0"

from .evaluation.evaluate import evaluate, evaluate_report
from .features import parse_record, tokenize
from .inference.predictor import classify, predict
from .model import FrequencyModel, FrequencyModelBuilder
from .schemas import EvaluationReport, Label, PredictionRecord, TrainingSummary
from .training.trainer import train, train_with_summary

__all__ = [
    "EvaluationReport",
    "FrequencyModel",
    "FrequencyModelBuilder",
    "Label",
    "PredictionRecord",
    "TrainingSummary",
    "classify",
    "evaluate",
    "evaluate_report",
    "parse_record",
    "predict",
    "tokenize",
    "train",
    "train_with_summary",
]
