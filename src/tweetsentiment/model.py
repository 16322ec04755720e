# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Positive and negative token frequency tables.

Training goes through :class:`FrequencyModelBuilder`, the only type with a
mutator. ``freeze()`` hands out a :class:`FrequencyModel`, which can be
queried but not changed, and the builder refuses further increments.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

import pandas as pd

from .schemas import Label


class FrequencyModel:
    __slots__ = ("_positive", "_negative", "_positive_total", "_negative_total")

    def __init__(
        self,
        positive: Mapping[str, int] | None = None,
        negative: Mapping[str, int] | None = None,
        *,
        positive_total: int | None = None,
        negative_total: int | None = None,
    ) -> None:
        pos = {token: int(count) for token, count in (positive or {}).items() if int(count) > 0}
        neg = {token: int(count) for token, count in (negative or {}).items() if int(count) > 0}
        self._positive: Mapping[str, int] = MappingProxyType(pos)
        self._negative: Mapping[str, int] = MappingProxyType(neg)
        self._positive_total = sum(pos.values()) if positive_total is None else int(positive_total)
        self._negative_total = sum(neg.values()) if negative_total is None else int(negative_total)

    @property
    def positive_counts(self) -> Mapping[str, int]:
        return self._positive

    @property
    def negative_counts(self) -> Mapping[str, int]:
        return self._negative

    @property
    def positive_token_count(self) -> int:
        return self._positive_total

    @property
    def negative_token_count(self) -> int:
        return self._negative_total

    @property
    def vocabulary_size(self) -> int:
        return len(self._positive.keys() | self._negative.keys())

    @property
    def is_empty(self) -> bool:
        return not self._positive and not self._negative

    def positive_score(self, token: str) -> int:
        return self._positive.get(token, 0)

    def negative_score(self, token: str) -> int:
        return self._negative.get(token, 0)

    def to_frame(self) -> pd.DataFrame:
        tokens = sorted(self._positive.keys() | self._negative.keys())
        frame = pd.DataFrame(
            {
                "token": tokens,
                "positive": [self.positive_score(token) for token in tokens],
                "negative": [self.negative_score(token) for token in tokens],
            },
            columns=["token", "positive", "negative"],
        )
        return frame.astype({"token": str, "positive": int, "negative": int})

    def __repr__(self) -> str:
        return (
            f"FrequencyModel(positive={len(self._positive)} tokens/{self._positive_total}, "
            f"negative={len(self._negative)} tokens/{self._negative_total})"
        )


class FrequencyModelBuilder:
    def __init__(self) -> None:
        self._positive: Counter[str] = Counter()
        self._negative: Counter[str] = Counter()
        self._positive_total = 0
        self._negative_total = 0
        self._frozen: FrequencyModel | None = None

    def increment(self, label: Label, token: str) -> None:
        if self._frozen is not None:
            raise RuntimeError("frequency model is frozen")
        if label is Label.POSITIVE:
            self._positive[token] += 1
            self._positive_total += 1
        else:
            self._negative[token] += 1
            self._negative_total += 1

    def freeze(self) -> FrequencyModel:
        if self._frozen is None:
            self._frozen = FrequencyModel(
                self._positive,
                self._negative,
                positive_total=self._positive_total,
                negative_total=self._negative_total,
            )
        return self._frozen
