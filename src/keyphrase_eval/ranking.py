"""
Ordering of scored terms.

IEEE floats are only partially ordered, so ranking uses an explicit
comparator in which NaN is the lowest value and therefore sorts last.
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import Mapping, NamedTuple


class RankedTerm(NamedTuple):
    term: str
    score: float


def compare_scores(a: float, b: float) -> int:
    """
    Descending-order comparator over floats with NaN as the minimum.

    Returns a negative number when ``a`` should come before ``b``.
    """
    a_nan = math.isnan(a)
    b_nan = math.isnan(b)
    if a_nan and b_nan:
        return 0
    if a_nan:
        return 1
    if b_nan:
        return -1
    if a > b:
        return -1
    if a < b:
        return 1
    return 0


_score_key = cmp_to_key(compare_scores)


def rank_terms(scores: Mapping[str, float], top_k: int | None = None) -> list[RankedTerm]:
    """
    Orders a term -> score mapping by descending score.

    Ties keep the mapping's iteration order (the sort is stable).

    Args:
        scores: Term scores, e.g. from ``TfidfModel.rank_tokens``.
        top_k: Number of leading terms to keep (None for all).

    Returns:
        Ranked terms, NaN scores last.
    """
    if top_k is not None and top_k < 0:
        raise ValueError(f"top_k must be non-negative, got {top_k}")
    ranked = sorted(
        (RankedTerm(term, float(score)) for term, score in scores.items()),
        key=lambda item: _score_key(item.score),
    )
    if top_k is not None:
        ranked = ranked[:top_k]
    return ranked
