from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from keyphrase_eval.errors import UndefinedMeasureError


def relevant_terms(ranked: Sequence[str], reference: frozenset[str] | set[str]) -> list[str]:
    """
    Selects the ranked terms found in the reference set.

    Args:
        ranked: Ranked term surface forms.
        reference: Reference keyword tokens.

    Returns:
        Matching terms, in ranking order.
    """
    return [term for term in ranked if term in reference]


def precision(relevant: int, ranked: int) -> float:
    """
    Computes precision over the ranked terms.

    Args:
        relevant: Number of ranked terms found in the reference set.
        ranked: Number of ranked terms.

    Returns:
        relevant / ranked.
    """
    if ranked == 0:
        raise UndefinedMeasureError("precision is undefined for an empty ranking")
    return relevant / ranked


def recall(relevant: int, reference: int) -> float:
    """
    Computes recall against the reference set.

    Args:
        relevant: Number of ranked terms found in the reference set.
        reference: Size of the reference set.

    Returns:
        relevant / reference.
    """
    if reference == 0:
        raise UndefinedMeasureError("recall is undefined for an empty reference set")
    return relevant / reference


def f1_score(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall; 0.0 if either is zero."""
    if precision == 0.0 or recall == 0.0:
        return 0.0
    return 2.0 * (precision * recall) / (precision + recall)


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean. Raises UndefinedMeasureError for an empty input."""
    arr = np.fromiter(values, dtype=np.float64)
    if arr.size == 0:
        raise UndefinedMeasureError("mean of an empty list is undefined")
    return float(np.mean(arr))


@dataclass(frozen=True)
class MeasureHolder:
    precision: float
    recall: float
    f1: float

    @classmethod
    def from_counts(cls, relevant: int, ranked: int, reference: int) -> "MeasureHolder":
        p = precision(relevant, ranked)
        r = recall(relevant, reference)
        return cls(p, r, f1_score(p, r))

    def to_dict(self) -> dict[str, float]:
        return {"precision": self.precision, "recall": self.recall, "f1": self.f1}
