"""
Scores a fitted TF-IDF model's keyword rankings against reference keywords.

For each document the full ranking (or its top-k prefix) is matched against
the document's reference token set, giving per-document precision, recall
and F1; the corpus result is the arithmetic mean of each measure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from tqdm import tqdm

from keyphrase_eval.corpus import Corpus
from keyphrase_eval.documents import Document
from keyphrase_eval.errors import MissingReferenceError, UndefinedMeasureError
from keyphrase_eval.metrics import MeasureHolder, mean, relevant_terms
from keyphrase_eval.ranking import RankedTerm, rank_terms
from keyphrase_eval.tfidf import TfidfModel


def document_key(filename: str) -> str:
    """Reference lookup key: the file name with every ".json" substring removed."""
    return filename.replace(".json", "")


@dataclass(frozen=True)
class EvaluationResult:
    measures: tuple[tuple[str, MeasureHolder], ...]
    precision: float
    recall: float
    f1: float

    @classmethod
    def aggregate(cls, measures: list[tuple[str, MeasureHolder]]) -> "EvaluationResult":
        values = [m for _, m in measures]
        return cls(
            measures=tuple(measures),
            precision=mean(m.precision for m in values),
            recall=mean(m.recall for m in values),
            f1=mean(m.f1 for m in values),
        )

    def summary_line(self) -> str:
        return f"precision: {self.precision} recall {self.recall} f1 {self.f1}"

    def to_dict(self) -> dict:
        return {
            "precision": self.precision,
            "recall": self.recall,
            "f1": self.f1,
            "documents_evaluated": len(self.measures),
            "per_document": [{"document": key, **m.to_dict()} for key, m in self.measures],
        }


def score_ranking(ranked: list[RankedTerm], reference: frozenset[str]) -> MeasureHolder:
    """Precision/recall/F1 of one ranking against one reference set."""
    relevant = relevant_terms([item.term for item in ranked], reference)
    return MeasureHolder.from_counts(len(relevant), len(ranked), len(reference))


def evaluate_document(
    model: TfidfModel,
    document: Document,
    reference: frozenset[str],
    top_k: int | None = None,
) -> MeasureHolder:
    ranked = rank_terms(model.rank_tokens(document.get_content()), top_k=top_k)
    return score_ranking(ranked, reference)


def evaluate_corpus(
    model: TfidfModel,
    corpus: Corpus,
    references: Mapping[str, frozenset[str]],
    top_k: int | None = None,
    show_progress: bool = False,
) -> EvaluationResult:
    """
    Evaluates every corpus document against its reference keywords.

    Args:
        model: A fitted TfidfModel.
        corpus: Documents to evaluate, with source names.
        references: Document key -> reference token set.
        top_k: Truncate each ranking to this many terms (None for the full ranking).
        show_progress: Display a tqdm progress bar.

    Returns:
        Per-document measures and their means.

    Raises:
        MissingReferenceError: A document has no reference entry. Nothing is
            aggregated; the run must fail rather than skip the document.
        UndefinedMeasureError: A document has an empty ranking or an empty
            reference set; the message names the document key.
    """
    measures: list[tuple[str, MeasureHolder]] = []
    for name, document in tqdm(
        list(corpus.items()),
        desc="Evaluating",
        unit="doc",
        disable=not show_progress,
    ):
        key = document_key(name)
        reference = references.get(key)
        if reference is None:
            raise MissingReferenceError(key)
        try:
            measures.append((key, evaluate_document(model, document, reference, top_k=top_k)))
        except UndefinedMeasureError as e:
            raise UndefinedMeasureError(f"{key}: {e}") from e
    return EvaluationResult.aggregate(measures)
