"""Keyword extraction evaluation: TF-IDF term ranking scored against reference keyphrases."""

from keyphrase_eval.corpus import Corpus, iter_document_files, load_document
from keyphrase_eval.documents import Document, HulthDocument, HulthToken, Sentence, Token
from keyphrase_eval.errors import (
    AlreadyFittedError,
    DocumentFormatError,
    EmptyCorpusError,
    KeyphraseEvalError,
    MissingReferenceError,
    NotFittedError,
    UndefinedMeasureError,
)
from keyphrase_eval.evaluator import (
    EvaluationResult,
    document_key,
    evaluate_corpus,
    evaluate_document,
    score_ranking,
)
from keyphrase_eval.metrics import MeasureHolder, f1_score, mean, precision, recall
from keyphrase_eval.ranking import RankedTerm, compare_scores, rank_terms
from keyphrase_eval.references import (
    flatten_keyphrases,
    load_reference_keywords,
    parse_reference_keywords,
)
from keyphrase_eval.tfidf import IDF_VARIANTS, TfidfModel, idf_log, idf_smooth

__all__ = [
    "Corpus",
    "iter_document_files",
    "load_document",
    "Document",
    "HulthDocument",
    "HulthToken",
    "Sentence",
    "Token",
    "AlreadyFittedError",
    "DocumentFormatError",
    "EmptyCorpusError",
    "KeyphraseEvalError",
    "MissingReferenceError",
    "NotFittedError",
    "UndefinedMeasureError",
    "EvaluationResult",
    "document_key",
    "evaluate_corpus",
    "evaluate_document",
    "score_ranking",
    "MeasureHolder",
    "f1_score",
    "mean",
    "precision",
    "recall",
    "RankedTerm",
    "compare_scores",
    "rank_terms",
    "flatten_keyphrases",
    "load_reference_keywords",
    "parse_reference_keywords",
    "IDF_VARIANTS",
    "TfidfModel",
    "idf_log",
    "idf_smooth",
]
