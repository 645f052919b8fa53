"""
TF-IDF model fitted over a corpus of token-stream documents.

The model has two phases. ``fit`` makes one pass over the corpus to collect
document frequencies and the document count; afterwards the statistics are
frozen and ``rank_tokens`` scores any token stream against them.

    score(t) = tf(t) * idf(t)

    tf(t)  = count(t) / len(tokens)      (normalize_tf=True, default)
           = count(t)                    (normalize_tf=False)
    idf(t) = idf_func(df(t), N)          (default: log(N / df))

Terms that never occur in the fitted corpus are scored with df = 1.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterable, Mapping

import numpy as np

from keyphrase_eval.corpus import Corpus
from keyphrase_eval.documents import Token
from keyphrase_eval.errors import AlreadyFittedError, EmptyCorpusError, NotFittedError

if TYPE_CHECKING:
    from numpy.typing import NDArray

IdfFunc = Callable[["NDArray[np.float64]", int], "NDArray[np.float64]"]


# =============================================================================
# IDF variants
# =============================================================================


def idf_log(df: NDArray[np.float64], N: int) -> NDArray[np.float64]:
    """Classic IDF: log(N / df). Zero for terms present in every document."""
    return np.log(N / df)


def idf_smooth(df: NDArray[np.float64], N: int) -> NDArray[np.float64]:
    """Smoothed IDF: log(1 + N / df). Strictly positive."""
    return np.log1p(N / df)


IDF_VARIANTS: dict[str, IdfFunc] = {
    "log": idf_log,
    "smooth": idf_smooth,
}


# =============================================================================
# Model
# =============================================================================


class TfidfModel:
    """
    TF-IDF term scorer.

    Args:
        corpus (Corpus): Documents to fit document frequencies on.
        idf_func (IdfFunc): Vectorized IDF function of (df array, N).
        normalize_tf (bool): Divide raw term counts by the token stream length.
    """

    def __init__(
        self,
        corpus: Corpus,
        idf_func: IdfFunc = idf_log,
        normalize_tf: bool = True,
    ):
        self.corpus = corpus
        self.idf_func = idf_func
        self.normalize_tf = normalize_tf
        self._N = 0
        self._df: Mapping[str, int] | None = None
        self._idf: Mapping[str, float] | None = None
        self._unseen_idf = 0.0

    @property
    def is_fitted(self) -> bool:
        return self._df is not None

    @property
    def document_count(self) -> int:
        self._check_fitted()
        return self._N

    @property
    def document_frequency(self) -> Mapping[str, int]:
        """Read-only mapping of term -> number of corpus documents containing it."""
        self._check_fitted()
        return self._df

    @property
    def vocabulary_size(self) -> int:
        return len(self.document_frequency)

    def _check_fitted(self) -> None:
        if self._df is None:
            raise NotFittedError("TfidfModel must be fitted before scoring")

    def fit(self) -> "TfidfModel":
        """Computes document frequency for every corpus term and freezes the statistics."""
        if self.is_fitted:
            raise AlreadyFittedError("TfidfModel statistics are already fitted")
        N = len(self.corpus)
        if N == 0:
            raise EmptyCorpusError("cannot fit a TF-IDF model on an empty corpus")

        document_frequency: Counter[str] = Counter(
            term
            for doc in self.corpus
            for term in {token.get_term() for token in doc.get_content()}
        )
        terms = list(document_frequency.keys())
        df_array = np.array([document_frequency[t] for t in terms], dtype=np.float64)
        idf_array = self.idf_func(df_array, N)

        self._N = N
        self._df = MappingProxyType(dict(document_frequency))
        self._idf = MappingProxyType(
            {term: float(value) for term, value in zip(terms, idf_array)}
        )
        self._unseen_idf = float(self.idf_func(np.ones(1, dtype=np.float64), N)[0])
        return self

    def fit_transform(self) -> list[dict[str, float]]:
        """Fits the model, then scores every corpus document in order."""
        self.fit()
        return [self.rank_tokens(doc.get_content()) for doc in self.corpus]

    def idf(self, term: str) -> float:
        self._check_fitted()
        return self._idf.get(term, self._unseen_idf)

    def rank_tokens(self, tokens: Iterable[Token]) -> dict[str, float]:
        """
        Scores each distinct term of a token stream.

        The stream need not belong to the fitted corpus; term frequencies are
        taken from the stream itself. Returns one entry per distinct term, in
        first-occurrence order.
        """
        self._check_fitted()
        counts = Counter(token.get_term() for token in tokens)
        if not counts:
            return {}

        terms = list(counts.keys())
        tf = np.array([counts[t] for t in terms], dtype=np.float64)
        if self.normalize_tf:
            tf /= tf.sum()
        idf = np.array([self.idf(t) for t in terms], dtype=np.float64)
        scores = tf * idf
        return {term: float(score) for term, score in zip(terms, scores)}
