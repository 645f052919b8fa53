"""Exceptions raised by the keyphrase evaluation pipeline."""


class KeyphraseEvalError(Exception):
    """Base class for all pipeline errors."""


class EmptyCorpusError(KeyphraseEvalError, ValueError):
    """Raised when a TF-IDF model is fitted on a corpus with no documents."""


class NotFittedError(KeyphraseEvalError, RuntimeError):
    """Raised when a TF-IDF model is queried before ``fit`` has run."""


class DocumentFormatError(KeyphraseEvalError, ValueError):
    """Raised when a document or reference file does not match the expected JSON layout."""


class MissingReferenceError(KeyphraseEvalError, LookupError):
    """Raised when a document has no entry in the reference keyword mapping."""

    def __init__(self, key: str):
        super().__init__(f"found no keywords for document {key!r}")
        self.key = key


class UndefinedMeasureError(KeyphraseEvalError, ValueError):
    """Raised when a measure would divide by zero (empty ranking, reference set, or mean)."""


class AlreadyFittedError(KeyphraseEvalError, RuntimeError):
    """Raised when ``fit`` is called on a model whose statistics are already frozen."""
