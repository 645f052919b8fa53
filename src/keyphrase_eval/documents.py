"""
Token and document abstractions used by the TF-IDF model and the evaluator.

Any document format can be scored as long as it satisfies the ``Document``
protocol: an identifier and a flat, ordered stream of ``Token`` objects.
The Hulth JSON format (CoreNLP-style sentences of tokens) is provided as the
concrete implementation used by the command-line evaluator.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from keyphrase_eval.errors import DocumentFormatError


# =============================================================================
# Protocols (duck typing)
# =============================================================================


@runtime_checkable
class Token(Protocol):
    """A single lexical unit of a document."""

    def get_term(self) -> str: ...

    def get_offset_begin(self) -> int: ...

    def get_pos(self) -> str | None: ...


@runtime_checkable
class Document(Protocol):
    """A scorable document: an identifier plus its flattened token stream."""

    def get_id(self) -> str: ...

    def get_content(self) -> list[Token]: ...


# =============================================================================
# Hulth JSON format
# =============================================================================


def _require(obj: Any, field: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(obj, dict):
        raise DocumentFormatError(f"expected a JSON object, got {type(obj).__name__}")
    if field not in obj:
        raise DocumentFormatError(f"missing field {field!r}")
    value = obj[field]
    # bool is an int subclass; offsets must be real integers
    if isinstance(value, bool) or not isinstance(value, kind):
        raise DocumentFormatError(
            f"field {field!r} has type {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class HulthToken:
    word: str
    lemma: str
    offset_begin: int
    offset_end: int
    pos: str

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "HulthToken":
        offset_begin = _require(obj, "offsetBegin", int)
        if offset_begin < 0:
            raise DocumentFormatError(f"negative offsetBegin {offset_begin}")
        return cls(
            word=_require(obj, "word", str),
            lemma=_require(obj, "lemma", str),
            offset_begin=offset_begin,
            offset_end=_require(obj, "offsetEnd", int),
            pos=_require(obj, "pos", str),
        )

    def get_term(self) -> str:
        return self.word

    def get_offset_begin(self) -> int:
        return self.offset_begin

    def get_pos(self) -> str | None:
        return self.pos or None


@dataclass(frozen=True)
class Sentence:
    tokens: tuple[HulthToken, ...]

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> "Sentence":
        return cls(tuple(HulthToken.from_dict(t) for t in _require(obj, "tokens", list)))


@dataclass(frozen=True)
class HulthDocument:
    """
    A document in the Hulth 2003 JSON layout.

    The identifier is left empty: the evaluator matches documents to their
    reference keywords by source file name instead.
    """

    sentences: tuple[Sentence, ...]
    doc_id: str = ""

    @classmethod
    def from_dict(cls, obj: dict[str, Any], doc_id: str = "") -> "HulthDocument":
        sentences = _require(obj, "sentences", list)
        return cls(tuple(Sentence.from_dict(s) for s in sentences), doc_id)

    @classmethod
    def from_json(cls, text: str | bytes, doc_id: str = "") -> "HulthDocument":
        try:
            obj = json.loads(text)
        except UnicodeDecodeError as e:
            raise DocumentFormatError(f"invalid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"invalid JSON: {e}") from e
        return cls.from_dict(obj, doc_id)

    def get_id(self) -> str:
        return self.doc_id

    def get_content(self) -> list[HulthToken]:
        """All tokens across all sentences, in source order."""
        return [token for sentence in self.sentences for token in sentence.tokens]
