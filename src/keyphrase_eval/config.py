"""
Run configuration.

Defaults can be overridden via environment variables, and those in turn by
command-line flags:
    KEYPHRASE_EVAL_CORPUS_DIR=dataset/testJSON
    KEYPHRASE_EVAL_REFERENCES=dataset/references/test.uncontr.json
    KEYPHRASE_EVAL_IDF=log            # log or smooth
    KEYPHRASE_EVAL_NORMALIZE_TF=1     # 0 for raw term counts
    KEYPHRASE_EVAL_TOP_K=0            # 0 = full ranking
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from keyphrase_eval.tfidf import IDF_VARIANTS

DEFAULT_CORPUS_DIR = "dataset/testJSON"
DEFAULT_REFERENCES = "dataset/references/test.uncontr.json"
DEFAULT_IDF = "log"


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {_TRUE + _FALSE}, got {value!r}")


def _parse_top_k(value: str) -> int | None:
    try:
        return int(value) or None
    except ValueError:
        raise ValueError(f"KEYPHRASE_EVAL_TOP_K must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class EvalConfig:
    corpus_dir: Path = Path(DEFAULT_CORPUS_DIR)
    references: Path = Path(DEFAULT_REFERENCES)
    idf: str = DEFAULT_IDF
    normalize_tf: bool = True
    top_k: int | None = None

    def __post_init__(self):
        if self.idf not in IDF_VARIANTS:
            raise ValueError(
                f"unknown idf variant {self.idf!r}; expected one of {sorted(IDF_VARIANTS)}"
            )
        if self.top_k is not None and self.top_k <= 0:
            raise ValueError(f"top_k must be positive, got {self.top_k}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "EvalConfig":
        """
        Builds a config from environment variables.

        Fields passed in ``overrides`` win, and their environment variables are
        not read at all.
        """
        env = os.environ if environ is None else environ
        parsers = {
            "corpus_dir": ("KEYPHRASE_EVAL_CORPUS_DIR", DEFAULT_CORPUS_DIR, Path),
            "references": ("KEYPHRASE_EVAL_REFERENCES", DEFAULT_REFERENCES, Path),
            "idf": ("KEYPHRASE_EVAL_IDF", DEFAULT_IDF, str),
            "normalize_tf": (
                "KEYPHRASE_EVAL_NORMALIZE_TF",
                "1",
                lambda v: _parse_bool("KEYPHRASE_EVAL_NORMALIZE_TF", v),
            ),
            "top_k": ("KEYPHRASE_EVAL_TOP_K", "0", _parse_top_k),
        }
        fields = dict(overrides)
        for field, (name, default, parse) in parsers.items():
            if field not in fields:
                fields[field] = parse(env.get(name, default))
        return cls(**fields)
