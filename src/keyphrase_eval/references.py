"""Reference (gold) keyword sets, keyed by document base name."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from keyphrase_eval.errors import DocumentFormatError


def flatten_keyphrases(groups: Iterable[Iterable[str]]) -> frozenset[str]:
    """
    Flattens keyphrase groups into a set of single-word tokens.

    Each group holds synonymous phrases; every phrase is split on whitespace,
    so "network security" contributes "network" and "security" independently.
    No case folding or stemming is applied.
    """
    return frozenset(word for group in groups for phrase in group for word in phrase.split())


def parse_reference_keywords(obj: Any) -> dict[str, frozenset[str]]:
    """Maps each document key of a decoded reference object to its flattened token set."""
    if not isinstance(obj, dict):
        raise DocumentFormatError(f"expected a JSON object, got {type(obj).__name__}")

    references = {}
    for key, groups in obj.items():
        if not isinstance(groups, list) or not all(
            isinstance(group, list) and all(isinstance(p, str) for p in group)
            for group in groups
        ):
            raise DocumentFormatError(
                f"reference entry {key!r} must be a list of lists of strings"
            )
        references[key] = flatten_keyphrases(groups)
    return references


def load_reference_keywords(path: str | Path) -> dict[str, frozenset[str]]:
    """Reads a reference keyword JSON file (``{name: [[phrase, ...], ...]}``)."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        try:
            obj = json.load(f)
        except UnicodeDecodeError as e:
            raise DocumentFormatError(f"{path}: invalid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise DocumentFormatError(f"{path}: invalid JSON: {e}") from e
    try:
        return parse_reference_keywords(obj)
    except DocumentFormatError as e:
        raise DocumentFormatError(f"{path}: {e}") from e
