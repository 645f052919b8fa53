import math
import random

import pytest

from keyphrase_eval.ranking import RankedTerm, compare_scores, rank_terms

NAN = float("nan")


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (2.0, 1.0, -1),
        (1.0, 2.0, 1),
        (1.0, 1.0, 0),
        (NAN, 1.0, 1),
        (1.0, NAN, -1),
        (NAN, -math.inf, 1),
        (NAN, NAN, 0),
    ],
)
def test_compare_scores(a, b, expected):
    assert compare_scores(a, b) == expected


def test_rank_terms_orders_descending():
    ranked = rank_terms({"low": 0.1, "high": 0.9, "mid": 0.5})

    assert ranked == [
        RankedTerm("high", 0.9),
        RankedTerm("mid", 0.5),
        RankedTerm("low", 0.1),
    ]


def test_nan_scores_sort_after_all_numbers():
    scores = {f"t{i}": v for i, v in enumerate([0.3, NAN, -1.0, 2.0, NAN, 0.0])}
    items = list(scores.items())
    random.Random(7).shuffle(items)

    ranked = rank_terms(dict(items))
    values = [item.score for item in ranked]

    assert len(ranked) == len(scores)
    assert all(math.isnan(v) for v in values[-2:])
    head = values[:-2]
    assert head == sorted(head, reverse=True)


def test_ties_keep_input_order():
    ranked = rank_terms({"b": 1.0, "a": 1.0, "c": 2.0})
    assert [item.term for item in ranked] == ["c", "b", "a"]


def test_top_k_truncates():
    ranked = rank_terms({"a": 3.0, "b": 2.0, "c": 1.0}, top_k=2)
    assert [item.term for item in ranked] == ["a", "b"]


def test_negative_top_k_rejected():
    with pytest.raises(ValueError):
        rank_terms({"a": 1.0}, top_k=-1)
