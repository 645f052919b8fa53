import pytest

from keyphrase_eval.corpus import Corpus
from keyphrase_eval.errors import MissingReferenceError, NotFittedError, UndefinedMeasureError
from keyphrase_eval.evaluator import (
    EvaluationResult,
    document_key,
    evaluate_corpus,
    evaluate_document,
    score_ranking,
)
from keyphrase_eval.metrics import MeasureHolder
from keyphrase_eval.ranking import RankedTerm
from keyphrase_eval.tfidf import TfidfModel

from conftest import make_document


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("123.json", "123"),
        ("123", "123"),
        ("a.json.json", "a"),
        ("a.jsonl", "al"),
        ("x.json.bak", "x.bak"),
    ],
)
def test_document_key_removes_every_json_substring(filename, expected):
    assert document_key(filename) == expected


def test_score_ranking_full_ranking_example():
    ranked = [RankedTerm("network", 0.9), RankedTerm("cloud", 0.5), RankedTerm("security", 0.1)]

    measures = score_ranking(ranked, frozenset({"network", "security"}))

    assert measures.precision == pytest.approx(2 / 3)
    assert measures.recall == pytest.approx(1.0)
    assert measures.f1 == pytest.approx(0.8)


def test_score_ranking_no_matches():
    measures = score_ranking([RankedTerm("cloud", 1.0)], frozenset({"network"}))
    assert measures == MeasureHolder(0.0, 0.0, 0.0)


def test_empty_reference_set_is_undefined():
    with pytest.raises(UndefinedMeasureError):
        score_ranking([RankedTerm("cloud", 1.0)], frozenset())


def test_evaluate_document_uses_full_ranking():
    corpus = Corpus([make_document("network cloud security"), make_document("other words")])
    model = TfidfModel(corpus).fit()

    measures = evaluate_document(model, corpus[0], frozenset({"network", "security"}))

    assert measures.precision == pytest.approx(2 / 3)
    assert measures.recall == pytest.approx(1.0)


def test_evaluate_document_top_k():
    corpus = Corpus([make_document("network network cloud"), make_document("cloud")])
    model = TfidfModel(corpus).fit()

    measures = evaluate_document(model, corpus[0], frozenset({"network", "cloud"}), top_k=1)

    assert measures.precision == 1.0
    assert measures.recall == pytest.approx(0.5)


def test_evaluate_corpus_averages_measures(write_corpus):
    directory = write_corpus(
        {
            "d1.json": "network cloud security",
            "d2.json": "apple banana",
        }
    )
    corpus = Corpus.from_directory(directory)
    model = TfidfModel(corpus).fit()
    references = {
        "d1": frozenset({"network", "security"}),
        "d2": frozenset({"cherry"}),
    }

    result = evaluate_corpus(model, corpus, references)

    assert [key for key, _ in result.measures] == ["d1", "d2"]
    assert result.precision == pytest.approx((2 / 3 + 0.0) / 2)
    assert result.recall == pytest.approx(0.5)
    assert result.f1 == pytest.approx(0.4)


def test_missing_reference_fails_the_run(write_corpus):
    corpus = Corpus.from_directory(write_corpus({"known.json": "a b", "unknown.json": "c d"}))
    model = TfidfModel(corpus).fit()

    with pytest.raises(MissingReferenceError) as exc_info:
        evaluate_corpus(model, corpus, {"known": frozenset({"a"})})

    assert exc_info.value.key == "unknown"


def test_evaluate_requires_fitted_model():
    corpus = Corpus([make_document("a")], names=["a.json"])
    with pytest.raises(NotFittedError):
        evaluate_corpus(TfidfModel(corpus), corpus, {"a": frozenset({"a"})})


def test_result_rendering():
    result = EvaluationResult.aggregate([("d", MeasureHolder(0.5, 1.0, 2 / 3))])

    assert result.summary_line() == f"precision: 0.5 recall 1.0 f1 {2 / 3}"
    assert result.to_dict()["per_document"] == [
        {"document": "d", "precision": 0.5, "recall": 1.0, "f1": 2 / 3}
    ]


def test_aggregate_of_no_documents_is_undefined():
    with pytest.raises(UndefinedMeasureError):
        EvaluationResult.aggregate([])


@pytest.mark.parametrize(
    "files, references",
    [
        ({"d1.json": "a b", "d2.json": "c d"}, {"d1": frozenset({"a"}), "d2": frozenset()}),
        ({"d1.json": "a b", "d2.json": []}, {"d1": frozenset({"a"}), "d2": frozenset({"c"})}),
    ],
)
def test_undefined_measure_names_the_document(write_corpus, files, references):
    corpus = Corpus.from_directory(write_corpus(files))
    model = TfidfModel(corpus).fit()

    with pytest.raises(UndefinedMeasureError, match="^d2: "):
        evaluate_corpus(model, corpus, references)


def test_result_requires_all_fields():
    with pytest.raises(TypeError):
        EvaluationResult()
