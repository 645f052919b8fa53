"""
Command-line keyword extraction evaluator.

Fits a TF-IDF model on every document in the corpus directory, ranks each
document's terms, and reports mean precision/recall/F1 against the reference
keyphrases.

Run with:
    uv run keyphrase-eval --corpus-dir dataset/testJSON \
        --references dataset/references/test.uncontr.json

    # Smoothed IDF, raw term counts, judge only the top 10 terms
    uv run keyphrase-eval --idf smooth --raw-tf --top-k 10 --save results.json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from keyphrase_eval.config import EvalConfig
from keyphrase_eval.corpus import Corpus
from keyphrase_eval.errors import KeyphraseEvalError, MissingReferenceError
from keyphrase_eval.evaluator import EvaluationResult, evaluate_corpus
from keyphrase_eval.references import load_reference_keywords
from keyphrase_eval.tfidf import IDF_VARIANTS, TfidfModel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate TF-IDF keyword extraction against reference keyphrases."
    )
    parser.add_argument(
        "--corpus-dir",
        type=Path,
        default=None,
        help="Directory of Hulth JSON documents (env: KEYPHRASE_EVAL_CORPUS_DIR).",
    )
    parser.add_argument(
        "--references",
        type=Path,
        default=None,
        help="Reference keyword JSON file (env: KEYPHRASE_EVAL_REFERENCES).",
    )
    parser.add_argument(
        "--idf",
        choices=sorted(IDF_VARIANTS),
        default=None,
        help="IDF variant (env: KEYPHRASE_EVAL_IDF, default: log).",
    )
    parser.add_argument(
        "--raw-tf",
        action="store_true",
        help="Use raw term counts instead of length-normalized term frequency.",
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Judge only the top K ranked terms (default: full ranking).",
    )
    parser.add_argument("--save", type=Path, help="Path to save results JSON.")
    parser.add_argument(
        "--per-document",
        action="store_true",
        help="Print each document's measures to stderr.",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output.")
    return parser


def resolve_config(args: argparse.Namespace) -> EvalConfig:
    """Environment-derived config, overridden by any flags given on the command line."""
    overrides = {}
    if args.corpus_dir is not None:
        overrides["corpus_dir"] = args.corpus_dir
    if args.references is not None:
        overrides["references"] = args.references
    if args.idf is not None:
        overrides["idf"] = args.idf
    if args.raw_tf:
        overrides["normalize_tf"] = False
    if args.top_k is not None:
        overrides["top_k"] = args.top_k
    return EvalConfig.from_env(**overrides)


def run(config: EvalConfig, verbose: bool = False) -> EvaluationResult:
    corpus = Corpus.from_directory(config.corpus_dir)
    if verbose:
        print(f"Loaded {len(corpus):,} documents from {config.corpus_dir}", file=sys.stderr)

    model = TfidfModel(
        corpus,
        idf_func=IDF_VARIANTS[config.idf],
        normalize_tf=config.normalize_tf,
    )
    model.fit()
    if verbose:
        tf_policy = "length-normalized" if config.normalize_tf else "raw counts"
        print(
            f"Fitted TF-IDF: {model.vocabulary_size:,} terms, "
            f"idf={config.idf}, tf={tf_policy}",
            file=sys.stderr,
        )

    references = load_reference_keywords(config.references)
    if verbose:
        print(f"Loaded references for {len(references):,} documents", file=sys.stderr)

    return evaluate_corpus(
        model,
        corpus,
        references,
        top_k=config.top_k,
        show_progress=verbose,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = run(config, verbose=args.verbose)
    except MissingReferenceError as e:
        print(e.key, file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (KeyphraseEvalError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.per_document:
        for key, measures in result.measures:
            print(
                f"{key}: precision {measures.precision:.4f} "
                f"recall {measures.recall:.4f} f1 {measures.f1:.4f}",
                file=sys.stderr,
            )

    if args.save:
        args.save.parent.mkdir(parents=True, exist_ok=True)
        with open(args.save, "w") as f:
            json.dump(result.to_dict(), f, indent=2)
        if args.verbose:
            print(f"Saved results to {args.save}", file=sys.stderr)

    print(result.summary_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
