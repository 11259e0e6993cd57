"""Command-line interface for correct-word."""

from __future__ import annotations

import argparse
import json
import sys

from .config import settings
from .correction import Corrector
from .logger import logger
from .scoring.algorithms import Algorithm


def cli() -> None:
    """Console-script entry point (`correct-word`)."""
    raise SystemExit(main())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Suggest the closest candidate to a (mistyped) word using edit distance."
    )
    parser.add_argument("input", help="Word to correct.")
    parser.add_argument("candidates", nargs="*", help="Known words to choose from.")
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=settings.DEFAULT_ALGORITHM.value,
        help=(
            "Scoring algorithm. 'levenshtein' scores by raw distance (lower is better), "
            "'levenshtein_similarity' by normalized similarity in [0, 1] (higher is better). "
            f"Default: {settings.DEFAULT_ALGORITHM.value}."
        ),
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help=(
            "Max distance (levenshtein) or min similarity (levenshtein_similarity) to accept. "
            f"Defaults: {settings.DISTANCE_THRESHOLD} / {settings.SIMILARITY_THRESHOLD}."
        ),
    )
    parser.add_argument(
        "--suggest",
        type=int,
        default=0,
        metavar="N",
        help="Also list up to N ranked suggestions that clear the threshold.",
    )
    parser.add_argument(
        "--candidates-file",
        default=None,
        help="Read additional candidates from a file, one per line.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print output as a single-line JSON object.",
    )

    args = parser.parse_args(argv)

    candidates = list(args.candidates)
    if args.candidates_file:
        with open(args.candidates_file, encoding="utf-8") as f:
            candidates.extend(line.rstrip("\n") for line in f if line.strip())

    threshold = args.threshold
    if threshold is not None and args.algorithm == Algorithm.LEVENSHTEIN.value:
        threshold = int(threshold)

    corrector = Corrector(algorithm=args.algorithm, threshold=threshold)

    result = corrector.correct(args.input, candidates)
    suggestions = []
    if args.suggest > 0:
        suggestions = corrector.suggest(args.input, candidates, limit=args.suggest)

    logger.debug("Scored {count} candidates for {input!r}", count=len(candidates), input=args.input)

    if args.json:
        payload = {
            "word": result.word,
            "confidence": result.confidence,
            "algorithm": corrector.algorithm.value,
            "threshold": corrector.threshold,
            "suggestions": [s.model_dump() for s in suggestions],
        }
        print(json.dumps(payload, ensure_ascii=False))
    else:
        if result.word is not None:
            print(result.word)
        else:
            print(f"No match for {args.input!r} (best score: {result.confidence})", file=sys.stderr)
        if suggestions:
            print("Did you mean: " + ", ".join(s.word for s in suggestions))

    return 0 if result.word is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
