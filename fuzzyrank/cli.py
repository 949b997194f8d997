"""fuzzyrank command line.

Usage:
    fuzzyrank demo
    fuzzyrank score "mysmilarstring" "mysimilarstring" --scorer ratio
    fuzzyrank extract "new york jets" "New York Jets" "New York Giants" --limit 2
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any, Optional

from fuzzyrank.exceptions import ConfigurationError, NoMatchError
from fuzzyrank.extractor import Extractor
from fuzzyrank.similarity.scoring import Scorer, WeightedRatioSettings
from fuzzyrank.utils.io_utils import get_section, load_settings, validate_settings
from fuzzyrank.utils.logging_utils import DEFAULT_FORMAT, get_logger, setup_logging
from fuzzyrank.utils.path_utils import get_config_path

logger = get_logger(__name__)

# (scorer, query, choice) pairs shown by `fuzzyrank demo`
DEMO_PAIRS: list[tuple[Scorer, str, str]] = [
    (Scorer.RATIO, "mysmilarstring", "myawfullysimilarstirng"),
    (Scorer.RATIO, "mysmilarstring", "mysimilarstring"),
    (Scorer.PARTIAL_RATIO, "similar", "somewhresimlrbetweenthisstring"),
    (Scorer.TOKEN_SORT_PARTIAL_RATIO, "order words out of", "  words out of order"),
    (Scorer.TOKEN_SORT_RATIO, "order words out of", "  words out of order"),
    (Scorer.TOKEN_SET_RATIO, "fuzzy was a bear", "fuzzy fuzzy fuzzy bear"),
    (Scorer.TOKEN_SET_PARTIAL_RATIO, "fuzzy was a bear", "fuzzy fuzzy fuzzy bear"),
    (
        Scorer.WEIGHTED_RATIO,
        "The quick brown fox jimps ofver the small lazy dog",
        "the quick brown fox jumps over the small lazy dog",
    ),
]


def run_demo(weights: Optional[WeightedRatioSettings] = None) -> list[dict[str, Any]]:
    """Score every demo pair and return the rows printed by the demo command."""
    return [
        {
            "scorer": scorer.value,
            "query": query,
            "choice": choice,
            "score": scorer.apply(query, choice, weights=weights),
        }
        for scorer, query, choice in DEMO_PAIRS
    ]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    scorer_names = [scorer.value for scorer in Scorer]

    parser = argparse.ArgumentParser(
        prog="fuzzyrank",
        description="Fuzzy string scoring and ranking",
    )
    parser.add_argument(
        "--config",
        default=str(get_config_path()),
        help="Configuration file path",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured logging level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Run every scorer on sample string pairs")

    score = subparsers.add_parser("score", help="Score two strings")
    score.add_argument("query", help="First string")
    score.add_argument("choice", help="Second string")
    score.add_argument("--scorer", choices=scorer_names, help="Scorer (default from config)")

    extract = subparsers.add_parser("extract", help="Rank choices against a query")
    extract.add_argument("query", help="String to match")
    extract.add_argument("choices", nargs="+", help="Candidate strings")
    extract.add_argument("--scorer", choices=scorer_names, help="Scorer (default from config)")
    extract.add_argument("--limit", type=int, help="Number of results (default from config)")
    extract.add_argument("--cutoff", type=int, help="Minimum score (default from config)")
    extract.add_argument("--json", action="store_true", help="Print results as JSON")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        log_settings = get_section(settings, "logging")
        extractor_settings = get_section(settings, "extractor")
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    setup_logging(
        args.log_level or log_settings.get("level", "WARNING"),
        log_settings.get("file"),
        log_settings.get("format") or DEFAULT_FORMAT,
    )
    for warning in validate_settings(settings):
        logger.warning(f"Config: {warning}")

    try:
        weights = WeightedRatioSettings.from_settings(settings)
        scorer = Scorer.resolve(
            getattr(args, "scorer", None) or extractor_settings.get("scorer", Scorer.WEIGHTED_RATIO.value),
        )

        if args.command == "demo":
            for row in run_demo(weights):
                print(f"{row['scorer']:>26}: {row['score']:>3}  {row['query']!r} vs {row['choice']!r}")
            return 0

        if args.command == "score":
            print(scorer.apply(args.query, args.choice, weights=weights))
            return 0

        cutoff = args.cutoff if args.cutoff is not None else extractor_settings.get("cutoff", 0)
        limit = args.limit if args.limit is not None else extractor_settings.get("limit", 5)
        extractor = Extractor(cutoff=cutoff, weights=weights)
        results = extractor.extract_top(args.query, args.choices, scorer, limit)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if not results:
        print("No match found.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for result in results:
            print(f"{result.score:>3}  [{result.index}] {result.choice}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
