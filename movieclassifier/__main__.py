"""
CLI entry point for the movie review feature generator.

Output layout:
    data/
    ├── movie-reviews.csv    # positive, negative, strong, weak, label
    └── movie-reviews.arff   # same data, label as class attribute

Usage:
    # Defaults from configs/config.yaml
    python -m movieclassifier

    # Explicit inputs and outputs
    python -m movieclassifier --lexicon data/general_inquirer_lexicon/inquirerbasic.csv \
        --corpus data/txt_sentoken --csv out/reviews.csv --arff out/reviews.arff

    # Parallel, flip polarity of negated hits, CSV only
    python -m movieclassifier --workers 4 --negated-policy flip --no-arff
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from movieclassifier.config import settings
from movieclassifier.features.connotation import NegatedHitPolicy
from movieclassifier.io import convert_csv_to_arff, iter_labeled_documents, write_feature_csv
from movieclassifier.pipeline import FeaturePipeline, PipelineConfig, summarize_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="movieclassifier",
        description="Generate connotation feature vectors (CSV/ARFF) from labeled movie reviews.",
    )
    parser.add_argument("--lexicon", type=Path, default=None,
                        help=f"Lexicon file (default: {settings.paths.lexicon_csv})")
    parser.add_argument("--corpus", type=Path, default=None,
                        help=f"Corpus root with pos/ and neg/ (default: {settings.paths.corpus_dir})")
    parser.add_argument("--csv", type=Path, default=None,
                        help=f"Feature CSV output (default: {settings.paths.features_csv})")
    parser.add_argument("--arff", type=Path, default=None,
                        help=f"ARFF output (default: {settings.paths.features_arff})")
    parser.add_argument("--no-arff", action="store_true",
                        help="Only write the CSV")
    parser.add_argument("--workers", type=int, default=None,
                        help="Threads used for feature extraction (default: 1)")
    parser.add_argument("--no-stem", action="store_true",
                        help="Disable stemming of lexicon entries and documents")
    parser.add_argument("--negated-policy", choices=[p.value for p in NegatedHitPolicy], default=None,
                        help="How lexicon hits on negated words are counted")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    overrides = {}
    if args.no_stem:
        overrides["stemming_enabled"] = False
    if args.negated_policy:
        overrides["negated_policy"] = args.negated_policy
    if args.workers:
        overrides["workers"] = args.workers

    csv_path = args.csv or settings.paths.features_csv
    arff_path = args.arff or settings.paths.features_arff

    start = time.time()
    try:
        pipeline = FeaturePipeline(PipelineConfig(**overrides))
        pipeline.load_lexicon(args.lexicon)

        documents = iter_labeled_documents(args.corpus)
        records = list(pipeline.process_corpus(documents))

        write_feature_csv(records, csv_path)
        if not args.no_arff:
            convert_csv_to_arff(csv_path, arff_path)
    # SchemaError, pydantic ValidationError and UnicodeDecodeError are ValueErrors
    except (OSError, ValueError) as e:
        logger.error(f"Feature generation failed: {e}")
        return 1

    summary = summarize_records(records)
    logger.info("=" * 60)
    logger.info(f"Documents: {summary['documents']} "
                + ", ".join(f"{k.lower()}={v}" for k, v in summary['labels'].items()))
    logger.info("Counter totals: "
                + ", ".join(f"{k}={v}" for k, v in summary['totals'].items()))
    logger.info(f"Elapsed: {time.time() - start:.2f}s")
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
