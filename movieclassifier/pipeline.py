"""
Feature Pipeline for Movie Reviews

Orchestrates the per-document flow:
1. Stem   - stem every whitespace-separated word
2. Negate - tag words inside a negation scope
3. Count  - count lexicon connotations into a FeatureRecord

The ConnotationTable is built once and only read afterwards, so documents are
independent of each other and may be processed on a thread pool.
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Collection, Iterable, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from movieclassifier.config import settings
from movieclassifier.features.connotation import (
    MIN_TOKEN_LENGTH,
    FeatureRecord,
    Label,
    NegatedHitPolicy,
    extract,
)
from movieclassifier.features.negation import (
    DEFAULT_NEGATION_MARKERS,
    DEFAULT_NEGATION_PREFIX,
    apply_negation_scope,
)
from movieclassifier.features.stemming import build_stemmer
from movieclassifier.io.documents import LabeledDocument
from movieclassifier.lexicon import (
    ConnotationTable,
    LexiconRows,
    WordFn,
    build,
    load_connotation_table,
)

logger = logging.getLogger(__name__)

Document = Union[Tuple[str, Label], LabeledDocument]

# leading non-letters, letter core, trailing non-letters
_WORD_PARTS = re.compile(r"^([^A-Za-z]*)(.*?)([^A-Za-z]*)$", re.DOTALL)


def stem_word(word: str, stem: WordFn) -> str:
    """
    Stem the letter core of a word and keep attached punctuation.

    "movies," -> "movi,"  (with Snowball), so the core matches the stemmed
    lexicon key once punctuation is stripped for lookup.
    """
    head, core, tail = _WORD_PARTS.match(word).groups()
    if not core:
        return word
    return head + stem(core) + tail


def stem_text(text: str, stem: WordFn) -> str:
    """Stem every whitespace-separated word and join with single spaces."""
    return " ".join(stem_word(word, stem) for word in text.split())


def process_document(
    text: str,
    label: Label,
    table: ConnotationTable,
    stem: WordFn,
    markers: Collection[str] = DEFAULT_NEGATION_MARKERS,
    prefix: str = DEFAULT_NEGATION_PREFIX,
    min_token_length: int = MIN_TOKEN_LENGTH,
    negated_policy: Union[NegatedHitPolicy, str] = NegatedHitPolicy.IGNORE,
) -> FeatureRecord:
    """Run one raw document through stemming, negation scoping and counting."""
    stemmed = stem_text(text, stem)
    scoped = apply_negation_scope(stemmed, markers, prefix)
    return extract(
        scoped,
        label,
        table,
        negation_prefix=prefix,
        min_token_length=min_token_length,
        negated_policy=negated_policy,
    )


def run(
    documents: Iterable[Document],
    lexicon: Union[ConnotationTable, LexiconRows],
    stem: WordFn,
    markers: Collection[str] = DEFAULT_NEGATION_MARKERS,
    prefix: str = DEFAULT_NEGATION_PREFIX,
    min_token_length: int = MIN_TOKEN_LENGTH,
    negated_policy: Union[NegatedHitPolicy, str] = NegatedHitPolicy.IGNORE,
) -> Iterator[FeatureRecord]:
    """
    Turn labeled documents into feature records.

    The table is built before the first document is touched, so schema errors
    surface immediately. Records are produced lazily, in document order, in a
    single pass over ``documents``.

    Args:
        documents: Iterable of (raw_text, Label) pairs (LabeledDocument works)
        lexicon: A built ConnotationTable, or raw LexiconRows to build one from
        stem: Stemming function shared by lexicon and documents
        markers: Negation markers
        prefix: Negation prefix
        min_token_length: Shorter tokens are not looked up
        negated_policy: How hits on negated tokens are counted

    Returns:
        Iterator of frozen FeatureRecord
    """
    if isinstance(lexicon, ConnotationTable):
        table = lexicon
    else:
        table = build(lexicon.rows, lexicon.header, stem)

    return _run_documents(
        documents, table, stem, markers, prefix, min_token_length, negated_policy
    )


def _run_documents(
    documents: Iterable[Document],
    table: ConnotationTable,
    stem: WordFn,
    markers: Collection[str],
    prefix: str,
    min_token_length: int,
    negated_policy: Union[NegatedHitPolicy, str],
) -> Iterator[FeatureRecord]:
    for doc in documents:
        text, label = doc[0], doc[1]
        yield process_document(
            text, label, table, stem, markers, prefix, min_token_length, negated_policy
        )


class PipelineConfig(BaseModel):
    """
    Configuration for the feature pipeline (Pydantic V2)

    Attributes:
        negation_markers: Substrings that open a negation scope
        negation_prefix: Tag prepended to negated words
        min_token_length: Shorter tokens are not looked up
        negated_policy: How hits on negated tokens are counted
        stemming_enabled: Whether to stem lexicon entries and documents
        stemming_language: Snowball stemmer language
        workers: Thread count for process_corpus (1 = sequential)
    """
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',  # Raise error on unknown fields
    )

    negation_markers: List[str] = Field(
        default_factory=lambda: list(settings.negation.markers),
        description="Substrings that open a negation scope"
    )
    negation_prefix: str = Field(
        default_factory=lambda: settings.negation.prefix,
        min_length=1,
        description="Tag prepended to negated words"
    )
    min_token_length: int = Field(
        default_factory=lambda: settings.aggregation.min_token_length,
        ge=1,
        description="Shorter tokens are skipped"
    )
    negated_policy: NegatedHitPolicy = Field(
        default_factory=lambda: NegatedHitPolicy(settings.aggregation.negated_policy),
        description="How hits on negated tokens are counted"
    )
    stemming_enabled: bool = Field(
        default_factory=lambda: settings.stemming.enabled,
        description="Stem lexicon entries and document words"
    )
    stemming_language: str = Field(
        default_factory=lambda: settings.stemming.language,
        description="Snowball stemmer language"
    )
    workers: int = Field(
        default_factory=lambda: settings.corpus.workers,
        ge=1,
        description="Threads used by process_corpus"
    )


class FeaturePipeline:
    """
    Complete feature pipeline for labeled movie reviews

    Flow: Stem -> Negate -> Count

    Example:
        >>> pipeline = FeaturePipeline()
        >>> pipeline.load_lexicon("data/general_inquirer_lexicon/inquirerbasic.csv")
        >>> record = pipeline.process_document("not a good film", Label.NEGATIVE)
        >>> print(record.to_row())
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        table: Optional[ConnotationTable] = None,
        stem: Optional[WordFn] = None,
    ):
        """
        Initialize the feature pipeline

        Args:
            config: Pipeline configuration. Uses settings if not provided.
            table: Prebuilt table. Loaded from settings.paths.lexicon_csv on
                first use if not provided.
            stem: Stemming function. Built from config if not provided.
        """
        self.config = config or PipelineConfig()
        self.stem = stem or build_stemmer(
            self.config.stemming_language, self.config.stemming_enabled
        )
        self._table = table

    @property
    def table(self) -> ConnotationTable:
        """Lazy-load the connotation table."""
        if self._table is None:
            self.load_lexicon()
        return self._table

    def load_lexicon(self, path: Optional[Union[str, Path]] = None) -> ConnotationTable:
        """
        Build the connotation table from a lexicon file

        Args:
            path: Lexicon file (default: settings.paths.lexicon_csv)

        Returns:
            The loaded ConnotationTable (also kept on the pipeline)
        """
        path = Path(path) if path else settings.paths.lexicon_csv
        self._table = load_connotation_table(path, self.stem)
        logger.info(self._table.metadata.get_summary())
        return self._table

    def process_document(self, text: str, label: Label) -> FeatureRecord:
        """Feature record of one raw document"""
        return process_document(
            text,
            label,
            self.table,
            self.stem,
            markers=self.config.negation_markers,
            prefix=self.config.negation_prefix,
            min_token_length=self.config.min_token_length,
            negated_policy=self.config.negated_policy,
        )

    def _process_pair(self, doc: Document) -> FeatureRecord:
        return self.process_document(doc[0], doc[1])

    def process_corpus(
        self,
        documents: Iterable[Document],
        workers: Optional[int] = None,
    ) -> Iterator[FeatureRecord]:
        """
        Feature records for a labeled corpus, in document order

        Args:
            documents: Iterable of (raw_text, Label) pairs
            workers: Thread count (default: config.workers). With more than
                one worker all documents are read before the first record is
                returned.

        Returns:
            Iterator of FeatureRecord
        """
        workers = workers or self.config.workers
        table = self.table  # build once, before any worker starts

        if workers <= 1:
            return _run_documents(
                documents,
                table,
                self.stem,
                self.config.negation_markers,
                self.config.negation_prefix,
                self.config.min_token_length,
                self.config.negated_policy,
            )
        return self._process_parallel(documents, workers)

    def _process_parallel(self, documents: Iterable[Document], workers: int) -> Iterator[FeatureRecord]:
        logger.info(f"Processing documents with {workers} threads")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() keeps input order
            yield from executor.map(self._process_pair, documents)


def summarize_records(records: Iterable[FeatureRecord]) -> dict:
    """
    Per-label document counts and counter totals.

    Returns:
        {"documents": int, "labels": {label: int}, "totals": {counter: int}}
    """
    summary = {
        "documents": 0,
        "labels": {label.value: 0 for label in Label},
        "totals": {"positive": 0, "negative": 0, "strong": 0, "weak": 0},
    }
    for record in records:
        summary["documents"] += 1
        summary["labels"][record.label.value] += 1
        for name in summary["totals"]:
            summary["totals"][name] += getattr(record, name)
    return summary
