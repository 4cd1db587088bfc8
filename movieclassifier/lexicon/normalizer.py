"""
Lexicon Normalizer

Turns raw General Inquirer rows into a ConnotationTable:

1. Validate that every required column is in the header
2. Normalize each entry (letters only, lower-case, stemmed)
3. Keep the first row for each normalized word
4. Derive the connotation flags by strict label match
"""

import logging
import re
import time
from typing import Callable, Dict, Iterable, Sequence

from .constants import GI_ENTRY_COLUMN, GI_FLAG_COLUMNS, GI_REQUIRED_COLUMNS
from .schemas import ConnotationTable, LexiconMetadata, WordConnotation

logger = logging.getLogger(__name__)

WordFn = Callable[[str], str]

_NON_ALPHA = re.compile(r"[^A-Za-z]")


class SchemaError(ValueError):
    """The lexicon header lacks columns the normalizer needs."""


def normalize_entry(entry: str) -> str:
    """
    Strip every non-alphabetic character and lower-case.

    "ABOUT#1" -> "about", "CAN'T" -> "cant"
    """
    return _NON_ALPHA.sub("", entry).lower()


def get_column_indices(header: Sequence[str]) -> Dict[str, int]:
    """
    Map each required column to its position in the header.

    Args:
        header: Column names of the lexicon file

    Returns:
        Dictionary of column name -> index (first occurrence wins)

    Raises:
        SchemaError: If any required column is missing
    """
    indices: Dict[str, int] = {}
    for idx, name in enumerate(header):
        if name in GI_REQUIRED_COLUMNS and name not in indices:
            indices[name] = idx

    missing = [col for col in GI_REQUIRED_COLUMNS if col not in indices]
    if missing:
        raise SchemaError(f"Missing required lexicon columns: {missing}")
    return indices


def build(
    rows: Iterable[Sequence[str]],
    header: Sequence[str],
    stem: WordFn,
    source: str = "<memory>",
) -> ConnotationTable:
    """
    Build a ConnotationTable from raw lexicon rows.

    Args:
        rows: Data rows, each a sequence of cell values aligned with header
        header: Column names
        stem: Stemming function applied to every normalized entry
        source: Where the rows came from (recorded in metadata)

    Returns:
        Read-only ConnotationTable

    Raises:
        SchemaError: If a required column is missing. No table is built.
    """
    start_time = time.time()
    col_indices = get_column_indices(header)
    width = len(header)

    entries: Dict[str, WordConnotation] = {}
    rows_read = duplicates = malformed = empty = 0

    # line 1 is the header
    for line_no, row in enumerate(rows, start=2):
        rows_read += 1
        if len(row) != width:
            logger.warning(
                f"{source}:{line_no}: expected {width} columns, got {len(row)}; row discarded"
            )
            malformed += 1
            continue

        word = normalize_entry(row[col_indices[GI_ENTRY_COLUMN]])
        if not word:
            empty += 1
            continue

        word = stem(word)
        if word in entries:
            duplicates += 1
            continue

        flags = {
            name: row[col_indices[column]] == column
            for name, column in GI_FLAG_COLUMNS.items()
        }
        entries[word] = WordConnotation(word=word, **flags)

    connotation_counts = {name: 0 for name in GI_FLAG_COLUMNS}
    for wc in entries.values():
        for name in wc.get_connotations():
            connotation_counts[name] += 1

    metadata = LexiconMetadata(
        source=source,
        total_words=len(entries),
        rows_read=rows_read,
        duplicate_rows=duplicates,
        malformed_rows=malformed,
        empty_rows=empty,
        connotation_counts=connotation_counts,
        load_time_seconds=time.time() - start_time,
    )

    if malformed:
        logger.warning(f"Discarded {malformed} malformed lexicon rows from {source}")
    logger.info(
        f"Built connotation table in {metadata.load_time_seconds:.3f}s: "
        f"{len(entries)} words from {rows_read} rows ({duplicates} duplicates)"
    )
    return ConnotationTable(entries, metadata)
