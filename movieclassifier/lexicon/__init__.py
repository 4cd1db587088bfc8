"""
Connotation lexicon handling.

This package turns the General Inquirer lexicon into an in-memory,
read-only ConnotationTable.

Key components:
- constants: Immutable metadata (column names, tracked connotations)
- schemas: WordConnotation, LexiconMetadata, ConnotationTable
- normalizer: build() and entry normalization
- reader: file reading on top of build()

Usage:
    from movieclassifier.lexicon import load_connotation_table

    table = load_connotation_table(path, stem=str.lower)
    if "good" in table and table["good"].positive:
        print("'good' is positive")
"""

from .constants import (
    GI_LEXICON_NAME,
    GI_SOURCE_URL,
    GI_ENTRY_COLUMN,
    GI_FLAG_COLUMNS,
    GI_REQUIRED_COLUMNS,
    TRACKED_CONNOTATIONS,
)

from .schemas import (
    WordConnotation,
    LexiconMetadata,
    LexiconRows,
    ConnotationTable,
)

from .normalizer import SchemaError, WordFn, build, normalize_entry, get_column_indices
from .reader import read_lexicon_rows, load_connotation_table

__all__ = [
    # Constants
    "GI_LEXICON_NAME",
    "GI_SOURCE_URL",
    "GI_ENTRY_COLUMN",
    "GI_FLAG_COLUMNS",
    "GI_REQUIRED_COLUMNS",
    "TRACKED_CONNOTATIONS",
    # Schemas
    "WordConnotation",
    "LexiconMetadata",
    "LexiconRows",
    "ConnotationTable",
    # Normalizer
    "SchemaError",
    "WordFn",
    "build",
    "normalize_entry",
    "get_column_indices",
    # Reader
    "read_lexicon_rows",
    "load_connotation_table",
]
