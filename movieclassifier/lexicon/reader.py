"""
Lexicon file reader.

Reads the delimited General Inquirer file into raw rows. Rows are kept as-is
(no padding or truncation) so the normalizer can reject malformed ones.
"""

import csv
import logging
from pathlib import Path
from typing import Optional

from movieclassifier.config import settings

from .normalizer import SchemaError, WordFn, build
from .schemas import ConnotationTable, LexiconRows

logger = logging.getLogger(__name__)


def read_lexicon_rows(
    path: Path,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> LexiconRows:
    """
    Read header and data rows from a delimited lexicon file.

    Args:
        path: Lexicon file
        delimiter: Cell delimiter (default: settings.lexicon.delimiter)
        encoding: File encoding (default: settings.lexicon.encoding)

    Returns:
        LexiconRows(header, rows)

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaError: If the file has no header row
    """
    path = Path(path)
    delimiter = delimiter or settings.lexicon.delimiter
    encoding = encoding or settings.lexicon.encoding

    if not path.exists():
        raise FileNotFoundError(f"Lexicon file not found at {path}")

    logger.info(f"Loading lexicon from {path}")
    with open(path, 'r', encoding=encoding, newline='') as fh:
        reader = csv.reader(fh, delimiter=delimiter)
        header = next(reader, None)
        if header is None:
            raise SchemaError(f"Lexicon file {path} is empty (no header row)")
        rows = [row for row in reader if row]

    logger.info(f"Read {len(rows)} lexicon rows with {len(header)} columns")
    return LexiconRows(header=header, rows=rows)


def load_connotation_table(
    path: Path,
    stem: WordFn,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> ConnotationTable:
    """Read a lexicon file and build its ConnotationTable."""
    lexicon = read_lexicon_rows(path, delimiter=delimiter, encoding=encoding)
    return build(lexicon.rows, lexicon.header, stem, source=str(path))
