"""
Labeled review document source.

Expected layout (Pang & Lee polarity dataset):

    data/txt_sentoken/
    ├── pos/   cv000_29590.txt, ...
    └── neg/   cv000_29416.txt, ...

Positive documents are yielded first, then negative ones, each directory in
file-name order.
"""

import logging
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple

from movieclassifier.config import settings
from movieclassifier.features.connotation import Label

logger = logging.getLogger(__name__)


class LabeledDocument(NamedTuple):
    """Raw review text, its label and the file it came from."""
    text: str
    label: Label
    source: Optional[Path] = None


def list_document_files(directory: Path) -> List[Path]:
    """
    List review files in a directory, sorted by name.

    Hidden files (".DS_Store", ...) and subdirectories are skipped.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Document directory not found: {directory}")

    return sorted(
        (p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def load_document(path: Path, encoding: Optional[str] = None) -> str:
    """Read a whole review file."""
    return Path(path).read_text(encoding=encoding or settings.corpus.encoding)


def iter_labeled_documents(
    corpus_dir: Optional[Path] = None,
    positive_dir: Optional[str] = None,
    negative_dir: Optional[str] = None,
    encoding: Optional[str] = None,
) -> Iterator[LabeledDocument]:
    """
    Iterate over the labeled corpus.

    Both label directories are checked before the first document is read, so
    a missing directory fails fast instead of halfway through a run.

    Args:
        corpus_dir: Corpus root (default: settings.paths.corpus_dir)
        positive_dir: Name of the positive subdirectory (default: "pos")
        negative_dir: Name of the negative subdirectory (default: "neg")
        encoding: File encoding (default: settings.corpus.encoding)

    Returns:
        Single-pass iterator of LabeledDocument

    Raises:
        FileNotFoundError: If the corpus root or a label directory is missing
    """
    corpus_dir = Path(corpus_dir or settings.paths.corpus_dir)
    encoding = encoding or settings.corpus.encoding

    sources: List[Tuple[Label, List[Path]]] = [
        (Label.POSITIVE, list_document_files(corpus_dir / (positive_dir or settings.corpus.positive_dir))),
        (Label.NEGATIVE, list_document_files(corpus_dir / (negative_dir or settings.corpus.negative_dir))),
    ]
    for label, files in sources:
        logger.info(f"Found {len(files)} {label.value.lower()} documents")

    return _iter_documents(sources, encoding)


def _iter_documents(sources: List[Tuple[Label, List[Path]]], encoding: str) -> Iterator[LabeledDocument]:
    for label, files in sources:
        for path in files:
            yield LabeledDocument(load_document(path, encoding), label, path)
