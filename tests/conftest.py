"""
Shared pytest fixtures for the movie review feature generator test suite.

This module provides synthetic inputs used across test modules:
- A small General Inquirer style lexicon (header + rows)
- A prebuilt ConnotationTable with an identity stemmer
- On-disk lexicon and corpus layouts under tmp_path

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from movieclassifier.lexicon import ConnotationTable, LexiconRows, build


# ===========================
# Lexicon Fixtures
# ===========================

LEXICON_HEADER: List[str] = [
    "Entry", "Source", "Positiv", "Negativ", "Pstv", "Strong", "Weak",
    "Pleasur", "Arousal", "Pain", "Virtue", "Hostile", "Othrtags",
]


def make_row(entry: str, *flags: str, source: str = "H4Lvd") -> List[str]:
    """
    Build one lexicon row aligned with LEXICON_HEADER.

    Every column named in ``flags`` gets its own name as value (the General
    Inquirer convention); every other cell is empty.
    """
    row = [""] * len(LEXICON_HEADER)
    row[0] = entry
    row[1] = source
    for flag in flags:
        row[LEXICON_HEADER.index(flag)] = flag
    return row


@pytest.fixture
def make_lexicon_row() -> Callable[..., List[str]]:
    """Expose make_row to tests."""
    return make_row


@pytest.fixture
def identity_stem() -> Callable[[str], str]:
    """Stemmer that leaves words unchanged."""
    return lambda word: word


@pytest.fixture
def lexicon_header() -> List[str]:
    return list(LEXICON_HEADER)


@pytest.fixture
def lexicon_rows() -> List[List[str]]:
    """Small lexicon covering every tracked connotation."""
    return [
        make_row("GOOD", "Positiv", "Virtue"),
        make_row("BAD", "Negativ"),
        make_row("STRONG", "Strong"),
        make_row("FEEBLE", "Weak", "Negativ"),
        make_row("LOVE#1", "Positiv", "Strong", "Pleasur"),
        make_row("LOVE#2", "Negativ"),
        make_row("HATE", "Negativ", "Strong", "Hostile"),
        make_row("OK", "Positiv"),
    ]


@pytest.fixture
def lexicon(lexicon_header, lexicon_rows) -> LexiconRows:
    return LexiconRows(header=lexicon_header, rows=lexicon_rows)


@pytest.fixture
def connotation_table(lexicon_header, lexicon_rows, identity_stem) -> ConnotationTable:
    """Table built from lexicon_rows without stemming."""
    return build(lexicon_rows, lexicon_header, identity_stem)


@pytest.fixture
def lexicon_file(tmp_path: Path, lexicon_header, lexicon_rows) -> Path:
    """Semicolon-delimited lexicon file on disk."""
    path = tmp_path / "inquirerbasic.csv"
    lines = [";".join(lexicon_header)] + [";".join(row) for row in lexicon_rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# ===========================
# Corpus Fixtures
# ===========================

@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """
    Two positive and two negative reviews in pos/ and neg/.

    File names are chosen so directory order and name order differ.
    """
    root = tmp_path / "txt_sentoken"
    pos = root / "pos"
    neg = root / "neg"
    pos.mkdir(parents=True)
    neg.mkdir(parents=True)

    (pos / "cv001_b.txt").write_text("a good and strong film .\n", encoding="utf-8")
    (pos / "cv000_a.txt").write_text("i love it , not bad at all .\n", encoding="utf-8")
    (neg / "cv001_d.txt").write_text("feeble plot and bad acting .\n", encoding="utf-8")
    (neg / "cv000_c.txt").write_text("it is not good .\n", encoding="utf-8")
    (neg / ".DS_Store").write_text("ignored", encoding="utf-8")
    return root
