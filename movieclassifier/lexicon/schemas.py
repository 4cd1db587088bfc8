"""
Data structures for the connotation lexicon.

WordConnotation and LexiconMetadata are Pydantic models; ConnotationTable is a
read-only mapping so the built table cannot be changed by the code that
consumes it.
"""

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Dict, Iterator, List, NamedTuple, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import GI_FLAG_COLUMNS, GI_LEXICON_NAME


class WordConnotation(BaseModel):
    """
    Connotation flags of one normalized lexicon word.

    The word is the table key: letters only, lower-cased and stemmed.
    """
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., description="Normalized word (letters only, lower-case, stemmed)")
    positive: bool = False
    negative: bool = False
    strong: bool = False
    weak: bool = False
    pleasure: bool = False
    arousal: bool = False
    pain: bool = False
    virtue: bool = False
    hostile: bool = False

    @field_validator('word')
    @classmethod
    def word_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError('Word cannot be empty')
        return v

    def get_connotations(self) -> set[str]:
        """Return the names of all flags set on this word."""
        return {name for name in GI_FLAG_COLUMNS if getattr(self, name)}


class LexiconMetadata(BaseModel):
    """
    Statistics about a built table.

    Tracks where the table came from and which rows were dropped, for
    auditability and debugging.
    """
    name: str = Field(default=GI_LEXICON_NAME)
    source: str = Field(..., description="File path or '<memory>'")
    total_words: int = Field(..., ge=0)
    rows_read: int = Field(..., ge=0)
    duplicate_rows: int = Field(default=0, ge=0)
    malformed_rows: int = Field(default=0, ge=0)
    empty_rows: int = Field(default=0, ge=0)
    connotation_counts: Dict[str, int] = Field(
        ...,
        description="Number of words carrying each connotation"
    )
    load_time_seconds: float = Field(..., ge=0)
    loaded_at: datetime = Field(default_factory=datetime.now)

    @field_validator('connotation_counts')
    @classmethod
    def validate_connotation_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Ensure counts only name known connotations."""
        unknown = set(v.keys()) - set(GI_FLAG_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown connotations in counts: {unknown}")
        return v

    def get_summary(self) -> str:
        """Return human-readable summary of the table."""
        return (
            f"{self.name}\n"
            f"Total words: {self.total_words:,}\n"
            f"Rows read: {self.rows_read:,} "
            f"(duplicates: {self.duplicate_rows:,}, malformed: {self.malformed_rows:,}, "
            f"empty: {self.empty_rows:,})\n"
            f"Loaded from: {self.source}\n"
            f"Load time: {self.load_time_seconds:.3f}s"
        )


class LexiconRows(NamedTuple):
    """Raw lexicon content as handed over by a reader: header plus data rows."""
    header: Sequence[str]
    rows: List[Sequence[str]]


class ConnotationTable(Mapping):
    """
    Read-only mapping from normalized word to WordConnotation.

    Built once by ``movieclassifier.lexicon.build`` and shared by every
    feature extraction afterwards. Lookups are by word only.
    """

    def __init__(self, entries: Mapping[str, WordConnotation], metadata: LexiconMetadata):
        self._entries = MappingProxyType(dict(entries))
        self._metadata = metadata

    @property
    def metadata(self) -> LexiconMetadata:
        return self._metadata

    def __getitem__(self, word: str) -> WordConnotation:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get_connotation_words(self, connotation: str) -> set[str]:
        """
        Get all words carrying one connotation.

        Args:
            connotation: Flag name (e.g. "positive", "hostile")

        Returns:
            Set of words with that flag set
        """
        if connotation not in GI_FLAG_COLUMNS:
            raise ValueError(
                f"Invalid connotation: {connotation}. Must be one of {tuple(GI_FLAG_COLUMNS)}"
            )
        return {word for word, wc in self._entries.items() if getattr(wc, connotation)}

    def __repr__(self) -> str:
        return f"<ConnotationTable ({len(self)} words from {self._metadata.source})>"
