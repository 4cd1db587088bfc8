"""
Immutable constants for the General Inquirer lexicon.

This module contains the metadata that defines the lexicon structure.
These values should NEVER change at runtime - they define WHAT the lexicon IS.

For runtime configuration (HOW to read the lexicon), see configs/config.yaml
"""

from typing import Final

# ===========================
# Lexicon Metadata
# ===========================

GI_LEXICON_NAME: Final[str] = "Harvard General Inquirer (inquirerbasic)"
"""Human-readable name of the lexicon."""

GI_SOURCE_URL: Final[str] = "http://www.wjh.harvard.edu/~inquirer/"
"""Official source URL for the lexicon."""

# ===========================
# CSV Schema Definition
# ===========================

GI_ENTRY_COLUMN: Final[str] = "Entry"
"""Column holding the word (e.g. "ABOUT#1")."""

GI_FLAG_COLUMNS: Final[dict[str, str]] = {
    "positive": "Positiv",
    "negative": "Negativ",
    "strong": "Strong",
    "weak": "Weak",
    "pleasure": "Pleasur",
    "arousal": "Arousal",
    "pain": "Pain",
    "virtue": "Virtue",
    "hostile": "Hostile",
}
"""
Mapping of connotation names to CSV column names.
A flag is set only when the cell equals the column name itself.
"""

GI_REQUIRED_COLUMNS: Final[tuple[str, ...]] = (GI_ENTRY_COLUMN, *GI_FLAG_COLUMNS.values())
"""Columns that must be present in the lexicon header."""

# ===========================
# Feature Schema
# ===========================

TRACKED_CONNOTATIONS: Final[tuple[str, ...]] = (
    "positive",
    "negative",
    "strong",
    "weak",
)
"""Connotations that are counted into a feature record, in column order."""
