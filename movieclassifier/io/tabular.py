"""
Tabular output for feature records.

CSV is written with pandas; the ARFF conversion and loading use liac-arff.
In every output the label column comes last and is the class attribute.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import arff
import pandas as pd

from movieclassifier.features.connotation import FEATURE_COLUMNS, FeatureRecord, Label
from movieclassifier.lexicon.constants import TRACKED_CONNOTATIONS

logger = logging.getLogger(__name__)


def records_to_frame(records: Iterable[FeatureRecord]) -> pd.DataFrame:
    """Build a DataFrame with FEATURE_COLUMNS from feature records."""
    rows = [record.to_row() for record in records]
    return pd.DataFrame(rows, columns=list(FEATURE_COLUMNS))


def write_feature_csv(records: Iterable[FeatureRecord], output_path: Path) -> int:
    """
    Write feature records to CSV in the order given.

    Args:
        records: Feature records (consumed once)
        output_path: CSV file to write

    Returns:
        Number of records written
    """
    output_path = Path(output_path)
    df = records_to_frame(records)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    logger.info(f"Saved {len(df)} feature records to {output_path}")
    return len(df)


def _nominal_values(series: pd.Series) -> List[str]:
    values = [str(v) for v in series.dropna().unique()]
    known = [label.value for label in Label]
    if set(values) <= set(known):
        return known
    return values


def _attribute_type(series: pd.Series, is_class: bool = False) -> Union[str, List[str]]:
    if is_class:
        return _nominal_values(series)
    # counter columns are numeric even when an empty CSV leaves them as object
    if series.name in TRACKED_CONNOTATIONS or pd.api.types.is_numeric_dtype(series):
        return 'NUMERIC'
    return _nominal_values(series)


def _placeholder_row(attributes: List[Tuple[str, Union[str, List[str]]]]) -> List[Union[int, str]]:
    return [kind[0] if isinstance(kind, list) and kind else 0 for _, kind in attributes]


def _dumps_header_only(dataset: dict) -> str:
    # liac-arff cannot encode an empty data section; encode one row and cut it off
    text = arff.dumps({**dataset, 'data': [_placeholder_row(dataset['attributes'])]})
    head, marker, _ = text.partition('@DATA')
    return head + marker + '\n'


def convert_csv_to_arff(
    csv_path: Path,
    arff_path: Path,
    relation: Optional[str] = None,
) -> Path:
    """
    Convert a feature CSV to ARFF.

    Counter columns and other numeric columns become NUMERIC attributes, the
    others nominal. The last column is the class attribute and is always
    nominal. A CSV without rows yields an ARFF with an empty data section.

    Args:
        csv_path: Input CSV with a header row
        arff_path: ARFF file to write
        relation: Relation name (default: CSV file stem)

    Returns:
        Path of the written ARFF file

    Raises:
        FileNotFoundError: If the CSV does not exist
        ValueError: If the CSV has no columns
    """
    csv_path = Path(csv_path)
    arff_path = Path(arff_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Feature CSV not found at {csv_path}")

    df = pd.read_csv(csv_path)
    if df.columns.empty:
        raise ValueError(f"Feature CSV {csv_path} has no columns")

    class_column = df.columns[-1]
    df[class_column] = df[class_column].astype(str)

    dataset = {
        'relation': relation or csv_path.stem,
        'description': f"Class attribute: {class_column}",
        'attributes': [
            (str(col), _attribute_type(df[col], is_class=(col == class_column)))
            for col in df.columns
        ],
        'data': df.astype(object).values.tolist(),
    }

    arff_path.parent.mkdir(parents=True, exist_ok=True)
    with open(arff_path, 'w', encoding='utf-8') as f:
        if dataset['data']:
            arff.dump(dataset, f)
        else:
            logger.warning(f"{csv_path} has no rows; writing ARFF header only")
            f.write(_dumps_header_only(dataset))

    logger.info(f"Converted {csv_path} to {arff_path} ({len(df)} instances, class '{class_column}')")
    return arff_path


def load_arff(arff_path: Path) -> pd.DataFrame:
    """
    Load an ARFF file into a DataFrame.

    The last attribute is treated as the class: its name is stored in
    ``df.attrs["class_attribute"]`` and nominal attributes become categoricals.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file declares no attributes
    """
    arff_path = Path(arff_path)
    if not arff_path.exists():
        raise FileNotFoundError(f"ARFF file not found at {arff_path}")

    logger.info(f"Loading ARFF data from {arff_path}")
    with open(arff_path, 'r', encoding='utf-8') as f:
        dataset = arff.load(f)

    attributes = dataset['attributes']
    if not attributes:
        raise ValueError(f"ARFF file {arff_path} declares no attributes")

    columns = [name for name, _ in attributes]
    df = pd.DataFrame(dataset['data'], columns=columns)
    for name, kind in attributes:
        if isinstance(kind, list):
            df[name] = pd.Categorical(df[name], categories=kind)

    df.attrs['relation'] = dataset.get('relation', arff_path.stem)
    df.attrs['class_attribute'] = columns[-1]
    return df
