"""
I/O adapters around the in-memory pipeline.

- documents: labeled review files from pos/ and neg/ directories
- tabular: feature CSV, CSV -> ARFF conversion, ARFF loading
"""

from .documents import LabeledDocument, iter_labeled_documents, list_document_files, load_document
from .tabular import records_to_frame, write_feature_csv, convert_csv_to_arff, load_arff

__all__ = [
    'LabeledDocument',
    'iter_labeled_documents',
    'list_document_files',
    'load_document',
    'records_to_frame',
    'write_feature_csv',
    'convert_csv_to_arff',
    'load_arff',
]
