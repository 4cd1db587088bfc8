"""
Unit tests for movieclassifier/io

Tests corpus iteration order, fail-fast directory checks, CSV output and the
CSV -> ARFF -> DataFrame path.
"""

import pandas as pd
import pytest

from movieclassifier.features.connotation import FEATURE_COLUMNS, FeatureRecord, Label
from movieclassifier.io import (
    convert_csv_to_arff,
    iter_labeled_documents,
    list_document_files,
    load_arff,
    records_to_frame,
    write_feature_csv,
)


@pytest.fixture
def records():
    return [
        FeatureRecord(Label.POSITIVE, positive=3, negative=1, strong=2, weak=0),
        FeatureRecord(Label.NEGATIVE, positive=0, negative=4, strong=1, weak=2),
        FeatureRecord(Label.NEGATIVE),
    ]


class TestDocuments:
    """Tests for the labeled document source."""

    def test_positive_first_then_negative_sorted(self, corpus_dir):
        docs = list(iter_labeled_documents(corpus_dir))
        assert [d.source.name for d in docs] == [
            "cv000_a.txt", "cv001_b.txt", "cv000_c.txt", "cv001_d.txt",
        ]
        assert [d.label for d in docs] == [
            Label.POSITIVE, Label.POSITIVE, Label.NEGATIVE, Label.NEGATIVE,
        ]
        assert docs[0].text.startswith("i love it")

    def test_documents_unpack_as_pairs(self, corpus_dir):
        text, label = next(iter_labeled_documents(corpus_dir))[:2]
        assert label is Label.POSITIVE
        assert isinstance(text, str)

    def test_hidden_files_skipped(self, corpus_dir):
        names = [p.name for p in list_document_files(corpus_dir / "neg")]
        assert ".DS_Store" not in names

    def test_missing_label_directory_fails_fast(self, corpus_dir):
        (corpus_dir / "neg" / "cv000_c.txt").unlink()
        (corpus_dir / "neg" / "cv001_d.txt").unlink()
        (corpus_dir / "neg" / ".DS_Store").unlink()
        (corpus_dir / "neg").rmdir()
        with pytest.raises(FileNotFoundError, match="neg"):
            iter_labeled_documents(corpus_dir)

    def test_missing_corpus(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            iter_labeled_documents(tmp_path / "nowhere")

    def test_custom_directory_names(self, tmp_path):
        (tmp_path / "good").mkdir()
        (tmp_path / "bad").mkdir()
        (tmp_path / "good" / "r1.txt").write_text("fine", encoding="utf-8")
        docs = list(iter_labeled_documents(tmp_path, positive_dir="good", negative_dir="bad"))
        assert len(docs) == 1
        assert docs[0].label is Label.POSITIVE


class TestFeatureCsv:
    """Tests for CSV output."""

    def test_records_to_frame(self, records):
        df = records_to_frame(records)
        assert list(df.columns) == list(FEATURE_COLUMNS)
        assert df.iloc[0].tolist() == [3, 1, 2, 0, "POSITIVE"]

    def test_write_feature_csv(self, records, tmp_path):
        path = tmp_path / "out" / "reviews.csv"
        written = write_feature_csv(records, path)

        assert written == 3
        df = pd.read_csv(path)
        assert list(df.columns) == ["positive", "negative", "strong", "weak", "label"]
        assert df["label"].tolist() == ["POSITIVE", "NEGATIVE", "NEGATIVE"]
        assert df["negative"].tolist() == [1, 4, 0]

    def test_accepts_generator(self, records, tmp_path):
        path = tmp_path / "reviews.csv"
        assert write_feature_csv((r for r in records), path) == 3


class TestArff:
    """Tests for ARFF conversion and loading."""

    def test_round_trip(self, records, tmp_path):
        csv_path = tmp_path / "movie-reviews.csv"
        arff_path = tmp_path / "movie-reviews.arff"
        write_feature_csv(records, csv_path)

        assert convert_csv_to_arff(csv_path, arff_path) == arff_path
        df = load_arff(arff_path)

        assert df.attrs["relation"] == "movie-reviews"
        assert df.attrs["class_attribute"] == "label"
        assert list(df.columns) == list(FEATURE_COLUMNS)
        assert list(df["label"].cat.categories) == ["POSITIVE", "NEGATIVE"]
        assert df["label"].tolist() == ["POSITIVE", "NEGATIVE", "NEGATIVE"]
        assert df["positive"].tolist() == [3, 0, 0]

    def test_class_attribute_is_last(self, records, tmp_path):
        csv_path = tmp_path / "reviews.csv"
        arff_path = tmp_path / "reviews.arff"
        write_feature_csv(records, csv_path)
        convert_csv_to_arff(csv_path, arff_path, relation="reviews")

        attribute_lines = [
            line for line in arff_path.read_text(encoding="utf-8").splitlines()
            if line.upper().startswith("@ATTRIBUTE")
        ]
        assert len(attribute_lines) == 5
        assert "label" in attribute_lines[-1]
        assert "POSITIVE" in attribute_lines[-1]

    def test_missing_csv(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            convert_csv_to_arff(tmp_path / "missing.csv", tmp_path / "out.arff")

    def test_missing_arff(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_arff(tmp_path / "missing.arff")

    def test_empty_records_write_header_only(self, tmp_path):
        csv_path = tmp_path / "empty.csv"
        arff_path = tmp_path / "empty.arff"
        assert write_feature_csv([], csv_path) == 0

        convert_csv_to_arff(csv_path, arff_path)

        text = arff_path.read_text(encoding="utf-8")
        attribute_lines = [
            line for line in text.splitlines() if line.upper().startswith("@ATTRIBUTE")
        ]
        assert all("NUMERIC" in line.upper() for line in attribute_lines[:-1])
        assert "POSITIVE" in attribute_lines[-1]
        assert text.rstrip().endswith("@DATA")

        df = load_arff(arff_path)
        assert len(df) == 0
        assert list(df.columns) == list(FEATURE_COLUMNS)
        assert df.attrs["class_attribute"] == "label"
