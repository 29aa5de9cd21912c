import os
import sys
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from sparse_calc import (SparseMatrix, SparseCalcConfig, parse_matrix, format_matrix,
                         read_matrix, write_matrix, MalformedInputError, MatrixIOError)
from test_utils import random_sparse, entries, write_text


class TestParseMatrix:

    def test_basic(self):
        text = "rows=2\ncols=3\n(0, 0, 1)\n(1, 2, -7)\n"
        m = parse_matrix(text)
        assert m.shape == (2, 3)
        assert entries(m) == {(0, 0, 1), (1, 2, -7)}

    def test_blank_lines_and_whitespace(self):
        text = "\n  rows=3  \n\n\tcols=3\n\n   (0,0,4)   \n\n(2,   1, 5)\n\n"
        m = parse_matrix(text)
        assert m.shape == (3, 3)
        assert entries(m) == {(0, 0, 4), (2, 1, 5)}

    def test_unparseable_element_is_skipped(self):
        text = "rows=3\ncols=3\n(0, 0, 1)\n(1, 2, abc)\nnot a tuple\n(2, 2, 9)\n"
        m = parse_matrix(text)
        assert entries(m) == {(0, 0, 1), (2, 2, 9)}

    def test_zero_value_is_not_stored(self):
        m = parse_matrix("rows=2\ncols=2\n(0, 0, 0)\n(1, 1, 3)\n")
        assert entries(m) == {(1, 1, 3)}

    def test_later_duplicate_overwrites(self):
        m = parse_matrix("rows=2\ncols=2\n(0, 0, 1)\n(0, 0, 8)\n")
        assert entries(m) == {(0, 0, 8)}

    def test_header_only_plus_junk_is_empty(self):
        m = parse_matrix("rows=4\ncols=5\n# no entries\n")
        assert m.shape == (4, 5)
        assert m.size() == 0

    @pytest.mark.parametrize("text", [
        "",
        "rows=2\n",
        "rows=2\ncols=2\n",
        "\n\nrows=2\n\n\ncols=2\n\n",
    ])
    def test_insufficient_data(self, text):
        with pytest.raises(MalformedInputError, match="insufficient data"):
            parse_matrix(text)

    @pytest.mark.parametrize("text", [
        "cols=2\nrows=2\n(0, 0, 1)\n",
        "rows=x\ncols=2\n(0, 0, 1)\n",
        "rows=2\ncolumns\n(0, 0, 1)\n",
        "(0, 0, 1)\n(0, 0, 1)\n(0, 0, 1)\n",
    ])
    def test_wrong_header(self, text):
        with pytest.raises(MalformedInputError, match="wrong format"):
            parse_matrix(text)

    def test_out_of_range_lenient_by_default(self):
        m = parse_matrix("rows=2\ncols=2\n(5, 0, 1)\n")
        assert m.get(5, 0) == 1

    def test_out_of_range_strict(self):
        config = SparseCalcConfig(strict_bounds=True)
        with pytest.raises(MalformedInputError, match="outside a 2x2 matrix"):
            parse_matrix("rows=2\ncols=2\n(0, 2, 1)\n", config)
        m = parse_matrix("rows=2\ncols=2\n(1, 1, 1)\n", config)
        assert entries(m) == {(1, 1, 1)}

    def test_non_ascii_digits_are_not_numbers(self):
        # Arabic-Indic digits do not count as \d in the file format
        with pytest.raises(MalformedInputError, match="wrong format"):
            parse_matrix("rows=٣\ncols=2\n(0, 0, 1)\n")
        with pytest.raises(MalformedInputError, match="wrong format"):
            parse_matrix("rows=2\ncols=٢\n(0, 0, 1)\n")
        m = parse_matrix("rows=3\ncols=3\n(٣, 0, 1)\n(0, 1, ٥)\n(2, 2, 4)\n")
        assert entries(m) == {(2, 2, 4)}


class TestFormatMatrix:

    def test_format(self):
        m = SparseMatrix.from_triples(2, 2, [(0, 0, 6), (1, 1, 10)])
        assert format_matrix(m) == "rows=2\ncols=2\n(0, 0, 6)\n(1, 1, 10)\n"

    def test_format_empty(self):
        assert format_matrix(SparseMatrix(3, 1)) == "rows=3\ncols=1\n"


class TestFileRoundTrip:

    def test_round_trip(self, tmp_path):
        rng = np.random.default_rng(7)
        for idx in range(5):
            m = random_sparse(rng, 8, 6)
            fp = str(tmp_path / f"m{idx}.txt")
            write_matrix(fp, m)
            loaded = read_matrix(fp)
            assert loaded == m

    def test_round_trip_via_methods(self, tmp_path):
        m = SparseMatrix.from_triples(3, 4, [(2, 3, -1), (0, 1, 12)])
        fp = str(tmp_path / "m.txt")
        m.save_to_file(fp)
        assert SparseMatrix.from_file(fp) == m

    def test_read_written_by_hand(self, tmp_path):
        fp = write_text(tmp_path, "a.txt", "rows=2\ncols=2\n(0,0,1)\n(0,1,2)\n(1,0,3)\n(1,1,4)\n")
        m = read_matrix(fp)
        assert entries(m) == {(0, 0, 1), (0, 1, 2), (1, 0, 3), (1, 1, 4)}

    def test_missing_file(self, tmp_path):
        fp = str(tmp_path / "does_not_exist.txt")
        with pytest.raises(MatrixIOError, match="Unable to read input file") as excinfo:
            read_matrix(fp)
        assert excinfo.value.filename == fp
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_unwritable_path(self, tmp_path):
        fp = str(tmp_path / "no_such_dir" / "out.txt")
        with pytest.raises(MatrixIOError, match="Unable to write output file"):
            write_matrix(fp, SparseMatrix(1, 1))

    def test_malformed_file_reports_filename(self, tmp_path):
        fp = write_text(tmp_path, "bad.txt", "rows=2\n")
        with pytest.raises(MalformedInputError) as excinfo:
            read_matrix(fp)
        assert excinfo.value.filename == fp

    def test_null_byte_in_read_path(self, tmp_path):
        fp = str(tmp_path / "a\x00b.txt")
        with pytest.raises(MatrixIOError, match="Unable to read input file"):
            read_matrix(fp)

    def test_null_byte_in_write_path(self, tmp_path):
        fp = str(tmp_path / "a\x00b.txt")
        with pytest.raises(MatrixIOError, match="Unable to write output file"):
            write_matrix(fp, SparseMatrix(1, 1))
