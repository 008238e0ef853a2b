"""
Tests for record loading, validation and wrap-around splitting.
"""

import io

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from clear_arc.records import (
    ValidationError,
    as_record_array,
    iter_cover_ranges,
    load_records,
    split_record,
    validate_record,
)


class TestValidateRecord:
    """Tests for validate_record()."""

    def test_returns_floats(self):
        assert validate_record("0.25", np.float64(0.5)) == (0.25, 0.5)

    def test_wrap_record_is_valid(self):
        assert validate_record(0.7, 0.3) == (0.7, 0.3)

    def test_zero_length_rejected(self):
        with pytest.raises(ValidationError, match="zero-length"):
            validate_record(0.4, 0.4)

    @pytest.mark.parametrize("x1,x2", [(-0.1, 0.5), (0.2, 1.01), (float('nan'), 0.5), (0.1, float('inf'))])
    def test_out_of_range_rejected(self, x1, x2):
        with pytest.raises(ValidationError, match=r"\[0, 1\]"):
            validate_record(x1, x2)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="numbers") as exc_info:
            validate_record("abc", 0.5)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_mentions_index(self):
        with pytest.raises(ValidationError, match="record 3"):
            validate_record(0.5, 0.5, index=3)


class TestSplitRecord:
    """Tests for split_record()."""

    def test_normal_record(self):
        assert split_record(0.2, 0.5) == [(0.2, 0.5)]

    def test_wrap_record_splits_in_two(self):
        assert split_record(0.7, 0.3) == [(0.0, 0.3), (0.7, 1.0)]

    def test_wrap_from_one_drops_empty_half(self):
        assert split_record(1.0, 0.3) == [(0.0, 0.3)]

    def test_wrap_to_zero_drops_empty_half(self):
        assert split_record(0.7, 0.0) == [(0.7, 1.0)]

    def test_full_wrap(self):
        assert split_record(1.0, 0.0) == []


class TestIterCoverRanges:
    """Tests for as_record_array() and iter_cover_ranges()."""

    def test_empty_input(self):
        assert as_record_array([]).shape == (0, 2)
        assert list(iter_cover_ranges([])) == []

    def test_bad_shape_rejected(self):
        with pytest.raises(ValidationError, match=r"shape \(N, 2\)"):
            as_record_array([0.1, 0.2, 0.3])

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError):
            as_record_array([(0.1, 0.2), (0.3,)])

    def test_yields_index_and_ranges(self):
        result = list(iter_cover_ranges([(0.2, 0.5), (0.9, 0.1)]))
        assert result == [
            (0, [(0.2, 0.5)]),
            (1, [(0.0, 0.1), (0.9, 1.0)]),
        ]

    def test_validation_is_lazy(self):
        ranges = iter_cover_ranges([(0.2, 0.5), (0.5, 0.5)])
        assert next(ranges) == (0, [(0.2, 0.5)])
        with pytest.raises(ValidationError, match="record 1"):
            next(ranges)


class TestLoadRecords:
    """Tests for load_records()."""

    def test_whitespace_and_comma_separated(self):
        stream = io.StringIO("0.1 0.2\n0.3,0.4\n  0.9\t0.05  \n")
        records = load_records(stream)
        assert records.dtype == np.float64
        assert_array_equal(records, [[0.1, 0.2], [0.3, 0.4], [0.9, 0.05]])

    def test_blank_lines_and_comments_ignored(self):
        stream = io.StringIO("# header\n\n0.1 0.2  # first\n\n")
        assert_array_equal(load_records(stream), [[0.1, 0.2]])

    def test_empty_stream(self):
        assert load_records(io.StringIO("")).shape == (0, 2)

    def test_single_record_is_two_dimensional(self):
        assert load_records(io.StringIO("0.1 0.2\n")).shape == (1, 2)

    def test_wrong_field_count(self):
        with pytest.raises(ValidationError, match="line 2"):
            load_records(io.StringIO("0.1 0.2\n0.3 0.4 0.5\n"))

    def test_non_numeric_field(self):
        with pytest.raises(ValidationError, match="line 1: could not parse") as exc_info:
            load_records(io.StringIO("0.1 abc\n"))
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_error_line_counts_comments_and_blanks(self):
        """Line numbers refer to the source text, not to the parsed rows."""
        stream = io.StringIO("# header\n\n0.1 0.2\n# note\n0.3 x\n")
        with pytest.raises(ValidationError, match="line 5"):
            load_records(stream)

    def test_field_count_error_line_after_comments(self):
        stream = io.StringIO("# header\n0.1 0.2\n\n0.3\n")
        with pytest.raises(ValidationError, match="line 4"):
            load_records(stream)

    def test_from_path(self, tmp_path):
        path = tmp_path / "records.txt"
        path.write_text("0.2 0.5\n0.6 0.9\n", encoding="utf-8")
        assert_array_equal(load_records(path), [[0.2, 0.5], [0.6, 0.9]])
        assert_array_equal(load_records(str(path)), [[0.2, 0.5], [0.6, 0.9]])

    def test_missing_path_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_records(tmp_path / "missing.txt")
