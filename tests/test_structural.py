"""Tests for structural operations: add, append, merge, transpose, sort, group."""

import logging

import pytest

from labelframe import (
    DuplicateIdError,
    Frame,
    IncompatibleDimensionError,
    InvalidSelectorError,
    RowNameMismatchError,
    UnknownNameError,
)


def cmp(a, b):
    """Old-style three-way comparison."""
    return (a > b) - (a < b)


class TestAddRowAndCol:
    """Test adding single rows and columns."""

    def test_append_named_row(self, animals):
        """Test appending a named row and rejecting its duplicate."""
        animals.append({"bug": {"length": 1, "height": 1}})
        assert animals.row_names == ["giraffe", "snake", "bug"]
        assert animals["bug"] == [1, 1]
        with pytest.raises(DuplicateIdError):
            animals.append(Frame.create({"bug": {"length": 1, "height": 1}}))

    def test_append_sequence_gets_generated_name(self, animals):
        """Test that an appended sequence gets a generated name."""
        animals.append([1, 1])
        assert animals[2] == Frame.create(1, 1)
        assert animals["_2"] == Frame.create(1, 1)

    def test_sequence_length_must_match(self, animals):
        """Test that a row of the wrong length is rejected."""
        with pytest.raises(IncompatibleDimensionError, match="length 3"):
            animals.append([1, 1, 1])
        assert animals.shape == (2, 2)

    def test_duplicate_row_name(self, animals):
        """Test that a repeated row name adds nothing."""
        with pytest.raises(DuplicateIdError, match="snake"):
            animals.add_row([1, 2], "snake")
        assert animals.shape == (2, 2)

    def test_duplicate_name_creates_no_columns(self, animals):
        """Test that a rejected mapping row creates no columns."""
        with pytest.raises(DuplicateIdError):
            animals.add_row({"wings": 2, "height": 1}, "snake")
        assert animals.col_names == ["height", "length"]

    def test_mapping_creates_sorted_columns(self, animals):
        """Test that new mapping keys become sorted columns."""
        animals.add_row({"size": 4, "length": 1, "age": 2}, "bug")
        assert animals.col_names == ["height", "length", "age", "size"]
        assert animals["bug"] == [None, 1, 2, 4]
        assert animals["snake"] == [1, 10, None, None]

    def test_add_col(self, animals):
        """Test adding named and generated columns."""
        assert animals.add_col() == "_2"
        assert animals["giraffe", "_2"] is None
        assert animals.add_col("weight") == "weight"
        assert animals.shape == (2, 4)
        with pytest.raises(DuplicateIdError):
            animals.add_col("height")

    def test_add_col_to_empty_frame(self):
        """Test adding a column and then a row to an empty frame."""
        d = Frame()
        d.add_col("a")
        d.add_row([1])
        assert d.to_array() == 1

    def test_bad_row_type(self, animals):
        """Test that non-row values are rejected."""
        with pytest.raises(InvalidSelectorError):
            animals.add_row(5)
        with pytest.raises(InvalidSelectorError):
            animals.append(5)

    def test_num_rows_and_cols_grow_only(self, animals):
        """Test that the size setters only grow."""
        animals.num_rows = 4
        animals.num_cols = 3
        assert animals.shape == (4, 3)
        animals.num_rows = 1
        assert animals.shape == (4, 3)


class TestAppendFrame:
    """Test appending whole frames."""

    def test_append_frame(self, animals):
        """Test appending every row of another frame."""
        animals.append(
            Frame.create(
                {
                    "car": {"length": 9, "height": 5},
                    "truck": {"length": 10, "height": 6},
                }
            )
        )
        assert animals == Frame.create([[10, 3], [1, 10], [5, 9], [6, 10]])
        assert animals.row_names == ["giraffe", "snake", "car", "truck"]

    def test_append_uneven_frame(self, animals):
        """Test that missing columns are null-filled on append."""
        animals.append(Frame.create({"bug": {"length": 1}}))
        assert animals["bug"] == Frame.create(None, 1)

    def test_append_frame_with_new_columns(self, animals):
        """Test that appended columns are created on both sides."""
        animals.append(Frame.create({"bug": {"length": 1, "size": 4}}))
        assert animals["bug"] == Frame.create(None, 1, 4)
        assert animals["bug", "size"] == 4
        assert animals["snake"] == Frame.create(1, 10, None)

    def test_generated_row_names_are_renumbered(self, animals):
        """Test that generated names are renumbered on append."""
        animals.append(Frame([[7, 8]], None, ["height", "length"]))
        assert animals.row_names == ["giraffe", "snake", "_2"]
        assert animals["_2", "length"] == 8


class TestMerge:
    """Test merging columns by row."""

    def test_merge_by_row(self, animals):
        """Test merging columns and rejecting overlapping names."""
        other = Frame.create(
            {
                "snake": {"length2": 11, "height2": 2},
                "giraffe": {"length2": 4, "height2": 11},
            }
        )
        animals.merge_by_row(other)
        assert animals == Frame.create([[10, 3, 11, 4], [1, 10, 2, 11]])
        assert animals.col_names == ["height", "length", "height2", "length2"]
        assert animals["snake", "length2"] == 11
        with pytest.raises(DuplicateIdError, match="height2"):
            animals.merge_by_row(other)

    def test_row_names_must_match(self, animals):
        """Test that merging needs identical row names."""
        other = Frame([[1], [2]], ["snake", "giraffe"], ["weight"])
        with pytest.raises(RowNameMismatchError):
            animals.merge_by_row(other)
        with pytest.raises(IncompatibleDimensionError):
            animals.cbind(Frame([[1]], ["snake"], ["weight"]))
        assert animals.shape == (2, 2)

    def test_merged_columns_are_copied(self, animals):
        """Test that merged cells do not alias the other frame."""
        other = Frame([[1], [2]], ["giraffe", "snake"], ["weight"])
        animals.merge_by_row(other)
        other[0, 0] = 99
        assert animals["giraffe", "weight"] == 1


class TestTranspose:
    """Test transposition."""

    def test_transpose(self, animals):
        """Test swapping rows and columns."""
        t = animals.transpose()
        assert t.row_names == ["height", "length"]
        assert t.col_names == ["giraffe", "snake"]
        assert t == Frame.create([[10, 1], [3, 10]])
        assert animals.T == t

    def test_transpose_is_a_copy(self, animals):
        """Test that the transpose is independent."""
        t = animals.T
        t.set_value(0, 0, 0)
        assert animals[0, 0] == 10


class TestSort:
    """Test sorting by comparator, by value and by name."""

    def test_sort_rows_and_cols(self, three_animals):
        """Test sorting with comparators over sub-frames."""
        rows = three_animals.sort_rows(
            lambda a, b: cmp(b[True, "length"].to_array(), a[True, "length"].to_array())
        )
        assert rows.row_names == ["snake", "giraffe", "bug"]
        assert rows == Frame.create([[1, 10], [10, 3], [0, 1]])

        cols = rows.sort_cols(
            lambda a, b: cmp(b["snake", True].to_array(), a["snake", True].to_array())
        )
        assert cols.col_names == ["length", "height"]
        assert cols == Frame.create([[10, 1], [3, 10], [1, 0]])
        assert three_animals.row_names == ["bug", "giraffe", "snake"]

    def test_sort_by_value(self, three_animals):
        """Test sorting by a column's or row's values."""
        rows = three_animals.sort_rows_by_col("length", ascending=False)
        assert rows.row_names == ["snake", "giraffe", "bug"]
        assert rows == Frame.create([[1, 10], [10, 3], [0, 1]])
        cols = rows.sort_cols_by_row("snake", ascending=False)
        assert cols == Frame.create([[10, 1], [3, 10], [1, 0]])
        assert three_animals.sort_rows_by_col("length").row_names == [
            "bug",
            "giraffe",
            "snake",
        ]

    def test_sort_by_unknown_name(self, animals):
        """Test that value sorts on unknown names raise."""
        with pytest.raises(UnknownNameError):
            animals.sort_rows_by_col("weight")
        with pytest.raises(UnknownNameError):
            animals.sort_cols_by_row("monkey")

    def test_none_sorts_first_and_ties_keep_order(self):
        """Test None ordering and sort stability."""
        d = Frame([[None], [2], [1], [2]], ["a", "b", "c", "d"], ["x"])
        assert d.sort_rows_by_col("x").row_names == ["a", "c", "b", "d"]
        assert d.sort_rows_by_col("x", ascending=False).row_names == ["b", "d", "c", "a"]

    def test_resort_rows(self, animals):
        """Test reordering rows by name in place."""
        animals.append({"bug": {"length": 1, "height": 1}})
        animals.resort_rows()
        assert animals.row_names == ["bug", "giraffe", "snake"]
        assert animals[2] == Frame.create(1, 10)
        assert animals["bug", "length"] == 1

    def test_resort(self, animals):
        """Test reordering rows and columns by name."""
        animals.append({"bug": {"length": 1, "age": 0}})
        assert animals[2] == Frame.create(None, 1, 0)
        animals.resort()
        assert animals.col_names == ["age", "height", "length"]
        assert animals[2] == Frame.create(None, 1, 10)
        assert animals["bug", "age"] == 0

    def test_resort_is_idempotent(self, animals):
        """Test that resorting a sorted frame changes nothing."""
        animals.append({"ant": {"length": 1, "height": 1}})
        animals.resort()
        once = animals.copy()
        animals.resort()
        assert animals == once
        assert animals.row_names == once.row_names
        assert animals.col_names == once.col_names


class TestGroups:
    """Test grouping rows by a column's values."""

    @pytest.fixture
    def snakes(self):
        """Two snakes of equal height and a bug."""
        return Frame.create(
            {
                "snake": {"length": 10, "height": 1},
                "snake2": {"length": 11, "height": 1},
                "bug": {"length": 1, "height": 0},
            }
        )

    def test_group_by(self, snakes):
        """Test that group_by passes each run of equal values."""
        groups = []
        snakes.group_by("height", groups.append)
        assert len(groups) == 2
        assert groups[0] == Frame.create([[0, 1]])
        assert groups[1] == Frame.create([[1, 10], [1, 11]])
        assert groups[1].row_names == ["snake", "snake2"]

    def test_iter_groups_values(self, snakes):
        """Test that groups come out in ascending value order."""
        assert [value for value, _ in snakes.iter_groups("height")] == [0, 1]

    def test_empty_frame_has_no_groups(self):
        """Test that an empty frame yields no groups."""
        d = Frame(col_names=["height"])
        assert list(d.iter_groups("height")) == []


class TestNames:
    """Test renaming and name lookups."""

    def test_prefix_col_names(self, animals):
        """Test prefixing every column name."""
        animals.prefix_col_names("S.")
        assert animals.col_names == ["S.height", "S.length"]
        assert animals["snake", "S.length"] == 10

    def test_set_col_names(self, animals):
        """Test replacing the column names."""
        animals.set_col_names(["animal_height", "animal_length"])
        assert animals["snake", "animal_length"] == 10
        assert animals["snake", "length"] is None

    def test_set_names_validates(self, animals):
        """Test the length and uniqueness checks on renames."""
        with pytest.raises(IncompatibleDimensionError):
            animals.set_col_names(["a"])
        with pytest.raises(DuplicateIdError):
            animals.set_row_names(["a", "a"])
        assert animals.row_names == ["giraffe", "snake"]

    def test_reindex_names(self, animals):
        """Test that reindexing keeps lookups correct."""
        animals.reindex_names()
        assert animals.row_index.lookup("snake") == 1
        assert animals.col_index.lookup("length") == 1

    def test_name_indexes_are_copies(self, animals):
        """Test that changing a returned index leaves the frame alone."""
        animals.row_index.append("monkey")
        assert animals.row_names == ["giraffe", "snake"]
        assert animals.row_position("monkey") is None
        assert animals.row_position("snake") == 1
        assert animals.col_position("length") == 1


class TestLogging:
    """Test debug records for column changes."""

    def test_column_creation_is_logged(self, animals, caplog):
        """Test that created columns emit debug records."""
        with caplog.at_level(logging.DEBUG, logger="labelframe"):
            animals.add_col("weight")
            animals.add_row({"wings": 2}, "bug")
        assert "'weight'" in caplog.text
        assert "'wings'" in caplog.text

    def test_prefix_is_logged(self, animals, caplog):
        """Test that prefixing column names emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="labelframe"):
            animals.prefix_col_names("S.")
        assert "S." in caplog.text
