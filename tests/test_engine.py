import numpy as np
import pytest
from linreg.engine import Dataset, InvalidDatasetError


def test_dataset_converts_to_float_arrays():
    dataset = Dataset([1, 2, 3], [4, 5, 6])
    assert dataset.x.dtype == np.float64
    assert dataset.y.dtype == np.float64
    assert len(dataset) == 3
    assert dataset.verbose is False


def test_dataset_iterates_pairs_in_order():
    dataset = Dataset([1.0, 2.0], [3.0, 4.0])
    assert list(dataset) == [(1.0, 3.0), (2.0, 4.0)]


def test_dataset_rejects_mismatched_lengths():
    with pytest.raises(InvalidDatasetError, match="same length"):
        Dataset([1.0, 2.0, 3.0], [1.0, 2.0])


def test_dataset_rejects_empty():
    with pytest.raises(InvalidDatasetError, match="empty"):
        Dataset([], [])


def test_dataset_rejects_2d_input():
    with pytest.raises(InvalidDatasetError, match="1-D"):
        Dataset([[1.0, 2.0]], [[1.0, 2.0]])


def test_invalid_dataset_error_is_value_error():
    with pytest.raises(ValueError):
        Dataset([1.0], [])


def test_from_csv_with_header(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x,y\n1,2\n3,4\n5,6\n")
    dataset = Dataset.from_csv(path, verbose=True)
    np.testing.assert_array_equal(dataset.x, [1.0, 3.0, 5.0])
    np.testing.assert_array_equal(dataset.y, [2.0, 4.0, 6.0])
    assert dataset.verbose is True


def test_from_csv_without_header_single_row(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1.5,2.5\n")
    dataset = Dataset.from_csv(path)
    np.testing.assert_array_equal(dataset.x, [1.5])
    np.testing.assert_array_equal(dataset.y, [2.5])


def test_from_csv_wrong_column_count(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1,2,3\n4,5,6\n")
    with pytest.raises(InvalidDatasetError, match="expected 2 columns"):
        Dataset.from_csv(path)


def test_from_csv_rejects_missing_value(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x,y\n1,2\n3,\n5,6\n")
    with pytest.raises(InvalidDatasetError, match="row 1"):
        Dataset.from_csv(path)


def test_from_csv_rejects_non_numeric_value(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1,2\nabc,4\n")
    with pytest.raises(InvalidDatasetError, match="non-numeric"):
        Dataset.from_csv(path)

def test_from_csv_header_only_is_empty(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("x,y\n")
    with pytest.raises(InvalidDatasetError, match="empty"):
        Dataset.from_csv(path)


def test_repr():
    assert repr(Dataset([1.0], [2.0])) == "Dataset(n=1, verbose=False)"
