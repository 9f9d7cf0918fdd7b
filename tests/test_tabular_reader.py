import numpy as np
import pytest

from cvengine.api import load_dataset_table
from cvengine.errors import InvalidInputError


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_features_target_and_stratum(tmp_path):
    path = _write(
        tmp_path,
        "table.csv",
        "x1,x2,y,site\n1,2,3.5,a\n2,3,4.5,a\n3,4,5.5,b\n",
    )
    ds = load_dataset_table(path, target="y", stratum="site")
    assert ds.X.shape == (3, 2)
    np.testing.assert_allclose(ds.y, [3.5, 4.5, 5.5])
    assert ds.strata.tolist() == ["a", "a", "b"]


def test_explicit_features_and_inferred_semicolon(tmp_path):
    path = _write(tmp_path, "table.txt", "x1;x2;y\n1;10;0\n2;20;1\n")
    ds = load_dataset_table(path, target="y", features=["x2"])
    np.testing.assert_allclose(ds.X[:, 0], [10.0, 20.0])


def test_missing_target_column(tmp_path):
    path = _write(tmp_path, "table.csv", "a,b\n1,2\n")
    with pytest.raises(InvalidInputError):
        load_dataset_table(path, target="y")


def test_non_numeric_cells(tmp_path):
    path = _write(tmp_path, "table.csv", "x,y\n1,2\nfoo,3\n")
    with pytest.raises(InvalidInputError):
        load_dataset_table(path, target="y")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset_table(tmp_path / "nope.csv", target="y")
