import logging

import pytest

from switchcover.utils.DatasetLoader import build_paths, load_dataset_csv, write_dataset_csv
from switchcover.utils.Errors import InvalidIndexError


def write(tmp_path, text):
    path = tmp_path / "flows.csv"
    path.write_text(text)
    return str(path)


def test_load_dataset(tmp_path):
    filename = write(tmp_path, "flow_id,switch_id\n0,0\n1,0\n1,1\n\n2,1\n")
    n_flows, n_switches, paths = load_dataset_csv(filename)
    assert n_flows == 3
    assert n_switches == 2
    assert paths == [[0], [0, 1], [1]]


def test_load_keeps_order_and_duplicates(tmp_path):
    filename = write(tmp_path, "flow,switch\n0,5\n0,3\n0,5\n")
    assert load_dataset_csv(filename) == (1, 6, [[5, 3, 5]])


def test_gap_in_flow_ids_gives_empty_path(tmp_path, caplog):
    filename = write(tmp_path, "flow_id,switch_id\n0,1\n2,0\n")
    with caplog.at_level(logging.WARNING):
        n_flows, n_switches, paths = load_dataset_csv(filename)
    assert paths == [[1], [], [0]]
    assert "flow 1 has no switches" in caplog.text


def test_rows_missing_a_field_are_skipped(tmp_path):
    filename = write(tmp_path, "flow_id,switch_id\n0,0\n1\n1,\n1,2\n")
    assert load_dataset_csv(filename) == (2, 3, [[0], [2]])


def test_negative_id(tmp_path):
    filename = write(tmp_path, "flow_id,switch_id\n0,-1\n")
    with pytest.raises(InvalidIndexError):
        load_dataset_csv(filename)


def test_non_numeric_id(tmp_path):
    filename = write(tmp_path, "flow_id,switch_id\n0,a\n")
    with pytest.raises(ValueError):
        load_dataset_csv(filename)


def test_empty_files(tmp_path):
    with pytest.raises(ValueError):
        load_dataset_csv(write(tmp_path, ""))
    with pytest.raises(ValueError):
        load_dataset_csv(write(tmp_path, "flow_id,switch_id\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset_csv(str(tmp_path / "missing.csv"))


def test_build_paths():
    assert build_paths([(1, 2), (0, 0), (1, 0)]) == (2, 3, [[0], [2, 0]])
    assert build_paths([]) == (0, 0, [])


def test_written_dataset_loads_back(tmp_path):
    filename = str(tmp_path / "out" / "flows.csv")
    write_dataset_csv([[0, 2], [1], [2, 2]], filename)
    with open(filename) as f:
        assert f.readline().strip() == "flow_id,switch_id"
    assert load_dataset_csv(filename) == (3, 3, [[0, 2], [1], [2, 2]])
