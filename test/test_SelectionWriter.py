from switchcover.utils.SelectionWriter import read_selected_switches, write_selected_switches


def test_write_selected_switches(tmp_path):
    filename = tmp_path / "nested" / "selected.txt"
    assert write_selected_switches([True, False, False, True], str(filename)) == 2
    assert filename.read_text() == "0\n3\n"
    assert read_selected_switches(str(filename)) == [0, 3]


def test_write_nothing_selected(tmp_path):
    filename = tmp_path / "selected.txt"
    assert write_selected_switches([False, False], str(filename)) == 0
    assert filename.read_text() == ""
    assert read_selected_switches(str(filename)) == []
