import main


def write_dataset(tmp_path, text):
    path = tmp_path / "flows.csv"
    path.write_text(text)
    return str(path)


def test_greedy_run(tmp_path, capsys):
    dataset = write_dataset(tmp_path, "flow_id,switch_id\n0,0\n1,0\n1,1\n2,1\n")
    output = tmp_path / "selected.txt"
    assert main.main([dataset, "--output", str(output)]) == 0
    out = capsys.readouterr().out
    assert "Step 1: chose switch 0 (gain = 2, total covered = 2/3)" in out
    assert "Step 2: chose switch 1 (gain = 1, total covered = 3/3)" in out
    assert "Total chosen switches = 2 / 2" in out
    assert "Flows actually covered = 3 / 3" in out
    assert output.read_text() == "0\n1\n"


def test_quiet_heap_run(tmp_path, capsys):
    dataset = write_dataset(tmp_path, "flow_id,switch_id\n0,0\n1,0\n1,1\n2,1\n")
    output = tmp_path / "selected.txt"
    assert main.main([dataset, "--strategy", "heap", "--quiet", "--output", str(output)]) == 0
    assert "Step 1" not in capsys.readouterr().out
    assert output.read_text() == "0\n1\n"


def test_strict_run_with_uncovered_flow(tmp_path, capsys):
    # flow 1 has no row and therefore an empty path
    dataset = write_dataset(tmp_path, "flow_id,switch_id\n0,0\n2,1\n")
    output = tmp_path / "selected.txt"
    assert main.main([dataset, "--output", str(output)]) == 0
    assert main.main([dataset, "--strict", "--output", str(output)]) == 1
    captured = capsys.readouterr()
    assert "not all flows are covered" in captured.out
    assert "1 of 3 flows cannot be covered" in captured.err
    assert output.read_text() == "0\n1\n"


def test_ilp_run(tmp_path, capsys):
    dataset = write_dataset(tmp_path, "flow_id,switch_id\n0,0\n0,2\n1,0\n1,2\n2,0\n3,1\n3,2\n4,1\n4,2\n5,1\n")
    output = tmp_path / "selected.txt"
    assert main.main([dataset, "--solver", "ilp", "--time-limit", "10", "--output", str(output)]) == 0
    assert "Total chosen switches = 2 / 3" in capsys.readouterr().out
    assert output.read_text() == "0\n1\n"


def test_backend_choices_match_solver():
    from switchcover.solver.PulpSolver import BACKENDS

    for backend in BACKENDS:
        assert main.parse_args(["flows.csv", "--backend", backend]).backend == backend
