from kmeans_parallel.run_kmeans import main, parse_args


def _dataset_file(tmp_path, rows):
    path = tmp_path / "points.csv"
    path.write_text("".join(f"{x},{y}\n" for x, y in rows))
    return str(path)


def test_main_runs_both_modes(tmp_path, capsys):
    path = _dataset_file(tmp_path, [(0, 0), (1, 0), (0, 1), (9, 9), (10, 9), (9, 10)])
    args = parse_args(
        [
            path,
            "2",
            "--mode", "both",
            "--replication_factor", "2",
            "--task_count", "3",
            "--worker_count", "2",
            "--upper_bound", "10",
            "--seed", "0",
            "--plot", str(tmp_path / "out.html"),
        ]
    )
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "with 12 records" in out
    assert "Sequential version" in out
    assert "Concurrent version" in out
    assert (tmp_path / "out.html").exists()


def test_main_missing_file(tmp_path):
    args = parse_args([str(tmp_path / "missing.csv"), "3"])
    assert main(args) == 1


def test_main_invalid_config(tmp_path):
    path = _dataset_file(tmp_path, [(0, 0)])
    assert main(parse_args([path, "1", "--task_count", "0"])) == 1


def test_main_iteration_cap(tmp_path):
    path = _dataset_file(tmp_path, [(100, 100), (102, 100)])
    args = parse_args(
        [path, "1", "--replication_factor", "1", "--upper_bound", "10", "--max_iterations", "1"]
    )
    assert main(args) == 1


def test_parse_args_defaults():
    args = parse_args(["points.csv", "4"])
    assert args.k == 4
    assert args.mode == "concurrent"
    assert args.max_iterations is None
    assert args.tolerance == 0.0
