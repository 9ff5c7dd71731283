import numpy as np

from scripts.benchmark import main, summarize, time_call


def test_summarize_timings():
    row = summarize("x", np.array([1.0, 2.0, 3.0]))
    assert row["iterations"] == 3
    assert row["mean_ms"] == 2.0
    assert row["median_ms"] == 2.0
    assert row["ops_per_sec"] == 500.0


def test_summarize_empty_timings():
    row = summarize("x", time_call(lambda: None, 0))
    assert row["iterations"] == 0
    assert row["p95_ms"] == 0.0


def test_zero_iterations_run_cleanly(tmp_path, capsys):
    out = tmp_path / "bench.json"
    main(["--iters", "0", "--seven-card-hands", "0", "--out", str(out)])
    assert out.exists()
    assert "7-card hand" in capsys.readouterr().out
