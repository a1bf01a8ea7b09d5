"""
Benchmark harness: timing, probe verification, experiment runner and CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from sortkit.algorithms import get_algorithm
from sortkit.bench.measure import time_sort_call, verify_output
from sortkit.bench.runner import ExperimentConfig, main, run_experiment


def _broken_sort(a, *, config=None, compare=None):
    # Drops the last element.
    return sorted(a)[:-1]


def _crashing_sort(a, *, config=None, compare=None):
    raise RuntimeError("boom")


def _unstable_sort(a, *, config=None, compare=None):
    return sorted(a, key=lambda t: (t[0], -t[1]))


def _by_key(a, b):
    return a[0] - b[0]


def _fails_after_first_call():
    calls = []

    def sort(a, *, config=None, compare=None):
        calls.append(1)
        if len(calls) > 1:
            raise RuntimeError("second call boom")
        return sorted(a)

    return sort


def _time(algo_fn, a, **overrides):
    kwargs = dict(
        algo_name="x",
        algo_fn=algo_fn,
        a=a,
        config={},
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


# ------------------------- measure ------------------------- #

def test_time_sort_call_ok_counts_comparisons() -> None:
    res = _time(get_algorithm("insertion_sort"), list(range(50)))
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert all(t >= 0 for t in res["samples_ns"])
    assert res["comparisons"] == 49


def test_time_sort_call_flags_invalid_output() -> None:
    res = _time(_broken_sort, [3, 1, 2])
    assert res["status"] == "invalid"
    assert "permutation" in res["error"]
    assert res["samples_ns"] == []


def test_time_sort_call_without_verify_times_anyway() -> None:
    res = _time(_broken_sort, [3, 1, 2], verify=False)
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3


def test_time_sort_call_reports_errors() -> None:
    res = _time(_crashing_sort, [1, 2])
    assert res["status"] == "error"
    assert "boom" in res["error"]


def test_time_sort_call_records_warmup_failure() -> None:
    res = _time(_fails_after_first_call(), [3, 1, 2])
    assert res["status"] == "error"
    assert res["error"].startswith("warmup failed")
    assert "second call boom" in res["error"]
    assert res["comparisons"] is not None
    assert res["samples_ns"] == []


def test_time_sort_call_timeout_stops_sampling() -> None:
    res = _time(get_algorithm("bubble_sort"), list(range(300, 0, -1)), timeout_seconds=1e-9)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_rejects_bad_arguments() -> None:
    with pytest.raises(ValueError):
        _time(_broken_sort, [], repeats=-1)
    with pytest.raises(ValueError):
        _time(_broken_sort, [], timeout_seconds=0)


def test_verify_output_stability() -> None:
    a = [(1, 0), (1, 1)]
    assert verify_output(a, _unstable_sort(a), compare=_by_key) is None
    assert verify_output(a, _unstable_sort(a), compare=_by_key, stable=True) == "output differs from the stable oracle"
    assert "out of order" in verify_output([2, 1], [2, 1])


# ------------------------- runner ------------------------- #

def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 3,
        "repeats": 2,
        "warmup": False,
        "disable_gc": True,
        "timeout_seconds": 5.0,
        "dataset": {"dist": "random", "params": {"range": [0, 99]}},
        "sizes": [8, 32],
        "algorithms": [
            {"name": "tim_sort", "config": {"min_run": 4}},
            {"name": "quick_sort"},
            "merge_sort_iterative",
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "exp.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))
    assert run_dir.parent == tmp_path / "runs"
    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta and "machine" in meta

    lines = (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3 * 2 * 2  # algorithms x sizes x repeats

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"tim_sort", "quick_sort", "merge_sort_iterative"}
    assert set(summary["n"]) == {8, 32}
    assert (summary["samples_ok"] == 2).all()
    assert (summary["comparisons"] > 0).all()


def test_failing_algorithm_is_skipped_for_larger_sizes(tmp_path: Path) -> None:
    cfg = _write_config(
        tmp_path,
        timeout_seconds=1e-9,
        algorithms=["bubble_sort"],
        dataset={"dist": "reversed"},
        sizes=[50, 100],
    )
    run_dir = run_experiment(cfg)
    rows = [json.loads(x) for x in (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()]
    statuses = [r for r in rows if "status" in r]
    assert len(statuses) == 1
    assert statuses[0]["status"] == "timeout"
    assert {r["n"] for r in rows} == {50}


def test_output_dir_override(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path), output_dir=tmp_path / "elsewhere")
    assert run_dir.parent == tmp_path / "elsewhere"


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"sizes": []}, "sizes"),
        ({"repeats": 0}, "repeats"),
        ({"timeout_seconds": 0}, "timeout_seconds"),
        ({"algorithms": [{"name": "tim_sort"}, {"name": "tim_sort"}]}, "Duplicate"),
        ({"algorithms": [{"name": "tim_sort", "config": {"min_run": 0}}]}, "min_run"),
        ({"algorithms": [{"name": "quick_sort", "config": {"min_run": 8}}]}, "Unsupported config"),
    ],
)
def test_invalid_configs(tmp_path: Path, overrides, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        run_experiment(_write_config(tmp_path, **overrides))


def test_missing_keys() -> None:
    with pytest.raises(ValueError, match="Missing required config keys"):
        ExperimentConfig.from_dict({"experiment_name": "x"})


def test_cli_main(tmp_path: Path) -> None:
    main([str(_write_config(tmp_path)), "--output-dir", str(tmp_path / "cli"), "--log-level", "WARNING"])
    runs = list((tmp_path / "cli").iterdir())
    assert len(runs) == 1
    assert (runs[0] / "summary.csv").exists()


def test_cli_missing_config(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])
