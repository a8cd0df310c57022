"""
Tests for the timing harness and the YAML-driven experiment runner.
"""

from __future__ import annotations

import gc
import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import pytest
import yaml

from classicsort.algorithms import load_algorithm
from classicsort.bench.measure import time_sort_call
from classicsort.bench.runner import main, run_experiment


def _call(fn, a: List[Any], **overrides: Any) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = dict(
        algo_name="x",
        algo_fn=fn,
        a=a,
        config=None,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
        defensive_copy=True,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


# ------------------------- measure ------------------------- #

def test_time_sort_call_ok() -> None:
    res = _call(load_algorithm("merge_sort").sort, [3, 1, 2], validate=True)
    assert res["status"] == "ok"
    assert res["error"] is None
    assert len(res["samples_ns"]) == 3
    assert all(isinstance(t, int) and t >= 0 for t in res["samples_ns"])


def test_time_sort_call_defensive_copy_hides_mutation() -> None:
    seen: List[List[int]] = []

    def inplace_and_return(a: List[int], *, config: Optional[dict] = None) -> List[int]:
        seen.append(list(a))
        a.sort()
        return a

    base = [3, 2, 1]
    _call(inplace_and_return, base, warmup=False)
    assert base == [3, 2, 1]
    assert all(s == [3, 2, 1] for s in seen)


def test_time_sort_call_records_errors() -> None:
    def boom(a, *, config=None):
        raise RuntimeError("nope")

    res = _call(boom, [1], warmup=False)
    assert res["status"] == "error"
    assert "RuntimeError" in res["error"]
    assert res["samples_ns"] == []

    res = _call(boom, [1], warmup=True)
    assert res["status"] == "error"
    assert res["error"].startswith("warmup failed")


def test_time_sort_call_validate_flags_wrong_output() -> None:
    def unsorted(a, *, config=None):
        return list(a)

    def lossy(a, *, config=None):
        return sorted(set(a))

    res = _call(unsorted, [2, 1], validate=True)
    assert res["status"] == "error"
    assert "nondecreasing" in res["error"]

    res = _call(lossy, [1, 1, 2], validate=True)
    assert res["status"] == "error"
    assert "differs from the oracle" in res["error"]


def test_time_sort_call_timeout_stops_sampling() -> None:
    def slow(a, *, config=None):
        time.sleep(0.01)
        return sorted(a)

    res = _call(slow, [1, 2], timeout_seconds=0.001, repeats=5, warmup=False)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_restores_gc() -> None:
    assert gc.isenabled()
    _call(load_algorithm("quick_sort").sort, [2, 1], disable_gc=True)
    assert gc.isenabled()


@pytest.mark.parametrize("repeats, timeout", [(-1, 1.0), (1, 0.0)])
def test_time_sort_call_rejects_bad_args(repeats: int, timeout: float) -> None:
    with pytest.raises(ValueError):
        _call(load_algorithm("quick_sort").sort, [1], repeats=repeats, timeout_seconds=timeout)


# ------------------------- runner ------------------------- #

def _write_config(tmp_path: Path, **overrides: Any) -> Path:
    cfg: Dict[str, Any] = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 123,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "validate": True,
        "dataset": {"dist": "uniform_float", "params": {"range": [0.0, 10.0]}},
        "sizes": [8, 32],
        "algorithms": [
            {"name": "quick_sort"},
            {"name": "bucket_sort", "config": None},
            "int_radix_sort",
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(cfg, sort_keys=False), encoding="utf-8")
    return path


def _read_jsonl(path: Path) -> List[Dict[str, Any]]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))

    for name in ("config_resolved.yaml", "meta.json", "results.jsonl", "summary.csv"):
        assert (run_dir / name).exists(), name

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "numpy" in meta and "machine" in meta

    lines = _read_jsonl(run_dir / "results.jsonl")
    timed = [ln for ln in lines if "time_ns" in ln]
    assert {ln["algo"] for ln in timed} == {"quick_sort", "bucket_sort"}
    assert len(timed) == 2 * 2 * 2  # algos * sizes * repeats

    # Radix sort does not take floats; it is skipped at every size.
    skipped = [ln for ln in lines if ln.get("status") == "skipped"]
    assert [(ln["algo"], ln["n"]) for ln in skipped] == [("int_radix_sort", 8), ("int_radix_sort", 32)]

    summary = pd.read_csv(run_dir / "summary.csv")
    assert list(summary.columns) == ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    assert len(summary) == 4
    assert (summary["samples_ok"] == 2).all()
    assert (summary["min_ns"] <= summary["median_ns"]).all()
    assert (summary["median_ns"] <= summary["max_ns"]).all()


def test_run_experiment_drops_algorithm_after_timeout(tmp_path: Path) -> None:
    cfg = _write_config(
        tmp_path,
        timeout_seconds=1e-7,
        dataset={"dist": "random", "params": {"range": [0, 50]}},
        algorithms=[{"name": "counting_sort"}],
    )
    run_dir = run_experiment(cfg)
    lines = _read_jsonl(run_dir / "results.jsonl")
    statuses = [ln for ln in lines if "status" in ln]
    assert [(ln["status"], ln["n"]) for ln in statuses] == [("timeout", 8)]
    assert all(ln["n"] == 8 for ln in lines)


def test_run_experiment_only_skips_gives_empty_summary(tmp_path: Path) -> None:
    cfg = _write_config(tmp_path, algorithms=["string_radix_sort"])
    run_dir = run_experiment(cfg)
    summary = pd.read_csv(run_dir / "summary.csv")
    assert summary.empty


@pytest.mark.parametrize(
    "overrides, exc",
    [
        ({"sizes": []}, ValueError),
        ({"sizes": [-1]}, ValueError),
        ({"algorithms": [{"name": "no_such_sort"}]}, ImportError),
        ({"algorithms": [{"name": "quick_sort"}, {"name": "quick_sort"}]}, ValueError),
        ({"algorithms": [{"config": {}}]}, ValueError),
        ({"algorithms": [{"name": "quick_sort", "config": [1]}]}, ValueError),
    ],
)
def test_run_experiment_rejects_bad_config(tmp_path: Path, overrides: Dict[str, Any], exc: type) -> None:
    with pytest.raises(exc):
        run_experiment(_write_config(tmp_path, **overrides))
    assert not (tmp_path / "runs").exists()


def test_run_experiment_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path)


def test_main_missing_config_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "absent.yaml")])


def test_main_runs_config(tmp_path: Path) -> None:
    main([str(_write_config(tmp_path, sizes=[4]))])
    assert len(list((tmp_path / "runs").iterdir())) == 1
