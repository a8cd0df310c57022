"""
Experiment runner: times a set of sorting algorithms over a sweep of input
sizes, driven by a YAML config.

Usage (from repo root):
    python -m classicsort.bench.runner experiments/configs/01_random_scaling.yaml
    classicsort-bench experiments/configs/01_random_scaling.yaml

Config keys (all required unless noted):
    experiment_name: str
    output_dir: str               # run directories are created below it
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: {dist: ..., params: {...}}   # see classicsort.datasets
    sizes: [int, ...]
    algorithms: [{name: <module under classicsort.algorithms>, config: {}}, ...]
    validate: bool                # optional, default false

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or status event
    - summary.csv             # median, IQR, min, max per (algo, n)

Design notes:
- For each size n, ONE dataset is generated and every algorithm gets a copy.
- An algorithm whose input domain does not accept the dataset (e.g. a radix
  sort on floats) is skipped for that size and a "skipped" line is written.
- On timeout/error an algorithm is dropped for all larger sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from classicsort.algorithms import accepts, load_algorithm
from classicsort.bench.measure import time_sort_call
from classicsort.datasets import make_dataset

_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]

__all__ = ["AlgoSpec", "run_experiment", "main"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    domain: str
    stable: bool
    config: Dict[str, Any] = field(default_factory=dict)


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    # Two runs in the same second get a numeric suffix.
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if isinstance(entry, str):
            entry = {"name": entry}
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        mod = load_algorithm(name)

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(
            AlgoSpec(
                name=name,
                sort_fn=mod.sort,
                domain=getattr(mod, "DOMAIN", "ordered"),
                stable=bool(getattr(mod, "STABLE", False)),
                config=config,
            )
        )
    return specs


# ------------------------- aggregation & display ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    # Status lines (timeout/error/skipped) carry no time_ns.
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            q1_ns=("time_ns", lambda s: s.quantile(0.25)),
            q3_ns=("time_ns", lambda s: s.quantile(0.75)),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    out = out[SUMMARY_COLUMNS].copy()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out.sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    if iqr_ns is None:
        return f"{median_ns / 1e6:.2f}"
    return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int], algos: List[AlgoSpec]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    table.add_column("Stable", justify="center")

    picks: List[Tuple[str, int]] = []
    if sizes:
        chosen = [sizes[0], sizes[len(sizes) // 2], sizes[-1]]
        # dict.fromkeys drops repeats when there are fewer than three sizes
        picks = [(f"n={n}", n) for n in dict.fromkeys(chosen)]
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")

    stable_by_name = {a.name: a.stable for a in algos}
    for algo in summary["algo"].unique():
        row = [algo, "yes" if stable_by_name.get(algo) else "no"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].values[0]), int(s["iqr_ns"].values[0])))
        table.add_row(*row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """Run the experiment described by `config_path`; return the run directory."""
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", False))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    if not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    if any(n < 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must be nonnegative; got {sizes}")

    # Resolve before creating any output so a typo leaves nothing behind.
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))

    # Set on timeout/error; skips all larger sizes.
    dropped = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if dropped[a_spec.name]:
                continue

            if not accepts(a_spec.domain, base_a):
                _console.print(
                    f"[yellow]skip[/yellow] {a_spec.name} at n={n}: "
                    f"dataset {dataset_spec.get('dist')!r} is outside domain {a_spec.domain!r}"
                )
                _append_jsonl(
                    {"algo": a_spec.name, "n": n, "status": "skipped", "domain": a_spec.domain},
                    results_path,
                )
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                defensive_copy=True,
                validate=validate,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "config": a_spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status == "timeout":
                dropped[a_spec.name] = True
                _console.print(f"[yellow]timeout[/yellow] {a_spec.name} at n={n}; dropping larger sizes")
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": "timeout",
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": a_spec.config,
                    },
                    results_path,
                )
            elif status == "error":
                dropped[a_spec.name] = True
                _console.print(f"[red]error[/red] {a_spec.name} at n={n}: {res['error']}")
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": "error",
                        "error": res["error"],
                        "config": a_spec.config,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_summary(summary_df, sizes, algos)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
