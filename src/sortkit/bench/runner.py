"""
Experiment runner: sweeps algorithms over input sizes from a YAML config.

Usage (from repo root):
    sortkit-bench experiments/configs/01_random_scaling.yaml
    python -m sortkit.bench.runner experiments/configs/01_random_scaling.yaml

Config keys (all required unless noted):
    experiment_name: str
    output_dir: str              # a timestamped run directory is created inside
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: {dist: ..., params: {...}}   # see sortkit.datasets
    sizes: [int, ...]
    algorithms: [{name: str, config: {...}}, ...]   # names from sortkit.algorithms.ALGORITHMS
    verify: bool                 # optional, default true

Outputs in the run directory:
    - config_resolved.yaml    # the config actually used
    - meta.json               # python / library versions, cpu / ram, git commit
    - results.jsonl           # one line per timing sample, plus status lines
    - summary.csv             # per (algo, n): median, IQR, min, max ns, comparisons

Behaviour:
- For each size n ONE dataset is generated and every algorithm sorts it.
- When an algorithm times out, errors or produces invalid output at size n,
  it is skipped for all larger sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from sortkit import __version__
from sortkit.algorithms import STABLE_ALGORITHMS, get_algorithm
from sortkit.bench.measure import time_sort_call
from sortkit.datasets import make_dataset

__all__ = ["AlgoSpec", "ExperimentConfig", "load_config", "run_experiment", "main"]

logger = logging.getLogger(__name__)
_console = Console()

_REQUIRED_KEYS = (
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
_SUMMARY_COLUMNS = [
    "algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "comparisons",
]


# ------------------------- config ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[..., List[Any]]
    config: Dict[str, Any]
    stable: bool


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    algorithms: List[AlgoSpec]
    verify: bool = True
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "ExperimentConfig":
        if not isinstance(cfg, dict):
            raise ValueError("Experiment config must be a mapping")
        missing = [k for k in _REQUIRED_KEYS if k not in cfg]
        if missing:
            raise ValueError(f"Missing required config keys: {missing}")

        sizes = [int(n) for n in cfg["sizes"]]
        if not sizes or any(n < 0 for n in sizes):
            raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
        repeats = int(cfg["repeats"])
        if repeats < 1:
            raise ValueError("Config 'repeats' must be >= 1")
        timeout_seconds = float(cfg["timeout_seconds"])
        if timeout_seconds <= 0:
            raise ValueError("Config 'timeout_seconds' must be positive")
        if not isinstance(cfg["dataset"], dict):
            raise ValueError("Config 'dataset' must be a mapping with 'dist' and 'params'")

        return cls(
            experiment_name=str(cfg["experiment_name"]),
            output_dir=Path(cfg["output_dir"]),
            seed=int(cfg["seed"]),
            repeats=repeats,
            warmup=bool(cfg["warmup"]),
            disable_gc=bool(cfg["disable_gc"]),
            timeout_seconds=timeout_seconds,
            dataset=dict(cfg["dataset"]),
            sizes=sorted(sizes),
            algorithms=_resolve_algorithms(cfg["algorithms"]),
            verify=bool(cfg.get("verify", True)),
            raw=cfg,
        )


def _resolve_algorithms(entries: Any) -> List[AlgoSpec]:
    if not isinstance(entries, list) or not entries:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in entries:
        if isinstance(entry, str):
            entry = {"name": entry}
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")
        sort_fn = get_algorithm(name)
        # An empty input exercises config validation without sorting anything.
        try:
            sort_fn([], config=config)
        except ValueError as e:
            raise ValueError(f"Algorithm '{name}': {e}") from e

        specs.append(AlgoSpec(name=name, sort_fn=sort_fn, config=config, stable=name in STABLE_ALGORITHMS))
    return specs


def load_config(path: Path) -> ExperimentConfig:
    with path.open("r", encoding="utf-8") as f:
        return ExperimentConfig.from_dict(yaml.safe_load(f))


# ------------------------- IO & meta ------------------------- #

def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _make_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir()
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
        "sortkit": __version__,
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


# ------------------------- summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    out = df.groupby(["algo", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        q1_ns=("time_ns", lambda s: s.quantile(0.25)),
        q3_ns=("time_ns", lambda s: s.quantile(0.75)),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        comparisons=("comparisons", "max"),
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    int_cols = ["n", "median_ns", "iqr_ns", "min_ns", "max_ns", "comparisons"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms, comparisons)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [algo]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
                continue
            med_ms = s["median_ns"].iloc[0] / 1e6
            iqr_ms = s["iqr_ns"].iloc[0] / 1e6
            row.append(f"{med_ms:.2f} ± {iqr_ms:.2f} ({int(s['comparisons'].iloc[0])})")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, output_dir: Optional[Path] = None) -> Path:
    """Run the experiment described by `config_path`; return the run directory."""
    cfg = load_config(config_path)
    base_dir = output_dir if output_dir is not None else cfg.output_dir

    run_dir = _make_run_dir(base_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"

    with (run_dir / "config_resolved.yaml").open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg.raw, f, sort_keys=False)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    logger.info("Run directory: %s", run_dir)
    logger.info("Algorithms: %s", ", ".join(a.name for a in cfg.algorithms))

    rng = np.random.default_rng(cfg.seed)
    skipped = set()

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        data = make_dataset(n, cfg.dataset, rng)
        for spec in cfg.algorithms:
            if spec.name in skipped:
                continue
            res = time_sort_call(
                algo_name=spec.name,
                algo_fn=spec.sort_fn,
                a=data,
                config=spec.config,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
                verify=cfg.verify,
                stable=spec.stable,
            )
            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": n,
                        "dataset": cfg.dataset,
                        "trial": trial,
                        "time_ns": t_ns,
                        "comparisons": res["comparisons"],
                        "config": spec.config,
                    },
                    results_path,
                )
            if res["status"] != "ok":
                skipped.add(spec.name)
                logger.warning(
                    "%s: %s at n=%d, skipping larger sizes", spec.name, res["status"], n
                )
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": n,
                        "status": res["status"],
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": spec.config,
                    },
                    results_path,
                )

    summary = _aggregate_summary(results_path)
    summary.to_csv(summary_path, index=False)
    _print_summary(summary, cfg.sizes)
    logger.info("Wrote %s, %s, %s", results_path, summary_path, meta_path)
    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--output-dir", type=str, default=None, help="Override the config's output_dir")
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (DEBUG also traces tim sort runs and merges)",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, rich_tracebacks=True)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    output_dir = Path(args.output_dir) if args.output_dir else None
    try:
        run_experiment(config_path, output_dir=output_dir)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
