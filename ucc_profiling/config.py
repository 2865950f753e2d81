"""
ucc_profiling/config.py
=======================
YAML run configuration for the command-line runner.

    dataset:
      csv: data/people.csv        # a path or a list of paths
      sep: ","
    profiling:
      strategy: intersect         # intersect | materialize
      inclusion_dependencies: false
    output:
      results_csv: results/uccs.csv
    logging:
      level: INFO

Paths are resolved relative to the directory of the YAML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .ucc import STRATEGIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ProfilingConfig:
    csv_paths: list[Path]
    sep: str = ","
    strategy: str = "intersect"
    inclusion_dependencies: bool = False
    results_csv: Optional[Path] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.csv_paths:
            raise ValueError("no input CSV configured (dataset.csv)")
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"profiling.strategy must be one of {STRATEGIES}, got {self.strategy!r}"
            )
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {LOG_LEVELS}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(config_path: str | Path) -> ProfilingConfig:
    config_path = Path(config_path)
    cfg = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    base = config_path.parent

    dataset = cfg.get("dataset") or {}
    profiling = cfg.get("profiling") or {}
    output = cfg.get("output") or {}

    csv = dataset.get("csv") or []
    if isinstance(csv, str):
        csv = [csv]
    results_csv = output.get("results_csv")

    return ProfilingConfig(
        csv_paths=[base / p for p in csv],
        sep=dataset.get("sep", ","),
        strategy=profiling.get("strategy", "intersect"),
        inclusion_dependencies=bool(profiling.get("inclusion_dependencies", False)),
        results_csv=base / results_csv if results_csv else None,
        log_level=(cfg.get("logging") or {}).get("level", "INFO"),
    )
