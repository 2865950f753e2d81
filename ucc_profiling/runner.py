"""
ucc_profiling/runner.py
=======================
Command-line runner: profile CSV files for minimal unique column combinations.

Usage
-----
  ucc-profile data/people.csv data/orders.csv --inds
  ucc-profile --config configs/people.yaml
  python -m ucc_profiling.runner data/people.csv --out results/uccs.csv

Outputs
-------
  console   per-relation UCC table with the engine's internal counters
  --out     optional CSV, one row per UCC:  relation, size, attributes
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from . import ind, ucc
from .attributes import UCC
from .config import LOG_LEVELS, ProfilingConfig, load_config
from .relation import Relation

log = logging.getLogger(__name__)

_SEP  = "=" * 72
_DASH = "-" * 72


# ── Console reporting ──────────────────────────────────────────────────────────

def _print_relation_table(
    relation: Relation,
    uccs: list[UCC],
    stats: dict,
    elapsed: float,
) -> None:
    print(_SEP)
    print(f"  {relation.name}  ({relation.n_rows} rows × {relation.n_attributes} attributes)")
    print(_DASH)
    if not uccs:
        print("  no unique column combination")
    for u in sorted(uccs, key=lambda u: u.attributes):
        print(f"  [{u.attributes.size()}]  {{{', '.join(u.names)}}}")
    print(_DASH)
    counters = [
        ("Lattice levels",              stats["n_levels"]),
        ("Candidates validated",        stats["n_candidates"]),
        ("PLIs built",                  stats["n_pli_builds"]),
        ("Duplicate unions skipped",    stats["n_duplicates_skipped"]),
        ("Non-minimal keys pruned",     stats["n_non_minimal_pruned"]),
        ("Wall-clock time (s)",         f"{elapsed:.3f}"),
    ]
    for label, value in counters:
        print(f"  {label:<42}{value:>14}")
    print()


def results_frame(results: Sequence[tuple[Relation, list[UCC]]]) -> pd.DataFrame:
    """One row per UCC, sorted by relation, then size, then attributes."""
    rows = [
        {
            "relation":   relation.name,
            "size":       u.attributes.size(),
            "attributes": ";".join(u.names),
        }
        for relation, uccs in results
        for u in sorted(uccs, key=lambda u: u.attributes)
    ]
    return pd.DataFrame(rows, columns=["relation", "size", "attributes"])


# ── Pipeline ──────────────────────────────────────────────────────────────────

def run(cfg: ProfilingConfig) -> int:
    missing = [p for p in cfg.csv_paths if not Path(p).exists()]
    for p in missing:
        log.error(f"Input CSV not found: {p}")
    if missing:
        return 1

    relations = [Relation.from_csv(p, sep=cfg.sep) for p in cfg.csv_paths]
    results: list[tuple[Relation, list[UCC]]] = []

    for relation in relations:
        log.info(f"Profiling {relation!r}")
        t0 = time.perf_counter()
        uccs, stats = ucc.discover(relation, strategy=cfg.strategy)
        elapsed = time.perf_counter() - t0
        _print_relation_table(relation, uccs, stats, elapsed)
        results.append((relation, uccs))

    if cfg.inclusion_dependencies:
        inds = ind.discover(relations)
        print(_SEP)
        print(f"  Unary inclusion dependencies ({len(inds)})")
        print(_DASH)
        for dep in inds:
            print(f"  {dep}")
        print()

    if cfg.results_csv is not None:
        out = Path(cfg.results_csv)
        out.parent.mkdir(parents=True, exist_ok=True)
        results_frame(results).to_csv(out, index=False)
        log.info(f"Results saved: {out}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Discover minimal unique column combinations in CSV files"
    )
    parser.add_argument(
        "csv", nargs="*", metavar="CSV",
        help="CSV files to profile (ignored when --config is given)",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="YAML configuration file (see ucc_profiling/config.py)",
    )
    parser.add_argument("--sep", type=str, default=",", help="CSV field separator")
    parser.add_argument(
        "--strategy", choices=ucc.STRATEGIES, default="intersect",
        help="How candidate PLIs are built (default: intersect)",
    )
    parser.add_argument(
        "--inds", action="store_true",
        help="Also report unary inclusion dependencies across all inputs",
    )
    parser.add_argument("--out", type=str, default=None, help="Write UCCs to this CSV")
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default="INFO", help="Logging verbosity",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        cfg = load_config(args.config)
    elif args.csv:
        cfg = ProfilingConfig(
            csv_paths=[Path(p) for p in args.csv],
            sep=args.sep,
            strategy=args.strategy,
            inclusion_dependencies=args.inds,
            results_csv=Path(args.out) if args.out else None,
            log_level=args.log_level,
        )
    else:
        parser.error("give at least one CSV file or --config")

    logging.basicConfig(
        level=cfg.logging_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    return run(cfg)


if __name__ == "__main__":
    raise SystemExit(main())
