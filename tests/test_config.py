import logging

import pytest

from ucc_profiling.config import ProfilingConfig, load_config


def test_load_full_config(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text(
        "dataset:\n"
        "  csv: [a.csv, sub/b.csv]\n"
        "  sep: ';'\n"
        "profiling:\n"
        "  strategy: materialize\n"
        "  inclusion_dependencies: true\n"
        "output:\n"
        "  results_csv: out/uccs.csv\n"
        "logging:\n"
        "  level: debug\n",
        encoding="utf-8",
    )
    cfg = load_config(cfg_path)
    assert cfg.csv_paths == [tmp_path / "a.csv", tmp_path / "sub" / "b.csv"]
    assert cfg.sep == ";"
    assert cfg.strategy == "materialize"
    assert cfg.inclusion_dependencies is True
    assert cfg.results_csv == tmp_path / "out" / "uccs.csv"
    assert cfg.logging_level == logging.DEBUG


def test_defaults(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text("dataset:\n  csv: people.csv\n", encoding="utf-8")
    cfg = load_config(cfg_path)
    assert cfg.csv_paths == [tmp_path / "people.csv"]
    assert cfg.strategy == "intersect"
    assert cfg.results_csv is None
    assert cfg.inclusion_dependencies is False
    assert cfg.logging_level == logging.INFO


def test_missing_dataset(tmp_path):
    cfg_path = tmp_path / "run.yaml"
    cfg_path.write_text("profiling:\n  strategy: intersect\n", encoding="utf-8")
    with pytest.raises(ValueError, match="dataset.csv"):
        load_config(cfg_path)


@pytest.mark.parametrize("kwargs", [
    {"strategy": "guess"},
    {"log_level": "LOUD"},
])
def test_invalid_values(tmp_path, kwargs):
    with pytest.raises(ValueError):
        ProfilingConfig(csv_paths=[tmp_path / "x.csv"], **kwargs)
