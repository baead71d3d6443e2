import sys, os; sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
import pytest

from timewarp import config


def test_default_budget():
    assert config.DEFAULT_MAX_COST_STORAGE_MATRIX == 32 * 1024 ** 3


def test_set_budget():
    try:
        config.config_max_cost_storage_matrix(4096)
        assert config.max_cost_storage_matrix() == 4096
        assert config.resolve_max_matrix_bytes(None) == 4096
        assert config.resolve_max_matrix_bytes(10) == 10
    finally:
        config.config_max_cost_storage_matrix(config.DEFAULT_MAX_COST_STORAGE_MATRIX)


def test_set_budget_rejects_bad_values():
    with pytest.raises(ValueError):
        config.config_max_cost_storage_matrix(-1)
    with pytest.raises(ValueError):
        config.config_max_cost_storage_matrix(1.5)
    assert config.max_cost_storage_matrix() == config.DEFAULT_MAX_COST_STORAGE_MATRIX


def test_load_config_defaults(tmp_path):
    cfg_file = tmp_path / "cfg.yaml"
    cfg_file.write_text("dtw:\n  fast: true\n  search_radius: 4\n", encoding="utf-8")
    cfg = config.load_config(cfg_file)
    assert cfg["dtw"]["fast"] is True
    assert cfg["dtw"]["search_radius"] == 4
    assert cfg["dtw"]["resolution_factor"] == 2
    assert cfg["dtw"]["distance_mode"] == "euclidean"
    assert cfg["dtw"]["max_matrix_bytes"] is None


def test_load_config_empty_file(tmp_path):
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("", encoding="utf-8")
    assert config.load_config(cfg_file)["dtw"] == config.DTW_DEFAULTS


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load_config(tmp_path / "missing.yaml")
    bad = tmp_path / "bad.yaml"
    bad.write_text("dtw: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        config.load_config(bad)
    wrong = tmp_path / "wrong.yaml"
    wrong.write_text("dtw:\n  search_radius: wide\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        config.load_config(wrong)
    scalar = tmp_path / "scalar.yaml"
    scalar.write_text("42\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        config.load_config(scalar)
