from __future__ import annotations

from pathlib import Path

import pytest

from nautical_helper.core import config as config_mod
from nautical_helper.core.config import HelperConfig, get_config, reload_config


@pytest.fixture(autouse=True)
def _reset_config():
    yield
    config_mod._config = None


def test_defaults_without_file(tmp_path: Path) -> None:
    cfg = reload_config(tmp_path / "missing.yaml")
    assert cfg.swept_path.preset_drift_angles_deg == [2.0, 4.0, 6.0, 8.0, 10.0]
    assert cfg.squat.regulatory_ukc_m == 1.83
    assert cfg.watch.operator_names == ["Pilot 1", "Pilot 2"]


def test_from_yaml_overrides_sections(tmp_path: Path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text("watch:\n  operator_names: [Mate, Master]\n  default_max_watch_hours: 4\n")
    cfg = reload_config(path)
    assert cfg.watch.operator_names == ["Mate", "Master"]
    assert cfg.watch.default_max_watch_hours == 4
    assert cfg.units.decimals == 4


def test_env_var_selects_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("squat:\n  regulatory_ukc_m: 2.0\n")
    monkeypatch.setenv(config_mod.CONFIG_ENV_VAR, str(path))
    config_mod._config = None
    assert get_config().squat.regulatory_ukc_m == 2.0


def test_operator_names_must_be_a_pair(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("watch:\n  operator_names: [Solo]\n")
    with pytest.raises(ValueError):
        HelperConfig.from_yaml(path)


def test_shipped_defaults_file_loads() -> None:
    shipped = Path(__file__).resolve().parents[1] / "configs" / "defaults.yaml"
    cfg = HelperConfig.from_yaml(shipped)
    assert cfg.swept_path.duplicate_tolerance_deg == 0.001
