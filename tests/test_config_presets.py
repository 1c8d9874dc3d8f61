"""
Configuration and Preset Tests

Covers YAML config loading/saving, preset lookup, and config-driven
evaluation of Mogi sources.
"""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
import pytest

from mogi_halfspace.config import (
    get_config_path,
    get_default_config,
    load_config,
    load_config_safe,
    save_config,
)
from mogi_halfspace.exceptions import (
    AccuracyWarning,
    InvalidArgumentError,
    MissingArgumentError,
)
from mogi_halfspace.physics.mogi import mogi_from_config, mogi_pressure, mogi_volume
from mogi_halfspace.presets import (
    PRESETS,
    SHALLOW_INFLATION,
    get_preset,
    get_preset_names_and_descriptions,
    list_presets,
)


class TestConfig:
    """Test YAML configuration loading."""

    def test_default_config_sections(self) -> None:
        cfg = get_default_config()

        assert set(cfg) == {"source", "material", "validation", "output"}
        assert cfg["source"]["type"] == "volume"
        assert cfg["material"]["poisson_ratio"] == 0.25

    def test_config_path_extension(self) -> None:
        assert get_config_path("custom").name == "custom.yaml"
        assert get_config_path("custom.yaml").name == "custom.yaml"

    def test_load_default(self) -> None:
        cfg = load_config()

        assert cfg["source"]["type"] == "volume"
        assert cfg["source"]["volume_change_m3"] == pytest.approx(1e-5)

    def test_missing_file_falls_back(self, tmp_path) -> None:
        assert load_config(tmp_path / "missing.yaml") == get_default_config()

    def test_empty_file_falls_back(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == get_default_config()

    def test_malformed_file_falls_back(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("source: [unclosed")

        assert load_config(path) == get_default_config()

    def test_load_safe_reports_errors(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("source: [unclosed")

        cfg, errors = load_config_safe(path)

        assert cfg == get_default_config()
        assert len(errors) == 1
        assert "YAML parse error" in errors[0]

    def test_load_safe_missing(self, tmp_path) -> None:
        _, errors = load_config_safe(tmp_path / "missing.yaml")

        assert "not found" in errors[0]

    def test_load_safe_empty(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        cfg, errors = load_config_safe(path)

        assert cfg == get_default_config()
        assert errors == [f"Config file is empty: {path}. Using defaults."]

    @pytest.mark.parametrize("text", ["", "source: [unclosed", "source:\n  type: pressure\n"])
    def test_both_loaders_agree(self, tmp_path, text: str) -> None:
        path = tmp_path / "model.yaml"
        path.write_text(text)

        assert load_config(path) == load_config_safe(path)[0]

    def test_save_and_reload(self, tmp_path) -> None:
        cfg = get_default_config()
        cfg["source"]["sphere_depth_m"] = 2.5
        path = tmp_path / "nested" / "model.yaml"

        save_config(cfg, path)
        reloaded, errors = load_config_safe(path)

        assert errors == []
        assert reloaded == cfg


class TestPresets:
    """Test preset lookup."""

    def test_list_presets(self) -> None:
        assert list_presets() == list(PRESETS)
        assert "shallow_inflation" in list_presets()

    def test_lookup_is_normalised(self) -> None:
        assert get_preset("Shallow Inflation") == SHALLOW_INFLATION
        assert get_preset("shallow-inflation") == SHALLOW_INFLATION

    def test_unknown_preset(self) -> None:
        with pytest.raises(KeyError, match="Available presets"):
            get_preset("okada")

    def test_copy_is_independent(self) -> None:
        preset = get_preset("shallow_inflation")
        preset["source"]["sphere_depth_m"] = 99.0

        assert SHALLOW_INFLATION["source"]["sphere_depth_m"] == 1.0

    def test_names_and_descriptions(self) -> None:
        entries = get_preset_names_and_descriptions()

        assert len(entries) == len(PRESETS)
        for key, name, description in entries:
            assert key in PRESETS
            assert name and description

    @pytest.mark.parametrize("name", list(PRESETS))
    def test_every_preset_evaluates(self, name: str) -> None:
        table = mogi_from_config([0.0, 0.5, 1.0], get_preset(name))

        assert len(table) == 3
        assert np.all(np.isfinite(table.to_numpy()))
        assert np.all(table["Uz"] > 0)


class TestMogiFromConfig:
    """Test config-driven evaluation."""

    def test_default_is_volume_source(self) -> None:
        r = np.linspace(0.0, 2.0, 5)
        pd.testing.assert_frame_equal(mogi_from_config(r), mogi_volume(r, 1.0, 1e-5))

    def test_pressure_with_shear_modulus(self) -> None:
        r = np.linspace(0.0, 2.0, 5)
        pd.testing.assert_frame_equal(
            mogi_from_config(r, get_preset("pressurized_chamber_shear")),
            mogi_pressure(r, 1.0, 0.01, 1e10, shear_modulus=3.08e9),
        )

    def test_pressure_with_youngs_modulus(self) -> None:
        """E = 10 GPa and nu = 0.25 give a 4 GPa rigidity."""
        r = np.linspace(0.0, 2.0, 5)
        table = mogi_from_config(r, get_preset("pressurized_chamber_youngs"))
        expected = mogi_pressure(r, 1.0, 0.01, 1e10, shear_modulus=4e9)

        np.testing.assert_allclose(table.to_numpy(), expected.to_numpy(), rtol=1e-12)

    def test_undrained_is_smaller(self) -> None:
        drained = mogi_from_config(1.0, get_preset("shallow_inflation"))
        undrained = mogi_from_config(1.0, get_preset("undrained_crust"))

        assert undrained["Uz"].iloc[0] < drained["Uz"].iloc[0]

    def test_unknown_source_type(self) -> None:
        cfg = get_default_config()
        cfg["source"]["type"] = "okada"

        with pytest.raises(InvalidArgumentError, match="okada"):
            mogi_from_config(1.0, cfg)

    def test_pressure_missing_moduli(self) -> None:
        cfg = get_default_config()
        cfg["source"]["type"] = "pressure"
        cfg["material"]["shear_modulus_pa"] = None

        with pytest.raises(MissingArgumentError):
            mogi_from_config(1.0, cfg)

    def test_config_ratio_used(self) -> None:
        """validation.max_radius_depth_ratio controls the accuracy warning."""
        cfg = get_preset("pressurized_chamber_shear")
        cfg["source"]["sphere_radius_m"] = 0.3
        cfg["validation"] = {"max_radius_depth_ratio": 0.5}

        with warnings.catch_warnings():
            warnings.simplefilter("error", AccuracyWarning)
            table = mogi_from_config(1.0, cfg)

        assert len(table) == 1

    def test_verbose_from_config(self, capsys) -> None:
        cfg = get_default_config()
        cfg["output"]["verbose"] = True

        mogi_from_config(1.0, cfg)
        assert "Poissons ratio" in capsys.readouterr().out

        mogi_from_config(1.0, cfg, verbose=False)
        assert capsys.readouterr().out == ""
