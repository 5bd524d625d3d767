"""Tests for eikonal2d solver configuration."""

import pytest
import yaml

from eikonal2d import FlowerCurve2D, GridWindow, SolverConfig, load_config


class TestSolverConfig:
    def test_defaults(self):
        c = SolverConfig()
        assert (c.width, c.height) == (1024, 1024)
        assert c.xlim == (-3.0, 3.0) and c.ylim == (-3.0, 3.0)
        assert c.epsilon == 0.01

    def test_window(self):
        w = SolverConfig(width=8, height=4, xlim=(0, 2), ylim=(0, 1)).window()
        assert isinstance(w, GridWindow)
        assert w.xstep == 0.25 and w.ystep == 0.25

    def test_curve(self):
        curve = SolverConfig(petals=3).curve()
        assert isinstance(curve, FlowerCurve2D)
        assert curve.petals == 3

    def test_list_limits_become_tuples(self):
        c = SolverConfig(xlim=[-1, 1])
        assert c.xlim == (-1.0, 1.0)

    def test_bad_epsilon(self):
        with pytest.raises(ValueError):
            SolverConfig(epsilon=0.0)

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="unknown config keys"):
            SolverConfig.from_dict({"width": 4, "colour": "green"})


class TestLoadConfig:
    def test_no_file_gives_defaults(self):
        assert load_config() == SolverConfig()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(yaml.safe_dump({"width": 64, "height": 32, "xlim": [-1.0, 1.0]}))
        c = load_config(path)
        assert (c.width, c.height) == (64, 32)
        assert c.xlim == (-1.0, 1.0)
        assert c.epsilon == 0.01

    def test_overrides_win_and_none_is_ignored(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("width: 64\nepsilon: 0.05\n")
        c = load_config(path, width=16, epsilon=None)
        assert c.width == 16
        assert c.epsilon == 0.05

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "saved.yaml"
        original = SolverConfig(width=100, height=50, epsilon=0.2, petals=7)
        original.save(path)
        assert load_config(path) == original
