"""Solver configuration with YAML loading and keyword overrides.

Usage::

    config = load_config()                          # built-in defaults
    config = load_config("my_run.yaml")             # defaults + file
    config = load_config(width=256, height=256)     # defaults + overrides
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .curves import FlowerCurve2D
from .grid import GridWindow

logger = logging.getLogger(__name__)


@dataclass
class SolverConfig:
    """Grid, window and seeding parameters for one solve."""
    # Grid size
    width: int = 1024
    height: int = 1024

    # Real window mapped onto the grid
    xlim: Tuple[float, float] = (-3.0, 3.0)
    ylim: Tuple[float, float] = (-3.0, 3.0)

    # Zero-level-set tolerance
    epsilon: float = 0.01

    # Flower curve r^2 = amplitude * (base + sin(petals * theta))
    petals: int = 5
    base: float = 2.0
    amplitude: float = 0.5

    def __post_init__(self) -> None:
        self.xlim = tuple(float(v) for v in self.xlim)
        self.ylim = tuple(float(v) for v in self.ylim)
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")

    def window(self) -> GridWindow:
        return GridWindow(self.width, self.height, self.xlim, self.ylim)

    def curve(self) -> FlowerCurve2D:
        return FlowerCurve2D(self.petals, self.base, self.amplitude)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["xlim"] = list(self.xlim)
        d["ylim"] = list(self.ylim)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SolverConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def save(self, path: Union[str, Path]) -> None:
        """Write this config as YAML to *path*."""
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False)


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    return data


def load_config(config_path: Optional[Union[str, Path]] = None, **overrides: Any) -> SolverConfig:
    """Load a :class:`SolverConfig` from defaults, an optional YAML file and overrides.

    Overrides set to ``None`` are ignored, so argparse namespaces can be
    passed through directly.
    """
    data: Dict[str, Any] = {}
    if config_path is not None:
        data.update(_load_yaml(Path(config_path)))
        logger.debug("loaded config from %s", config_path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return SolverConfig.from_dict(data)
