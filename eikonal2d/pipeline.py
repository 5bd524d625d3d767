"""Seed and propagate in one call."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .config import SolverConfig
from .grid import GridWindow
from .propagation import EikonalPropagator
from .seeding import seed_field

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


def solve(
    config: Optional[SolverConfig] = None,
    curve: Optional[Callable[[_Array, _Array], _Array]] = None,
    on_settle: Optional[Callable[[int, float], None]] = None,
) -> Tuple[_Array, GridWindow]:
    """Return the settled field for *config* and the window it lives on.

    *curve* defaults to ``config.curve()``, the flower curve.
    """
    config = config or SolverConfig()
    window = config.window()
    if curve is None:
        curve = config.curve()

    t0 = time.perf_counter()
    field = seed_field(window, curve, config.epsilon)
    t1 = time.perf_counter()
    EikonalPropagator(window).run(field, on_settle=on_settle)
    t2 = time.perf_counter()

    logger.info(
        "solved %dx%d grid: seeding %.3fs, propagation %.3fs",
        window.width, window.height, t1 - t0, t2 - t1,
    )
    return field, window
