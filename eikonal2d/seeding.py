"""Seed an eikonal field from the zero-level set of an implicit function."""

from __future__ import annotations

import logging
from typing import Callable, Tuple

import numpy as np
import numpy.typing as npt

from .grid import GridWindow

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_ImplicitFunc = Callable[[_Array, _Array], _Array]


def domain_grid(window: GridWindow) -> Tuple[_Array, _Array]:
    """Return float32 ``(X, Y)`` coordinates of every cell, in index order."""
    return window.domain_coordinates(np.float32)


def seed_field(
    window: GridWindow,
    func: _ImplicitFunc,
    epsilon: float = 0.01,
    vectorized: bool = True,
) -> _Array:
    """Build the initial field for *window* from implicit function *func*.

    Parameters
    ----------
    window:
        Grid and domain window to sample.
    func:
        Total function ``f(x, y)``.  Cells where ``|f| < epsilon`` become
        seeds with value ``0``; every other cell starts at ``+inf``.
    epsilon:
        Zero-level-set tolerance, must be positive.
    vectorized:
        If true, *func* is called once with the coordinate arrays.  Set to
        false for scalar-only functions (e.g. written with :mod:`math`); they
        are wrapped with :func:`numpy.vectorize` and called per cell.

    Returns
    -------
    numpy.ndarray
        Shape ``(W * H,)`` float32 field, row-major.
    """
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")

    X, Y = domain_grid(window)
    if not vectorized:
        func = np.vectorize(func, otypes=[np.float32])

    with np.errstate(invalid="ignore"):
        values = np.broadcast_to(np.asarray(func(X, Y), dtype=np.float32), X.shape)
        # NaN fails the comparison and stays unseeded
        seeds = np.abs(values) < np.float32(epsilon)

    field = np.where(seeds, np.float32(0.0), np.float32(np.inf)).astype(np.float32)

    n_seeds = int(np.count_nonzero(seeds))
    if n_seeds == 0:
        logger.warning(
            "no cell within epsilon=%g of the zero level set on a %dx%d grid",
            epsilon, window.width, window.height,
        )
    else:
        logger.debug("seeded %d of %d cells (epsilon=%g)", n_seeds, window.size, epsilon)
    return field
