"""
eikonal2d: fast-marching distance fields on a 2D grid
=====================================================

Approximates the solution of the Eikonal equation ``|grad u| = 1`` on a
fixed 2D grid whose zero-level set ``u = 0`` is given by an implicit curve.
The field is seeded with ``0`` near the curve and ``+inf`` elsewhere, then
settled in increasing order of value with a Dijkstra-style priority queue and
an upwind finite-difference update.

Implemented features
--------------------
- Coordinate mapping: :class:`GridWindow`
- Implicit curves: :class:`FlowerCurve2D`, :class:`Circle2D`, boolean ops
- Seeding: :func:`seed_field`
- Propagation: :class:`EikonalPropagator`, :func:`propagate`, :func:`solve_update`
- Configuration: :class:`SolverConfig`, :func:`load_config` (YAML)
- Output: :func:`colorize_field`, :func:`save_png`, :func:`save_field`

Quick start
-----------

::

    from eikonal2d import GridWindow, FlowerCurve2D, seed_field, propagate

    window = GridWindow.square(256, -3.0, 3.0)
    field  = seed_field(window, FlowerCurve2D(), epsilon=0.05)
    propagate(field, window)
    image  = field.reshape(window.shape)

Or with defaults taken from a config::

    from eikonal2d import load_config, solve

    field, window = solve(load_config(width=256, height=256))
"""

import logging

from .grid import GridWindow, save_field
from .curves import (
    ImplicitCurve2D,
    FlowerCurve2D,
    Circle2D,
    Union2D,
    Intersection2D,
    flower_curve,
)
from .seeding import seed_field, domain_grid
from .propagation import EikonalPropagator, propagate, solve_update
from .config import SolverConfig, load_config
from .render import colorize_field, green_intensity, save_png
from .pipeline import solve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Coordinate mapping
    "GridWindow",
    "save_field",

    # Implicit curves
    "ImplicitCurve2D",
    "FlowerCurve2D",
    "Circle2D",
    "Union2D",
    "Intersection2D",
    "flower_curve",

    # Seeding
    "seed_field",
    "domain_grid",

    # Propagation
    "EikonalPropagator",
    "propagate",
    "solve_update",

    # Configuration
    "SolverConfig",
    "load_config",

    # Output
    "colorize_field",
    "green_intensity",
    "save_png",

    # Pipeline
    "solve",
]
