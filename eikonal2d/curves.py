"""Implicit curves whose zero-level set seeds an eikonal field.

An implicit curve is any total function ``f(x, y) -> real``; only the sign
change of ``f`` matters, the values need not be distances.  All curves here
accept numpy arrays and broadcast, so a whole grid is evaluated in one call.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]
_ImplicitFunc = Callable[[_Array, _Array], _Array]


def flower_curve(x: _Array, y: _Array) -> _Array:
    """5-fold symmetric closed curve ``x^2 + y^2 - 0.5 (2 + sin(5 atan2(y, x)))``."""
    return x * x + y * y - 0.5 * (2.0 + np.sin(5.0 * np.arctan2(y, x)))


# ===========================================================================
# Base class
# ===========================================================================

class ImplicitCurve2D:
    """Wraps a callable ``func(x, y) -> values`` defining a boundary ``f = 0``.

    Subclasses pass their formula to ``super().__init__(func)``.  Combining
    curves with :meth:`union` / :meth:`intersect` keeps the zero set of the
    combined region's boundary.
    """

    def __init__(self, func: _ImplicitFunc) -> None:
        self._func = func

    def __call__(self, x: _Array, y: _Array) -> _Array:
        return self._func(x, y)

    def union(self, other: ImplicitCurve2D) -> ImplicitCurve2D:
        return Union2D(self, other)

    def intersect(self, other: ImplicitCurve2D) -> ImplicitCurve2D:
        return Intersection2D(self, other)

    def translate(self, tx: float, ty: float) -> ImplicitCurve2D:
        """Translate by ``(tx, ty)``."""
        return ImplicitCurve2D(lambda x, y: self._func(x - tx, y - ty))

    def scale(self, s: float) -> ImplicitCurve2D:
        """Uniformly scale the zero set by factor *s*."""
        return ImplicitCurve2D(lambda x, y: self._func(x / s, y / s))


# ===========================================================================
# Concrete curves
# ===========================================================================

class FlowerCurve2D(ImplicitCurve2D):
    """Rose-like curve ``r^2 = amplitude * (base + sin(petals * theta))``.

    The defaults give :func:`flower_curve`.
    """

    def __init__(self, petals: int = 5, base: float = 2.0, amplitude: float = 0.5) -> None:
        def _f(x: _Array, y: _Array) -> _Array:
            return x * x + y * y - amplitude * (base + np.sin(petals * np.arctan2(y, x)))

        super().__init__(_f)
        self.petals = petals
        self.base = base
        self.amplitude = amplitude


class Circle2D(ImplicitCurve2D):
    """Circle of *radius* centred at origin: ``x^2 + y^2 - r^2``."""

    def __init__(self, radius: float) -> None:
        super().__init__(lambda x, y: x * x + y * y - radius * radius)
        self.radius = radius


class Union2D(ImplicitCurve2D):
    """Union of two or more regions (minimum)."""

    def __init__(self, *curves: ImplicitCurve2D) -> None:
        def _f(x: _Array, y: _Array) -> _Array:
            d = curves[0](x, y)
            for c in curves[1:]:
                d = np.minimum(d, c(x, y))
            return d

        super().__init__(_f)


class Intersection2D(ImplicitCurve2D):
    """Intersection of two or more regions (maximum)."""

    def __init__(self, *curves: ImplicitCurve2D) -> None:
        def _f(x: _Array, y: _Array) -> _Array:
            d = curves[0](x, y)
            for c in curves[1:]:
                d = np.maximum(d, c(x, y))
            return d

        super().__init__(_f)
