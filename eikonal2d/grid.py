"""Grid window and coordinate mapping for 2D eikonal fields.

A :class:`GridWindow` ties a ``W x H`` cell grid to a real-valued rectangle
``[xmin, xmax] x [ymin, ymax]``.  Cells are addressed three ways:

* linear index ``idx = col + row * W`` (row-major, the field layout),
* integer cell coordinates ``(col, row)``,
* real domain coordinates ``(x, y)`` of the cell's lower-left node.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]
_Cell = Tuple[int, int]
_Limits = Tuple[float, float]


@dataclass(frozen=True)
class GridWindow:
    """A ``width x height`` grid laid over the window ``xlim x ylim``.

    Parameters
    ----------
    width, height:
        Number of cells along x (columns) and y (rows).
    xlim, ylim:
        ``(lo, hi)`` extents of the real domain along each axis.
    """

    width: int
    height: int
    xlim: _Limits = (-3.0, 3.0)
    ylim: _Limits = (-3.0, 3.0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"grid dimensions must be positive, got {self.width}x{self.height}"
            )
        if not self.xlim[0] < self.xlim[1] or not self.ylim[0] < self.ylim[1]:
            raise ValueError(f"empty window: xlim={self.xlim}, ylim={self.ylim}")

    @classmethod
    def square(cls, n: int, lo: float = -3.0, hi: float = 3.0) -> GridWindow:
        """``n x n`` grid over ``[lo, hi]^2``."""
        return cls(n, n, (lo, hi), (lo, hi))

    # ------------------------------------------------------------------
    # Derived sizes
    # ------------------------------------------------------------------

    @property
    def xstep(self) -> float:
        return (self.xlim[1] - self.xlim[0]) / self.width

    @property
    def ystep(self) -> float:
        return (self.ylim[1] - self.ylim[0]) / self.height

    @property
    def size(self) -> int:
        """Total number of cells, i.e. the field length."""
        return self.width * self.height

    @property
    def shape(self) -> Tuple[int, int]:
        """``(height, width)``, the image shape of a reshaped field."""
        return (self.height, self.width)

    # ------------------------------------------------------------------
    # Index <-> cell <-> domain
    # ------------------------------------------------------------------

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def index_to_cell(self, idx: int) -> _Cell:
        """Return ``(col, row)`` for linear index *idx*."""
        row, col = divmod(idx, self.width)
        return col, row

    def cell_to_index(self, col: int, row: int) -> Optional[int]:
        """Return the linear index of ``(col, row)``, or ``None`` outside the grid."""
        if self.contains(col, row):
            return col + row * self.width
        return None

    def cell_to_domain(self, col: int, row: int) -> Tuple[float, float]:
        """Real coordinates of cell ``(col, row)``."""
        return (
            self.xlim[0] + col * self.xstep,
            self.ylim[0] + row * self.ystep,
        )

    def domain_coordinates(self, dtype: npt.DTypeLike = np.float32) -> Tuple[_Array, _Array]:
        """Return ``(X, Y)`` arrays of shape ``(size,)`` in index order.

        Uses the same formula as :meth:`cell_to_domain`, evaluated in *dtype*.
        """
        idx = np.arange(self.size)
        cols = (idx % self.width).astype(dtype)
        rows = (idx // self.width).astype(dtype)
        xstep = np.asarray(self.xstep, dtype=dtype)
        ystep = np.asarray(self.ystep, dtype=dtype)
        X = np.asarray(self.xlim[0], dtype=dtype) + cols * xstep
        Y = np.asarray(self.ylim[0], dtype=dtype) + rows * ystep
        return X, Y


def save_field(path: str, field: _Array) -> None:
    """Save *field* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, field)
