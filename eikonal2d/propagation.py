"""Fast-marching propagation of a seeded eikonal field.

Algorithm overview
------------------
A generalized Dijkstra expansion over the 4-connected grid.  Every cell is
pushed onto a ``heapq`` min-heap with its seeded value (``0`` on the zero
level set, ``+inf`` elsewhere).  Popping the minimum settles that cell; each
of its in-grid, unsettled axis neighbours is then relaxed with the upwind
(Godunov) update

    u_x = min(left, right),  u_y = min(down, up)
    a, b = max(u_x, u_y), min(u_x, u_y)
    u = inf                                    if b == inf
    u = b + 1                                  if a - b > 1
    u = (u_x + u_y + sqrt(2 - (a - b)^2)) / 2  otherwise

and, when ``u`` is below the stored value, written back and pushed.
``heapq`` has no decrease-key, so a cell may sit in the heap several times;
a stale pop re-settles the cell (a no-op) and relaxes its neighbours again,
which only ever lowers or keeps their values.  Pushing on strict decrease
only keeps the number of heap entries linear in the grid size.

Grid spacing is one cell on both axes.  Lookups outside the grid read as
``+inf``.  Values are stored as float32, the field dtype.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import Callable, List, Optional, Set, Tuple

import numpy as np
import numpy.typing as npt

from .grid import GridWindow

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Cell = Tuple[int, int]
_SettleCallback = Callable[[int, float], None]

_NEIGHBOUR_OFFSETS: Tuple[_Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def solve_update(u_x: float, u_y: float) -> float:
    """Upwind eikonal update from the smaller neighbour on each axis.

    Solves ``(u - u_x)^2 + (u - u_y)^2 = 1`` for the larger root, falling back
    to the one-sided ``b + 1`` when the two values differ by more than one
    cell (negative discriminant).  Symmetric in its arguments.
    """
    a = max(u_x, u_y)
    b = min(u_x, u_y)
    if b == math.inf:
        return math.inf
    if a - b > 1.0:
        return b + 1.0
    return 0.5 * (u_x + u_y + math.sqrt(2.0 - (a - b) * (a - b)))


class EikonalPropagator:
    """Settle a seeded field on *window* in increasing order of value.

    The field passed to :meth:`run` is owned by the propagator for the
    duration of the call and mutated in place.  After a run, :attr:`settled`
    holds the linear index of every frozen cell.
    """

    def __init__(self, window: GridWindow) -> None:
        self.window = window
        self.settled: Set[int] = set()
        self._heap: List[Tuple[float, int]] = []
        self.pops = 0
        self.pushes = 0

    # ------------------------------------------------------------------
    # Neighbour lookup and update rule
    # ------------------------------------------------------------------

    def value_at(self, cell: _Cell, field) -> float:
        """Stored value of *cell*, or ``+inf`` outside the grid."""
        idx = self.window.cell_to_index(*cell)
        if idx is None:
            return math.inf
        return float(field[idx])

    def update(self, cell: _Cell, field) -> float:
        """Tentative value of *cell* from its current neighbour values."""
        col, row = cell
        u_x = min(self.value_at((col + 1, row), field), self.value_at((col - 1, row), field))
        u_y = min(self.value_at((col, row + 1), field), self.value_at((col, row - 1), field))
        return solve_update(u_x, u_y)

    def relax(self, idx: int, field) -> None:
        """Relax the unsettled in-grid neighbours of cell *idx*.

        Each neighbour keeps ``min(current, update)``; only a strict decrease
        is written back and pushed again.  Neighbours already in
        :attr:`settled` are left untouched.
        """
        col, row = self.window.index_to_cell(idx)
        for dc, dr in _NEIGHBOUR_OFFSETS:
            n_idx = self.window.cell_to_index(col + dc, row + dr)
            if n_idx is None or n_idx in self.settled:
                continue
            candidate = self.update((col + dc, row + dr), field)
            new_value = _to_f32(candidate)
            if not new_value < field[n_idx]:
                continue
            field[n_idx] = new_value
            heapq.heappush(self._heap, (new_value, n_idx))
            self.pushes += 1

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self, field: _Array, on_settle: Optional[_SettleCallback] = None) -> _Array:
        """Propagate the seeded *field* until every cell is settled.

        Parameters
        ----------
        field:
            Shape ``(W * H,)`` float32 array of seeds (``0``) and ``+inf``.
        on_settle:
            Optional ``on_settle(idx, value)`` called for every pop, stale
            duplicates included, with the priority the entry was pushed at.

        Returns
        -------
        numpy.ndarray
            *field* itself, holding the settled distances.
        """
        if field.shape != (self.window.size,):
            raise ValueError(
                f"field shape {field.shape} does not match a "
                f"{self.window.width}x{self.window.height} grid"
            )

        # Work on Python floats; float32 reads through numpy are slow.
        values = field.tolist()
        self.settled = set()
        self._heap = [(v, idx) for idx, v in enumerate(values)]
        heapq.heapify(self._heap)
        self.pops = 0
        self.pushes = len(self._heap)

        while self._heap:
            value, idx = heapq.heappop(self._heap)
            self.pops += 1
            self.settled.add(idx)
            if on_settle is not None:
                on_settle(idx, value)
            self.relax(idx, values)

        field[:] = values
        self._log_summary(field)
        return field

    def _log_summary(self, field: _Array) -> None:
        unreached = int(np.count_nonzero(np.isinf(field)))
        logger.debug(
            "propagated %dx%d grid: %d pops, %d pushes",
            self.window.width, self.window.height, self.pops, self.pushes,
        )
        if unreached:
            logger.warning("%d cells unreachable from any seed remain at +inf", unreached)


def _to_f32(value: float) -> float:
    """Round *value* to the nearest float32, returned as a Python float."""
    return float(np.float32(value))


def propagate(
    field: _Array,
    window: GridWindow,
    on_settle: Optional[_SettleCallback] = None,
) -> _Array:
    """Run :class:`EikonalPropagator` on *field* in place and return it."""
    return EikonalPropagator(window).run(field, on_settle=on_settle)
