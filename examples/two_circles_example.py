"""Eikonal field around two overlapping circles.

Demonstrates: Circle2D, Union2D, seed_field, propagate, colorize_field
Output:       examples/two_circles_example.png

Sanity check:
    Far from the seeds the fast-marching value, in cells, should stay within
    a few percent of the Euclidean distance to the nearest seed cell.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from eikonal2d import (
    Circle2D, GridWindow, Union2D, colorize_field, propagate, save_png, seed_field,
)

_N   = 128
_EPS = 0.05
_OUT = os.path.join(os.path.dirname(__file__), "two_circles_example.png")


def main():
    print("=" * 60)
    print("TWO CIRCLES: union of radius-0.8 circles at x = -0.6 and x = +0.6")
    print(f"  grid {_N}x{_N} over [-3, 3]^2, epsilon = {_EPS}")
    print("=" * 60)

    window = GridWindow.square(_N, -3.0, 3.0)
    curve  = Union2D(Circle2D(0.8).translate(-0.6, 0.0), Circle2D(0.8).translate(0.6, 0.0))

    field = seed_field(window, curve, _EPS)
    seeds = np.flatnonzero(field == 0.0)
    print(f"\nseed cells: {seeds.size}")

    propagate(field, window)
    print(f"field range: [{field.min():.3f}, {field.max():.3f}]  unreached: {np.isinf(field).sum()}")

    # --- compare with brute-force Euclidean distance to the seed cells ---
    idx   = np.arange(window.size)
    cols  = idx % window.width
    rows  = idx // window.width
    sc, sr = seeds % window.width, seeds // window.width
    sample = idx[::97]
    euclid = np.array([np.min(np.hypot(sc - cols[i], sr - rows[i])) for i in sample])
    far    = euclid > 10
    rel    = np.abs(field[sample][far] - euclid[far]) / euclid[far]
    print(f"max relative error vs Euclidean (d > 10 cells): {rel.max():.3%}")

    ok = np.isfinite(field).all() and rel.max() < 0.1
    print("\n" + ("PASSED" if ok else "FAILED"))

    save_png(_OUT, colorize_field(field, window))
    print(f"  Saved: {_OUT}")


if __name__ == "__main__":
    main()
