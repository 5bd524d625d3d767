"""Map a settled field to an RGB image and write it to disk.

The colour map is a single green channel whose intensity falls off with
distance, ``floor(256 / (1 + 0.01 d))`` saturated to ``0..255``.  Unreached
(``+inf``) and NaN cells render black.
"""

from __future__ import annotations

import os

import matplotlib.image as mpimg
import numpy as np
import numpy.typing as npt

from .grid import GridWindow

_Array = npt.NDArray[np.floating]


def green_intensity(field: _Array, falloff: float = 0.01) -> npt.NDArray[np.uint8]:
    """Per-cell green channel value for distances *field*."""
    d = np.asarray(field, dtype=np.float64)
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        g = np.floor(256.0 / (1.0 + falloff * d))
    g = np.nan_to_num(g, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(g, 0, 255).astype(np.uint8)


def colorize_field(field: _Array, window: GridWindow, falloff: float = 0.01) -> npt.NDArray[np.uint8]:
    """Return an ``(H, W, 3)`` uint8 image of *field*.

    Row ``0`` of the grid (``ymin``) ends up at the bottom of the image.
    """
    image = np.zeros(window.shape + (3,), dtype=np.uint8)
    green = green_intensity(np.asarray(field).reshape(window.shape), falloff)
    image[..., 1] = green[::-1, :]
    return image


def save_png(path: str, image: npt.NDArray[np.uint8]) -> None:
    """Save *image* to *path* as PNG (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    mpimg.imsave(path, image)
