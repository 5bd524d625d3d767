"""Solve the eikonal field of the flower curve and render it as a PNG.

Usage::

    python scripts/render_eikonal.py                       # 1024^2, saves plot_plain.png
    python scripts/render_eikonal.py --size 256 --out small.png
    python scripts/render_eikonal.py --config run.yaml --npy field.npy

Requirements: numpy, matplotlib, pyyaml
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eikonal2d import colorize_field, load_config, save_field, save_png, solve

logger = logging.getLogger("render_eikonal")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render a fast-marching eikonal field to PNG.")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--size", type=int, default=None, help="Grid size N (N x N cells)")
    parser.add_argument("--epsilon", type=float, default=None, help="Zero-level-set tolerance")
    parser.add_argument("--out", default="plot_plain.png", help="Output PNG path")
    parser.add_argument("--npy", default=None, help="Also save the raw field as .npy")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = load_config(
        args.config,
        width=args.size,
        height=args.size,
        epsilon=args.epsilon,
    )
    field, window = solve(config)

    save_png(args.out, colorize_field(field, window))
    logger.info("saved %s", args.out)
    if args.npy:
        save_field(args.npy, field)
        logger.info("saved %s", args.npy)


if __name__ == "__main__":
    main()
