"""Plot TI samples together with their Lagrange interpolating polynomial.

Example:
    uv run python -m experiments.plots.plot_lagrange_fit --input data/ti_example.dat --steps 200 --save plots/ti_fit.png

Requires matplotlib (examples extra).
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Tuple

import numpy as np

try:
    import matplotlib.pyplot as plt
except ImportError as exc:  # pragma: no cover
    raise SystemExit("matplotlib is required. Install with `uv pip install -e .[examples]`.") from exc

from core.errors import InvalidInput
from core.lagrange import PolynomialFitter
from modules.ti_data.sample_reader import read_samples


def compute_fit_curve(fitter: PolynomialFitter, steps: int) -> Tuple[np.ndarray, np.ndarray]:
    """Sampled curve on the λ ∈ [0, 1] grid as arrays (x, p(x))."""
    pts = list(fitter.sample(steps))
    xs = np.array([p.x for p in pts], dtype=float)
    ys = np.array([p.y for p in pts], dtype=float)
    return xs, ys


def plot_fit(fitter: PolynomialFitter, steps: int, out: Path | None, title: str = "") -> None:
    xs, ys = compute_fit_curve(fitter, steps)
    sx = np.array([p.x for p in fitter.samples], dtype=float)
    sy = np.array([p.y for p in fitter.samples], dtype=float)
    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(xs, ys, color="#005bbb", linewidth=2.0, label=f"Lagrange p(λ), degree {fitter.degree}")
    ax.scatter(sx, sy, color="tab:red", zorder=3, label="TI samples")
    ax.axhline(0.0, color="0.6", linewidth=0.8)
    ax.set_xlabel("λ")
    ax.set_ylabel("dG/dλ")
    ax.set_title(title or f"ΔG = {fitter.integral():.6f} (trapezoid {fitter.quadrature():.6f})")
    ax.grid(alpha=0.3)
    ax.legend()
    fig.tight_layout()
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out, dpi=200)
        print(f"Saved plot to {out}")
    else:
        plt.show()
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--input", type=Path, required=True, help="TI data file (λ, dG/dλ per line)")
    parser.add_argument("--steps", type=int, default=200, help="Grid steps on λ ∈ [0, 1]")
    parser.add_argument("--save", type=Path, default=None, help="Optional path to save PNG instead of showing")
    args = parser.parse_args()
    if not args.input.is_file():
        raise SystemExit(f"Input file not found: {args.input}")
    if args.steps <= 0:
        raise SystemExit("--steps must be positive.")
    try:
        fitter = PolynomialFitter(read_samples(args.input))
    except InvalidInput as exc:
        raise SystemExit(f"Cannot fit {args.input}: {exc}") from exc
    plot_fit(fitter, args.steps, args.save)


if __name__ == "__main__":
    main()
