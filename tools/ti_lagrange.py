"""Free-energy difference from TI data via a Lagrange interpolating polynomial.

Usage (PowerShell):
    uv run python -m tools.ti_lagrange data/ti_example.dat
    uv run python -m tools.ti_lagrange data/ti_example.dat plots/ti_example.csv 100 --run-id example

Prints the polynomial coefficients, the analytic ΔG and the trapezoid ΔG. With a plot
file, writes the fitted curve on λ ∈ [0, 1] (DATA_POINTS steps; default N − 1). A summary
row is appended to logs/<log-name>.csv unless --no-log is given.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from cf_logging.observability import FitReportLogger
from core.errors import InvalidInput
from core.lagrange import PolynomialFitter
from modules.ti_data.estimate_writer import write_estimates
from modules.ti_data.sample_reader import read_samples


def format_coefficients(coefficients: Sequence[float]) -> List[str]:
    lines = ["Degree, Coefficients"]
    for k, c in enumerate(coefficients):
        lines.append(f"{k:6d}, {float(c):.8f}")
    return lines


def format_free_energy(integral: float, quadrature: float) -> List[str]:
    return [
        "Free energy difference",
        f" Lagrange: {float(integral):.8f}",
        f"Trapezoid: {float(quadrature):.8f}",
    ]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Lagrange-polynomial free energy estimate from TI data")
    ap.add_argument("input_file", type=Path, help="File containing thermodynamic integration data")
    ap.add_argument("plot_file", type=Path, nargs="?", default=None, help="File for the plot data (optional)")
    ap.add_argument("data_points", type=int, nargs="?", default=None, help="Number of steps for the plot (default N-1)")
    ap.add_argument("--run-id", type=str, default="default", help="run_id column in the metrics log")
    ap.add_argument("--log-name", type=str, default="lagrange_fits", help="Metrics CSV base name under logs/")
    ap.add_argument("--no-log", action="store_true", help="Do not append a row to the metrics log")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    path: Path = args.input_file
    if not path.is_file():
        print(f"failed to open the file {path}")
        return 1
    try:
        fitter = PolynomialFitter(read_samples(path))
    except (OSError, UnicodeDecodeError) as exc:
        print(f"failed to open the file {path}: {exc}")
        return 1
    except InvalidInput as exc:
        print(f"FAIL: {path}: {exc}")
        return 1

    for line in format_coefficients(fitter.coefficients()):
        print(line)
    print()
    for line in format_free_energy(fitter.integral(), fitter.quadrature()):
        print(line)

    if args.plot_file is not None:
        steps = args.data_points if args.data_points is not None else len(fitter) - 1
        try:
            curve = fitter.sample(steps)
        except InvalidInput as exc:
            print(f"FAIL: {exc}")
            return 1
        out = write_estimates(args.plot_file, curve)
        print(f"Wrote {len(curve)} estimates to {out}")

    if not args.no_log:
        logger = FitReportLogger(name=args.log_name, run_id=args.run_id)
        logger.record(fitter, source=str(path))
        logger.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
