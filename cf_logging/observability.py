from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time

from cf_logging.metrics_log import log_records
from core.lagrange import PolynomialFitter


@dataclass
class FitReportLogger:
    """Buffer one summary row per fitted TI sample and append them to a Polars CSV.

    Usage:
        logger = FitReportLogger(run_id="example")
        logger.record(fitter, source="data/ti_example.dat")
        logger.flush()   # -> logs/lagrange_fits.csv
    """

    name: str = "lagrange_fits"
    run_id: str = "default"
    buffer: List[Dict[str, Any]] = field(default_factory=list)
    log_coefficients: bool = False

    def record(self, fitter: PolynomialFitter, *, source: Optional[str] = None) -> Dict[str, Any]:
        t0 = time.perf_counter()
        integral = float(fitter.integral())
        quadrature = float(fitter.quadrature())
        elapsed = float(time.perf_counter() - t0)
        samples = fitter.samples
        row: Dict[str, Any] = {
            "run_id": self.run_id,
            "source": "" if source is None else str(source),
            "n_samples": int(len(samples)),
            "degree": int(fitter.degree),
            "lambda_min": float(samples[0].x),
            "lambda_max": float(samples[-1].x),
            "delta_g_lagrange": integral,
            "delta_g_trapezoid": quadrature,
            "abs_difference": abs(integral - quadrature),
            "query_seconds": elapsed,
        }
        if self.log_coefficients:
            for k, c in enumerate(fitter.coefficients()):
                row[f"coeff:{k}"] = float(c)
        self.buffer.append(row)
        return row

    def flush(self) -> None:
        if not self.buffer:
            return
        log_records(self.name, self.buffer)
        self.buffer.clear()
