"""Structured evaluation report builder.

Aggregates known-vector conformance, roundtrip tests and SAC analysis into
a single serializable report.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from teacipher.config import Settings, load_settings
from teacipher.utils.repro import utc_timestamp, write_json

from .avalanche import SACResult, compute_sac
from .conformance import ConformanceResult, check_known_vectors
from .roundtrip import RoundtripResult, run_roundtrip_tests

logger = logging.getLogger(__name__)


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    conformance: Optional[ConformanceResult] = None
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    sac_results: List[SACResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        return (
            (self.conformance is None or self.conformance.all_pass)
            and all(r.is_perfect for r in self.roundtrip_results)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "conformance": self.conformance.to_dict() if self.conformance else None,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "sac": [s.to_dict() for s in self.sac_results],
            "summary": {
                "known_vectors_pass": self.conformance.all_pass if self.conformance else None,
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "sac_all_pass": all(s.passes_sac for s in self.sac_results),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report, {self.timestamp}", "=" * 50]

        if self.conformance is not None:
            lines.append(self.conformance.summary())

        if self.roundtrip_results:
            lines.append("\nRoundtrip Tests:")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.sac_results:
            sac_pass = sum(1 for s in self.sac_results if s.passes_sac)
            lines.append(f"\nSAC Analysis: {sac_pass}/{len(self.sac_results)} pass")
            for s in self.sac_results:
                lines.append(f"  {s.summary()}")

        return "\n".join(lines)

    def save(self, path: str | Path) -> Path:
        path = Path(path)
        write_json(path, self.to_dict())
        return path


def run_full_evaluation(
    settings: Optional[Settings] = None,
    *,
    include_sac: bool = True,
    save: bool = False,
) -> EvaluationReport:
    """Run conformance, roundtrip and (optionally) SAC with the given settings.

    When ``save`` is set, the report is written to
    ``<runs_dir>/<timestamp>_evaluation.json``.
    """
    settings = settings or load_settings()
    rounds = settings.default_rounds
    seed = settings.global_seed

    logger.info("Evaluating TEA-%d (seed=%d)", rounds, seed)
    report = EvaluationReport(conformance=check_known_vectors())

    report.roundtrip_results.append(run_roundtrip_tests(
        rounds=rounds,
        num_vectors=settings.roundtrip_vectors,
        seed=seed,
    ))

    if include_sac:
        for input_type in ("plaintext", "key"):
            logger.info("Computing SAC over %s bits", input_type)
            report.sac_results.append(compute_sac(
                rounds=rounds,
                input_type=input_type,
                trials=settings.sac_trials,
                seed=seed,
            ))

    if save:
        out = report.save(Path(settings.runs_dir) / f"{utc_timestamp()}_evaluation.json")
        logger.info("Report written to %s", out)

    if not report.all_pass:
        logger.warning("Evaluation found failures")
    return report
