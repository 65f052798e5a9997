"""Deterministic evaluation of the TEA primitive.

Known-vector conformance, roundtrip verification and Strict Avalanche
Criterion analysis, plus a report that aggregates them.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests
from .conformance import ConformanceResult, VectorOutcome, check_known_vectors
from .avalanche import SACResult, compute_sac
from .report import EvaluationReport, run_full_evaluation

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "ConformanceResult",
    "VectorOutcome",
    "check_known_vectors",
    "SACResult",
    "compute_sac",
    "EvaluationReport",
    "run_full_evaluation",
]
