"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized (key, block) pairs and verifies that decryption
perfectly inverts encryption, and the other way round, for every pair.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

import numpy as np

from teacipher.cipher.tea import BLOCK_SIZE, DEFAULT_ROUNDS, TEACipher
from teacipher.cipher.key_schedule import KEY_SIZE
from teacipher.utils.repro import rng_bytes

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str       # What decrypt returned (should equal plaintext)
    error: Optional[str]     # Exception message if decrypt/encrypt threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one round count."""
    rounds: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] TEA-{self.rounds}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_roundtrip_tests(
    *,
    rounds: int = DEFAULT_ROUNDS,
    num_vectors: int = 1000,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification across many random test vectors.

    Each vector checks both ``decrypt(encrypt(p)) == p`` and
    ``encrypt(decrypt(p)) == p``.

    Args:
        rounds: Round count under test.
        num_vectors: Number of random (block, key) pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    rng = np.random.default_rng(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = rng_bytes(rng, BLOCK_SIZE)
        key = rng_bytes(rng, KEY_SIZE)

        try:
            cipher = TEACipher.new(key, rounds)
            ct = cipher.encrypt(pt)
            pt2 = cipher.decrypt(ct)
            ok = pt2 == pt and cipher.encrypt(cipher.decrypt(pt)) == pt

            if ok:
                passed += 1
            else:
                failed += 1
                if len(failures) < max_failures_recorded:
                    failures.append(RoundtripFailure(
                        vector_index=i,
                        plaintext_hex=pt.hex(),
                        key_hex=key.hex(),
                        ciphertext_hex=ct.hex(),
                        decrypted_hex=pt2.hex(),
                        error=None,
                    ))
        except ValueError as exc:
            failed += 1
            logger.warning("Roundtrip vector %d raised: %s", i, exc)
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext_hex=pt.hex(),
                    key_hex=key.hex(),
                    ciphertext_hex="<error>",
                    decrypted_hex="<error>",
                    error=f"{type(exc).__name__}: {exc}",
                ))

    elapsed = time.perf_counter() - start

    result = RoundtripResult(
        rounds=rounds,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    logger.info(result.summary())
    return result
