"""Bit-for-bit conformance against published TEA vectors."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Sequence

from teacipher.cipher.tea import TEACipher
from teacipher.cipher.vectors import KNOWN_VECTORS, KnownVector

logger = logging.getLogger(__name__)


@dataclass
class VectorOutcome:
    name: str
    expected_hex: str
    encrypted_hex: str
    decrypted_hex: str
    passed: bool


@dataclass
class ConformanceResult:
    outcomes: List[VectorOutcome] = field(default_factory=list)

    @property
    def all_pass(self) -> bool:
        return bool(self.outcomes) and all(o.passed for o in self.outcomes)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["all_pass"] = self.all_pass
        return d

    def summary(self) -> str:
        ok = sum(1 for o in self.outcomes if o.passed)
        status = "PASS" if self.all_pass else "FAIL"
        return f"[{status}] Known vectors: {ok}/{len(self.outcomes)} match"


def check_known_vectors(vectors: Sequence[KnownVector] = KNOWN_VECTORS) -> ConformanceResult:
    """Encrypt and decrypt each reference vector; both directions must match."""
    result = ConformanceResult()
    for vec in vectors:
        key, pt, ct = vec.as_bytes()
        cipher = TEACipher.new(key, vec.rounds)
        encrypted = cipher.encrypt(pt)
        decrypted = cipher.decrypt(ct)
        passed = encrypted == ct and decrypted == pt
        if not passed:
            logger.warning(
                "Vector %s mismatch: expected %s, got %s", vec.name, ct.hex(), encrypted.hex(),
            )
        result.outcomes.append(VectorOutcome(
            name=vec.name,
            expected_hex=ct.hex(),
            encrypted_hex=encrypted.hex(),
            decrypted_hex=decrypted.hex(),
            passed=passed,
        ))
    return result
