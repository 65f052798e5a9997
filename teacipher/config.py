from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Evaluation harness
    default_rounds: int = Field(default=32, ge=1, description="Round count evaluated by default")
    roundtrip_vectors: int = Field(default=1000, ge=1)
    sac_trials: int = Field(default=200, ge=1)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Paths
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_rounds=int(os.getenv("TEA_ROUNDS", "32")),
        roundtrip_vectors=int(os.getenv("TEA_ROUNDTRIP_VECTORS", "1000")),
        sac_trials=int(os.getenv("TEA_SAC_TRIALS", "200")),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        runs_dir=os.getenv("TEA_RUNS_DIR", "runs"),
    )
