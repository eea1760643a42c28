import os
import random

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_MATCH_MODE = os.getenv("DEFAULT_MATCH_MODE", "balanced")

_seed = os.getenv("RANDOM_SEED")
RANDOM_SEED = int(_seed) if _seed not in (None, "") else None


def get_rng() -> random.Random:
    """One random source per request; seeded when RANDOM_SEED is set."""
    return random.Random(RANDOM_SEED)
