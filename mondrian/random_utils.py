"""
Randomness for the generator. Two kinds:
- seeded streams (numpy Generator) for reproducible layout decisions,
- OS entropy (secrets) for picking a new seed, which must not be reproducible.
"""
import secrets

import numpy as np

# Upper bound (exclusive) for freshly drawn seeds.
SEED_RANGE = 100000


def seeded_stream(seed: int) -> np.random.Generator:
    """Fresh deterministic stream for one pass. Same seed, same samples."""
    return np.random.default_rng(seed)


def secure_random() -> float:
    """Cryptographically secure random float in [0, 1)."""
    return secrets.SystemRandom().random()


def fresh_seed() -> int:
    """New seed with no relation to the previous one."""
    return int(secure_random() * SEED_RANGE)
