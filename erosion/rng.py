"""Seeded random sources for particle placement."""

from __future__ import annotations

import hashlib

import numpy as np


def _normalize_seed(seed: int) -> int:
    return int(seed) & ((1 << 64) - 1)


def entropy_seed() -> int:
    """Draw a fresh 64-bit seed from OS entropy."""

    return _normalize_seed(np.random.SeedSequence().entropy)


def particle_rng(seed: int, *, stream: str = "particles") -> np.random.Generator:
    """PCG64 generator for a named stream of a run seed.

    The stream name is hashed into the seed, so equal run seeds give equal
    particle placements while other streams stay independent.
    """

    if not stream:
        raise ValueError("stream name must be non-empty")
    payload = f"erosion-v1:{_normalize_seed(seed)}:{stream}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8, person=b"particle").digest()
    return np.random.Generator(np.random.PCG64(int.from_bytes(digest, byteorder="big", signed=False)))
