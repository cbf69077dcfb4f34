"""Seed parsing and hashing utilities."""

from __future__ import annotations

import hashlib
import re

_WORD_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")
_INT_RE = re.compile(r"^[0-9]+$")

_EXAMPLE_SEEDS = ["42", "1234567", "MistyForge", "dune-7"]


class SeedParseError(ValueError):
    """Raised when a seed is invalid."""


def seed_hash64(seed: str) -> int:
    """Hash a canonical word seed to a deterministic unsigned 64-bit integer."""

    digest = hashlib.blake2b(
        seed.encode("ascii", errors="strict"),
        digest_size=8,
        person=b"erosion0",
    ).digest()
    return int.from_bytes(digest, byteorder="big", signed=False)


def parse_seed(seed_text: str) -> int:
    """Parse `seed_text` as a decimal integer or a case-insensitive word."""

    if seed_text is None:
        raise SeedParseError(_error_message("Seed is required."))

    raw = seed_text.strip()
    if not raw:
        raise SeedParseError(_error_message("Seed cannot be empty."))

    if _INT_RE.fullmatch(raw):
        value = int(raw)
        if value >= 1 << 64:
            raise SeedParseError(_error_message("Integer seeds must fit in 64 bits."))
        return value

    if not _WORD_RE.fullmatch(raw):
        raise SeedParseError(
            _error_message("Seed must be a non-negative integer or a word (letters, digits, '-', '_').")
        )
    return seed_hash64(raw.lower())


def _error_message(reason: str) -> str:
    examples = ", ".join(_EXAMPLE_SEEDS)
    return f"{reason} Examples: {examples}"
