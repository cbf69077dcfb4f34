import pytest

from erosion.rng import particle_rng
from erosion.seed import SeedParseError, parse_seed


def test_parse_seed_integer() -> None:
    assert parse_seed("42") == 42
    assert parse_seed(" 7 ") == 7


def test_parse_seed_word_case_insensitive() -> None:
    a = parse_seed("mistyforge")
    b = parse_seed("MISTYFORGE")
    c = parse_seed("MistyForge")

    assert a == b == c
    assert 0 <= a < 1 << 64


def test_parse_seed_invalid_has_friendly_error() -> None:
    with pytest.raises(SeedParseError) as exc:
        parse_seed("misty forge!")

    message = str(exc.value)
    assert "Examples:" in message

    with pytest.raises(SeedParseError):
        parse_seed(str(1 << 64))


def test_particle_rng_is_deterministic_per_stream() -> None:
    a = particle_rng(42).random(4)
    b = particle_rng(42).random(4)
    c = particle_rng(42, stream="other").random(4)
    d = particle_rng(43).random(4)

    assert (a == b).all()
    assert not (a == c).all()
    assert not (a == d).all()

    with pytest.raises(ValueError):
        particle_rng(42, stream="")
