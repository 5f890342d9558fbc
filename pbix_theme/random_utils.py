"""
Secure random helpers for palette generation. Uses the secrets module so generated
palettes carry no seeding bias; the deterministic parts of the engine never call these.
"""
import secrets


def random_rgb() -> tuple[int, int, int]:
    """Uniform 24-bit color as (R, G, B) 0–255."""
    value = secrets.randbits(24)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def random_token(nbytes: int = 4) -> str:
    """Short hex token for stable-enough entry ids."""
    return secrets.token_hex(nbytes)
