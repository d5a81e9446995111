"""Security – legacy salt generation."""
from __future__ import annotations

import random

__all__ = ["DEFAULT_SALT_LENGTH", "SALT_ALPHABET", "salt"]

SALT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890@#$%^*()_-!"
DEFAULT_SALT_LENGTH = 5

# OS-seeded so salts cannot be replayed from a guessed seed
_system_random = random.SystemRandom()


def salt(length: int, *, rng: random.Random | None = None) -> str:
    """Return *length* characters drawn uniformly from :data:`SALT_ALPHABET`.

    A non-positive *length* yields an empty string. Pass *rng* to make the
    output reproducible.
    """
    if length <= 0:
        return ""
    source = rng or _system_random
    return "".join(source.choice(SALT_ALPHABET) for _ in range(length))
