"""Testing generators – property-based strategies."""
from pwcompat.testing.generators.strategies import password_strategy, salt_strategy

__all__ = ["password_strategy", "salt_strategy"]
