"""Testing support – Hypothesis strategies and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["pwcompat.testing.fixtures"]
"""

from pwcompat.testing.generators import password_strategy, salt_strategy

__all__ = ["password_strategy", "salt_strategy"]
