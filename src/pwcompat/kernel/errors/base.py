"""Root error class for the pwcompat error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error pwcompat raises on purpose.

    ``code`` is a stable slug callers can branch on; ``detail`` is extra
    context that is safe to log, so it never holds a plaintext password or a
    whole stored hash. A wrapped exception passed as ``cause`` becomes
    ``__cause__``, exactly as ``raise ... from cause`` would.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def to_dict(self) -> dict[str, Any]:
        """Log-ready mapping: error class, code, message, detail and cause."""
        data: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            data["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return data

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["BaseError"]
