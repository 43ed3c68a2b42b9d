"""Common exception classes for the eoe package.

All exceptions raised by the package inherit from :class:`EoeError`, so hosts
can catch a single base class while still distinguishing configuration
problems from the chained errors built for diagnostics.

Updates:
  v0.2.0 - 2026-10-12 - Add SettingsError for environment configuration failures.
  v0.1.0 - 2026-10-05 - Created module with the chained error type.
"""

from __future__ import annotations


class EoeError(Exception):
    """Base exception for eoe failures."""


class ChainedError(EoeError):
    """Message-carrying error that links to an underlying cause.

    Plain string failures are converted into this type, and
    :meth:`eoe.results.Result.context` wraps existing errors with it so the
    original error becomes ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class SettingsError(EoeError):
    """Raised when eoe configuration cannot be loaded or validated."""


__all__ = ["ChainedError", "EoeError", "SettingsError"]
