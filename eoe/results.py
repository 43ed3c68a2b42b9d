"""Terminate the process with a diagnostic when a value is a failure or absent.

Two input shapes are supported and no others:

* result-like values: :class:`Ok` or :class:`Err`, the only subclasses of the
  sealed :class:`Result` base;
* optional-like values: anything, where ``None`` marks absence.

On failure every message of the error chain is printed (headline as
``error``, the remaining causes as ``caused by``) and the process exits with
status 1. ``exit_on_error`` and ``quit_on_error`` are interchangeable names.

Updates:
  v0.4.1 - 2026-10-20 - End the whole process when exiting from a worker thread.
  v0.4.0 - 2026-10-16 - Add catch() and chain_from_messages() helpers.
  v0.3.0 - 2026-10-13 - Add Result.context() for wrapping errors with a headline.
  v0.2.0 - 2026-10-08 - Seal Result so only Ok and Err may subclass it.
  v0.1.0 - 2026-10-05 - Created module with exit_on_error and quit_on_error.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, ParamSpec, TypeVar, final, overload

from .exceptions import ChainedError
from .printer import print_chain, print_error
from .registry import Registry, get_registry

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
P = ParamSpec("P")

EXIT_STATUS = 1


def into_error(error: BaseException | str) -> BaseException:
    """Return *error* as an exception, wrapping plain strings in ChainedError."""
    if isinstance(error, BaseException):
        return error
    if isinstance(error, str):
        return ChainedError(error)
    raise TypeError(f"Cannot convert {type(error).__name__} to an error")


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


def error_chain(error: BaseException | str) -> list[str]:
    """Return the messages of *error* and its causes, headline first."""
    messages: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = into_error(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(_describe(current))
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__
    return messages


def chain_from_messages(messages: Iterable[str]) -> ChainedError:
    """Build a ChainedError whose chain is exactly *messages*, headline first."""
    ordered = list(messages)
    if not ordered:
        raise ValueError("An error chain needs at least one message")
    error = ChainedError(ordered[-1])
    for message in reversed(ordered[:-1]):
        error = ChainedError(message, cause=error)
    return error


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is None:
            continue
        try:
            stream.flush()
        except (OSError, ValueError):
            logger.debug("Could not flush %r before exiting", stream)


def _terminate() -> NoReturn:
    """Exit with status 1; from a worker thread the whole process is ended."""
    if threading.current_thread() is threading.main_thread():
        sys.exit(EXIT_STATUS)
    # SystemExit would only end this thread.
    _flush_standard_streams()
    os._exit(EXIT_STATUS)


def _exit_with_chain(error: BaseException, registry: Registry | None) -> NoReturn:
    chain = error_chain(error)
    logger.debug("Exiting on error chain of %d message(s)", len(chain))
    print_chain(chain, registry=registry)
    _terminate()


def _exit_on_none(registry: Registry | None) -> NoReturn:
    registry = registry or get_registry()
    print_error(registry.none_message.get_or_default(), registry=registry)
    _terminate()


class Result(Generic[T]):
    """Sealed base for :class:`Ok` and :class:`Err`."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in {"Ok", "Err"}:
            raise TypeError("Result is sealed; only Ok and Err may subclass it")

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        return isinstance(self, Err)

    def unwrap_or(self, default: T) -> T:
        if isinstance(self, Ok):
            return self.value
        return default

    def context(self, message: str) -> Result[T]:
        """Wrap an error in a new headline *message*; successes are returned as is."""
        if isinstance(self, Err):
            return Err(ChainedError(message, cause=self.error))
        return self

    def exit_on_error(self, *, registry: Registry | None = None) -> T:
        """Return the success value, or print the error chain and exit with status 1."""
        if isinstance(self, Ok):
            return self.value
        if isinstance(self, Err):
            _exit_with_chain(self.error, registry)
        raise TypeError(f"Unsupported result type {type(self).__name__}")

    def quit_on_error(self, *, registry: Registry | None = None) -> T:
        """Same as :meth:`exit_on_error`."""
        return self.exit_on_error(registry=registry)


@final
@dataclass(frozen=True, slots=True)
class Ok(Result[T]):
    value: T


@final
@dataclass(frozen=True, slots=True, init=False)
class Err(Result[Any]):
    error: BaseException

    def __init__(self, error: BaseException | str) -> None:
        object.__setattr__(self, "error", into_error(error))


def catch(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]:
    """Call *func* and capture its outcome as Ok or Err."""
    try:
        return Ok(func(*args, **kwargs))
    except Exception as exc:
        return Err(exc)


@overload
def exit_on_error(value: Result[T], *, registry: Registry | None = None) -> T: ...


@overload
def exit_on_error(value: T | None, *, registry: Registry | None = None) -> T: ...


def exit_on_error(value: Any, *, registry: Registry | None = None) -> Any:
    """Unwrap a Result or optional value, exiting with status 1 on failure or None."""
    if isinstance(value, Result):
        return value.exit_on_error(registry=registry)
    if value is None:
        _exit_on_none(registry)
    return value


@overload
def quit_on_error(value: Result[T], *, registry: Registry | None = None) -> T: ...


@overload
def quit_on_error(value: T | None, *, registry: Registry | None = None) -> T: ...


def quit_on_error(value: Any, *, registry: Registry | None = None) -> Any:
    """Same as :func:`exit_on_error`."""
    return exit_on_error(value, registry=registry)


__all__ = [
    "EXIT_STATUS",
    "Err",
    "Ok",
    "Result",
    "catch",
    "chain_from_messages",
    "error_chain",
    "exit_on_error",
    "into_error",
    "quit_on_error",
]
