"""Process-wide, write-once configuration for diagnostic output.

Each setting lives in its own :class:`OnceSlot`. The first successful
``set`` wins; later attempts are ignored and reported by returning ``False``.
Reading a slot through :meth:`OnceSlot.get_or_default` resolves the built-in
default once and stores it, so the effective value never changes afterwards.

Updates:
  v0.3.1 - 2026-10-20 - Render segments to plain strings via Style.render.
  v0.3.0 - 2026-10-14 - Allow independent Registry instances for injection.
  v0.2.0 - 2026-10-09 - Guard slots with per-slot locks for concurrent first sets.
  v0.1.0 - 2026-10-05 - Created module with default labels and none message.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich.color import ColorSystem
from rich.style import Style

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LABEL_STYLE = "bold red"
DEFAULT_ERROR_LABEL = "error"
DEFAULT_CAUSED_BY_LABEL = "caused by"
DEFAULT_SEPARATOR = ": "
DEFAULT_NONE_MESSAGE = "unexpected None"

_UNSET = object()


@dataclass(frozen=True, slots=True)
class Segment:
    """A piece of displayable text paired with the style used to paint it."""

    style: Style
    value: str

    @classmethod
    def styled(cls, value: str, style: str | Style = "") -> Segment:
        """Return a segment for *value*, parsing *style* when given as text."""
        if isinstance(style, str):
            style = Style.parse(style) if style else Style.null()
        return cls(style=style, value=value)

    def render(
        self,
        *,
        color_system: ColorSystem | None = None,
        legacy_windows: bool = False,
    ) -> str:
        """Return the value unchanged, wrapped in ANSI codes when *color_system* is given."""
        return self.style.render(
            self.value, color_system=color_system, legacy_windows=legacy_windows
        )


class OnceSlot(Generic[T]):
    """A setting that accepts one value for the lifetime of the slot."""

    def __init__(self, name: str, default_factory: Callable[[], T]) -> None:
        self.name = name
        self._default_factory = default_factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    def set(self, value: T) -> bool:
        """Store *value* unless the slot already holds one; return whether it was stored."""
        with self._lock:
            if self._value is not _UNSET:
                logger.debug("Slot %s already set; ignoring new value", self.name)
                return False
            self._value = value
        return True

    def get(self) -> T | None:
        """Return the stored value without resolving the default."""
        value = self._value
        if value is _UNSET:
            return None
        return value  # type: ignore[return-value]

    def get_or_default(self) -> T:
        """Return the stored value, storing the built-in default on first use."""
        with self._lock:
            if self._value is _UNSET:
                self._value = self._default_factory()
            return self._value  # type: ignore[return-value]

    def is_set(self) -> bool:
        return self._value is not _UNSET

    def __repr__(self) -> str:
        state = "unset" if self._value is _UNSET else repr(self._value)
        return f"OnceSlot({self.name!r}, {state})"


def _default_label(text: str) -> Callable[[], Segment]:
    return lambda: Segment.styled(text, DEFAULT_LABEL_STYLE)


class Registry:
    """The five settings consulted by the diagnostic printer."""

    def __init__(self) -> None:
        self.error: OnceSlot[Segment] = OnceSlot("error", _default_label(DEFAULT_ERROR_LABEL))
        self.caused_by: OnceSlot[Segment] = OnceSlot(
            "caused_by", _default_label(DEFAULT_CAUSED_BY_LABEL)
        )
        self.sep: OnceSlot[Segment] = OnceSlot("sep", _default_label(DEFAULT_SEPARATOR))
        self.message_style: OnceSlot[Style] = OnceSlot("message_style", Style.null)
        self.none_message: OnceSlot[str] = OnceSlot("none_message", lambda: DEFAULT_NONE_MESSAGE)

    def slots(self) -> dict[str, OnceSlot[object]]:
        """Return the slots keyed by name."""
        return {
            "error": self.error,
            "caused_by": self.caused_by,
            "sep": self.sep,
            "message_style": self.message_style,
            "none_message": self.none_message,
        }  # type: ignore[return-value]


_default_registry = Registry()


def get_registry() -> Registry:
    """Return the process-wide registry used when no registry is injected."""
    return _default_registry


ERROR = _default_registry.error
CAUSED_BY = _default_registry.caused_by
SEP = _default_registry.sep
MESSAGE_STYLE = _default_registry.message_style
NONE_MESSAGE = _default_registry.none_message


__all__ = [
    "CAUSED_BY",
    "DEFAULT_CAUSED_BY_LABEL",
    "DEFAULT_ERROR_LABEL",
    "DEFAULT_LABEL_STYLE",
    "DEFAULT_NONE_MESSAGE",
    "DEFAULT_SEPARATOR",
    "ERROR",
    "MESSAGE_STYLE",
    "NONE_MESSAGE",
    "OnceSlot",
    "Registry",
    "SEP",
    "Segment",
    "get_registry",
]
