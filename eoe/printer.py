"""Render labelled diagnostic lines to standard error.

Every line has the shape ``<label><separator><message>`` followed by a line
break. Text is written verbatim; a rich console bound to the destination
stream at call time decides the colour system, so ANSI codes only appear when
the stream supports them.

Updates:
  v0.4.0 - 2026-10-20 - Paint segments with Style.render so messages keep tabs and control characters.
  v0.3.1 - 2026-10-20 - Treat a missing stderr (pythonw) as an unusable stream.
  v0.3.0 - 2026-10-15 - Hold the output lock across a whole chain in print_chain.
  v0.2.0 - 2026-10-10 - Abort the process when the diagnostic stream cannot be written.
  v0.1.0 - 2026-10-05 - Created module with print_error and print_caused_by.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from collections.abc import Iterable, Sequence
from typing import NoReturn, TextIO

from rich.console import COLOR_SYSTEMS, Console

from .registry import Registry, Segment, get_registry

logger = logging.getLogger(__name__)

_OUTPUT_LOCK = threading.RLock()


def _render(segments: Sequence[Segment], stream: TextIO) -> str:
    """Join *segments*, with ANSI codes only if *stream* supports them."""
    console = Console(file=stream, highlight=False, markup=False, emoji=False)
    system_name = console.color_system
    color_system = COLOR_SYSTEMS[system_name] if system_name else None
    return "".join(
        segment.render(color_system=color_system, legacy_windows=console.legacy_windows)
        for segment in segments
    )


def _abort() -> NoReturn:
    # Nowhere left to report the failure.
    logger.debug("Diagnostic stream is unusable; aborting")
    os.abort()


def _write_line(segments: Sequence[Segment], stream: TextIO | None) -> None:
    if stream is None:
        _abort()
    try:
        with _OUTPUT_LOCK:
            stream.write(_render(segments, stream) + "\n")
            stream.flush()
    except (OSError, ValueError):
        _abort()


def _print(
    label: Segment,
    message: object,
    registry: Registry | None,
    stream: TextIO | None,
) -> None:
    registry = registry or get_registry()
    target = stream if stream is not None else sys.stderr
    sep = registry.sep.get_or_default()
    body = Segment(style=registry.message_style.get_or_default(), value=str(message))
    _write_line((label, sep, body), target)


def print_error(
    message: object,
    *,
    registry: Registry | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write *message* labelled with the configured error label."""
    registry = registry or get_registry()
    _print(registry.error.get_or_default(), message, registry, stream)


def print_caused_by(
    message: object,
    *,
    registry: Registry | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write *message* labelled with the configured caused-by label."""
    registry = registry or get_registry()
    _print(registry.caused_by.get_or_default(), message, registry, stream)


def print_chain(
    messages: Iterable[object],
    *,
    registry: Registry | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the headline of *messages* as an error and the rest as causes.

    The output lock is held for the whole chain so concurrent writers cannot
    interleave with it.
    """
    with _OUTPUT_LOCK:
        for index, message in enumerate(messages):
            if index == 0:
                print_error(message, registry=registry, stream=stream)
            else:
                print_caused_by(message, registry=registry, stream=stream)


__all__ = ["print_caused_by", "print_chain", "print_error"]
