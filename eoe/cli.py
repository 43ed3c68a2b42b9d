"""Command line entry point: print a failure chain and exit with status 1.

Useful from shell scripts that want diagnostics formatted the same way as the
Python programs using the library::

    eoe "could not deploy" "connection refused"
    eoe --none

Updates:
  v0.2.1 - 2026-10-20 - Let --label-style restyle default labels, matching EOE_LABEL_STYLE.
  v0.2.0 - 2026-10-16 - Apply EOE_* environment settings after command line options.
  v0.1.0 - 2026-10-11 - Created module with argument parsing and logging setup.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import NoReturn

from rich.errors import StyleSyntaxError
from rich.style import Style

from .exceptions import SettingsError
from .registry import (
    DEFAULT_CAUSED_BY_LABEL,
    DEFAULT_ERROR_LABEL,
    DEFAULT_LABEL_STYLE,
    DEFAULT_SEPARATOR,
    Registry,
    Segment,
    get_registry,
)
from .results import Err, chain_from_messages, exit_on_error
from .settings import configure_from_env

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure root logging for the command line tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _style_argument(value: str) -> Style:
    try:
        return Style.parse(value)
    except StyleSyntaxError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eoe",
        description="Print a formatted error chain to stderr and exit with status 1.",
    )
    parser.add_argument("message", nargs="?", help="Headline error message")
    parser.add_argument("causes", nargs="*", help="Underlying causes, most immediate first")
    parser.add_argument(
        "--none",
        action="store_true",
        help="Report an unexpected missing value instead of an error chain",
    )
    parser.add_argument("--error-label", help="Label for the headline line")
    parser.add_argument("--caused-by-label", help="Label for each cause line")
    parser.add_argument("--separator", help="Text between label and message")
    parser.add_argument(
        "--label-style",
        type=_style_argument,
        default=None,
        help=f"Style for labels and separator (default: {DEFAULT_LABEL_STYLE!r})",
    )
    parser.add_argument(
        "--message-style",
        type=_style_argument,
        default=None,
        help="Style for message text, e.g. 'italic yellow'",
    )
    parser.add_argument("--none-message", help="Message printed with --none")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed arguments, rejecting a call with neither a message nor --none."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.none and (args.message or args.causes):
        parser.error("--none does not take messages")
    if not args.none and not args.message:
        parser.error("a message is required unless --none is given")
    return args


def apply_arguments(args: argparse.Namespace, registry: Registry) -> None:
    """Store command line overrides in *registry* before any other source.

    ``--label-style`` restyles all three labels, keeping default texts for
    the labels not given on the command line.
    """
    restyle = args.label_style is not None
    label_style = args.label_style or Style.parse(DEFAULT_LABEL_STYLE)
    labels = (
        (registry.error, args.error_label, DEFAULT_ERROR_LABEL),
        (registry.caused_by, args.caused_by_label, DEFAULT_CAUSED_BY_LABEL),
        (registry.sep, args.separator, DEFAULT_SEPARATOR),
    )
    for slot, text, default_text in labels:
        if text is None and not restyle:
            continue
        slot.set(Segment(style=label_style, value=default_text if text is None else text))
    if args.message_style is not None:
        registry.message_style.set(args.message_style)
    if args.none_message is not None:
        registry.none_message.set(args.none_message)


def main(argv: Sequence[str] | None = None, *, registry: Registry | None = None) -> NoReturn:
    """Run the eoe command; always terminates the process."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    registry = registry or get_registry()

    apply_arguments(args, registry)
    try:
        configure_from_env(registry)
    except SettingsError as exc:
        exit_on_error(Err(exc), registry=registry)

    if args.none:
        exit_on_error(None, registry=registry)
    Err(chain_from_messages([args.message, *args.causes])).exit_on_error(registry=registry)
    raise AssertionError("unreachable")  # pragma: no cover


__all__ = ["build_parser", "main", "parse_args", "setup_logging"]
