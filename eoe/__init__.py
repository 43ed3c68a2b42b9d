"""Exit the process with a styled diagnostic when a value is an error or None.

Updates: v0.4.0 - 2026-10-16 - Expose catch(), chain_from_messages() and configure_from_env().
Updates: v0.3.0 - 2026-10-14 - Export Registry for injected configuration.
Updates: v0.2.0 - 2026-10-09 - Export the write-once configuration slots.
Updates: v0.1.0 - 2026-10-05 - Package scaffold.
"""

from .exceptions import ChainedError, EoeError, SettingsError
from .printer import print_caused_by, print_chain, print_error
from .registry import (
    CAUSED_BY,
    ERROR,
    MESSAGE_STYLE,
    NONE_MESSAGE,
    SEP,
    OnceSlot,
    Registry,
    Segment,
    get_registry,
)
from .results import (
    Err,
    Ok,
    Result,
    catch,
    chain_from_messages,
    error_chain,
    exit_on_error,
    quit_on_error,
)
from .settings import EoeSettings, apply_settings, configure_from_env, load_settings

__version__ = "0.4.0"

__all__ = [
    "CAUSED_BY",
    "ChainedError",
    "ERROR",
    "EoeError",
    "EoeSettings",
    "Err",
    "MESSAGE_STYLE",
    "NONE_MESSAGE",
    "Ok",
    "OnceSlot",
    "Registry",
    "Result",
    "SEP",
    "Segment",
    "SettingsError",
    "apply_settings",
    "catch",
    "chain_from_messages",
    "configure_from_env",
    "error_chain",
    "exit_on_error",
    "get_registry",
    "load_settings",
    "print_caused_by",
    "print_chain",
    "print_error",
    "quit_on_error",
]
