"""Environment-driven configuration for the diagnostic registry.

Settings are read from ``EOE_*`` environment variables (or a ``.env`` file)
and copied into the registry slots on request. Nothing is applied on import;
hosts call :func:`configure_from_env` during startup when they want it.

Updates:
  v0.2.1 - 2026-10-16 - Return only the slot names that were actually stored.
  v0.2.0 - 2026-10-12 - Validate style strings through rich's style parser.
  v0.1.0 - 2026-10-11 - Created module with EoeSettings and load_settings.
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
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

logger = logging.getLogger(__name__)


class EoeSettings(BaseSettings):
    """Diagnostic output configuration sourced from environment variables."""

    error_label: str | None = Field(default=None, description="Label for the headline line.")
    caused_by_label: str | None = Field(default=None, description="Label for each cause line.")
    separator: str | None = Field(default=None, description="Text between label and message.")
    label_style: str = Field(
        default=DEFAULT_LABEL_STYLE,
        description="rich style applied to labels and the separator.",
    )
    message_style: str | None = Field(default=None, description="rich style for message text.")
    none_message: str | None = Field(
        default=None,
        description="Message printed when an absent value is unwrapped.",
    )

    model_config = SettingsConfigDict(
        env_prefix="EOE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("label_style", "message_style")
    @classmethod
    def _validate_style(cls, value: str | None) -> str | None:
        """Ensure style strings can be parsed by rich."""
        if value is None or not value.strip():
            return value
        try:
            Style.parse(value)
        except StyleSyntaxError as exc:
            raise ValueError(f"invalid style {value!r}: {exc}") from exc
        return value


def load_settings(**overrides: object) -> EoeSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return EoeSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise SettingsError("Invalid eoe configuration") from exc


def _style(value: str | None) -> Style:
    if value is None or not value.strip():
        return Style.null()
    return Style.parse(value)


def apply_settings(settings: EoeSettings, registry: Registry | None = None) -> list[str]:
    """Store the supplied settings in *registry*; return the slot names that took effect.

    Only fields that were explicitly provided are applied. A changed
    ``label_style`` restyles all three label slots, keeping default texts for
    labels that were not provided.
    """
    registry = registry or get_registry()
    provided = settings.model_fields_set
    restyle = "label_style" in provided
    label_style = _style(settings.label_style)
    applied: list[str] = []

    labels = (
        ("error", registry.error, "error_label", settings.error_label, DEFAULT_ERROR_LABEL),
        (
            "caused_by",
            registry.caused_by,
            "caused_by_label",
            settings.caused_by_label,
            DEFAULT_CAUSED_BY_LABEL,
        ),
        ("sep", registry.sep, "separator", settings.separator, DEFAULT_SEPARATOR),
    )
    for slot_name, slot, field_name, text, default_text in labels:
        if field_name in provided and text is not None:
            value = text
        elif restyle:
            value = default_text
        else:
            continue
        if slot.set(Segment(style=label_style, value=value)):
            applied.append(slot_name)

    if "message_style" in provided and registry.message_style.set(_style(settings.message_style)):
        applied.append("message_style")
    if (
        "none_message" in provided
        and settings.none_message is not None
        and registry.none_message.set(settings.none_message)
    ):
        applied.append("none_message")

    logger.debug("Applied eoe settings to slots: %s", ", ".join(applied) or "none")
    return applied


def configure_from_env(registry: Registry | None = None) -> list[str]:
    """Load settings from the environment and apply them to *registry*."""
    return apply_settings(load_settings(), registry)


__all__ = ["EoeSettings", "apply_settings", "configure_from_env", "load_settings"]
