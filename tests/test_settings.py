"""Tests for environment configuration loading and application.

Updates:
  v0.2.0 - 2026-10-16 - Cover label restyling and already-set slots.
  v0.1.0 - 2026-10-11 - Cover env loading and validation errors.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest import MonkeyPatch
from rich.style import Style

from eoe import EoeSettings, SettingsError, apply_settings, configure_from_env, load_settings
from eoe.registry import Registry, Segment


@pytest.fixture(autouse=True)
def _isolated_cwd(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)


def test_load_settings_reads_environment(monkeypatch: MonkeyPatch) -> None:
    """Ensure EOE_* variables populate the matching fields."""
    monkeypatch.setenv("EOE_ERROR_LABEL", "Watchin'...")
    monkeypatch.setenv("EOE_SEPARATOR", " 😱 ")
    monkeypatch.setenv("EOE_MESSAGE_STYLE", "italic yellow")
    monkeypatch.setenv("EOE_NONE_MESSAGE", "Let me out")

    settings = load_settings()

    assert settings.error_label == "Watchin'..."
    assert settings.separator == " 😱 "
    assert settings.message_style == "italic yellow"
    assert settings.none_message == "Let me out"
    assert settings.caused_by_label is None


def test_load_settings_reads_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("EOE_NONE_MESSAGE=nothing here\n", encoding="utf-8")
    assert load_settings().none_message == "nothing here"


def test_invalid_style_raises_settings_error(monkeypatch: MonkeyPatch) -> None:
    """Style strings rich cannot parse are rejected."""
    monkeypatch.setenv("EOE_MESSAGE_STYLE", "sparkly")
    with pytest.raises(SettingsError) as excinfo:
        load_settings()
    assert "message_style" in str(excinfo.value.__cause__)


def test_apply_settings_only_sets_provided_fields(registry: Registry) -> None:
    settings = EoeSettings(none_message="Let me out", message_style="italic yellow")

    applied = apply_settings(settings, registry)

    assert applied == ["message_style", "none_message"]
    assert registry.none_message.get_or_default() == "Let me out"
    assert registry.message_style.get_or_default() == Style(color="yellow", italic=True)
    assert not registry.error.is_set()
    assert not registry.sep.is_set()


def test_apply_settings_label_style_restyles_default_labels(registry: Registry) -> None:
    settings = EoeSettings(label_style="bold magenta", error_label="oops")

    applied = apply_settings(settings, registry)

    magenta = Style.parse("bold magenta")
    assert applied == ["error", "caused_by", "sep"]
    assert registry.error.get_or_default() == Segment(magenta, "oops")
    assert registry.caused_by.get_or_default() == Segment(magenta, "caused by")
    assert registry.sep.get_or_default() == Segment(magenta, ": ")


def test_apply_settings_keeps_existing_values(registry: Registry) -> None:
    registry.none_message.set("first")
    applied = apply_settings(EoeSettings(none_message="second"), registry)
    assert applied == []
    assert registry.none_message.get_or_default() == "first"


def test_configure_from_env_applies_to_registry(monkeypatch: MonkeyPatch, registry: Registry) -> None:
    monkeypatch.setenv("EOE_CAUSED_BY_LABEL", "because")
    assert configure_from_env(registry) == ["caused_by"]
    assert registry.caused_by.get_or_default().value == "because"
    assert registry.caused_by.get_or_default().style == Style.parse("bold red")
