from __future__ import annotations

from pathlib import Path

import pytest

from offset_timestamps.config import ConfigError, load_config
from offset_timestamps.config.models import CalendarProvider


def test_load_config_yaml_with_env_expansion(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TS_LOCALE", "he_IL")
    path = tmp_path / "config.yaml"
    path.write_text(
        "defaults:\n"
        "  zone: America/Chicago\n"
        "  locale: ${TS_LOCALE}\n"
        "  inclusive: false\n"
        "calendar:\n"
        "  provider: fixed\n"
        "  weekend_days: [fri, sat]\n",
        encoding="utf-8",
    )

    cfg = load_config(path)
    assert cfg.defaults.zone == "America/Chicago"
    assert cfg.defaults.locale == "he_IL"
    assert cfg.defaults.inclusive is False
    assert cfg.calendar.provider == CalendarProvider.fixed
    assert cfg.calendar.weekend_days == [4, 5]


def test_load_config_json(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"calendar": {"provider": "babel"}}', encoding="utf-8")
    assert load_config(path).calendar.provider == CalendarProvider.locale


def test_load_config_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path).defaults.inclusive is True


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_load_config_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("x = 1", encoding="utf-8")
    with pytest.raises(ConfigError, match="Unsupported"):
        load_config(path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="root level"):
        load_config(path)


def test_load_config_wraps_validation_errors(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("defaults:\n  zone: Nowhere/Special\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_rejects_unset_env_reference(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TS_LOCALE", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text("defaults:\n  locale: ${TS_LOCALE}\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=r"\$\{TS_LOCALE\} at defaults\.locale"):
        load_config(path)


def test_load_config_env_reference_fallback(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TS_ZONE", raising=False)
    monkeypatch.setenv("TS_DAY", "sun")
    path = tmp_path / "config.yaml"
    path.write_text(
        "defaults:\n  zone: ${TS_ZONE:-Europe/Berlin}\ncalendar:\n  provider: fixed\n  weekend_days: [sat, '${TS_DAY}']\n",
        encoding="utf-8",
    )

    cfg = load_config(path)
    assert cfg.defaults.zone == "Europe/Berlin"
    assert cfg.calendar.weekend_days == [5, 6]
