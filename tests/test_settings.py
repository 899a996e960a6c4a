"""Tests for settings resolution and the optional YAML file."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from peperone.config.settings import CONFIG_NAME, ENV_DIR, Settings, default_base_dir
from peperone.runtime.watch import MAX_INTERVAL


def test_default_base_dir_uses_home_without_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_base_dir(env={}) == tmp_path / ".config" / "peperone"


def test_default_base_dir_honours_env(tmp_path: Path) -> None:
    assert default_base_dir(env={ENV_DIR: str(tmp_path / "custom")}) == tmp_path / "custom"


def test_load_without_file_gives_defaults(tmp_path: Path) -> None:
    settings = Settings.load(tmp_path)
    assert settings.base_dir == tmp_path
    assert settings.timers_dir == tmp_path / "timers"
    assert settings.log_dir == tmp_path / "logs"
    assert settings.tail_interval == pytest.approx(1.0)
    assert settings.overwrite is False
    assert settings.log_level == "INFO"
    assert not (tmp_path / CONFIG_NAME).exists()


def test_load_uses_env_when_no_dir_given(tmp_path: Path) -> None:
    settings = Settings.load(env={ENV_DIR: str(tmp_path)})
    assert settings.base_dir == tmp_path


def test_load_reads_yaml(tmp_path: Path) -> None:
    (tmp_path / CONFIG_NAME).write_text(
        yaml.safe_dump({"tail_interval": 0.5, "overwrite": True, "log_level": "debug"}),
        encoding="utf-8",
    )
    settings = Settings.load(tmp_path)
    assert settings.tail_interval == pytest.approx(0.5)
    assert settings.overwrite is True
    assert settings.log_level == "DEBUG"


def test_unknown_keys_ignored_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    (tmp_path / CONFIG_NAME).write_text("colour: red\noverwrite: yes\n", encoding="utf-8")
    settings = Settings.load(tmp_path)
    assert settings.overwrite is True
    assert "colour" in caplog.text


@pytest.mark.parametrize("content", ["", "- just\n- a list\n", "overwrite: [unclosed\n"])
def test_bad_yaml_falls_back_to_defaults(tmp_path: Path, content: str) -> None:
    (tmp_path / CONFIG_NAME).write_text(content, encoding="utf-8")
    settings = Settings.load(tmp_path)
    assert settings.overwrite is False
    assert settings.tail_interval == pytest.approx(1.0)


def test_values_are_normalized(tmp_path: Path) -> None:
    settings = Settings(base_dir=tmp_path, tail_interval="fast", overwrite="off", log_level="loud")
    assert settings.tail_interval == pytest.approx(1.0)
    assert settings.overwrite is False
    assert settings.log_level == "INFO"
    assert Settings(base_dir=tmp_path, tail_interval=0).tail_interval == pytest.approx(0.05)


def test_to_dict_is_serializable(tmp_path: Path) -> None:
    payload = Settings(base_dir=tmp_path).to_dict()
    assert payload["base_dir"] == str(tmp_path)
    assert yaml.safe_load(yaml.safe_dump(payload)) == payload


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("tail_interval: .inf\n", 1.0),
        ("tail_interval: .nan\n", 1.0),
        ("tail_interval: 1e10\n", MAX_INTERVAL),
    ],
)
def test_out_of_range_interval_is_bounded(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, content: str, expected: float
) -> None:
    caplog.set_level(logging.WARNING)
    (tmp_path / CONFIG_NAME).write_text(content, encoding="utf-8")
    settings = Settings.load(tmp_path)
    assert settings.tail_interval == pytest.approx(expected)
    assert "tail_interval" in caplog.text
