from pathlib import Path

import pytest

from autotouch.utils.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    SettingsError,
    load_settings,
    resolve_config_path,
)


def test_missing_settings_file_gives_defaults(tmp_path: Path):
    s = load_settings(tmp_path / "missing.yml")
    assert s == Settings()
    assert s.comment_styles == {}
    assert s.debug is False


def test_empty_settings_file(tmp_path: Path):
    path = tmp_path / "s.yml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


def test_settings_from_environment(tmp_path: Path, monkeypatch):
    path = tmp_path / "s.yml"
    path.write_text("debug: true\n", encoding="utf-8")
    monkeypatch.setenv("AUTOTOUCH_SETTINGS", str(path))
    assert load_settings().debug is True


def test_settings_values(tmp_path: Path):
    path = tmp_path / "s.yml"
    path.write_text("config_path: /etc/touch.conf\ncomment_styles:\n  .py: '## '\n", encoding="utf-8")
    s = load_settings(path)
    assert s.config_path == Path("/etc/touch.conf")
    assert s.comment_styles == {".py": "## "}


@pytest.mark.parametrize("body", ["a: [", "debug: notabool\n", "- 1\n"])
def test_invalid_settings(tmp_path: Path, body):
    path = tmp_path / "s.yml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)


def test_config_path_precedence(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("AUTOTOUCH_CONFIG", raising=False)
    s = Settings(config_path=tmp_path / "from_settings.conf")

    assert resolve_config_path() == DEFAULT_CONFIG_PATH
    assert resolve_config_path(settings=s) == tmp_path / "from_settings.conf"

    monkeypatch.setenv("AUTOTOUCH_CONFIG", str(tmp_path / "from_env.conf"))
    assert resolve_config_path(settings=s) == tmp_path / "from_env.conf"
    assert resolve_config_path(tmp_path / "explicit.conf", s) == tmp_path / "explicit.conf"
