"""
Tests for configuration loading and saving.
"""
import pytest

from stencil.config import AppConfig, ConfigManager, VcsConfig


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("STENCIL_PROJECT_NAME", raising=False)
    monkeypatch.delenv("STENCIL_VCS_BACKEND", raising=False)


def test_defaults_without_file(tmp_path):
    manager = ConfigManager(tmp_path / "config.toml")
    manager.load_config()

    config = manager.config
    assert config.project.name == "Game"
    assert config.emitter.indent_unit == "\t"
    assert "DisplayName" in config.emitter.reserved_names
    assert config.vcs.backend == "none"


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[project]\nname = "Articy"\n\n'
        '[emitter]\nindent_unit = "  "\nreserved_names = ["Text"]\n\n'
        '[vcs]\nbackend = "perforce"\n',
        encoding="utf-8",
    )
    manager = ConfigManager(path)
    manager.load_config()

    assert manager.config.project.name == "Articy"
    assert manager.config.emitter.indent_unit == "  "
    assert manager.config.emitter.reserved_names == ["Text"]
    assert manager.config.vcs.backend == "perforce"


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[project]\nname = "FromFile"\n', encoding="utf-8")
    monkeypatch.setenv("STENCIL_PROJECT_NAME", "FromEnv")
    monkeypatch.setenv("STENCIL_VCS_BACKEND", "git")

    manager = ConfigManager(path)
    manager.load_config()

    assert manager.config.project.name == "FromEnv"
    assert manager.config.vcs.backend == "git"


@pytest.mark.parametrize("content", [
    "[project\nname = 1",
    '[vcs]\nbackend = "svn"\n',
])
def test_invalid_file_falls_back_to_defaults(tmp_path, content):
    path = tmp_path / "config.toml"
    path.write_text(content, encoding="utf-8")

    manager = ConfigManager(path)
    manager.load_config()

    assert manager.config == AppConfig()


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "config.toml"
    manager = ConfigManager(path)
    manager.config.project.name = "Saved"

    manager.save_config()
    reloaded = ConfigManager(path)
    reloaded.load_config()

    assert reloaded.config.project.name == "Saved"
    assert reloaded.config.vcs.uses_checkout is None


def test_vcs_backend_is_normalized():
    assert VcsConfig(backend="Git").backend == "git"
