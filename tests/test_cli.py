"""
Tests for the command-line interface.
"""
import pytest
from loguru import logger
from typer.testing import CliRunner

from stencil.components.cli import app
from stencil.config import AppConfig, config_manager

SCHEMA = '''
[[files]]
path = "Generated/Item.h"

[[files.types]]
kind = "struct"
name = "FItem"
annotated = true

[[files.types.members]]
type = "FText"
name = "ItemName"
annotated = true
'''

runner = CliRunner()


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config_manager, "_config", AppConfig())
    monkeypatch.setattr(config_manager, "config_file", tmp_path / "config" / "config.toml")
    yield
    # The CLI points loguru at the runner's captured stderr
    logger.remove()


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text(SCHEMA, encoding="utf-8")
    return path


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_split_name():
    result = runner.invoke(app, ["split-name", "DisplayName"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Display Name"


def test_generate_writes_file_once(schema_file, tmp_path):
    out = tmp_path / "out"

    first = runner.invoke(app, ["generate", str(schema_file), "--root", str(out), "--project", "Shop", "--vcs", "none"])
    assert first.exit_code == 0, first.stdout

    target = out / "Generated" / "Item.h"
    text = target.read_text(encoding="utf-8")
    assert "struct SHOP_API FItem" in text
    assert "FText GetItemName() { return GetPropertyText(ItemName); }" in text

    mtime = target.stat().st_mtime_ns
    second = runner.invoke(app, ["generate", str(schema_file), "--root", str(out), "--project", "Shop"])
    assert second.exit_code == 0, second.stdout
    assert target.stat().st_mtime_ns == mtime


def test_generate_unknown_vcs(schema_file, tmp_path):
    result = runner.invoke(app, ["generate", str(schema_file), "--root", str(tmp_path), "--vcs", "svn"])
    assert result.exit_code == 1


def test_generate_missing_schema(tmp_path):
    result = runner.invoke(app, ["generate", str(tmp_path / "missing.toml")])
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_generate_reports_failure(tmp_path):
    # The output root is a file, so the target directory cannot be created
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    schema = tmp_path / "schema.toml"
    schema.write_text('[[files]]\npath = "A.h"\n\n[[files.types]]\nname = "FA"\n', encoding="utf-8")

    result = runner.invoke(app, ["generate", str(schema), "--root", str(blocker)])

    assert result.exit_code == 1


def test_preview_does_not_write(schema_file, tmp_path):
    result = runner.invoke(app, ["preview", str(schema_file), "--check"])

    assert result.exit_code == 0, result.stdout
    assert "FItem" in result.stdout
    assert not (tmp_path / "Generated").exists()


def test_config_init_and_show():
    init = runner.invoke(app, ["config", "init"])
    assert init.exit_code == 0
    assert config_manager.config_file.exists()

    again = runner.invoke(app, ["config", "init"])
    assert again.exit_code == 1

    show = runner.invoke(app, ["config", "show"])
    assert show.exit_code == 0
    assert '"backend": "none"' in show.stdout
