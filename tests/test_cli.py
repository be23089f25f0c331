"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from news_imagery.cli import app

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    images = tmp_path / "images"
    images.mkdir()
    for name in ["ai-generic-robot.jpg", "brand-openai-logo.jpg", "mountain-lake-sunset.jpg"]:
        (images / name).write_bytes(b"")

    config = {
        "paths": {
            "images_dir": str(images),
            "cache_dir": str(tmp_path / "cache"),
            "metadata_csv": str(tmp_path / "missing.csv"),
            "reports_dir": str(tmp_path / "reports"),
        },
        "selection": {"min_brand_safe_generic": 1},
    }
    (tmp_path / "config.yaml").write_text(yaml.safe_dump(config), encoding="utf-8")
    return tmp_path


def test_select_brand_article(workspace: Path) -> None:
    result = runner.invoke(
        app,
        ["select", "OpenAI Releases GPT-5", "--no-ai", "--config", str(workspace / "config.yaml")],
    )

    assert result.exit_code == 0
    assert "Tier: brand" in result.output
    assert "/assets/images/all/brand-openai-logo.jpg" in result.output
    assert list((workspace / "cache").glob("*.yaml"))


def test_select_empty_library_strict(workspace: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
    config_path = workspace / "config.yaml"
    config = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    config["selection"]["strict_empty_library"] = True
    config_path.write_text(yaml.safe_dump(config), encoding="utf-8")
    empty = tmp_path_factory.mktemp("empty")

    result = runner.invoke(
        app,
        ["select", "Anything", "--no-ai", "--no-cache", "--images-dir", str(empty), "--config", str(config_path)],
    )

    assert result.exit_code == 1


def test_audit_writes_report(workspace: Path) -> None:
    result = runner.invoke(app, ["audit", "--report", "--config", str(workspace / "config.yaml")])

    assert result.exit_code == 0
    report = json.loads((workspace / "reports" / "image-audit-report.json").read_text(encoding="utf-8"))
    assert report["passed"] is True
    assert report["brand_safe_generic"] == ["ai-generic-robot.jpg"]
    assert report["brand_images"] == ["brand-openai-logo.jpg"]


def test_audit_fails_below_minimum(workspace: Path) -> None:
    config_path = workspace / "config.yaml"
    config = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    config["selection"]["min_brand_safe_generic"] = 5
    config_path.write_text(yaml.safe_dump(config), encoding="utf-8")

    result = runner.invoke(app, ["audit", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "INSUFFICIENT" in result.output


def test_clear_cache(workspace: Path) -> None:
    config_path = str(workspace / "config.yaml")
    runner.invoke(app, ["select", "OpenAI Releases GPT-5", "--no-ai", "--config", config_path])

    stats = runner.invoke(app, ["cache-stats", "--config", config_path])
    assert "Entries: 1" in stats.output

    result = runner.invoke(app, ["clear-cache", "--config", config_path])

    assert result.exit_code == 0
    assert not list((workspace / "cache").glob("*.yaml"))
