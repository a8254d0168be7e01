"""Tests for the ``ssg`` command functions.

The command functions are called directly so exit statuses surface as
``SystemExit`` and printed output can be captured with ``capsys``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ssg_pages import cli
from ssg_pages.config import ConfigIssue, SiteConfig
from ssg_pages.scaffold import TemplateScaffold


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a project folder with sources, output, template, and config."""
    (tmp_path / "docs" / "guide").mkdir(parents=True)
    (tmp_path / "docs" / "index.md").write_text("# Home\n", encoding="utf-8")
    (tmp_path / "docs" / "guide" / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (tmp_path / "site").mkdir()
    TemplateScaffold(tmp_path / "template").run()
    (tmp_path / "ssg.yaml").write_text(
        "input_folder: docs\noutput_folder: site\n", encoding="utf-8"
    )
    return tmp_path


def test_build_from_config_file(project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A valid config builds every page and reports each written path."""
    cli.build(config=project / "ssg.yaml")
    out = capsys.readouterr().out
    assert out.count("wrote ") == 2, f"expected two pages reported, got {out!r}"
    assert (project / "site" / "index.html").is_file(), "expected root page"
    assert (project / "site" / "guide" / "intro.html").is_file(), "expected nested page"


def test_build_with_cli_folders(
    project: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Folders can be supplied without a config file, relative to the cwd."""
    monkeypatch.chdir(project)
    cli.build(input_folder=Path("docs"), output_folder=Path("site"))
    out = capsys.readouterr().out
    assert "wrote site/index.html" in out, f"expected cwd-relative paths, got {out!r}"


def test_cli_override_wins_over_config(project: Path) -> None:
    """Command-line values replace values from the YAML file."""
    other = project / "other-site"
    other.mkdir()
    result = cli.resolve_build_config(
        project / "ssg.yaml", {"output_folder": other, "input_folder": None}
    )
    assert isinstance(result, SiteConfig), f"expected SiteConfig, got {result!r}"
    assert result.output_folder == other.resolve(), "expected override output folder"
    assert result.input_folder == (project / "docs").resolve(), "expected file value"


def test_build_with_missing_key_exits_before_building(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing folder key prints a diagnostic and exits with status 2."""
    config = project / "partial.yaml"
    config.write_text("input_folder: docs\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)
    assert excinfo.value.code == cli.CONFIG_ERROR_EXIT_CODE, "expected config exit code"
    assert "output_folder" in capsys.readouterr().err, "expected key in diagnostic"
    assert not any((project / "site").iterdir()), "expected nothing to be built"


def test_build_with_missing_config_file(tmp_path: Path) -> None:
    """A config path that does not exist is a configuration error."""
    result = cli.resolve_build_config(tmp_path / "absent.yaml", {})
    assert isinstance(result, ConfigIssue), f"expected ConfigIssue, got {result!r}"
    assert result.key == "config", f"unexpected key {result.key!r}"


def test_build_with_malformed_yaml(project: Path) -> None:
    """Unparseable or non-mapping YAML is reported as malformed."""
    config = project / "broken.yaml"
    config.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config)
    assert excinfo.value.code == cli.CONFIG_ERROR_EXIT_CODE, "expected config exit code"


def test_build_with_broken_template_exits_with_failure(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A template missing an injection id aborts with status 1."""
    (project / "template" / "template.html").write_text("<html></html>", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=project / "ssg.yaml")
    assert excinfo.value.code == cli.BUILD_ERROR_EXIT_CODE, "expected build exit code"
    assert "ssg-inject-content" in capsys.readouterr().err, "expected missing id named"


def test_init_scaffolds_and_refuses_overwrite(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``init`` writes the template once and refuses to clobber it."""
    target = tmp_path / "template"
    cli.init(template_dir=target, site_name="Notes")
    assert (target / "template.html").is_file(), "expected template.html"
    assert (target / "style.css").is_file(), "expected style.css"
    assert capsys.readouterr().out.count("wrote ") == 2, "expected two files reported"

    with pytest.raises(SystemExit) as excinfo:
        cli.init(template_dir=target)
    assert excinfo.value.code == cli.BUILD_ERROR_EXIT_CODE, "expected refusal exit code"

    cli.init(template_dir=target, force=True)
