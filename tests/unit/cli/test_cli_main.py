"""Tests for the linkkeeper command line."""

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from linkkeeper.cli.main import app
from linkkeeper.rendering.exceptions import LayoutNotFoundError

runner = CliRunner()


def test_build_writes_redirects_for_legacy_posts(site_root: Path):
    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "Wrote 2 redirect page(s)" in result.output

    output = site_root / "_site"
    foo = output / "c++" / "2016" / "03" / "02" / "foo" / "index.html"
    assert 'content="0; url=https://example.com/foo/"' in foo.read_text(encoding="utf-8")
    assert (output / "rust" / "2017" / "08" / "01" / "cutoff" / "index.html").exists()
    assert not (output / "c++" / "2018").exists()
    assert not (output / "misc").exists()


def test_build_is_a_no_op_when_disabled(site_root: Path):
    (site_root / ".linkkeeper" / "linkkeeper.toml").write_text("[redirects]\nenabled = false\n", encoding="utf-8")

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "disabled" in result.output
    assert not (site_root / "_site").exists()


def test_build_without_layout_fails(site_root: Path):
    (site_root / "_layouts" / "redirect.html").unlink()

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 1
    assert "Layout Error" in result.output
    assert not (site_root / "_site").exists()


def test_build_debug_reraises(site_root: Path):
    (site_root / "_layouts" / "redirect.html").unlink()

    result = runner.invoke(app, ["build", str(site_root), "--debug"])

    assert result.exit_code != 0
    assert isinstance(result.exception, LayoutNotFoundError)


def test_build_reports_broken_posts(site_root: Path):
    (site_root / "_posts" / "2016-05-05-nocat.md").write_text("---\ntitle: x\n---\n", encoding="utf-8")

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 1
    assert "Content Error" in result.output


def test_plan_lists_redirects_without_writing(site_root: Path):
    result = runner.invoke(app, ["plan", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "/c++/2016/03/02/foo/" in result.output
    assert "2 redirect page(s)" in result.output
    assert not (site_root / "_site").exists()


def test_init_scaffolds_layout(tmp_path: Path):
    result = runner.invoke(app, ["init", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "_layouts" / "redirect.html").exists()

    result = runner.invoke(app, ["init", str(tmp_path)])
    assert "already exists" in result.output


def test_build_uses_configured_paths(site_root: Path):
    with patch("linkkeeper.cli.main.load_corpus", return_value=[]) as mock_load:
        result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    mock_load.assert_called_once()
    assert mock_load.call_args.args[0] == site_root.resolve() / "_posts"


def test_build_debug_logs_each_written_page(site_root: Path):
    result = runner.invoke(app, ["build", str(site_root), "--debug"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Wrote redirect") == 2


def test_build_without_debug_hides_per_page_lines(site_root: Path):
    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "Wrote redirect" not in result.output


def test_plan_does_not_create_a_config_file(site_root: Path):
    (site_root / ".linkkeeper" / "linkkeeper.toml").unlink()

    result = runner.invoke(app, ["plan", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "disabled" in result.output
    assert not (site_root / ".linkkeeper" / "linkkeeper.toml").exists()
