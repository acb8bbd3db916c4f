"""Tests for the root command group."""

from pathlib import Path

from click.testing import CliRunner

from ffecho.cli.cli import cli
from ffecho.core.config import CONFIG_FILENAME


def test_help_lists_all_commands() -> None:
    result = CliRunner().invoke(cli, ["--help"])

    assert result.exit_code == 0
    for name in ["clean", "event", "image", "request", "run", "server", "test", "vendor-framework"]:
        assert name in result.output


def test_run_and_image_groups_list_subcommands() -> None:
    runner = CliRunner()

    run_help = runner.invoke(cli, ["run", "-h"])
    image_help = runner.invoke(cli, ["image", "-h"])

    assert all(name in run_help.output for name in ["deploy", "event", "request"])
    assert all(name in image_help.output for name in ["build", "server"])


def test_malformed_config_is_reported(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("region = 5\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["--context-dir", str(tmp_path), "clean"])

    assert result.exit_code == 1
    assert "Error: 'region'" in result.output


def test_context_dir_from_environment(tmp_path: Path) -> None:
    (tmp_path / "vendor").mkdir()

    result = CliRunner().invoke(cli, ["--quiet", "clean"], env={"FFECHO_CONTEXT_DIR": str(tmp_path)})

    assert result.exit_code == 0, result.output
    assert not (tmp_path / "vendor").exists()
    assert result.output == ""
