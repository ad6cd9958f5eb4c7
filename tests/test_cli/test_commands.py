"""Tests for CLI commands."""

import pytest
import yaml
from click.testing import CliRunner

from linecleaner.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIGroup:
    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "linecleaner" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0


class TestCleanCommand:
    def test_help(self, runner):
        result = runner.invoke(cli, ["clean", "--help"])
        assert result.exit_code == 0
        assert "--dry-run" in result.output
        assert "--no-backup" in result.output

    def test_cleans_file(self, runner, sample_note):
        result = runner.invoke(cli, ["clean", str(sample_note)])
        assert result.exit_code == 0
        assert "Processed 2 removal operation(s) in CoolNote.md" in result.output
        assert "Backup created" in result.output
        assert sample_note.read_text() == "# Title\nkeep me\nSee `Other Note`\n"
        assert len(list(sample_note.parent.glob("CoolNote_*.md"))) == 1

    def test_no_backup(self, runner, sample_note):
        result = runner.invoke(cli, ["clean", "--no-backup", str(sample_note)])
        assert result.exit_code == 0
        assert list(sample_note.parent.iterdir()) == [sample_note]

    def test_dry_run(self, runner, sample_note):
        original = sample_note.read_text()
        result = runner.invoke(cli, ["clean", "--dry-run", str(sample_note)])
        assert result.exit_code == 0
        assert "Would process 2" in result.output
        assert sample_note.read_text() == original

    def test_unchanged_file(self, runner, tmp_path):
        path = tmp_path / "plain.md"
        path.write_text("nothing\n")
        result = runner.invoke(cli, ["clean", str(path)])
        assert result.exit_code == 0
        assert "No lines found containing removal markers" in result.output

    def test_directory(self, runner, tmp_path):
        folder = tmp_path / "vault"
        folder.mkdir()
        (folder / "a.md").write_text("a\nrem-ln\n")
        (folder / "b.md").write_text("b\n")
        result = runner.invoke(cli, ["clean", "--no-backup", str(folder)])
        assert result.exit_code == 0
        assert "1 of 2 file(s) changed" in result.output
        assert (folder / "a.md").read_text() == "a\n"

    def test_skips_non_markdown(self, runner, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("rem-ln\n")
        result = runner.invoke(cli, ["clean", str(path)])
        assert result.exit_code == 0
        assert "only Markdown files" in result.output
        assert path.read_text() == "rem-ln\n"

    def test_disable_stage(self, runner, sample_note):
        result = runner.invoke(
            cli, ["clean", "--no-backup", "--disable", "single_line_removal", str(sample_note)]
        )
        assert result.exit_code == 0
        assert "%% remove line %% drop me" in sample_note.read_text()

    def test_stdin_to_stdout(self, runner):
        result = runner.invoke(cli, ["clean"], input="A\n\n\n\nB rem-ln\nC")
        assert result.exit_code == 0
        assert "A\n\nC" in result.output

    def test_stdin_with_paths_rejected(self, runner, sample_note):
        original = sample_note.read_text()
        result = runner.invoke(cli, ["clean", "-", str(sample_note)], input="rem-ln\n")
        assert result.exit_code == 2
        assert "cannot be combined" in result.output
        assert sample_note.read_text() == original

    def test_directory_rerun_leaves_backups(self, runner, tmp_path):
        folder = tmp_path / "vault"
        folder.mkdir()
        (folder / "a.md").write_text("a\nrem-ln\n")
        assert runner.invoke(cli, ["clean", str(folder)]).exit_code == 0
        backups = list(folder.glob("a_*.md"))
        assert len(backups) == 1

        result = runner.invoke(cli, ["clean", str(folder)])
        assert result.exit_code == 0
        assert list(folder.glob("a_*.md")) == backups
        assert backups[0].read_text() == "a\nrem-ln\n"

    def test_max_empty_lines_option(self, runner):
        result = runner.invoke(cli, ["clean", "--max-empty-lines", "2", "-"], input="A\n\n\n\nB")
        assert result.exit_code == 0
        assert "A\n\n\nB" in result.output

    def test_max_empty_lines_out_of_range(self, runner):
        result = runner.invoke(cli, ["clean", "--max-empty-lines", "11"], input="A")
        assert result.exit_code != 0

    def test_config_option(self, runner, tmp_path):
        config = tmp_path / "custom.yaml"
        config.write_text("removal_strings: ['DROP']\n")
        result = runner.invoke(cli, ["clean", "--config", str(config)], input="a\nDROP\nrem-ln\n")
        assert result.exit_code == 0
        assert "a\nrem-ln\n" in result.output

    def test_invalid_config(self, runner, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("max_consecutive_empty_lines: 99\n")
        result = runner.invoke(cli, ["clean", "--config", str(config)], input="a")
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_nonexistent_file(self, runner):
        result = runner.invoke(cli, ["clean", "nonexistent_file.md"])
        assert result.exit_code != 0


class TestStagesCommand:
    def test_lists_stages(self, runner):
        result = runner.invoke(cli, ["stages"])
        assert result.exit_code == 0
        assert "Pipeline Stages" in result.output
        assert "range_removal" in result.output
        assert "empty_line_limiting" in result.output


class TestConfigCommands:
    def test_config_help(self, runner):
        result = runner.invoke(cli, ["config", "--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "init" in result.output
        assert "migrate" in result.output

    def test_show(self, runner):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "Settings" in result.output
        assert "max_consecutive_empty_lines" in result.output

    def test_init_writes_defaults(self, runner, isolated_settings):
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 0
        data = yaml.safe_load((isolated_settings / "linecleaner.yaml").read_text())
        assert data["removal_strings"] == ["%% remove line %%", "rem-ln"]

    def test_init_refuses_overwrite(self, runner, isolated_settings):
        (isolated_settings / "linecleaner.yaml").write_text("removal_strings: ['x']\n")
        result = runner.invoke(cli, ["config", "init"])
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(cli, ["config", "init", "--force"])
        assert result.exit_code == 0

    def test_migrate_legacy(self, runner, tmp_path):
        path = tmp_path / "legacy.yaml"
        path.write_text("removal_string: 'DEL'\n")
        result = runner.invoke(cli, ["config", "migrate", str(path)])
        assert result.exit_code == 0
        assert "Migrated" in result.output
        assert yaml.safe_load(path.read_text())["removal_strings"] == ["DEL"]

    def test_migrate_current(self, runner, tmp_path):
        path = tmp_path / "current.yaml"
        path.write_text("schema_version: 2\n")
        result = runner.invoke(cli, ["config", "migrate", str(path)])
        assert result.exit_code == 0
        assert "already up to date" in result.output

    def test_migrate_invalid(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- nope\n")
        result = runner.invoke(cli, ["config", "migrate", str(path)])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output
