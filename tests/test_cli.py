"""
Tests for the textops command line interface.
"""

import json
import pytest
from pathlib import Path
from click.testing import CliRunner

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from textops import textops, DEMO_CONTENT


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(runner, tmp_path):
    """Run each test inside its own empty directory."""
    with runner.isolated_filesystem(temp_dir=tmp_path) as path:
        yield Path(path)


class TestDemo:
    """Test the full demonstration driver."""

    def test_demo_runs_every_step(self, runner, workdir):
        result = runner.invoke(textops, ["demo"])

        assert result.exit_code == 0
        assert "1. CREATING AND WRITING TO FILE" in result.output
        assert "File copied successfully to: demo_file_copy.txt" in result.output
        assert result.output.rstrip().endswith("=== FILE OPERATIONS COMPLETED ===")

        lines = (workdir / "demo_file.txt").read_text().splitlines()
        assert lines == [
            "This is a MODIFIED sample text file.",
            "This is a sample text file.",
            "Python File Operations Demonstration",
            "Appended line 1",
            "Appended line 2",
        ]
        assert (workdir / "demo_file_copy.txt").read_text() == (workdir / "demo_file.txt").read_text()

    def test_demo_cleanup_deletes_copy(self, runner, workdir):
        result = runner.invoke(textops, ["demo", "--cleanup"])

        assert result.exit_code == 0
        assert "File deleted: demo_file_copy.txt" in result.output
        assert not (workdir / "demo_file_copy.txt").exists()

    def test_demo_reports_io_error_and_completes(self, runner, workdir):
        (workdir / "config.yaml").write_text("textops:\n  demo:\n    file: missing/demo.txt\n")

        result = runner.invoke(textops, ["demo"])

        assert result.exit_code == 0
        assert "Error occurred:" in result.output
        assert "=== FILE OPERATIONS COMPLETED ===" in result.output
        assert "2. READING FILE CONTENT:" not in result.output

    def test_demo_writes_audit_log(self, runner, workdir):
        runner.invoke(textops, ["demo"])

        entries = (workdir / "data" / "audit_log.jsonl").read_text().splitlines()
        assert len(entries) > 0
        assert json.loads(entries[0])["target"] == "demo_file.txt"


class TestCommands:
    """Test the single-operation commands."""

    def test_create_and_read(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "one\ntwo\n"])
        result = runner.invoke(textops, ["read", "notes.txt"])

        assert result.exit_code == 0
        assert " 1: one" in result.output
        assert " 2: two" in result.output

    def test_create_from_stdin(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt"], input=DEMO_CONTENT)

        assert (workdir / "notes.txt").read_text() == DEMO_CONTENT

    def test_append(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "one\n"])
        runner.invoke(textops, ["append", "notes.txt", "two\n"])

        assert (workdir / "notes.txt").read_text() == "one\ntwo\n"

    def test_modify_invalid_line(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "one\n"])
        result = runner.invoke(textops, ["modify", "notes.txt", "5", "x"])

        assert "Invalid line number: 5" in result.output
        assert (workdir / "notes.txt").read_text() == "one\n"

    def test_replace(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "a b a\n"])
        runner.invoke(textops, ["replace", "notes.txt", "a", "c"])

        assert (workdir / "notes.txt").read_text() == "c b c\n"

    def test_stats(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "Hello, World!\nThis is a sample text file.\n"])
        result = runner.invoke(textops, ["stats", "notes.txt"])

        assert "Lines: 2" in result.output
        assert "Words: 8" in result.output

    def test_read_missing_file(self, runner, workdir):
        result = runner.invoke(textops, ["read", "absent.txt"])

        assert result.exit_code == 0
        assert "File does not exist: absent.txt" in result.output

    def test_copy_missing_source_reports_error(self, runner, workdir):
        result = runner.invoke(textops, ["copy", "absent.txt", "copy.txt"])

        assert result.exit_code == 0
        assert "Error occurred:" in result.output
        assert not (workdir / "copy.txt").exists()

    @pytest.mark.parametrize("args", [
        ["read", "latin1.txt"],
        ["stats", "latin1.txt"],
        ["modify", "latin1.txt", "1", "x"],
        ["replace", "latin1.txt", "caf", "tea"],
    ])
    def test_undecodable_file_reports_error(self, runner, workdir, args):
        (workdir / "latin1.txt").write_bytes(b"caf\xe9\n")

        result = runner.invoke(textops, args)

        assert result.exit_code == 0
        assert "Error occurred:" in result.output
        assert (workdir / "latin1.txt").read_bytes() == b"caf\xe9\n"

    def test_copy_onto_itself(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "one\n"])
        result = runner.invoke(textops, ["copy", "notes.txt", "notes.txt"])

        assert "Error occurred:" not in result.output
        assert "File copied successfully to: notes.txt" in result.output
        assert (workdir / "notes.txt").read_text() == "one\n"

    def test_delete_missing_is_noop(self, runner, workdir):
        result = runner.invoke(textops, ["delete", "absent.txt"])

        assert result.exit_code == 0
        assert "File deleted: absent.txt" in result.output


class TestAuditAndConfig:
    """Test the audit and config commands."""

    def test_audit_empty(self, runner, workdir):
        result = runner.invoke(textops, ["audit"])

        assert "No audit entries found." in result.output

    def test_audit_json(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "x\n"])
        result = runner.invoke(textops, ["audit", "--format", "json"])

        data = json.loads(result.output)
        assert data[0]["target"] == "notes.txt"

    def test_audit_failed_only(self, runner, workdir):
        runner.invoke(textops, ["create", "notes.txt", "x\n"])
        runner.invoke(textops, ["copy", "absent.txt", "copy.txt"])
        result = runner.invoke(textops, ["audit", "--failed"])

        assert "failed" in result.output
        assert "executed" not in result.output

    def test_audit_table_shows_bracketed_target(self, runner, workdir):
        runner.invoke(textops, ["create", "[draft].txt", "x\n"])
        result = runner.invoke(textops, ["audit"])

        assert result.exit_code == 0
        assert "[draft].txt" in result.output

    def test_config_write_bracketed_path(self, runner, workdir):
        result = runner.invoke(textops, ["--config", "cfg[x].yaml", "config", "--write"])

        assert result.exit_code == 0
        assert "Settings written to: cfg[x].yaml" in result.output
        assert (workdir / "cfg[x].yaml").exists()

    def test_config_write(self, runner, workdir):
        result = runner.invoke(textops, ["--config", "custom.yaml", "config", "--write"])

        assert result.exit_code == 0
        assert "demo_file.txt" in result.output
        assert (workdir / "custom.yaml").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
