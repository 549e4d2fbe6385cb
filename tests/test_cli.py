"""
Unit tests for the command line interface.
"""
import json

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_tree(tmp_path):
    """Write a tree as JSON and return its path."""
    def write(tree, name="filter.json"):
        path = tmp_path / name
        path.write_text(json.dumps(tree), encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "missing.yaml")


class TestConvert:
    """Tests for the convert command."""

    def test_json_output(self, runner, write_tree, config_path, subject_filter):
        """Test printing the simple filter as JSON."""
        result = runner.invoke(cli, ["-c", config_path, "convert", write_tree(subject_filter)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["Operator"]["value"] == "all"
        assert len(data["Conditions"]) == 2

    def test_table_output(self, runner, write_tree, config_path, subject_filter):
        result = runner.invoke(
            cli, ["-c", config_path, "convert", "--format", "table", write_tree(subject_filter)]
        )

        assert result.exit_code == 0
        assert "Invoices" in result.output

    def test_stdin(self, runner, config_path, subject_filter):
        """Test reading the tree from stdin."""
        result = runner.invoke(
            cli, ["-c", config_path, "convert", "-"], input=json.dumps(subject_filter)
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["Actions"]["FileInto"] == ["Invoices"]

    def test_conversion_error(self, runner, write_tree, config_path, sieve):
        """Test that an unsupported tree exits with status 1."""
        tree = sieve.script(sieve.if_node([sieve.header()]), require=("fileinto",))

        result = runner.invoke(cli, ["-c", config_path, "convert", write_tree(tree)])

        assert result.exit_code == 1
        assert "InvalidInputError" in result.output

    def test_invalid_json(self, runner, tmp_path, config_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")

        result = runner.invoke(cli, ["-c", config_path, "convert", str(path)])

        assert result.exit_code == 2

    def test_format_from_config(self, runner, tmp_path, write_tree, subject_filter):
        """Test the output format configured in YAML."""
        config = tmp_path / "config.yaml"
        config.write_text("output: table\n")

        result = runner.invoke(cli, ["-c", str(config), "convert", write_tree(subject_filter)])

        assert result.exit_code == 0
        assert "Conditions" in result.output
        assert not result.output.lstrip().startswith("{")


class TestCheck:
    """Tests for the check command."""

    def test_simple(self, runner, write_tree, config_path, subject_filter):
        result = runner.invoke(cli, ["-c", config_path, "check", write_tree(subject_filter)])

        assert result.exit_code == 0
        assert "Simple filter" in result.output

    def test_not_simple(self, runner, write_tree, config_path, sieve):
        tree = sieve.script(sieve.if_node([sieve.header()], then=[{"Type": "Redirect"}]))

        result = runner.invoke(cli, ["-c", config_path, "check", write_tree(tree)])

        assert result.exit_code == 1
        assert "Not a simple filter" in result.output


class TestAnnotate:
    """Tests for the annotate command."""

    def test_annotation(self, runner, write_tree, config_path, subject_filter):
        result = runner.invoke(cli, ["-c", config_path, "annotate", write_tree(subject_filter)])

        assert result.exit_code == 0
        assert "all" in result.output
        assert "0: starts" in result.output
        assert "1: !contains" in result.output

    def test_no_annotation(self, runner, write_tree, config_path, sieve):
        tree = sieve.script(sieve.if_node([sieve.header()]))

        result = runner.invoke(cli, ["-c", config_path, "annotate", write_tree(tree)])

        assert result.exit_code == 0
        assert "No annotation" in result.output

    def test_bad_annotation(self, runner, write_tree, config_path, sieve):
        tree = sieve.script(sieve.comment("@type xor"), sieve.if_node([sieve.header()]))

        result = runner.invoke(cli, ["-c", config_path, "annotate", write_tree(tree)])

        assert result.exit_code == 1
        assert "xor" in result.output


class TestConfigErrors:
    """Tests for configuration problems reported by the CLI."""

    def test_unknown_log_level(self, runner, write_tree, config_path, subject_filter, monkeypatch):
        """Test that a bad log level is a usage error, not a crash."""
        monkeypatch.setenv("SIEVE_SIMPLE_LOG_LEVEL", "loud")

        result = runner.invoke(cli, ["-c", config_path, "check", write_tree(subject_filter)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_scalar_extension(self, runner, tmp_path, write_tree, subject_filter):
        """Test a config with a single required extension."""
        config = tmp_path / "config.yaml"
        config.write_text("required_extensions: fileinto\n")

        result = runner.invoke(cli, ["-c", str(config), "check", write_tree(subject_filter)])

        assert result.exit_code == 0
