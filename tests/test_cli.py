"""Tests for the CLI interface."""

from click.testing import CliRunner

from inputmask import __version__
from inputmask.cli.main import cli


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "reversible input masking" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level_env(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["mask", "--preset", "phone_us", "555"],
            env={"INPUTMASK_LOG_LEVEL": "verbose"},
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "INPUTMASK_LOG_LEVEL" in result.output

    def test_file_log_output_without_file_env(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["mask", "--preset", "phone_us", "555"],
            env={"INPUTMASK_LOG_OUTPUT": "file"},
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "INPUTMASK_LOG_FILE" in result.output

    def test_mask_command_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "--help"])
        assert result.exit_code == 0
        assert "Format a raw VALUE" in result.output


class TestMaskCommand:
    """Test the mask command."""

    def test_mask_with_preset(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "--preset", "phone_us", "5551234567"])
        assert result.exit_code == 0
        assert result.output.strip() == "(555) 123-4567"

    def test_mask_with_pattern(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "--pattern", "##/##", "1231"])
        assert result.exit_code == 0
        assert result.output.strip() == "12/31"

    def test_mask_with_custom_token_char(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["mask", "--pattern", "XX-XX", "--token-char", "X", "1234"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "12-34"

    def test_mask_requires_one_template_option(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "555"])
        assert result.exit_code == 2
        assert "exactly one of --preset or --pattern" in result.output

    def test_mask_rejects_both_template_options(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["mask", "--preset", "ssn", "--pattern", "###", "555"]
        )
        assert result.exit_code == 2

    def test_mask_rejects_token_char_with_preset(self):
        runner = CliRunner()
        result = runner.invoke(
            cli, ["mask", "--preset", "phone_us", "--token-char", "X", "555"]
        )
        assert result.exit_code == 2
        assert "--token-char only applies to --pattern" in result.output

    def test_mask_unknown_preset(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "--preset", "fax", "555"])
        assert result.exit_code == 1
        assert "Unknown preset 'fax'" in result.output

    def test_mask_invalid_pattern(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["mask", "--pattern", "##\\", "12"])
        assert result.exit_code == 1
        assert "dangling escape" in result.output

    def test_mask_with_presets_file(self, tmp_path):
        preset_file = tmp_path / "presets.yaml"
        preset_file.write_text("presets:\n  pin: '##-##'\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["mask", "--preset", "pin", "--presets-file", str(preset_file), "1234"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "12-34"


class TestUnmaskCommand:
    """Test the unmask command."""

    def test_unmask_append(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["unmask", "--preset", "phone_us", "555", "(555) 1"])
        assert result.exit_code == 0
        assert result.output.strip() == "5551"

    def test_unmask_delete(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["unmask", "--preset", "phone_us", "5551", "(555"])
        assert result.exit_code == 0
        assert result.output.strip() == "555"


class TestTypeCommand:
    """Test the keystroke replay command."""

    def test_type_shows_each_display(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["type", "--preset", "time_24h", "0930"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[-2].endswith("-> 09:30")
        assert lines[-1] == "raw: 0930"
        assert len(lines) == 5

    def test_type_with_backspace(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["type", "--preset", "time_24h", "0930", "-b", "2"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[-2] == "  <BS> -> 09"
        assert lines[-1] == "raw: 09"


class TestPresetsCommand:
    """Test the presets listing command."""

    def test_lists_builtin_presets(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["presets"])
        assert result.exit_code == 0
        assert "phone_us" in result.output
        assert "(###) ###-####" in result.output

    def test_lists_presets_from_file(self, tmp_path):
        preset_file = tmp_path / "presets.yaml"
        preset_file.write_text(
            "presets:\n  pin:\n    pattern: '####'\n    description: Card PIN\n",
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["presets", "--presets-file", str(preset_file)])
        assert result.exit_code == 0
        assert "Card PIN" in result.output

    def test_invalid_presets_file(self, tmp_path):
        preset_file = tmp_path / "presets.yaml"
        preset_file.write_text("presets: 3\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["presets", "--presets-file", str(preset_file)])
        assert result.exit_code == 1
        assert "Schema validation failed" in result.output
