"""
Unit tests for the welc command line.
"""

import sys
from unittest.mock import patch

import pytest

from welc.cli.main import build_parser, main_cli


@pytest.fixture
def wevtutil_available():
    with patch("welc.cli.main.check_wevtutil_installed", return_value=True) as mock_check:
        yield mock_check


@pytest.mark.unit
class TestParser:
    """Test cases for argument parsing."""

    def test_channels_arguments(self):
        """Test parsing of the channels subcommand arguments."""
        args = build_parser().parse_args(["channels", "-c", "DC01", "Security", "Microsoft-*"])

        assert args.command == "channels"
        assert args.computer == "DC01"
        assert args.names == ["Security", "Microsoft-*"]

    def test_command_required(self):
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


@pytest.mark.unit
class TestHeaderCommand:
    """Test cases for `welc header`."""

    def test_prints_definitions(self, wec_header_file, capsys):
        """Test that the header command prints the definition table."""
        main_cli(["header", str(wec_header_file)])

        out = capsys.readouterr().out
        assert "Corp-WEC-Basic/Domain Controllers" in out
        assert "WEC_EVENTS_Advanced" in out

    def test_missing_file_exits(self, temp_dir):
        """Test that a missing header file exits with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["header", str(temp_dir / "missing.h")])

        assert exc_info.value.code == 1

    def test_malformed_header_exits(self, temp_dir):
        """Test that a malformed header exits with code 1."""
        header_file = temp_dir / "bad.h"
        header_file.write_text("// Channel\n#define X 0x10\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["header", str(header_file)])

        assert exc_info.value.code == 1

    def test_undecodable_header_exits(self, temp_dir, wec_header_text):
        """Test that a header in another encoding exits with code 1."""
        header_file = temp_dir / "utf16.h"
        header_file.write_text(wec_header_text, encoding="utf-16")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["header", str(header_file)])

        assert exc_info.value.code == 1

    def test_encoding_option(self, temp_dir, wec_header_text, capsys):
        """Test that --encoding reads a UTF-16 header."""
        header_file = temp_dir / "utf16.h"
        header_file.write_text(wec_header_text, encoding="utf-16")

        main_cli(["header", "--encoding", "utf-16", str(header_file)])

        assert "Corp-WEC-Basic/Domain Controllers" in capsys.readouterr().out


@pytest.mark.unit
class TestCollectionCommands:
    """Test cases for `welc channels` and `welc providers`."""

    def test_channels(self, fake_wevtutil, wevtutil_available, capsys):
        """Test the channels command against a remote host."""
        main_cli(["channels", "-c", "DC01", "Security"])

        out = capsys.readouterr().out
        assert "Security" in out
        assert "20971520" in out
        assert "Circular" in out
        assert ["wevtutil", "gl", "Security", "/r:DC01"] in fake_wevtutil["calls"]

    def test_providers(self, fake_wevtutil, wevtutil_available, capsys):
        """Test the providers command with a wildcard pattern."""
        main_cli(["providers", "-c", "DC01", "Microsoft-Windows-Kernel-*"])

        out = capsys.readouterr().out
        assert "Microsoft-Windows-Kernel-General/Analytic" in out

    def test_uses_configured_computer(self, fake_wevtutil, wevtutil_available, config_file, capsys):
        """Test that the configured wevtutil path and default computer are used."""
        # The sample config names wevtutil.exe and DC01 and does not skip failures.
        main_cli(["--config", str(config_file), "channels", "Security"])

        assert fake_wevtutil["calls"][0] == ["wevtutil.exe", "el", "/r:DC01"]

    def test_command_failure_exits(self, fake_wevtutil, wevtutil_available, config_file):
        """Test that a failing wevtutil call exits with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(config_file), "channels", "Application"])

        assert exc_info.value.code == 1

    def test_missing_wevtutil_exits(self):
        """Test that a missing wevtutil executable exits with code 1."""
        with patch("welc.cli.main.check_wevtutil_installed", return_value=False):
            with pytest.raises(SystemExit) as exc_info:
                main_cli(["channels"])

        assert exc_info.value.code == 1


@pytest.mark.unit
class TestConfigHandling:
    """Test cases for configuration errors on the command line."""

    def test_missing_config_exits(self, temp_dir):
        """Test that a missing --config file exits with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(temp_dir / "none.toml"), "header", "x.h"])

        assert exc_info.value.code == 1

    def test_config_directory_exits(self, temp_dir, wec_header_file):
        """Test that a --config path naming a directory exits with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(temp_dir), "header", str(wec_header_file)])

        assert exc_info.value.code == 1

    def test_scalar_config_section_exits(self, temp_dir, wec_header_file):
        """Test that a config with `collector = 5` exits with code 1."""
        config_path = temp_dir / "scalar.toml"
        config_path.write_text("collector = 5\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(config_path), "header", str(wec_header_file)])

        assert exc_info.value.code == 1

    def test_logs_go_to_stderr(self, wec_header_file):
        """Test that logging is configured on stderr, leaving stdout for tables."""
        with patch("welc.cli.main.logging.basicConfig") as mock_basic_config:
            main_cli(["header", str(wec_header_file)])

        assert mock_basic_config.call_args.kwargs["stream"] is sys.stderr

    def test_invalid_log_level_exits(self, wec_header_file):
        """Test that an unknown --log-level exits with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--log-level", "chatty", "header", str(wec_header_file)])

        assert exc_info.value.code == 1
