"""Tests for command-line parsing in each mode."""

import pytest
from click.testing import CliRunner
from hexb64 import __version__
from hexb64.cli import (b64hex_command, data_from_tokens, hexb64_command,
                        parse_arguments)
from hexb64.modules.data_types import Alphabet, HexCase, Mode, ParsedArguments
from hexb64.modules.errors import ArgumentError

runner = CliRunner()


class TestDataFromTokens:
    """Test picking the single data token."""

    def test_no_tokens(self):
        assert data_from_tokens([]) is None

    def test_one_token(self):
        assert data_from_tokens(["4865"]) == "4865"

    def test_second_token_is_named(self):
        with pytest.raises(ArgumentError) as exc_info:
            data_from_tokens(["4865", "6c6c"])
        assert exc_info.value.token == "6c6c"
        assert "Unknown or misplaced argument: 6c6c" in str(exc_info.value)

    @pytest.mark.parametrize("token", ["-", "-x", "--foo", "-_8="])
    def test_dash_tokens_rejected(self, token):
        with pytest.raises(ArgumentError) as exc_info:
            data_from_tokens([token])
        assert exc_info.value.token == token


class TestHexb64Arguments:
    """Test parsing under the hexb64 name."""

    def test_defaults(self):
        parsed = parse_arguments(Mode.HEX_TO_BASE64, [])
        assert parsed.config.mode is Mode.HEX_TO_BASE64
        assert parsed.config.alphabet is Alphabet.CLASSIC
        assert parsed.data is None

    def test_data_argument(self):
        parsed = parse_arguments(Mode.HEX_TO_BASE64, ["48656c6c6f"])
        assert parsed.data == "48656c6c6f"

    @pytest.mark.parametrize("args", [["-url", "4865"], ["4865", "-url"]])
    def test_url_flag_in_any_position(self, args):
        parsed = parse_arguments(Mode.HEX_TO_BASE64, args)
        assert parsed.config.alphabet is Alphabet.URL_SAFE
        assert parsed.data == "4865"

    @pytest.mark.parametrize("flag", ["-low", "-up"])
    def test_case_flags_not_valid(self, flag):
        """Test the other mode's flags are named in the error."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.HEX_TO_BASE64, [flag, "4865"])
        assert exc_info.value.token == flag
        assert f"Unknown or misplaced argument: {flag}" in str(exc_info.value)

    def test_unknown_long_option(self):
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.HEX_TO_BASE64, ["--upper"])
        assert exc_info.value.token == "--upper"

    def test_extra_data(self):
        with pytest.raises(ArgumentError):
            parse_arguments(Mode.HEX_TO_BASE64, ["48", "65"])

    def test_flag_with_value(self):
        """Test click usage errors become argument errors."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.HEX_TO_BASE64, ["-url=yes"])
        assert exc_info.value.exit_code == 1
        assert exc_info.value.show_usage is True

    def test_data_after_double_dash(self):
        parsed = parse_arguments(Mode.HEX_TO_BASE64, ["-url", "--", "4865"])
        assert parsed.data == "4865"

    def test_verbose(self):
        parsed = parse_arguments(Mode.HEX_TO_BASE64, ["--verbose", "4865"])
        assert parsed.verbose is True


class TestB64hexArguments:
    """Test parsing under the b64hex name."""

    def test_defaults_to_lowercase(self):
        parsed = parse_arguments(Mode.BASE64_TO_HEX, ["SGVsbG8="])
        assert parsed.config.mode is Mode.BASE64_TO_HEX
        assert parsed.config.hex_case is HexCase.LOWER

    def test_low(self):
        parsed = parse_arguments(Mode.BASE64_TO_HEX, ["-low", "SGVsbG8="])
        assert parsed.config.hex_case is HexCase.LOWER

    def test_up(self):
        parsed = parse_arguments(Mode.BASE64_TO_HEX, ["SGVsbG8=", "-up"])
        assert parsed.config.hex_case is HexCase.UPPER

    @pytest.mark.parametrize("args", [["-low", "-up"], ["-up", "x", "-low"]])
    def test_low_and_up_conflict(self, args):
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.BASE64_TO_HEX, args)
        assert "Conflicting flags: -low and -up" in str(exc_info.value)

    def test_url_not_valid(self):
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.BASE64_TO_HEX, ["-url", "SGVsbG8="])
        assert exc_info.value.token == "-url"

    def test_url_safe_data_starting_with_dash(self):
        """Test data that looks like a flag is refused as an argument."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_arguments(Mode.BASE64_TO_HEX, ["-_8="])
        assert exc_info.value.token == "-_8="


class TestClickHandled:
    """Test requests click answers without parsing a conversion."""

    def test_help_returns_zero(self, capsys):
        assert parse_arguments(Mode.HEX_TO_BASE64, ["--help"]) == 0
        assert "-url" in capsys.readouterr().out

    def test_version_returns_zero(self, capsys):
        assert parse_arguments(Mode.BASE64_TO_HEX, ["--version"]) == 0
        assert __version__ in capsys.readouterr().out


class TestCommands:
    """Test the click commands directly."""

    def test_hexb64_help(self):
        result = runner.invoke(hexb64_command, ["--help"])
        assert result.exit_code == 0
        assert "-url" in result.output
        assert "URL-safe" in result.output

    def test_b64hex_help(self):
        result = runner.invoke(b64hex_command, ["--help"])
        assert result.exit_code == 0
        assert "-low" in result.output
        assert "-up" in result.output

    def test_returns_parsed_arguments(self):
        result = runner.invoke(
            b64hex_command, ["-up", "SGVsbG8="], standalone_mode=False
        )
        assert result.exception is None
        assert isinstance(result.return_value, ParsedArguments)
        assert result.return_value.config.hex_case is HexCase.UPPER

    def test_argument_error_exits_one(self):
        result = runner.invoke(hexb64_command, ["a", "b"], standalone_mode=False)
        assert isinstance(result.exception, ArgumentError)
        assert result.exit_code == 1
