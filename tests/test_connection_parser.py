"""
Tests for connection string classification.

Covers every supported form, key-case handling and the rejection of
malformed strings.
"""

import pytest

from rbaserun.domain.connection import ConnectionKind, ConnectionStringParser
from rbaserun.domain.errors import ExitCode, UnrecognizedFormat
from rbaserun.infrastructure.results import Failure, Success


@pytest.fixture
def parser():
    return ConnectionStringParser()


class TestSupportedForms:
    """One test per connection string form."""

    def test_simple_server_form(self, parser):
        result = parser.parse("my-server;my-base")

        assert isinstance(result, Success)
        assert result.value.kind == ConnectionKind.SIMPLE_SERVER
        assert result.value.fields == ("my-server", "my-base")

    def test_full_server_form(self, parser):
        result = parser.parse('Srvr="s";Ref="b";')

        assert isinstance(result, Success)
        assert result.value.kind == ConnectionKind.SERVER
        assert result.value.fields == ("s", "b")

    def test_file_form(self, parser):
        result = parser.parse('File="C:\\x";')

        assert isinstance(result, Success)
        assert result.value.kind == ConnectionKind.FILE
        assert result.value.fields == ("C:\\x",)

    def test_web_form(self, parser):
        result = parser.parse('ws="https://h/b";')

        assert isinstance(result, Success)
        assert result.value.kind == ConnectionKind.WEB
        assert result.value.fields == ("https://h/b",)


class TestClassificationDetails:
    """Key case, whitespace and precedence rules."""

    def test_keys_are_case_insensitive_values_keep_case(self, parser):
        result = parser.parse('SRVR="App01";REF="Accounting";')

        assert result.value.kind == ConnectionKind.SERVER
        assert result.value.host == "App01"
        assert result.value.ref_name == "Accounting"

    def test_uppercase_ws_key(self, parser):
        result = parser.parse('WS="https://Host/Base";')

        assert result.value.kind == ConnectionKind.WEB
        assert result.value.url == "https://Host/Base"

    def test_file_path_case_preserved(self, parser):
        result = parser.parse('file="D:\\Bases\\Demo";')

        assert result.value.path == "D:\\Bases\\Demo"

    def test_surrounding_whitespace_is_trimmed(self, parser):
        result = parser.parse("  app01;trade  ")

        assert result.value.fields == ("app01", "trade")

    def test_simple_form_trailing_semicolon(self, parser):
        result = parser.parse("app01;trade;")

        assert result.value.fields == ("app01", "trade")

    def test_server_form_with_spaces_around_equals(self, parser):
        result = parser.parse('Srvr = "app01:1541"; Ref = "trade";')

        assert result.value.fields == ("app01:1541", "trade")

    def test_web_takes_precedence_over_file(self, parser):
        result = parser.parse('ws="https://h/b";File="C:\\x";')

        assert result.value.kind == ConnectionKind.WEB

    def test_file_takes_precedence_over_server(self, parser):
        result = parser.parse('File="C:\\x";Srvr="s";Ref="b";')

        assert result.value.kind == ConnectionKind.FILE

    def test_ws_inside_value_is_not_a_key(self, parser):
        result = parser.parse('File="C:\\news=1";')

        assert result.value.kind == ConnectionKind.FILE
        assert result.value.path == "C:\\news=1"


class TestUnrecognizedFormat:
    """Malformed strings yield Failure(UnrecognizedFormat)."""

    @pytest.mark.parametrize("raw", [
        "",
        "   ",
        "just-a-name",
        "a;b;c",
        ";base",
        "server;",
        "Srvr=\"s\";",
        "Name=value",
    ])
    def test_rejected(self, parser, raw):
        result = parser.parse(raw)

        assert isinstance(result, Failure)
        assert isinstance(result.error, UnrecognizedFormat)
        assert result.error.exit_code == ExitCode.UNRECOGNIZED_FORMAT

    def test_file_key_without_quotes_names_expected_pattern(self, parser):
        result = parser.parse("File=C:\\x;")

        assert isinstance(result, Failure)
        assert 'File="<path>"' in result.error.reason

    def test_server_keys_without_quotes_names_expected_pattern(self, parser):
        result = parser.parse("Srvr=s;Ref=b;")

        assert isinstance(result, Failure)
        assert 'Srvr="host";Ref="ref";' in result.error.reason

    def test_web_key_without_quotes_names_expected_pattern(self, parser):
        result = parser.parse("ws=https://h/b")

        assert isinstance(result, Failure)
        assert 'ws="<url>"' in result.error.reason

    def test_error_message_contains_input(self, parser):
        result = parser.parse("nonsense")

        assert "nonsense" in str(result.error)

    @pytest.mark.parametrize("raw", ["app01;\ntrade", "app01;\r\ntrade", 'File="C:\\x\n";', "app01;tr\x00ade"])
    def test_multi_line_or_control_characters_rejected(self, parser, raw):
        result = parser.parse(raw)

        assert isinstance(result, Failure)
        assert "single line" in result.error.reason
