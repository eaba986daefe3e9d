"""CLI tests for api-helper-generator.

Tests cover:
- Argument parsing and defaults
- Exit codes for success, stale output and generation errors
"""

from __future__ import annotations

import argparse
import logging

from api_helper_generator.cli import main, setup_parser
from conftest import API_JSON


class TestArgumentParsing:
    """Test argument parsing and validation."""

    def test_parser_setup(self):
        parser = setup_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.description is not None

    def test_default_arguments(self):
        args = setup_parser().parse_args([])

        assert args.input == "api.json"
        assert args.output == "gen_helpers.go"
        assert args.package == "gotgbot"
        assert args.skip_format is False
        assert args.check is False
        assert args.verbose is False

    def test_all_arguments(self):
        args = setup_parser().parse_args(
            ["-i", "spec.json", "-o", "out/helpers.go", "--package", "bot", "--no-format", "--check", "-v"]
        )

        assert args.input == "spec.json"
        assert args.output == "out/helpers.go"
        assert args.package == "bot"
        assert args.skip_format is True
        assert args.check is True
        assert args.verbose is True


class TestMain:
    """Test running the CLI entry point."""

    def test_generate(self, tmp_path, expected_helpers):
        output = tmp_path / "gen_helpers.go"

        assert main(["-i", str(API_JSON), "-o", str(output), "--no-format"]) == 0
        assert output.read_text(encoding="utf8") == expected_helpers

    def test_check_after_generate(self, tmp_path):
        output = tmp_path / "gen_helpers.go"

        assert main(["-i", str(API_JSON), "-o", str(output), "--no-format", "--check"]) == 1
        assert main(["-i", str(API_JSON), "-o", str(output), "--no-format"]) == 0
        assert main(["-i", str(API_JSON), "-o", str(output), "--no-format", "--check"]) == 0

    def test_missing_input(self, tmp_path, caplog):
        output = tmp_path / "gen_helpers.go"

        with caplog.at_level(logging.ERROR):
            code = main(["-i", str(tmp_path / "missing.json"), "-o", str(output)])

        assert code == 1
        assert not output.exists()
        assert "could not read API description" in caplog.text

    def test_invalid_schema(self, tmp_path, caplog):
        schema = tmp_path / "api.json"
        schema.write_text('{"methods": []}', encoding="utf8")

        with caplog.at_level(logging.ERROR):
            code = main(["-i", str(schema), "-o", str(tmp_path / "gen_helpers.go")])

        assert code == 1
        assert "'methods' and 'types'" in caplog.text
