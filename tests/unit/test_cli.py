"""
Tests for the resume-ingest command line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from resume_ingest import __version__
from resume_ingest.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_parse_text_file(self, runner, contact_only_file):
        result = runner.invoke(app, ["parse", str(contact_only_file)])
        assert result.exit_code == 0
        assert "张三" in result.output
        assert "completed" in result.output

    def test_parse_json_output(self, runner, contact_only_file):
        result = runner.invoke(app, ["parse", str(contact_only_file), "--json", "--user", "u-9"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["status"] == "completed"
        assert payload["user_id"] == "u-9"
        assert payload["result"]["metadata"]["confidence_score"] == 45

    def test_parse_unsupported_type(self, runner, write_file):
        path = write_file("sheet.xlsx", "a,b")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "unsupported_type" in result.output

    def test_parse_unknown_skip_section(self, runner, contact_only_file):
        result = runner.invoke(app, ["parse", str(contact_only_file), "--skip", "hobbies"])
        assert result.exit_code == 1

    def test_parse_failed_task_exits_nonzero(self, runner, write_file):
        path = write_file("empty.txt", " ")
        result = runner.invoke(app, ["parse", str(path)])
        assert result.exit_code == 1
        assert "document content is empty" in result.output
