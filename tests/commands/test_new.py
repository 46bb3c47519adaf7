"""Tests for the new CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from tests.conftest import seed, stored
from tests.fakes import FakeRedis
from touilledo.cli import cli


@pytest.mark.usefixtures("_isolated_store")
class TestNewCommand:
    def test_joins_words_with_single_spaces(
        self, cli_runner: CliRunner, fake_redis: FakeRedis
    ) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new", "buy", "milk"])
        assert result.exit_code == 0
        assert stored(fake_redis) == {"items": [{"done": False, "label": "buy milk"}]}

    def test_alias(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis, (False, "first"))
        result = cli_runner.invoke(cli, ["n", "second"])
        assert result.exit_code == 0
        assert [i["label"] for i in stored(fake_redis)["items"]] == ["first", "second"]

    def test_then_list(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis)
        cli_runner.invoke(cli, ["new", "buy", "milk"])
        result = cli_runner.invoke(cli, [])
        assert result.stdout == "[0] buy milk\n"

    def test_dash_words_are_label_text(
        self, cli_runner: CliRunner, fake_redis: FakeRedis
    ) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new", "pipes", "at", "-5", "degrees"])
        assert result.exit_code == 0
        assert stored(fake_redis)["items"][0]["label"] == "pipes at -5 degrees"

    def test_option_names_after_first_word_are_label_text(
        self, cli_runner: CliRunner, fake_redis: FakeRedis
    ) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new", "read", "--help", "page"])
        assert result.exit_code == 0
        assert stored(fake_redis)["items"][0]["label"] == "read --help page"

    def test_double_dash_starts_label(
        self, cli_runner: CliRunner, fake_redis: FakeRedis
    ) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new", "--", "--examples", "page"])
        assert result.exit_code == 0
        assert stored(fake_redis)["items"][0]["label"] == "--examples page"

    def test_json_output(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis, (False, "a"))
        result = cli_runner.invoke(cli, ["--json", "new", "b"])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "add"
        assert data["data"]["index"] == 1

    def test_human_output(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new", "a"])
        assert "OK" in result.stdout
        assert "index: 0" in result.stdout

    def test_quiet_output(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["-q", "new", "a"])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_empty_label_warns(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        seed(fake_redis)
        result = cli_runner.invoke(cli, ["new"])
        assert result.exit_code == 0
        assert "WARNING" in result.stderr
        assert stored(fake_redis)["items"] == [{"done": False, "label": ""}]

    def test_uninitialized_store(self, cli_runner: CliRunner, fake_redis: FakeRedis) -> None:
        result = cli_runner.invoke(cli, ["new", "a"])
        assert result.exit_code == 1
        assert fake_redis.writes == []

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["new", "--examples"])
        assert result.exit_code == 0
        assert "touilledo new buy milk" in result.output
