from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path

import httpx
import pytest
import yaml
from typer.testing import CliRunner

from astrology_node.boot.logging import QUIET_LOGGERS
from astrology_node.config import config_path
from astrology_node.transport import ApiClient
from tests.helpers import NATAL_PARAMS, RecordingApi

cli_app = importlib.import_module("astrology_node.cli.app")


@pytest.fixture
def runner():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    quiet = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield CliRunner()
    # The CLI callback reconfigures the root logger against the runner's streams.
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, previous in quiet.items():
        logging.getLogger(name).setLevel(previous)


@pytest.fixture
def cli_api(monkeypatch: pytest.MonkeyPatch) -> RecordingApi:
    api = RecordingApi()
    monkeypatch.setattr(
        cli_app,
        "_make_client",
        lambda settings: ApiClient(transport=httpx.MockTransport(api)),
    )
    monkeypatch.setenv("ASTROLOGY_API_KEY", "cli-key")
    monkeypatch.setenv("ASTROLOGY_API_BASE_URL", "https://api.test")
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    return api


def test_no_command_prints_help(runner: CliRunner) -> None:
    result = runner.invoke(cli_app.app, [])
    assert result.exit_code == 0
    assert "resources" in result.output


def test_resources_lists_every_resource(runner: CliRunner) -> None:
    result = runner.invoke(cli_app.app, ["resources"])
    assert result.exit_code == 0, result.output
    names = [line.split("\t", 1)[0] for line in result.output.splitlines()]
    assert len(names) == 23
    assert "humanDesign" in names


def test_operations_for_resource(runner: CliRunner) -> None:
    result = runner.invoke(cli_app.app, ["operations", "lunar"])
    assert result.exit_code == 0, result.output
    assert result.output.split() == ["phases", "voidOfCourse", "mansions", "events", "calendar"]


def test_operations_for_unknown_resource(runner: CliRunner) -> None:
    result = runner.invoke(cli_app.app, ["operations", "astronomy"])
    assert result.exit_code == 1
    assert "not supported" in result.output


def test_call_posts_decoded_parameters(runner: CliRunner, cli_api: RecordingApi) -> None:
    cli_api.respond(200, {f"k{i}": i for i in range(12)})
    args = ["call", "charts", "natal"]
    for key, value in NATAL_PARAMS.items():
        args += ["-p", f"{key}={value}"]
    result = runner.invoke(cli_app.app, args)
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.stdout)) == 10
    request = cli_api.last
    assert str(request.url) == "https://api.test/api/v3/charts/natal"
    assert request.headers["Authorization"] == "Bearer cli-key"
    assert cli_api.last_json()["subject"]["birth_data"]["year"] == 1990


def test_call_with_params_file_and_no_simplify(
    runner: CliRunner, cli_api: RecordingApi, tmp_path: Path
) -> None:
    params_file = tmp_path / "params.yaml"
    params_file.write_text(yaml.safe_dump({**NATAL_PARAMS, "city": "Paris"}), encoding="utf-8")
    cli_api.respond(200, {f"k{i}": i for i in range(12)})
    result = runner.invoke(
        cli_app.app,
        [
            "call",
            "data",
            "positions",
            "--params-file",
            str(params_file),
            "-p",
            "countryCode=FR",
            "--no-simplify",
        ],
    )
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.stdout)) == 12
    birth_data = cli_api.last_json()["subject"]["birth_data"]
    assert birth_data["city"] == "Paris"
    assert birth_data["country_code"] == "FR"


def test_call_rejects_malformed_parameter(runner: CliRunner, cli_api: RecordingApi) -> None:
    result = runner.invoke(cli_app.app, ["call", "data", "now", "-p", "novalue"])
    assert result.exit_code != 0
    assert cli_api.requests == []


def test_call_reports_missing_parameter(runner: CliRunner, cli_api: RecordingApi) -> None:
    result = runner.invoke(cli_app.app, ["call", "charts", "natal"])
    assert result.exit_code == 1
    assert 'Parameter "year"' in result.output


def test_call_without_api_key(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    result = runner.invoke(cli_app.app, ["call", "data", "now"])
    assert result.exit_code == 1
    assert "No API key configured" in result.output


def test_batch_continue_on_error(runner: CliRunner, cli_api: RecordingApi, tmp_path: Path) -> None:
    batch_file = tmp_path / "batch.json"
    batch_file.write_text(
        json.dumps(
            [
                {"resource": "data", "operation": "now"},
                {"resource": "charts", "operation": "natal"},
            ]
        ),
        encoding="utf-8",
    )
    result = runner.invoke(cli_app.app, ["batch", str(batch_file), "--continue-on-error"])
    assert result.exit_code == 0, result.output
    results = json.loads(result.stdout)
    assert results[0] == {"ok": True}
    assert results[1]["error_type"] == "ParameterError"


def test_batch_aborts_by_default(runner: CliRunner, cli_api: RecordingApi, tmp_path: Path) -> None:
    batch_file = tmp_path / "batch.yaml"
    batch_file.write_text(
        yaml.safe_dump([{"resource": "charts", "operation": "natal"}]), encoding="utf-8"
    )
    result = runner.invoke(cli_app.app, ["batch", str(batch_file)])
    assert result.exit_code == 1
    assert "Item 0 [charts/natal] failed" in result.output


def test_batch_requires_a_list(runner: CliRunner, cli_api: RecordingApi, tmp_path: Path) -> None:
    batch_file = tmp_path / "batch.json"
    batch_file.write_text(json.dumps({"resource": "data"}), encoding="utf-8")
    result = runner.invoke(cli_app.app, ["batch", str(batch_file)])
    assert result.exit_code != 0
    assert cli_api.requests == []


def test_check_credentials(runner: CliRunner, cli_api: RecordingApi) -> None:
    result = runner.invoke(cli_app.app, ["check", "--api-key", "override"])
    assert result.exit_code == 0, result.output
    assert "Credentials accepted by https://api.test" in result.output
    assert cli_api.last.headers["Authorization"] == "Bearer override"
    assert cli_api.last.url.path == "/api/v3/data/now"


def test_check_reports_rejected_key(runner: CliRunner, cli_api: RecordingApi) -> None:
    cli_api.respond(401, {"code": "UNAUTHORIZED", "message": "invalid key"})
    result = runner.invoke(cli_app.app, ["check"])
    assert result.exit_code == 1
    assert "401 UNAUTHORIZED: invalid key" in result.output


def test_check_rejects_blank_api_key(runner: CliRunner, cli_api: RecordingApi) -> None:
    result = runner.invoke(cli_app.app, ["check", "--api-key", "   "])
    assert result.exit_code == 1
    assert "Invalid credentials" in result.output
    assert cli_api.requests == []


def test_log_level_from_config_file(runner: CliRunner) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump({"log_level": "DEBUG"}), encoding="utf-8")
    result = runner.invoke(cli_app.app, ["resources"])
    assert result.exit_code == 0, result.output
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_broken_config_still_runs_listing_commands(runner: CliRunner) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("log_level: [unclosed", encoding="utf-8")
    result = runner.invoke(cli_app.app, ["resources"])
    assert result.exit_code == 0, result.output
    failed = runner.invoke(cli_app.app, ["call", "data", "now"])
    assert failed.exit_code == 1
    assert "Could not parse" in failed.output
