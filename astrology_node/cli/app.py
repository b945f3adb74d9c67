"""Primary Typer application for the Astrology API node CLI."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import typer
import yaml
from pydantic import SecretStr

from ..boot import configure_logging
from ..config.settings import Settings, get_settings
from ..dispatch import default_registry
from ..errors import AstrologyNodeError, ConfigurationError
from ..executor import Executor
from ..transport import ApiClient, check_credentials

app = typer.Typer(help="Astrology API node command line interface.")


def _decode_value(raw: str) -> Any:
    """Decode ``raw`` as JSON (numbers, booleans, lists) or keep it as a string."""

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _parse_params(values: List[str]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for value in values:
        key, sep, raw = value.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Invalid parameter '{value}'. Expected KEY=VALUE.")
        params[key.strip()] = _decode_value(raw.strip())
    return params


def _read_data_file(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Unable to parse {path}: {exc}") from exc


def _make_client(settings: Settings) -> ApiClient:
    return ApiClient(timeout=settings.timeout)


def _resolve_settings(*, base_url: Optional[str] = None, api_key: Optional[str] = None) -> Settings:
    settings = get_settings()
    updates: Dict[str, Any] = {}
    if base_url:
        updates["base_url"] = base_url.strip().rstrip("/")
    if api_key:
        updates["api_key"] = SecretStr(api_key)
    return settings.model_copy(update=updates) if updates else settings


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _fail(exc: BaseException) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(1)


def _run(settings: Settings, records: List[Mapping[str, Any]], *, continue_on_error: bool) -> List[Any]:
    with _make_client(settings) as client:
        executor = Executor(
            settings.credentials(),
            client=client,
            continue_on_error=continue_on_error,
            simplify_max_keys=settings.simplify_max_keys,
        )
        return executor.run_items(records)


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    """Configure logging before executing subcommands."""

    try:
        settings = get_settings()
    except ConfigurationError:
        # Commands that need settings report the error themselves.
        settings = None
    configure_logging(settings=settings)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("resources")
def list_resources() -> None:
    """List the available resources."""

    for resource in default_registry().iter_resources():
        typer.echo(f"{resource.name}\t{resource.description}")


@app.command("operations")
def list_operations(
    resource: str = typer.Argument(..., metavar="RESOURCE", help="Resource name, e.g. charts."),
) -> None:
    """List the operations of RESOURCE."""

    try:
        names = default_registry().get(resource).operation_names()
    except AstrologyNodeError as exc:
        raise _fail(exc) from exc
    for name in names:
        typer.echo(name)


@app.command("call")
def call(
    resource: str = typer.Argument(..., metavar="RESOURCE"),
    operation: str = typer.Argument(..., metavar="OPERATION"),
    param: List[str] = typer.Option(
        [],
        "--param",
        "-p",
        metavar="KEY=VALUE",
        help="Operation parameter (repeatable); values are decoded as JSON when possible.",
    ),
    params_file: Optional[Path] = typer.Option(
        None,
        "--params-file",
        help="JSON or YAML mapping of parameters; -p values take precedence.",
    ),
    no_simplify: bool = typer.Option(
        False, "--no-simplify", help="Return the full response instead of the first keys."
    ),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Override the API key."),
) -> None:
    """Run a single OPERATION on RESOURCE and print the JSON response."""

    record: Dict[str, Any] = {}
    if params_file is not None:
        loaded = _read_data_file(params_file)
        if not isinstance(loaded, Mapping):
            raise typer.BadParameter(f"{params_file} must contain a mapping of parameters")
        record.update(loaded)
    record.update(_parse_params(param))
    record["resource"] = resource
    record["operation"] = operation
    if no_simplify:
        record["simplify"] = False

    try:
        settings = _resolve_settings(base_url=base_url, api_key=api_key)
        results = _run(settings, [record], continue_on_error=False)
    except AstrologyNodeError as exc:
        raise _fail(exc) from exc
    _echo_json(results[0])


@app.command("batch")
def batch(
    path: Path = typer.Argument(..., metavar="FILE", help="JSON or YAML list of records."),
    continue_on_error: Optional[bool] = typer.Option(
        None,
        "--continue-on-error/--abort-on-error",
        help="Report failing records in place instead of aborting the batch.",
    ),
) -> None:
    """Run every record in FILE and print the list of responses."""

    records = _read_data_file(path)
    if not isinstance(records, list) or not all(isinstance(item, Mapping) for item in records):
        raise typer.BadParameter(f"{path} must contain a list of parameter mappings")

    try:
        settings = _resolve_settings()
        keep_going = settings.continue_on_error if continue_on_error is None else continue_on_error
        results = _run(settings, records, continue_on_error=keep_going)
    except AstrologyNodeError as exc:
        raise _fail(exc) from exc
    _echo_json(results)


@app.command("check")
def check(
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API base URL."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Override the API key."),
) -> None:
    """Verify the configured credentials against the API."""

    try:
        settings = _resolve_settings(base_url=base_url, api_key=api_key)
        credentials = settings.credentials()
        with _make_client(settings) as client:
            check_credentials(client, credentials.base_url, credentials.token)
    except AstrologyNodeError as exc:
        raise _fail(exc) from exc
    typer.secho(f"Credentials accepted by {credentials.base_url}", fg=typer.colors.GREEN)


def main() -> None:
    app()


__all__ = ["app", "main"]
