import json
from pathlib import Path
from typing import Optional

import typer

from asyncapi_bindings.__about__ import __version__
from asyncapi_bindings._internal.configs import LoaderConfig
from asyncapi_bindings._internal.constants import (
    AttachmentPoint,
    DocumentFormat,
    UnknownKeyPolicy,
)
from asyncapi_bindings.cli.utils.logs import (
    LogLevels,
    get_log_config,
    get_log_level,
    set_log_config,
    set_log_level,
)
from asyncapi_bindings.exceptions import BindingsException
from asyncapi_bindings.loader import (
    dumps_bindings,
    load_bindings_file,
    supported_protocols,
)
from asyncapi_bindings.schema import BindingsMapping
from asyncapi_bindings.validation import collect_issues

cli = typer.Typer(pretty_exceptions_short=True)


def version_callback(version: bool) -> None:
    """Callback function for displaying version information."""
    if version:
        typer.echo(f"asyncapi-bindings {__version__}")
        raise typer.Exit


@cli.callback()
def main(
    version: Optional[bool] = typer.Option(
        False,
        "-v",
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show current version.",
    ),
) -> None:
    """Inspect and normalize AsyncAPI protocol bindings objects."""


def _setup_logging(log_level: LogLevels, log_config: Optional[Path]) -> None:
    if log_config is not None:
        try:
            set_log_config(get_log_config(log_config))
        except ValueError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1) from e
    else:
        set_log_level(get_log_level(log_level))


def _load(
    file: Path,
    point: AttachmentPoint,
    unknown: UnknownKeyPolicy,
) -> BindingsMapping:
    try:
        return load_bindings_file(
            point,
            file,
            config=LoaderConfig.for_path(file, unknown=unknown),
        )
    except BindingsException as e:
        typer.echo(f"{file}: {e}", err=True)
        raise typer.Exit(1) from e


FILE_ARGUMENT = typer.Argument(
    ...,
    help="JSON or YAML file with a bindings object keyed by protocol.",
    exists=True,
    dir_okay=False,
    show_default=False,
)
POINT_OPTION = typer.Option(
    AttachmentPoint.channel,
    "-p",
    "--point",
    case_sensitive=False,
    help="Attachment point the bindings object is declared at.",
)
UNKNOWN_OPTION = typer.Option(
    UnknownKeyPolicy.preserve,
    "--unknown",
    case_sensitive=False,
    envvar="ASYNCAPI_BINDINGS_UNKNOWN",
    help="What to do with keys the bindings model does not declare.",
)
LOG_LEVEL_OPTION = typer.Option(
    LogLevels.warning,
    "-l",
    "--log-level",
    case_sensitive=False,
    help="Set selected level for the logger.",
)
LOG_CONFIG_OPTION = typer.Option(
    None,
    "--log-config",
    help="Logging configuration JSON file, used instead of --log-level.",
)


@cli.command()
def check(
    file: Path = FILE_ARGUMENT,
    point: AttachmentPoint = POINT_OPTION,
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Also check the constraints the bindings specification documents.",
    ),
    unknown: UnknownKeyPolicy = UNKNOWN_OPTION,
    log_level: LogLevels = LOG_LEVEL_OPTION,
    log_config: Optional[Path] = LOG_CONFIG_OPTION,
) -> None:
    """Check that a file holds a valid bindings object."""
    _setup_logging(log_level, log_config)

    bindings = _load(file, point, unknown)

    if strict and (issues := collect_issues(bindings)):
        for issue in issues:
            typer.echo(f"{file}: {issue}", err=True)
        raise typer.Exit(1)

    declared = ", ".join(bindings.protocols()) or "no protocols"
    typer.echo(f"{file}: {point.value} bindings OK ({declared})")


@cli.command()
def normalize(
    file: Path = FILE_ARGUMENT,
    point: AttachmentPoint = POINT_OPTION,
    yaml: bool = typer.Option(
        False,
        "--yaml",
        help="Emit YAML instead of JSON.",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "-o",
        "--out",
        help="Write the result to a file instead of stdout.",
    ),
    unknown: UnknownKeyPolicy = UNKNOWN_OPTION,
    log_level: LogLevels = LOG_LEVEL_OPTION,
    log_config: Optional[Path] = LOG_CONFIG_OPTION,
) -> None:
    """Re-emit a bindings object with absent fields omitted."""
    _setup_logging(log_level, log_config)

    bindings = _load(file, point, unknown)

    output_format = DocumentFormat.yaml if yaml else DocumentFormat.json
    result = dumps_bindings(bindings, config=LoaderConfig(format=output_format))

    if out is None:
        typer.echo(result)
    else:
        out.write_text(result)
        typer.echo(f"Bindings written to {out}")


@cli.command()
def protocols(
    point: Optional[AttachmentPoint] = typer.Option(
        None,
        "-p",
        "--point",
        case_sensitive=False,
        help="Show protocols of one attachment point only.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON."),
) -> None:
    """List protocols with a binding at each attachment point."""
    points = [point] if point is not None else list(AttachmentPoint)
    table = {p.value: list(supported_protocols(p)) for p in points}

    if as_json:
        typer.echo(json.dumps(table, indent=2))
        return

    for name, keys in table.items():
        typer.echo(f"{name}: {', '.join(keys)}")
