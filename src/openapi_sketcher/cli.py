"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_sketcher.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from openapi_sketcher.document_editing import (
    ClickInputProvider,
    EditorInputError,
    InputProvider,
    run_insert_session,
)
from openapi_sketcher.document_io import DocumentError, load_document, save_document
from openapi_sketcher.schema_inference import MalformedInputError


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-sketcher")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Grow an OpenAPI document by pasting example JSON bodies."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("input_provider", ClickInputProvider())


@cli.command(name="insert")
@click.argument("target", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Path to the YAML editor configuration (defaults to ./{DEFAULT_CONFIG_FILENAME})",
)
@click.pass_context
def insert(ctx: click.Context, target: str, config_path: str | None) -> None:
    """Insert a path operation or a named schema into the OpenAPI document TARGET."""
    provider: InputProvider = ctx.obj["input_provider"]
    try:
        configuration = load_configuration(config_path)
        document = load_document(target)
        report = run_insert_session(document, provider, configuration)
        saved_path = save_document(document, target)
    except (ConfigurationError, DocumentError, EditorInputError, MalformedInputError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"inserted {report.target} into {saved_path}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML editor configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate an editor configuration file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
