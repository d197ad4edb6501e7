"""
Command-line interface for bqtableschema.

Resolves configuration, reads table metadata from BigQuery, generates the
Go source file and writes it out.
"""

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .catalog import BigQueryCatalog, CatalogError
from .codegen import GenerationResult, generate_from_tables
from .codegen.core.config import (
    ENV_CREDENTIALS,
    ENV_DATASET,
    ENV_OUTPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    ConfigError,
    GeneratorConfig,
    resolve_config,
    validate_config,
)
from .logging_config import get_logger, setup_logging
from .utils import CredentialsError, OutputError, load_credentials, write_generated_file

logger = get_logger(__name__)

# Status, progress and errors go to stderr so --stdout carries only the code
console = Console(stderr=True)
stdout_console = Console()

FATAL_ERRORS = (ConfigError, CredentialsError, CatalogError, OutputError)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bqtableschema",
        description="Generate Go structs from the table schemas of a BigQuery dataset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Environment variables:
  {ENV_CREDENTIALS}  key file used when --keyfile is not given
  {ENV_DATASET}                dataset used when --dataset is not given
  {ENV_OUTPUT_FILE}                     output path used when --output is not given

Examples:
  bqtableschema --keyfile key.json --dataset sales
  bqtableschema --dataset sales --output models/sales.generated.go
        """.strip(),
    )

    parser.add_argument("--project", help="BigQuery project id (default: key file's project_id)")
    parser.add_argument("--dataset", help="BigQuery dataset to read table schemas from")
    parser.add_argument("--keyfile", help="Path to service account JSON key file")
    parser.add_argument(
        "--output",
        "-o",
        help=f"Path to output the generated code (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--package-name",
        "--package",
        dest="package_name",
        help="Go package name declared by the generated file",
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated code instead of writing the output file",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def build_config(args: argparse.Namespace, environ: Mapping[str, str]) -> GeneratorConfig:
    """Resolve a GeneratorConfig from parsed arguments and the environment."""
    options = {
        "project": args.project,
        "dataset": args.dataset,
        "keyfile": args.keyfile,
        "output": args.output,
        "package_name": args.package_name,
    }
    return resolve_config(options, environ, config_file=args.config)


def run(
    config: GeneratorConfig,
    catalog: Optional[BigQueryCatalog] = None,
    write: bool = True,
) -> GenerationResult:
    """
    Run the whole pipeline once.

    Args:
        config: Resolved configuration
        catalog: Metadata source; built from the key file when omitted
        write: Write the generated file to config.output_file

    Returns:
        GenerationResult for the generated file

    Raises:
        CredentialsError, CatalogError, OutputError: On fatal failures
    """
    if catalog is None:
        credentials = load_credentials(config.key_file)
        project_id = config.project_id or credentials.project_id
        catalog = BigQueryCatalog.from_service_account_json(config.key_file, project_id)

    with catalog:
        result = generate_from_tables(catalog.iter_table_metadata(config.dataset), config)

    # Tables dropped by the metadata source never reached the generator
    result.skipped_tables = catalog.skipped_tables + result.skipped_tables
    result.warnings = catalog.warnings + result.warnings

    if write:
        write_generated_file(config.output_file, result.code)

    return result


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Entry point for the bqtableschema command.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_config(args, os.environ if environ is None else environ)

        for warning in validate_config(config):
            logger.warning(warning)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task(
                f"[cyan]Generating structs for dataset {config.dataset}...", total=None
            )
            result = run(config, write=not args.stdout)

    except FATAL_ERRORS as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Fatal error", exc_info=True)
        return 1
    except Exception as e:
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        logger.error("Unexpected failure", exc_info=True)
        return 1

    _print_result(result, config, args)
    return 0


def _print_result(
    result: GenerationResult, config: GeneratorConfig, args: argparse.Namespace
) -> None:
    """Show the generated code or where it went, plus any warnings."""
    if args.stdout:
        if stdout_console.is_terminal:
            stdout_console.print(Syntax(result.code, "go", theme="monokai"))
        else:
            sys.stdout.write(result.code)
    else:
        console.print(
            f"[green]✓[/green] Generated {result.metadata.get('struct_count', 0)} "
            f"struct(s) into [cyan]{config.output_file}[/cyan]"
        )

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

