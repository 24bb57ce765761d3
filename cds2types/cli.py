"""
Command-line interface for cds2types.

Reads a compiled CDS model (CSN JSON) and writes TypeScript declarations.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import __version__
from .codegen import (
    GeneratorConfig,
    Program,
    convert_csn,
    generate_code,
    load_config,
)
from .codegen.core.cds import CSNError
from .codegen.core.config import ConfigError, get_config_manager
from .logging_config import get_logger, setup_logging
from .loader import fetch_csn, read_csn_file, read_csn_stream

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cds2types",
        description="Generate TypeScript declarations from a compiled CDS model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cds2types model.json -o model.ts
  cds2types model.json --prefix I --no-namespaces
  cds compile srv --to csn | cds2types --stdin -o model.ts
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="CSN JSON file to translate")
    input_group.add_argument("--url", help="URL to fetch the CSN from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read CSN from standard input"
    )

    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective configuration to FILE",
    )

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--prefix", "-p", help="Prefix for generated interface and enum names"
    )
    gen_group.add_argument(
        "--no-namespaces",
        action="store_true",
        help="Emit all declarations at top level instead of in namespaces",
    )
    gen_group.add_argument(
        "--no-header",
        action="store_true",
        help="Don't add the generated-file header comment",
    )
    gen_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )
    info_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    info_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        csn = _get_input_data(args)
        config = _build_config(args)

        if args.save_config:
            get_config_manager().save_config(config, args.save_config)
            console.print(
                f"[green]✓[/green] Configuration saved to [cyan]{args.save_config}[/cyan]"
            )

        return _generate_and_output(csn, config, args)

    except CSNError as e:
        console.print(f"[red]✗ Could not load CSN:[/red] {e}")
        return 1
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except ConfigError as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1


def _get_input_data(args: argparse.Namespace) -> Dict[str, Any]:
    """Read the CSN document from the selected source."""
    if args.file:
        return read_csn_file(args.file)
    if args.url:
        return fetch_csn(args.url)
    return read_csn_stream(sys.stdin)


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from config file and CLI arguments."""
    config_dict: Dict[str, Any] = {}

    if args.prefix is not None:
        config_dict["interface_prefix"] = args.prefix

    if args.no_namespaces:
        config_dict["use_namespaces"] = False

    if args.no_header:
        config_dict["add_header"] = False

    if args.indent_size is not None:
        config_dict["indent_size"] = args.indent_size

    if args.output:
        config_dict["output_file"] = args.output

    config = load_config(custom_config=config_dict, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def _generate_and_output(
    csn: Dict[str, Any], config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            read_task = progress.add_task("[cyan]Reading CDS definitions...", total=None)
            definitions = convert_csn(csn)
            progress.remove_task(read_task)

            gen_task = progress.add_task("[green]Generating TypeScript...", total=None)
            result = generate_code(Program(config), definitions)
            progress.remove_task(gen_task)

    except CSNError as e:
        console.print(f"[red]✗ Invalid CSN:[/red] {e}")
        return 1

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception}[/dim]")
        return 1

    output_file = config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}")
        console.print(
            f"[green]✓[/green] Generated TypeScript saved to [cyan]{output_path}[/cyan]"
        )
        logger.info("Wrote %s", output_path)
    else:
        console.print(Syntax(result.code, "typescript", theme="monokai"))

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

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0
