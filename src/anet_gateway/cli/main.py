"""Main CLI entry point for anet-gateway.

This module provides the main Click command group for the anet-gateway CLI.
"""

from pathlib import Path
from typing import Optional

import click

from anet_gateway import __version__
from anet_gateway.cli.response_commands import response_group
from anet_gateway.config import get_logging_config, get_parsing_config, load_config
from anet_gateway.logging_audit import configure_logging
from anet_gateway.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="anet-gateway")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--no-redact",
    is_flag=True,
    help="Do not mask card numbers and transaction hashes in logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    no_redact: bool,
) -> None:
    """anet-gateway - Authorize.Net response inspection tool.
    
    Classifies saved Authorize.Net API responses (JSON or XML) as approved,
    pending, declined or errored.
    
    Common usage:
    
        # Inspect a saved createTransactionResponse
        anet-gateway response inspect response.xml
        
        # Machine-readable output
        anet-gateway response inspect response.json --json
        
        # Enable verbose logging for debugging
        anet-gateway --verbose response inspect response.json
    
    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)
    
    try:
        config_obj = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)
        return
    ctx.obj["config"] = config_obj
    
    # CLI arguments override config file and environment
    logging_config = get_logging_config(config_obj)
    log_level = "DEBUG" if verbose else logging_config.level
    final_log_file = log_file or logging_config.log_file
    redact_card_data = logging_config.redact_card_data and not no_redact
    
    configure_logging(
        level=log_level,
        log_file=final_log_file,
        redact_card_data=redact_card_data,
    )


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"anet-gateway version {__version__}")


cli.add_command(response_group)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.
    
    Example:
        anet-gateway config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration is invalid", err=True)
        click.echo(f"\n{e}", err=True)
        raise SystemExit(1)
    
    parsing = get_parsing_config(config_obj)
    logging_config = get_logging_config(config_obj)

    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    click.echo(f"\nParsing:")
    click.echo(f"  Default format:          {parsing.default_format}")
    click.echo(f"  Normalize response code: {parsing.normalize_response_code}")
    click.echo(f"\nLogging:")
    click.echo(f"  Level:            {logging_config.level}")
    click.echo(f"  Log file:         {logging_config.log_file}")
    click.echo(f"  Redact card data: {logging_config.redact_card_data}")
