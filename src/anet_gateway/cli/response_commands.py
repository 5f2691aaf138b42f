"""Response inspection CLI commands for anet-gateway.

This module provides CLI commands for classifying saved gateway responses.
"""

import json as json_lib
import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click

from anet_gateway.config import Config, get_parsing_config
from anet_gateway.logging_audit import PAYLOAD_FLAG, log_audit_event
from anet_gateway.parsers import SUPPORTED_FORMATS, parse_response
from anet_gateway.responses import TransactionResponse
from anet_gateway.utils.exceptions import ResponseParseError

logger = logging.getLogger(__name__)

EXIT_SUCCESSFUL = 0
EXIT_FAILED = 1
EXIT_PENDING = 2


def _outcome(response: TransactionResponse) -> str:
    if response.is_successful:
        return "approved"
    if response.is_pending:
        return "pending"
    if response.is_declined:
        return "declined"
    if response.is_error:
        return "error"
    return "failed"


def _format_report(response: TransactionResponse, outcome: str) -> str:
    lines = [
        f"Outcome:               {outcome.upper()}",
        f"Response type:         {response.data.response_type or 'unknown'}",
        f"Result code:           {response.envelope.result_code or '-'}",
        f"Response code:         {response.response_code if response.response_code is not None else '-'}",
        f"Code:                  {response.code or '-'}",
        f"Message:               {response.message or '-'}",
        f"Transaction reference: {response.transaction_reference or '-'}",
        f"Auth code:             {response.auth_code or '-'}",
    ]

    if response.account_number or response.account_type:
        lines.append(
            f"Account:               {response.account_type or '-'} {response.account_number or ''}".rstrip()
        )
    if response.avs_result_code:
        lines.append(
            f"AVS result:            {response.avs_result_code}"
            f" ({response.avs_result_description or 'unknown code'})"
        )
    if response.cvv_result_code:
        lines.append(
            f"CVV result:            {response.cvv_result_code}"
            f" ({response.cvv_result_description or 'unknown code'})"
        )

    errors = response.transaction_errors
    if errors:
        lines.append(f"\nErrors ({len(errors)}):")
        lines.extend(f"  [{error.code}] {error.text}" for error in errors)

    return "\n".join(lines)


@click.group("response")
def response_group() -> None:
    """Gateway response inspection commands."""
    pass


@response_group.command("inspect")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(SUPPORTED_FORMATS, case_sensitive=False),
    default=None,
    help="Payload format (default: from configuration, auto-detect)",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def inspect_command(
    ctx: click.Context, file: Path, fmt: Optional[str], json_output: bool
) -> None:
    """Classify a saved Authorize.Net response.

    Reads a JSON or XML response body and reports whether the transaction
    was approved, held for review, declined or errored, with its codes and
    messages.

    Exits with code 0 when approved, 2 when pending review, 1 otherwise.

    Examples:

        # Human-readable report
        anet-gateway response inspect response.xml

        # JSON output for automation
        anet-gateway response inspect response.json --json
    """
    config: Optional[Config] = (ctx.obj or {}).get("config")
    parsing = get_parsing_config(config) if config is not None else None
    fmt = fmt or (parsing.default_format if parsing else None)
    normalize_code = parsing.normalize_response_code if parsing else True

    start_time = time.time()
    logger.info(f"Inspecting gateway response: {file}")

    try:
        payload = file.read_bytes()
        logger.debug(
            f"Response payload ({len(payload)} bytes):\n{payload.decode('utf-8', errors='replace')}",
            extra={PAYLOAD_FLAG: True},
        )
        tree = parse_response(payload, fmt=fmt, normalize_code=normalize_code)
    except ResponseParseError as e:
        click.secho(f"Parse Error: {e}", fg="red", err=True)
        log_audit_event("RESPONSE_PARSE_FAILED", {
            "input_file": str(file),
            "status": "failure",
            "error_message": str(e),
        })
        sys.exit(EXIT_FAILED)
    except OSError as e:
        click.secho(f"Cannot read file: {e}", fg="red", err=True)
        logger.error(f"Cannot read file {file}: {e}")
        sys.exit(EXIT_FAILED)

    response = TransactionResponse(request=None, data=tree)
    outcome = _outcome(response)

    if json_output:
        output = response.to_dict()
        output["outcome"] = outcome
        click.echo(json_lib.dumps(output, indent=2))
    else:
        color = {"approved": "green", "pending": "yellow"}.get(outcome, "red")
        click.secho(_format_report(response, outcome), fg=color)

    log_audit_event("RESPONSE_INSPECTED", {
        "input_file": str(file),
        "status": {"approved": "success", "pending": "pending"}.get(outcome, "failure"),
        "response_type": tree.response_type,
        "response_code": response.response_code,
        "transaction_reference": response.transaction_reference,
        "code": response.code,
        "duration": time.time() - start_time,
    })

    if response.is_successful:
        sys.exit(EXIT_SUCCESSFUL)
    if response.is_pending:
        sys.exit(EXIT_PENDING)
    sys.exit(EXIT_FAILED)
