# ruff: noqa: I001
"""CLI for the ``sms_ingest`` package.

This module exposes callable command handlers (``cmd_parse`` and
``cmd_parse_file``) that return process exit codes, plus a Typer-based
console interface wrapping them. Environment variables (``SMS_INGEST_*``)
are loaded from a local ``.env`` using ``python-dotenv`` before any
configuration is read. Parsing logic lives in :mod:`sms_ingest.parser`.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from dataclasses import replace
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import ParserConfig
from .logging_setup import configure_logging, get_logger
from .models import ParsedTransaction, RawMessage

logger = get_logger("sms_ingest.cli")


class OutputFormat(StrEnum):
    tsv = "tsv"
    json = "json"
    table = "table"


def _resolve_config(*, lenient: bool) -> ParserConfig:
    cfg = ParserConfig.from_env()
    if lenient:
        cfg = replace(cfg, require_intent_verb=False)
    return cfg


def _emit(rows: Sequence[ParsedTransaction], fmt: OutputFormat) -> None:
    if fmt is OutputFormat.json:
        for tx in rows:
            print(json.dumps(tx.to_payload(), ensure_ascii=False))
        return
    if fmt is OutputFormat.table:
        table = Table(title=f"{len(rows)} transaction(s)")
        for col in ("Key", "Date", "Type", "Amount", "Category", "Description"):
            table.add_column(col, justify="right" if col == "Amount" else "left")
        for tx in rows:
            table.add_row(
                tx.dedupe_key,
                tx.date,
                str(tx.direction),
                f"{tx.amount:,.2f}",
                str(tx.category),
                tx.description,
            )
        Console().print(table)
        return
    for tx in rows:
        print(
            f"{tx.dedupe_key}\t{tx.date}\t{tx.direction}\t{tx.amount}"
            f"\t{tx.category}\t{tx.description}"
        )


# ---- Command handlers ---------------------------------------------------------


def cmd_parse(
    body: str,
    *,
    sender: str = "",
    received_at: str | None = None,
    lenient: bool = False,
) -> int:
    """Parse a single message and print its JSON payload to stdout.

    ``received_at`` defaults to the current time when omitted, which only
    affects the calendar date used in the dedupe key. Returns ``0`` on a
    match and ``1`` on no match or invalid input (details on stderr).
    """

    from datetime import UTC, datetime

    from pydantic import ValidationError

    from .parser import parse_sms

    try:
        cfg = _resolve_config(lenient=lenient)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        message = RawMessage(
            body=body,
            sender=sender,
            received_at=received_at or datetime.now(UTC),
        )
    except ValidationError as e:
        print(f"Error: invalid message: {e}", file=sys.stderr)
        return 1

    tx = parse_sms(message, config=cfg)
    if tx is None:
        print("no match", file=sys.stderr)
        return 1

    print(json.dumps(tx.to_payload(), ensure_ascii=False))
    return 0


def cmd_parse_file(
    path: str,
    *,
    fmt: OutputFormat = OutputFormat.tsv,
    keep_duplicates: bool = False,
    lenient: bool = False,
) -> int:
    """Parse every message in an inbox export and print accepted transactions.

    Duplicate dedupe keys are dropped (first occurrence wins) unless
    ``keep_duplicates`` is set. A summary is logged at INFO.
    """

    import csv

    from .duplicates import dedupe_transactions
    from .ingest.utils import load_messages
    from .parser import parse_sms

    try:
        cfg = _resolve_config(lenient=lenient)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        messages = load_messages(path)
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"Error: Permission denied: {path}", file=sys.stderr)
        return 1
    except (csv.Error, ValueError) as e:
        print(f"Error: Failed to load messages: {e}", file=sys.stderr)
        return 1

    parsed: list[ParsedTransaction] = []
    rejected = 0
    for message in messages:
        tx = parse_sms(message, config=cfg)
        if tx is None:
            rejected += 1
        else:
            parsed.append(tx)

    n_duplicates = 0
    rows: Sequence[ParsedTransaction] = parsed
    if not keep_duplicates:
        result = dedupe_transactions(parsed)
        rows = result.unique
        n_duplicates = len(result.duplicates)

    logger.info(
        "parsed %d message(s): %d accepted, %d rejected, %d duplicate(s)",
        len(messages),
        len(rows),
        rejected,
        n_duplicates,
    )
    _emit(rows, fmt)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Extract structured transactions from bank SMS/notification text. "
        "Loads SMS_INGEST_* settings from a local .env before running."
    ),
)


@app.command("parse")
def parse_cmd(
    body: Annotated[str, typer.Option("--body", help="Message text to parse.")],
    sender: Annotated[str, typer.Option(help="Sender id (e.g., bank short-code).")] = "",
    received_at: Annotated[
        str | None,
        typer.Option(help="Receipt timestamp (ISO-8601 or epoch ms). Defaults to now."),
    ] = None,
    lenient: Annotated[
        bool, typer.Option(help="Accept a currency-marked amount without a directional verb.")
    ] = False,
) -> None:
    """Parse one message and print the transaction payload as JSON."""

    raise typer.Exit(cmd_parse(body, sender=sender, received_at=received_at, lenient=lenient))


@app.command("parse-file")
def parse_file_cmd(
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            help="Inbox export (.jsonl, .ndjson, .json or .csv).",
            dir_okay=False,
            file_okay=True,
            exists=False,  # the handler reports missing files itself
        ),
    ],
    fmt: Annotated[OutputFormat, typer.Option("--format", help="Output format.")] = (
        OutputFormat.tsv
    ),
    keep_duplicates: Annotated[
        bool, typer.Option(help="Emit every parsed message, even repeated dedupe keys.")
    ] = False,
    lenient: Annotated[
        bool, typer.Option(help="Accept a currency-marked amount without a directional verb.")
    ] = False,
) -> None:
    """Parse an inbox export and print one row per accepted transaction."""

    raise typer.Exit(
        cmd_parse_file(
            str(path), fmt=fmt, keep_duplicates=keep_duplicates, lenient=lenient
        )
    )


@app.callback()
def _root(
    log_level: Annotated[
        str | None, typer.Option(help="Log level (falls back to SMS_INGEST_LOG_LEVEL).")
    ] = None,
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
