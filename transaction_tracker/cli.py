"""CLI for the ``transaction_tracker`` package.

Command handlers (``cmd_*``) hold the logic and return a process exit code;
the Typer commands below are thin wrappers. The root callback loads a local
``.env`` with ``python-dotenv`` and configures package logging before any
command runs.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging


def _read_text(path: str) -> str | None:
    """Read ``path`` as UTF-8, reporting failures on stderr and returning ``None``."""

    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {path}", file=sys.stderr)
    except IsADirectoryError:
        print(f"Error: Not a file: {path}", file=sys.stderr)
    except UnicodeDecodeError as e:
        print(f"Error: '{path}' is not valid UTF-8: {e}", file=sys.stderr)
    return None


def cmd_suggest(description: str) -> int:
    """Print the suggested category for ``description`` (nothing when unmatched)."""

    from .categories import suggest_category

    category = suggest_category(description)
    if category is not None:
        print(category)
    return 0


def cmd_categories() -> int:
    """Print every known category, one per line."""

    from .categories import get_all_categories

    for category in get_all_categories():
        print(category)
    return 0


def cmd_import_csv(csv_path: str, *, suggest: bool = True) -> int:
    """Parse ``csv_path`` and print one JSON object per record to stdout."""

    from .api import import_transactions

    text = _read_text(csv_path)
    if text is None:
        return 1

    for record in import_transactions(text, suggest=suggest):
        print(json.dumps(record, ensure_ascii=False, allow_nan=True))
    return 0


def cmd_show(csv_path: str) -> int:
    """Print a tab-separated display table for ``csv_path``.

    Columns: formatted date, description, formatted amount, category. A
    trailing ``*`` marks a suggested (unconfirmed) category.
    """

    from .api import import_transactions
    from .formatting import format_currency, format_date

    text = _read_text(csv_path)
    if text is None:
        return 1

    for record in import_transactions(text):
        amount = record.get("amount", "")
        amount_text = (
            format_currency(amount)
            if isinstance(amount, int | float) and not isinstance(amount, bool)
            else str(amount)
        )
        category = str(record.get("category") or "")
        if category and record.get("categorySuggested") is True:
            category += "*"
        print(
            "\t".join(
                [
                    format_date(str(record.get("date", ""))),
                    str(record.get("description", "")),
                    amount_text,
                    category,
                ]
            )
        )
    return 0


def cmd_export_csv(
    json_path: str,
    *,
    filename: str = "transactions.csv",
    output_dir: str | None = None,
) -> int:
    """Export the JSON array of records in ``json_path`` as a CSV file."""

    from .csv_codec import FileDownloadSink, export_to_csv

    text = _read_text(json_path)
    if text is None:
        return 1

    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as e:
        print(f"Error: Failed to parse JSON: {e}", file=sys.stderr)
        return 1
    if not isinstance(payload, list) or not all(isinstance(r, dict) for r in payload):
        print("Error: expected a JSON array of objects", file=sys.stderr)
        return 1

    sink = FileDownloadSink(output_dir)
    try:
        export_to_csv(payload, filename, sink=sink)
    except OSError as e:
        print(f"Error: failed to write '{filename}': {e}", file=sys.stderr)
        return 1

    if payload:
        print(f"Exported {len(payload)} rows to {sink.directory}")
    else:
        print("Nothing to export.")
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Import, export and categorize personal-finance transaction CSVs.",
)


# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to a transactions CSV file",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("suggest")
def suggest_cmd(description: str) -> None:
    """Suggest a category for a transaction description."""

    raise typer.Exit(cmd_suggest(description))


@app.command("categories")
def categories_cmd() -> None:
    """List all known categories."""

    raise typer.Exit(cmd_categories())


@app.command("import-csv")
def import_csv_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    suggest: bool = typer.Option(
        True, help="Fill in suggested categories for rows without one."
    ),
) -> None:
    """Parse a CSV and print the records as JSON lines."""

    raise typer.Exit(cmd_import_csv(str(csv_path), suggest=suggest))


@app.command("show")
def show_cmd(csv_path: Annotated[Path, CSV_PATH_OPTION]) -> None:
    """Print a formatted table of the transactions in a CSV."""

    raise typer.Exit(cmd_show(str(csv_path)))


@app.command("export-csv")
def export_csv_cmd(
    json_path: Path = typer.Option(..., "--json-path", help="JSON array of records"),
    *,
    filename: str = typer.Option("transactions.csv", help="Name of the exported file."),
    output_dir: str | None = typer.Option(
        None, help="Directory to write into (falls back to TT_EXPORT_DIR, then CWD)."
    ),
) -> None:
    """Export JSON records to a CSV file."""

    raise typer.Exit(cmd_export_csv(str(json_path), filename=filename, output_dir=output_dir))


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug details to stderr."
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    # override=False keeps variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging("DEBUG" if verbose else None)


if __name__ == "__main__":  # pragma: no cover
    app()
