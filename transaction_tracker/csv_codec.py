"""CSV export/import for transaction records.

The format is deliberately minimal and matches what the web client has always
produced:

- Rows are joined with ``\\n``; the first line is the header.
- On export, a field is wrapped in double quotes only when it is a string
  containing a comma. Embedded quotes and newlines are not escaped.
- On import, every line is split on ``,`` and all ``"`` characters are
  removed. Quoted commas are therefore split into separate fields; this is
  not RFC 4180 and files from other tools may not round-trip.

Export hands the text to a :class:`DownloadSink`. The default
:class:`FileDownloadSink` writes into the export directory (``TT_EXPORT_DIR``
or the current working directory), staging through a ``.tmp`` file that is
``os.replace``-d into place.
"""

from __future__ import annotations

import contextlib
import math
import os
import re
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from os import PathLike
from pathlib import Path
from typing import Any, Protocol

from .logging_setup import get_logger
from .models import CsvValue, Transaction, TransactionRecord

DEFAULT_FILENAME = "transactions.csv"
CSV_MEDIA_TYPE = "text/csv"
IMPORTED_ID_PREFIX = "imported"

_logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Download boundary
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DownloadArtifact:
    """A named text payload handed to the host environment."""

    filename: str
    content: str
    media_type: str = CSV_MEDIA_TYPE


class DownloadSink(Protocol):
    def deliver(self, artifact: DownloadArtifact) -> None: ...


def _get_export_dir() -> Path:
    """Return the export directory.

    Default: the current working directory.
    Override: ``TT_EXPORT_DIR`` environment variable (absolute or relative).
    """

    root = os.getenv("TT_EXPORT_DIR")
    if root and root.strip():
        return Path(root).expanduser().resolve()
    return Path.cwd().resolve()


def _safe_filename(filename: str) -> str:
    # Only the final path component is honored; never write outside the export dir.
    name = Path(filename.strip()).name if filename else ""
    if name in ("", ".", ".."):
        return DEFAULT_FILENAME
    return name


class FileDownloadSink:
    """Save artifacts as files in a directory."""

    def __init__(self, directory: str | PathLike[str] | None = None) -> None:
        self._directory = Path(directory) if directory is not None else None

    @property
    def directory(self) -> Path:
        return self._directory if self._directory is not None else _get_export_dir()

    def deliver(self, artifact: DownloadArtifact) -> None:
        out_dir = self.directory
        out_dir.mkdir(parents=True, exist_ok=True)
        path = out_dir / _safe_filename(artifact.filename)
        tmp = path.with_name(f".{path.name}.tmp")

        try:
            tmp.write_text(artifact.content, encoding="utf-8", newline="")
            os.replace(tmp, path)
        except Exception:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
            raise

        _logger.debug(
            "saved %s (%s, %d chars) to %s",
            path.name,
            artifact.media_type,
            len(artifact.content),
            out_dir,
        )


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def _as_record(row: TransactionRecord | Transaction) -> Mapping[str, Any]:
    if isinstance(row, Transaction):
        return row.to_record()
    return row


def _field_text(value: Any) -> str:
    """Render a cell the way the web client's array join does."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"
        if value.is_integer() and abs(value) < 1e21:
            # Shortest round-trip digits, zero-padded: 1.2345678901234567e+19
            # prints as 12345678901234567000, not the exact binary value.
            return format(Decimal(repr(value)).normalize(), "f")
        return repr(value)
    if isinstance(value, str):
        return f'"{value}"' if "," in value else value
    return str(value)


def serialize_csv(rows: Sequence[TransactionRecord | Transaction]) -> str:
    """Return the CSV text for ``rows``; empty input yields ``""``.

    The header is taken from the first record's keys, in order. Later records
    are written against that header: missing keys become empty fields and
    extra keys are dropped.
    """

    if not rows:
        return ""

    records = [_as_record(r) for r in rows]
    headers = list(records[0].keys())
    lines = [",".join(headers)]
    for record in records:
        lines.append(",".join(_field_text(record.get(h)) for h in headers))
    return "\n".join(lines)


def export_to_csv(
    rows: Sequence[TransactionRecord | Transaction],
    filename: str = DEFAULT_FILENAME,
    *,
    sink: DownloadSink | None = None,
) -> None:
    """Serialize ``rows`` and hand the text to ``sink`` as a ``text/csv`` download.

    Does nothing when ``rows`` is empty. When ``sink`` is omitted, a
    :class:`FileDownloadSink` over the export directory is used.
    """

    if not rows:
        return

    content = serialize_csv(rows)
    target = sink if sink is not None else FileDownloadSink()
    target.deliver(DownloadArtifact(filename=filename, content=content))
    _logger.debug("exported %d rows as %s", len(rows), filename)


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_RADIX_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")

# Whitespace as the browser trims it; str.strip() keeps the U+FEFF byte-order mark.
_TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trim(s: str) -> str:
    return _TRIM_RE.sub("", s)


def _coerce_number(raw: str) -> int | float | None:
    """Return the numeric value of ``raw`` or ``None`` when it is not numeric.

    Mirrors the browser's ``Number(...)`` coercion: the empty string is ``0``
    and ``Infinity``/radix literals are accepted. Integral values below
    ``2**53`` come back as ``int``; larger ones stay ``float`` and lose the
    digits a double cannot hold, as they do in the browser.
    """

    s = _trim(raw)
    if not s:
        return 0
    if _RADIX_RE.match(s):
        return int(s, 0)
    if _INFINITY_RE.match(s):
        return -math.inf if s.startswith("-") else math.inf
    if not _DECIMAL_RE.match(s):
        return None
    value = float(s)
    if math.isfinite(value) and value.is_integer() and abs(value) < 2**53:
        return int(value)
    return value


def _split_line(line: str) -> list[str]:
    return [_trim(token).replace('"', "") for token in line.split(",")]


def parse_csv(text: str) -> list[dict[str, CsvValue]]:
    """Parse CSV text into records keyed by the header row.

    - Blank and whitespace-only lines are dropped before anything else.
    - Fewer than two remaining lines yields ``[]``.
    - ``amount`` cells are converted to numbers when numeric; everything else
      stays text.
    - Rows without an ``id`` receive ``imported_<epoch-millis>_<line>``, where
      ``<line>`` is the row's 1-based position among the non-blank lines.
    """

    lines = [line for line in text.split("\n") if _trim(line)]
    if len(lines) < 2:
        return []

    headers = _split_line(lines[0])
    records: list[dict[str, CsvValue]] = []
    synthesized = 0

    for i, line in enumerate(lines[1:], start=1):
        values = _split_line(line)
        if len(values) != len(headers):
            _logger.debug(
                "line %d has %d fields for %d headers", i, len(values), len(headers)
            )

        row: dict[str, CsvValue] = {}
        for index, header in enumerate(headers):
            value: CsvValue = values[index] if index < len(values) else ""
            if header == "amount":
                number = _coerce_number(value)
                if number is not None:
                    value = number
            row[header] = value

        if not row.get("id"):
            row["id"] = f"{IMPORTED_ID_PREFIX}_{int(time.time() * 1000)}_{i}"
            synthesized += 1

        records.append(row)

    _logger.debug("parsed %d rows (%d synthesized ids)", len(records), synthesized)
    return records


# Names used by the web client
exportToCSV = export_to_csv
parseCSV = parse_csv

__all__ = [
    "CSV_MEDIA_TYPE",
    "DEFAULT_FILENAME",
    "DownloadArtifact",
    "DownloadSink",
    "FileDownloadSink",
    "serialize_csv",
    "export_to_csv",
    "parse_csv",
    "exportToCSV",
    "parseCSV",
]
