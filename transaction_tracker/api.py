"""Composite operations over the codec and the category resolver."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .categories import suggest_category
from .csv_codec import parse_csv
from .logging_setup import get_logger
from .models import TransactionRecord

_logger = get_logger(__name__)


def backfill_suggested_categories(records: Iterable[TransactionRecord]) -> list[dict[str, Any]]:
    """Return copies of ``records`` with a suggested category where none is set.

    A record whose ``category`` is empty or missing gets the suggestion for
    its ``description`` and ``categorySuggested=True``. Records that already
    carry a category, or whose description matches nothing, are copied
    unchanged. The input records are not mutated.
    """

    out: list[dict[str, Any]] = []
    filled = 0
    for record in records:
        row = dict(record)
        if not row.get("category"):
            desc = row.get("description")
            suggestion = suggest_category(desc if isinstance(desc, str) else None)
            if suggestion is not None:
                row["category"] = suggestion
                row["categorySuggested"] = True
                filled += 1
        out.append(row)

    _logger.debug("suggested categories for %d of %d records", filled, len(out))
    return out


def import_transactions(text: str, *, suggest: bool = True) -> list[dict[str, Any]]:
    """Parse CSV ``text`` and, when ``suggest`` is true, backfill categories."""

    records = parse_csv(text)
    if not suggest:
        return records
    return backfill_suggested_categories(records)


__all__ = ["backfill_suggested_categories", "import_transactions"]
