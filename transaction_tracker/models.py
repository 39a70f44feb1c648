"""Data models and type aliases for ``transaction_tracker``.

Two shapes coexist:

- :data:`TransactionRecord`: a loose, mapping-like row as exchanged with CSV
  files and the UI layer. Parsed CSV rows carry :data:`CsvValue` cells; only
  the ``amount`` column is ever numeric.
- :class:`Transaction`: the typed ledger entry that callers build by hand or
  materialize from a record via :meth:`Transaction.from_record`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Loose records
# ---------------------------------------------------------------------------

type CsvValue = str | int | float
"""A parsed CSV cell: text, or a number for the ``amount`` column."""

type TransactionRecord = Mapping[str, Any]
"""A flat transaction row keyed by column name.

Column names are not enforced; rows produced by ``parse_csv`` use whatever
header the input carried.
"""


# ---------------------------------------------------------------------------
# Typed transaction
# ---------------------------------------------------------------------------


class Transaction(BaseModel):
    """A single financial ledger entry.

    ``id`` is fixed once assigned; uniqueness within a collection is the
    caller's responsibility. ``amount`` follows the caller's sign convention
    (positive inflow, negative outflow). ``category_suggested`` is set when
    ``category`` was machine-inferred and cleared on confirmation; it is
    exchanged externally under the ``categorySuggested`` key.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    id: str = Field(frozen=True)
    date: str
    description: str
    amount: float
    category: str | None = None
    category_suggested: bool | None = Field(default=None, alias="categorySuggested")

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id must be non-empty")
        return v

    @classmethod
    def from_record(cls, record: TransactionRecord) -> Transaction:
        """Build a transaction from a loose record (e.g. a parsed CSV row).

        Lax coercion applies (``"12.50"`` becomes ``12.5``, ``"true"`` becomes
        ``True``); unknown columns are ignored. Empty ``category`` or
        ``categorySuggested`` cells are treated as absent. Raises
        ``pydantic.ValidationError`` when required fields are missing or
        cannot be coerced.
        """

        data = dict(record)
        for key in ("category", "categorySuggested", "category_suggested"):
            if data.get(key) == "":
                data.pop(key)
        return cls.model_validate(data)

    def to_record(self) -> dict[str, Any]:
        """Return the external flat shape, omitting absent optional fields."""

        return self.model_dump(by_alias=True, exclude_none=True)

    def confirm_category(self, category: str | None = None) -> None:
        """Mark the category as user-confirmed, optionally replacing it."""

        if category is not None:
            self.category = category
        self.category_suggested = None


__all__ = ["CsvValue", "Transaction", "TransactionRecord"]
