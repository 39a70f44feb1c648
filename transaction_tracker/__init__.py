"""Public interface for the ``transaction_tracker`` package.

Symbol re-exports only; see the individual modules for behavior.
"""

from .api import backfill_suggested_categories, import_transactions
from .categories import (
    CATEGORY_MAPPING,
    getAllCategories,
    get_all_categories,
    suggest_category,
    suggestCategory,
)
from .csv_codec import (
    DownloadArtifact,
    DownloadSink,
    FileDownloadSink,
    export_to_csv,
    exportToCSV,
    parse_csv,
    parseCSV,
    serialize_csv,
)
from .formatting import format_currency, format_date, formatCurrency, formatDate
from .models import CsvValue, Transaction, TransactionRecord

__all__ = [
    # API
    "backfill_suggested_categories",
    "import_transactions",
    # Category resolver
    "CATEGORY_MAPPING",
    "suggest_category",
    "get_all_categories",
    "suggestCategory",
    "getAllCategories",
    # CSV codec
    "DownloadArtifact",
    "DownloadSink",
    "FileDownloadSink",
    "serialize_csv",
    "export_to_csv",
    "parse_csv",
    "exportToCSV",
    "parseCSV",
    # Formatting
    "format_date",
    "format_currency",
    "formatDate",
    "formatCurrency",
    # Models / types
    "Transaction",
    "TransactionRecord",
    "CsvValue",
]
