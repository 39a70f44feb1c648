"""Keyword-based spending category suggestions.

The keyword table is an ordered tuple of ``(keyword, category)`` pairs.
Matching is a plain substring test against the uppercased description, and
the first keyword in table order wins. Several keywords overlap (``UBER`` is
listed before ``UBER EATS``), so the order is part of the behavior: do not
reorder entries.

Exports
-------
- ``suggest_category(...)``: best-effort category hint for a description.
- ``get_all_categories()``: distinct category labels, sorted.
"""

from __future__ import annotations

from collections.abc import Iterator

CATEGORY_MAPPING: tuple[tuple[str, str], ...] = (
    ("STARBUCKS", "Coffee"),
    ("COFFEE BEAN", "Coffee"),
    ("DUNKIN DONUTS", "Coffee"),
    ("WHOLE FOODS", "Groceries"),
    ("SAFEWAY", "Groceries"),
    ("TRADER JOES", "Groceries"),
    ("KROGER", "Groceries"),
    ("COSTCO", "Groceries"),
    ("TARGET", "Shopping"),
    ("AMAZON", "Shopping"),
    ("BEST BUY", "Electronics"),
    ("HOME DEPOT", "Home & Garden"),
    ("SHELL", "Gas"),
    ("CHEVRON", "Gas"),
    ("UBER", "Transportation"),
    ("LYFT", "Transportation"),
    ("NETFLIX", "Entertainment"),
    ("SPOTIFY", "Entertainment"),
    ("ADOBE", "Software"),
    ("STEAM", "Entertainment"),
    ("MCDONALDS", "Fast Food"),
    ("CHIPOTLE", "Fast Food"),
    ("DOMINOS", "Fast Food"),
    ("UBER EATS", "Food Delivery"),
    ("CVS", "Health & Pharmacy"),
    ("VERIZON", "Utilities"),
    ("ELECTRIC BILL", "Utilities"),
    ("RENT", "Housing"),
    ("SALARY", "Income"),
    ("PAYPAL", "Transfer"),
    ("FLOWERS", "Gifts"),
)


def iter_keyword_matches(description: str | None) -> Iterator[tuple[str, str]]:
    """Yield every ``(keyword, category)`` pair found in ``description``, in table order."""

    upper_desc = (description or "").upper()
    for keyword, category in CATEGORY_MAPPING:
        if keyword in upper_desc:
            yield keyword, category


def suggest_category(description: str | None) -> str | None:
    """Return the category of the first table keyword found in ``description``.

    Case-insensitive. Returns ``None`` when no keyword matches; an empty
    description never matches.
    """

    return next((category for _kw, category in iter_keyword_matches(description)), None)


def get_all_categories() -> list[str]:
    """Return the distinct category labels in ascending order."""

    return sorted({category for _kw, category in CATEGORY_MAPPING})


# Names used by the web client
suggestCategory = suggest_category
getAllCategories = get_all_categories

__all__ = [
    "CATEGORY_MAPPING",
    "iter_keyword_matches",
    "suggest_category",
    "get_all_categories",
    "suggestCategory",
    "getAllCategories",
]
