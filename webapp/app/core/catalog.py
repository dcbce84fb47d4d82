"""Static category → unit catalog shared by both conversion workflows."""

from __future__ import annotations

from typing import Mapping

CURRENCY = "Currency"

DEFAULT_CATALOG: dict[str, tuple[str, ...]] = {
    "Length": ("meter", "kilometer", "mile", "inch", "foot"),
    "Weight": ("gram", "kilogram", "pound", "ounce"),
    "Temperature": ("celsius", "fahrenheit", "kelvin"),
    "Speed": ("meter_per_second", "kilometer_per_hour", "mile_per_hour"),
    CURRENCY: ("USD", "EUR", "GBP", "JPY", "INR"),
}


class CatalogError(ValueError):
    """Raised when a catalog mapping breaks the non-empty / has-currency rules."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid category catalog: {reason}")


class CategoryCatalog:
    """Read-only mapping of category name to its ordered unit identifiers.

    The distinguished ``Currency`` entry lists currency codes and is only
    used by the currency workflow; every other entry is a unit category.
    """

    def __init__(self, mapping: Mapping[str, tuple[str, ...] | list[str]] = DEFAULT_CATALOG) -> None:
        entries: dict[str, tuple[str, ...]] = {}
        for category, units in mapping.items():
            units = tuple(units)
            if not units:
                raise CatalogError(f"category '{category}' has no units")
            entries[category] = units
        if CURRENCY not in entries:
            raise CatalogError(f"missing the '{CURRENCY}' entry")
        if len(entries) == 1:
            raise CatalogError("at least one unit category is required")
        self._entries = entries

    def __contains__(self, category: object) -> bool:
        return category in self._entries

    def __iter__(self):
        return iter(self._entries)

    def units(self, category: str) -> tuple[str, ...]:
        """Return the ordered units for category. Raises KeyError if unknown."""
        return self._entries[category]

    def unit_categories(self) -> list[str]:
        """Categories offered by the standard converter, in catalog order."""
        return [c for c in self._entries if c != CURRENCY]

    def currencies(self) -> tuple[str, ...]:
        return self._entries[CURRENCY]

    def to_dict(self) -> dict[str, list[str]]:
        return {category: list(units) for category, units in self._entries.items()}
