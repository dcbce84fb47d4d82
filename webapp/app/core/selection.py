"""Default unit pairs per category and membership-checked selector edits."""

from __future__ import annotations

from dataclasses import dataclass, replace

from app.core.catalog import CategoryCatalog


class UnknownCategoryError(KeyError):
    """Raised when a category that is not in the catalog reaches the resolver."""

    def __init__(self, category: str) -> None:
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return f"Unknown category '{self.category}'"


@dataclass(frozen=True)
class UnitSelection:
    category: str
    from_unit: str
    to_unit: str


class UnitSelectionResolver:
    """Derives the default from/to pair for a category.

    The pair is the first and second catalog entries, or the first entry
    twice when the category only has one unit.
    """

    def __init__(self, catalog: CategoryCatalog) -> None:
        self.catalog = catalog

    def resolve(self, category: str) -> UnitSelection:
        if category not in self.catalog:
            raise UnknownCategoryError(category)
        units = self.catalog.units(category)
        return UnitSelection(
            category=category,
            from_unit=units[0],
            to_unit=units[1] if len(units) > 1 else units[0],
        )

    def with_from_unit(self, selection: UnitSelection, unit: str) -> UnitSelection:
        self._require_member(selection.category, unit)
        return replace(selection, from_unit=unit)

    def with_to_unit(self, selection: UnitSelection, unit: str) -> UnitSelection:
        self._require_member(selection.category, unit)
        return replace(selection, to_unit=unit)

    def _require_member(self, category: str, unit: str) -> None:
        units = self.catalog.units(category)
        if unit not in units:
            raise ValueError(
                f"Unit '{unit}' is not valid for {category}. Valid: {', '.join(units)}"
            )
