"""Session controller wiring selection, both request lifecycles and history.

One instance backs one user session. It keeps the standard form
(category, value, unit pair) and the currency form (toggle, amount,
currency pair) consistent, refuses submits the form would have disabled,
and records history at the point a standard conversion succeeds.
"""

from __future__ import annotations

import logging

import httpx

from app.core.catalog import CURRENCY, CategoryCatalog
from app.core.history import HistoryEntry, HistoryLedger, on_conversion_success
from app.core.lifecycle import (
    ConversionRequest,
    CurrencyRequest,
    Outcome,
    SubmitRejectedError,
    conversion_lifecycle,
    currency_lifecycle,
)
from app.core.selection import UnitSelection, UnitSelectionResolver, UnknownCategoryError
from app.utils.units import is_numeric

logger = logging.getLogger(__name__)


class ConverterController:
    def __init__(
        self,
        client: httpx.AsyncClient,
        catalog: CategoryCatalog | None = None,
        history_limit: int = 10,
    ) -> None:
        self.catalog = catalog or CategoryCatalog()
        self.resolver = UnitSelectionResolver(self.catalog)

        # Standard form
        self.value = ""
        self.selection: UnitSelection = self.resolver.resolve(self.catalog.unit_categories()[0])
        self.conversion = conversion_lifecycle(client)

        # Currency form
        self.currency_enabled = False
        self.currency_amount = ""
        self.currency_selection: UnitSelection = self.resolver.resolve(CURRENCY)
        self.currency = currency_lifecycle(client)

        self.ledger = HistoryLedger(limit=history_limit)

    # ── Standard form ────────────────────────────────────────────────────────

    @property
    def category(self) -> str:
        return self.selection.category

    def select_category(self, category: str) -> UnitSelection:
        """Switch category and reset both units to the category defaults."""
        if category not in self.catalog.unit_categories():
            raise UnknownCategoryError(category)
        self.selection = self.resolver.resolve(category)
        return self.selection

    def set_value(self, value: str) -> None:
        self.value = value

    def set_from_unit(self, unit: str) -> UnitSelection:
        self.selection = self.resolver.with_from_unit(self.selection, unit)
        return self.selection

    def set_to_unit(self, unit: str) -> UnitSelection:
        self.selection = self.resolver.with_to_unit(self.selection, unit)
        return self.selection

    @property
    def can_convert(self) -> bool:
        return not self.conversion.is_loading and is_numeric(self.value)

    async def convert(self) -> Outcome:
        """Submit the standard form. Raises SubmitRejectedError when disabled."""
        if self.conversion.is_loading:
            raise SubmitRejectedError(self.conversion.name, "a request is already in flight")
        if not is_numeric(self.value):
            raise SubmitRejectedError(self.conversion.name, f"value {self.value!r} is not a number")

        request = ConversionRequest(
            category=self.selection.category,
            value=self.value,
            from_unit=self.selection.from_unit,
            to_unit=self.selection.to_unit,
        )
        outcome = await self.conversion.submit(request)
        on_conversion_success(self.ledger, request, outcome)
        return outcome

    # ── Currency form ────────────────────────────────────────────────────────

    def set_currency_enabled(self, enabled: bool) -> None:
        # The outcome survives toggling; only its visibility changes.
        self.currency_enabled = enabled

    def set_currency_amount(self, amount: str) -> None:
        self.currency_amount = amount

    def set_currency_from(self, code: str) -> UnitSelection:
        self.currency_selection = self.resolver.with_from_unit(self.currency_selection, code)
        return self.currency_selection

    def set_currency_to(self, code: str) -> UnitSelection:
        self.currency_selection = self.resolver.with_to_unit(self.currency_selection, code)
        return self.currency_selection

    @property
    def can_convert_currency(self) -> bool:
        return (
            self.currency_enabled
            and not self.currency.is_loading
            and is_numeric(self.currency_amount)
        )

    async def convert_currency(self) -> Outcome:
        """Submit the currency form. Never touches history."""
        if not self.currency_enabled:
            raise SubmitRejectedError(self.currency.name, "currency conversion is disabled")
        if self.currency.is_loading:
            raise SubmitRejectedError(self.currency.name, "a request is already in flight")
        if not is_numeric(self.currency_amount):
            raise SubmitRejectedError(
                self.currency.name, f"amount {self.currency_amount!r} is not a number"
            )

        request = CurrencyRequest(
            amount=self.currency_amount,
            from_currency=self.currency_selection.from_unit,
            to_currency=self.currency_selection.to_unit,
        )
        return await self.currency.submit(request)

    # ── History ──────────────────────────────────────────────────────────────

    def history(self) -> list[HistoryEntry]:
        return self.ledger.list()
