"""Render controller state into the JSON document the page is drawn from."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from app.config import Settings
from app.core.controller import ConverterController
from app.core.history import HistoryEntry
from app.core.lifecycle import Outcome
from app.utils.units import format_number, format_result, format_unit


@dataclass(frozen=True)
class Theme:
    primary: str = "#0077c2"
    accent: str = "#43a047"
    secondary: str = "#e0e0e0"

    @classmethod
    def from_settings(cls, settings: Settings) -> Theme:
        return cls(
            primary=settings.theme_primary,
            accent=settings.theme_accent,
            secondary=settings.theme_secondary,
        )


def _options(units, label=format_unit) -> list[dict]:
    return [{"value": u, "label": label(u)} for u in units]


def _outcome_fields(outcome: Outcome, idle_label: str) -> dict:
    return {
        "status": outcome.status.name.lower(),
        "submit_label": "Converting..." if outcome.is_loading else idle_label,
        "error": outcome.message if outcome.is_error else None,
        "result": format_result(outcome.result, outcome.unit) if outcome.is_success else None,
        "result_value": outcome.result if outcome.is_success else None,
        "result_unit": outcome.unit if outcome.is_success else None,
    }


def render_history_entry(entry: HistoryEntry) -> dict:
    data = asdict(entry)
    data["text"] = (
        f"{entry.value} {format_unit(entry.from_unit)} → "
        f"{format_number(entry.result)} ({format_unit(entry.to_unit)})"
    )
    return data


def render_standard(controller: ConverterController) -> dict:
    selection = controller.selection
    panel = {
        "categories": controller.catalog.unit_categories(),
        "category": selection.category,
        "value": controller.value,
        "units": _options(controller.catalog.units(selection.category)),
        "from_unit": selection.from_unit,
        "to_unit": selection.to_unit,
        "submit_enabled": controller.can_convert,
    }
    panel.update(_outcome_fields(controller.conversion.outcome, "Convert"))
    return panel


def render_currency(controller: ConverterController) -> dict:
    if not controller.currency_enabled:
        # Prior outcome is kept on the controller, just not drawn.
        return {"enabled": False, "form": None}
    selection = controller.currency_selection
    form = {
        "amount": controller.currency_amount,
        "currencies": _options(controller.catalog.currencies(), label=str),
        "from_currency": selection.from_unit,
        "to_currency": selection.to_unit,
        "submit_enabled": controller.can_convert_currency,
    }
    form.update(_outcome_fields(controller.currency.outcome, "Convert Currency"))
    return {"enabled": True, "form": form}


def render_view(controller: ConverterController, theme: Theme, title: str) -> dict:
    return {
        "title": title,
        "theme": asdict(theme),
        "converter": render_standard(controller),
        "currency": render_currency(controller),
        "history": [render_history_entry(e) for e in controller.history()],
    }
