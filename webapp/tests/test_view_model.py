"""Tests for rendering controller state into the view document."""

import asyncio

import httpx

from app.config import Settings
from app.core.controller import ConverterController
from app.core.history import HistoryEntry
from app.models.view_model import Theme, render_history_entry, render_view


def _render(controller, theme=Theme()):
    return render_view(controller, theme, "Universal Unit Converter")


class TestTheme:
    def test_defaults(self):
        assert Theme() == Theme("#0077c2", "#43a047", "#e0e0e0")

    def test_from_settings(self):
        theme = Theme.from_settings(Settings(theme_primary="#000000"))
        assert theme.primary == "#000000"
        assert theme.accent == "#43a047"

    def test_passed_into_view(self, service):
        view = _render(ConverterController(service.client()), Theme(primary="#123456"))
        assert view["theme"]["primary"] == "#123456"


class TestStandardPanel:
    def test_idle(self, service):
        panel = _render(ConverterController(service.client()))["converter"]
        assert panel["status"] == "idle"
        assert panel["categories"] == ["Length", "Weight", "Temperature", "Speed"]
        assert panel["units"][0] == {"value": "meter", "label": "Meter"}
        assert panel["submit_enabled"] is False
        assert panel["submit_label"] == "Convert"
        assert panel["result"] is None
        assert panel["error"] is None

    def test_speed_unit_labels(self, service):
        controller = ConverterController(service.client())
        controller.select_category("Speed")
        labels = [u["label"] for u in _render(controller)["converter"]["units"]]
        assert labels == ["Meter Per Second", "Kilometer Per Hour", "Mile Per Hour"]

    def test_success_result_text(self, service):
        service.queue("/convert", httpx.Response(200, json={"result": 3.6}))
        controller = ConverterController(service.client())
        controller.set_value("3600")
        asyncio.run(controller.convert())
        panel = _render(controller)["converter"]
        assert panel["status"] == "success"
        assert panel["result"] == "3.6 kilometer"
        assert panel["result_value"] == 3.6
        assert panel["result_unit"] == "kilometer"
        assert panel["submit_enabled"] is True

    def test_error_message(self, service):
        service.queue("/convert", httpx.Response(400, json={"detail": "bad unit"}))
        controller = ConverterController(service.client())
        controller.set_value("1")
        asyncio.run(controller.convert())
        panel = _render(controller)["converter"]
        assert panel["error"] == "bad unit"
        assert panel["result"] is None


class TestCurrencyPanel:
    def test_hidden_when_disabled(self, service):
        view = _render(ConverterController(service.client()))
        assert view["currency"] == {"enabled": False, "form": None}

    def test_outcome_hidden_then_shown_again(self, service):
        service.queue("/convert-currency", httpx.Response(200, json={"result": 9.2}))
        controller = ConverterController(service.client())
        controller.set_currency_enabled(True)
        controller.set_currency_amount("10")
        asyncio.run(controller.convert_currency())

        controller.set_currency_enabled(False)
        assert _render(controller)["currency"]["form"] is None

        controller.set_currency_enabled(True)
        form = _render(controller)["currency"]["form"]
        assert form["result"] == "9.2 EUR"
        assert form["submit_label"] == "Convert Currency"
        assert form["currencies"][0] == {"value": "USD", "label": "USD"}


class TestHistoryRendering:
    def test_entry_text(self):
        entry = HistoryEntry("Speed", "10", "meter_per_second", "kilometer_per_hour", 36.0, 1)
        data = render_history_entry(entry)
        assert data["text"] == "10 Meter Per Second → 36 (Kilometer Per Hour)"
        assert data["result"] == 36.0
        assert data["timestamp"] == 1
