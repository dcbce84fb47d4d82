"""Converter endpoints — drive the single session controller and return the view."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from app.core.controller import ConverterController
from app.core.lifecycle import SubmitRejectedError
from app.core.selection import UnknownCategoryError
from app.models.schemas import (
    CategoryRequest,
    CurrencyFieldsRequest,
    CurrencyToggleRequest,
    HistoryResponse,
    UnitsRequest,
    ValueRequest,
)
from app.models.view_model import render_history_entry, render_view

router = APIRouter(tags=["converter"])


def get_controller(request: Request) -> ConverterController:
    return request.app.state.controller


def _view(request: Request) -> dict:
    state = request.app.state
    return render_view(state.controller, state.theme, state.title)


@router.get("/catalog")
async def catalog(controller: ConverterController = Depends(get_controller)):
    """Return unit categories with their units, plus the currency codes."""
    cat = controller.catalog
    return {
        "categories": {c: list(cat.units(c)) for c in cat.unit_categories()},
        "currencies": list(cat.currencies()),
    }


@router.get("/view")
async def view(request: Request):
    return _view(request)


@router.post("/category")
async def select_category(
    req: CategoryRequest,
    request: Request,
    controller: ConverterController = Depends(get_controller),
):
    """Switch category; resets the unit pair to the category defaults."""
    try:
        controller.select_category(req.category)
    except UnknownCategoryError as exc:
        raise HTTPException(422, detail=str(exc))
    return _view(request)


@router.post("/units")
async def select_units(
    req: UnitsRequest,
    request: Request,
    controller: ConverterController = Depends(get_controller),
):
    try:
        if req.from_unit is not None:
            controller.set_from_unit(req.from_unit)
        if req.to_unit is not None:
            controller.set_to_unit(req.to_unit)
    except ValueError as exc:
        raise HTTPException(422, detail=str(exc))
    return _view(request)


@router.post("/value")
async def set_value(
    req: ValueRequest,
    request: Request,
    controller: ConverterController = Depends(get_controller),
):
    controller.set_value(req.value)
    return _view(request)


@router.post("/convert")
async def convert(request: Request, controller: ConverterController = Depends(get_controller)):
    """Submit the standard form to the conversion service."""
    try:
        await controller.convert()
    except SubmitRejectedError as exc:
        raise HTTPException(409, detail=str(exc))
    return _view(request)


@router.post("/currency/toggle")
async def toggle_currency(
    req: CurrencyToggleRequest,
    request: Request,
    controller: ConverterController = Depends(get_controller),
):
    controller.set_currency_enabled(req.enabled)
    return _view(request)


@router.post("/currency/fields")
async def set_currency_fields(
    req: CurrencyFieldsRequest,
    request: Request,
    controller: ConverterController = Depends(get_controller),
):
    try:
        if req.amount is not None:
            controller.set_currency_amount(req.amount)
        if req.from_currency is not None:
            controller.set_currency_from(req.from_currency)
        if req.to_currency is not None:
            controller.set_currency_to(req.to_currency)
    except ValueError as exc:
        raise HTTPException(422, detail=str(exc))
    return _view(request)


@router.post("/currency/convert")
async def convert_currency(
    request: Request, controller: ConverterController = Depends(get_controller)
):
    """Submit the currency form to the conversion service."""
    try:
        await controller.convert_currency()
    except SubmitRejectedError as exc:
        raise HTTPException(409, detail=str(exc))
    return _view(request)


@router.get("/history", response_model=HistoryResponse)
async def history(controller: ConverterController = Depends(get_controller)):
    return {"entries": [render_history_entry(e) for e in controller.history()]}
