"""Pydantic schemas for API request validation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator


class CategoryRequest(BaseModel):
    category: str


class UnitsRequest(BaseModel):
    from_unit: Optional[str] = None
    to_unit: Optional[str] = None


class ValueRequest(BaseModel):
    # Raw field text; numeric checks happen when the form is submitted.
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def number_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class CurrencyToggleRequest(BaseModel):
    enabled: bool


class CurrencyFieldsRequest(BaseModel):
    amount: Optional[str] = None
    from_currency: Optional[str] = None
    to_currency: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def number_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class HistoryEntryResponse(BaseModel):
    category: str
    value: str
    from_unit: str
    to_unit: str
    result: float
    timestamp: int
    text: str


class HistoryResponse(BaseModel):
    entries: list[HistoryEntryResponse]
