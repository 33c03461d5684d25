# ledger_api/models/transactions.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from ledger_api.services.formatting import as_utc, format_datetime, format_inr


def clean_notes(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    return v or None


class TransactionCreate(BaseModel):
    amount: Decimal = Field(..., max_digits=15, decimal_places=2)
    event_date: datetime
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        return clean_notes(v)

    @field_validator("event_date")
    @classmethod
    def event_date_to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class TransactionUpdate(BaseModel):
    """Partial update; only fields present in the request body are written."""

    amount: Optional[Decimal] = Field(default=None, max_digits=15, decimal_places=2)
    event_date: Optional[datetime] = None
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        return clean_notes(v)

    @field_validator("event_date")
    @classmethod
    def event_date_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    @model_validator(mode="after")
    def required_columns_not_null(self):
        for name in ("amount", "event_date"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class TransactionOut(BaseModel):
    id: str
    customer_id: str
    amount: Decimal
    notes: Optional[str] = None
    event_date: datetime
    created_date: datetime

    class Config:
        from_attributes = True

    @field_validator("event_date", "created_date")
    @classmethod
    def timestamps_to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @computed_field
    @property
    def amount_display(self) -> str:
        return format_inr(self.amount, signed=True)

    @computed_field
    @property
    def event_date_display(self) -> str:
        return format_datetime(self.event_date)


class TransactionList(BaseModel):
    items: List[TransactionOut]
    total: int
