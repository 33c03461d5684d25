# ledger_api/models/customers.py

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from ledger_api.models.transactions import TransactionOut, clean_notes
from ledger_api.services.formatting import as_utc, format_date, format_inr

NAME_FIELDS = ("first_name", "last_name", "village_name")


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class CustomerCreate(BaseModel):
    page_no: int = Field(..., gt=0)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    village_name: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator(*NAME_FIELDS, mode="before")
    @classmethod
    def strip_names(cls, v):
        return _strip(v)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        return clean_notes(v)


class CustomerUpdate(BaseModel):
    page_no: Optional[int] = Field(default=None, gt=0)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    village_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator(*NAME_FIELDS, mode="before")
    @classmethod
    def strip_names(cls, v):
        return _strip(v)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, v: Optional[str]) -> Optional[str]:
        return clean_notes(v)

    @model_validator(mode="after")
    def required_columns_not_null(self):
        for name in ("page_no",) + NAME_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


class CustomerOut(BaseModel):
    id: str
    page_no: int
    first_name: str
    last_name: str
    village_name: str
    notes: Optional[str] = None
    pending_amount: Decimal
    created_date: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_validator("created_date", "updated_at")
    @classmethod
    def timestamps_to_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    @computed_field
    @property
    def pending_amount_display(self) -> str:
        return format_inr(self.pending_amount, signed=True)

    @computed_field
    @property
    def created_date_display(self) -> str:
        return format_date(self.created_date)


class CustomerPage(BaseModel):
    items: List[CustomerOut]
    total: int
    page: int
    page_size: int
    total_pages: int


class CustomerLedgerOut(BaseModel):
    customer: CustomerOut
    transactions: List[TransactionOut]
    credit_total: Decimal
    debit_total: Decimal
    net_balance: Decimal
    transaction_count: int
