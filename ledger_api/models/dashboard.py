# ledger_api/models/dashboard.py

from decimal import Decimal

from pydantic import BaseModel, computed_field

from ledger_api.services.formatting import format_inr


class DashboardMetricsOut(BaseModel):
    """
    Last week / last month amounts are signed net sums; credit and debit
    amounts are all-time magnitudes and never negative.
    """

    last_week_amount: Decimal
    last_month_amount: Decimal
    total_customers: int
    active_customers: int
    credit_amount: Decimal
    debit_amount: Decimal

    class Config:
        from_attributes = True

    @computed_field
    @property
    def last_week_amount_display(self) -> str:
        return format_inr(self.last_week_amount, signed=True)

    @computed_field
    @property
    def last_month_amount_display(self) -> str:
        return format_inr(self.last_month_amount, signed=True)

    @computed_field
    @property
    def credit_amount_display(self) -> str:
        return format_inr(self.credit_amount)

    @computed_field
    @property
    def debit_amount_display(self) -> str:
        return format_inr(self.debit_amount)
