from __future__ import annotations

from datetime import date as DtDate
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.value_objects.data_source import DataSource


class BillingPeriodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    month: int
    year: int
    start_date: DtDate
    end_date: DtDate


class TypeTallyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    type_id: UUID
    type_name: str
    quantity: int
    value: Decimal


class DeliverySummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    deliverer_id: UUID
    deliverer_name: str
    total_deliveries: int
    deliveries_by_type: list[TypeTallyResponse]
    total_extras: int
    extra_values: Decimal


class MonthlySummaryResponse(BaseModel):
    period: BillingPeriodResponse
    source: DataSource
    summaries: list[DeliverySummaryResponse]
