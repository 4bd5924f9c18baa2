from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.reports import get_monthly_summary
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.gateways.local_store import LocalStore
from src.infrastructure.gateways.remote_gateway import SQLAlchemyDeliveryGateway
from src.interfaces.http.deps import get_auth_context, get_local_store, get_remote_gateway
from src.interfaces.http.schemas.reports import (
    BillingPeriodResponse,
    DeliverySummaryResponse,
    MonthlySummaryResponse,
)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/billing-period", response_model=BillingPeriodResponse)
async def billing_period(
    month: int | None = Query(None),
    year: int | None = Query(None),
    _: AuthContext = Depends(get_auth_context),
) -> BillingPeriodResponse:
    period = get_monthly_summary.resolve_period(month, year)
    return BillingPeriodResponse.model_validate(period)


@router.get("/monthly-summary", response_model=MonthlySummaryResponse)
async def monthly_summary(
    month: int | None = Query(None),
    year: int | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    remote: SQLAlchemyDeliveryGateway = Depends(get_remote_gateway),
    local: LocalStore = Depends(get_local_store),
) -> MonthlySummaryResponse:
    result = await get_monthly_summary.execute(
        remote=remote,
        local=local,
        role=context.role,
        month=month,
        year=year,
    )
    return MonthlySummaryResponse(
        period=BillingPeriodResponse.model_validate(result.period),
        source=result.source,
        summaries=[DeliverySummaryResponse.model_validate(s) for s in result.summaries],
    )
