from __future__ import annotations

from datetime import date as DtDate

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.deliveries import list_my_entries, submit_entry
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.gateways.local_store import LocalStore
from src.infrastructure.gateways.remote_gateway import SQLAlchemyDeliveryGateway
from src.interfaces.http.deps import get_auth_context, get_local_store, get_remote_gateway
from src.interfaces.http.schemas.delivery_entries import (
    DeliveryEntryCreate,
    DeliveryEntryResponse,
    DeliveryHistoryResponse,
)

router = APIRouter(prefix="/delivery-entries", tags=["delivery-entries"])


@router.post("/", response_model=DeliveryEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: DeliveryEntryCreate,
    context: AuthContext = Depends(get_auth_context),
    remote: SQLAlchemyDeliveryGateway = Depends(get_remote_gateway),
    local: LocalStore = Depends(get_local_store),
):
    created = await submit_entry.execute(
        gateway=remote,
        local=local,
        role=context.role,
        deliverer_id=context.user_id,
        payload=submit_entry.SubmitEntryInput(
            date=payload.date,
            items=[
                submit_entry.DraftItem(type_id=i.type_id, quantity=i.quantity, value=i.value)
                for i in payload.items
            ],
        ),
    )
    return DeliveryEntryResponse.model_validate(created)


@router.get("/mine", response_model=DeliveryHistoryResponse)
async def list_mine(
    date_from: DtDate | None = Query(None),
    date_to: DtDate | None = Query(None),
    context: AuthContext = Depends(get_auth_context),
    remote: SQLAlchemyDeliveryGateway = Depends(get_remote_gateway),
    local: LocalStore = Depends(get_local_store),
):
    result = await list_my_entries.execute(
        remote=remote,
        local=local,
        role=context.role,
        deliverer_id=context.user_id,
        date_from=date_from,
        date_to=date_to,
    )
    return DeliveryHistoryResponse(
        date_from=result.date_from,
        date_to=result.date_to,
        source=result.source,
        entries=[DeliveryEntryResponse.model_validate(e) for e in result.entries],
    )
