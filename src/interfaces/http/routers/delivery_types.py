from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from src.application.errors import FetchFailure, PermissionDenied
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.gateways.local_store import LocalStore
from src.infrastructure.gateways.remote_gateway import SQLAlchemyDeliveryGateway
from src.interfaces.http.deps import get_auth_context, get_local_store, get_remote_gateway
from src.interfaces.http.schemas.delivery_types import DelivererResponse, DeliveryTypeResponse

router = APIRouter(tags=["reference-data"])
logger = logging.getLogger(__name__)


@router.get("/delivery-types", response_model=list[DeliveryTypeResponse])
async def list_delivery_types(
    _: AuthContext = Depends(get_auth_context),
    remote: SQLAlchemyDeliveryGateway = Depends(get_remote_gateway),
    local: LocalStore = Depends(get_local_store),
):
    try:
        types = await remote.fetch_delivery_types()
    except FetchFailure:
        logger.warning("Serving delivery types from local store")
        try:
            types = await local.fetch_delivery_types()
        except FetchFailure:
            logger.error("No source available for delivery types, returning none")
            types = []
    return [DeliveryTypeResponse.model_validate(t) for t in types]


@router.get("/deliverers", response_model=list[DelivererResponse])
async def list_deliverers(
    context: AuthContext = Depends(get_auth_context),
    remote: SQLAlchemyDeliveryGateway = Depends(get_remote_gateway),
    local: LocalStore = Depends(get_local_store),
):
    if not context.role.can_view_reports():
        raise PermissionDenied("Role not allowed to list deliverers")
    try:
        deliverers = await remote.fetch_deliverers()
    except FetchFailure:
        logger.warning("Serving deliverers from local store")
        try:
            deliverers = await local.fetch_deliverers()
        except FetchFailure:
            logger.error("No source available for deliverers, returning none")
            deliverers = []
    return [DelivererResponse.model_validate(d) for d in deliverers]
