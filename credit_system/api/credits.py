"""Credit endpoints."""

import uuid
from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from credit_system.api.dependencies import get_credit_service, get_policy, get_today
from credit_system.config import CreditPolicyConfig
from credit_system.dto import CreditDto, CreditView, CreditViewList
from credit_system.serialization import serialize_value
from credit_system.services import CreditService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def save_credit(
    payload: dict[str, Any] = Body(),
    service: CreditService = Depends(get_credit_service),
    today: date = Depends(get_today),
    policy: CreditPolicyConfig = Depends(get_policy),
):
    dto = CreditDto.parse(payload, today=today, policy=policy)
    credit = service.save(dto.to_entity())
    return JSONResponse(CreditView.from_entity(credit).to_dict(), status_code=status.HTTP_201_CREATED)


@router.get("")
def find_all_by_customer_id(
    customer_id: int = Query(alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    credits = service.find_all_by_customer(customer_id)
    return JSONResponse([CreditViewList.from_entity(c).to_dict() for c in credits])


@router.get("/{credit_code}")
def find_by_credit_code(
    credit_code: uuid.UUID,
    customer_id: int = Query(alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    credit = service.find_by_credit_code(customer_id, credit_code)
    return JSONResponse(CreditView.from_entity(credit).to_dict())


@router.get("/{credit_code}/installments")
def installment_schedule(
    credit_code: uuid.UUID,
    customer_id: int = Query(alias="customerId"),
    service: CreditService = Depends(get_credit_service),
):
    due_dates = service.installment_schedule(customer_id, credit_code)
    return JSONResponse(serialize_value(due_dates))
