"""Customer endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from credit_system.api.dependencies import get_customer_service
from credit_system.dto import CustomerDto, CustomerUpdateDto, CustomerView
from credit_system.services import CustomerService

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
def save_customer(
    payload: dict[str, Any] = Body(),
    service: CustomerService = Depends(get_customer_service),
):
    dto = CustomerDto.parse(payload)
    saved = service.save(dto.to_entity())
    return PlainTextResponse(f"Customer {saved.email} saved!", status_code=status.HTTP_201_CREATED)


@router.get("/{customer_id}")
def find_by_id(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    customer = service.find_by_id(customer_id)
    return JSONResponse(CustomerView.from_entity(customer).to_dict())


@router.patch("")
def update_customer(
    payload: dict[str, Any] = Body(),
    customer_id: int = Query(alias="customerId"),
    service: CustomerService = Depends(get_customer_service),
):
    dto = CustomerUpdateDto.parse(payload)
    customer = service.find_by_id(customer_id)
    updated = service.update(dto.to_entity(customer))
    return JSONResponse(CustomerView.from_entity(updated).to_dict())


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    service.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
