from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response
from typing import List, Optional
from dependencies import get_delivery_endpoint
from domain.value_objects import PageRequest
from services.delivery_endpoint import DeliveryEndpoint
from utils.error_handlers import handle_api_errors
from utils.response_util import to_response
from constants import PaginationDefaults
from schemas import Delivery, BadRequestProblem

router = APIRouter()

_bad_request = {400: {"model": BadRequestProblem, "description": "Payload violates the id rule"}}


@router.post("/deliveries", status_code=201, response_model=Delivery, responses=_bad_request)
@handle_api_errors("Create delivery")
def create_delivery(delivery: Delivery, endpoint: DeliveryEndpoint = Depends(get_delivery_endpoint)) -> Response:
    """
    Create a new delivery.

    Returns 201 with the stored delivery and its Location, or 400 ('idexists')
    if the payload already has an id.
    """
    return to_response(endpoint.create(delivery), endpoint.config)


@router.put("/deliveries", response_model=Delivery, responses=_bad_request)
@handle_api_errors("Update delivery")
def update_delivery(delivery: Delivery, endpoint: DeliveryEndpoint = Depends(get_delivery_endpoint)) -> Response:
    """
    Replace an existing delivery.

    Returns 200 with the stored delivery, or 400 ('idnull') if the payload
    has no id.
    """
    return to_response(endpoint.update(delivery), endpoint.config)


@router.get("/deliveries", response_model=List[Delivery])
@handle_api_errors("List deliveries")
def list_deliveries(
    request: Request,
    page: int = Query(PaginationDefaults.PAGE, ge=0, description="0-based page index"),
    size: int = Query(PaginationDefaults.SIZE, ge=1, le=PaginationDefaults.MAX_SIZE),
    sort: Optional[List[str]] = Query(None, description="property[,asc|desc]; repeatable"),
    endpoint: DeliveryEndpoint = Depends(get_delivery_endpoint),
) -> Response:
    """Paginated delivery list with X-Total-Count and Link headers."""
    page_request = PageRequest.of(page, size, sort)
    return to_response(endpoint.list(page_request, request.url), endpoint.config)


@router.get("/deliveries/{id}", response_model=Delivery, responses={404: {"description": "No delivery with this id"}})
@handle_api_errors("Get delivery")
def get_delivery(id: str, endpoint: DeliveryEndpoint = Depends(get_delivery_endpoint)) -> Response:
    """Get a delivery by id; 404 with an empty body if it does not exist."""
    return to_response(endpoint.get(id), endpoint.config)


@router.delete("/deliveries/{id}", status_code=204)
@handle_api_errors("Delete delivery")
def delete_delivery(id: str, endpoint: DeliveryEndpoint = Depends(get_delivery_endpoint)) -> Response:
    """Delete a delivery by id. Always 204, whether or not it existed."""
    return to_response(endpoint.delete(id), endpoint.config)
