"""
Delivery REST endpoint logic.

Maps the five REST operations on deliveries onto the repository and assembles
status code, headers and body for each. The endpoint holds no state of its
own: the repository and the endpoint settings are handed in at construction.

Rejected payloads come back as failed Results carrying a BadRequestAlertError;
any other error raised by the repository propagates unchanged.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from starlette.datastructures import URL

from config.app_config import EndpointConfig
from constants import ErrorKeys, HTTPStatus, HeaderNames, ServerConfig
from domain.result import Result
from domain.value_objects import PageRequest
from exceptions import BadRequestAlertError
from repositories.interfaces import IDeliveryRepository
from schemas import Delivery
from utils import header_util
from utils.pagination_util import generate_pagination_http_headers

logger = logging.getLogger(__name__)


@dataclass
class EndpointResponse:
    """Status, headers and body of a handled request; body None means empty."""

    status_code: int
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


EndpointResult = Result[EndpointResponse, BadRequestAlertError]


class DeliveryEndpoint:
    """REST operations for the Delivery resource."""

    resource_path = "deliveries"

    def __init__(self, repository: IDeliveryRepository, config: EndpointConfig):
        self.repository = repository
        self.config = config

    def _alert_args(self, param: str) -> tuple:
        return (self.config.application_name, self.config.enable_translation,
                self.config.entity_name, param)

    def location_of(self, delivery_id: str) -> str:
        return f"{ServerConfig.API_PREFIX}/{self.resource_path}/{delivery_id}"

    def create(self, delivery: Delivery) -> EndpointResult:
        """
        POST /deliveries: store a new delivery.

        Returns:
            201 with Location and creation alert headers, or a failed Result
            ('idexists') when the payload already carries an id
        """
        logger.debug(f"REST request to save Delivery : {delivery!r}")
        if delivery.id is not None:
            return Result.failure(BadRequestAlertError(
                "A new delivery cannot already have an ID",
                self.config.entity_name,
                ErrorKeys.ID_EXISTS,
            ))

        result = self.repository.save(delivery)
        headers = {HeaderNames.LOCATION: self.location_of(result.id)}
        headers.update(header_util.create_entity_creation_alert(*self._alert_args(str(result.id))))
        return Result.success(EndpointResponse(HTTPStatus.CREATED, result, headers))

    def update(self, delivery: Delivery) -> EndpointResult:
        """
        PUT /deliveries: replace an existing delivery.

        Returns:
            200 with update alert headers, or a failed Result ('idnull') when
            the payload has no id
        """
        logger.debug(f"REST request to update Delivery : {delivery!r}")
        if delivery.id is None:
            return Result.failure(BadRequestAlertError(
                "Invalid id",
                self.config.entity_name,
                ErrorKeys.ID_NULL,
            ))

        result = self.repository.save(delivery)
        headers = header_util.create_entity_update_alert(*self._alert_args(str(delivery.id)))
        return Result.success(EndpointResponse(HTTPStatus.OK, result, headers))

    def list(self, page_request: PageRequest, request_url: URL | str) -> EndpointResult:
        """GET /deliveries: one page of deliveries plus pagination headers."""
        logger.debug("REST request to get a page of Deliveries")
        page = self.repository.find_all(page_request)
        headers = generate_pagination_http_headers(request_url, page)
        return Result.success(EndpointResponse(HTTPStatus.OK, list(page.content), headers))

    def get(self, id: str) -> EndpointResult:
        """GET /deliveries/{id}: the delivery, or 404 with an empty body."""
        logger.debug(f"REST request to get Delivery : {id}")
        delivery: Optional[Delivery] = self.repository.find_by_id(id)
        if delivery is None:
            return Result.success(EndpointResponse(HTTPStatus.NOT_FOUND))
        return Result.success(EndpointResponse(HTTPStatus.OK, delivery))

    def delete(self, id: str) -> EndpointResult:
        """DELETE /deliveries/{id}: always 204, whether or not the id existed."""
        logger.debug(f"REST request to delete Delivery : {id}")
        self.repository.delete_by_id(id)
        headers = header_util.create_entity_deletion_alert(*self._alert_args(id))
        return Result.success(EndpointResponse(HTTPStatus.NO_CONTENT, headers=headers))
