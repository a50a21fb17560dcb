"""
Converts endpoint Results into HTTP responses.
"""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from config.app_config import EndpointConfig
from constants import HTTPStatus, PROBLEM_TYPE_BAD_REQUEST
from domain.result import Result
from exceptions import BadRequestAlertError
from schemas import BadRequestProblem
from utils import header_util


def bad_request_response(error: BadRequestAlertError, config: EndpointConfig) -> JSONResponse:
    """400 problem body plus failure alert headers for a rejected payload."""
    problem = BadRequestProblem(
        type=PROBLEM_TYPE_BAD_REQUEST,
        title=error.message,
        status=HTTPStatus.BAD_REQUEST,
        message=f"error.{error.error_key}",
        entity_name=error.entity_name,
        error_key=error.error_key,
        params=error.entity_name,
    )
    headers = header_util.create_failure_alert(
        config.application_name,
        config.enable_translation,
        error.entity_name,
        error.error_key,
        error.message,
    )
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=problem.model_dump(by_alias=True),
        headers=headers,
        media_type="application/problem+json",
    )


def to_response(result: Result, config: EndpointConfig) -> Response:
    """
    Build the HTTP response for an endpoint Result.

    Successful results with no body (204, 404) produce an empty response.
    """
    if result.is_failure:
        return bad_request_response(result.error, config)

    endpoint_response = result.value
    if endpoint_response.body is None:
        return Response(status_code=endpoint_response.status_code, headers=endpoint_response.headers)
    return JSONResponse(
        status_code=endpoint_response.status_code,
        content=jsonable_encoder(endpoint_response.body),
        headers=endpoint_response.headers,
    )
