"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from epf_projection.config import AppSettings
from epf_projection.core.ping import get_ping_response
from epf_projection.core.projection import (
    DEFAULT_INPUT,
    RESET_VALUES,
    effective_years,
    project,
)
from epf_projection.schemas.projection import (
    DefaultsResponse,
    ProjectionInput,
    ProjectionResponse,
    ResetValues,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> AppSettings:
    return current_app.extensions["epf_settings"]


def _run_projection(inp: ProjectionInput) -> ProjectionResponse:
    settings = _settings()
    years = effective_years(inp, settings.max_years)
    if years < inp.years:
        logger.warning("horizon of %d years clamped to %d", inp.years, years)
    logger.debug(
        "projecting %d years (yield=%s%%, withdrawal=%s%%, inflation=%s)",
        years,
        inp.annualYieldPercent,
        inp.annualWithdrawalPercent,
        inp.inflationAdjusted,
    )

    records, summary = project(inp, max_years=settings.max_years)
    return ProjectionResponse(input=inp, records=records, summary=summary)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(get_ping_response(_settings()).model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Year-by-year table plus summary for the posted parameters."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    inp = ProjectionInput.model_validate(raw_payload)
    return jsonify(_run_projection(inp).model_dump())


@api_bp.get("/projection")
def projection_from_query() -> Any:
    """Same as the POST form, parameters taken from the query string."""
    inp = ProjectionInput.model_validate(request.args.to_dict())
    return jsonify(_run_projection(inp).model_dump())


@api_bp.get("/projection/defaults")
def projection_defaults() -> Any:
    """Values the calculator starts with and the ones its reset restores."""
    response = DefaultsResponse(defaults=DEFAULT_INPUT, reset=ResetValues(**RESET_VALUES))
    return jsonify(response.model_dump())
