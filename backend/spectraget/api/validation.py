"""Validation API — check payloads against ad-hoc or named schemas."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse

import structlog

from spectraget.models.requests import ValidateRequest
from spectraget.models.responses import FailureResponse, SchemaListResponse, ValidResponse
from spectraget.schemas import SchemaNotFoundError, get_all_schemas, load_schema
from spectraget.validators import ValidationOutcome, validation_engine

logger = structlog.get_logger()

router = APIRouter()

_FAILURE_RESPONSES = {400: {"model": FailureResponse, "description": "Payload violates the schema"}}


def _outcome_response(outcome: ValidationOutcome):
    """Map a validation outcome to the HTTP response body."""
    if outcome is None:
        return ValidResponse()
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_response())


@router.post("/validate", response_model=ValidResponse, responses=_FAILURE_RESPONSES)
async def validate_payload(request: ValidateRequest):
    """Validate a payload against the schema sent with it."""
    return _outcome_response(validation_engine.validate(request.parameters, request.payload))


@router.get("/schemas", response_model=SchemaListResponse)
async def list_schemas():
    """List the named schemas loaded from the schemas directory."""
    return SchemaListResponse(schemas=get_all_schemas())


@router.post("/schemas/{schema_name}/validate", response_model=ValidResponse, responses=_FAILURE_RESPONSES)
async def validate_against_schema(schema_name: str, payload: dict[str, Any] = Body(...)):
    """Validate a payload against a named schema."""
    try:
        schema = load_schema(schema_name)
    except SchemaNotFoundError as e:
        logger.info("schema_not_found", schema=schema_name)
        raise HTTPException(status_code=404, detail=str(e))

    return _outcome_response(validation_engine.validate(schema, payload))
