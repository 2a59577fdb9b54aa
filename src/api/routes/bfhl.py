"""
BFHL Routes - The arithmetic / AI dispatch endpoint.

POST /bfhl takes a JSON object with one recognized key:

- fibonacci : integer         -> first n Fibonacci numbers
- prime     : integer array   -> the primes among them
- lcm       : integer array   -> least common multiple
- hcf       : integer array   -> highest common factor
- AI        : string          -> one-word answer from Gemini

If several keys are present the first one in that order wins.
The body is read raw rather than through a pydantic model so that
decoding errors produce this service's own messages and statuses.
"""
import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.exceptions import InvalidJSONError
from src.core.logging_config import get_logger
from src.models.bfhl import BFHLResponse
from src.services.bfhl_service import BFHLService, get_bfhl_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/bfhl",
    tags=["BFHL"],
    responses={
        400: {"description": "Empty body, invalid JSON or no recognized key"},
        422: {"description": "Operand has the wrong type or shape"},
        500: {"description": "Gemini failure or unexpected error"},
    },
)


async def read_json_body(request: Request) -> Any:
    """
    Read and decode the request body.

    Returns None for an empty body.

    Raises:
        InvalidJSONError: Body is present but not JSON
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning(f"Rejected non-JSON body ({len(raw)} bytes)")
        raise InvalidJSONError()


@router.post(
    "",
    summary="Run an arithmetic operation or ask the AI",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {"type": "object"},
                    "examples": {
                        "fibonacci": {"value": {"fibonacci": 7}},
                        "prime": {"value": {"prime": [2, 4, 7, 9, 11]}},
                        "lcm": {"value": {"lcm": [12, 18, 24]}},
                        "hcf": {"value": {"hcf": [24, 36, 60]}},
                        "AI": {"value": {"AI": "What is the capital city of Maharashtra?"}},
                    },
                }
            },
        }
    },
)
async def bfhl(
    request: Request,
    service: BFHLService = Depends(get_bfhl_service),
) -> JSONResponse:
    """Dispatch the body to the matching operation and wrap the result."""
    body = await read_json_body(request)
    data = await service.handle(body)

    envelope = BFHLResponse.success(get_settings().official_email, data)
    return JSONResponse(status_code=200, content=envelope.to_content())
