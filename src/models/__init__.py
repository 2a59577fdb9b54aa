"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request variants: one typed model per recognized /bfhl key
- Response models: the shared success/failure envelope
"""
from src.models.bfhl import (
    AIRequest,
    BFHLRequest,
    BFHLResponse,
    FibonacciRequest,
    HCFRequest,
    HealthResponse,
    LCMRequest,
    PrimeRequest,
    RECOGNIZED_KEYS,
    parse_bfhl_request,
)

__all__ = [
    "AIRequest",
    "BFHLRequest",
    "BFHLResponse",
    "FibonacciRequest",
    "HCFRequest",
    "HealthResponse",
    "LCMRequest",
    "PrimeRequest",
    "RECOGNIZED_KEYS",
    "parse_bfhl_request",
]
