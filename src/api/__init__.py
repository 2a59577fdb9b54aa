"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request body decoding
- Response formatting
- Error handling
- Route definitions
"""
from src.api.main import app

__all__ = ["app"]
