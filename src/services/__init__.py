"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- numeric.py       : pure arithmetic behind each operation
- bfhl_service.py  : request dispatch between arithmetic and the LLM
"""
from src.services.bfhl_service import BFHLService, get_bfhl_service, reset_bfhl_service

__all__ = [
    "BFHLService",
    "get_bfhl_service",
    "reset_bfhl_service",
]
