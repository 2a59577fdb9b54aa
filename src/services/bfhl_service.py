"""
BFHL Service - Dispatch for the /bfhl endpoint.

This service:
1. Decodes the request body into one typed variant
2. Runs the matching numeric operation, or asks Gemini
3. Returns the bare result; the route wraps it in the envelope

Routes stay thin and the service can be exercised without HTTP.
"""
from typing import Any, Optional

from src.core.config import get_settings
from src.core.logging_config import LoggerMixin
from src.llm.client import GeminiClient
from src.models.bfhl import (
    AIRequest,
    BFHLRequest,
    FibonacciRequest,
    HCFRequest,
    LCMRequest,
    PrimeRequest,
    parse_bfhl_request,
)
from src.services import numeric


class BFHLService(LoggerMixin):
    """
    Stateless dispatcher for arithmetic and AI requests.

    Example:
        >>> service = BFHLService(GeminiClient(get_settings()))
        >>> await service.handle({"fibonacci": 5})
        [0, 1, 1, 2, 3]
    """

    def __init__(self, ai_client: GeminiClient):
        self.ai_client = ai_client

    async def handle(self, body: Any) -> Any:
        """
        Decode a request body and compute its result.

        Raises:
            BFHLException subclasses for input and upstream failures
        """
        request = parse_bfhl_request(body)
        return await self.execute(request)

    async def execute(self, request: BFHLRequest) -> Any:
        """Run the operation for an already-decoded request."""
        if isinstance(request, FibonacciRequest):
            self.logger.info(f"Dispatching fibonacci n={request.fibonacci}")
            return numeric.fibonacci_series(request.fibonacci)

        if isinstance(request, PrimeRequest):
            self.logger.info(f"Dispatching prime over {len(request.prime)} values")
            return numeric.filter_primes(request.prime)

        if isinstance(request, LCMRequest):
            self.logger.info(f"Dispatching lcm over {len(request.lcm)} values")
            return numeric.compute_lcm(request.lcm)

        if isinstance(request, HCFRequest):
            self.logger.info(f"Dispatching hcf over {len(request.hcf)} values")
            return numeric.compute_hcf(request.hcf)

        if isinstance(request, AIRequest):
            self.logger.info("Dispatching AI question to Gemini")
            return await self.ai_client.ask(request.AI)

        raise TypeError(f"Unsupported request type: {type(request).__name__}")


_bfhl_service: Optional[BFHLService] = None


def get_bfhl_service() -> BFHLService:
    """Get or create the BFHL service singleton."""
    global _bfhl_service
    if _bfhl_service is None:
        _bfhl_service = BFHLService(GeminiClient(get_settings()))
    return _bfhl_service


def reset_bfhl_service() -> None:
    """Reset the BFHL service singleton (useful for testing)."""
    global _bfhl_service
    _bfhl_service = None
