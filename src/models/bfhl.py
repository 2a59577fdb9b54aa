"""
Request and Response models for the /bfhl API.

The request body is an untyped JSON object. It is decoded into exactly
one of five typed variants by trying the recognized keys in a fixed
priority order; the first key present decides the variant, and a
present-but-malformed operand is rejected rather than skipped.
"""
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from src.core.exceptions import EmptyBodyError, InvalidKeyError, OperandValidationError
from src.core.validators import coerce_json_integer


# An integer as JSON sees it: 5 and 5.0 pass, 5.5, "5" and true do not
JsonInt = Annotated[int, BeforeValidator(coerce_json_integer)]


class _OperandModel(BaseModel):
    """Base for request variants; unrelated keys in the body are ignored."""
    model_config = ConfigDict(extra="ignore")


class FibonacciRequest(_OperandModel):
    """Return the first `fibonacci` terms of the Fibonacci sequence."""
    fibonacci: JsonInt = Field(..., examples=[10])


class PrimeRequest(_OperandModel):
    """Return the prime elements of `prime`, in order."""
    prime: List[JsonInt] = Field(..., examples=[[1, 2, 3, 4, 5, 10, 11]])


class LCMRequest(_OperandModel):
    """Return the least common multiple of `lcm`."""
    lcm: List[JsonInt] = Field(..., examples=[[4, 6]])


class HCFRequest(_OperandModel):
    """Return the highest common factor of `hcf`."""
    hcf: List[JsonInt] = Field(..., examples=[[12, 18, 24]])


class AIRequest(_OperandModel):
    """Ask Gemini a question and return a single-word answer."""
    AI: StrictStr = Field(..., examples=["What is the capital of France?"])


BFHLRequest = Union[FibonacciRequest, PrimeRequest, LCMRequest, HCFRequest, AIRequest]


# Priority order matters: the first key present wins.
REQUEST_VARIANTS = (
    ("fibonacci", FibonacciRequest, "Fibonacci input must be an integer"),
    ("prime", PrimeRequest, "Prime input must be an integer array"),
    ("lcm", LCMRequest, "LCM input must be an integer array"),
    ("hcf", HCFRequest, "HCF input must be an integer array"),
    ("AI", AIRequest, "AI input must be a string"),
)

RECOGNIZED_KEYS = tuple(key for key, _, _ in REQUEST_VARIANTS)


def parse_bfhl_request(body: Any) -> BFHLRequest:
    """
    Decode a JSON body into a typed request variant.

    Args:
        body: Decoded JSON (normally a dict), or None for an empty body

    Returns:
        The variant for the first recognized key present in the body

    Raises:
        EmptyBodyError: Body missing or with no keys
        OperandValidationError: First recognized key has a malformed operand
        InvalidKeyError: No recognized key present
    """
    if body is None or (isinstance(body, (dict, list)) and len(body) == 0):
        raise EmptyBodyError()

    if not isinstance(body, dict):
        raise InvalidKeyError(RECOGNIZED_KEYS)

    for key, model, message in REQUEST_VARIANTS:
        # An explicit null still counts as present
        if key not in body:
            continue
        try:
            return model.model_validate({key: body[key]})
        except PydanticValidationError:
            raise OperandValidationError(message, field=key)

    raise InvalidKeyError(RECOGNIZED_KEYS)


class BFHLResponse(BaseModel):
    """
    Response envelope shared by every endpoint.

    Exactly one of data / error is set; is_success tells which.
    data can legitimately be [], 0 or "", so to_content() picks the
    field by is_success rather than dropping falsy values.
    """
    is_success: bool
    official_email: str
    data: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, official_email: str, data: Any) -> "BFHLResponse":
        return cls(is_success=True, official_email=official_email, data=data)

    @classmethod
    def failure(cls, official_email: str, error: str) -> "BFHLResponse":
        return cls(is_success=False, official_email=official_email, error=error)

    def to_content(self) -> dict:
        """Render the envelope, dropping whichever of data/error is unused."""
        content = {"is_success": self.is_success, "official_email": self.official_email}
        if self.is_success:
            content["data"] = self.data
        else:
            content["error"] = self.error
        return content


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    is_success: bool = Field(default=True)
    official_email: str
