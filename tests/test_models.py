"""
Tests for operand validators and request decoding.
"""
import math

import pytest

from src.core.exceptions import EmptyBodyError, InvalidKeyError, OperandValidationError
from src.core.validators import coerce_json_integer, is_json_integer
from src.models.bfhl import (
    AIRequest,
    BFHLResponse,
    FibonacciRequest,
    HCFRequest,
    LCMRequest,
    PrimeRequest,
    parse_bfhl_request,
)


class TestValidators:

    @pytest.mark.parametrize("value", [0, -3, 10**30, 5.0, -2.0])
    def test_integers(self, value):
        assert is_json_integer(value)

    @pytest.mark.parametrize("value", [5.5, True, False, None, "5", [5], math.nan, math.inf])
    def test_non_integers(self, value):
        assert not is_json_integer(value)

    def test_coerce_returns_int(self):
        assert coerce_json_integer(7.0) == 7
        assert type(coerce_json_integer(7.0)) is int
        with pytest.raises(ValueError):
            coerce_json_integer(7.5)


class TestParseRequest:

    @pytest.mark.parametrize("body", [None, {}, []])
    def test_empty_body(self, body):
        with pytest.raises(EmptyBodyError):
            parse_bfhl_request(body)

    def test_each_variant(self):
        assert parse_bfhl_request({"fibonacci": 5}) == FibonacciRequest(fibonacci=5)
        assert parse_bfhl_request({"prime": [2, 3]}) == PrimeRequest(prime=[2, 3])
        assert parse_bfhl_request({"lcm": [4, 6]}) == LCMRequest(lcm=[4, 6])
        assert parse_bfhl_request({"hcf": [4, 6]}) == HCFRequest(hcf=[4, 6])
        assert parse_bfhl_request({"AI": "Why?"}) == AIRequest(AI="Why?")

    def test_integral_float_accepted(self):
        request = parse_bfhl_request({"fibonacci": 5.0})
        assert request.fibonacci == 5
        assert type(request.fibonacci) is int

    def test_priority_first_key_wins(self):
        request = parse_bfhl_request({"prime": [2, 3], "fibonacci": 4})
        assert isinstance(request, FibonacciRequest)

        request = parse_bfhl_request({"AI": "hi", "hcf": [2]})
        assert isinstance(request, HCFRequest)

    def test_invalid_higher_priority_key_is_not_skipped(self):
        with pytest.raises(OperandValidationError) as exc_info:
            parse_bfhl_request({"fibonacci": "5", "prime": [2]})
        assert exc_info.value.message == "Fibonacci input must be an integer"
        assert exc_info.value.field == "fibonacci"

    def test_null_counts_as_present(self):
        with pytest.raises(OperandValidationError) as exc_info:
            parse_bfhl_request({"AI": None})
        assert exc_info.value.message == "AI input must be a string"

    @pytest.mark.parametrize(
        "body,message",
        [
            ({"fibonacci": 5.5}, "Fibonacci input must be an integer"),
            ({"fibonacci": True}, "Fibonacci input must be an integer"),
            ({"prime": [2, 3, "x"]}, "Prime input must be an integer array"),
            ({"prime": 7}, "Prime input must be an integer array"),
            ({"lcm": [1.5]}, "LCM input must be an integer array"),
            ({"hcf": "12,18"}, "HCF input must be an integer array"),
            ({"AI": 42}, "AI input must be a string"),
        ],
    )
    def test_operand_validation_messages(self, body, message):
        with pytest.raises(OperandValidationError) as exc_info:
            parse_bfhl_request(body)
        assert exc_info.value.message == message
        assert exc_info.value.status_code == 422

    def test_unrecognized_key(self):
        with pytest.raises(InvalidKeyError) as exc_info:
            parse_bfhl_request({"Fibonacci": 5, "ai": "x"})
        assert exc_info.value.message == "Invalid key. Use one of: fibonacci, prime, lcm, hcf, AI"
        assert exc_info.value.status_code == 400

    def test_non_object_body(self):
        with pytest.raises(InvalidKeyError):
            parse_bfhl_request([1, 2])


class TestEnvelope:

    def test_success_keeps_falsy_data(self):
        content = BFHLResponse.success("a@b.c", []).to_content()
        assert content == {"is_success": True, "official_email": "a@b.c", "data": []}

    def test_failure_envelope(self):
        content = BFHLResponse.failure("a@b.c", "boom").to_content()
        assert content == {"is_success": False, "official_email": "a@b.c", "error": "boom"}
        assert "data" not in content
