"""Tests for the pydantic models and their amount/address types."""

import pytest
from pydantic import ValidationError

from cpamm.models.api import QuoteRequest, SwapRequest
from cpamm.models.types import UINT256_MAX, is_valid_address, normalize_address
from tests.helpers import BOB


class TestAddress:
    """Tests for address validation and normalization."""

    def test_valid_address(self):
        assert is_valid_address("0x" + "aB" * 20)

    @pytest.mark.parametrize(
        "address",
        [
            "0x" + "a" * 39,
            "0x" + "a" * 41,
            "a" * 42,
            "0x" + "g" * 40,
            "0x-" + "a" * 39,
            "0x" + "a" * 39 + "\n",
        ],
    )
    def test_invalid_address(self, address):
        assert not is_valid_address(address)

    def test_non_string_is_invalid(self):
        assert not is_valid_address(None)

    def test_normalize_lowercases_and_prefixes(self):
        assert normalize_address("0x" + "AB" * 20) == "0x" + "ab" * 20
        assert normalize_address("AB" * 20) == "0x" + "ab" * 20

    def test_model_rejects_short_address(self):
        with pytest.raises(ValidationError):
            SwapRequest.model_validate({"caller": "0x1234", "amountIn": "1"})


class TestUint256:
    """Tests for decimal-string amounts."""

    def test_int_coerced_to_string(self):
        request = SwapRequest.model_validate({"caller": BOB, "amountIn": 100})
        assert request.amount_in == "100"
        assert request.min_amount_out == "0"

    def test_max_value_accepted(self):
        request = SwapRequest.model_validate({"caller": BOB, "amountIn": str(UINT256_MAX)})
        assert int(request.amount_in) == UINT256_MAX

    @pytest.mark.parametrize("amount", [str(UINT256_MAX + 1), "-1", "1.5", "abc", True])
    def test_rejected(self, amount):
        with pytest.raises(ValidationError):
            SwapRequest.model_validate({"caller": BOB, "amountIn": amount})


class TestQuoteRequest:
    """Tests for QuoteRequest reserve pairing."""

    def test_no_reserves(self):
        request = QuoteRequest.model_validate({"amountIn": "100"})
        assert request.reserve_in is None
        assert request.reserve_out is None

    def test_both_reserves(self):
        request = QuoteRequest.model_validate(
            {"amountIn": "100", "reserveIn": "2000", "reserveOut": "1000"}
        )
        assert (request.reserve_in, request.reserve_out) == ("2000", "1000")

    def test_single_reserve_rejected(self):
        with pytest.raises(ValidationError, match="must be given together"):
            QuoteRequest.model_validate({"amountIn": "100", "reserveOut": "1000"})
