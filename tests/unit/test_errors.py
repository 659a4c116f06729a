"""Tests for vt_common errors and the response envelope."""

import pytest

from src.vt_common.errors import (
    AccountNotFoundError,
    AppError,
    ConcurrencyConflictError,
    InternalError,
    InvalidAmountError,
    MissingIdentityError,
    NoPendingTransfersError,
    SelfTransferError,
    TransferNotFoundError,
)
from src.vt_common.response import ApiResponse, error_response, success_response


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("error", "code", "status"),
        [
            (MissingIdentityError(), 1001, 401),
            (AccountNotFoundError("ghost"), 2001, 404),
            (InvalidAmountError(0), 3001, 422),
            (TransferNotFoundError("t-1"), 3002, 404),
            (NoPendingTransfersError("dowan"), 3003, 404),
            (SelfTransferError(), 3004, 422),
            (ConcurrencyConflictError(), 9001, 409),
            (InternalError(), 9002, 500),
        ],
    )
    def test_code_and_status(self, error: AppError, code: int, status: int) -> None:
        assert isinstance(error, AppError)
        assert error.code == code
        assert error.http_status == status

    def test_message_names_the_subject(self) -> None:
        assert "ghost" in AccountNotFoundError("ghost").message
        assert "-3" in str(InvalidAmountError(-3))

    def test_base_default_status(self) -> None:
        assert AppError(1, "boom").http_status == 500


class TestResponseEnvelope:
    def test_success(self) -> None:
        resp = success_response({"amount": 60})
        assert isinstance(resp, ApiResponse)
        assert resp.code == 0
        assert resp.data == {"amount": 60}

    def test_error_carries_failure_flag(self) -> None:
        resp = error_response(3003, "No pending transfers for user dowan")
        assert resp.code == 3003
        assert resp.data == {"success": False, "error": "No pending transfers for user dowan"}
