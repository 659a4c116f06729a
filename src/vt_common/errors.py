"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Identity
  2xxx: Account
  3xxx: Transfer
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Identity ---

class MissingIdentityError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Caller identity header X-User-Id is required", 401)


# --- 2xxx: Account ---

class AccountNotFoundError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(2001, f"Account not found for user {user_id}", 404)


# --- 3xxx: Transfer ---

class InvalidAmountError(AppError):
    def __init__(self, amount: int) -> None:
        super().__init__(3001, f"Transfer amount must be positive, got {amount}", 422)


class TransferNotFoundError(AppError):
    def __init__(self, transfer_id: str) -> None:
        super().__init__(3002, f"Pending transfer not found: {transfer_id}", 404)


class NoPendingTransfersError(AppError):
    def __init__(self, user_id: str) -> None:
        super().__init__(3003, f"No pending transfers for user {user_id}", 404)


class SelfTransferError(AppError):
    def __init__(self) -> None:
        super().__init__(3004, "Cannot send tokens to yourself", 422)


# --- 9xxx: System ---

class ConcurrencyConflictError(AppError):
    def __init__(self, detail: str = "Concurrent update detected, retry the operation") -> None:
        super().__init__(9001, detail, 409)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
