"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Account
  2xxx: Transaction
  8xxx: Upstream ledger API
  9xxx: System / store
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


# --- 1xxx: Account ---

class InvalidPublicKeyError(AppError):
    def __init__(self, public_key: str) -> None:
        super().__init__(1001, f"Invalid account public key: {public_key}", 422)


class AccountNotFoundError(AppError):
    def __init__(self, public_key: str) -> None:
        super().__init__(1002, f"Account not found: {public_key}", 404)


# --- 2xxx: Transaction ---

class TransactionNotFoundError(AppError):
    def __init__(self, tx_id: str) -> None:
        super().__init__(2001, f"Transaction not found: {tx_id}", 404)


class InvalidTransactionIdError(AppError):
    def __init__(self, tx_id: str) -> None:
        super().__init__(2002, f"Invalid transaction id: {tx_id}", 422)


# --- 8xxx: Upstream ---

class UpstreamError(AppError):
    """Horizon call failed: transport error, timeout, non-2xx or bad payload.

    status_code is the upstream HTTP status when one was received.
    """

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(8001, f"Upstream ledger API error: {detail}", 502)


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class StoreError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9003, f"Store unavailable: {detail}", 503)
