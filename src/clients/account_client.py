"""
Account Service Client
Submits transfer instructions to the external account service.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

import httpx

import config
from logging_config import get_logger
from services.exceptions import ExternalServiceError
from services.models import ExecutionOutcome, TransferRequest

logger = get_logger("transaction_service.clients.account")

EXECUTE_TRANSFER_PATH = "/execute-transfer"
UNKNOWN_ERROR_CODE = "UNKNOWN_ERROR"
UNKNOWN_ERROR_MESSAGE = "Transfer rejected by account service"


def _optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def _optional_decimal(value: Any) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None


def build_payload(request: TransferRequest) -> Dict[str, Any]:
    return {
        "kind": request.kind.value,
        "sourceAccountId": request.source_account_id,
        "destinationAccountId": request.destination_account_id,
        "amount": float(request.amount),
    }


def parse_outcome(body: Any) -> Optional[ExecutionOutcome]:
    """
    Turn an account service response body into an ExecutionOutcome.

    Returns None when the body is not shaped like a transfer outcome.
    """
    if not isinstance(body, dict) or not isinstance(body.get("success"), bool):
        return None
    try:
        balances = {
            "source_account_id": _optional_int(body.get("sourceAccountId")),
            "destination_account_id": _optional_int(body.get("destinationAccountId")),
            "final_source_balance": _optional_decimal(body.get("finalSourceBalance")),
            "final_destination_balance": _optional_decimal(body.get("finalDestinationBalance")),
        }
    except (TypeError, ValueError, ArithmeticError):
        return None

    if body["success"]:
        return ExecutionOutcome.succeeded(**balances)
    return ExecutionOutcome.rejected(
        error_code=str(body.get("errorCode") or UNKNOWN_ERROR_CODE),
        error_message=str(body.get("errorMessage") or UNKNOWN_ERROR_MESSAGE),
        **balances,
    )


class AccountServiceClient:
    """
    HTTP client for the account service.

    One execute() call makes exactly one request and never retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or config.ACCOUNT_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.ACCOUNT_SERVICE_TIMEOUT
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
        )

    async def close(self):
        if self._owns_client:
            await self._client.aclose()

    async def execute(self, request: TransferRequest) -> ExecutionOutcome:
        """
        Ask the account service to move the funds described by request.

        A rejection (success=false) is returned as a normal outcome. Anything
        that leaves the result unknown raises ExternalServiceError.
        """
        url = f"{self.base_url}{EXECUTE_TRANSFER_PATH}"
        payload = build_payload(request)
        logger.info(
            "HTTP PATCH %s kind=%s from=%s to=%s",
            url,
            payload["kind"],
            payload["sourceAccountId"],
            payload["destinationAccountId"],
        )

        try:
            resp = await self._client.patch(url, json=payload, timeout=self.timeout)
        except httpx.TimeoutException as e:
            logger.error("Account service timed out after %ss url=%s", self.timeout, url)
            raise ExternalServiceError(
                f"There is an error on the account service: timed out after {self.timeout}s"
            ) from e
        except httpx.RequestError as e:
            logger.error("Account service unreachable url=%s error=%s", url, e)
            raise ExternalServiceError(f"There is an error on the account service: {e}") from e

        try:
            body = resp.json()
        except ValueError as e:
            logger.error("Account service sent non-JSON body status=%s", resp.status_code)
            raise ExternalServiceError(
                f"There is an error on the account service: malformed response (HTTP {resp.status_code})"
            ) from e

        outcome = parse_outcome(body)
        if outcome is None or (outcome.success and resp.is_error):
            logger.error(
                "Account service sent unexpected response status=%s body=%s",
                resp.status_code,
                str(body)[:200],
            )
            raise ExternalServiceError(
                f"There is an error on the account service: unexpected response (HTTP {resp.status_code})"
            )

        logger.info(
            "Account service answered status=%s success=%s error_code=%s",
            resp.status_code,
            outcome.success,
            outcome.error_code,
        )
        return outcome
