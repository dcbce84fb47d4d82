"""Request lifecycle shared by the standard and currency conversion workflows.

Each workflow moves through ``IDLE → LOADING → (SUCCESS | ERROR)`` and
re-enters ``LOADING`` on the next submit. Service and transport failures
are caught here and become the workflow's ERROR outcome; only a rejected
submit escapes as an exception. A cancelled submit returns the workflow to
IDLE before the cancellation propagates.

Usage:
    lifecycle = conversion_lifecycle(client)
    outcome = await lifecycle.submit(ConversionRequest("Length", "5", "meter", "kilometer"))
"""

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, Optional, TypeVar

import httpx

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")


# ── Requests ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ConversionRequest:
    category: str
    value: str
    from_unit: str
    to_unit: str

    def to_payload(self) -> dict:
        return {
            "category": self.category,
            "value": self.value,
            "from_unit": self.from_unit,
            "to_unit": self.to_unit,
        }


@dataclass(frozen=True)
class CurrencyRequest:
    amount: str
    from_currency: str
    to_currency: str

    def to_payload(self) -> dict:
        return {
            "amount": self.amount,
            "from_currency": self.from_currency,
            "to_currency": self.to_currency,
        }


# ── Outcomes ─────────────────────────────────────────────────────────────────

class OutcomeStatus(Enum):
    IDLE = auto()
    LOADING = auto()
    SUCCESS = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    result: Optional[float] = None
    unit: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> Outcome:
        return cls(OutcomeStatus.IDLE)

    @classmethod
    def loading(cls) -> Outcome:
        return cls(OutcomeStatus.LOADING)

    @classmethod
    def success(cls, result: float, unit: str) -> Outcome:
        return cls(OutcomeStatus.SUCCESS, result=result, unit=unit)

    @classmethod
    def error(cls, message: str) -> Outcome:
        return cls(OutcomeStatus.ERROR, message=message)

    @property
    def is_loading(self) -> bool:
        return self.status is OutcomeStatus.LOADING

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status is OutcomeStatus.ERROR


# ── Exceptions ───────────────────────────────────────────────────────────────

class SubmitRejectedError(RuntimeError):
    """Raised when a submit arrives that the workflow must not accept.

    Covers a second submit while a request is in flight, an empty or
    non-numeric value, and a currency submit while currency is disabled.
    """

    def __init__(self, workflow: str, reason: str) -> None:
        super().__init__(f"{workflow} submit rejected: {reason}")
        self.workflow = workflow
        self.reason = reason


class ServiceError(Exception):
    """The conversion service answered but reported a failure."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# ── Helpers ──────────────────────────────────────────────────────────────────

def _detail_message(response: httpx.Response) -> Optional[str]:
    """Pull a human-readable message out of a failure payload, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    # FastAPI request-validation errors: [{"msg": ..., "loc": ...}, ...]
    if isinstance(detail, list):
        msgs = [str(item["msg"]) for item in detail if isinstance(item, dict) and item.get("msg")]
        if msgs:
            return "; ".join(msgs)
    return None


def _parse_result(response: httpx.Response) -> Optional[float]:
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    result = data.get("result")
    if isinstance(result, bool) or not isinstance(result, (int, float)):
        return None
    if not math.isfinite(result):
        return None
    return float(result)


# ── Lifecycle ────────────────────────────────────────────────────────────────

class RequestLifecycle(Generic[RequestT]):
    """Owns one workflow's outcome and its single in-flight request.

    Args:
        name: Workflow name used in log lines and rejection messages.
        client: httpx client whose base_url points at the conversion service.
        endpoint: Path posted to on submit.
        result_unit: Picks the success unit out of the submitted request.
        failure_message: Shown when the service fails without a detail.
        transport_message: Shown when the service cannot be reached.
    """

    def __init__(
        self,
        name: str,
        client: httpx.AsyncClient,
        endpoint: str,
        result_unit: Callable[[RequestT], str],
        failure_message: str,
        transport_message: str,
    ) -> None:
        self.name = name
        self.endpoint = endpoint
        self.failure_message = failure_message
        self.transport_message = transport_message
        self._client = client
        self._result_unit = result_unit
        self._outcome = Outcome.idle()

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_loading(self) -> bool:
        return self._outcome.is_loading

    async def submit(self, request: RequestT) -> Outcome:
        """Send request and settle the workflow into SUCCESS or ERROR.

        Raises:
            SubmitRejectedError: If a request is already in flight.
        """
        if self.is_loading:
            raise SubmitRejectedError(self.name, "a request is already in flight")

        self._outcome = Outcome.loading()
        logger.debug("%s: loading %s", self.name, request)

        try:
            result = await self._send(request)
        except ServiceError as exc:
            logger.warning("%s: service error (%s): %s", self.name, exc.status_code, exc.message)
            self._outcome = Outcome.error(exc.message)
        except httpx.RequestError as exc:
            logger.warning("%s: could not reach %s: %s", self.name, self.endpoint, exc)
            self._outcome = Outcome.error(self.transport_message)
        except asyncio.CancelledError:
            # Nothing will settle this request; free the workflow for the next submit.
            logger.debug("%s: cancelled while loading", self.name)
            self._outcome = Outcome.idle()
            raise
        except Exception:
            logger.exception("%s: request to %s failed", self.name, self.endpoint)
            self._outcome = Outcome.error(self.transport_message)
        else:
            self._outcome = Outcome.success(result, self._result_unit(request))
            logger.debug("%s: success %s", self.name, self._outcome)
        return self._outcome

    async def _send(self, request: RequestT) -> float:
        payload: dict[str, Any] = request.to_payload()
        response = await self._client.post(self.endpoint, json=payload)
        if not response.is_success:
            message = _detail_message(response) or self.failure_message
            raise ServiceError(message, response.status_code)
        result = _parse_result(response)
        if result is None:
            raise ServiceError(self.failure_message, response.status_code)
        return result


# ── Workflow instances ───────────────────────────────────────────────────────

def conversion_lifecycle(client: httpx.AsyncClient) -> RequestLifecycle[ConversionRequest]:
    return RequestLifecycle(
        name="conversion",
        client=client,
        endpoint="/convert",
        result_unit=lambda req: req.to_unit,
        failure_message="Conversion failed.",
        transport_message="Could not reach backend.",
    )


def currency_lifecycle(client: httpx.AsyncClient) -> RequestLifecycle[CurrencyRequest]:
    return RequestLifecycle(
        name="currency",
        client=client,
        endpoint="/convert-currency",
        result_unit=lambda req: req.to_currency,
        failure_message="Currency conversion failed.",
        transport_message="Could not reach backend for currency.",
    )
