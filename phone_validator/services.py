"""Request-scoped orchestration of normalizer, provider and classifier."""

import asyncio
import logging
from typing import Any, Optional

from .classifier import ClassifierPolicy, classify, failure, reject
from .domain.models import Verdict, VerificationCheck, VerificationStart
from .domain.provider import TelecomProvider
from .exceptions import (
    MissingCodeError,
    NotConfiguredError,
    ProviderError,
    ProviderTimeoutError,
    RejectedNumberError,
)
from .normalizer import normalize

logger = logging.getLogger(__name__)


async def _run(timeout: float, func, *args):
    """Run a blocking provider call in a worker thread with a deadline."""
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout)
    except asyncio.TimeoutError as exc:
        raise ProviderTimeoutError(f"Provider did not answer within {timeout}s") from exc


class PhoneValidationService:
    """Validate phone numbers submitted by web forms."""

    def __init__(
        self,
        provider: TelecomProvider,
        policy: ClassifierPolicy = ClassifierPolicy(),
        *,
        timeout: float = 10.0,
        strict_length: bool = True,
    ) -> None:
        self.provider = provider
        self.policy = policy
        self.timeout = timeout
        self.strict_length = strict_length

    async def validate(self, raw: Any) -> Verdict:
        try:
            phone = normalize(raw, strict_length=self.strict_length)
        except RejectedNumberError as e:
            logger.info("Rejected %s locally: %s", e.digits, e.reason.value)
            return reject(e.reason)

        try:
            lookup = await _run(self.timeout, self.provider.lookup, phone.e164)
        except ProviderError as e:
            logger.error("Lookup failed for %s: %s", phone.e164, e)
            return failure()
        except Exception:
            logger.exception("Unexpected provider fault for %s", phone.e164)
            return failure()

        verdict = classify(phone, lookup, self.policy)
        logger.info(
            "Verdict for %s: valid=%s reason=%s",
            phone.e164,
            verdict.valid,
            verdict.reason.value,
        )
        return verdict


class VerificationService:
    """Pass one-time-code requests through to the provider.

    No state is kept between :meth:`start` and :meth:`check`; the provider
    alone decides whether a code is valid or expired.
    """

    def __init__(
        self,
        provider: TelecomProvider,
        service_sid: Optional[str],
        *,
        timeout: float = 10.0,
        strict_length: bool = True,
    ) -> None:
        self.provider = provider
        self.service_sid = service_sid
        self.timeout = timeout
        self.strict_length = strict_length

    def _require_service(self) -> str:
        if not self.service_sid:
            raise NotConfiguredError("Verification service is not configured")
        return self.service_sid

    async def start(self, raw: Any) -> VerificationStart:
        service_sid = self._require_service()
        phone = normalize(raw, strict_length=self.strict_length)
        status = await _run(
            self.timeout, self.provider.start_verification, service_sid, phone.e164
        )
        return VerificationStart(accepted=status == "pending", provider_status=status)

    async def check(self, raw: Any, code: Optional[str]) -> VerificationCheck:
        code = (code or "").strip()
        if not code:
            raise MissingCodeError()
        service_sid = self._require_service()
        phone = normalize(raw, strict_length=self.strict_length)
        status = await _run(
            self.timeout,
            self.provider.check_verification,
            service_sid,
            phone.e164,
            code,
        )
        return VerificationCheck(approved=status == "approved", provider_status=status)
