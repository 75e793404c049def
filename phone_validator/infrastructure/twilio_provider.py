import logging
import time
from typing import Any, Optional

import requests
from twilio.base.exceptions import TwilioException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from ..domain.models import LookupResult
from ..domain.provider import TelecomProvider
from ..exceptions import ProviderError, ProviderTimeoutError
from .. import metrics

logger = logging.getLogger(__name__)


def _field(data: Any, key: str) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    return str(value) if value not in (None, "") else None


def parse_lookup(instance: Any) -> LookupResult:
    """Build a :class:`LookupResult` from a Lookup v2 phone number instance."""
    lti = getattr(instance, "line_type_intelligence", None) or {}
    line_status = getattr(instance, "line_status", None) or {}
    status = _field(line_status, "status")
    reachability = _field(lti, "reachability")
    if reachability is None and status and status.lower() == "unreachable":
        reachability = "unreachable"
    return LookupResult(
        country_code=getattr(instance, "country_code", None) or None,
        line_type=_field(lti, "type"),
        reachability=reachability,
        line_status=status,
        carrier=_field(lti, "carrier_name"),
    )


class TwilioProvider(TelecomProvider):
    """Provider backed by Twilio Lookup v2 and Twilio Verify v2."""

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        *,
        timeout: float = 10.0,
        channel: str = "sms",
        lookup_fields: str = "line_type_intelligence,line_status",
        client: Client | None = None,
    ) -> None:
        self.channel = channel
        self.lookup_fields = lookup_fields
        self.client = client or Client(
            account_sid,
            auth_token,
            http_client=TwilioHttpClient(timeout=timeout),
        )

    def _call(self, operation: str, e164: str, func, *args, **kwargs):
        start = time.monotonic()
        try:
            return func(*args, **kwargs)
        except requests.Timeout as exc:
            metrics.PROVIDER_ERRORS.labels(operation=operation).inc()
            logger.error("Twilio %s timed out for %s", operation, e164)
            raise ProviderTimeoutError(f"Twilio {operation} timed out") from exc
        except (TwilioException, requests.RequestException) as exc:
            metrics.PROVIDER_ERRORS.labels(operation=operation).inc()
            logger.error("Twilio %s failed for %s: %s", operation, e164, exc)
            raise ProviderError(f"Twilio {operation} failed: {exc}") from exc
        finally:
            metrics.PROVIDER_DURATION.labels(operation=operation).observe(
                time.monotonic() - start
            )

    def lookup(self, e164: str) -> LookupResult:
        instance = self._call(
            "lookup",
            e164,
            self.client.lookups.v2.phone_numbers(e164).fetch,
            fields=self.lookup_fields,
        )
        result = parse_lookup(instance)
        logger.info(
            "Twilio lookup %s: country=%s type=%s reachability=%s",
            e164,
            result.country_code,
            result.line_type,
            result.reachability,
        )
        return result

    def start_verification(self, service_sid: str, e164: str) -> str:
        verification = self._call(
            "start_verification",
            e164,
            self.client.verify.v2.services(service_sid).verifications.create,
            to=e164,
            channel=self.channel,
        )
        logger.info("Verification sent to %s: %s", e164, verification.status)
        return verification.status

    def check_verification(self, service_sid: str, e164: str, code: str) -> str:
        check = self._call(
            "check_verification",
            e164,
            self.client.verify.v2.services(service_sid).verification_checks.create,
            to=e164,
            code=code,
        )
        logger.info("Verification check for %s: %s", e164, check.status)
        return check.status
