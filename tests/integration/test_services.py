import asyncio

import pytest

from mocks import FakeProvider, failing_provider
from phone_validator.classifier import ClassifierPolicy
from phone_validator.domain.models import LookupResult, Reason, VoipPolicy
from phone_validator.exceptions import (
    BadLengthError,
    MissingCodeError,
    NotConfiguredError,
    ProviderError,
    ProviderTimeoutError,
)
from phone_validator.services import PhoneValidationService, VerificationService


def test_validate_valid_number():
    provider = FakeProvider()
    service = PhoneValidationService(provider)
    verdict = asyncio.run(service.validate("(202) 555-0143"))
    assert verdict.valid is True
    assert verdict.reason is Reason.OK
    assert provider.calls == [("lookup", "+12025550143")]


def test_local_rejection_skips_provider():
    provider = FakeProvider()
    service = PhoneValidationService(provider)
    assert asyncio.run(service.validate("555-123-0000")).reason is Reason.FAKE_PATTERN
    assert asyncio.run(service.validate("555-0143")).reason is Reason.BAD_LENGTH
    assert asyncio.run(service.validate(None)).reason is Reason.BAD_LENGTH
    assert provider.calls == []


def test_provider_error_becomes_error_verdict():
    service = PhoneValidationService(failing_provider())
    verdict = asyncio.run(service.validate("202-555-0143"))
    assert verdict.valid is False
    assert verdict.reason is Reason.ERROR


def test_unexpected_provider_fault_becomes_error_verdict():
    service = PhoneValidationService(FakeProvider(error=KeyError("line_type")))
    verdict = asyncio.run(service.validate("202-555-0143"))
    assert verdict.reason is Reason.ERROR


def test_provider_timeout_becomes_error_verdict():
    service = PhoneValidationService(FakeProvider(delay=0.5), timeout=0.05)
    verdict = asyncio.run(service.validate("202-555-0143"))
    assert verdict.reason is Reason.ERROR


def test_policy_is_applied():
    provider = FakeProvider(LookupResult(country_code="US", line_type="voip"))
    blocking = PhoneValidationService(provider)
    allowing = PhoneValidationService(provider, ClassifierPolicy(voip_policy=VoipPolicy.ALLOW))
    assert asyncio.run(blocking.validate("2025550143")).reason is Reason.VOIP
    assert asyncio.run(allowing.validate("2025550143")).valid is True


def test_start_verification():
    provider = FakeProvider(start_status="pending")
    service = VerificationService(provider, "VA123")
    result = asyncio.run(service.start("202-555-0143"))
    assert result.accepted is True
    assert result.provider_status == "pending"
    assert provider.calls == [("start", "VA123", "+12025550143")]


def test_start_requires_service_sid():
    provider = FakeProvider()
    service = VerificationService(provider, None)
    with pytest.raises(NotConfiguredError):
        asyncio.run(service.start("202-555-0143"))
    assert provider.calls == []


def test_start_rejects_bad_number():
    service = VerificationService(FakeProvider(), "VA123")
    with pytest.raises(BadLengthError):
        asyncio.run(service.start("12345"))


def test_check_verification_statuses():
    approved = VerificationService(FakeProvider(check_status="approved"), "VA123")
    pending = VerificationService(FakeProvider(check_status="pending"), "VA123")
    result = asyncio.run(approved.check("2025550143", "123456"))
    assert result.approved is True
    result = asyncio.run(pending.check("2025550143", "000000"))
    assert result.approved is False
    assert result.provider_status == "pending"


@pytest.mark.parametrize("code", ["", "   ", None])
def test_check_missing_code_never_calls_provider(code):
    provider = FakeProvider()
    service = VerificationService(provider, None)
    with pytest.raises(MissingCodeError):
        asyncio.run(service.check("2025550143", code))
    assert provider.calls == []


def test_check_propagates_provider_errors():
    service = VerificationService(failing_provider(), "VA123")
    with pytest.raises(ProviderError):
        asyncio.run(service.check("2025550143", "123456"))


def test_check_timeout():
    service = VerificationService(FakeProvider(delay=0.5), "VA123", timeout=0.05)
    with pytest.raises(ProviderTimeoutError):
        asyncio.run(service.check("2025550143", "123456"))
