import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from phone_validator.config import settings
from phone_validator.classifier import ClassifierPolicy
from phone_validator.dependencies import build_policy, build_provider
from phone_validator.domain.models import Reason, UnknownTypePolicy, VoipPolicy
from phone_validator.exceptions import ConfigError
from phone_validator.infrastructure import TwilioProvider
from phone_validator.registry import load_providers
from phone_validator.services import PhoneValidationService


def _lookup_v2(line_type: str, status: str):
    """Mimic Lookup v2: each data package only comes back when requested."""

    def fetch(fields: str = ""):
        requested = fields.split(",")
        return SimpleNamespace(
            country_code="US",
            line_type_intelligence={"type": line_type}
            if "line_type_intelligence" in requested
            else None,
            line_status={"status": status} if "line_status" in requested else None,
        )

    client = MagicMock()
    client.lookups.v2.phone_numbers.return_value.fetch.side_effect = fetch
    return client


@pytest.fixture
def provider() -> TwilioProvider:
    load_providers()
    return build_provider()


def test_build_provider_uses_settings(provider):
    assert isinstance(provider, TwilioProvider)
    assert provider.lookup_fields == settings.twilio_lookup_fields
    assert "line_status" in provider.lookup_fields.split(",")
    assert provider.channel == settings.twilio_verify_channel


def test_build_policy_uses_settings(monkeypatch):
    monkeypatch.setattr(settings, "voip_policy", VoipPolicy.ALLOW_IF_ACTIVE)
    monkeypatch.setattr(settings, "unknown_type_policy", UnknownTypePolicy.ACCEPT)
    monkeypatch.setattr(settings, "block_toll_free", False)
    assert build_policy() == ClassifierPolicy(
        voip_policy=VoipPolicy.ALLOW_IF_ACTIVE,
        unknown_type_policy=UnknownTypePolicy.ACCEPT,
        block_toll_free=False,
        expected_country=settings.expected_country,
    )


def test_default_wiring_allows_active_voip(provider):
    provider.client = _lookup_v2("nonFixedVoip", "active")
    policy = ClassifierPolicy(voip_policy=VoipPolicy.ALLOW_IF_ACTIVE)
    verdict = asyncio.run(PhoneValidationService(provider, policy).validate("2025550143"))
    assert verdict.valid is True
    assert verdict.type == "nonfixedvoip"


def test_default_wiring_rejects_inactive_voip(provider):
    provider.client = _lookup_v2("nonFixedVoip", "inactive")
    policy = ClassifierPolicy(voip_policy=VoipPolicy.ALLOW_IF_ACTIVE)
    verdict = asyncio.run(PhoneValidationService(provider, policy).validate("2025550143"))
    assert verdict.reason is Reason.VOIP


def test_default_wiring_reports_unreachable(provider):
    provider.client = _lookup_v2("mobile", "unreachable")
    verdict = asyncio.run(PhoneValidationService(provider, build_policy()).validate("2025550143"))
    assert verdict.valid is False
    assert verdict.reason is Reason.UNREACHABLE
    assert verdict.reachability == "unreachable"


def test_unknown_provider(monkeypatch):
    load_providers()
    monkeypatch.setattr(settings, "provider", "nope")
    with pytest.raises(ConfigError, match="twilio"):
        build_provider()
