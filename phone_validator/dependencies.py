from fastapi import FastAPI, Request

from .classifier import ClassifierPolicy
from .config import settings
from .domain.provider import TelecomProvider
from .registry import get_provider_class
from .services import PhoneValidationService, VerificationService


def build_policy() -> ClassifierPolicy:
    return ClassifierPolicy(
        voip_policy=settings.voip_policy,
        unknown_type_policy=settings.unknown_type_policy,
        block_toll_free=settings.block_toll_free,
        expected_country=settings.expected_country,
    )


def build_provider() -> TelecomProvider:
    provider_cls = get_provider_class(settings.provider)
    return provider_cls(
        settings.twilio_account_sid,
        settings.twilio_auth_token,
        timeout=settings.provider_timeout,
        channel=settings.twilio_verify_channel,
        lookup_fields=settings.twilio_lookup_fields,
    )


def init_app(app: FastAPI, provider: TelecomProvider | None = None) -> None:
    """Create and store shared dependencies on the application."""
    provider = provider or build_provider()
    app.state.provider = provider
    app.state.validation_service = PhoneValidationService(
        provider,
        build_policy(),
        timeout=settings.provider_timeout,
        strict_length=settings.strict_length,
    )
    app.state.verification_service = VerificationService(
        provider,
        settings.twilio_verify_service_sid,
        timeout=settings.provider_timeout,
        strict_length=settings.strict_length,
    )


def get_validation_service(request: Request) -> PhoneValidationService:
    return request.app.state.validation_service


def get_verification_service(request: Request) -> VerificationService:
    return request.app.state.verification_service
