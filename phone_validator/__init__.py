from .domain.models import (
    LookupResult,
    PhoneInput,
    Reason,
    UnknownTypePolicy,
    Verdict,
    VerificationCheck,
    VerificationStart,
    VoipPolicy,
)
from .domain.provider import TelecomProvider
from .classifier import ClassifierPolicy, classify
from .normalizer import normalize
from .services import PhoneValidationService, VerificationService
from .registry import (
    register_provider,
    get_provider_class,
    PROVIDER_REGISTRY,
)
from .logging_config import configure_logging

__all__ = [
    "LookupResult",
    "PhoneInput",
    "Reason",
    "UnknownTypePolicy",
    "Verdict",
    "VerificationCheck",
    "VerificationStart",
    "VoipPolicy",
    "TelecomProvider",
    "ClassifierPolicy",
    "classify",
    "normalize",
    "PhoneValidationService",
    "VerificationService",
    "register_provider",
    "get_provider_class",
    "PROVIDER_REGISTRY",
    "configure_logging",
]
