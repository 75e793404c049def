from .domain.models import Reason


class PhoneValidatorError(Exception):
    """Base exception for all phone validator errors."""


class InputError(PhoneValidatorError):
    """User-correctable problem with the submitted phone number or code."""


class MissingPhoneError(InputError):
    """Raised when the request carries no phone number."""

    def __init__(self, message: str = "Phone number is required.") -> None:
        super().__init__(message)


class MissingCodeError(InputError):
    """Raised when a verification check is submitted without a code."""

    def __init__(self, message: str = "Verification code is required.") -> None:
        super().__init__(message)


class RejectedNumberError(InputError):
    """A number refused locally, before any provider call."""

    reason: Reason

    def __init__(self, digits: str = "") -> None:
        super().__init__(self.reason.message)
        self.digits = digits


class BadLengthError(RejectedNumberError):
    reason = Reason.BAD_LENGTH


class FakePatternError(RejectedNumberError):
    reason = Reason.FAKE_PATTERN


class ConfigError(PhoneValidatorError):
    """Required configuration is missing."""


class NotConfiguredError(ConfigError):
    """Raised when no verification service id is configured."""


class ProviderError(PhoneValidatorError):
    """Raised when the telecom provider fails or returns an error."""


class ProviderTimeoutError(ProviderError):
    """Raised when the provider does not answer in time."""
