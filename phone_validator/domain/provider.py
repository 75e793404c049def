from abc import ABC, abstractmethod

from .models import LookupResult


class TelecomProvider(ABC):
    """Abstract interface for telecom-intelligence providers."""

    @abstractmethod
    def lookup(self, e164: str) -> LookupResult:
        """Fetch carrier and line type data for a number."""

    @abstractmethod
    def start_verification(self, service_sid: str, e164: str) -> str:
        """Send a one-time code and return the provider status."""

    @abstractmethod
    def check_verification(self, service_sid: str, e164: str, code: str) -> str:
        """Check a one-time code and return the provider status."""
