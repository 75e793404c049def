from dataclasses import dataclass
from enum import Enum
from typing import Optional


_REAL_NUMBER = "Please enter a real, reachable mobile or landline number."

MESSAGES = {
    "ok": "Valid US phone.",
    "error": "Could not validate phone number.",
    "bad-length": "Please enter a 10-digit US phone number.",
    "fake-pattern": _REAL_NUMBER,
    "non-us": "Please enter a US phone number.",
    "unreachable": _REAL_NUMBER,
    "voip": "Internet (VOIP) numbers are not accepted. " + _REAL_NUMBER,
    "toll-free": "Toll-free numbers are not accepted. " + _REAL_NUMBER,
    "unknown-type": _REAL_NUMBER,
}


class Reason(str, Enum):
    """Reason codes reported with every verdict."""

    OK = "ok"
    ERROR = "error"
    BAD_LENGTH = "bad-length"
    FAKE_PATTERN = "fake-pattern"
    NON_US = "non-us"
    UNREACHABLE = "unreachable"
    VOIP = "voip"
    TOLL_FREE = "toll-free"
    UNKNOWN_TYPE = "unknown-type"

    @property
    def message(self) -> str:
        return MESSAGES[self.value]


class VoipPolicy(str, Enum):
    BLOCK = "block"
    ALLOW = "allow"
    # accept only when the provider also reports an active line
    ALLOW_IF_ACTIVE = "allow-if-active"


class UnknownTypePolicy(str, Enum):
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class PhoneInput:
    """A normalized North-American number."""

    raw: str
    digits: str

    @property
    def e164(self) -> str:
        return "+1" + self.digits

    @property
    def area_code(self) -> str:
        return self.digits[:3]


@dataclass
class LookupResult:
    """Carrier lookup data as reported by the provider."""

    country_code: Optional[str] = None
    line_type: Optional[str] = None
    reachability: Optional[str] = None
    line_status: Optional[str] = None
    carrier: Optional[str] = None


@dataclass
class Verdict:
    """Accept/reject decision returned to form callers."""

    valid: bool
    type: str
    country_code: Optional[str]
    reachability: Optional[str]
    reason: Reason
    message: str

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "type": self.type,
            "countryCode": self.country_code,
            "reachability": self.reachability,
            "reason": self.reason.value,
            "message": self.message,
        }


@dataclass
class VerificationStart:
    accepted: bool
    provider_status: str


@dataclass
class VerificationCheck:
    approved: bool
    provider_status: str
