"""Rule table turning a carrier lookup into an accept/reject verdict."""

from dataclasses import dataclass
from typing import Optional

from .domain.models import (
    LookupResult,
    PhoneInput,
    Reason,
    UnknownTypePolicy,
    Verdict,
    VoipPolicy,
)

TOLL_FREE_PREFIXES = frozenset({"800", "833", "844", "855", "866", "877", "888"})
KNOWN_TYPES = frozenset({"mobile", "landline"})
VOIP_TYPES = frozenset({"voip", "fixedvoip", "nonfixedvoip"})
TOLL_FREE_TYPES = frozenset({"tollfree", "toll-free", "toll_free"})
ACTIVE_STATUSES = frozenset({"active", "reachable"})


@dataclass(frozen=True)
class ClassifierPolicy:
    """Product policy applied on top of the provider's answer."""

    voip_policy: VoipPolicy = VoipPolicy.BLOCK
    unknown_type_policy: UnknownTypePolicy = UnknownTypePolicy.REJECT
    block_toll_free: bool = True
    expected_country: str = "US"


def _lower(value: Optional[str]) -> Optional[str]:
    return value.strip().lower() if value else None


def _verdict(
    reason: Reason,
    line_type: str = "unknown",
    country_code: Optional[str] = None,
    reachability: Optional[str] = None,
) -> Verdict:
    return Verdict(
        valid=reason is Reason.OK,
        type=line_type,
        country_code=country_code,
        reachability=reachability,
        reason=reason,
        message=reason.message,
    )


def reject(reason: Reason) -> Verdict:
    """Verdict for a number refused before any lookup was made."""
    return _verdict(reason)


def failure() -> Verdict:
    """Verdict for a lookup that failed or timed out."""
    return _verdict(Reason.ERROR)


def _is_active(lookup: LookupResult) -> bool:
    return (
        _lower(lookup.line_status) in ACTIVE_STATUSES
        or _lower(lookup.reachability) == "reachable"
    )


def _reason(
    phone: PhoneInput, lookup: LookupResult, line_type: str, policy: ClassifierPolicy
) -> Reason:
    country = lookup.country_code
    if country and country.upper() != policy.expected_country.upper():
        return Reason.NON_US
    if _lower(lookup.reachability) == "unreachable":
        return Reason.UNREACHABLE
    if line_type in VOIP_TYPES:
        if policy.voip_policy is VoipPolicy.BLOCK:
            return Reason.VOIP
        if policy.voip_policy is VoipPolicy.ALLOW_IF_ACTIVE and not _is_active(lookup):
            return Reason.VOIP
    if policy.block_toll_free and (
        line_type in TOLL_FREE_TYPES or phone.area_code in TOLL_FREE_PREFIXES
    ):
        return Reason.TOLL_FREE
    if (
        line_type not in KNOWN_TYPES
        and line_type not in VOIP_TYPES
        and policy.unknown_type_policy is UnknownTypePolicy.REJECT
    ):
        return Reason.UNKNOWN_TYPE
    return Reason.OK


def classify(
    phone: PhoneInput,
    lookup: Optional[LookupResult],
    policy: ClassifierPolicy = ClassifierPolicy(),
) -> Verdict:
    """Apply the rule table to a lookup result; ``None`` means the lookup failed.

    Rules are evaluated top to bottom and the first match wins: foreign
    country, unreachable line, VOIP (per ``policy.voip_policy``), toll-free
    range, line type outside mobile/landline (per
    ``policy.unknown_type_policy``).
    """
    if lookup is None:
        return failure()

    line_type = _lower(lookup.line_type) or "unknown"
    reason = _reason(phone, lookup, line_type, policy)
    return _verdict(
        reason,
        line_type=line_type,
        country_code=lookup.country_code,
        reachability=_lower(lookup.reachability),
    )
