from typing import Any, Optional

from pydantic import BaseModel, field_validator

from phone_validator.domain.models import Verdict


def _as_text(v: Any) -> Any:
    # form integrations sometimes post numbers as JSON numbers
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


class PhoneRequest(BaseModel):
    phone: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def coerce_phone(cls, v: Any) -> Any:
        return _as_text(v)


class CheckVerifyRequest(PhoneRequest):
    code: Optional[str] = None

    @field_validator("code", mode="before")
    @classmethod
    def coerce_code(cls, v: Any) -> Any:
        return _as_text(v)


class VerdictResponse(BaseModel):
    valid: bool
    type: str
    countryCode: Optional[str] = None
    reachability: Optional[str] = None
    reason: str
    message: str

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "VerdictResponse":
        return cls(**verdict.to_dict())


class ErrorResponse(BaseModel):
    valid: bool = False
    message: str


class StartVerifyResponse(BaseModel):
    sent: bool
    ok: bool
    status: str
    message: Optional[str] = None


class CheckVerifyResponse(BaseModel):
    valid: bool
    ok: bool
    status: str
    message: Optional[str] = None
