"""Project configuration loaded from environment variables."""

from typing import Annotated, Any, List

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from .domain.models import UnknownTypePolicy, VoipPolicy


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(case_sensitive=False)

    twilio_account_sid: str
    twilio_auth_token: str
    twilio_verify_service_sid: str | None = None
    twilio_verify_channel: str = "sms"
    twilio_lookup_fields: str = "line_type_intelligence,line_status"
    provider: str = "twilio"
    provider_modules: Annotated[List[str], NoDecode] = []
    provider_timeout: float = 10.0
    service_name: str = "phone-validator"
    host: str = "0.0.0.0"
    port: int = 10000
    cors_origins: Annotated[List[str], NoDecode] = ["*"]
    strict_length: bool = True
    voip_policy: VoipPolicy = VoipPolicy.BLOCK
    unknown_type_policy: UnknownTypePolicy = UnknownTypePolicy.REJECT
    block_toll_free: bool = True
    expected_country: str = "US"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    log_file: str | None = None
    log_json: bool = False
    metrics_port: int = 0

    @field_validator("provider_modules", "cors_origins", mode="before")
    @classmethod
    def _split_csv(cls, v: Any) -> List[str]:
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return list(v) if v else []

    @field_validator("provider_timeout")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("provider_timeout must be positive")
        return v

    @field_validator("twilio_verify_service_sid", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


CREDENTIALS = ("twilio_account_sid", "twilio_auth_token")


def _describe(exc: ValidationError) -> str:
    missing = sorted(
        {str(err["loc"][0]) for err in exc.errors() if err["type"] == "missing" and err["loc"]}
        & set(CREDENTIALS)
    )
    if missing:
        names = " and ".join(name.upper() for name in missing)
        return f"{names} environment variable(s) are required"
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}"
        for err in exc.errors()
    )
    return f"Invalid configuration: {details}"


try:
    settings = Settings()
except ValidationError as exc:
    raise RuntimeError(_describe(exc)) from exc

if not settings.twilio_account_sid or not settings.twilio_auth_token:
    raise RuntimeError(
        "TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN environment variables are required"
    )
