import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from phone_validator import metrics
from phone_validator.config import settings
from phone_validator.dependencies import get_validation_service, get_verification_service
from phone_validator.domain.models import Reason
from phone_validator.exceptions import (
    ConfigError,
    MissingCodeError,
    MissingPhoneError,
    ProviderError,
    RejectedNumberError,
)
from phone_validator.services import PhoneValidationService, VerificationService
from .schemas import (
    CheckVerifyRequest,
    CheckVerifyResponse,
    ErrorResponse,
    PhoneRequest,
    StartVerifyResponse,
    VerdictResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _phone(request: PhoneRequest) -> str:
    if request.phone is None or not request.phone.strip():
        raise MissingPhoneError()
    return request.phone


@router.get("/")
async def index() -> dict[str, str]:
    return {"status": "ok", "service": settings.service_name}


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


@router.post(
    "/validate-phone",
    response_model=VerdictResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": VerdictResponse}},
)
async def validate_phone(
    request: PhoneRequest,
    service: PhoneValidationService = Depends(get_validation_service),
):
    metrics.REQUESTS_TOTAL.labels(endpoint="/validate-phone").inc()
    try:
        raw = _phone(request)
    except MissingPhoneError as e:
        return JSONResponse(
            status_code=400, content=ErrorResponse(message=str(e)).model_dump()
        )

    verdict = await service.validate(raw)
    metrics.VERDICTS_TOTAL.labels(reason=verdict.reason.value).inc()
    body = VerdictResponse.from_verdict(verdict)
    if verdict.reason is Reason.ERROR:
        return JSONResponse(status_code=500, content=body.model_dump())
    return body


def _start_failure(status_code: int, status: str, message: str) -> JSONResponse:
    body = StartVerifyResponse(sent=False, ok=False, status=status, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _check_failure(status_code: int, status: str, message: str) -> JSONResponse:
    body = CheckVerifyResponse(valid=False, ok=False, status=status, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "/start-verify",
    response_model=StartVerifyResponse,
    response_model_exclude_none=True,
)
async def start_verify(
    request: PhoneRequest,
    service: VerificationService = Depends(get_verification_service),
):
    metrics.REQUESTS_TOTAL.labels(endpoint="/start-verify").inc()
    try:
        result = await service.start(_phone(request))
    except MissingPhoneError as e:
        return _start_failure(400, "missing-phone", str(e))
    except RejectedNumberError as e:
        return _start_failure(400, e.reason.value, str(e))
    except ConfigError as e:
        logger.error("start-verify unavailable: %s", e)
        return _start_failure(500, "error", "Verification service not configured.")
    except ProviderError as e:
        logger.error("start-verify failed: %s", e)
        return _start_failure(500, "error", "Could not send verification code.")

    return StartVerifyResponse(
        sent=result.accepted, ok=result.accepted, status=result.provider_status
    )


@router.post(
    "/check-verify",
    response_model=CheckVerifyResponse,
    response_model_exclude_none=True,
)
async def check_verify(
    request: CheckVerifyRequest,
    service: VerificationService = Depends(get_verification_service),
):
    metrics.REQUESTS_TOTAL.labels(endpoint="/check-verify").inc()
    try:
        result = await service.check(_phone(request), request.code)
    except MissingPhoneError as e:
        return _check_failure(400, "missing-phone", str(e))
    except MissingCodeError as e:
        return _check_failure(400, "missing-code", str(e))
    except RejectedNumberError as e:
        return _check_failure(400, e.reason.value, str(e))
    except ConfigError as e:
        logger.error("check-verify unavailable: %s", e)
        return _check_failure(500, "error", "Verification service not configured.")
    except ProviderError as e:
        logger.error("check-verify failed: %s", e)
        return _check_failure(500, "error", "Could not check verification code.")

    body = CheckVerifyResponse(
        valid=result.approved, ok=result.approved, status=result.provider_status
    )
    if not result.approved:
        body.message = "Invalid or expired code."
    return body
