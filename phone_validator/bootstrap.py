from .logging_config import configure_logging
from .registry import load_providers
from .config import settings


def initialize() -> None:
    """Configure logging and register available providers."""
    configure_logging(
        level=settings.log_level,
        fmt=settings.log_format,
        log_file=settings.log_file,
        json_format=settings.log_json,
        service=settings.service_name,
    )
    load_providers(settings.provider_modules)
