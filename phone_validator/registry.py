"""Lookup table from ``settings.provider`` names to provider classes."""

import importlib
from typing import Dict, Iterable, Type

from .domain.provider import TelecomProvider
from .exceptions import ConfigError

PROVIDER_REGISTRY: Dict[str, Type[TelecomProvider]] = {}


def register_provider(name: str, cls: Type[TelecomProvider]) -> None:
    """Make ``cls`` selectable as ``PROVIDER=<name>``."""
    PROVIDER_REGISTRY[name] = cls


def get_provider_class(name: str) -> Type[TelecomProvider]:
    try:
        return PROVIDER_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(PROVIDER_REGISTRY)) or "none"
        raise ConfigError(f"Unknown provider {name!r} (registered: {known})") from None


def load_providers(modules: Iterable[str] = ()) -> None:
    """Register the built-in Twilio provider, then import extra provider modules.

    Extra modules are expected to call :func:`register_provider` on import.
    """
    from .infrastructure import TwilioProvider

    register_provider("twilio", TwilioProvider)
    for module_path in filter(None, modules):
        importlib.import_module(module_path)
