from .twilio_provider import TwilioProvider

__all__ = [
    "TwilioProvider",
]
