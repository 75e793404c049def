import json
import logging
import re
import sys

# E.164 numbers and bare national numbers of seven digits or more
_PHONE = re.compile(r"\+?\d{7,15}")


def mask_phone(phone: str) -> str:
    """Hide the last four digits of a number."""
    if len(phone) > 6:
        return phone[:-4] + "****"
    return "*" * len(phone)


class PhoneMaskingFilter(logging.Filter):
    """Mask every phone-like digit run in the rendered log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = _PHONE.sub(lambda m: mask_phone(m.group(0)), message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, tagged with the service name."""

    def __init__(self, service: str = "phone-validator") -> None:
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "service": self.service,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(
    *,
    level: str | int = logging.INFO,
    fmt: str | None = None,
    log_file: str | None = None,
    json_format: bool = False,
    service: str = "phone-validator",
) -> None:
    """Configure root logger for the application.

    Every handler gets a :class:`PhoneMaskingFilter`, so call sites can log
    numbers as they are. Does nothing if the root logger already has
    handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter: logging.Formatter = JsonFormatter(service)
    else:
        formatter = logging.Formatter(
            fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    root.setLevel(level)
    for h in handlers:
        h.setFormatter(formatter)
        h.addFilter(PhoneMaskingFilter())
        root.addHandler(h)
