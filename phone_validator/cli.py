import argparse
import asyncio
import logging
from pathlib import Path

from .bootstrap import initialize
from .config import settings
from .dependencies import build_policy, build_provider
from .exceptions import RejectedNumberError
from .normalizer import normalize
from .services import PhoneValidationService
from .utils import read_phone_list, write_results

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Phone number validation service")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)

    check = sub.add_parser("check", help="Validate numbers from a file")
    check.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="Input file with phone numbers",
    )
    check.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("results.csv"),
        help="Output CSV path",
    )

    norm = sub.add_parser("normalize", help="Normalize a number without a lookup")
    norm.add_argument("phone")
    return parser


def run_serve(host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("phone_validator.api:app", host=host, port=port)
    return 0


async def _check_all(service: PhoneValidationService, phones: list[str]):
    return [(phone, await service.validate(phone)) for phone in phones]


def run_check(input_path: Path, output_path: Path) -> int:
    if not input_path.exists():
        logger.error("Input file not found: %s", input_path)
        return 1

    phones = read_phone_list(input_path)
    logger.info("Loaded %d numbers from %s", len(phones), input_path)

    service = PhoneValidationService(
        build_provider(),
        build_policy(),
        timeout=settings.provider_timeout,
        strict_length=settings.strict_length,
    )
    results = asyncio.run(_check_all(service, phones))
    write_results(output_path, results)
    logger.info("Results saved to %s", output_path)
    return 0


def run_normalize(phone: str) -> int:
    try:
        result = normalize(phone, strict_length=settings.strict_length)
    except RejectedNumberError as e:
        print(f"{e.reason.value}: {e}")
        return 1
    print(result.digits, result.e164)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    initialize()
    if args.command == "serve":
        return run_serve(args.host, args.port)
    if args.command == "check":
        return run_check(args.input, args.output)
    return run_normalize(args.phone)


if __name__ == "__main__":
    raise SystemExit(main())
