import csv
from pathlib import Path
from typing import Iterable, Tuple

from .domain.models import Verdict

FIELDS = ["phone", "valid", "type", "countryCode", "reachability", "reason", "message"]


def read_phone_list(path: Path) -> list[str]:
    """Read phone numbers from a text file, one per line."""
    return [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def write_results(path: Path, results: Iterable[Tuple[str, Verdict]]) -> None:
    """Write ``(phone, verdict)`` pairs to CSV."""
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDS)
        writer.writeheader()
        for phone, verdict in results:
            writer.writerow({"phone": phone, **verdict.to_dict()})
