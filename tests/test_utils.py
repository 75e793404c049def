import csv
from pathlib import Path

from phone_validator.classifier import reject
from phone_validator.domain.models import Reason
from phone_validator.utils import read_phone_list, write_results


def test_read_phone_list(tmp_path: Path) -> None:
    file = tmp_path / "phones.txt"
    file.write_text("202-555-0143\n\n  (312) 555-0199 \n", encoding="utf-8")
    assert read_phone_list(file) == ["202-555-0143", "(312) 555-0199"]


def test_write_results(tmp_path: Path) -> None:
    file = tmp_path / "out.csv"
    write_results(file, [("555-123-0000", reject(Reason.FAKE_PATTERN))])
    with file.open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["phone"] == "555-123-0000"
    assert rows[0]["valid"] == "False"
    assert rows[0]["reason"] == "fake-pattern"
    assert rows[0]["countryCode"] == ""
