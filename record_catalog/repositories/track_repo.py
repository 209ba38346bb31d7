# record_catalog/repositories/track_repo.py
import csv
from pathlib import Path
from typing import List

from record_catalog.domain.errors import IngestFailure


class CsvTrackSource:
    """Comma-delimited track file without a header row, read on every call."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read_rows(self) -> List[List[str]]:
        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                # 빈 줄은 csv.reader가 []로 돌려줌 → 건너뜀
                return [row for row in csv.reader(f) if row]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise IngestFailure(str(self.path), e) from e
