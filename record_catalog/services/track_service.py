import logging
from typing import List, Sequence

from record_catalog.core.config import settings
from record_catalog.domain.errors import IngestFailure
from record_catalog.domain.schemas import Track
from record_catalog.repositories.track_repo import CsvTrackSource

logger = logging.getLogger(__name__)


class TrackIngestor:
    def __init__(self, source: CsvTrackSource):
        self.source = source

    def load(self) -> List[Track]:
        """Read the source fresh and convert every row."""
        tracks = self.ingest(self.source.read_rows())
        logger.debug("Loaded %d track(s) from %s", len(tracks), self.source.path)
        return tracks

    def ingest(self, rows: Sequence[Sequence[str]]) -> List[Track]:
        tracks: List[Track] = []
        for i, row in enumerate(rows):
            if len(row) < 3:
                raise IngestFailure(
                    str(self.source.path),
                    f"row {i} has {len(row)} column(s), expected at least 3",
                )
            tracks.append(Track(track_id=row[0], album_id=row[1], title=row[2]))
        return tracks


def get_track_ingestor() -> TrackIngestor:
    return TrackIngestor(CsvTrackSource(settings.TRACKS_CSV_PATH))
