from typing import List

from fastapi import APIRouter, Depends

from record_catalog.domain.schemas import Track
from record_catalog.services.track_service import TrackIngestor, get_track_ingestor

router = APIRouter()

@router.get("", response_model=List[Track])
def list_tracks(ingestor: TrackIngestor = Depends(get_track_ingestor)):
    # 매 요청마다 CSV를 새로 읽음
    return ingestor.load()
