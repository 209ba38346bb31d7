# record_catalog/repositories/album_repo.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session

from record_catalog.domain.models import AlbumRecord

class AlbumRepository:
    def __init__(self, db: Session):
        self.db = db

    def search_by_artist(self, fragment: str) -> List[AlbumRecord]:
        # % / _ 는 이스케이프 → 리터럴 부분 문자열 매칭, 빈 문자열이면 전체
        stmt = (
            select(AlbumRecord)
            .where(AlbumRecord.artist.contains(fragment, autoescape=True))
            .order_by(AlbumRecord.id)
        )
        return list(self.db.execute(stmt).scalars().all())
