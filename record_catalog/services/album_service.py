from typing import List

from record_catalog.domain.errors import AlbumNotFound
from record_catalog.domain.schemas import Album
from record_catalog.repositories.catalog_store import CatalogStore


class CatalogService:
    def __init__(self, store: CatalogStore):
        self.store = store

    def list_albums(self) -> List[Album]:
        return self.store.list_all()

    def get_album(self, album_id: str) -> Album:
        album = self.store.find_by_id(album_id)
        if album is None:
            raise AlbumNotFound(album_id)
        return album

    def add_album(self, album: Album) -> Album:
        # 중복 id 검사 없음 (조회는 먼저 들어온 것이 이김)
        return self.store.insert(album)
