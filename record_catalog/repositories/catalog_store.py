# record_catalog/repositories/catalog_store.py
import threading
from typing import Iterable, List, Optional

from record_catalog.domain.schemas import Album

SEED_ALBUMS = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)


class CatalogStore:
    """In-process album list. Ordered by insertion, ids are not deduplicated."""

    def __init__(self, seed: Iterable[Album] = ()):
        self._albums: List[Album] = list(seed)
        self._lock = threading.Lock()

    def list_all(self) -> List[Album]:
        with self._lock:
            return list(self._albums)

    def find_by_id(self, album_id: str) -> Optional[Album]:
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album
        return None

    def insert(self, album: Album) -> Album:
        with self._lock:
            self._albums.append(album)
        return album


catalog_store = CatalogStore(SEED_ALBUMS)


def get_catalog_store() -> CatalogStore:
    return catalog_store
