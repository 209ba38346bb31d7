import os

# MySQL 없이 import 가능하도록 (엔진은 실제 연결 전까지 접속하지 않음)
os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from sqlalchemy.orm import sessionmaker

from record_catalog.core.counter import RequestCounter, get_counter
from record_catalog.core.db import build_engine
from record_catalog.domain.models import AlbumRecord, Base
from record_catalog.repositories.catalog_store import SEED_ALBUMS, CatalogStore, get_catalog_store
from record_catalog.repositories.track_repo import CsvTrackSource
from record_catalog.services.search_service import SearchGateway, get_search_gateway
from record_catalog.services.track_service import TrackIngestor, get_track_ingestor


@pytest.fixture
def album_db(tmp_path):
    """Session factory over a seeded sqlite `album` table."""
    engine = build_engine(f"sqlite:///{(tmp_path / 'recordings.db').as_posix()}")
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    with factory() as db:
        db.add_all([
            AlbumRecord(title="Blue Train", artist="John Coltrane", price=56.99),
            AlbumRecord(title="Jeru", artist="Gerry Mulligan", price=17.99),
            AlbumRecord(title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
        ])
        db.commit()
    yield factory
    engine.dispose()


@pytest.fixture
def gateway(album_db):
    gw = SearchGateway(album_db, timeout=5)
    yield gw
    gw.executor.shutdown(wait=True)


@pytest.fixture
def tracks_csv(tmp_path):
    path = tmp_path / "tracks.csv"
    path.write_text("1,23,test\n2,23,test\n3,23,test\n", encoding="utf-8")
    return path


@pytest.fixture
def store():
    return CatalogStore(SEED_ALBUMS)


@pytest.fixture
def counter():
    return RequestCounter()


@pytest.fixture
def client(store, counter, gateway, tracks_csv):
    from fastapi.testclient import TestClient
    from record_catalog.main import app

    app.dependency_overrides[get_catalog_store] = lambda: store
    app.dependency_overrides[get_counter] = lambda: counter
    app.dependency_overrides[get_search_gateway] = lambda: gateway
    app.dependency_overrides[get_track_ingestor] = lambda: TrackIngestor(CsvTrackSource(tracks_csv))
    yield TestClient(app)
    app.dependency_overrides.clear()
