from concurrent.futures import ThreadPoolExecutor

import pytest

from record_catalog.domain.errors import AlbumNotFound
from record_catalog.domain.schemas import Album
from record_catalog.services.album_service import CatalogService


def test_list_all_returns_seed_in_order(store):
    assert [a.id for a in store.list_all()] == ["1", "2", "3"]


def test_find_by_id(store):
    album = store.find_by_id("2")
    assert album.title == "Jeru"
    assert album.artist == "Gerry Mulligan"
    assert store.find_by_id("99") is None


def test_find_by_id_returns_first_of_duplicates(store):
    store.insert(Album(id="2", title="Later", artist="Someone", price=1.0))
    assert store.find_by_id("2").title == "Jeru"


def test_insert_appends_and_keeps_prior_order(store):
    before = store.list_all()
    new = Album(id="4", title="Kind of Blue", artist="Miles Davis", price=29.99)

    store.insert(new)
    after = store.list_all()

    assert after[:-1] == before
    assert after[-1] == new


def test_list_all_is_a_snapshot(store):
    snapshot = store.list_all()
    store.insert(Album(id="4", title="x", artist="y", price=1.0))
    assert len(snapshot) == 3


def test_concurrent_inserts_are_all_kept(store):
    albums = [Album(id=str(i), title=f"t{i}", artist="a", price=1.0) for i in range(100, 600)]
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(store.insert, albums))
        list(pool.map(lambda _: store.list_all(), range(200)))

    ids = [a.id for a in store.list_all()]
    assert len(ids) == 503
    assert set(ids[3:]) == {a.id for a in albums}


def test_catalog_service_raises_not_found(store):
    svc = CatalogService(store)
    assert svc.get_album("1").title == "Blue Train"
    with pytest.raises(AlbumNotFound) as exc:
        svc.get_album("99")
    assert exc.value.album_id == "99"
