from typing import List

from fastapi import APIRouter, Body, Depends, Path, status

from record_catalog.domain.schemas import Album
from record_catalog.repositories.catalog_store import CatalogStore, get_catalog_store
from record_catalog.services.album_service import CatalogService

router = APIRouter()

@router.get("", response_model=List[Album])
def list_albums(store: CatalogStore = Depends(get_catalog_store)):
    return CatalogService(store).list_albums()

@router.get("/{album_id}", response_model=Album)
def get_album(album_id: str = Path(...), store: CatalogStore = Depends(get_catalog_store)):
    return CatalogService(store).get_album(album_id)

@router.post("", response_model=Album, status_code=status.HTTP_201_CREATED)
def create_album(album: Album = Body(...), store: CatalogStore = Depends(get_catalog_store)):
    return CatalogService(store).add_album(album)
