from typing import List

from fastapi import APIRouter, Depends, Path

from record_catalog.domain.schemas import SearchResult
from record_catalog.services.search_service import SearchGateway, get_search_gateway

router = APIRouter()

# 와일드카드(% _)는 리터럴로 취급됨
@router.get("/{name}", response_model=List[SearchResult], summary="아티스트 이름으로 앨범 검색(DB)")
def albums_by_artist(name: str = Path(...), gateway: SearchGateway = Depends(get_search_gateway)):
    return gateway.search_by_artist(name)
