from pydantic import BaseModel, ConfigDict, Field


# ------- 메모리 카탈로그 앨범 -------
# JSON 키는 기존 API 그대로 (id, Title, artist, price)
class Album(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = Field(alias="Title")
    artist: str
    price: float


# ------- DB 검색 결과 (id/price 타입이 Album과 다름) -------
class SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    title: str = Field(alias="Title")
    artist: str = Field(alias="Artist")
    price: float = Field(alias="Price")


# ------- CSV 트랙 -------
class Track(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    track_id: str = Field(alias="TrackId")
    album_id: str = Field(alias="AlbumId")
    title: str = Field(alias="Title")
