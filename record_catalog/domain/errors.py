class CatalogError(Exception):
    """Base class for failures raised by catalog components."""


class AlbumNotFound(CatalogError):
    def __init__(self, album_id: str):
        super().__init__(f"album {album_id!r} not found")
        self.album_id = album_id


# 요청한 fragment와 원인을 같이 보관
class GatewayFailure(CatalogError):
    def __init__(self, fragment: str, cause: BaseException):
        super().__init__(f"search by artist {fragment!r} failed: {cause!r}")
        self.fragment = fragment
        self.cause = cause


class IngestFailure(CatalogError):
    def __init__(self, source: str, cause: BaseException | str):
        super().__init__(f"unable to ingest tracks from {source}: {cause}")
        self.source = source
        self.cause = cause
