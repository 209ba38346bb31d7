from record_catalog.domain.schemas import SearchResult

class SearchResultMapper:
    @staticmethod
    def to_list(records):
        result: list[SearchResult] = []
        for rec in records:
            result.append(
                SearchResult(
                    id=rec.id,
                    title=rec.title,
                    artist=rec.artist,
                    price=rec.price,
                )
            )
        return result
