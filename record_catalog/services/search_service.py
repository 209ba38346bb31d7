from __future__ import annotations

import logging
from functools import lru_cache
from concurrent.futures import Executor, ThreadPoolExecutor, TimeoutError as FutureTimeout
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from record_catalog.core.config import settings
from record_catalog.core.db import SessionLocal
from record_catalog.domain.errors import GatewayFailure
from record_catalog.domain.schemas import SearchResult
from record_catalog.mappers.album_mapper import SearchResultMapper
from record_catalog.repositories.album_repo import AlbumRepository

logger = logging.getLogger(__name__)


class SearchGateway:
    """Artist search against the relational `album` table.

    Each query runs on a worker pool with its own session, so the caller can
    give up after `timeout` seconds without sharing a half-used session. A slow
    or unreachable store therefore only occupies search workers.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        executor: Optional[Executor] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.session_factory = session_factory
        self.executor = executor or ThreadPoolExecutor(
            max_workers=settings.SEARCH_MAX_WORKERS, thread_name_prefix="album-search"
        )
        self.timeout = timeout

    def search_by_artist(self, fragment: str, timeout: Optional[float] = None) -> List[SearchResult]:
        wait = timeout if timeout is not None else self.timeout
        future = self.executor.submit(self._query, fragment)
        try:
            results = future.result(timeout=wait)
        except FutureTimeout as e:
            future.cancel()
            raise GatewayFailure(fragment, TimeoutError(f"no answer within {wait}s")) from e
        except (SQLAlchemyError, OSError) as e:
            raise GatewayFailure(fragment, e) from e

        logger.debug("Albums found for %r: %d", fragment, len(results))
        return results

    def _query(self, fragment: str) -> List[SearchResult]:
        with self.session_factory() as db:
            records = AlbumRepository(db).search_by_artist(fragment)
            return SearchResultMapper.to_list(records)


@lru_cache(maxsize=1)
def get_search_gateway() -> SearchGateway:
    return SearchGateway(SessionLocal, timeout=settings.SEARCH_TIMEOUT_SEC)
