from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from record_catalog.core.config import settings


def build_engine(url: str) -> Engine:
    connect_args = {}
    backend = make_url(url).get_backend_name()
    if backend == "mysql":
        connect_args = {
            "connect_timeout": settings.DB_CONNECT_TIMEOUT_SEC,
            "read_timeout": settings.DB_READ_TIMEOUT_SEC,
        }
    elif backend == "sqlite":
        # 검색 워커 스레드에서 커넥션 공유
        connect_args = {"check_same_thread": False}
    # 끊긴 커넥션은 체크아웃 시점에 교체
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
