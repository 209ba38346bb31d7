# record_catalog/domain/models.py
from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

Base = declarative_base()


class AlbumRecord(Base):
    """Row of the relational `album` table searched by artist."""

    __tablename__ = "album"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(128), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)
    # DECIMAL(5,2) 그대로 두고 float로만 읽음
    price: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=False)
