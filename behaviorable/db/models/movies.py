from sqlalchemy import Column, Date, DateTime, Index, Integer, Numeric, String

from .base import Base


class Movie(Base):
    __tablename__ = 'movies'
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    release_date = Column(Date, nullable=True)
    genre = Column(String(100), nullable=True)
    price = Column(Numeric(10, 2), nullable=True)
    # Behavior-managed columns
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=True)
    modified_at = Column(DateTime(timezone=True), nullable=True)
    slug = Column(String(255), nullable=True)

    __table_args__ = (
        Index('idx_movies_slug', 'slug'),
        Index('idx_movies_deleted_at', 'deleted_at'),
    )

    def __repr__(self):
        return f"<Movie id={self.id} slug={self.slug!r}>"
