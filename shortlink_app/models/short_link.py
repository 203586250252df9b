import hashlib

from sqlalchemy import Column, String, Text
from shortlink_app.database.connection import Base


def url_digest(url: str) -> str:
    """SHA-256 hex digest of ``url``, the fixed-width key urls are deduplicated on."""
    return hashlib.sha256(url.encode("utf-8")).hexdigest()


class ShortLink(Base):
    """
    Persisted (id, url) pairing.
    
    Rows are never updated or deleted once inserted.
    """
    __tablename__ = "urls"

    # Public short code and primary key
    id = Column(String(6), primary_key=True)
    # No length limit, so no index on the url itself
    url = Column(Text, nullable=False)
    # unique=True lets the database arbitrate two requests racing on the same url
    url_hash = Column(String(64), nullable=False, unique=True)

    @classmethod
    def for_url(cls, short_id: str, url: str) -> "ShortLink":
        return cls(id=short_id, url=url, url_hash=url_digest(url))
