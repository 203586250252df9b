"""
Value objects returned by stores.
"""

from pydantic import BaseModel, ConfigDict, Field


class ShortLinkRecord(BaseModel):
    """
    Immutable (id, url) pair as seen by the service.
    
    Built from ORM rows with from_attributes=True, so the service never
    holds a live SQLAlchemy object outside its session.
    """
    id: str = Field(..., description="6 character alphanumeric short id")
    url: str = Field(..., description="Original url, exactly as submitted")

    model_config = ConfigDict(frozen=True, from_attributes=True)
