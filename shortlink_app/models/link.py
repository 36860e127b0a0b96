from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shortlink_app.database.connection import Base


class Link(Base):
    """
    Mapping from a short path to its destination URL.
    """
    __tablename__ = "links"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Note: unique=True automatically creates an index in SQLAlchemy
    # Nullable=True allows two-step creation: first get ID, then generate path
    path = Column(String(64), unique=True, nullable=True, index=True)
    url = Column(String, nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now())
