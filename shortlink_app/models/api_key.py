from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from shortlink_app.database.connection import Base


class APIKey(Base):
    """
    Provisioned credential authorizing use of the API.

    The key string is indexed but NOT unique: validation tolerates
    duplicates and uses the first match.
    """
    __tablename__ = "api_keys"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    api_key = Column(String(128), nullable=False, index=True)
    owner_email = Column(String(255), nullable=False)
    created = Column(DateTime(timezone=True), server_default=func.now())
