"""
酒店 ORM 模型
"""
from datetime import datetime

from sqlalchemy import Column, Integer, String, DateTime

from app.database import Base


class Hotel(Base):
    """酒店"""
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Hotel id={self.id} name={self.name!r}>"
