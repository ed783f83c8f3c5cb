"""
Pydantic 模式定义
用于 API 响应序列化
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


# ============== 酒店 Schemas ==============

class HotelResponse(BaseModel):
    id: int
    name: str
    address: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


def serialize_hotel(hotel) -> Dict[str, Any]:
    """ORM 对象 -> JSON 可序列化字典"""
    return HotelResponse.model_validate(hotel).model_dump(mode="json")
