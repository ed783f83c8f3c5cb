"""
酒店记录存储 — Hotel 的 find/list/create/save/delete
"""
import logging
import re
from typing import Any, List, Mapping, Optional, Protocol, Union

from sqlalchemy.orm import Session

from app.models.hotel import Hotel

logger = logging.getLogger(__name__)


class HotelStore(Protocol):
    """记录存储接口，HotelResource 只依赖这组方法"""

    def find_all(self) -> List[Hotel]: ...

    def find_by_id(self, hotel_id: Union[int, str]) -> Optional[Hotel]: ...

    def create(self, fields: Mapping[str, Any]) -> Hotel: ...

    def save(self, hotel: Hotel) -> Hotel: ...

    def delete(self, hotel: Hotel) -> None: ...


_ID_PATTERN = re.compile(r"-?[0-9]+")

# SQLite INTEGER 为有符号 64 位
_MIN_ID = -2 ** 63
_MAX_ID = 2 ** 63 - 1


def _coerce_id(hotel_id: Union[int, str]) -> Optional[int]:
    """路径 id -> 主键；非十进制整数或超出 64 位范围返回 None"""
    if isinstance(hotel_id, bool):
        return None
    if isinstance(hotel_id, int):
        pk = hotel_id
    elif isinstance(hotel_id, str) and _ID_PATTERN.fullmatch(hotel_id):
        pk = int(hotel_id)
    else:
        return None
    if not _MIN_ID <= pk <= _MAX_ID:
        return None
    return pk


class SqlAlchemyHotelStore:
    """基于 SQLAlchemy Session 的记录存储"""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Hotel]:
        return self.db.query(Hotel).order_by(Hotel.id).all()

    def find_by_id(self, hotel_id: Union[int, str]) -> Optional[Hotel]:
        pk = _coerce_id(hotel_id)
        if pk is None:
            logger.debug(f"Hotel id {hotel_id!r} is not an integer")
            return None
        return self.db.query(Hotel).filter(Hotel.id == pk).first()

    def create(self, fields: Mapping[str, Any]) -> Hotel:
        hotel = Hotel(**fields)
        self.db.add(hotel)
        self.db.commit()
        self.db.refresh(hotel)
        logger.debug(f"Inserted hotel {hotel.id}")
        return hotel

    def save(self, hotel: Hotel) -> Hotel:
        self.db.add(hotel)
        self.db.commit()
        self.db.refresh(hotel)
        logger.debug(f"Saved hotel {hotel.id}")
        return hotel

    def delete(self, hotel: Hotel) -> None:
        hotel_id = hotel.id
        self.db.delete(hotel)
        self.db.commit()
        logger.debug(f"Deleted hotel {hotel_id}")
