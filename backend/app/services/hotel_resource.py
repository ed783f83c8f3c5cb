"""
酒店资源控制器
list / create / show / update / destroy 五个处理器

记录存储和校验器通过构造函数注入，不依赖全局注册表。
每个处理器返回 (status_code, {message, data})，由路由层包装成 JSONResponse。
未找到记录时返回 200 + data={}，而不是 404。
"""
import logging
from typing import Any, Dict, Mapping, NamedTuple, Union

from app.models.schemas import serialize_hotel
from app.services.hotel_store import HotelStore
from app.services.validator import Validator

logger = logging.getLogger(__name__)

HOTEL_RULES = {
    "name": "required|string|max:255",
    "address": "required|string|max:255",
}

# 只允许这些字段写入记录
FILLABLE = ("name", "address")


class ResourceResponse(NamedTuple):
    status_code: int
    body: Dict[str, Any]


class HotelResource:
    """Hotel 的资源控制器"""

    def __init__(self, store: HotelStore, validator: Validator):
        self.records = store
        self.validator = validator

    def _validation_error(self, fields: Mapping[str, Any]):
        validation = self.validator.validate(fields, HOTEL_RULES)
        if not validation.fails():
            return None
        message = validation.messages()[0]["message"]
        logger.info(f"Hotel payload rejected: {message}")
        return ResourceResponse(400, {"message": message})

    def index(self) -> ResourceResponse:
        """获取所有酒店"""
        hotels = self.records.find_all()
        return ResourceResponse(200, {
            "message": "Hotel has been listed successfully",
            "data": [serialize_hotel(h) for h in hotels],
        })

    def store(self, fields: Mapping[str, Any]) -> ResourceResponse:
        """创建酒店"""
        rejected = self._validation_error(fields)
        if rejected:
            return rejected

        hotel = self.records.create({key: fields[key] for key in FILLABLE})
        logger.info(f"Hotel {hotel.id} created")
        return ResourceResponse(201, {
            "message": "Hotel has been created successfully",
            "data": serialize_hotel(hotel),
        })

    def show(self, hotel_id: Union[int, str]) -> ResourceResponse:
        """获取单个酒店"""
        hotel = self.records.find_by_id(hotel_id)
        if not hotel:
            logger.info(f"Hotel {hotel_id} not found")
            return ResourceResponse(200, {
                "message": f"Hotel with id {hotel_id} is not found",
                "data": {},
            })

        return ResourceResponse(200, {
            "message": "Hotel been fetched successfully.",
            "data": serialize_hotel(hotel),
        })

    def update(self, hotel_id: Union[int, str], fields: Mapping[str, Any]) -> ResourceResponse:
        """更新酒店 name / address（先校验，再查找）"""
        rejected = self._validation_error(fields)
        if rejected:
            return rejected

        hotel = self.records.find_by_id(hotel_id)
        if not hotel:
            logger.info(f"Hotel {hotel_id} not found for update")
            return ResourceResponse(200, {
                "message": f"Hotel with id {hotel_id} is not found or has not been created",
                "data": {},
            })

        hotel.name = fields["name"]
        hotel.address = fields["address"]
        hotel = self.records.save(hotel)
        logger.info(f"Hotel {hotel.id} updated")
        return ResourceResponse(200, {
            "message": "Hotel has been fetched successfully.",
            "data": serialize_hotel(hotel),
        })

    def destroy(self, hotel_id: Union[int, str]) -> ResourceResponse:
        """删除酒店，返回删除前的数据"""
        hotel = self.records.find_by_id(hotel_id)
        if not hotel:
            logger.info(f"Hotel {hotel_id} not found for delete")
            return ResourceResponse(200, {
                "message": f"Hotel with id {hotel_id} is not found",
                "data": {},
            })

        snapshot = serialize_hotel(hotel)
        self.records.delete(hotel)
        logger.info(f"Hotel {hotel_id} deleted")
        return ResourceResponse(200, {
            "message": f"Hotel with id {hotel_id} has been deleted successfully.",
            "data": snapshot,
        })
